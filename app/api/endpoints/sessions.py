from typing import NoReturn

from fastapi import APIRouter, BackgroundTasks, HTTPException, Request
from loguru import logger
from pydantic import BaseModel, Field

from app.core.exceptions import (
    InvalidAnswerError,
    QuestionGenerationError,
    QuizError,
    SessionNotFoundError,
    SessionStateError,
)
from app.core.security import redact_session_id
from app.models.profile import Reveal
from app.models.quiz import Difficulty, QuizSession, UserAnswer
from app.services.quiz_service import quiz_service
from app.services.sheets import sheets_client

router = APIRouter(prefix="/api", tags=["sessions"])


class StartSessionRequest(BaseModel):
    name: str | None = Field(default=None, description="Name printed on the certificate")
    email: str | None = None
    difficulty: Difficulty


class AnswerRequest(BaseModel):
    questionId: int
    selectedOptionId: str


class AnswerResponse(BaseModel):
    answer: UserAnswer
    reveal: Reveal
    remaining: int


class ShareResponse(BaseModel):
    shareUrl: str
    session: QuizSession


class SaveSessionResponse(BaseModel):
    success: bool
    sessionId: str


def _raise_http(exc: QuizError, session_id: str) -> NoReturn:
    """Translate quiz domain errors to HTTP errors."""
    if isinstance(exc, SessionNotFoundError):
        raise HTTPException(status_code=404, detail="Session not found.") from exc
    if isinstance(exc, InvalidAnswerError):
        raise HTTPException(status_code=400, detail=str(exc)) from exc
    if isinstance(exc, SessionStateError):
        raise HTTPException(status_code=409, detail=str(exc)) from exc
    logger.error(f"[{redact_session_id(session_id)}] Quiz error: {exc}")
    raise HTTPException(status_code=500, detail=str(exc)) from exc


def _client_ip(request: Request) -> str | None:
    forwarded = request.headers.get("x-forwarded-for")
    if forwarded:
        return forwarded.split(",")[0].strip()
    return request.client.host if request.client else None


@router.post("/save-session", response_model=SaveSessionResponse)
async def save_session(session: QuizSession) -> SaveSessionResponse:
    """Relay a browser-held session to the spreadsheet. Webhook failures are logged, not surfaced."""
    try:
        await sheets_client.persist(session)
    except Exception as e:
        logger.exception(f"Error saving session: {e}")
        raise HTTPException(status_code=500, detail="Failed to save session")
    return SaveSessionResponse(success=True, sessionId=session.sessionId)


@router.post("/sessions", response_model=QuizSession, status_code=201)
async def start_session(payload: StartSessionRequest) -> QuizSession:
    try:
        return await quiz_service.start(payload.name, payload.email, payload.difficulty)
    except QuestionGenerationError as e:
        logger.error(f"Error generating questions: {e}")
        raise HTTPException(status_code=500, detail="Failed to generate questions")


@router.get("/sessions/{session_id}", response_model=QuizSession)
async def get_session(session_id: str) -> QuizSession:
    try:
        return quiz_service.get(session_id)
    except QuizError as e:
        _raise_http(e, session_id)


@router.post("/sessions/{session_id}/answers", response_model=AnswerResponse)
async def answer_question(session_id: str, payload: AnswerRequest) -> AnswerResponse:
    try:
        answer, reveal = quiz_service.answer(session_id, payload.questionId, payload.selectedOptionId)
        remaining = len(quiz_service.get(session_id).unanswered_question_ids)
    except QuizError as e:
        _raise_http(e, session_id)
    return AnswerResponse(answer=answer, reveal=reveal, remaining=remaining)


@router.post("/sessions/{session_id}/complete", response_model=QuizSession)
async def complete_session(session_id: str, request: Request, background_tasks: BackgroundTasks) -> QuizSession:
    try:
        session = await quiz_service.complete(session_id, _client_ip(request))
    except QuizError as e:
        _raise_http(e, session_id)
    background_tasks.add_task(sheets_client.persist, session.model_copy(deep=True))
    return session


@router.post("/sessions/{session_id}/linkedin", response_model=ShareResponse)
async def share_on_linkedin(session_id: str, background_tasks: BackgroundTasks) -> ShareResponse:
    try:
        session, share_url = quiz_service.mark_linkedin_shared(session_id)
    except QuizError as e:
        _raise_http(e, session_id)
    background_tasks.add_task(sheets_client.persist, session.model_copy(deep=True))
    return ShareResponse(shareUrl=share_url, session=session)
