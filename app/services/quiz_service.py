from datetime import datetime, timezone

from loguru import logger

from app.core.constants import DEFAULT_SESSION_NAME
from app.core.exceptions import InvalidAnswerError, SessionStateError
from app.core.security import redact_email, redact_session_id
from app.models.profile import Reveal
from app.models.quiz import Difficulty, QuizSession, UserAnswer
from app.services.certificate import linkedin_share_url, new_certificate_id
from app.services.geolocation import GeolocationClient, geolocation_client
from app.services.profile import assign_user_profile
from app.services.question_generator import QuestionGenerator, question_generator
from app.services.reveals import get_reveal_for_domain
from app.services.session_store import SessionStore, session_store


class QuizService:
    """
    Drives a quiz session: question fetch, answer collection, profile
    assignment and sharing.

    Persistence is left to the caller so that it can run in the background.
    """

    def __init__(
        self,
        store: SessionStore | None = None,
        generator: QuestionGenerator | None = None,
        geolocation: GeolocationClient | None = None,
    ):
        self.store = store if store is not None else session_store
        self.generator = generator if generator is not None else question_generator
        self.geolocation = geolocation if geolocation is not None else geolocation_client

    async def start(self, name: str | None, email: str | None, difficulty: Difficulty) -> QuizSession:
        questions = await self.generator.generate_all(difficulty)
        session = QuizSession(
            sessionId=self.store.new_session_id(),
            name=(name or "").strip() or DEFAULT_SESSION_NAME,
            email=(email or "").strip() or None,
            difficulty=difficulty,
            questions=questions,
        )
        self.store.save(session)
        logger.info(
            f"[{redact_session_id(session.sessionId)}] Session started "
            f"({difficulty.value}, {redact_email(session.email)})"
        )
        return session

    def get(self, session_id: str) -> QuizSession:
        return self.store.get(session_id)

    def answer(self, session_id: str, question_id: int, option_id: str) -> tuple[UserAnswer, Reveal]:
        session = self.store.get(session_id)
        if session.is_complete:
            raise SessionStateError("Session is already complete.")

        question = session.get_question(question_id)
        if not question:
            raise InvalidAnswerError(f"Unknown question: {question_id}")
        option = question.get_option(option_id)
        if not option:
            raise InvalidAnswerError(f"Unknown option '{option_id}' for question {question_id}")
        if question_id not in session.unanswered_question_ids:
            raise SessionStateError(f"Question {question_id} has already been answered.")

        answer = UserAnswer(questionId=question_id, selectedOptionId=option.id, signals=list(option.signals))
        session.answers.append(answer)
        self.store.save(session)
        return answer, get_reveal_for_domain(question.domain, option.signals)

    async def complete(self, session_id: str, client_ip: str | None = None) -> QuizSession:
        session = self.store.get(session_id)
        if session.is_complete:
            return session

        remaining = session.unanswered_question_ids
        if remaining:
            raise SessionStateError(f"{len(remaining)} question(s) still unanswered.")

        # Completion fields are set together, after the only await.
        geography = await self.geolocation.lookup(client_ip)
        if session.is_complete:
            return session

        result = assign_user_profile(session.answers)
        session.aiProfile = result.profile
        session.certificateId = new_certificate_id()
        session.geography = geography
        session.completedAt = datetime.now(timezone.utc)
        self.store.save(session)

        logger.info(f"[{redact_session_id(session_id)}] Session completed with profile {result.profile.value}")
        return session

    def mark_linkedin_shared(self, session_id: str) -> tuple[QuizSession, str]:
        session = self.store.get(session_id)
        if not session.is_complete:
            raise SessionStateError("Complete the quiz before sharing.")
        session.linkedInClicked = True
        self.store.save(session)
        return session, linkedin_share_url(session.aiProfile)


quiz_service = QuizService()
