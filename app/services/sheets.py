from typing import Any

import httpx
from loguru import logger

from app.core.base_client import BaseClient
from app.core.config import settings
from app.core.security import redact_session_id
from app.models.quiz import Question, QuizSession, UserAnswer
from app.services.reveals import get_reveal_for_domain


def build_questions_and_options(questions: list[Question]) -> str:
    blocks = []
    for i, question in enumerate(questions):
        options = "\n".join(f"  {option.id.upper()}) {option.text}" for option in question.options)
        blocks.append(f"Q{i + 1} [{question.domain}]: {question.scenario}\n{options}")
    return "\n\n".join(blocks)


def build_answers_with_reveals(questions: list[Question], answers: list[UserAnswer]) -> str:
    questions_by_id = {q.id: q for q in questions}
    blocks = []
    for i, answer in enumerate(answers):
        question = questions_by_id.get(answer.questionId)
        if not question:
            blocks.append(f"Q{i + 1}: No data")
            continue

        option = question.get_option(answer.selectedOptionId)
        option_text = option.text if option else answer.selectedOptionId
        reveal_text = ""
        if option:
            reveal = get_reveal_for_domain(question.domain, option.signals)
            reveal_text = f"{reveal.encouragement} — {reveal.rationale} — {reveal.context}"

        blocks.append(f'Q{i + 1} [{question.domain}]:\n  Answer: "{option_text}"\n  Reveal: {reveal_text}')
    return "\n\n".join(blocks)


def build_payload(session: QuizSession) -> dict[str, Any]:
    """Flatten a session into the one-row shape the spreadsheet script expects."""
    return {
        "sessionId": session.sessionId,
        "name": session.name or "",
        "email": session.email or "",
        "difficulty": session.difficulty.value,
        "aiProfile": session.aiProfile.value if session.aiProfile else "",
        "certificateId": session.certificateId or "",
        "geography": session.geography.display if session.geography else "",
        "startedAt": session.createdAt.isoformat() if session.createdAt else "",
        "completedAt": session.completedAt.isoformat() if session.completedAt else "",
        "linkedInClicked": "Yes" if session.linkedInClicked else "No",
        "questionsAndOptions": build_questions_and_options(session.questions),
        "answersAndReveals": build_answers_with_reveals(session.questions, session.answers),
    }


class SheetsWebhookClient(BaseClient):
    """
    Relays finished sessions to a Google Sheets Apps Script web app.

    The script upserts by session id, so posting the same session again
    updates its row.
    """

    def __init__(
        self,
        webhook_url: str | None = settings.GOOGLE_SHEETS_WEBHOOK_URL,
        timeout: float = settings.WEBHOOK_TIMEOUT_SECONDS,
        max_retries: int = settings.WEBHOOK_MAX_RETRIES,
    ):
        super().__init__(timeout=timeout, max_retries=max_retries, headers={"Content-Type": "application/json"})
        self.webhook_url = webhook_url

    async def persist(self, session: QuizSession) -> bool:
        """Post the session. Never raises: failures are logged and reported as False."""
        if not self.webhook_url:
            logger.warning("GOOGLE_SHEETS_WEBHOOK_URL not set. Session not saved to Sheets.")
            return True

        sid = redact_session_id(session.sessionId)
        try:
            await self.post(self.webhook_url, json=build_payload(session))
        except httpx.HTTPStatusError as e:
            logger.error(f"[{sid}] Google Sheets webhook error: {e.response.status_code} {e.response.text}")
            return False
        except Exception as e:
            logger.error(f"[{sid}] Error saving session: {e}")
            return False

        logger.info(f"[{sid}] Session saved to Sheets")
        return True


sheets_client = SheetsWebhookClient()
