import secrets

from cachetools import TTLCache
from loguru import logger

from app.core.config import settings
from app.core.exceptions import SessionNotFoundError
from app.core.security import redact_session_id
from app.models.quiz import QuizSession


class SessionStore:
    """
    In-process store for quiz sessions.

    Sessions live only as long as a quiz run needs them; entries expire after
    SESSION_TTL_SECONDS and nothing is written to disk.
    """

    def __init__(self, maxsize: int = settings.SESSION_CACHE_MAX_SIZE, ttl: int = settings.SESSION_TTL_SECONDS):
        self._sessions: TTLCache = TTLCache(maxsize=maxsize, ttl=ttl)

    @staticmethod
    def new_session_id() -> str:
        return secrets.token_urlsafe(16)

    def get(self, session_id: str) -> QuizSession:
        session = self._sessions.get(session_id)
        if session is None:
            raise SessionNotFoundError(session_id)
        return session

    def save(self, session: QuizSession) -> None:
        self._sessions[session.sessionId] = session
        logger.debug(f"[{redact_session_id(session.sessionId)}] Session stored")

    def delete(self, session_id: str) -> None:
        self._sessions.pop(session_id, None)

    def clear(self) -> None:
        self._sessions.clear()

    def __len__(self) -> int:
        return len(self._sessions)


session_store = SessionStore()
