class QuizError(Exception):
    """Base class for quiz domain errors."""


class QuestionGenerationError(QuizError):
    """The language model could not produce a usable question."""


class SessionNotFoundError(QuizError):
    pass


class InvalidAnswerError(QuizError):
    """The answer references a question or option that does not exist."""


class SessionStateError(QuizError):
    """The operation is not allowed in the session's current state."""
