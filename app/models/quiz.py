from datetime import datetime, timezone
from enum import Enum

from pydantic import BaseModel, ConfigDict, Field

from app.models.signals import Profile, Signal


class Difficulty(str, Enum):
    EASY = "easy"
    HARD = "hard"


class QuestionOption(BaseModel):
    id: str  # "a" .. "d"
    text: str
    signals: list[Signal] = Field(default_factory=list)


class Question(BaseModel):
    id: int
    domain: str
    difficulty: Difficulty
    scenario: str
    options: list[QuestionOption]

    def get_option(self, option_id: str) -> QuestionOption | None:
        return next((o for o in self.options if o.id == option_id), None)


class UserAnswer(BaseModel):
    """One answer per question. Signals are copied from the chosen option."""

    model_config = ConfigDict(frozen=True)

    questionId: int
    selectedOptionId: str
    signals: list[Signal] = Field(default_factory=list)


class Geography(BaseModel):
    city: str | None = None
    country: str | None = None

    @property
    def display(self) -> str:
        """'City, Country' with missing parts dropped."""
        return ", ".join(part for part in (self.city, self.country) if part)


class QuizSession(BaseModel):
    """
    A single user's run through the quiz.

    Field names follow the JSON shape exchanged with the browser and the
    spreadsheet webhook.
    """

    sessionId: str
    name: str | None = None
    email: str | None = None
    difficulty: Difficulty
    questions: list[Question] = Field(default_factory=list)
    answers: list[UserAnswer] = Field(default_factory=list)
    aiProfile: Profile | None = None
    certificateId: str | None = None
    geography: Geography | None = None
    createdAt: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
    completedAt: datetime | None = None
    linkedInClicked: bool = False

    def get_question(self, question_id: int) -> Question | None:
        return next((q for q in self.questions if q.id == question_id), None)

    @property
    def is_complete(self) -> bool:
        return self.aiProfile is not None

    @property
    def unanswered_question_ids(self) -> list[int]:
        answered = {a.questionId for a in self.answers}
        return [q.id for q in self.questions if q.id not in answered]
