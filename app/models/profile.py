from pydantic import BaseModel, Field

from app.models.signals import Profile, Signal

SignalScoreMap = dict[Signal, int]


class ProfileDescriptor(BaseModel):
    name: Profile
    description: str
    signals: tuple[Signal, Signal]


class ProfileAssignmentResult(BaseModel):
    profile: Profile
    signalScores: SignalScoreMap = Field(default_factory=dict)


class Reveal(BaseModel):
    """Short three-part explanation shown after an answer is picked."""

    encouragement: str
    rationale: str
    context: str
