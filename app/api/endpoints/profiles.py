from fastapi import APIRouter
from pydantic import BaseModel, Field

from app.models.profile import ProfileAssignmentResult, ProfileDescriptor, Reveal
from app.models.quiz import UserAnswer
from app.models.signals import Signal
from app.services.profile import PROFILE_ORDER, PROFILES, assign_user_profile
from app.services.reveals import get_reveal_for_domain

router = APIRouter(prefix="/api", tags=["profiles"])


class AssignProfileRequest(BaseModel):
    answers: list[UserAnswer] = Field(default_factory=list)


class RevealRequest(BaseModel):
    domain: str | None = None
    signals: list[Signal] = Field(default_factory=list)


@router.get("/profiles", response_model=list[ProfileDescriptor])
async def list_profiles() -> list[ProfileDescriptor]:
    """All profiles in tie-break order."""
    return [PROFILES[profile] for profile in PROFILE_ORDER]


@router.post("/profile", response_model=ProfileAssignmentResult)
async def assign_profile(payload: AssignProfileRequest) -> ProfileAssignmentResult:
    return assign_user_profile(payload.answers)


@router.post("/reveal", response_model=Reveal)
async def get_reveal(payload: RevealRequest) -> Reveal:
    return get_reveal_for_domain(payload.domain, payload.signals)
