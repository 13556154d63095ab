from typing import Final

from app.models.profile import ProfileDescriptor
from app.models.signals import Profile, Signal

# Declaration order is the tie-break order: when cluster scores are equal
# the profile listed first wins.
PROFILE_ORDER: Final[tuple[Profile, ...]] = (
    Profile.SYSTEMS_THINKER,
    Profile.ADOPTION_REALIST,
    Profile.TRUST_FOCUSED_OPERATOR,
    Profile.HUMAN_CENTERED_TECHNOLOGIST,
    Profile.WORKFLOW_OPTIMIZER,
    Profile.STRATEGIC_OBSERVER,
)

PROFILES: Final[dict[Profile, ProfileDescriptor]] = {
    Profile.SYSTEMS_THINKER: ProfileDescriptor(
        name=Profile.SYSTEMS_THINKER,
        description="Understands how AI interacts with workflows, incentives, and context.",
        signals=(Signal.SYSTEMS_THINKING, Signal.CONTEXT_AWARENESS),
    ),
    Profile.ADOPTION_REALIST: ProfileDescriptor(
        name=Profile.ADOPTION_REALIST,
        description="Focuses on whether people will actually use AI in practice.",
        signals=(Signal.ADOPTION, Signal.HUMAN_BEHAVIOR),
    ),
    Profile.TRUST_FOCUSED_OPERATOR: ProfileDescriptor(
        name=Profile.TRUST_FOCUSED_OPERATOR,
        description="Prioritizes reliability, accountability, and confidence in outputs.",
        signals=(Signal.TRUST, Signal.EFFICIENCY),
    ),
    Profile.HUMAN_CENTERED_TECHNOLOGIST: ProfileDescriptor(
        name=Profile.HUMAN_CENTERED_TECHNOLOGIST,
        description="Evaluates AI through behavior, communication, and user comfort.",
        signals=(Signal.HUMAN_BEHAVIOR, Signal.CONTEXT_AWARENESS),
    ),
    Profile.WORKFLOW_OPTIMIZER: ProfileDescriptor(
        name=Profile.WORKFLOW_OPTIMIZER,
        description="Looks for efficiency gains and tangible value from AI integration.",
        signals=(Signal.EFFICIENCY, Signal.SYSTEMS_THINKING),
    ),
    Profile.STRATEGIC_OBSERVER: ProfileDescriptor(
        name=Profile.STRATEGIC_OBSERVER,
        description="Considers long-term organizational and decision impact of AI.",
        signals=(Signal.SYSTEMS_THINKING, Signal.TRUST),
    ),
}
