from enum import Enum


class Signal(str, Enum):
    """Behavioral tags attached to answer options."""

    TRUST = "Trust"
    ADOPTION = "Adoption"
    EFFICIENCY = "Efficiency"
    CONTEXT_AWARENESS = "ContextAwareness"
    HUMAN_BEHAVIOR = "HumanBehavior"
    SYSTEMS_THINKING = "SystemsThinking"


class Profile(str, Enum):
    """
    AI thinking profiles.

    Member order is the tie-break order used by profile assignment.
    """

    SYSTEMS_THINKER = "Systems Thinker"
    ADOPTION_REALIST = "Adoption Realist"
    TRUST_FOCUSED_OPERATOR = "Trust-Focused Operator"
    HUMAN_CENTERED_TECHNOLOGIST = "Human-Centered Technologist"
    WORKFLOW_OPTIMIZER = "Workflow Optimizer"
    STRATEGIC_OBSERVER = "Strategic Observer"
