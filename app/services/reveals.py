from collections.abc import Sequence
from typing import Final

from app.models.profile import Reveal
from app.models.signals import Signal

DEFAULT_REVEAL_KEY: Final[str] = "trustFocus"

# Generic reveals that work across most perspectives
GENERIC_REVEALS: Final[dict[str, Reveal]] = {
    "trustFocus": Reveal(
        encouragement="Great instinct! AI frameworks need people who focus on reliability and trust.",
        rationale="When tools get details wrong, confidence drops quickly in the real world.",
        context=(
            "In reality, adoption usually depends on trust, control, authenticity, "
            "and visible value working together."
        ),
    ),
    "adoptionFocus": Reveal(
        encouragement="Smart thinking! Adoption depends on real human behavior, not just features.",
        rationale="People decide whether to use AI based on friction, habit, and perceived value.",
        context="In reality, tools succeed when they fit naturally into workflows and social dynamics.",
    ),
    "efficiencyFocus": Reveal(
        encouragement="Solid perspective. Efficiency matters when it's measurable and real.",
        rationale="The best AI wins aren't always about speed—they're about the right kind of value.",
        context="In reality, organizations care about efficiency, but it's one factor among many.",
    ),
    "contextFocus": Reveal(
        encouragement="Thoughtful approach. Context shapes how AI is actually used.",
        rationale="The same tool works differently depending on incentives, culture, and constraints.",
        context="In reality, success requires understanding the specific conditions where people work.",
    ),
    "systemsFocus": Reveal(
        encouragement="Sharp thinking. Systems-level effects matter more than individual features.",
        rationale="Small changes in how AI is deployed can cascade through workflows and behaviors.",
        context="In reality, the biggest AI wins come from rethinking the whole system, not just automating tasks.",
    ),
    "humanFocus": Reveal(
        encouragement="Insightful choice. Human factors drive real outcomes.",
        rationale="Comfort, clarity, and control matter as much as capability.",
        context="In reality, people make or break AI adoption through how they interpret and act on outputs.",
    ),
}

SIGNAL_REVEAL_KEYS: Final[dict[Signal, str]] = {
    Signal.TRUST: "trustFocus",
    Signal.ADOPTION: "adoptionFocus",
    Signal.EFFICIENCY: "efficiencyFocus",
    Signal.CONTEXT_AWARENESS: "contextFocus",
    Signal.SYSTEMS_THINKING: "systemsFocus",
    Signal.HUMAN_BEHAVIOR: "humanFocus",
}


def get_reveal_key(selected_signals: Sequence[str]) -> str:
    """Only the first signal counts; anything else falls back to the trust reveal."""
    if not selected_signals:
        return DEFAULT_REVEAL_KEY
    return SIGNAL_REVEAL_KEYS.get(selected_signals[0], DEFAULT_REVEAL_KEY)


def get_reveal_for_domain(domain: str | None, selected_signals: Sequence[str]) -> Reveal:
    # Domain is accepted so per-domain variants can be added without touching callers.
    return GENERIC_REVEALS[get_reveal_key(selected_signals)]
