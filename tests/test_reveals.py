from __future__ import annotations

import pytest

from app.services.reveals import GENERIC_REVEALS, get_reveal_for_domain, get_reveal_key


def test_first_signal_decides_the_reveal():
    reveal = get_reveal_for_domain("Productivity", ["Efficiency", "Trust"])
    assert reveal == GENERIC_REVEALS["efficiencyFocus"]
    assert get_reveal_key(["Efficiency", "Trust"]) == "efficiencyFocus"


@pytest.mark.parametrize(
    "signal, key",
    [
        ("Trust", "trustFocus"),
        ("Adoption", "adoptionFocus"),
        ("Efficiency", "efficiencyFocus"),
        ("ContextAwareness", "contextFocus"),
        ("SystemsThinking", "systemsFocus"),
        ("HumanBehavior", "humanFocus"),
    ],
)
def test_each_signal_has_its_own_reveal(signal, key):
    assert get_reveal_for_domain(None, [signal]) == GENERIC_REVEALS[key]


def test_empty_or_unknown_signals_fall_back_to_trust():
    assert get_reveal_for_domain("Learning", []) == GENERIC_REVEALS["trustFocus"]
    assert get_reveal_for_domain("Learning", ["Curiosity", "Adoption"]) == GENERIC_REVEALS["trustFocus"]


def test_domain_does_not_change_the_reveal():
    assert get_reveal_for_domain("Learning", ["Adoption"]) == get_reveal_for_domain("Future of work", ["Adoption"])


def test_efficiency_rationale_keeps_its_wording():
    rationale = GENERIC_REVEALS["efficiencyFocus"].rationale
    assert rationale == "The best AI wins aren't always about speed—they're about the right kind of value."
