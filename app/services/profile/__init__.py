"""
Profile System - signal scoring and profile assignment.

Both steps are pure functions over immutable input: answers are counted into
a signal score map, and the score map is folded into six paired-signal
cluster scores to pick a profile.
"""

from app.services.profile.assigner import ProfileAssigner, get_profile_description
from app.services.profile.constants import PROFILE_ORDER, PROFILES
from app.services.profile.scorer import SignalScorer

score = SignalScorer.score
assign_profile = ProfileAssigner.assign_profile
assign_user_profile = ProfileAssigner.assign_user_profile

__all__ = [
    "PROFILES",
    "PROFILE_ORDER",
    "ProfileAssigner",
    "SignalScorer",
    "assign_profile",
    "assign_user_profile",
    "get_profile_description",
    "score",
]
