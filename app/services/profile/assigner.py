from collections.abc import Iterable, Mapping

from app.models.profile import ProfileAssignmentResult
from app.models.quiz import UserAnswer
from app.models.signals import Profile, Signal
from app.services.profile.constants import PROFILE_ORDER, PROFILES
from app.services.profile.scorer import SignalScorer


class ProfileAssigner:
    """
    Maps signal counts onto one of the six profiles.

    Each profile's cluster score is the sum of its two signals. The highest
    cluster score wins; ties go to the profile declared first in PROFILE_ORDER.
    """

    @staticmethod
    def cluster_scores(scores: Mapping[Signal, int]) -> dict[Profile, int]:
        return {
            profile: sum(scores.get(signal, 0) for signal in PROFILES[profile].signals) for profile in PROFILE_ORDER
        }

    @staticmethod
    def rank_profiles(scores: Mapping[Signal, int]) -> list[tuple[Profile, int]]:
        """Profiles by cluster score, highest first. Sort is stable, so equal scores keep declaration order."""
        clusters = ProfileAssigner.cluster_scores(scores)
        return sorted(clusters.items(), key=lambda x: x[1], reverse=True)

    @staticmethod
    def assign_profile(scores: Mapping[Signal, int]) -> Profile:
        return ProfileAssigner.rank_profiles(scores)[0][0]

    @staticmethod
    def assign_user_profile(answers: Iterable[UserAnswer]) -> ProfileAssignmentResult:
        signal_scores = SignalScorer.score(answers)
        profile = ProfileAssigner.assign_profile(signal_scores)
        return ProfileAssignmentResult(profile=profile, signalScores=signal_scores)


def get_profile_description(profile: Profile) -> str:
    return PROFILES[profile].description
