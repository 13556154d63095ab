from collections.abc import Iterable

from app.models.profile import SignalScoreMap
from app.models.quiz import UserAnswer
from app.models.signals import Signal


class SignalScorer:
    """
    Reduces a sequence of answers to a per-signal frequency count.
    """

    @staticmethod
    def empty_scores() -> SignalScoreMap:
        return {signal: 0 for signal in Signal}

    @staticmethod
    def score(answers: Iterable[UserAnswer]) -> SignalScoreMap:
        """
        Count every signal tag across all answers.

        Duplicate tags on one answer are counted individually. All six
        signals are always present in the result.
        """
        scores = SignalScorer.empty_scores()
        for answer in answers:
            for signal in answer.signals:
                scores[Signal(signal)] += 1
        return scores
