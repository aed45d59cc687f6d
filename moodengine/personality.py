"""Personality prediction from a simple moving average of recent moods."""

from __future__ import annotations

from collections.abc import Sequence

from moodengine.config import DEFAULT_FRAME_SIZE, Mood, Personality

_THRESHOLD = 0.333333


class SMA:
    """Simple moving average over the last ``frame_size`` mood entries."""

    def __init__(self, frame_size: int = DEFAULT_FRAME_SIZE, debug: bool = False) -> None:
        self.frame_size = frame_size
        self.debug = debug

    def moving_averages(self, mood_logs: Sequence[Mood]) -> tuple[float, float, float]:
        """Return the (positive, negative, neutral) share of the recent moods.

        An empty log gives all zeros.
        """
        recent = list(mood_logs)[-self.frame_size:] if self.frame_size > 0 else []
        if not recent:
            return 0.0, 0.0, 0.0
        count = len(recent)
        positive = sum(1 for mood in recent if mood == Mood.POSITIVE)
        negative = sum(1 for mood in recent if mood == Mood.NEGATIVE)
        neutral = sum(1 for mood in recent if mood == Mood.NEUTRAL)
        return positive / count, negative / count, neutral / count

    def predict_personality(self, mood_logs: Sequence[Mood]) -> Personality:
        """Classify the personality from which moods dominate the recent log."""
        pos_sma, neg_sma, neu_sma = self.moving_averages(mood_logs)
        if self.debug:
            print(f"Before scaling posSMA:{pos_sma:f} neuSMA:{neu_sma:f} negSMA:{neg_sma:f}")
        p = pos_sma > _THRESHOLD
        n = neg_sma > _THRESHOLD
        m = neu_sma > _THRESHOLD
        if self.debug:
            print(f"After scaling posSMA:{int(p)} neuSMA:{int(m)} negSMA:{int(n)}")
        pattern = (p, m, n)
        if pattern == (True, True, False):
            return Personality.CREATIVE
        if pattern == (True, False, False):
            return Personality.ACHIEVER
        if pattern in {(False, False, True), (False, True, True)}:
            return Personality.DISTRESSED
        return Personality.BALANCED