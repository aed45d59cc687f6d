"""Reward and penalty scores of each reaction, per personality."""

from __future__ import annotations

from moodengine.config import LoadFrom, Personality, Reaction

R = Reaction

_LADDER = (
    R.SUPER_ANGER,
    R.SUPER_SAD,
    R.SCARED,
    R.FRUSTRATED,
    R.ANGER,
    R.ANNOYED,
    R.SAD,
    R.CONFUSED,
    R.SHY,
    R.CALM,
    R.CURIOUS,
    R.AFFECTIONATE,
    R.SURPRISED,
    R.EXCITED,
    R.HAPPY,
    R.PLAYFUL,
    R.SUPER_HAPPY,
)

_FLASH_VALUES = {
    Personality.ACHIEVER: (
        -0.9, -0.85, -0.8, -0.7, -0.7, -0.6, -0.5, -0.3,
        0.1, 0.2, 0.5, 0.6, 0.7, 0.75, 0.8, 0.9, 1.0,
    ),
    Personality.BALANCED: (
        -0.8, -0.7, -0.7, -0.6, -0.6, -0.5, -0.4, -0.2,
        0.2, 0.3, 0.4, 0.5, 0.6, 0.7, 0.75, 0.8, 0.9,
    ),
    Personality.CREATIVE: (
        -0.70, -0.65, -0.60, -0.55, -0.50, -0.40, -0.30, -0.10,
        0.30, 0.40, 0.60, 0.70, 0.80, 0.85, 0.90, 0.95, 1.0,
    ),
    Personality.DISTRESSED: (
        -1.0, -0.95, -0.90, -0.85, -0.80, -0.70, -0.60, -0.40,
        0.0, 0.10, 0.30, 0.40, 0.50, 0.55, 0.60, 0.70, 0.80,
    ),
}


class RewardTable:
    """Reward scores indexed by personality and reaction."""

    def __init__(self) -> None:
        self._values: dict[tuple[Personality, Reaction], float] = {}

    def load(self, source: LoadFrom = LoadFrom.FLASH) -> None:
        """Load built-in scores; sources other than FLASH provide nothing."""
        if LoadFrom(source) is not LoadFrom.FLASH:
            return
        for personality, values in _FLASH_VALUES.items():
            for reaction, value in zip(_LADDER, values):
                self._values[(personality, reaction)] = value

    def reward(self, personality: Personality, reaction: Reaction) -> float:
        """Score of a reaction for a personality; KeyError if not loaded."""
        key = (Personality(personality), Reaction(reaction))
        try:
            return self._values[key]
        except KeyError:
            raise KeyError(f"no reward loaded for {key}") from None