"""Table mapping personality, mood and action to a reaction."""

from __future__ import annotations

from moodengine.config import Action, LoadFrom, Mood, Personality, Reaction

_A = Personality.ACHIEVER
_B = Personality.BALANCED
_C = Personality.CREATIVE
_D = Personality.DISTRESSED
R = Reaction

_HANG_LIKE = {
    _A: (R.SCARED, R.ANGER, R.SUPER_ANGER),
    _B: (R.SCARED, R.SCARED, R.ANNOYED),
    _C: (R.SCARED, R.SCARED, R.ANGER),
    _D: (R.SCARED, R.SAD, R.ANGER),
}

_MASSAGE = {
    _A: (R.AFFECTIONATE, R.CURIOUS, R.CALM),
    _B: (R.HAPPY, R.EXCITED, R.CALM),
    _C: (R.EXCITED, R.CURIOUS, R.CALM),
    _D: (R.AFFECTIONATE, R.CURIOUS, R.CALM),
}


def _uniform(reaction: Reaction) -> dict:
    return {p: (reaction, reaction, reaction) for p in Personality}


# Per action, per personality: reactions in (positive, neutral, negative) mood.
_DEFAULT_TABLE = {
    Action.HIT_HEAD: {
        _A: (R.ANNOYED, R.ANGER, R.SUPER_ANGER),
        _B: (R.CONFUSED, R.SAD, R.ANNOYED),
        _C: (R.SCARED, R.SAD, R.ANGER),
        _D: (R.SAD, R.SUPER_SAD, R.FRUSTRATED),
    },
    Action.HIT_BELLY: {
        _A: (R.ANGER, R.FRUSTRATED, R.SUPER_ANGER),
        _B: (R.CONFUSED, R.ANNOYED, R.ANGER),
        _C: (R.ANNOYED, R.ANNOYED, R.ANGER),
        _D: (R.CONFUSED, R.SAD, R.SUPER_SAD),
    },
    Action.HIT_HAND: {
        _A: (R.ANNOYED, R.ANGER, R.FRUSTRATED),
        _B: (R.CONFUSED, R.ANNOYED, R.ANGER),
        _C: (R.CONFUSED, R.ANNOYED, R.ANNOYED),
        _D: (R.CONFUSED, R.SAD, R.SUPER_SAD),
    },
    Action.HIT_BACK: {
        _A: (R.ANNOYED, R.ANGER, R.SUPER_ANGER),
        _B: (R.CONFUSED, R.ANNOYED, R.ANGER),
        _C: (R.CONFUSED, R.ANNOYED, R.ANNOYED),
        _D: (R.FRUSTRATED, R.SAD, R.SUPER_SAD),
    },
    Action.FALL: _uniform(R.SCARED),
    Action.HANG: _HANG_LIKE,
    Action.SHAKE: _HANG_LIKE,
    Action.IDLE: _uniform(R.CALM),
    Action.CALL: _uniform(R.CALM),
    Action.RECOGNIZED: _uniform(R.CALM),
    Action.HAND_MASSAGE: _MASSAGE,
    Action.HEAD_MASSAGE: {
        _A: (R.AFFECTIONATE, R.CURIOUS, R.CALM),
        _B: (R.HAPPY, R.EXCITED, R.CALM),
        _C: (R.HAPPY, R.AFFECTIONATE, R.CALM),
        _D: (R.SUPER_HAPPY, R.PLAYFUL, R.CURIOUS),
    },
    Action.BELLY_MASSAGE: _MASSAGE,
    Action.BACK_MASSAGE: _MASSAGE,
}

_MOOD_ORDER = (Mood.POSITIVE, Mood.NEUTRAL, Mood.NEGATIVE)

_REACTION_NAMES = {
    R.ANGER: "anger",
    R.SUPER_ANGER: "superanger",
    R.ANNOYED: "angry",
    R.SAD: "sad",
    R.SCARED: "scared",
    R.CONFUSED: "confused",
    R.CALM: "calm",
    R.CURIOUS: "curious",
    R.EXCITED: "excited",
    R.SURPRISED: "surprised",
    R.AFFECTIONATE: "affectionate",
    R.FRUSTRATED: "frustrated",
    R.SUPER_SAD: "supersad",
    R.SHY: "shy",
    R.HAPPY: "happy",
    R.PLAYFUL: "playful",
    R.SUPER_HAPPY: "superhappy",
}


def reaction_name(reaction) -> str:
    """Display name of a reaction."""
    return _REACTION_NAMES.get(reaction, "Unknown Reaction")


class ReactionTable:
    """Reactions indexed by personality, mood and action."""

    def __init__(self) -> None:
        self._entries: dict[tuple[Personality, Mood, Action], Reaction] = {}

    def load(self, source: LoadFrom = LoadFrom.FLASH) -> None:
        """Fill the table with the built-in reactions.

        Every source currently yields the built-in data.
        """
        for action, by_personality in _DEFAULT_TABLE.items():
            for personality, reactions in by_personality.items():
                for mood, reaction in zip(_MOOD_ORDER, reactions):
                    self._entries[(personality, mood, action)] = reaction

    def lookup(self, personality: Personality, mood: Mood, action: Action) -> Reaction:
        """Return the reaction for a situation; KeyError if it is not set."""
        key = (Personality(personality), Mood(mood), Action(action))
        try:
            return self._entries[key]
        except KeyError:
            raise KeyError(f"no reaction set for {key}") from None

    def set(self, personality: Personality, mood: Mood, action: Action, reaction: Reaction) -> None:
        """Override the reaction for a situation."""
        key = (Personality(personality), Mood(mood), Action(action))
        self._entries[key] = Reaction(reaction)