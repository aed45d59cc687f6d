"""Enumerations and shared state for the reaction generator."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum

NUM_OF_PERSONALITY = 4
NUM_OF_MOOD = 3
NUM_OF_ACTION = 14
NUM_OF_REACTION = 17

DEFAULT_FRAME_SIZE = 20
DEFAULT_WINDOW_SIZE = 4
REWARD_MULTIPLIER_RANDOMNESS = 10.5  # percent


class LoadFrom(IntEnum):
    """Where a database is loaded from."""

    FLASH = 0
    SPIFF = 1
    APP = 2
    CLOUD = 3


class Task(IntEnum):
    SING = 0
    DANCE = 1
    PLAY_WIN = 2
    PLAY_LOSE = 3
    SLEEP = 4
    FIRE = 5
    BORE = 6
    SPIT = 7


class Personality(IntEnum):
    """Achiever: mostly positive moods. Creative: leaning positive and neutral.
    Balanced: an even mix. Distressed: mostly negative moods."""

    ACHIEVER = 0
    CREATIVE = 1
    BALANCED = 2
    DISTRESSED = 3


class MentalState(IntEnum):
    NORMAL = 0
    PSYCHO = 1


class Mood(IntEnum):
    POSITIVE = 0
    NEUTRAL = 1
    NEGATIVE = 2


class Inertia(IntEnum):
    HIGH_INERTIA = 0
    LOW_INERTIA = 1


class Action(IntEnum):
    HIT_HEAD = 0
    HIT_BELLY = 1
    HIT_HAND = 2
    HIT_BACK = 3
    FALL = 4
    HANG = 5
    SHAKE = 6
    IDLE = 7
    CALL = 8
    RECOGNIZED = 9
    HAND_MASSAGE = 10
    HEAD_MASSAGE = 11
    BELLY_MASSAGE = 12
    BACK_MASSAGE = 13


class Reaction(IntEnum):
    SUPER_ANGER = 0
    ANGER = 1
    SUPER_SAD = 2
    SAD = 3
    ANNOYED = 4
    FRUSTRATED = 5
    SCARED = 6
    CONFUSED = 7
    CALM = 8
    SHY = 9
    CURIOUS = 10
    EXCITED = 11
    SURPRISED = 12
    PLAYFUL = 13
    AFFECTIONATE = 14
    HAPPY = 15
    SUPER_HAPPY = 16


@dataclass
class CharacterState:
    """The character's current personality, mood and reaction."""

    personality: Personality = Personality.BALANCED
    mood: Mood = Mood.POSITIVE
    reaction: Reaction = Reaction.CALM
    inertia: Inertia = Inertia.HIGH_INERTIA
    mood_positivity: float = 0.5
    mood_negativity: float = -0.5
    mood_changed: bool = False


_ACTION_NAMES = {
    Action.HIT_HEAD: "Hit Head",
    Action.HIT_BELLY: "Hit Belly",
    Action.HIT_HAND: "Hit Hand",
    Action.HIT_BACK: "Hit Back",
    Action.FALL: "Fall",
    Action.HANG: "Hang",
    Action.SHAKE: "Shake",
    Action.IDLE: "Idle",
    Action.CALL: "Call",
    Action.RECOGNIZED: "Recognized",
    Action.HAND_MASSAGE: "Hand Massage",
    Action.HEAD_MASSAGE: "Head Massage",
    Action.BELLY_MASSAGE: "Belly Massage",
    Action.BACK_MASSAGE: "Back Massage",
}

_MOOD_NAMES = {
    Mood.POSITIVE: "Positive",
    Mood.NEGATIVE: "Negative",
    Mood.NEUTRAL: "Neutral",
}

_PERSONALITY_NAMES = {
    Personality.ACHIEVER: "_achiever_",
    Personality.CREATIVE: "_creative_",
    Personality.BALANCED: "_balanced_",
    Personality.DISTRESSED: "_distressed_",
}


def action_name(action) -> str:
    """Human readable name of an action."""
    return _ACTION_NAMES.get(action, "Unknown Action")


def mood_name(mood) -> str:
    """Human readable name of a mood."""
    return _MOOD_NAMES.get(mood, "Unknown Mood")


def personality_name(personality) -> str:
    """Label of a personality."""
    return _PERSONALITY_NAMES.get(personality, "Unknown Personality")