import pytest

from moodengine.config import (
    NUM_OF_ACTION,
    NUM_OF_MOOD,
    NUM_OF_PERSONALITY,
    NUM_OF_REACTION,
    Action,
    CharacterState,
    Mood,
    Personality,
    Reaction,
    action_name,
    mood_name,
    personality_name,
)


def test_declared_counts_cover_every_named_member():
    action_names = {action_name(i) for i in range(NUM_OF_ACTION)}
    assert len(action_names) == NUM_OF_ACTION == len(Action)
    assert "Unknown Action" not in action_names
    assert action_name(NUM_OF_ACTION) == "Unknown Action"

    mood_names = {mood_name(i) for i in range(NUM_OF_MOOD)}
    assert len(mood_names) == NUM_OF_MOOD == len(Mood)
    assert "Unknown Mood" not in mood_names
    assert mood_name(NUM_OF_MOOD) == "Unknown Mood"

    personality_names = {personality_name(i) for i in range(NUM_OF_PERSONALITY)}
    assert len(personality_names) == NUM_OF_PERSONALITY == len(Personality)
    assert "Unknown Personality" not in personality_names
    assert personality_name(NUM_OF_PERSONALITY) == "Unknown Personality"

    assert len(Reaction) == NUM_OF_REACTION


def test_names_by_index_match_names_by_member():
    assert [action_name(i) for i in range(len(Action))] == [action_name(a) for a in Action]
    assert [mood_name(i) for i in range(len(Mood))] == [mood_name(m) for m in Mood]
    assert [personality_name(i) for i in range(len(Personality))] == [
        personality_name(p) for p in Personality
    ]


@pytest.mark.parametrize(
    "action, name",
    [
        (Action.HIT_HEAD, "Hit Head"),
        (Action.RECOGNIZED, "Recognized"),
        (Action.BACK_MASSAGE, "Back Massage"),
    ],
)
def test_action_name(action, name):
    assert action_name(action) == name


def test_every_action_has_a_name():
    names = {action_name(a) for a in Action}
    assert len(names) == len(Action)
    assert "Unknown Action" not in names


def test_unknown_action_name():
    assert action_name(99) == "Unknown Action"


def test_mood_names():
    assert mood_name(Mood.POSITIVE) == "Positive"
    assert mood_name(Mood.NEUTRAL) == "Neutral"
    assert mood_name(Mood.NEGATIVE) == "Negative"
    assert mood_name(-1) == "Unknown Mood"


def test_personality_names():
    assert personality_name(Personality.ACHIEVER) == "_achiever_"
    assert personality_name(Personality.DISTRESSED) == "_distressed_"
    assert personality_name(42) == "Unknown Personality"


def test_name_lookup_accepts_plain_int():
    assert action_name(int(Action.FALL)) == action_name(Action.FALL)


def test_character_state_defaults():
    state = CharacterState()
    assert state.personality is Personality.BALANCED
    assert state.mood is Mood.POSITIVE
    assert state.reaction is Reaction.CALM
    assert state.mood_positivity == 0.5
    assert state.mood_negativity == -0.5
    assert state.mood_changed is False


def test_character_states_are_independent():
    first = CharacterState()
    second = CharacterState()
    first.mood = Mood.NEGATIVE
    assert second.mood is Mood.POSITIVE