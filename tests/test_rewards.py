import itertools

import pytest

from moodengine.config import LoadFrom, Personality, Reaction
from moodengine.rewards import RewardTable

NEGATIVE = [
    Reaction.SUPER_ANGER,
    Reaction.SUPER_SAD,
    Reaction.SCARED,
    Reaction.FRUSTRATED,
    Reaction.ANGER,
    Reaction.ANNOYED,
    Reaction.SAD,
    Reaction.CONFUSED,
]
POSITIVE = [
    Reaction.SHY,
    Reaction.CALM,
    Reaction.CURIOUS,
    Reaction.AFFECTIONATE,
    Reaction.SURPRISED,
    Reaction.EXCITED,
    Reaction.HAPPY,
    Reaction.PLAYFUL,
    Reaction.SUPER_HAPPY,
]


@pytest.fixture
def table():
    t = RewardTable()
    t.load(LoadFrom.FLASH)
    return t


def test_every_combination_loaded(table):
    for p, r in itertools.product(Personality, Reaction):
        assert -1.0 <= table.reward(p, r) <= 1.0


def test_negative_reactions_penalised(table):
    for p, r in itertools.product(Personality, NEGATIVE):
        assert table.reward(p, r) < 0


def test_positive_reactions_not_penalised(table):
    for p, r in itertools.product(Personality, POSITIVE):
        assert table.reward(p, r) >= 0


@pytest.mark.parametrize("personality", list(Personality))
def test_scores_rise_along_the_ladder(table, personality):
    scores = [table.reward(personality, r) for r in NEGATIVE + POSITIVE]
    assert scores == sorted(scores)


def test_pinned_values(table):
    assert table.reward(Personality.ACHIEVER, Reaction.SUPER_HAPPY) == pytest.approx(1.0)
    assert table.reward(Personality.DISTRESSED, Reaction.SUPER_ANGER) == pytest.approx(-1.0)
    assert table.reward(Personality.DISTRESSED, Reaction.SHY) == pytest.approx(0.0)


def test_distressed_suffers_more_than_creative(table):
    for r in NEGATIVE:
        assert table.reward(Personality.DISTRESSED, r) < table.reward(Personality.CREATIVE, r)


@pytest.mark.parametrize("source", [LoadFrom.SPIFF, LoadFrom.APP, LoadFrom.CLOUD])
def test_non_flash_sources_load_nothing(source):
    t = RewardTable()
    t.load(source)
    with pytest.raises(KeyError):
        t.reward(Personality.BALANCED, Reaction.CALM)


def test_unloaded_table_raises():
    with pytest.raises(KeyError):
        RewardTable().reward(Personality.ACHIEVER, Reaction.CALM)


def test_reward_accepts_ints(table):
    assert table.reward(0, 16) == table.reward(Personality.ACHIEVER, Reaction.SUPER_HAPPY)


def test_invalid_reaction_rejected(table):
    with pytest.raises(ValueError):
        table.reward(Personality.ACHIEVER, 50)