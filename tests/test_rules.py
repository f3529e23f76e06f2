import pytest
from pydantic import ValidationError

from fifty_six.rules import DEFAULT_RULES, RuleSet


def test_default_table():
    assert DEFAULT_RULES.player_count == 4
    assert DEFAULT_RULES.opening_bid == 28
    assert DEFAULT_RULES.deck_size == 48
    assert DEFAULT_RULES.hand_size == 12


def test_six_player_table():
    rules = RuleSet(player_count=6)
    assert rules.hand_size == 8


def test_odd_player_count_rejected():
    with pytest.raises(ValidationError):
        RuleSet(player_count=3)


def test_uneven_hand_size_rejected():
    rules = RuleSet(player_count=10)
    with pytest.raises(ValueError):
        rules.hand_size


def test_copies_must_be_positive():
    with pytest.raises(ValidationError):
        RuleSet(copies_per_card=0)
