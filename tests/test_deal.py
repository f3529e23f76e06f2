from collections import Counter
from random import Random

import pytest

from fifty_six.cards import Card, Rank, Suit
from fifty_six.deck import deal, generate_deck, seat_hands


def test_four_player_deal_uses_whole_deck():
    hands = deal(4, Random(7))
    assert sorted(hands) == [0, 1, 2, 3]
    assert all(len(hand) == 12 for hand in hands.values())

    dealt = Counter(card for hand in hands.values() for card in hand)
    assert dealt == Counter(generate_deck())


def test_seeded_deal_is_deterministic():
    assert deal(4, Random(42)) == deal(4, Random(42))
    assert deal(4, Random(1)) != deal(4, Random(2))


def test_preset_deck_is_dealt_round_robin():
    deck = generate_deck()
    hands = deal(4, deck=deck)
    assert hands[0][:3] == (
        Card(Suit.HEARTS, Rank.QUEEN),
        Card(Suit.HEARTS, Rank.NINE),
        Card(Suit.HEARTS, Rank.TEN),
    )
    assert hands[3][0] == Card(Suit.HEARTS, Rank.ACE)


def test_uneven_deal_rejected():
    with pytest.raises(ValueError):
        deal(5, Random(0))


def test_seat_hands_accepts_mapping_or_sequence():
    hands = deal(4, Random(3))
    from_mapping = seat_hands(hands)
    from_list = seat_hands([list(hands[seat]) for seat in range(4)])
    assert from_mapping == from_list


def test_preset_deck_must_be_full():
    with pytest.raises(ValueError):
        deal(4, deck=generate_deck()[:24])
