import pytest

from fifty_six.bidding import (
    PASS,
    BetRound,
    Bid,
    BiddingClosed,
    BiddingError,
    Contract,
    InvalidBid,
    OutOfTurnBid,
    Pass,
)
from fifty_six.cards import NOSE, Suit
from fifty_six.deck import deal, generate_deck


def fresh_round(starting_player=0):
    return BetRound.create(deal(4, deck=generate_deck()), starting_player)


def test_create_starts_at_opening_bid():
    round_ = fresh_round(starting_player=2)
    assert round_.next_min == 28
    assert round_.current_bidder == 2
    assert round_.bets == ()
    assert len(round_.hands) == 4


def test_opening_pass_becomes_nose_bid():
    round_ = fresh_round().bid(PASS)
    assert round_.bets == (Bid(28, NOSE),)
    assert round_.next_min == 29
    assert round_.current_bidder == 1


def test_none_is_accepted_as_a_pass():
    round_ = fresh_round().bid(None).bid(None)
    assert round_.bets == (Pass(), Bid(28, NOSE))
    assert round_.next_min == 29


def test_later_pass_is_recorded_without_raising_minimum():
    round_ = fresh_round().bid(Bid(30, Suit.HEARTS)).bid(PASS)
    assert round_.bets == (PASS, Bid(30, Suit.HEARTS))
    assert round_.next_min == 31
    assert round_.current_bidder == 2


def test_bid_below_minimum_rejected():
    round_ = fresh_round().bid(Bid(32, Suit.CLUBS))
    with pytest.raises(InvalidBid):
        round_.bid(Bid(32, Suit.SPADES))
    with pytest.raises(InvalidBid):
        fresh_round().bid(Bid(27, Suit.SPADES))


def test_bidding_does_not_mutate_previous_round():
    round_ = fresh_round()
    round_.bid(Bid(30, Suit.HEARTS))
    assert round_.bets == ()
    assert round_.next_min == 28


def test_bidder_wraps_around_table():
    round_ = fresh_round(starting_player=3)
    round_ = round_.bid(PASS)
    assert round_.current_bidder == 0


def test_out_of_turn_bid_rejected():
    with pytest.raises(OutOfTurnBid):
        fresh_round().bid(Bid(30, Suit.HEARTS), player=1)


def test_round_closes_after_every_seat_acts():
    round_ = fresh_round()
    for _ in range(4):
        round_ = round_.bid(PASS)
    assert round_.is_complete()
    with pytest.raises(BiddingClosed):
        round_.bid(Bid(40, Suit.SPADES))


def test_history_and_contract():
    round_ = fresh_round(starting_player=1)
    round_ = round_.bid(Bid(28, Suit.DIAMONDS), player=1)
    round_ = round_.bid(Bid(32, Suit.SPADES), player=2)
    round_ = round_.bid(PASS, player=3)
    round_ = round_.bid(PASS, player=0)

    assert round_.history() == (
        (1, Bid(28, Suit.DIAMONDS)),
        (2, Bid(32, Suit.SPADES)),
        (3, PASS),
        (0, PASS),
    )
    assert round_.contract() == Contract(bidder=2, amount=32, trump=Suit.SPADES)


def test_all_pass_leaves_opener_with_nose_contract():
    round_ = fresh_round(starting_player=2)
    for _ in range(4):
        round_ = round_.bid(PASS)
    assert round_.contract() == Contract(bidder=2, amount=28, trump=NOSE)


def test_contract_requires_a_bid():
    with pytest.raises(BiddingError):
        fresh_round().contract()


def test_amount_and_trump_pair_is_checked_like_a_bid():
    round_ = fresh_round().bid(Bid(30, Suit.HEARTS))
    with pytest.raises(InvalidBid):
        round_.bid((29, Suit.SPADES))

    round_ = round_.bid((31, Suit.SPADES))
    assert round_.bets[0] == Bid(31, Suit.SPADES)
    assert round_.next_min == 32


def test_unknown_action_rejected():
    round_ = fresh_round()
    with pytest.raises(InvalidBid):
        round_.bid("pass")
    with pytest.raises(InvalidBid):
        round_.bid(30)
