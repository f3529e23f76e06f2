"""Bidding rules for 56."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Optional, Tuple, Union

from .cards import Card, NOSE, Suit, serialize_trump
from .deck import Hands, seat_hands
from .rules import DEFAULT_RULES, RuleSet

logger = logging.getLogger(__name__)


class BiddingError(ValueError):
    """Base class for bidding related errors."""


class InvalidBid(BiddingError):
    """Raised when a bid does not reach the current minimum."""


class OutOfTurnBid(BiddingError):
    """Raised when a seat bids while another seat is due to act."""


class BiddingClosed(BiddingError):
    """Raised when every seat has already acted in the round."""


@dataclass(frozen=True)
class Pass:
    def __str__(self) -> str:
        return "pass"


@dataclass(frozen=True)
class Bid:
    amount: int
    trump: Optional[Suit] = NOSE

    def __str__(self) -> str:
        return f"{self.amount} {serialize_trump(self.trump)}"


BetAction = Union[Pass, Bid]

PASS = Pass()


@dataclass(frozen=True)
class Contract:
    bidder: int
    amount: int
    trump: Optional[Suit]


@dataclass(frozen=True)
class BetRound:
    """One pass around the table; ``bets`` is stored newest first."""

    hands: Tuple[Tuple[Card, ...], ...]
    starting_player: int
    current_bidder: int
    next_min: int
    bets: Tuple[BetAction, ...] = ()

    @classmethod
    def create(
        cls,
        hands: Hands,
        starting_player: int,
        *,
        rules: RuleSet = DEFAULT_RULES,
    ) -> "BetRound":
        seats = seat_hands(hands)
        if not 0 <= starting_player < len(seats):
            raise BiddingError(f"Starting player {starting_player} is not seated.")
        return cls(
            hands=seats,
            starting_player=starting_player,
            current_bidder=starting_player,
            next_min=rules.opening_bid,
        )

    @property
    def player_count(self) -> int:
        return len(self.hands)

    def is_complete(self) -> bool:
        return len(self.bets) >= self.player_count

    def bid(self, action: Optional[BetAction], *, player: Optional[int] = None) -> "BetRound":
        """Record the current bidder's action and pass the turn on.

        ``None`` is accepted as a pass and an ``(amount, trump)`` pair as a
        bid. The opening seat cannot pass: its pass becomes a bid of the
        minimum amount with no trump.
        """
        if self.is_complete():
            raise BiddingClosed("Every player has already acted in this round.")
        if player is not None and player != self.current_bidder:
            raise OutOfTurnBid(f"Player {player} bid out of turn; player {self.current_bidder} is to act.")

        if action is None:
            action = PASS
        elif isinstance(action, tuple) and len(action) == 2:
            action = Bid(*action)
        elif not isinstance(action, (Pass, Bid)):
            raise InvalidBid(f"Not a bid or a pass: {action!r}")
        if isinstance(action, Pass) and not self.bets:
            action = Bid(self.next_min, NOSE)
            logger.debug("Opening pass from player %d forced to %s", self.current_bidder, action)

        next_min = self.next_min
        if isinstance(action, Bid):
            if action.amount < self.next_min:
                raise InvalidBid(f"Bid {action.amount} is below the minimum of {self.next_min}.")
            next_min = action.amount + 1

        logger.debug("Player %d: %s", self.current_bidder, action)
        return replace(
            self,
            bets=(action,) + self.bets,
            next_min=next_min,
            current_bidder=(self.current_bidder + 1) % self.player_count,
        )

    def history(self) -> Tuple[Tuple[int, BetAction], ...]:
        """Return (player, action) pairs in the order they were made."""
        return tuple(
            ((self.starting_player + offset) % self.player_count, action)
            for offset, action in enumerate(reversed(self.bets))
        )

    def contract(self) -> Contract:
        """Return the highest bid made so far."""
        best: Optional[Contract] = None
        for player, action in self.history():
            if isinstance(action, Bid) and (best is None or action.amount > best.amount):
                best = Contract(bidder=player, amount=action.amount, trump=action.trump)
        if best is None:
            raise BiddingError("No bid has been made yet.")
        return best

