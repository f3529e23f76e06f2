"""Play phase state management for 56."""

from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import List, Optional, Tuple

from .cards import Card, NOSE, Suit, card_strength
from .deck import Hands, seat_hands
from .rules import DEFAULT_RULES, RuleSet
from .scoring import ScoringError, TEAM_COUNT, team_of
from .trick import Trick

logger = logging.getLogger(__name__)


class IllegalMove(RuntimeError):
    """Raised when an illegal card play is attempted."""


class OutOfTurn(IllegalMove):
    """Raised when a seat plays while another seat is due."""


class CardNotInHand(IllegalMove):
    """Raised when a seat plays a card it does not hold."""


@dataclass(frozen=True)
class PlayRound:
    """Hands still held plus the tricks of the round, newest trick first.

    The head of ``tricks`` is always the trick in progress, possibly empty.
    """

    hands: Tuple[Tuple[Card, ...], ...]
    tricks: Tuple[Trick, ...]
    remaining: int
    trump: Optional[Suit] = NOSE

    @classmethod
    def create(
        cls,
        hands: Hands,
        starting_player: int,
        trump: Optional[Suit] = NOSE,
        *,
        rules: RuleSet = DEFAULT_RULES,
    ) -> "PlayRound":
        seats = seat_hands(hands)
        if not 0 <= starting_player < len(seats):
            raise IllegalMove(f"Starting player {starting_player} is not seated.")
        return cls(
            hands=seats,
            tricks=(Trick(player_index=starting_player),),
            remaining=rules.deck_size // len(seats),
            trump=trump,
        )

    @property
    def player_count(self) -> int:
        return len(self.hands)

    def current_trick(self) -> Trick:
        return self.tricks[0]

    def finished_tricks(self) -> Tuple[Trick, ...]:
        return tuple(trick for trick in self.tricks if trick.is_finished(self.player_count))

    def is_complete(self) -> bool:
        return self.remaining == 0

    def trump_broken(self) -> bool:
        if self.trump is None:
            return False
        return any(card.suit is self.trump for trick in self.tricks for _, card in trick.plays)

    def all_trump(self, player: int) -> bool:
        return all(card.suit is self.trump for card in self.hands[player])

    def can_follow_suit(self, player: int) -> bool:
        led = self.current_trick().leading_suit()
        return any(card.suit is led for card in self.hands[player])

    def is_legal(self, player: int, card: Card) -> bool:
        trick = self.current_trick()
        if self.is_complete() or trick.player_index != player:
            return False
        if card not in self.hands[player]:
            return False

        if trick.is_empty():
            if self.trump is None or card.suit is not self.trump:
                return True
            return self.trump_broken() or self.all_trump(player)

        if card.suit is trick.leading_suit():
            return True
        return not self.can_follow_suit(player)

    def legal_moves(self, player: int) -> List[Card]:
        """Return the distinct cards ``player`` may play right now."""
        moves: List[Card] = []
        for card in self.hands[player]:
            if card not in moves and self.is_legal(player, card):
                moves.append(card)
        return sorted(moves, key=lambda card: (card.suit.value, card_strength(card)))

    def play(self, player: int, card: Card) -> "PlayRound":
        trick = self.current_trick()
        if self.is_complete():
            raise IllegalMove("The round is already complete.")
        if trick.player_index != player:
            raise OutOfTurn(f"Not player {player}'s turn; player {trick.player_index} is to play.")
        if card not in self.hands[player]:
            raise CardNotInHand(f"{card} is not in player {player}'s hand.")
        if not self.is_legal(player, card):
            raise IllegalMove(f"{card} is not legal in this context.")

        updated = trick.record_play(card, self.player_count)
        hand = list(self.hands[player])
        hand.remove(card)
        hands = self.hands[:player] + (tuple(hand),) + self.hands[player + 1 :]
        logger.debug("Player %d played %s", player, card)

        if not updated.is_finished(self.player_count):
            return replace(self, hands=hands, tricks=(updated,) + self.tricks[1:])

        taker, winning_card = updated.determine_winner(self.trump)
        logger.info("Player %d took a %d-point trick with %s", taker, updated.score, winning_card)
        return replace(
            self,
            hands=hands,
            tricks=(Trick(player_index=taker), updated) + self.tricks[1:],
            remaining=self.remaining - 1,
        )

    def scores(self) -> Tuple[int, int]:
        """Return the points taken by each team once every trick is played."""
        if not self.is_complete():
            raise ScoringError(f"{self.remaining} tricks are still to be played.")
        totals = [0] * TEAM_COUNT
        for trick in self.finished_tricks():
            taker, _ = trick.determine_winner(self.trump)
            totals[team_of(taker)] += trick.score
        return totals[0], totals[1]

    def cards_played(self) -> int:
        return sum(len(trick.plays) for trick in self.tricks)

    def remaining_cards(self) -> Tuple[int, ...]:
        return tuple(len(hand) for hand in self.hands)
