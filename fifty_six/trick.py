"""Trick representation and resolution."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

from .cards import Card, Suit, points, winner

Play = Tuple[int, Card]


class TrickError(RuntimeError):
    """Raised when a trick is queried before anyone has played to it."""


@dataclass(frozen=True)
class Trick:
    """One card from each seat.

    ``plays`` is stored newest first; ``chronological()`` gives play order.
    ``player_index`` is the seat due to play next.
    """

    player_index: int
    plays: Tuple[Play, ...] = ()
    score: int = 0

    def is_empty(self) -> bool:
        return not self.plays

    def is_finished(self, player_count: int) -> bool:
        return len(self.plays) == player_count

    def chronological(self) -> Tuple[Play, ...]:
        return tuple(reversed(self.plays))

    def leading_suit(self) -> Suit:
        if not self.plays:
            raise TrickError("Cannot determine the leading suit of an empty trick.")
        return self.plays[-1][1].suit

    def determine_winner(self, trump: Optional[Suit]) -> Play:
        if not self.plays:
            raise TrickError("Cannot determine winner on empty trick.")
        in_order = self.chronological()
        champion = in_order[0]
        for play in in_order[1:]:
            # An identical copy never takes the trick from the earlier one.
            if winner(champion[1], play[1], trump) != champion[1]:
                champion = play
        return champion

    def record_play(self, card: Card, player_count: int) -> "Trick":
        return Trick(
            player_index=(self.player_index + 1) % player_count,
            plays=((self.player_index, card),) + self.plays,
            score=self.score + points(card),
        )
