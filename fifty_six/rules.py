"""Validation schema for 56 table rules."""

from __future__ import annotations

from pydantic import BaseModel, Field, validator

DISTINCT_VALUES = 6
SUIT_COUNT = 4


class RuleSet(BaseModel):
    player_count: int = Field(4, description="Seats at the table; split into two teams by seat parity.")
    copies_per_card: int = Field(2, ge=1, description="How many copies of each suit/value pair the deck holds.")
    opening_bid: int = Field(28, ge=0, description="Minimum amount for the first bid of a round.")

    @validator("player_count")
    def validate_player_count(cls, value: int) -> int:
        if value < 2 or value % 2 != 0:
            raise ValueError(f"Player count must be an even number of at least two, got {value}.")
        return value

    @property
    def deck_size(self) -> int:
        return DISTINCT_VALUES * SUIT_COUNT * self.copies_per_card

    @property
    def hand_size(self) -> int:
        if self.deck_size % self.player_count != 0:
            raise ValueError(
                f"A {self.deck_size}-card deck cannot be dealt evenly to {self.player_count} players."
            )
        return self.deck_size // self.player_count


DEFAULT_RULES = RuleSet()
