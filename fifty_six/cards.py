"""Card-related data structures and helpers for 56."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum, IntEnum, auto
from typing import Mapping, Optional, Tuple


class Suit(Enum):
    HEARTS = auto()
    DIAMONDS = auto()
    CLUBS = auto()
    SPADES = auto()

    def __str__(self) -> str:
        return self.name.lower()


class Rank(IntEnum):
    """Card values ordered from weakest to strongest."""

    QUEEN = 0
    KING = 1
    TEN = 2
    ACE = 3
    NINE = 4
    JACK = 5

    def __str__(self) -> str:
        return self.name.lower()


# Card point values; a full double deck sums to 56.
CARD_POINTS: dict[Rank, int] = {
    Rank.QUEEN: 0,
    Rank.KING: 0,
    Rank.TEN: 1,
    Rank.ACE: 1,
    Rank.NINE: 2,
    Rank.JACK: 3,
}

# Rank order from lowest to highest for trick resolution.
RANK_ORDER: list[Rank] = [
    Rank.QUEEN,
    Rank.KING,
    Rank.TEN,
    Rank.ACE,
    Rank.NINE,
    Rank.JACK,
]

RANK_STRENGTH: dict[Rank, int] = {rank: index for index, rank in enumerate(RANK_ORDER)}

VALUE_NAMES: dict[Rank, str] = {
    Rank.QUEEN: "Queen",
    Rank.KING: "King",
    Rank.TEN: "10",
    Rank.ACE: "Ace",
    Rank.NINE: "9",
    Rank.JACK: "Jack",
}

SUIT_NAMES: dict[Suit, str] = {
    Suit.HEARTS: "Hearts",
    Suit.DIAMONDS: "Diamonds",
    Suit.CLUBS: "Clubs",
    Suit.SPADES: "Spades",
}

# Trump designation of an opening auto-bid: no suit is trump.
NOSE: Optional[Suit] = None


@dataclass(frozen=True)
class Card:
    """Immutable representation of a playing card."""

    suit: Suit
    value: Rank

    def __str__(self) -> str:
        return display_name(self)


def card_strength(card: Card) -> int:
    """Return an integer strength used for ordering cards within a suit."""
    return RANK_STRENGTH[card.value]


def winner(champion: Card, contender: Card, trump: Optional[Suit]) -> Card:
    """Return whichever of the two cards holds the trick.

    The champion is the card currently winning; the contender is the card
    just played on top of it. Only meaningful when folded over a trick in
    play order.
    """
    if champion.suit is contender.suit and card_strength(contender) > card_strength(champion):
        return contender
    if trump is not None and contender.suit is trump:
        return contender
    return champion


def points(card: Card) -> int:
    return CARD_POINTS[card.value]


def value_name(card: Card) -> str:
    return VALUE_NAMES[card.value]


def suit_name(card: Card) -> str:
    return SUIT_NAMES[card.suit]


def display_name(card: Card) -> str:
    return f"{value_name(card)} of {suit_name(card)}"


def parse_display_name(name: str) -> Tuple[Suit, Rank]:
    """Invert display_name back to its (suit, value) pair."""
    value_part, sep, suit_part = name.partition(" of ")
    if not sep:
        raise ValueError(f"Not a card name: {name!r}")
    values = {label: rank for rank, label in VALUE_NAMES.items()}
    suits = {label: suit for suit, label in SUIT_NAMES.items()}
    try:
        return suits[suit_part], values[value_part]
    except KeyError as exc:
        raise ValueError(f"Not a card name: {name!r}") from exc


def serialize_card(card: Card) -> dict[str, str]:
    return {"suit": card.suit.name.lower(), "value": card.value.name.lower()}


def deserialize_card(payload: Mapping[str, str]) -> Card:
    suit_key = payload["suit"].upper()
    value_key = payload["value"].upper()
    return Card(Suit[suit_key], Rank[value_key])


def serialize_trump(trump: Optional[Suit]) -> str:
    return "nose" if trump is None else str(trump)
