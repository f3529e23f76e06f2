"""Deck creation and dealing for 56."""

from __future__ import annotations

import logging
from random import Random
from typing import Dict, List, Mapping, Optional, Sequence, Tuple, Union

from .cards import Card, Suit, RANK_ORDER
from .rules import DEFAULT_RULES, RuleSet

logger = logging.getLogger(__name__)

Hands = Union[Mapping[int, Sequence[Card]], Sequence[Sequence[Card]]]


def generate_deck(rules: RuleSet = DEFAULT_RULES) -> List[Card]:
    """Return the ordered double deck: every suit/value pair twice."""
    return [
        Card(suit, value)
        for suit in Suit
        for _ in range(rules.copies_per_card)
        for value in RANK_ORDER
    ]


def deal(
    player_count: int,
    rng: Optional[Random] = None,
    *,
    deck: Optional[Sequence[Card]] = None,
    rules: RuleSet = DEFAULT_RULES,
) -> Dict[int, Tuple[Card, ...]]:
    """Shuffle a fresh deck and deal it round-robin, one card at a time.

    A preset ``deck`` is dealt in the given order without shuffling.
    """
    if deck is not None:
        cards = list(deck)
        if len(cards) != rules.deck_size:
            raise ValueError(f"Deck must contain exactly {rules.deck_size} cards, got {len(cards)}.")
    else:
        cards = generate_deck(rules)
        if rng is None:
            rng = Random()
        rng.shuffle(cards)
    if player_count <= 0 or len(cards) % player_count != 0:
        raise ValueError(f"A {len(cards)}-card deck cannot be dealt evenly to {player_count} players.")

    hands: Dict[int, List[Card]] = {player: [] for player in range(player_count)}
    for index, card in enumerate(cards):
        hands[index % player_count].append(card)

    logger.debug("Dealt %d cards to %d players", len(cards), player_count)
    return {player: tuple(hand) for player, hand in hands.items()}


def seat_hands(hands: Hands) -> Tuple[Tuple[Card, ...], ...]:
    """Normalize a seat->hand mapping or a list of hands to a tuple indexed by seat."""
    if isinstance(hands, Mapping):
        return tuple(tuple(hands[seat]) for seat in range(len(hands)))
    return tuple(tuple(hand) for hand in hands)
