"""Hand scoring helpers for 56."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Sequence, Tuple

from .cards import CARD_POINTS
from .rules import DEFAULT_RULES, RuleSet, SUIT_COUNT

TEAM_COUNT = 2


class ScoringError(ValueError):
    """Base class for scoring issues."""


@dataclass(frozen=True)
class HandScoreResult:
    team_points: Tuple[int, int]
    bidding_team: int
    contract_success: bool


def team_of(player: int) -> int:
    """Seats 0 and 2 form team 0; seats 1 and 3 form team 1."""
    return player % TEAM_COUNT


def deck_points(rules: RuleSet = DEFAULT_RULES) -> int:
    return sum(CARD_POINTS.values()) * SUIT_COUNT * rules.copies_per_card


def score_hand(
    *,
    bidder: int,
    amount: int,
    team_points: Sequence[int],
    rules: RuleSet = DEFAULT_RULES,
) -> HandScoreResult:
    if len(team_points) != TEAM_COUNT:
        raise ScoringError("Exactly two teams are supported.")
    if sum(team_points) != deck_points(rules):
        raise ScoringError(
            f"Team points {tuple(team_points)} do not add up to the deck total of {deck_points(rules)}."
        )

    bidding_team = team_of(bidder)
    return HandScoreResult(
        team_points=(team_points[0], team_points[1]),
        bidding_team=bidding_team,
        contract_success=team_points[bidding_team] >= amount,
    )
