"""High-level orchestration of a single 56 hand."""

from __future__ import annotations

import logging
from dataclasses import dataclass, field
from enum import Enum, auto
from random import Random
from typing import Dict, Optional, Sequence, Tuple

from .bidding import BetAction, BetRound, Contract
from .cards import Card, serialize_trump
from .deck import deal
from .play import PlayRound
from .rules import DEFAULT_RULES, RuleSet
from .scoring import HandScoreResult, ScoringError, score_hand

logger = logging.getLogger(__name__)


class PhaseError(RuntimeError):
    """Raised when an action is attempted in the wrong phase of the hand."""


class HandPhase(Enum):
    BIDDING = auto()
    PLAY = auto()
    COMPLETE = auto()


@dataclass
class HandEngine:
    """Manage a single hand of 56: deal, one bidding round, then twelve tricks.

    Each phase is held as an immutable round value that is swapped for its
    successor on every action.
    """

    starting_player: int = 0
    rng: Optional[Random] = None
    deck: Optional[Sequence[Card]] = None
    rules: RuleSet = field(default_factory=lambda: DEFAULT_RULES)

    phase: HandPhase = field(init=False, default=HandPhase.BIDDING)
    hands: Dict[int, Tuple[Card, ...]] = field(init=False)
    bet_round: BetRound = field(init=False)
    contract: Optional[Contract] = field(init=False, default=None)
    play_round: Optional[PlayRound] = field(init=False, default=None)
    _score_result: Optional[HandScoreResult] = field(default=None, init=False)

    def __post_init__(self) -> None:
        self.hands = deal(self.rules.player_count, self.rng, deck=self.deck, rules=self.rules)
        self.bet_round = BetRound.create(self.hands, self.starting_player, rules=self.rules)

    def bid(self, player: int, action: Optional[BetAction]) -> None:
        self._ensure_phase(HandPhase.BIDDING)
        self.bet_round = self.bet_round.bid(action, player=player)
        if self.bet_round.is_complete():
            self._start_play()

    def play_card(self, player: int, card: Card) -> None:
        self._ensure_phase(HandPhase.PLAY)
        assert self.play_round is not None
        self.play_round = self.play_round.play(player, card)
        if self.play_round.is_complete():
            self.phase = HandPhase.COMPLETE

    def complete_scoring(self) -> HandScoreResult:
        self._ensure_phase(HandPhase.COMPLETE)
        if self._score_result is not None:
            return self._score_result
        if self.contract is None or self.play_round is None:
            raise ScoringError("Hand finished without a contract.")
        result = score_hand(
            bidder=self.contract.bidder,
            amount=self.contract.amount,
            team_points=self.play_round.scores(),
            rules=self.rules,
        )
        logger.info(
            "Team %d %s its contract of %d with %d points",
            result.bidding_team,
            "made" if result.contract_success else "missed",
            self.contract.amount,
            result.team_points[result.bidding_team],
        )
        self._score_result = result
        return result

    @property
    def current_player(self) -> Optional[int]:
        if self.phase is HandPhase.BIDDING:
            return self.bet_round.current_bidder
        if self.phase is HandPhase.PLAY:
            assert self.play_round is not None
            return self.play_round.current_trick().player_index
        return None

    def _start_play(self) -> None:
        self.contract = self.bet_round.contract()
        logger.info(
            "Player %d won the bidding at %d %s",
            self.contract.bidder,
            self.contract.amount,
            serialize_trump(self.contract.trump),
        )
        self.play_round = PlayRound.create(
            self.hands,
            self.contract.bidder,
            self.contract.trump,
            rules=self.rules,
        )
        self.phase = HandPhase.PLAY

    def _ensure_phase(self, expected: HandPhase) -> None:
        if self.phase != expected:
            raise PhaseError(f"Action not allowed in phase {self.phase}. Expected {expected}.")
