"""Convenience service layer for table orchestrators."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from .bidding import PASS, Bid, InvalidBid, Pass
from .cards import Card, Suit, display_name, deserialize_card, serialize_card, serialize_trump
from .game import HandEngine, HandPhase
from .trick import Trick


@dataclass
class TrickPlayView:
    player: int
    card: dict
    label: str


@dataclass
class TrickView:
    player_index: int
    score: int
    plays: list[TrickPlayView]


@dataclass
class HandView:
    phase: str
    current_player: Optional[int]
    bidder: Optional[int]
    contract: Optional[int]
    trump: Optional[str]
    next_min: int
    hand: list[dict]
    hand_labels: list[str]
    legal_moves: list[dict]
    legal_move_labels: list[str]
    remaining_cards: list[int]
    remaining_tricks: Optional[int]
    trick: Optional[TrickView]
    trick_history: list[TrickView]
    bid_history: list[dict]
    team_points: Optional[list[int]]


class HandService:
    """Facade around HandEngine taking and returning plain payloads."""

    def __init__(self, hand: Optional[HandEngine] = None) -> None:
        self.hand = hand or HandEngine()

    # Actions -----------------------------------------------------------

    def place_bid(self, player: int, amount: int, trump: Optional[str] = None) -> HandView:
        suit = None
        if trump and trump.lower() != "nose":
            try:
                suit = Suit[trump.upper()]
            except KeyError as exc:
                raise InvalidBid(f"Unknown trump: {trump!r}") from exc
        self.hand.bid(player, Bid(amount, suit))
        return self.get_hand_view(player)

    def pass_bid(self, player: int) -> HandView:
        self.hand.bid(player, PASS)
        return self.get_hand_view(player)

    def play_card(self, player: int, card_payload: dict) -> HandView:
        self.hand.play_card(player, deserialize_card(card_payload))
        return self.get_hand_view(player)

    # Views -------------------------------------------------------------

    def get_hand_view(self, perspective: int = 0) -> HandView:
        hand = self.hand
        contract = hand.contract
        play_round = hand.play_round
        legal_moves: list[Card] = []
        trick_view: Optional[TrickView] = None
        trick_history: list[TrickView] = []
        remaining_tricks: Optional[int] = None
        team_points: Optional[list[int]] = None

        if play_round is not None:
            visible_hand = list(play_round.hands[perspective])
            remaining = list(play_round.remaining_cards())
            remaining_tricks = play_round.remaining
            current = play_round.current_trick()
            if not current.is_empty():
                trick_view = _trick_view(current)
            trick_history = [_trick_view(trick) for trick in reversed(play_round.finished_tricks())]
            if hand.phase is HandPhase.PLAY and hand.current_player == perspective:
                legal_moves = play_round.legal_moves(perspective)
            if play_round.is_complete():
                team_points = list(play_round.scores())
        else:
            visible_hand = list(hand.hands[perspective])
            remaining = [len(hand.hands[seat]) for seat in sorted(hand.hands)]

        return HandView(
            phase=hand.phase.name.lower(),
            current_player=hand.current_player,
            bidder=contract.bidder if contract else None,
            contract=contract.amount if contract else None,
            trump=serialize_trump(contract.trump) if contract else None,
            next_min=hand.bet_round.next_min,
            hand=[serialize_card(card) for card in visible_hand],
            hand_labels=[display_name(card) for card in visible_hand],
            legal_moves=[serialize_card(card) for card in legal_moves],
            legal_move_labels=[display_name(card) for card in legal_moves],
            remaining_cards=remaining,
            remaining_tricks=remaining_tricks,
            trick=trick_view,
            trick_history=trick_history,
            bid_history=[
                {
                    "player": player,
                    "action": "pass" if isinstance(action, Pass) else "bid",
                    "amount": None if isinstance(action, Pass) else action.amount,
                    "trump": None if isinstance(action, Pass) else serialize_trump(action.trump),
                }
                for player, action in hand.bet_round.history()
            ],
            team_points=team_points,
        )


def _trick_view(trick: Trick) -> TrickView:
    return TrickView(
        player_index=trick.player_index,
        score=trick.score,
        plays=[
            TrickPlayView(player=player, card=serialize_card(card), label=display_name(card))
            for player, card in trick.chronological()
        ],
    )
