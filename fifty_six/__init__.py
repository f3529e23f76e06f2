"""Core rules engine package for the card game 56."""

__all__ = [
    "cards",
    "deck",
    "trick",
    "bidding",
    "play",
    "scoring",
    "game",
    "service",
    "rules",
]
