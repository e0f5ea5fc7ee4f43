"""Game-state engine: cards, board and intent dispatch."""

from scoundrel.simulation.cards import Card, Rank, Suit, is_high_diamond, new_deck
from scoundrel.simulation.state import Board, ROOM_SIZE, STARTING_HP
from scoundrel.simulation.intents import (
    GameStatus,
    Intent,
    IntentType,
    apply_intent,
    check_status,
)

__all__ = [
    "Card",
    "Rank",
    "Suit",
    "is_high_diamond",
    "new_deck",
    "Board",
    "ROOM_SIZE",
    "STARTING_HP",
    "GameStatus",
    "Intent",
    "IntentType",
    "apply_intent",
    "check_status",
]
