"""Decoded player intents and their dispatch onto the board."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional

from scoundrel.simulation.state import Board


class IntentType(Enum):
    """Everything a player can ask for, independent of how it was typed."""

    EQUIP = "equip"
    ATTACK = "attack"
    ATTACK_WEAPON = "attack_weapon"
    HEAL = "heal"
    DISCARD = "discard"
    DISCARD_HAND = "discard_hand"
    FILL = "fill"
    FLEE = "flee"
    QUIT = "quit"
    HELP = "help"


# Intents that target a room card and need an index
INDEXED_INTENTS = frozenset({
    IntentType.EQUIP,
    IntentType.ATTACK,
    IntentType.ATTACK_WEAPON,
    IntentType.HEAL,
    IntentType.DISCARD,
})


@dataclass(frozen=True)
class Intent:
    """A validated request from a frontend."""

    type: IntentType
    index: Optional[int] = None  # room index for INDEXED_INTENTS

    def __post_init__(self):
        if self.type in INDEXED_INTENTS and self.index is None:
            raise ValueError(f"{self.type.value} needs a room index")


class GameStatus(Enum):
    """Session-level state, checked after every action."""

    PLAYING = "playing"
    VICTORY = "victory"
    DEFEAT = "defeat"


def apply_intent(board: Board, intent: Intent) -> bool:
    """Apply intent to the board.

    Returns:
        True if the board changed. QUIT and HELP never touch the board.
    """
    kind = intent.type
    index = intent.index if intent.index is not None else -1

    if kind == IntentType.EQUIP:
        return board.equip_from_room(index)
    if kind == IntentType.ATTACK:
        return board.attack_no_weapon(index)
    if kind == IntentType.ATTACK_WEAPON:
        return board.attack_with_weapon(index)
    if kind == IntentType.HEAL:
        return board.heal(index)
    if kind == IntentType.DISCARD:
        return board.discard_from_room(index)
    if kind == IntentType.DISCARD_HAND:
        had_cards = bool(board.player_hand)
        board.discard_player_hand()
        return had_cards
    if kind == IntentType.FILL:
        return board.fill_room() > 0
    if kind == IntentType.FLEE:
        draw_before = board.draw_count
        # An empty room can still be refilled by the flee
        return board.flee() > 0 or board.draw_count != draw_before
    return False


def check_status(board: Board) -> GameStatus:
    """Defeat at 0hp, victory once the draw pile and room are both empty."""
    if board.player_hp <= 0:
        return GameStatus.DEFEAT
    if not board.draw_pile and not board.table_pile:
        return GameStatus.VICTORY
    return GameStatus.PLAYING
