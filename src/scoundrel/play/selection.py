"""Selection cursor for the arrow-key frontend.

The screen is three rows: the draw pile marker, the room, and the hand.
The cursor lives in one zone at a time and moves with a pure transition
function, so it can be tested without a terminal.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class Zone(Enum):
    """Where the cursor is."""

    NONE = "none"
    DRAW = "draw"
    ROOM = "room"
    HAND = "hand"


class Direction(Enum):
    LEFT = "left"
    RIGHT = "right"
    UP = "up"
    DOWN = "down"


@dataclass(frozen=True)
class Selection:
    """Cursor position. index is only meaningful for ROOM and HAND."""

    zone: Zone = Zone.NONE
    index: int = 0

    @property
    def room_index(self) -> int | None:
        return self.index if self.zone == Zone.ROOM else None

    @property
    def hand_index(self) -> int | None:
        return self.index if self.zone == Zone.HAND else None


NO_SELECTION = Selection()
DRAW_SELECTION = Selection(Zone.DRAW)


def _room(index: int) -> Selection:
    return Selection(Zone.ROOM, index)


def _hand(index: int) -> Selection:
    return Selection(Zone.HAND, index)


def _first_card(room_size: int, hand_size: int) -> Selection:
    if room_size:
        return _room(0)
    if hand_size:
        return _hand(0)
    return DRAW_SELECTION


def move_selection(
    selection: Selection,
    room_size: int,
    hand_size: int,
    direction: Direction,
) -> Selection:
    """Return the cursor after moving one step in direction.

    Moves clamp at the edges of a row and spill into the neighbouring zone
    when one exists (right past the last room card lands on the first hand
    card, left past the first room card lands on the draw pile).
    """
    selection = clamp_selection(selection, room_size, hand_size)
    zone = selection.zone
    index = selection.index

    if zone == Zone.NONE:
        return _room(0) if room_size else DRAW_SELECTION

    if zone == Zone.DRAW:
        if direction in (Direction.RIGHT, Direction.DOWN):
            return _first_card(room_size, hand_size)
        return selection

    if zone == Zone.ROOM:
        if direction == Direction.LEFT:
            return _room(index - 1) if index > 0 else DRAW_SELECTION
        if direction == Direction.RIGHT:
            if index + 1 < room_size:
                return _room(index + 1)
            return _hand(0) if hand_size else selection
        if direction == Direction.UP:
            return DRAW_SELECTION
        # DOWN
        return _hand(min(index, hand_size - 1)) if hand_size else selection

    # HAND
    if direction == Direction.LEFT:
        if index > 0:
            return _hand(index - 1)
        return _room(room_size - 1) if room_size else DRAW_SELECTION
    if direction == Direction.RIGHT:
        return _hand(index + 1) if index + 1 < hand_size else selection
    if direction == Direction.UP:
        return _room(min(index, room_size - 1)) if room_size else DRAW_SELECTION
    return selection


def clamp_selection(selection: Selection, room_size: int, hand_size: int) -> Selection:
    """Pull the cursor back onto a card after the piles have shrunk."""
    if selection.zone == Zone.ROOM and selection.index >= room_size:
        if room_size:
            return _room(room_size - 1)
        return _hand(0) if hand_size else DRAW_SELECTION

    if selection.zone == Zone.HAND and selection.index >= hand_size:
        if hand_size:
            return _hand(hand_size - 1)
        return _room(room_size - 1) if room_size else DRAW_SELECTION

    return selection
