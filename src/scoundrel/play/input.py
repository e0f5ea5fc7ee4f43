"""Human input decoding.

Both frontends turn raw input into an InputResult here. Anything that
doesn't decode to a valid intent comes back as an error string and never
reaches the board.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from scoundrel.simulation.intents import INDEXED_INTENTS, Intent, IntentType
from scoundrel.simulation.state import Board
from scoundrel.play.selection import Direction, Selection, Zone

INVALID_INDEX = "Invalid index."
INVALID_COMMAND = "Invalid command."
NO_ROOM_CARD = "Select a room card first."


@dataclass
class InputResult:
    """Result of human input."""

    intent: Optional[Intent] = None
    error: Optional[str] = None

    @property
    def quit(self) -> bool:
        return self.intent is not None and self.intent.type == IntentType.QUIT


# Single-letter commands that take a room index
INDEXED_COMMANDS = {
    "e": IntentType.EQUIP,
    "a": IntentType.ATTACK,
    "w": IntentType.ATTACK_WEAPON,
    "h": IntentType.HEAL,
    "d": IntentType.DISCARD,
}

BARE_COMMANDS = {
    "f": IntentType.FILL,
    "r": IntentType.FLEE,
    "d": IntentType.DISCARD_HAND,
    "h": IntentType.HELP,
    "help": IntentType.HELP,
    "?": IntentType.HELP,
    "q": IntentType.QUIT,
    "quit": IntentType.QUIT,
    "exit": IntentType.QUIT,
}


def parse_command(raw: str, room_size: int) -> InputResult:
    """Parse one line of the command shell.

    Args:
        raw: Line as typed, e.g. "w 2"
        room_size: Current number of room cards, for index validation

    Returns:
        InputResult with an intent, or an error message
    """
    parts = raw.strip().lower().split()

    if len(parts) == 1 and parts[0] in BARE_COMMANDS:
        return InputResult(intent=Intent(BARE_COMMANDS[parts[0]]))

    if len(parts) == 2 and parts[0] in INDEXED_COMMANDS:
        try:
            index = int(parts[1])
        except ValueError:
            return InputResult(error=INVALID_INDEX)

        if index < 0 or index >= room_size:
            return InputResult(error=INVALID_INDEX)

        return InputResult(intent=Intent(INDEXED_COMMANDS[parts[0]], index))

    return InputResult(error=INVALID_COMMAND)


@dataclass(frozen=True)
class KeyEvent:
    """A decoded keypress: a cursor move, an action, or confirm."""

    direction: Optional[Direction] = None
    intent_type: Optional[IntentType] = None
    confirm: bool = False


# click.getchar() returns the full escape sequence for special keys.
# Windows consoles prefix arrows with \xe0 or \x00.
ARROW_KEYS = {
    "\x1b[A": Direction.UP,
    "\x1b[B": Direction.DOWN,
    "\x1b[C": Direction.RIGHT,
    "\x1b[D": Direction.LEFT,
    "\xe0H": Direction.UP,
    "\xe0P": Direction.DOWN,
    "\xe0M": Direction.RIGHT,
    "\xe0K": Direction.LEFT,
    "\x00H": Direction.UP,
    "\x00P": Direction.DOWN,
    "\x00M": Direction.RIGHT,
    "\x00K": Direction.LEFT,
    "k": Direction.UP,
    "j": Direction.DOWN,
    "l": Direction.RIGHT,
    "h": Direction.LEFT,
}

ACTION_KEYS = {
    "e": IntentType.EQUIP,
    "a": IntentType.ATTACK,
    "w": IntentType.ATTACK_WEAPON,
    "+": IntentType.HEAL,
    "x": IntentType.DISCARD,
    "X": IntentType.DISCARD_HAND,
    "f": IntentType.FILL,
    "r": IntentType.FLEE,
    "?": IntentType.HELP,
    "q": IntentType.QUIT,
    "\x03": IntentType.QUIT,  # Ctrl-C in raw mode
    "\x04": IntentType.QUIT,  # Ctrl-D
}

CONFIRM_KEYS = frozenset({"\r", "\n", " "})


def decode_key(key: str) -> Optional[KeyEvent]:
    """Decode one key as returned by click.getchar(). None if unbound."""
    if key in ARROW_KEYS:
        return KeyEvent(direction=ARROW_KEYS[key])
    if key in ACTION_KEYS:
        return KeyEvent(intent_type=ACTION_KEYS[key])
    if key in CONFIRM_KEYS:
        return KeyEvent(confirm=True)
    return None


def resolve_key(event: KeyEvent, selection: Selection, board: Board) -> InputResult:
    """Turn an action or confirm key into an intent against the cursor.

    Room actions need the cursor on a room card. Confirm fills the room
    from the draw pile marker and drops the hand from the hand row.
    """
    if event.confirm:
        if selection.zone == Zone.DRAW:
            return InputResult(intent=Intent(IntentType.FILL))
        if selection.zone == Zone.HAND:
            return InputResult(intent=Intent(IntentType.DISCARD_HAND))
        return InputResult(error="Choose an action for the selected card.")

    kind = event.intent_type
    if kind is None:
        return InputResult(error=INVALID_COMMAND)

    if kind in INDEXED_INTENTS:
        index = selection.room_index
        if index is None:
            return InputResult(error=NO_ROOM_CARD)
        if index >= len(board.table_pile):
            return InputResult(error=INVALID_INDEX)
        return InputResult(intent=Intent(kind, index))

    return InputResult(intent=Intent(kind))
