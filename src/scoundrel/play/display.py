"""Terminal display for board state."""

from __future__ import annotations

from typing import Optional, Sequence

from scoundrel.simulation.cards import Card
from scoundrel.simulation.state import Board
from scoundrel.play.selection import Selection, Zone


# Unicode card symbols
SUIT_SYMBOLS = {"H": "♥", "D": "♦", "C": "♣", "S": "♠"}

CURSOR_LEFT = ">"
CURSOR_RIGHT = "<"


def format_card(card: Card) -> str:
    """Format card with unicode suit symbol."""
    suit_symbol = SUIT_SYMBOLS.get(card.suit.value, card.suit.value)
    return f"{card.rank.value}{suit_symbol}"


def _mark(text: str, selected: bool) -> str:
    if selected:
        return f"{CURSOR_LEFT}{text}{CURSOR_RIGHT}"
    return f" {text} "


class StateRenderer:
    """Renders the board as plain text lines."""

    def render(
        self,
        board: Board,
        selection: Optional[Selection] = None,
        show_indices: bool = True,
    ) -> str:
        """Render draw count, room and hp/hand.

        Args:
            board: Board to render
            selection: Cursor to highlight, if any
            show_indices: Prefix room cards with the index commands expect
        """
        selection = selection or Selection()
        lines: list[str] = []

        left = f"left: {board.draw_count}"
        if selection.zone == Zone.DRAW:
            left = f"{CURSOR_LEFT}{left}{CURSOR_RIGHT}"
        lines.append(left)

        lines.append("room: " + self._render_pile(
            board.room, selection.room_index, show_indices
        ))

        hand = self._render_pile(board.hand, selection.hand_index, False)
        lines.append(f"{board.player_hp}hp  {hand}".rstrip())

        return "\n".join(lines)

    def _render_pile(
        self,
        cards: Sequence[Card],
        selected: Optional[int],
        show_indices: bool,
    ) -> str:
        if not cards:
            return "(empty)"

        parts: list[str] = []
        for i, card in enumerate(cards):
            text = format_card(card)
            if show_indices:
                text = f"[{i}] {text}"
            parts.append(_mark(text, i == selected))
        return "".join(parts).strip()
