"""Rule and control explanations shown to the player."""

from __future__ import annotations

from scoundrel.simulation.state import Board


COMMAND_HELP = [
    ("h", "Show this help message"),
    ("e <index>", "Equip weapon from table pile at index"),
    ("a <index>", "Attack without weapon at table pile index"),
    ("w <index>", "Attack with equipped weapon at table pile index"),
    ("r", "Run from the room, putting it at the back of the draw pile"),
    ("h <index>", "Heal using card at table pile index"),
    ("d <index>", "Discard card from table pile at index"),
    ("d", "Discard your entire hand"),
    ("f", "Fill the room with cards from draw pile"),
    ("q", "Quit the game"),
]

KEY_HELP = [
    ("arrows / hjkl", "Move the cursor"),
    ("e", "Equip the selected room card"),
    ("a", "Attack the selected room card bare-handed"),
    ("w", "Attack the selected room card with your weapon"),
    ("+", "Heal with the selected room card"),
    ("x", "Discard the selected room card"),
    ("X", "Discard your entire hand"),
    ("f / enter on draw pile", "Fill the room"),
    ("r", "Run from the room"),
    ("?", "Show this help"),
    ("q", "Quit the game"),
]


class RuleExplainer:
    """Explains the game and its controls."""

    def explain_rules(self, board: Board) -> str:
        """Generate condensed rule summary."""
        lines: list[str] = []

        lines.append("=== Scoundrel ===")
        lines.append("")
        lines.append("Goal: Clear the draw pile and the room without dropping to 0hp")
        lines.append(f"Setup: {board.draw_count} cards, {board.player_hp}hp, "
                     f"rooms of {board.room_size}")
        lines.append("Weapons: A monster's value above your weapon's is taken as damage")
        lines.append("Healing: Gain a card's full value in hp")

        return "\n".join(lines)

    def explain_commands(self) -> str:
        return self._table("Commands:", COMMAND_HELP)

    def explain_keys(self) -> str:
        return self._table("Keys:", KEY_HELP)

    def _table(self, title: str, rows: list[tuple[str, str]]) -> str:
        width = max(len(key) for key, _ in rows)
        lines = [title]
        for key, description in rows:
            lines.append(f"  {key.ljust(width)}  {description}")
        return "\n".join(lines)
