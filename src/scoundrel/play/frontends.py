"""Presentation adapters.

A frontend renders the board and reads the next intent. The session loop
only talks to this interface, so the line-command shell and the arrow-key
shell share one engine.
"""

from __future__ import annotations

from typing import Callable, Optional, Protocol

import click

from scoundrel.simulation.intents import GameStatus, Intent, IntentType
from scoundrel.simulation.state import Board
from scoundrel.play.display import StateRenderer
from scoundrel.play.input import InputResult, decode_key, parse_command, resolve_key
from scoundrel.play.rules import RuleExplainer
from scoundrel.play.selection import (
    NO_SELECTION,
    Selection,
    clamp_selection,
    move_selection,
)
from scoundrel.play.terminal import TerminalScreen


class Frontend(Protocol):
    """What the session needs from a presentation layer."""

    def render(self, board: Board, message: Optional[str] = None) -> None:
        ...

    def read_intent(self, board: Board) -> InputResult:
        ...

    def show(self, text: str) -> None:
        ...

    def help_text(self) -> str:
        ...

    def help_hint(self) -> str:
        ...


class CommandFrontend:
    """Line-oriented shell: one typed command per turn."""

    def __init__(
        self,
        screen: Optional[TerminalScreen] = None,
        output_fn: Callable[[str], None] = click.echo,
        input_fn: Callable[[str], str] = input,
        prompt: str = "> ",
    ):
        self.screen = screen
        self.output_fn = output_fn
        self.input_fn = input_fn
        self.prompt = prompt
        self.renderer = StateRenderer()
        self.explainer = RuleExplainer()

    def render(self, board: Board, message: Optional[str] = None) -> None:
        if self.screen:
            self.screen.clear()
        self.output_fn(self.renderer.render(board))
        if message:
            self.output_fn(message)

    def read_intent(self, board: Board) -> InputResult:
        """Read one command line. EOF or Ctrl-C count as quitting."""
        try:
            raw = self.input_fn(self.prompt)
        except (EOFError, KeyboardInterrupt):
            return InputResult(intent=Intent(IntentType.QUIT))
        return parse_command(raw, len(board.table_pile))

    def show(self, text: str) -> None:
        self.output_fn(text)

    def help_text(self) -> str:
        return self.explainer.explain_commands()

    def help_hint(self) -> str:
        return "Press h for help."


class KeyFrontend:
    """Arrow-key shell with a selection cursor."""

    def __init__(
        self,
        screen: Optional[TerminalScreen] = None,
        output_fn: Callable[[str], None] = click.echo,
        getchar_fn: Callable[[], str] = click.getchar,
    ):
        self.screen = screen
        self.output_fn = output_fn
        self.getchar_fn = getchar_fn
        self.renderer = StateRenderer()
        self.explainer = RuleExplainer()
        self.selection: Selection = NO_SELECTION

    def render(self, board: Board, message: Optional[str] = None) -> None:
        self.selection = clamp_selection(
            self.selection, len(board.table_pile), len(board.player_hand)
        )
        if self.screen:
            self.screen.clear()
        self.output_fn(self.renderer.render(board, self.selection, show_indices=False))
        if message:
            self.output_fn(message)

    def read_intent(self, board: Board) -> InputResult:
        """Read keys until one maps to an intent or an error.

        Cursor moves are handled here and re-rendered without involving
        the session.
        """
        while True:
            try:
                key = self.getchar_fn()
            except (EOFError, KeyboardInterrupt):
                return InputResult(intent=Intent(IntentType.QUIT))

            event = decode_key(key)
            if event is None:
                continue

            if event.direction is not None:
                self.selection = move_selection(
                    self.selection,
                    len(board.table_pile),
                    len(board.player_hand),
                    event.direction,
                )
                self.render(board)
                continue

            return resolve_key(event, self.selection, board)

    def show(self, text: str) -> None:
        self.output_fn(text)

    def help_text(self) -> str:
        return self.explainer.explain_keys()

    def help_hint(self) -> str:
        # h moves the cursor in this mode
        return "Press ? for help."


def banner(status: GameStatus, board: Board) -> str:
    """End-of-game line for status."""
    if status == GameStatus.VICTORY:
        return f"=== Victory === ({board.player_hp}hp left)"
    if status == GameStatus.DEFEAT:
        return "=== Defeated ==="
    return ""
