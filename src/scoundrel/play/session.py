"""Play session management."""

from __future__ import annotations

import logging
import random
from contextlib import nullcontext
from dataclasses import dataclass
from typing import Optional

from scoundrel.simulation.cards import is_high_diamond
from scoundrel.simulation.intents import GameStatus, IntentType, apply_intent, check_status
from scoundrel.simulation.state import Board, ROOM_SIZE, STARTING_HP
from scoundrel.play.frontends import CommandFrontend, Frontend, KeyFrontend, banner
from scoundrel.play.rules import RuleExplainer
from scoundrel.play.terminal import TerminalScreen, terminal_session

logger = logging.getLogger(__name__)

MODES = ("command", "keys")


@dataclass
class SessionConfig:
    """Configuration for a play session."""

    mode: str = "command"  # command, keys
    seed: Optional[int] = None
    starting_hp: int = STARTING_HP
    room_size: int = ROOM_SIZE
    clear_screen: bool = True
    show_rules: bool = True

    def __post_init__(self):
        """Generate seed if not provided."""
        if self.seed is None:
            self.seed = random.randint(0, 2**32 - 1)
        if self.mode not in MODES:
            raise ValueError(f"Unknown mode {self.mode!r}, expected one of {MODES}")


@dataclass
class SessionResult:
    """How a session ended."""

    outcome: str  # victory, defeat, quit
    seed: int
    hp: int
    turns: int
    cards_left: int


class PlaySession:
    """Runs one game: setup, then render/read/apply until it ends."""

    def __init__(
        self,
        config: SessionConfig,
        frontend: Optional[Frontend] = None,
        screen: Optional[TerminalScreen] = None,
    ):
        self.config = config
        self.seed = config.seed
        self.rng = random.Random(self.seed)
        self.explainer = RuleExplainer()

        if frontend is None:
            screen = screen or TerminalScreen(
                clear_each_frame=config.clear_screen,
                hide_cursor=config.mode == "keys",
            )
            frontend = build_frontend(config.mode, screen)
        self.frontend = frontend
        self.screen = screen

        self.board = Board(
            rng=self.rng,
            starting_hp=config.starting_hp,
            room_size=config.room_size,
        )
        self.turns = 0
        self.history: list[dict] = []

    def _initialize_board(self) -> None:
        """Fresh shuffled deck minus high diamonds, first room dealt."""
        self.board.setup()
        self.board.filter_draw_pile(is_high_diamond)
        self.board.fill_room()
        logger.info(f"New game, seed {self.seed}, {self.board.total_cards()} cards")

    def _record(self, intent_type: IntentType, index: Optional[int], changed: bool) -> None:
        self.history.append({
            "turn": self.turns,
            "intent": intent_type.value,
            "index": index,
            "changed": changed,
            "hp": self.board.player_hp,
        })

    def run(self) -> SessionResult:
        """Run the session until victory, defeat or quit."""
        self._initialize_board()

        scope = terminal_session(self.screen) if self.screen else nullcontext()
        with scope:
            outcome = self._loop()

        return SessionResult(
            outcome=outcome,
            seed=self.seed,
            hp=self.board.player_hp,
            turns=self.turns,
            cards_left=self.board.draw_count + len(self.board.table_pile),
        )

    def _loop(self) -> str:
        message: Optional[str] = None
        if self.config.show_rules:
            message = "\n".join([
                self.explainer.explain_rules(self.board),
                f"Seed: {self.seed} (use --seed {self.seed} to replay)",
                self.frontend.help_hint(),
            ])

        while True:
            # Outcome is only checked between actions
            status = check_status(self.board)
            if status != GameStatus.PLAYING:
                self.frontend.render(self.board)
                self.frontend.show(banner(status, self.board))
                logger.info(f"Game over: {status.value} after {self.turns} turns")
                return status.value

            self.frontend.render(self.board, message)
            message = None

            result = self.frontend.read_intent(self.board)
            if result.error:
                message = result.error
                continue

            intent = result.intent
            if intent is None:
                continue

            if intent.type == IntentType.QUIT:
                self.frontend.show("Quitting.")
                return "quit"

            if intent.type == IntentType.HELP:
                message = self.frontend.help_text()
                continue

            changed = apply_intent(self.board, intent)
            self.turns += 1
            self._record(intent.type, intent.index, changed)


def build_frontend(mode: str, screen: Optional[TerminalScreen] = None) -> Frontend:
    """Frontend for a session mode."""
    if mode == "keys":
        return KeyFrontend(screen=screen)
    return CommandFrontend(screen=screen)
