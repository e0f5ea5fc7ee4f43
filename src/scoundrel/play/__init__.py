"""Terminal frontends and the session loop."""

from scoundrel.play.display import StateRenderer, format_card
from scoundrel.play.rules import RuleExplainer
from scoundrel.play.input import InputResult, KeyEvent, decode_key, parse_command, resolve_key
from scoundrel.play.selection import Direction, Selection, Zone, clamp_selection, move_selection
from scoundrel.play.terminal import TerminalScreen, terminal_session
from scoundrel.play.frontends import CommandFrontend, Frontend, KeyFrontend
from scoundrel.play.session import PlaySession, SessionConfig, SessionResult

__all__ = [
    "StateRenderer",
    "format_card",
    "RuleExplainer",
    "InputResult",
    "KeyEvent",
    "decode_key",
    "parse_command",
    "resolve_key",
    "Direction",
    "Selection",
    "Zone",
    "clamp_selection",
    "move_selection",
    "TerminalScreen",
    "terminal_session",
    "CommandFrontend",
    "Frontend",
    "KeyFrontend",
    "PlaySession",
    "SessionConfig",
    "SessionResult",
]
