"""Tests for human input decoding."""

import random

import pytest
from scoundrel.play.input import (
    INVALID_COMMAND, INVALID_INDEX, NO_ROOM_CARD,
    InputResult, KeyEvent, decode_key, parse_command, resolve_key,
)
from scoundrel.play.selection import DRAW_SELECTION, NO_SELECTION, Direction, Selection, Zone
from scoundrel.simulation.cards import Card, Rank, Suit
from scoundrel.simulation.intents import Intent, IntentType
from scoundrel.simulation.state import Board


def make_board(room_size: int = 4) -> Board:
    board = Board(rng=random.Random(0))
    board.table_pile = [Card(Rank.TWO, suit) for suit in list(Suit)[:room_size]]
    return board


class TestParseCommand:
    """Tests for the line command shell."""

    @pytest.mark.parametrize("raw,kind", [
        ("e 1", IntentType.EQUIP),
        ("a 1", IntentType.ATTACK),
        ("w 1", IntentType.ATTACK_WEAPON),
        ("h 1", IntentType.HEAL),
        ("d 1", IntentType.DISCARD),
    ])
    def test_indexed_commands(self, raw, kind):
        result = parse_command(raw, room_size=4)
        assert result.error is None
        assert result.intent == Intent(kind, 1)

    @pytest.mark.parametrize("raw,kind", [
        ("f", IntentType.FILL),
        ("r", IntentType.FLEE),
        ("d", IntentType.DISCARD_HAND),
        ("h", IntentType.HELP),
        ("help", IntentType.HELP),
        ("q", IntentType.QUIT),
        ("quit", IntentType.QUIT),
    ])
    def test_bare_commands(self, raw, kind):
        assert parse_command(raw, room_size=4).intent == Intent(kind)

    def test_whitespace_and_case_tolerated(self):
        assert parse_command("  W   3 \n", room_size=4).intent == Intent(IntentType.ATTACK_WEAPON, 3)

    def test_index_out_of_range(self):
        result = parse_command("a 4", room_size=4)
        assert result.intent is None
        assert result.error == INVALID_INDEX

    def test_negative_index(self):
        assert parse_command("a -1", room_size=4).error == INVALID_INDEX

    def test_non_numeric_index(self):
        assert parse_command("e two", room_size=4).error == INVALID_INDEX

    @pytest.mark.parametrize("raw", ["", "x", "f 1", "a", "a 1 2", "run away"])
    def test_invalid_commands(self, raw):
        result = parse_command(raw, room_size=4)
        assert result.intent is None
        assert result.error == INVALID_COMMAND

    def test_quit_flag(self):
        assert parse_command("q", 4).quit
        assert not parse_command("f", 4).quit


class TestDecodeKey:
    """Tests for single key decoding."""

    @pytest.mark.parametrize("key,direction", [
        ("\x1b[A", Direction.UP),
        ("\x1b[B", Direction.DOWN),
        ("\x1b[C", Direction.RIGHT),
        ("\x1b[D", Direction.LEFT),
        ("\xe0K", Direction.LEFT),
        ("h", Direction.LEFT),
        ("l", Direction.RIGHT),
    ])
    def test_directions(self, key, direction):
        assert decode_key(key) == KeyEvent(direction=direction)

    def test_actions(self):
        assert decode_key("w") == KeyEvent(intent_type=IntentType.ATTACK_WEAPON)
        assert decode_key("x") == KeyEvent(intent_type=IntentType.DISCARD)
        assert decode_key("X") == KeyEvent(intent_type=IntentType.DISCARD_HAND)
        assert decode_key("\x03") == KeyEvent(intent_type=IntentType.QUIT)

    def test_confirm(self):
        assert decode_key("\r") == KeyEvent(confirm=True)

    def test_unbound(self):
        assert decode_key("z") is None


class TestResolveKey:
    """Tests for turning keys into intents against the cursor."""

    def test_room_action_uses_selected_index(self):
        board = make_board()
        event = KeyEvent(intent_type=IntentType.HEAL)
        result = resolve_key(event, Selection(Zone.ROOM, 2), board)
        assert result.intent == Intent(IntentType.HEAL, 2)

    def test_room_action_needs_room_selection(self):
        board = make_board()
        event = KeyEvent(intent_type=IntentType.ATTACK)
        assert resolve_key(event, DRAW_SELECTION, board).error == NO_ROOM_CARD
        assert resolve_key(event, NO_SELECTION, board).error == NO_ROOM_CARD

    def test_stale_index_rejected(self):
        board = make_board(room_size=1)
        event = KeyEvent(intent_type=IntentType.ATTACK)
        assert resolve_key(event, Selection(Zone.ROOM, 3), board).error == INVALID_INDEX

    def test_bare_action_ignores_cursor(self):
        board = make_board()
        result = resolve_key(KeyEvent(intent_type=IntentType.FLEE), NO_SELECTION, board)
        assert result.intent == Intent(IntentType.FLEE)

    def test_confirm_on_draw_pile_fills(self):
        result = resolve_key(KeyEvent(confirm=True), DRAW_SELECTION, make_board())
        assert result.intent == Intent(IntentType.FILL)

    def test_confirm_on_hand_discards_hand(self):
        result = resolve_key(KeyEvent(confirm=True), Selection(Zone.HAND, 0), make_board())
        assert result.intent == Intent(IntentType.DISCARD_HAND)

    def test_confirm_on_room_asks_for_action(self):
        result = resolve_key(KeyEvent(confirm=True), Selection(Zone.ROOM, 0), make_board())
        assert result.intent is None
        assert result.error


def test_input_result_defaults():
    result = InputResult()
    assert result.intent is None
    assert result.error is None
    assert not result.quit
