"""Tests for intent dispatch and game status."""

import random

import pytest
from scoundrel.simulation.cards import Card, Rank, Suit
from scoundrel.simulation.intents import (
    GameStatus, Intent, IntentType, apply_intent, check_status,
)
from scoundrel.simulation.state import Board


def c(rank: str, suit: str = "S") -> Card:
    return Card(rank=Rank(rank), suit=Suit(suit))


def make_board(draw=(), room=(), hand=(), hp: int = 20) -> Board:
    board = Board(rng=random.Random(3))
    board.draw_pile = list(draw)
    board.table_pile = list(room)
    board.player_hand = list(hand)
    board.player_hp = hp
    return board


class TestIntent:
    """Tests for Intent construction."""

    def test_indexed_intent_requires_index(self):
        with pytest.raises(ValueError):
            Intent(IntentType.ATTACK)

    def test_bare_intent(self):
        intent = Intent(IntentType.FLEE)
        assert intent.index is None

    def test_intent_is_frozen(self):
        intent = Intent(IntentType.HEAL, 1)
        with pytest.raises(AttributeError):
            intent.index = 2  # type: ignore


class TestApplyIntent:
    """Each intent reaches the matching board operation."""

    def test_equip(self):
        board = make_board(room=[c("7", "D")])
        assert apply_intent(board, Intent(IntentType.EQUIP, 0))
        assert board.weapon == c("7", "D")

    def test_attack(self):
        board = make_board(room=[c("K")])
        apply_intent(board, Intent(IntentType.ATTACK, 0))
        assert board.player_hp == 7

    def test_attack_weapon(self):
        board = make_board(room=[c("A")], hand=[c("10", "D")])
        apply_intent(board, Intent(IntentType.ATTACK_WEAPON, 0))
        assert board.player_hp == 16

    def test_heal(self):
        board = make_board(room=[c("9", "H")])
        apply_intent(board, Intent(IntentType.HEAL, 0))
        assert board.player_hp == 29

    def test_discard(self):
        board = make_board(room=[c("9", "H")])
        apply_intent(board, Intent(IntentType.DISCARD, 0))
        assert board.discard == (c("9", "H"),)

    def test_discard_hand(self):
        board = make_board(hand=[c("5", "D")])
        assert apply_intent(board, Intent(IntentType.DISCARD_HAND))
        assert board.hand == ()
        assert not apply_intent(board, Intent(IntentType.DISCARD_HAND))

    def test_fill(self):
        board = make_board(draw=[c("2"), c("3")])
        assert apply_intent(board, Intent(IntentType.FILL))
        assert len(board.room) == 2
        assert not apply_intent(board, Intent(IntentType.FILL))

    def test_flee(self):
        board = make_board(draw=[c("6"), c("7")], room=[c("2"), c("3")])
        assert apply_intent(board, Intent(IntentType.FLEE))
        # Room of 4 takes the two drawn cards and both returned ones
        assert set(board.room) == {c("2"), c("3"), c("6"), c("7")}
        assert board.draw_count == 0

    def test_flee_with_empty_draw_pile_counts_as_change(self):
        """Cards go back and come straight out again, whatever the shuffle."""
        for seed in range(20):
            board = make_board(room=[c("2"), c("3")])
            board.rng.seed(seed)
            assert apply_intent(board, Intent(IntentType.FLEE))
            assert set(board.room) == {c("2"), c("3")}

    def test_flee_with_empty_room_refills(self):
        board = make_board(draw=[c("4")])
        assert apply_intent(board, Intent(IntentType.FLEE))
        assert board.room == (c("4"),)

    def test_flee_with_nothing_left_is_noop(self):
        assert not apply_intent(make_board(), Intent(IntentType.FLEE))

    def test_out_of_range_index_is_noop(self):
        board = make_board(room=[c("K")])
        assert not apply_intent(board, Intent(IntentType.ATTACK, 5))
        assert board.player_hp == 20

    @pytest.mark.parametrize("kind", [IntentType.QUIT, IntentType.HELP])
    def test_non_board_intents(self, kind):
        board = make_board(room=[c("K")])
        assert not apply_intent(board, Intent(kind))
        assert board.room == (c("K"),)


class TestCheckStatus:
    """Tests for victory and defeat detection."""

    def test_playing(self):
        assert check_status(make_board(room=[c("2")])) == GameStatus.PLAYING

    def test_defeat_at_zero_hp(self):
        assert check_status(make_board(room=[c("2")], hp=0)) == GameStatus.DEFEAT

    def test_victory_when_draw_and_room_empty(self):
        board = make_board(hand=[c("5", "D")])
        assert check_status(board) == GameStatus.VICTORY

    def test_not_victory_with_cards_in_draw_pile(self):
        assert check_status(make_board(draw=[c("2")])) == GameStatus.PLAYING

    def test_defeat_wins_over_empty_board(self):
        assert check_status(make_board(hp=0)) == GameStatus.DEFEAT

    def test_killing_blow_on_last_card_is_defeat(self):
        board = make_board(room=[c("A")], hp=10)
        apply_intent(board, Intent(IntentType.ATTACK, 0))
        assert check_status(board) == GameStatus.DEFEAT
