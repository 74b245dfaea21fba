"""Tests for the console display."""

import random

from conftest import down, up
from klondike.game.dealer import initialize_game
from klondike.models.card import Rank, Suit
from klondike.models.game_state import GameState
from klondike.utils.logger import CLEAR_SCREEN, FACE_DOWN, RED, GameDisplay


class TestGameDisplay:
    """Tests for GameDisplay class."""

    def test_face_down_masked(self):
        display = GameDisplay(color=False)
        assert display.format_card(down(Suit.HEARTS, Rank.ACE)) == FACE_DOWN

    def test_face_up_cell(self):
        display = GameDisplay(color=False)
        assert display.format_card(up(Suit.SPADES, Rank.FIVE)) == "[ 5♠]"
        assert display.format_card(up(Suit.CLUBS, Rank.TEN)) == "[10♣]"

    def test_red_colored(self):
        display = GameDisplay(color=True)
        assert display.format_card(up(Suit.HEARTS, Rank.FIVE)).startswith(RED)
        assert RED not in display.format_card(up(Suit.CLUBS, Rank.FIVE))

    def test_tableau_columns(self):
        state = initialize_game(random.Random(4))
        lines = GameDisplay(color=False).tableau_lines(state)

        assert lines[0].split() == ["T1", "T2", "T3", "T4", "T5", "T6", "T7"]
        # One row per card of the tallest column
        assert len(lines) == 1 + 7
        assert lines[-1].strip().startswith("[")

    def test_print_state(self, capsys):
        state = GameState(
            stock=[down(Suit.CLUBS, Rank.TWO)],
            waste=[up(Suit.HEARTS, r) for r in (Rank.ACE, Rank.TWO, Rank.THREE, Rank.FOUR)],
        )
        GameDisplay(color=False).print_state(state)
        out = capsys.readouterr().out

        assert "Foundations:" in out
        assert "[1 cards]" in out
        # Only the top three waste cards are shown
        assert "[ A♥]" not in out
        assert "[ 2♥] [ 3♥] [ 4♥]" in out

    def test_empty_piles(self, capsys):
        GameDisplay(color=False).print_state(GameState())
        out = capsys.readouterr().out
        assert out.count("Empty") == 2

    def test_clear_screen(self, capsys):
        GameDisplay(clear_screen=True).print_state(GameState())
        assert capsys.readouterr().out.startswith(CLEAR_SCREEN)
        GameDisplay(clear_screen=False).print_state(GameState())
        assert CLEAR_SCREEN not in capsys.readouterr().out
