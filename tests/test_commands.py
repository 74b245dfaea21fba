"""Tests for command parsing."""

import pytest

from klondike.commands import CommandType, parse_command, read_command


class TestParseCommand:
    """Tests for parse_command function."""

    @pytest.mark.parametrize("line", ["draw", "d", "dr", "DRAW", "  draw  "])
    def test_draw(self, line):
        assert parse_command(line).type == CommandType.DRAW

    @pytest.mark.parametrize("line", ["quit", "q", "exit", "Exit"])
    def test_quit(self, line):
        assert parse_command(line).type == CommandType.QUIT

    @pytest.mark.parametrize("line", ["help", "h", "?"])
    def test_help(self, line):
        assert parse_command(line).type == CommandType.HELP

    def test_move(self):
        command = parse_command("move W T3")
        assert command.type == CommandType.MOVE
        assert command.source == "W"
        assert command.destination == "T3"

    def test_move_alias_and_case(self):
        """Test identifiers are upper-cased."""
        command = parse_command("m t1 f1")
        assert command.type == CommandType.MOVE
        assert (command.source, command.destination) == ("T1", "F1")

    @pytest.mark.parametrize("line", ["move", "move W", "move W T1 T2"])
    def test_move_wrong_arity(self, line):
        command = parse_command(line)
        assert command.type == CommandType.INVALID
        assert "Usage" in command.error

    def test_empty(self):
        command = parse_command("   ")
        assert command.type == CommandType.INVALID
        assert command.error

    def test_unknown(self):
        command = parse_command("shuffle")
        assert command.type == CommandType.INVALID
        assert "shuffle" in command.error

    def test_draw_with_arguments(self):
        assert parse_command("draw 3").type == CommandType.INVALID


class TestReadCommand:
    """Tests for read_command function."""

    def test_reads_line(self, monkeypatch):
        monkeypatch.setattr("builtins.input", lambda prompt: "move W F2")
        command = read_command()
        assert command.type == CommandType.MOVE
        assert command.destination == "F2"

    def test_eof_is_quit(self, monkeypatch):
        def _eof(prompt):
            raise EOFError

        monkeypatch.setattr("builtins.input", _eof)
        assert read_command().type == CommandType.QUIT
