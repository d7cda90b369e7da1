"""Tests for the command-line interface."""

import argparse
import itertools

import pytest

from puzzle_trainer.cli.commands.play import play_command, resolve_answer
from puzzle_trainer.cli.main import build_parser, main


def _play_args(**overrides):
    fields = dict(game="switch", difficulty="easy", instructions=False, preview=False, seed=7)
    fields.update(overrides)
    return argparse.Namespace(**fields)


def _scripted_input(replies=(), answers=("1", "2", "3", "4")):
    """Reply to yes/no prompts from replies, and cycle through options otherwise."""
    replies = iter(replies)
    options = itertools.cycle(answers)
    prompts = []

    def _input(prompt):
        prompts.append(prompt)
        if prompt.rstrip().endswith("[y/N]:"):
            return next(replies)
        return next(options)

    _input.prompts = prompts
    return _input


class TestParser:
    def test_play_defaults(self):
        args = build_parser().parse_args(["play"])
        assert args.game == "geo-sudo"
        assert args.difficulty == "medium"
        assert args.seed is None
        assert not args.preview

    def test_rejects_unknown_difficulty(self):
        with pytest.raises(SystemExit):
            build_parser().parse_args(["play", "--difficulty", "insane"])

    def test_no_command_prints_help(self, capsys):
        assert main([]) == 1
        assert "usage" in capsys.readouterr().out


class TestInfoCommands:
    def test_games(self, capsys):
        assert main(["games"]) == 0
        out = capsys.readouterr().out
        assert "Geo Sudo (geo-sudo)" in out
        assert "Switch (switch)" in out
        assert "Rules:" in out

    def test_tiers_for_one_game(self, capsys):
        assert main(["tiers", "--game", "switch"]) == 0
        out = capsys.readouterr().out
        assert "Switch" in out
        assert "Geo Sudo" not in out
        assert "Expert" in out
        assert "12 levels to complete" in out


class TestResolveAnswer:
    def test_option_number(self):
        assert resolve_answer("2", ("a", "b", "c")) == "b"

    def test_out_of_range_passes_through(self):
        assert resolve_answer("9", ("a", "b")) == "9"

    def test_text_passes_through(self):
        assert resolve_answer(" 2143 ", ("1234", "2143")) == "2143"


class TestPlayCommand:
    """Tests for the interactive play loop."""

    def test_full_session_records_score(self, capsys):
        input_fn = _scripted_input(replies=["n"])

        assert play_command(_play_args(), input_fn=input_fn) == 0

        out = capsys.readouterr().out
        assert "All levels complete!" in out
        assert "[OK] Score recorded:" in out

    def test_preview_does_not_record(self, capsys):
        input_fn = _scripted_input(replies=["n"])

        assert play_command(_play_args(preview=True), input_fn=input_fn) == 0

        out = capsys.readouterr().out
        assert "Preview mode" in out
        assert "Score recorded" not in out

    def test_quit_abandons_session(self, capsys):
        input_fn = _scripted_input(answers=["q"])

        assert play_command(_play_args(), input_fn=input_fn) == 0

        out = capsys.readouterr().out
        assert "Session abandoned" in out
        assert "Score recorded" not in out

    def test_invalid_answer_reprompts(self, capsys):
        input_fn = _scripted_input(answers=["", "q"])

        assert play_command(_play_args(), input_fn=input_fn) == 0

        assert "[WARN] No answer selected" in capsys.readouterr().out
        assert len(input_fn.prompts) == 2

    def test_declined_instructions(self, capsys):
        input_fn = _scripted_input(replies=["n"])

        assert play_command(_play_args(instructions=True), input_fn=input_fn) == 0

        out = capsys.readouterr().out
        assert "Rules:" in out
        assert "Cancelled" in out

    def test_play_again_then_quit(self, capsys):
        input_fn = _scripted_input(replies=["y", "n"])

        assert play_command(_play_args(difficulty="easy"), input_fn=input_fn) == 0

        out = capsys.readouterr().out
        assert out.count("All levels complete!") == 2
        assert out.count("[OK] Score recorded:") == 1

    def test_end_of_input(self, capsys):
        def _input(prompt):
            raise EOFError

        assert play_command(_play_args(), input_fn=_input) == 1
        assert "Interrupted" in capsys.readouterr().out
