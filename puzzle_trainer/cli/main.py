"""Main CLI entry point for puzzle_trainer."""

import argparse
import logging
import sys

from puzzle_trainer import __version__
from puzzle_trainer.cli.commands import games, play, tiers
from puzzle_trainer.config import GAMES
from puzzle_trainer.models import Difficulty


def build_parser() -> argparse.ArgumentParser:
    """Build the argument parser with all subcommands."""
    parser = argparse.ArgumentParser(
        prog="puzzle-trainer",
        description="Timed cognitive puzzles with levels, penalties and scoring",
        epilog="Use 'puzzle-trainer <command> --help' for command-specific help",
    )
    parser.add_argument("--version", action="version", version=f"%(prog)s {__version__}")
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Show debug logging",
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # puzzle-trainer play
    play_parser = subparsers.add_parser(
        "play",
        help="Play a timed session",
        description="Play a bounded run of timed puzzle levels in the terminal",
    )
    play_parser.add_argument(
        "--game",
        choices=sorted(GAMES),
        default="geo-sudo",
        help="Game to play (default: geo-sudo)",
    )
    play_parser.add_argument(
        "--difficulty",
        choices=[d.value for d in Difficulty],
        default="medium",
        help="Difficulty tier (default: medium)",
    )
    play_parser.add_argument(
        "--instructions",
        action="store_true",
        help="Show the rules and ask for acknowledgement before playing",
    )
    play_parser.add_argument(
        "--preview",
        action="store_true",
        help="Preview mode: play without reporting the score",
    )
    play_parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="Random seed for reproducible puzzles",
    )

    # puzzle-trainer tiers
    tiers_parser = subparsers.add_parser(
        "tiers",
        help="Show difficulty tiers",
        description="List level counts, multipliers and penalties for each tier",
    )
    tiers_parser.add_argument(
        "--game",
        choices=sorted(GAMES),
        default=None,
        help="Only show tiers for this game",
    )

    # puzzle-trainer games
    subparsers.add_parser(
        "games",
        help="List available games",
        description="List the games in the catalogue with their rules",
    )

    return parser


def main(argv=None):
    """Main CLI entry point with subcommands."""
    parser = build_parser()
    args = parser.parse_args(argv)

    if args.verbose:
        logging.basicConfig(
            level=logging.DEBUG,
            format="%(asctime)s %(levelname)s %(name)s: %(message)s",
        )

    # Dispatch to appropriate command
    if args.command == "play":
        return play.play_command(args)
    elif args.command == "tiers":
        return tiers.tiers_command(args)
    elif args.command == "games":
        return games.games_command(args)
    else:
        parser.print_help()
        return 1


if __name__ == "__main__":
    sys.exit(main())
