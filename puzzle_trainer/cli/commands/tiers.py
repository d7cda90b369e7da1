"""CLI command for showing difficulty tiers."""

from puzzle_trainer.config import GAMES, describe_tier, get_tier
from puzzle_trainer.models import Difficulty
from puzzle_trainer.presenters import ConsolePresenter


def tiers_command(args) -> int:
    """Execute the tiers subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (always 0)
    """
    presenter = ConsolePresenter()
    games = [GAMES[args.game]] if args.game else list(GAMES.values())

    for game in games:
        presenter.show_info(f"\n{game.name}")
        presenter.show_info("=" * 50)
        for difficulty in Difficulty:
            tier = get_tier(game.family, difficulty)
            presenter.show_info(f"\n{difficulty.value.title()}")
            for line in describe_tier(tier):
                presenter.show_info(f"  {line}")

    return 0
