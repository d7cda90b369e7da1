"""CLI command for listing the game catalogue."""

from puzzle_trainer.config import GAMES
from puzzle_trainer.presenters import ConsolePresenter


def games_command(args) -> int:
    """Execute the games subcommand.

    Args:
        args: Parsed command-line arguments

    Returns:
        Exit code (always 0)
    """
    presenter = ConsolePresenter()

    for game in GAMES.values():
        presenter.show_info(f"\n{game.name} ({game.id})")
        presenter.show_info("-" * 50)
        presenter.show_info(game.description)
        presenter.show_info(
            f"Category: {game.category}  |  About {game.estimated_time_min} min"
        )
        presenter.show_info("\nRules:")
        for rule in game.rules:
            presenter.show_info(f"  - {rule}")

    return 0
