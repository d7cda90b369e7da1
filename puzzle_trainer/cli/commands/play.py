"""CLI command for playing a timed session in the terminal."""

import logging

from puzzle_trainer.config import create_default_config, get_game
from puzzle_trainer.exceptions import InvalidSubmission, PuzzleTrainerException
from puzzle_trainer.models import Stage, SubmissionOutcome
from puzzle_trainer.orchestration import LevelController
from puzzle_trainer.presenters import ConsolePresenter
from puzzle_trainer.services import CooperativeScheduler, create_generator_for_game

logger = logging.getLogger(__name__)

QUIT_WORDS = {"q", "quit", "exit"}


def resolve_answer(raw: str, candidates) -> str:
    """Map a typed option number (1-based) to its candidate; pass anything else through."""
    text = raw.strip()
    if text.isdigit():
        index = int(text) - 1
        if 0 <= index < len(candidates):
            return candidates[index]
    return text


def play_command(args, input_fn=input) -> int:
    """Execute the play subcommand.

    Args:
        args: Parsed command-line arguments
        input_fn: Line reader (injectable for tests)

    Returns:
        Exit code (0 = success, 1 = failure)
    """
    presenter = ConsolePresenter()

    try:
        config = create_default_config(
            game_id=args.game,
            difficulty=args.difficulty,
            show_instructions=args.instructions,
            preview_mode=args.preview,
            rng_seed=args.seed,
        )
    except ValueError as e:
        presenter.show_error(str(e))
        return 1

    game = get_game(config.game_id)
    scheduler = CooperativeScheduler()

    def report_score(total_score: float, total_time_taken: int) -> None:
        presenter.show_info(f"[OK] Score recorded: {total_score:.2f} in {total_time_taken}s")

    controller = LevelController(
        generator=create_generator_for_game(config.game_id),
        presenter=presenter,
        scheduler=scheduler,
        config=config,
        on_complete=report_score,
    )

    presenter.show_info(f"{game.name} - {game.description}")
    presenter.show_info("=" * 50)
    if config.preview_mode:
        presenter.show_warning("Preview mode: the score will not be recorded")

    try:
        controller.configure()

        if controller.stage is Stage.INSTRUCTIONS:
            presenter.show_info("\nRules:")
            for rule in game.rules:
                presenter.show_info(f"  - {rule}")
            reply = input_fn("\nI understand the rules [y/N]: ").strip().lower()
            if reply not in ("y", "yes"):
                presenter.show_info("Cancelled")
                controller.back_to_config()
                return 0
            controller.acknowledge_instructions()
            controller.start()

        while True:
            while controller.stage is Stage.PLAY:
                scheduler.run_pending()
                if controller.stage is not Stage.PLAY:
                    break
                _play_turn(controller, presenter, input_fn)

            if controller.stage is not Stage.REPORT:
                return 0

            reply = input_fn("\nPlay again? [y/N]: ").strip().lower()
            if reply in ("y", "yes"):
                controller.play_again()
                continue
            controller.finish()
            return 0

    except (KeyboardInterrupt, EOFError):
        presenter.show_info("\nInterrupted")
        return 1
    except PuzzleTrainerException as e:
        logger.error(f"Session failed: {e}")
        presenter.show_error(str(e))
        return 1
    finally:
        controller.teardown()


def _play_turn(controller: LevelController, presenter: ConsolePresenter, input_fn) -> None:
    puzzle = controller.puzzle
    remaining = controller.poll()
    if controller.stage is not Stage.PLAY:
        return

    raw = input_fn(f"\n[{remaining}s] Your answer (1-{len(puzzle.candidates)}, q to quit): ")
    if raw.strip().lower() in QUIT_WORDS:
        presenter.show_info("Session abandoned")
        controller.back_to_config()
        return

    try:
        outcome = controller.submit(resolve_answer(raw, puzzle.candidates))
    except InvalidSubmission as e:
        presenter.show_warning(str(e))
        return

    if outcome is SubmissionOutcome.EXPIRED:
        logger.debug("Answer arrived after the level expired")
