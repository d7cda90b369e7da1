"""Level progression controller: the config -> instructions -> play -> report state machine."""

from __future__ import annotations

import logging
import random
import time
from collections.abc import Callable

from puzzle_trainer.config import TrainerConfig, create_default_config, get_tier
from puzzle_trainer.exceptions import GenerationError, InvalidSubmission, StageTransitionError
from puzzle_trainer.interfaces import (
    CompletionCallback,
    GamePresenter,
    PuzzleGenerator,
    Scheduler,
)
from puzzle_trainer.models import (
    Difficulty,
    DifficultyTier,
    LevelReward,
    Puzzle,
    Session,
    SessionOutcome,
    SessionReport,
    Stage,
    SubmissionOutcome,
)
from puzzle_trainer.presenters import NullPresenter
from puzzle_trainer.services import (
    CooperativeScheduler,
    PenaltyTimer,
    build_report,
    level_reward,
    total_score,
    validate_answer,
)
from puzzle_trainer.services.scoring_service import time_spent_seconds

logger = logging.getLogger(__name__)


class LevelController:
    """Orchestrate generator, timer and scoring across a bounded run of levels.

    The controller is the only owner of the Session. Generator, timer and
    scoring are queried and return new values; none of them mutate it.
    """

    def __init__(
        self,
        generator: PuzzleGenerator,
        presenter: GamePresenter | None = None,
        scheduler: Scheduler | None = None,
        config: TrainerConfig | None = None,
        on_complete: CompletionCallback | None = None,
        player_id: object = None,
        clock: Callable[[], float] = time.monotonic,
    ):
        """Initialize the controller in the config stage.

        Args:
            generator: Puzzle generation strategy
            presenter: Output presenter (defaults to a NullPresenter)
            scheduler: Tick scheduler (defaults to a CooperativeScheduler on clock)
            config: Host configuration (defaults to create_default_config())
            on_complete: Receives (total_score, total_time_taken) on finish
            player_id: Opaque player identifier, passed through untouched
            clock: Time source in seconds
        """
        self.config = config or create_default_config()
        self.generator = generator
        self.presenter = presenter or NullPresenter()
        self.clock = clock
        self.scheduler = scheduler or CooperativeScheduler(clock)
        self.timer = PenaltyTimer(self.scheduler, clock, self.config.tick_interval)
        self.on_complete = on_complete
        self._player_id = player_id

        self._stage = Stage.CONFIG
        self._tier = get_tier(generator.family, self.config.difficulty)
        self._show_instructions = self.config.show_instructions
        self._instructions_acknowledged = False
        self._session: Session | None = None
        self._puzzle: Puzzle | None = None
        self._entered: tuple[Session, int] | None = None
        self._ended_at: float | None = None
        self._remaining = 0
        self._seeds = (
            random.Random(self.config.rng_seed) if self.config.rng_seed is not None else None
        )

    # ------------------------------------------------------------------
    # Read-only state
    # ------------------------------------------------------------------

    @property
    def stage(self) -> Stage:
        return self._stage

    @property
    def session(self) -> Session | None:
        return self._session

    @property
    def puzzle(self) -> Puzzle | None:
        """Puzzle for the current level (None outside play)."""
        return self._puzzle if self._stage is Stage.PLAY else None

    @property
    def tier(self) -> DifficultyTier:
        return self._tier

    @property
    def player_id(self) -> object:
        return self._player_id

    @property
    def preview_mode(self) -> bool:
        return self.config.preview_mode

    @property
    def instructions_acknowledged(self) -> bool:
        return self._instructions_acknowledged

    @property
    def remaining_seconds(self) -> int:
        """Last published remaining time for the current level."""
        return self._remaining if self._stage is Stage.PLAY else 0

    @property
    def report(self) -> SessionReport | None:
        """Summary of the current session, or None if there is none.

        Once the report stage is reached the end time is fixed, so every
        read (and the completion callback) sees the same total time.
        """
        if self._session is None:
            return None
        now = self._ended_at if self._ended_at is not None else self.clock()
        return build_report(self._session, self.generator.family, now, self._player_id)

    # ------------------------------------------------------------------
    # Lifecycle transitions
    # ------------------------------------------------------------------

    def configure(
        self,
        difficulty: Difficulty | DifficultyTier | str | None = None,
        show_instructions: bool | None = None,
    ) -> Stage:
        """Leave the config stage with the chosen tier.

        Goes to instructions if requested and not yet acknowledged,
        otherwise straight into play.

        Args:
            difficulty: Difficulty (or a full tier); defaults to the current selection
            show_instructions: Whether to show the rules first

        Returns:
            The stage entered
        """
        self._require_stage(Stage.CONFIG, "configure")

        if isinstance(difficulty, DifficultyTier):
            self._tier = difficulty
        elif difficulty is not None:
            self._tier = get_tier(self.generator.family, difficulty)
        if show_instructions is not None:
            self._show_instructions = show_instructions

        if self._show_instructions and not self._instructions_acknowledged:
            self._transition(Stage.INSTRUCTIONS)
        else:
            self._begin_session()
        return self._stage

    def acknowledge_instructions(self, agreed: bool = True) -> None:
        """Tick (or untick) the 'I understand the rules' box."""
        self._require_stage(Stage.INSTRUCTIONS, "acknowledge instructions")
        self._instructions_acknowledged = agreed

    def start(self) -> Stage:
        """Move from instructions into play.

        Raises:
            StageTransitionError: If the instructions were not acknowledged
        """
        self._require_stage(Stage.INSTRUCTIONS, "start")
        if not self._instructions_acknowledged:
            raise StageTransitionError("Instructions must be acknowledged before playing")
        self._begin_session()
        return self._stage

    def back_to_config(self) -> None:
        """Return to the config stage, discarding the session without reporting it."""
        if self._stage is Stage.CONFIG:
            return
        self.timer.cancel()
        self._discard_session()
        self._transition(Stage.CONFIG)

    def play_again(self) -> Stage:
        """Start a fresh session at level 1 from the report stage."""
        self._require_stage(Stage.REPORT, "play again")
        self.timer.cancel()
        self._begin_session()
        return self._stage

    def finish(self) -> SessionReport | None:
        """Leave the report stage, reporting the score once if eligible.

        The completion callback runs only when the session finished every
        level or timed out, and never in preview mode.

        Returns:
            The final report
        """
        self._require_stage(Stage.REPORT, "finish")
        self.timer.cancel()
        report = self.report
        session = self._session

        if session is not None and session.is_terminal and not self.preview_mode:
            if self.on_complete is not None:
                logger.info(
                    f"Reporting score {report.total_score:.2f} "
                    f"({report.total_time_taken}s, {report.outcome.value})"
                )
                self.on_complete(report.total_score, report.total_time_taken)
        elif session is not None:
            logger.info(
                f"Score not reported (outcome={session.outcome.value}, "
                f"preview={self.preview_mode})"
            )

        self._discard_session()
        self._transition(Stage.CONFIG)
        return report

    def teardown(self) -> None:
        """Cancel the timer and drop the session. Safe to call repeatedly."""
        self.timer.cancel()
        self._discard_session()
        self._stage = Stage.CONFIG

    # ------------------------------------------------------------------
    # Play
    # ------------------------------------------------------------------

    def submit(self, answer: str | None) -> SubmissionOutcome:
        """Submit an answer for the current level's target.

        Remaining time is recomputed first; if it is already 0 the level
        expires and the answer is not scored.

        Args:
            answer: One of the current puzzle's candidates

        Returns:
            CORRECT, INCORRECT or EXPIRED

        Raises:
            InvalidSubmission: If the answer is empty or not a candidate (not counted)
            StageTransitionError: If not in the play stage
        """
        self._require_stage(Stage.PLAY, "submit an answer")
        puzzle = self._puzzle
        session = self._session
        try:
            answer = validate_answer(puzzle, answer)
        except InvalidSubmission as e:
            logger.warning(f"Rejected submission on level {session.level}: {e}")
            raise

        self.timer.check()
        if self.timer.expired:
            return SubmissionOutcome.EXPIRED

        if puzzle.is_correct(answer):
            self._complete_level(session)
            return SubmissionOutcome.CORRECT

        tier = session.tier
        session.wrong_answers_this_level += 1
        session.accumulated_penalty_seconds += tier.time_penalty_seconds
        logger.debug(
            f"Wrong answer on level {session.level} "
            f"({session.wrong_answers_this_level} so far, -{tier.time_penalty_seconds}s)"
        )
        self.presenter.show_penalty(tier.time_penalty_seconds, self.timer.remaining())
        self.timer.check()
        return SubmissionOutcome.INCORRECT

    def poll(self) -> int:
        """Recompute remaining time now (for hosts that poll instead of ticking).

        Returns:
            Remaining seconds, or 0 outside play
        """
        if self._stage is not Stage.PLAY:
            return 0
        return self.timer.check()

    # ------------------------------------------------------------------
    # Internals
    # ------------------------------------------------------------------

    def _require_stage(self, stage: Stage, action: str) -> None:
        if self._stage is not stage:
            raise StageTransitionError(
                f"Cannot {action} in the {self._stage.value} stage (requires {stage.value})"
            )

    def _transition(self, stage: Stage) -> None:
        logger.debug(f"Stage {self._stage.value} -> {stage.value}")
        self._stage = stage
        if self._session is not None:
            self._session.stage = stage
        self.presenter.show_stage(stage)

    def _discard_session(self) -> None:
        self.timer.release()
        self._session = None
        self._ended_at = None
        self._puzzle = None
        self._entered = None
        self._remaining = 0

    def _next_seed(self) -> int | None:
        if self._seeds is None:
            return None
        return self._seeds.randrange(2**32)

    def _begin_session(self) -> None:
        self._discard_session()
        self._session = Session(tier=self._tier, started_at=self.clock())
        logger.info(f"Session started: {self.generator.family.value} / {self._tier.name}")
        self._transition(Stage.PLAY)
        self._enter_level(1)

    def _enter_level(self, level: int) -> None:
        session = self._session
        if self._entered is not None and self._entered[0] is session and self._entered[1] == level:
            return
        self._entered = (session, level)
        self.timer.cancel()

        try:
            puzzle = self.generator.generate(session.tier, level, seed=self._next_seed())
        except GenerationError as e:
            logger.error(f"Puzzle generation failed for level {level}: {e}")
            self.presenter.show_error(f"Could not generate level {level}: {e}")
            session.outcome = SessionOutcome.ABORTED
            self._enter_report()
            return

        session.level = level
        session.wrong_answers_this_level = 0
        session.accumulated_penalty_seconds = 0
        session.level_start_timestamp = self.clock()
        self._puzzle = puzzle
        self.presenter.show_puzzle(puzzle, session.tier.level_count)

        self._remaining = self.timer.start(
            session.level_start_timestamp,
            puzzle.time_limit_seconds,
            penalty_source=lambda: session.accumulated_penalty_seconds,
            on_tick=self._on_tick,
            on_expire=self._on_time_expired,
        )

    def _complete_level(self, session: Session) -> None:
        self.timer.cancel()
        spent = time_spent_seconds(self.timer.elapsed(), session.accumulated_penalty_seconds)
        record = LevelReward(
            level=session.level,
            time_spent=spent,
            wrong_answers=session.wrong_answers_this_level,
            reward=level_reward(
                session.level, session.tier, spent, session.wrong_answers_this_level
            ),
        )
        session.level_rewards.append(record)
        session.total_score = total_score(session.level_rewards)
        logger.info(f"Level {record.level} complete: {record.reward:.2f} pts in {spent}s")
        self.presenter.show_level_reward(record)

        if session.level < session.tier.level_count:
            self._enter_level(session.level + 1)
        else:
            session.outcome = SessionOutcome.COMPLETED
            self._enter_report()

    def _on_tick(self, remaining: int) -> None:
        self._remaining = remaining
        self.presenter.show_remaining(remaining)

    def _on_time_expired(self) -> None:
        session = self._session
        if self._stage is not Stage.PLAY or session is None:
            return
        if session.outcome is not SessionOutcome.IN_PROGRESS:
            return
        session.outcome = SessionOutcome.TIMED_OUT
        logger.warning(f"Time expired on level {session.level}")
        self.presenter.show_time_up(session.level)
        self._enter_report()

    def _enter_report(self) -> None:
        self.timer.cancel()
        self._ended_at = self.clock()
        self._transition(Stage.REPORT)
        self.presenter.show_report(self.report)
