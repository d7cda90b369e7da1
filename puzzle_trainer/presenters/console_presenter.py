"""Console presenter for CLI output."""

from puzzle_trainer.config.tiers import SWITCH_SHAPES
from puzzle_trainer.models import (
    CodePuzzle,
    GridPuzzle,
    LevelReward,
    Puzzle,
    SessionOutcome,
    SessionReport,
    Stage,
)

# Two-letter cell labels keep grids aligned in a terminal
SHAPE_ABBREVIATIONS = {
    "square": "Sq",
    "triangle": "Tr",
    "circle": "Ci",
    "pentagon": "Pe",
    "diamond": "Di",
    "hexagon": "Hx",
    "asterisk": "As",
}


def shape_label(shape: str) -> str:
    return SHAPE_ABBREVIATIONS.get(shape, shape[:2].title())


class ConsolePresenter:
    """Present game output to the console (CLI implementation)."""

    def show_info(self, message: str) -> None:
        """Display an informational message."""
        print(message)

    def show_warning(self, message: str) -> None:
        """Display a warning message."""
        print(f"[WARN] {message}")

    def show_error(self, message: str) -> None:
        """Display an error message."""
        print(f"[ERROR] {message}")

    def show_stage(self, stage: Stage) -> None:
        """Announce the report stage; other stages are implied by their output."""
        if stage is Stage.REPORT:
            print("\n" + "=" * 50)

    def show_puzzle(self, puzzle: Puzzle, level_count: int) -> None:
        """Render a grid or switch puzzle with numbered answer options."""
        print(f"\nLevel {puzzle.level}/{level_count} ({puzzle.difficulty.value})")
        print("-" * 50)

        if isinstance(puzzle, GridPuzzle):
            self._render_grid(puzzle)
            print("\nWhich shape belongs in the [??] cell?")
        elif isinstance(puzzle, CodePuzzle):
            self._render_switch(puzzle)
            print("\nWhich switch code turns the input into the output?")

        for i, candidate in enumerate(puzzle.candidates, 1):
            print(f"  {i}. {candidate}")

    def _render_grid(self, puzzle: GridPuzzle) -> None:
        for r, row in enumerate(puzzle.visible_grid()):
            cells = []
            for c, symbol in enumerate(row):
                if (r, c) == puzzle.target:
                    cells.append("[??]")
                elif symbol is None:
                    cells.append(" .. ")
                else:
                    cells.append(f" {shape_label(symbol)} ")
            print("  " + " ".join(cells))
        legend = ", ".join(f"{shape_label(s)}={s}" for s in puzzle.candidates)
        print(f"\n  ({legend})")

    def _render_switch(self, puzzle: CodePuzzle) -> None:
        def row(items):
            return "  ".join(f"{shape_label(SWITCH_SHAPES.get(i, str(i)))}" for i in items)

        print(f"  Input : {row(puzzle.input_order)}")
        print(f"  Output: {row(puzzle.output_order)}")

    def show_remaining(self, seconds: int) -> None:
        """Console hosts poll remaining time, so ticks are not printed."""
        pass

    def show_penalty(self, penalty_seconds: int, remaining: int) -> None:
        """Display a wrong-answer penalty."""
        print(f"[WRONG] -{penalty_seconds}s penalty, {remaining}s left")

    def show_level_reward(self, reward: LevelReward) -> None:
        """Display the reward for a completed level."""
        print(f"[OK] Correct! +{reward.reward:.2f} pts ({reward.time_spent}s)")

    def show_time_up(self, level: int) -> None:
        """Display a time-out."""
        print(f"\n[TIME] Time's up on level {level}")

    def show_report(self, report: SessionReport) -> None:
        """Display the end-of-session report."""
        headline = {
            SessionOutcome.COMPLETED: "All levels complete!",
            SessionOutcome.TIMED_OUT: "Time ran out",
            SessionOutcome.ABORTED: "Session ended early",
        }.get(report.outcome, "Session report")

        print(f"\n{headline}")
        print(
            f"You reached level {report.highest_level} in {report.difficulty.value} mode "
            f"and earned {report.total_score:.2f} points"
        )
        print("\nLevel Rewards:")
        print(f"  {'Level':>5}  {'Time':>6}  {'Wrong':>5}  {'Reward':>7}")
        for r in report.level_rewards:
            print(f"  {r.level:>5}  {r.time_spent:>5}s  {r.wrong_answers:>5}  {r.reward:>7.2f}")
        print(f"  {'Total':>5}  {'':>6}  {report.total_wrong_answers:>5}  {report.total_score:>7.2f}")

        if report.level_rewards:
            print(f"\n  Average time per level: {report.average_time_per_level:.1f}s")
        print(f"  Total time: {report.total_time_taken}s")
