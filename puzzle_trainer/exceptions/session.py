"""Session lifecycle and submission exceptions."""

from .base import PuzzleTrainerException


class InvalidSubmission(PuzzleTrainerException):
    """Raised when an answer is empty or not one of the offered candidates.

    Never counted as a wrong answer. Hosts should treat it as a disabled
    action (re-prompt, keep the submit button disabled).
    """

    pass


class StageTransitionError(PuzzleTrainerException):
    """Raised when a lifecycle action is not allowed in the current stage."""

    pass
