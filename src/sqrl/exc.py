"""Exception hierarchy for sqrl."""


class SqrlError(Exception):
    """Base exception for all sqrl errors."""


class RenderError(SqrlError):
    """A statement or one of its nested fragments could not be rendered."""


class MissingTargetError(RenderError):
    """DELETE has neither a target table nor a FROM table."""

    def __init__(self, message: str = "delete statements must specify a From table") -> None:
        super().__init__(message)


class RunnerNotSetError(SqrlError):
    """Execution was requested on a builder with no Runner bound."""

    def __init__(self, message: str = "cannot run; no Runner set (run_with)") -> None:
        super().__init__(message)


class NoRowsError(SqrlError):
    """A single-row query returned no rows."""


class ResultError(SqrlError):
    """The driver could not report a row count or generated id."""
