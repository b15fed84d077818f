"""Terminal failure type for job attempts."""

from __future__ import annotations

from pathlib import Path


class AttemptFailureError(Exception):
    """Attempt did not produce a job result.

    Equality only considers `log_path` and `cause`.

    Attributes:
        log_path: Log file holding full diagnostics for the attempt.
        cause: Underlying error, or None when the work reported failure without raising.
    """

    def __init__(self, log_path: Path, cause: BaseException | None = None):
        message = f"job attempt failed; see logs at {log_path}"
        if cause is not None:
            message = f"{message} (cause: {type(cause).__name__}: {cause})"
        super().__init__(message)
        self.log_path = log_path
        self.cause = cause

    @classmethod
    def from_log_path(cls, log_path: Path, cause: BaseException | None = None) -> AttemptFailureError:
        """Build a failure for one attempt log path.

        Args:
            log_path: Attempt log file.
            cause: Optional underlying error.

        Returns:
            AttemptFailureError: New failure instance.

        Raises:
            RuntimeError: This factory does not raise runtime errors.
        """

        return cls(log_path=log_path, cause=cause)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AttemptFailureError):
            return NotImplemented
        return self.log_path == other.log_path and self.cause == other.cause

    def __hash__(self) -> int:
        return hash((self.log_path, self.cause))

    def __reduce__(self):
        return (type(self), (self.log_path, self.cause))
