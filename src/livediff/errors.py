"""Error hierarchy for the livediff engine.

Every public error class inherits from LiveDiffError. Each carries a
machine-readable ``code`` (from :class:`ErrorCode`), a human-readable
``message``, an optional structured ``context`` dict, and an optional
``cause`` (chained exception).

All errors raised by the engine signal programming-invariant violations
on the caller's side (a misconfigured registry, an observed sequence that
drifted from the previous result).  None of them is meant to be caught
and retried.
"""

from __future__ import annotations

from enum import Enum
from typing import Any

# ---------------------------------------------------------------------------
# Error code enum
# ---------------------------------------------------------------------------

class ErrorCode(str, Enum):
    """Machine-readable error codes for every error the engine can raise."""

    MISSING_EVALUATOR = "MISSING_EVALUATOR"
    INVARIANT_VIOLATION = "INVARIANT_VIOLATION"
    OBSERVED_MISMATCH = "OBSERVED_MISMATCH"


# ---------------------------------------------------------------------------
# Base error
# ---------------------------------------------------------------------------

class LiveDiffError(Exception):
    """Base exception for all livediff errors.

    Parameters
    ----------
    code:
        A value from :class:`ErrorCode` (or any string) identifying the
        error category.
    message:
        A developer-friendly description of what went wrong.
    context:
        Arbitrary structured data providing extra diagnostic detail.
        Keys and expected types are documented per subclass.
    cause:
        The underlying exception, if this error wraps another.
    """

    def __init__(
        self,
        code: str,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        self.code: str = code
        self.message: str = message
        self.context: dict[str, Any] = context or {}
        self.cause: Exception | None = cause
        super().__init__(message)
        if cause is not None:
            self.__cause__ = cause

    def __repr__(self) -> str:
        ctx = f", context={self.context!r}" if self.context else ""
        return f"{type(self).__name__}(code={self.code!r}, message={self.message!r}{ctx})"


# ---------------------------------------------------------------------------
# Registry errors
# ---------------------------------------------------------------------------

class LiveDiffEvaluatorError(LiveDiffError):
    """The evaluator registry has nothing registered for a data type and
    operator kind.

    Context keys: ``data_type``, ``eval_type``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            code=ErrorCode.MISSING_EVALUATOR,
            message=message,
            context=context,
            cause=cause,
        )


# ---------------------------------------------------------------------------
# Engine invariant errors
# ---------------------------------------------------------------------------

class LiveDiffInvariantError(LiveDiffError):
    """The caller broke a precondition of the diff engine.

    Context varies: ``argument`` for missing arguments, ``cells`` and
    ``limit`` for an oversized LCS table.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
        code: str = ErrorCode.INVARIANT_VIOLATION,
    ) -> None:
        super().__init__(
            code=code,
            message=message,
            context=context,
            cause=cause,
        )


class LiveDiffObservedMismatchError(LiveDiffInvariantError):
    """The observed sequence does not hold the previous result's payloads.

    Context keys: ``expected_length``, ``actual_length``,
    ``first_mismatch_index``.
    """

    def __init__(
        self,
        message: str,
        context: dict[str, Any] | None = None,
        cause: Exception | None = None,
    ) -> None:
        super().__init__(
            message=message,
            context=context,
            cause=cause,
            code=ErrorCode.OBSERVED_MISMATCH,
        )
