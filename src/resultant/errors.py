"""Error types raised at contract boundaries and carried as captured failures."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any

from resultant._internal.normalize import normalize_error
from resultant._logging import get_logger

if TYPE_CHECKING:
    from resultant.wire import SerializableOutcome

_log = get_logger(__name__)

__all__ = [
    "CapturedError",
    "InvariantViolation",
    "MatchError",
    "ResultantError",
    "invariant_violation",
]


class ResultantError(Exception):
    """Base class for contract violations raised by resultant."""


class InvariantViolation(ResultantError, RuntimeError):  # noqa: N818
    """Raised by unwrap/expect and friends when called on the wrong slot.

    This is a programmer error: the caller asserted a slot that the wrapper
    does not hold. The offending payload is kept on ``payload`` for
    debugging; it is not part of the message when ``expect`` supplied one.
    """

    def __init__(self, message: str, payload: Any = None) -> None:
        self.payload = payload
        super().__init__(message)


class MatchError(ResultantError, TypeError):
    """Raised when a dispatcher input and its handlers do not correspond."""

    def __init__(self, input_type: type, handlers_type: type | None = None) -> None:
        self.input_type = input_type
        self.handlers_type = handlers_type
        if handlers_type is None:
            msg = f"MatchError: unhandled input type {input_type.__name__!r}"
        else:
            msg = (
                f"MatchError: input of type {input_type.__name__!r} does not align "
                f"with handlers of type {handlers_type.__name__!r}"
            )
        super().__init__(msg)


class CapturedError(Exception):
    """A failure captured at a builder boundary, reduced to its message.

    Builders and the tuple bridge normalize whatever was raised into a
    string; this exception carries that string so downstream code still
    deals with an exception object. The original exception, when there
    was one, is chained as ``__cause__``.
    """

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)

    @classmethod
    def from_exception(cls, exc: BaseException) -> CapturedError:
        """Normalize ``exc`` and chain it as the cause of the new error."""
        if isinstance(exc, CapturedError):
            return exc
        captured = cls(normalize_error(exc))
        captured.__cause__ = exc
        return captured

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, CapturedError):
            return NotImplemented
        return self.message == other.message

    def __hash__(self) -> int:
        return hash((CapturedError, self.message))

    def __repr__(self) -> str:
        return f"CapturedError({self.message!r})"

    def to_struct(self) -> SerializableOutcome[Any]:
        """Convert to the failing wire outcome for transport."""
        from resultant.wire import SerializableOutcome

        return SerializableOutcome(error=self.message, ok=False)


def invariant_violation(method: str, message: str, payload: Any = None) -> InvariantViolation:
    """Build the InvariantViolation raised by ``method`` and log it at debug level."""
    _log.debug("contract_violation", method=method, message=message)
    return InvariantViolation(message, payload)
