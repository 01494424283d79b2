"""Result type: one Outcome, either Success[T] or Failure[E].

Combinators accept synchronous or asynchronous callables. When the callable
returns an awaitable, the combinator returns a ``PendingResult`` instead of a
``Result``; everything chained after it waits for that settlement.

Examples:
    >>> Ok(2).map(lambda x: x * 10)
    Ok(20)
    >>> Err("boom").unwrap_or(0)
    0
    >>> async def double(x):
    ...     return x * 2
    >>> pending = Ok(2).map(double)   # PendingResult
    >>> # await pending -> Ok(4)
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, overload

import msgspec

from resultant._internal.mode import Immediate, Pending, classify, then
from resultant._internal.normalize import normalize_error
from resultant.config import get_config
from resultant.errors import CapturedError, invariant_violation
from resultant.types.outcome import Failure, Outcome, Success
from resultant.wire import SerializableOutcome, from_mapping

if TYPE_CHECKING:
    from collections.abc import Mapping

    from resultant.async_.pending import PendingResult
    from resultant.types.option import Option

__all__ = ["Err", "Ok", "Result"]


def _pending[T, E](awaitable: Awaitable[Result[T, E]]) -> PendingResult[T, E]:
    from resultant.async_.pending import PendingResult

    return PendingResult(awaitable)


class Result[T, E](msgspec.Struct, frozen=True, gc=False):
    """An immutable wrapper around exactly one ``Outcome``.

    Build one with ``Ok``/``Err`` (or ``Result.success``/``Result.failure``),
    or capture an operation with ``build_result``.
    """

    outcome: Outcome[T, E]

    @classmethod
    def success(cls, value: T) -> Result[T, E]:
        """Create a successful Result holding ``value``."""
        return cls(Success(value))

    @classmethod
    def failure(cls, error: E) -> Result[T, E]:
        """Create a failed Result holding ``error``."""
        return cls(Failure(error))

    @overload
    @staticmethod
    def from_serializable(
        wire: Awaitable[SerializableOutcome[T]],
    ) -> PendingResult[T, CapturedError]: ...

    @overload
    @staticmethod
    def from_serializable(
        wire: SerializableOutcome[T] | Mapping[str, Any],
    ) -> Result[T, CapturedError]: ...

    @staticmethod
    def from_serializable(wire: Any) -> Any:
        """Convert the wire form back into a Result.

        A failing wire outcome becomes ``Err(CapturedError(message))``. A plain
        mapping such as ``{"error": "x", "ok": False}`` is accepted too.

        If ``wire`` is awaitable, returns a PendingResult; an exception raised
        while awaiting it becomes a captured failure rather than propagating.

        Raises:
            msgspec.ValidationError: If a mapping is not a well-formed outcome.
        """
        match classify(wire):
            case Pending(awaitable):
                return _pending(_from_settled_wire(awaitable))
            case Immediate(ready):
                return _from_wire(from_mapping(ready))

    def __repr__(self) -> str:
        match self.outcome:
            case Success(value):
                return f"Ok({value!r})"
            case Failure(error):
                return f"Err({error!r})"

    # --- Inspection ---

    def is_ok(self) -> bool:
        """Return True if the result holds a success."""
        return isinstance(self.outcome, Success)

    def is_err(self) -> bool:
        """Return True if the result holds a failure."""
        return isinstance(self.outcome, Failure)

    @overload
    def is_ok_and(self, pred: Callable[[T], Awaitable[bool]]) -> Awaitable[bool] | bool: ...

    @overload
    def is_ok_and(self, pred: Callable[[T], bool]) -> bool: ...

    def is_ok_and(self, pred: Callable[[T], Any]) -> Any:
        """Return ``pred(value)`` for a success, False otherwise.

        ``pred`` is not called on a failure. An async predicate yields an
        awaitable of the boolean.
        """
        match self.outcome:
            case Success(value):
                return pred(value)
            case _:
                return False

    @overload
    def is_err_and(self, pred: Callable[[E], Awaitable[bool]]) -> Awaitable[bool] | bool: ...

    @overload
    def is_err_and(self, pred: Callable[[E], bool]) -> bool: ...

    def is_err_and(self, pred: Callable[[E], Any]) -> Any:
        """Return ``pred(error)`` for a failure, False otherwise."""
        match self.outcome:
            case Failure(error):
                return pred(error)
            case _:
                return False

    # --- Extraction ---

    def unwrap(self) -> T:
        """Return the success value.

        Raises:
            InvariantViolation: If the result is a failure.
        """
        match self.outcome:
            case Success(value):
                return value
            case Failure(error):
                raise invariant_violation(
                    "unwrap",
                    f"Attempted to unwrap an 'Err' result: {normalize_error(error)}",
                    error,
                )

    def expect(self, message: str) -> T:
        """Return the success value, or raise with ``message``.

        Raises:
            InvariantViolation: With ``message``, if the result is a failure.
        """
        match self.outcome:
            case Success(value):
                return value
            case Failure(error):
                raise invariant_violation("expect", message, error)

    def unwrap_or(self, default: T) -> T:
        """Return the success value or ``default``."""
        match self.outcome:
            case Success(value):
                return value
            case _:
                return default

    @overload
    def unwrap_or_else(self, f: Callable[[E], Awaitable[T]]) -> T | Awaitable[T]: ...

    @overload
    def unwrap_or_else(self, f: Callable[[E], T]) -> T: ...

    def unwrap_or_else(self, f: Callable[[E], Any]) -> Any:
        """Return the success value or ``f(error)``.

        When ``f`` is async and the result is a failure, the return value is
        the awaitable produced by ``f``.
        """
        match self.outcome:
            case Success(value):
                return value
            case Failure(error):
                return f(error)

    def unwrap_err(self) -> E:
        """Return the failure value.

        Raises:
            InvariantViolation: If the result is a success.
        """
        match self.outcome:
            case Failure(error):
                return error
            case Success(value):
                raise invariant_violation(
                    "unwrap_err", "Attempted to unwrap 'Err' from an 'Ok' result.", value
                )

    def expect_err(self, message: str) -> E:
        """Return the failure value, or raise with ``message``.

        Raises:
            InvariantViolation: With ``message``, if the result is a success.
        """
        match self.outcome:
            case Failure(error):
                return error
            case Success(value):
                raise invariant_violation("expect_err", message, value)

    # --- Transformation ---

    @overload
    def map[U](self, f: Callable[[T], Awaitable[U]]) -> PendingResult[U, E] | Result[U, E]: ...

    @overload
    def map[U](self, f: Callable[[T], U]) -> Result[U, E]: ...

    def map(self, f: Callable[[T], Any]) -> Any:
        """Apply ``f`` to the success value, leaving a failure untouched.

        Args:
            f: Sync or async function applied to the success value.

        Returns:
            A Result, or a PendingResult if ``f`` returned an awaitable.
        """
        match self.outcome:
            case Success(value):
                match classify(f(value)):
                    case Pending(awaitable):
                        return _pending(then(awaitable, Result.success))
                    case Immediate(mapped):
                        return Result(Success(mapped))
            case Failure() as failure:
                return Result(failure)

    @overload
    def map_err[F](self, f: Callable[[E], Awaitable[F]]) -> PendingResult[T, F] | Result[T, F]: ...

    @overload
    def map_err[F](self, f: Callable[[E], F]) -> Result[T, F]: ...

    def map_err(self, f: Callable[[E], Any]) -> Any:
        """Apply ``f`` to the failure value, leaving a success untouched."""
        match self.outcome:
            case Failure(error):
                match classify(f(error)):
                    case Pending(awaitable):
                        return _pending(then(awaitable, Result.failure))
                    case Immediate(mapped):
                        return Result(Failure(mapped))
            case Success() as success:
                return Result(success)

    # --- Combination ---

    @overload
    def and_[U](self, other: PendingResult[U, E]) -> PendingResult[U, E]: ...

    @overload
    def and_[U](self, other: Result[U, E]) -> Result[U, E]: ...

    def and_(self, other: Any) -> Any:
        """Return ``other`` if this is a success, else this failure.

        A pending ``other`` is always awaited, even when this failure is
        what the returned PendingResult settles to.
        """
        match classify(other):
            case Pending(awaitable):
                return _pending(then(awaitable, self.and_))
            case Immediate(settled):
                match self.outcome:
                    case Success():
                        return settled
                    case Failure() as failure:
                        return Result(failure)

    @overload
    def or_[F](self, other: PendingResult[T, F]) -> PendingResult[T, F]: ...

    @overload
    def or_[F](self, other: Result[T, F]) -> Result[T, F]: ...

    def or_(self, other: Any) -> Any:
        """Return this success, else ``other``.

        A pending ``other`` is always awaited, even when this success is
        what the returned PendingResult settles to.
        """
        match classify(other):
            case Pending(awaitable):
                return _pending(then(awaitable, self.or_))
            case Immediate(settled):
                match self.outcome:
                    case Success() as success:
                        return Result(success)
                    case _:
                        return settled

    @overload
    def and_then[U](
        self, f: Callable[[T], Awaitable[Result[U, E]]]
    ) -> PendingResult[U, E] | Result[U, E]: ...

    @overload
    def and_then[U](self, f: Callable[[T], Result[U, E]]) -> Result[U, E]: ...

    def and_then(self, f: Callable[[T], Any]) -> Any:
        """Chain a function returning a Result on the success value.

        Also known as flatmap or bind. A failure passes through without
        calling ``f``.

        Args:
            f: Sync or async function that takes T and returns Result[U, E].

        Returns:
            The Result from ``f``, a PendingResult if ``f`` returned an
            awaitable, or this failure.
        """
        match self.outcome:
            case Success(value):
                return _bound(f(value))
            case Failure() as failure:
                return Result(failure)

    @overload
    def or_else[F](
        self, f: Callable[[E], Awaitable[Result[T, F]]]
    ) -> PendingResult[T, F] | Result[T, F]: ...

    @overload
    def or_else[F](self, f: Callable[[E], Result[T, F]]) -> Result[T, F]: ...

    def or_else(self, f: Callable[[E], Any]) -> Any:
        """Recover from a failure with a function returning a Result."""
        match self.outcome:
            case Failure(error):
                return _bound(f(error))
            case Success() as success:
                return Result(success)

    # --- Conversion ---

    def ok(self) -> Option[T]:
        """Convert to Option, keeping the success value."""
        from resultant.types.option import Option, Some

        match self.outcome:
            case Success(value):
                return Some(value)
            case _:
                return Option()

    def err(self) -> Option[E]:
        """Convert to Option, keeping the failure value."""
        from resultant.types.option import Option, Some

        match self.outcome:
            case Failure(error):
                return Some(error)
            case _:
                return Option()

    def to_serializable(self) -> SerializableOutcome[T]:
        """Convert to the wire form, normalizing the failure to a string."""
        match self.outcome:
            case Success(value):
                return SerializableOutcome(value=value, ok=True)
            case Failure(error):
                return SerializableOutcome(error=normalize_error(error), ok=False)


def Ok[T](value: T) -> Result[T, Any]:  # noqa: N802
    """Create a successful Result."""
    return Result(Success(value))


def Err[E](error: E) -> Result[Any, E]:  # noqa: N802
    """Create a failed Result."""
    return Result(Failure(error))


def _bound(returned: Any) -> Any:
    match classify(returned):
        case Pending(awaitable):
            return _pending(awaitable)
        case Immediate(result):
            return result


def _from_wire[T](wire: SerializableOutcome[T]) -> Result[T, CapturedError]:
    if wire.ok:
        value = None if wire.value is msgspec.UNSET else wire.value
        return Result(Success(value))  # type: ignore[arg-type]
    return Result(Failure(CapturedError(wire.error)))  # type: ignore[arg-type]


async def _from_settled_wire[T](
    awaitable: Awaitable[SerializableOutcome[T] | Mapping[str, Any]],
) -> Result[T, CapturedError]:
    try:
        wire = await awaitable
    except get_config().capture as exc:
        return Result(Failure(CapturedError.from_exception(exc)))
    return _from_wire(from_mapping(wire))
