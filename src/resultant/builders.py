"""Builders: run an operation and capture its outcome.

``build_result`` and ``build_serializable_outcome`` call the operation
immediately. What they return depends on what the call returned, not on
how the operation was declared: an ``async def`` is detected because
calling it returns a coroutine, and a plain function returning a Task or
Future counts as pending too.

Examples:
    >>> build_result(lambda: 42)
    Ok(42)
    >>> build_result(lambda: int("nope"))
    Err(CapturedError("invalid literal for int() with base 10: 'nope'"))
    >>> build_serializable_outcome(lambda: 42)
    SerializableOutcome(value=42, ok=True)
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, overload

from resultant._internal.mode import Immediate, Pending, classify
from resultant._logging import get_logger
from resultant.async_.pending import PendingResult
from resultant.config import get_config
from resultant.errors import CapturedError
from resultant.types.result import Result

if TYPE_CHECKING:
    from resultant.wire import SerializableOutcome

__all__ = ["Capture", "build_result", "build_serializable_outcome"]

_log = get_logger(__name__)

type Capture = tuple[type[BaseException], ...]


def _capture(capture: Capture | None) -> Capture:
    return capture if capture is not None else get_config().capture


def _captured[T](exc: BaseException) -> Result[T, CapturedError]:
    error = CapturedError.from_exception(exc)
    _log.debug("operation_failed", error=error.message, exc_type=type(exc).__name__)
    return Result.failure(error)


async def _settle_result[T](
    awaitable: Awaitable[T], capture: Capture
) -> Result[T, CapturedError]:
    try:
        value = await awaitable
    except capture as exc:
        return _captured(exc)
    return Result.success(value)


@overload
def build_result[T](
    operation: Callable[[], Awaitable[T]], *, capture: Capture | None = None
) -> PendingResult[T, CapturedError]: ...


@overload
def build_result[T](
    operation: Callable[[], T], *, capture: Capture | None = None
) -> Result[T, CapturedError]: ...


def build_result(operation: Callable[[], Any], *, capture: Capture | None = None) -> Any:
    """Run ``operation`` and wrap its outcome in a Result.

    Args:
        operation: Zero-argument callable, sync or async.
        capture: Exception types turned into failures. Defaults to the
            configured ``capture`` (``(Exception,)`` unless changed).

    Returns:
        ``Ok(value)`` or ``Err(CapturedError)`` when the call finished
        synchronously; a PendingResult settling the same way when it
        returned an awaitable. Exceptions outside ``capture`` propagate.
    """
    catch = _capture(capture)
    try:
        returned = operation()
    except catch as exc:
        return _captured(exc)

    match classify(returned):
        case Pending(awaitable):
            return PendingResult(_settle_result(awaitable, catch))
        case Immediate(value):
            return Result.success(value)


@overload
def build_serializable_outcome[T](
    operation: Callable[[], Awaitable[T]], *, capture: Capture | None = None
) -> Awaitable[SerializableOutcome[T]]: ...


@overload
def build_serializable_outcome[T](
    operation: Callable[[], T], *, capture: Capture | None = None
) -> SerializableOutcome[T]: ...


def build_serializable_outcome(
    operation: Callable[[], Any], *, capture: Capture | None = None
) -> Any:
    """Run ``operation`` and capture its outcome in the wire form.

    Same contract as ``build_result``, but produces ``SerializableOutcome``
    (or an awaitable of one) whose failure is the normalized message.
    """
    built = build_result(operation, capture=capture)
    return built.to_serializable()
