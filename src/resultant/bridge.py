"""Go-style tuple bridge: ``(value, None)`` on success, ``(None, error)`` on failure.

Examples:
    >>> goify(lambda: 42)
    (42, None)
    >>> value, err = goify_sync(lambda: 1 / 0)
    >>> value is None, err
    (True, CapturedError('division by zero'))
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

from resultant._internal.mode import Immediate, Pending, classify
from resultant._logging import get_logger
from resultant.builders import Capture, build_result
from resultant.config import get_config
from resultant.errors import CapturedError
from resultant.types.outcome import Failure, Success
from resultant.types.result import Result

__all__ = ["GoifyResult", "goify", "goify_sync", "result_to_tuple"]

_log = get_logger(__name__)

type GoifyResult[T, E = CapturedError] = tuple[T, None] | tuple[None, E]


def result_to_tuple[T, E](result: Result[T, E]) -> GoifyResult[T, E]:
    """Convert a settled Result into its tuple form."""
    match result.outcome:
        case Success(value):
            return (value, None)
        case Failure(error):
            return (None, error)


async def _settled_tuple[T, E](awaitable: Awaitable[Result[T, E]]) -> GoifyResult[T, E]:
    return result_to_tuple(await awaitable)


@overload
def goify[T](
    operation: Callable[[], Awaitable[T]], *, capture: Capture | None = None
) -> Awaitable[GoifyResult[T, CapturedError]]: ...


@overload
def goify[T](
    operation: Callable[[], T], *, capture: Capture | None = None
) -> GoifyResult[T, CapturedError]: ...


def goify(
    operation: Callable[[], Any], *, capture: Capture | None = None
) -> Any:
    """Run ``operation`` and return a ``(value, error)`` tuple.

    Mirrors ``build_result``: a synchronous call gives the tuple directly,
    a call that returned an awaitable gives an awaitable of the tuple.

    Example:
        ```python
        async def fetch() -> bytes: ...

        body, err = await goify(fetch)
        if err is not None:
            ...
        ```
    """
    match classify(build_result(operation, capture=capture)):
        case Pending(awaitable):
            return _settled_tuple(awaitable)
        case Immediate(result):
            return result_to_tuple(result)


def goify_sync[T](
    operation: Callable[[], T], *, capture: Capture | None = None
) -> GoifyResult[T, CapturedError]:
    """Run a synchronous ``operation`` and return a ``(value, error)`` tuple.

    The return value is not inspected: if ``operation`` returns an awaitable
    it lands unresolved in the value slot. That is a caller error and is
    logged as a warning.
    """
    catch = capture if capture is not None else get_config().capture
    try:
        value = operation()
    except catch as exc:
        error = CapturedError.from_exception(exc)
        _log.debug("operation_failed", error=error.message, exc_type=type(exc).__name__)
        return (None, error)

    if isinstance(classify(value), Pending):
        _log.warning("goify_sync_received_awaitable", value_type=type(value).__name__)
    return (value, None)
