"""Pattern-matching dispatch over Option and Result.

``match`` pairs each wrapper family with its own handler record:
``OptionHandlers`` for Option and ``ResultHandlers`` for Result. Passing
the wrong record, or something that is neither wrapper, is a programmer
error and raises ``MatchError``.

``match_goify`` and ``match_async`` need no handlers; they fold either
wrapper into a ``(value, error)`` tuple.

Examples:
    >>> match(Some(5), OptionHandlers(some=lambda x: x * 2, none=lambda: 0))
    10
    >>> match(Err("boom"), ResultHandlers(ok=str, err=lambda e: e))
    'boom'
    >>> match_goify(Nothing)
    (None, CapturedError('Option is None'))
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import Any, overload

import msgspec

from resultant._logging import get_logger
from resultant.bridge import GoifyResult, result_to_tuple
from resultant.config import get_config
from resultant.errors import CapturedError, MatchError
from resultant.types.option import Option
from resultant.types.outcome import Present
from resultant.types.result import Result

__all__ = [
    "Matchable",
    "OptionHandlers",
    "ResultHandlers",
    "match",
    "match_async",
    "match_goify",
]

_log = get_logger(__name__)

NONE_MESSAGE = "Option is None"

type Matchable[T, E] = Option[T] | Result[T, E]


class OptionHandlers[T, R](msgspec.Struct, frozen=True):
    """Handlers for an Option: ``some(value)`` or ``none()``."""

    some: Callable[[T], R]
    none: Callable[[], R]


class ResultHandlers[T, E, R](msgspec.Struct, frozen=True):
    """Handlers for a Result: ``ok(value)`` or ``err(error)``."""

    ok: Callable[[T], R]
    err: Callable[[E], R]


def _mismatch(wrapped: object, handlers: object | None = None) -> MatchError:
    error = MatchError(type(wrapped), type(handlers) if handlers is not None else None)
    _log.debug("contract_violation", method="match", message=str(error))
    return error


@overload
def match[T, R](wrapped: Option[T], handlers: OptionHandlers[T, R]) -> R: ...


@overload
def match[T, E, R](wrapped: Result[T, E], handlers: ResultHandlers[T, E, R]) -> R: ...


def match(wrapped: Matchable[Any, Any], handlers: Any) -> Any:
    """Call the handler matching the state of ``wrapped``.

    Raises:
        MatchError: If ``wrapped`` is not an Option or Result, or the
            handler record does not belong to its family.
    """
    match wrapped, handlers:
        case Option(), OptionHandlers(some=on_some, none=on_none):
            match wrapped.slot:
                case Present(value):
                    return on_some(value)
                case _:
                    return on_none()
        case Result(), ResultHandlers(ok=on_ok, err=on_err):
            if wrapped.is_ok():
                return on_ok(wrapped.unwrap())
            return on_err(wrapped.unwrap_err())
        case _:
            raise _mismatch(wrapped, handlers)


def match_goify[T, E](wrapped: Matchable[T, E]) -> GoifyResult[T, E | CapturedError]:
    """Fold an Option or Result into a ``(value, error)`` tuple.

    An empty Option becomes ``(None, CapturedError("Option is None"))``; a
    failed Result keeps its own failure value.

    Raises:
        MatchError: If ``wrapped`` is neither an Option nor a Result.
    """
    match wrapped:
        case Option():
            match wrapped.slot:
                case Present(value):
                    return (value, None)
                case _:
                    return (None, CapturedError(NONE_MESSAGE))
        case Result():
            return result_to_tuple(wrapped)
        case _:
            raise _mismatch(wrapped)


async def match_async[T, E](
    pending: Awaitable[Matchable[T, E]],
) -> GoifyResult[T, E | CapturedError]:
    """Await ``pending`` and fold the settled wrapper like ``match_goify``.

    An exception raised while awaiting (of a configured capture type) lands
    in the error slot as a ``CapturedError``.

    Raises:
        MatchError: If the settled value is neither an Option nor a Result.
    """
    try:
        wrapped = await pending
    except get_config().capture as exc:
        return (None, CapturedError.from_exception(exc))
    return match_goify(wrapped)
