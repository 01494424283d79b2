"""Execution mode variants: a value is either ready now or still awaitable.

Every place that calls user code (a transform, a predicate, a builder's
operation) classifies the return value exactly once with ``classify`` and
then matches on the variant. Nothing downstream re-inspects the raw value.

Examples:
    >>> classify(42)
    Immediate(value=42)
    >>> async def later():
    ...     return 42
    >>> isinstance(classify(later()), Pending)
    True
"""

from __future__ import annotations

import inspect
from collections.abc import Awaitable, Callable

import msgspec

__all__ = ["Immediate", "Mode", "Pending", "classify", "settle", "then"]


class Immediate[T](msgspec.Struct, frozen=True):
    """A value that is already available."""

    value: T


class Pending[T](msgspec.Struct, frozen=True):
    """A value that becomes available once ``awaitable`` settles."""

    awaitable: Awaitable[T]


type Mode[T] = Immediate[T] | Pending[T]


def classify[T](value: T | Awaitable[T]) -> Mode[T]:
    """Tag ``value`` with its execution mode."""
    if inspect.isawaitable(value):
        return Pending(value)
    return Immediate(value)  # type: ignore[arg-type]


async def settle[T](value: T | Awaitable[T]) -> T:
    """Await ``value`` if it is pending, otherwise return it as is."""
    match classify(value):
        case Pending(awaitable):
            return await awaitable
        case Immediate(ready):
            return ready


async def then[T, U](awaitable: Awaitable[T], f: Callable[[T], U]) -> U:
    """Apply ``f`` to the settled value of ``awaitable``."""
    return f(await awaitable)
