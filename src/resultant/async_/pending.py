"""Pending wrappers: a Result or Option that is still being computed.

A combinator whose callable returns an awaitable hands back a
``PendingResult`` or ``PendingOption``. These expose the same combinators,
each returning another pending wrapper, so a chain stays in call order:
every later step waits for the earlier settlement. Extraction methods
(``unwrap``, ``is_ok`` ...) are coroutines.

Note:
    A pending wrapper built from a coroutine is single-shot. Coroutines can
    only be awaited once; awaiting the same wrapper twice raises
    RuntimeError.

Example:
    ```python
    async def fetch_user(user_id: int) -> Result[User, str]:
        ...

    async def main():
        name = await (
            Ok(1)
            .and_then(fetch_user)       # PendingResult
            .map(lambda user: user.name)
            .unwrap_or("anonymous")
        )
    ```
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable, Generator
from typing import Any

from resultant._internal.mode import settle
from resultant.types.option import Option
from resultant.types.result import Result
from resultant.wire import SerializableOutcome

__all__ = ["PendingOption", "PendingResult"]


class _Pending[W]:
    """Shared plumbing: hold an awaitable of ``W`` and chain steps on it."""

    __slots__ = ("_awaitable",)

    def __init__(self, awaitable: Awaitable[W]) -> None:
        self._awaitable = awaitable

    def __await__(self) -> Generator[Any, Any, W]:
        return self._awaitable.__await__()

    async def _chain(self, step: Callable[[W], Any]) -> Any:
        """Wait for the wrapped value, apply ``step`` and settle its outcome."""
        return await settle(step(await self._awaitable))

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._awaitable!r})"


class PendingResult[T, E](_Pending[Result[T, E]]):
    """An awaitable Result with the Result combinators.

    ``await pending`` produces the settled ``Result``.
    """

    __slots__ = ()

    # --- Combinators (return PendingResult) ---

    def map[U](self, f: Callable[[T], U | Awaitable[U]]) -> PendingResult[U, E]:
        """Apply a sync or async ``f`` to the success value once settled."""
        return PendingResult(self._chain(lambda result: result.map(f)))

    def map_err[F](self, f: Callable[[E], F | Awaitable[F]]) -> PendingResult[T, F]:
        """Apply a sync or async ``f`` to the failure value once settled."""
        return PendingResult(self._chain(lambda result: result.map_err(f)))

    def and_[U](self, other: Result[U, E] | PendingResult[U, E]) -> PendingResult[U, E]:
        """Settle to ``other`` if this settles to a success.

        A pending ``other`` is awaited either way.
        """
        return PendingResult(self._chain(lambda result: result.and_(other)))

    def or_[F](self, other: Result[T, F] | PendingResult[T, F]) -> PendingResult[T, F]:
        """Settle to this success, else to ``other``.

        A pending ``other`` is awaited either way.
        """
        return PendingResult(self._chain(lambda result: result.or_(other)))

    def and_then[U](
        self, f: Callable[[T], Result[U, E] | Awaitable[Result[U, E]]]
    ) -> PendingResult[U, E]:
        """Chain a sync or async function returning a Result."""
        return PendingResult(self._chain(lambda result: result.and_then(f)))

    def or_else[F](
        self, f: Callable[[E], Result[T, F] | Awaitable[Result[T, F]]]
    ) -> PendingResult[T, F]:
        """Recover from a failure with a sync or async function returning a Result."""
        return PendingResult(self._chain(lambda result: result.or_else(f)))

    # --- Extraction (coroutines) ---

    async def is_ok(self) -> bool:
        """Settle and report whether the result is a success."""
        return (await self).is_ok()

    async def is_err(self) -> bool:
        """Settle and report whether the result is a failure."""
        return (await self).is_err()

    async def is_ok_and(self, pred: Callable[[T], bool | Awaitable[bool]]) -> bool:
        return await self._chain(lambda result: result.is_ok_and(pred))

    async def is_err_and(self, pred: Callable[[E], bool | Awaitable[bool]]) -> bool:
        return await self._chain(lambda result: result.is_err_and(pred))

    async def unwrap(self) -> T:
        """Settle and return the success value.

        Raises:
            InvariantViolation: If the settled result is a failure.
        """
        return (await self).unwrap()

    async def expect(self, message: str) -> T:
        return (await self).expect(message)

    async def unwrap_or(self, default: T) -> T:
        return (await self).unwrap_or(default)

    async def unwrap_or_else(self, f: Callable[[E], T | Awaitable[T]]) -> T:
        return await self._chain(lambda result: result.unwrap_or_else(f))

    async def unwrap_err(self) -> E:
        return (await self).unwrap_err()

    async def expect_err(self, message: str) -> E:
        return (await self).expect_err(message)

    async def ok(self) -> Option[T]:
        return (await self).ok()

    async def err(self) -> Option[E]:
        return (await self).err()

    async def to_serializable(self) -> SerializableOutcome[T]:
        """Settle and convert to the wire form."""
        return (await self).to_serializable()


class PendingOption[T](_Pending[Option[T]]):
    """An awaitable Option with the Option combinators.

    ``await pending`` produces the settled ``Option``.
    """

    __slots__ = ()

    # --- Combinators (return PendingOption / PendingResult) ---

    def map[U](self, f: Callable[[T], U | Awaitable[U]]) -> PendingOption[U]:
        """Apply a sync or async ``f`` to the value once settled."""
        return PendingOption(self._chain(lambda option: option.map(f)))

    def and_then[U](
        self, f: Callable[[T], Option[U] | Awaitable[Option[U]]]
    ) -> PendingOption[U]:
        """Chain a sync or async function returning an Option."""
        return PendingOption(self._chain(lambda option: option.and_then(f)))

    def or_else(
        self, f: Callable[[], Option[T] | Awaitable[Option[T]]]
    ) -> PendingOption[T]:
        return PendingOption(self._chain(lambda option: option.or_else(f)))

    def and_[U](self, other: Option[U]) -> PendingOption[U]:
        return PendingOption(self._chain(lambda option: option.and_(other)))

    def or_(self, other: Option[T]) -> PendingOption[T]:
        return PendingOption(self._chain(lambda option: option.or_(other)))

    def xor(self, other: Option[T]) -> PendingOption[T]:
        return PendingOption(self._chain(lambda option: option.xor(other)))

    def ok_or[E](self, error: E) -> PendingResult[T, E]:
        """Settle and convert to Result with ``error`` for the empty case."""
        return PendingResult(self._chain(lambda option: option.ok_or(error)))

    def ok_or_else[E](self, f: Callable[[], E | Awaitable[E]]) -> PendingResult[T, E]:
        return PendingResult(self._chain(lambda option: option.ok_or_else(f)))

    # --- Extraction (coroutines) ---

    async def is_some(self) -> bool:
        return (await self).is_some()

    async def is_none(self) -> bool:
        return (await self).is_none()

    async def is_some_and(self, pred: Callable[[T], bool | Awaitable[bool]]) -> bool:
        return await self._chain(lambda option: option.is_some_and(pred))

    async def is_none_and(self, pred: Callable[[], bool | Awaitable[bool]]) -> bool:
        return await self._chain(lambda option: option.is_none_and(pred))

    async def unwrap(self) -> T:
        """Settle and return the value.

        Raises:
            InvariantViolation: If the settled option is empty.
        """
        return (await self).unwrap()

    async def expect(self, message: str) -> T:
        return (await self).expect(message)

    async def unwrap_or(self, default: T) -> T:
        return (await self).unwrap_or(default)

    async def unwrap_or_else(self, f: Callable[[], T | Awaitable[T]]) -> T:
        return await self._chain(lambda option: option.unwrap_or_else(f))
