"""Option type: a slot that is either Present(value) or absent.

``Some(None)`` is a present option holding ``None``; only
``Option.from_nullable`` treats ``None`` as absence.

Examples:
    >>> Some(3).map(lambda x: x + 1)
    Some(4)
    >>> Nothing.unwrap_or("fallback")
    'fallback'
    >>> Some(1).xor(Nothing)
    Some(1)
"""

from __future__ import annotations

from collections.abc import Awaitable, Callable
from typing import TYPE_CHECKING, Any, overload

from resultant._internal.mode import Immediate, Pending, classify, then
from resultant.config import get_config
from resultant.errors import invariant_violation
from resultant.types.outcome import ABSENT, AbsentType, Present, Slot
from resultant.types.result import Err, Ok, Result

if TYPE_CHECKING:
    from resultant.async_.pending import PendingOption, PendingResult

__all__ = ["Nothing", "Option", "Some"]


def _pending_option[T](awaitable: Awaitable[Option[T]]) -> PendingOption[T]:
    from resultant.async_.pending import PendingOption

    return PendingOption(awaitable)


def _pending_result[T, E](awaitable: Awaitable[Result[T, E]]) -> PendingResult[T, E]:
    from resultant.async_.pending import PendingResult

    return PendingResult(awaitable)


class Option[T]:
    """An optional value.

    Options compare equal when their slots are equal. They are not hashable
    because ``take`` empties the receiver in place; every other method
    returns a new Option.
    """

    __slots__ = ("_slot",)

    def __init__(self, slot: Slot[T] = ABSENT) -> None:
        self._slot = slot

    @classmethod
    def some(cls, value: T) -> Option[T]:
        """Create an Option holding ``value``."""
        return cls(Present(value))

    @classmethod
    def nothing(cls) -> Option[T]:
        """Create an empty Option."""
        return cls(ABSENT)

    @overload
    @staticmethod
    def from_nullable(value: Awaitable[T | None]) -> PendingResult[Option[T], Exception]: ...

    @overload
    @staticmethod
    def from_nullable(value: T | None) -> Result[Option[T], Any]: ...

    @staticmethod
    def from_nullable(value: Any) -> Any:
        """Wrap a possibly-``None`` value, returning ``Ok(Option)``.

        ``None`` becomes an empty Option. If ``value`` is awaitable, returns a
        PendingResult that settles to ``Ok(Option)``, or to ``Err(exc)`` when
        awaiting raises one of the configured capture types.
        """
        match classify(value):
            case Pending(awaitable):
                return _pending_result(_nullable_settled(awaitable))
            case Immediate(ready):
                return Ok(_from_nullable(ready))

    @property
    def slot(self) -> Slot[T]:
        """The underlying ``Present``/``ABSENT`` slot."""
        return self._slot

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Option):
            return NotImplemented
        return self._slot == other._slot

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        match self._slot:
            case Present(value):
                return f"Some({value!r})"
            case _:
                return "Nothing"

    # --- Inspection ---

    def is_some(self) -> bool:
        """Return True if a value is present."""
        return isinstance(self._slot, Present)

    def is_none(self) -> bool:
        """Return True if no value is present."""
        return isinstance(self._slot, AbsentType)

    @overload
    def is_some_and(self, pred: Callable[[T], Awaitable[bool]]) -> Awaitable[bool] | bool: ...

    @overload
    def is_some_and(self, pred: Callable[[T], bool]) -> bool: ...

    def is_some_and(self, pred: Callable[[T], Any]) -> Any:
        """Return ``pred(value)`` if present, False otherwise.

        ``pred`` is not called when empty. An async predicate yields an
        awaitable of the boolean.
        """
        match self._slot:
            case Present(value):
                return pred(value)
            case _:
                return False

    @overload
    def is_none_and(self, pred: Callable[[], Awaitable[bool]]) -> Awaitable[bool] | bool: ...

    @overload
    def is_none_and(self, pred: Callable[[], bool]) -> bool: ...

    def is_none_and(self, pred: Callable[[], Any]) -> Any:
        """Return ``pred()`` if empty, False otherwise."""
        match self._slot:
            case AbsentType():
                return pred()
            case _:
                return False

    # --- Extraction ---

    def unwrap(self) -> T:
        """Return the contained value.

        Raises:
            InvariantViolation: If the option is empty.
        """
        match self._slot:
            case Present(value):
                return value
            case _:
                raise invariant_violation(
                    "unwrap", "Attempted to unwrap a 'Nothing' option. No value is present."
                )

    def expect(self, message: str) -> T:
        """Return the contained value, or raise with ``message``.

        Raises:
            InvariantViolation: With ``message``, if the option is empty.
        """
        match self._slot:
            case Present(value):
                return value
            case _:
                raise invariant_violation("expect", message)

    def unwrap_or(self, default: T) -> T:
        """Return the contained value or ``default``."""
        match self._slot:
            case Present(value):
                return value
            case _:
                return default

    @overload
    def unwrap_or_else(self, f: Callable[[], Awaitable[T]]) -> T | Awaitable[T]: ...

    @overload
    def unwrap_or_else(self, f: Callable[[], T]) -> T: ...

    def unwrap_or_else(self, f: Callable[[], Any]) -> Any:
        """Return the contained value or ``f()``; async ``f`` yields its awaitable."""
        match self._slot:
            case Present(value):
                return value
            case _:
                return f()

    # --- Transformation ---

    @overload
    def map[U](self, f: Callable[[T], Awaitable[U]]) -> PendingOption[U] | Option[U]: ...

    @overload
    def map[U](self, f: Callable[[T], U]) -> Option[U]: ...

    def map(self, f: Callable[[T], Any]) -> Any:
        """Apply ``f`` to the contained value.

        The mapped value is kept even when it is ``None``.

        Returns:
            An Option, or a PendingOption if ``f`` returned an awaitable.
        """
        match self._slot:
            case Present(value):
                match classify(f(value)):
                    case Pending(awaitable):
                        return _pending_option(then(awaitable, Option.some))
                    case Immediate(mapped):
                        return Option(Present(mapped))
            case _:
                return Option()

    @overload
    def and_then[U](
        self, f: Callable[[T], Awaitable[Option[U]]]
    ) -> PendingOption[U] | Option[U]: ...

    @overload
    def and_then[U](self, f: Callable[[T], Option[U]]) -> Option[U]: ...

    def and_then(self, f: Callable[[T], Any]) -> Any:
        """Chain a function returning an Option on the contained value.

        Also known as flatmap or bind.
        """
        match self._slot:
            case Present(value):
                return _bound(f(value))
            case _:
                return Option()

    @overload
    def or_else(self, f: Callable[[], Awaitable[Option[T]]]) -> PendingOption[T] | Option[T]: ...

    @overload
    def or_else(self, f: Callable[[], Option[T]]) -> Option[T]: ...

    def or_else(self, f: Callable[[], Any]) -> Any:
        """Return a copy of this option if present, else the Option from ``f()``."""
        match self._slot:
            case Present():
                return Option(self._slot)
            case _:
                return _bound(f())

    # --- Combination ---

    def and_[U](self, other: Option[U]) -> Option[U]:
        """Return ``other`` if a value is present, else an empty Option."""
        if self.is_some():
            return Option(other._slot)
        return Option()

    def or_(self, other: Option[T]) -> Option[T]:
        """Return this option if present, else ``other``."""
        if self.is_some():
            return Option(self._slot)
        return Option(other._slot)

    def xor(self, other: Option[T]) -> Option[T]:
        """Return whichever of this and ``other`` is present, if exactly one is.

        Examples:
            >>> Some(1).xor(Some(2))
            Nothing
            >>> Nothing.xor(Some(2))
            Some(2)
        """
        match self._slot, other._slot:
            case Present(), AbsentType():
                return Option(self._slot)
            case AbsentType(), Present():
                return Option(other._slot)
            case _:
                return Option()

    def take(self) -> Option[T]:
        """Move the value out, leaving this option empty.

        This is the only method that mutates its receiver.

        Examples:
            >>> opt = Some(5)
            >>> opt.take()
            Some(5)
            >>> opt
            Nothing
        """
        slot, self._slot = self._slot, ABSENT
        return Option(slot)

    # --- Conversion ---

    def ok_or[E](self, error: E) -> Result[T, E]:
        """Convert to Result: present -> Ok(value), empty -> Err(error)."""
        match self._slot:
            case Present(value):
                return Ok(value)
            case _:
                return Err(error)

    @overload
    def ok_or_else[E](self, f: Callable[[], Awaitable[E]]) -> PendingResult[T, E] | Result[T, E]: ...

    @overload
    def ok_or_else[E](self, f: Callable[[], E]) -> Result[T, E]: ...

    def ok_or_else(self, f: Callable[[], Any]) -> Any:
        """Convert to Result, computing the error with ``f()`` only when empty."""
        match self._slot:
            case Present(value):
                return Ok(value)
            case _:
                match classify(f()):
                    case Pending(awaitable):
                        return _pending_result(then(awaitable, Result.failure))
                    case Immediate(error):
                        return Err(error)


def Some[T](value: T) -> Option[T]:  # noqa: N802
    """Create an Option holding ``value`` (which may be ``None``)."""
    return Option(Present(value))


Nothing: Option[Any] = Option()
"""Shared empty Option. Safe to share: ``take`` on an empty option is a no-op."""


def _from_nullable[T](value: T | None) -> Option[T]:
    if value is None:
        return Option()
    return Option(Present(value))


def _bound(returned: Any) -> Any:
    match classify(returned):
        case Pending(awaitable):
            return _pending_option(awaitable)
        case Immediate(option):
            return option


async def _nullable_settled[T](awaitable: Awaitable[T | None]) -> Result[Option[T], Any]:
    try:
        value = await awaitable
    except get_config().capture as exc:
        return Err(exc)
    return Ok(_from_nullable(value))
