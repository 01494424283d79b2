"""Minimal tagged unions underlying Result and Option.

``Outcome`` is ``Success[T] | Failure[E]`` and ``Slot`` is
``Present[T] | AbsentType``. The variant held is the discriminant; there is
no separate tag field. These are internal building blocks: user code works
with ``Result`` and ``Option``.
"""

from __future__ import annotations

import msgspec

__all__ = [
    "ABSENT",
    "AbsentType",
    "Failure",
    "Outcome",
    "Present",
    "Slot",
    "Success",
]


class Success[T](msgspec.Struct, frozen=True, gc=False):
    """Success slot of an outcome."""

    value: T


class Failure[E](msgspec.Struct, frozen=True, gc=False):
    """Failure slot of an outcome."""

    error: E


type Outcome[T, E] = Success[T] | Failure[E]


class Present[T](msgspec.Struct, frozen=True, gc=False):
    """An option slot holding a value, which may itself be ``None``."""

    value: T


class AbsentType(msgspec.Struct, frozen=True, gc=False):
    """An empty option slot.

    Use the ``ABSENT`` constant rather than instantiating directly.
    """


ABSENT: AbsentType = AbsentType()
"""Singleton empty slot."""


type Slot[T] = Present[T] | AbsentType
