"""Reduce an arbitrary raised or rejected value to a string."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any

import msgspec

__all__ = ["normalize_error"]


def normalize_error(err: Any) -> str:
    """Return a string describing ``err``.

    The first rule that applies wins:

    1. strings are returned unchanged;
    2. exceptions give their message (``str(exc)``);
    3. objects or mappings with a string ``message`` give that message;
    4. anything else is serialized to JSON;
    5. if serialization fails, ``str(err)`` is used.

    Never raises.

    Examples:
        >>> normalize_error(ValueError("bad input"))
        'bad input'
        >>> normalize_error({"code": 7})
        '{"code":7}'
    """
    if isinstance(err, str):
        return err

    if isinstance(err, BaseException):
        return _fallback_str(err)

    message = _message_of(err)
    if isinstance(message, str):
        return message

    try:
        return msgspec.json.encode(err).decode()
    except Exception:
        # Unsupported types and self-referencing containers.
        return _fallback_str(err)


def _message_of(err: Any) -> object:
    try:
        if isinstance(err, Mapping):
            return err.get("message")
        return getattr(err, "message", None)
    except Exception:
        return None


def _fallback_str(err: Any) -> str:
    try:
        return str(err)
    except Exception:
        return object.__repr__(err)
