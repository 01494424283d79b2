"""Flat wire form of an outcome: ``{"value": T, "ok": true}`` or ``{"error": str, "ok": false}``.

The ``ok`` flag is redundant with which slot is present but lets JSON
clients branch without probing keys. Failures are always plain strings.

Usage:
    >>> from resultant.wire import SerializableOutcome, encode, decode
    >>> encode(SerializableOutcome(value=3, ok=True))
    b'{"value":3,"ok":true}'
    >>> decode(b'{"error":"boom","ok":false}')
    SerializableOutcome(error='boom', ok=False)
"""

from __future__ import annotations

from typing import Any

import msgspec

__all__ = [
    "SerializableOutcome",
    "decode",
    "encode",
    "from_mapping",
]


class SerializableOutcome[T](msgspec.Struct, frozen=True, kw_only=True, repr_omit_defaults=True):
    """Wire-safe outcome with an explicit ``ok`` discriminant.

    Exactly one of ``value`` and ``error`` is set, and ``ok`` says which.
    Unset slots are left out of the encoded document. A success may carry
    ``None`` as its value; it is still encoded as ``"value": null``.

    Attributes:
        value: The success payload (unset on failure).
        error: The failure message (unset on success).
        ok: True for success, False for failure.
    """

    value: T | msgspec.UnsetType = msgspec.UNSET
    error: str | msgspec.UnsetType = msgspec.UNSET
    ok: bool

    def __post_init__(self) -> None:
        has_value = self.value is not msgspec.UNSET
        has_error = self.error is not msgspec.UNSET
        if has_value and has_error:
            msg = "outcome cannot carry both 'value' and 'error'"
            raise ValueError(msg)
        if self.ok and has_error:
            msg = "successful outcome cannot carry 'error'"
            raise ValueError(msg)
        if not self.ok and not has_error:
            msg = "failed outcome must carry 'error'"
            raise ValueError(msg)
        if not self.ok and has_value:
            msg = "failed outcome cannot carry 'value'"
            raise ValueError(msg)


# Decoders are reentrant and can be shared; encoding goes through msgspec.json.encode.
_decoder: msgspec.json.Decoder[SerializableOutcome[Any]] = msgspec.json.Decoder(SerializableOutcome)


def encode(outcome: SerializableOutcome[Any]) -> bytes:
    """Encode a wire outcome as JSON bytes."""
    return msgspec.json.encode(outcome)


def decode(data: bytes | str) -> SerializableOutcome[Any]:
    """Decode JSON into a wire outcome.

    Raises:
        msgspec.ValidationError: If the document is not a well-formed outcome.
    """
    return _decoder.decode(data)


def from_mapping(data: Any) -> SerializableOutcome[Any]:
    """Convert a decoded mapping (or an existing outcome) into a wire outcome."""
    if isinstance(data, SerializableOutcome):
        return data
    return msgspec.convert(data, SerializableOutcome)
