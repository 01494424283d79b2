"""Decorators: @resultify and @goified."""

from resultant.decorators.capture import goified, resultify

__all__ = [
    "goified",
    "resultify",
]
