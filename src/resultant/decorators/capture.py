"""@resultify and @goified: run every call through a builder."""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import wrapt

from resultant.bridge import goify
from resultant.builders import Capture, build_result

__all__ = ["goified", "resultify"]


def resultify(
    func: Callable[..., Any] | None = None,
    *,
    capture: Capture | None = None,
) -> Any:
    """Decorator that returns the call's outcome as a Result.

    Each call goes through ``build_result``: sync functions return
    ``Ok``/``Err`` directly, async functions return a PendingResult.

    Can be used with or without arguments:
        @resultify
        def parse(raw): ...

        @resultify(capture=(ValueError,))
        def parse_strict(raw): ...

    Args:
        func: The function to wrap (when used without parentheses).
        capture: Exception types to capture. Defaults to the configured set.

    Example:
        ```python
        @resultify
        def divide(a: int, b: int) -> float:
            return a / b
        divide(10, 2)
        # Ok(5.0)
        divide(10, 0)
        # Err(CapturedError('division by zero'))
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        return build_result(lambda: wrapped(*args, **kwargs), capture=capture)

    if func is not None:
        return wrapper(func)
    return wrapper


def goified(
    func: Callable[..., Any] | None = None,
    *,
    capture: Capture | None = None,
) -> Any:
    """Decorator that returns the call's outcome as a ``(value, error)`` tuple.

    Each call goes through ``goify``; async functions return an awaitable
    of the tuple.

    Example:
        ```python
        @goified
        async def load(path: str) -> bytes: ...

        data, err = await load("config.json")
        ```
    """

    @wrapt.decorator
    def wrapper(
        wrapped: Callable[..., Any],
        instance: Any,
        args: tuple[Any, ...],
        kwargs: dict[str, Any],
    ) -> Any:
        return goify(lambda: wrapped(*args, **kwargs), capture=capture)

    if func is not None:
        return wrapper(func)
    return wrapper
