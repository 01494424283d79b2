"""Pending wrappers returned when a combinator's callable is asynchronous.

Examples:
    >>> from resultant import Ok
    >>> from resultant.async_ import PendingResult
    >>>
    >>> async def fetch(user_id: int) -> Result[dict, str]:
    ...     return Ok({"id": user_id})
    >>>
    >>> async def main():
    ...     pending = Ok(1).and_then(fetch)   # PendingResult
    ...     user_id = await pending.map(lambda d: d["id"]).unwrap()
"""

from resultant.async_.pending import PendingOption, PendingResult

__all__ = [
    "PendingOption",
    "PendingResult",
]
