"""resultant: explicit success/failure and presence/absence values for Python 3.13+.

Result and Option combinators accept sync or async callables; an async
callable turns the chain into a PendingResult/PendingOption that you await
at the end.

Flat imports (preferred):
    from resultant import Result, Ok, Err, Option, Some, Nothing
    from resultant import build_result, goify, match, OptionHandlers

Submodule imports (for organization):
    from resultant.types import Result, Option
    from resultant.async_ import PendingResult
    from resultant.wire import SerializableOutcome, encode, decode
"""

# Types
from resultant.types import (
    Err,
    Nothing,
    Ok,
    Option,
    Result,
    Some,
)

# Async
from resultant.async_ import PendingOption, PendingResult

# Builders
from resultant.builders import build_result, build_serializable_outcome

# Tuple bridge
from resultant.bridge import GoifyResult, goify, goify_sync

# Dispatch
from resultant.dispatch import (
    OptionHandlers,
    ResultHandlers,
    match,
    match_async,
    match_goify,
)

# Decorators
from resultant.decorators import goified, resultify

# Errors
from resultant.errors import (
    CapturedError,
    InvariantViolation,
    MatchError,
    ResultantError,
)

# Wire
from resultant.wire import SerializableOutcome

# Normalizer
from resultant._internal.normalize import normalize_error

__all__ = [
    "CapturedError",
    "Err",
    "GoifyResult",
    "InvariantViolation",
    "MatchError",
    "Nothing",
    "Ok",
    "Option",
    "OptionHandlers",
    "PendingOption",
    "PendingResult",
    "Result",
    "ResultHandlers",
    "ResultantError",
    "SerializableOutcome",
    "Some",
    "build_result",
    "build_serializable_outcome",
    "goified",
    "goify",
    "goify_sync",
    "match",
    "match_async",
    "match_goify",
    "normalize_error",
    "resultify",
]
