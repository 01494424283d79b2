"""Core types: Result, Ok, Err, Option, Some, Nothing."""

from resultant.types.option import Nothing, Option, Some
from resultant.types.outcome import ABSENT, AbsentType, Failure, Outcome, Present, Slot, Success
from resultant.types.result import Err, Ok, Result

__all__ = [
    "ABSENT",
    "AbsentType",
    "Err",
    "Failure",
    "Nothing",
    "Ok",
    "Option",
    "Outcome",
    "Present",
    "Result",
    "Slot",
    "Some",
    "Success",
]
