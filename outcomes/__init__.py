"""
Result and Option types for explicit failure and absence handling.

``Result`` is ``Ok(value)`` or ``Err(error)``; ``Option`` is ``Some(value)`` or
``NOTHING``. Both are immutable and chain with ``map`` / ``flat_map`` /
``match`` instead of try/except and None checks.
"""

from outcomes.exceptions import AbsentValueError, FlattenError, OutcomeError, UnwrapError
from outcomes.option import NOTHING, Nothing, Option, Some, nothing, option, some
from outcomes.result import Err, Ok, Result

__all__ = [
    "Ok",
    "Err",
    "Result",
    "Some",
    "Nothing",
    "NOTHING",
    "Option",
    "some",
    "nothing",
    "option",
    "OutcomeError",
    "UnwrapError",
    "AbsentValueError",
    "FlattenError",
]
