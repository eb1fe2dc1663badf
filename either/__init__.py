from .convert import (
    from_result,
    into_result,
    into_result_with,
    to_left,
    to_right,
)
from .result import Err, Ok, Result, attempt, unwrap
from .union import Either, Left, Right, fold

__all__ = [
    "Either",
    "Left",
    "Right",
    "fold",
    "Result",
    "Ok",
    "Err",
    "unwrap",
    "attempt",
    "to_left",
    "to_right",
    "into_result",
    "into_result_with",
    "from_result",
]
