"""Conversions between `Either` and `Result`.

These are right-biased: `Right` maps to `Ok` and `Left` maps to `Err`.

    >>> to_right(42)
    Right(value=42)
    >>> into_result(to_right(42))
    Ok(value=42)
    >>> into_result_with(to_left("boom"), RuntimeError)
    Err(value=RuntimeError('boom'))
"""

import typing as t

from .result import Err, Ok, Result
from .union import Either, Left, Right

A = t.TypeVar("A")
E = t.TypeVar("E")
TErr = t.TypeVar("TErr", bound=BaseException)


def to_right(value: A) -> Either[t.Any, A]:
    return Right(value)


def to_left(value: A) -> Either[A, t.Any]:
    return Left(value)


def into_result(either: Either[TErr, A]) -> Result[A, TErr]:
    """The `Left` side must already hold an exception, it ends up as the
    `Err` value untouched.
    """
    return into_result_with(either, _identity)


def into_result_with(
    either: Either[E, A], f: t.Callable[[E], TErr]
) -> Result[A, TErr]:
    """Like `into_result` but `f` turns the `Left` value into an exception.

    `f` is only called for `Left`, anything it raises goes straight to the
    caller.
    """
    match either:
        case Left(error):
            return Err(f(error))
        case Right(value):
            return Ok(value)
        case _:
            raise TypeError(f"Expected Left or Right, got: {either!r}")


def from_result(result: Result[A, TErr]) -> Either[TErr, A]:
    match result:
        case Err(error):
            return Left(error)
        case Ok(value):
            return Right(value)
        case _:
            raise TypeError(f"Expected Ok or Err, got: {result!r}")


def _identity(error: TErr) -> TErr:
    return error
