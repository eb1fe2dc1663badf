import logging
import typing as t
from dataclasses import dataclass

logger = logging.getLogger(__name__)

T = t.TypeVar("T")
TOk = t.TypeVar("TOk")
TErr = t.TypeVar("TErr", bound=BaseException)
P = t.ParamSpec("P")


@dataclass(frozen=True, slots=True)
class Ok(t.Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Err(t.Generic[TErr]):
    value: TErr


Result = Ok[TOk] | Err[TErr]


def unwrap(result: Result[TOk, TErr]) -> TOk:
    """Returns the value of an `Ok` or raises the exception held by `Err`"""
    match result:
        case Ok(value):
            return value
        case Err(error):
            raise error
        case _:
            raise TypeError(f"Expected Ok or Err, got: {result!r}")


def attempt(
    fn: t.Callable[P, TOk], *args: P.args, **kwargs: P.kwargs
) -> Result[TOk, Exception]:
    """Calls `fn` and captures what it returns as `Ok` or what it raises
    as `Err`.

    Only `Exception` subclasses are captured, `KeyboardInterrupt`,
    `SystemExit` and friends go through.
    """
    try:
        return Ok(fn(*args, **kwargs))
    except Exception as error:
        logger.debug(
            "Captured %r raised by %s",
            error,
            getattr(fn, "__qualname__", repr(fn)),
        )
        return Err(error)
