import typing as t
from dataclasses import dataclass

T = t.TypeVar("T")
U = t.TypeVar("U")
L = t.TypeVar("L")
R = t.TypeVar("R")


@dataclass(frozen=True, slots=True)
class Left(t.Generic[T]):
    value: T


@dataclass(frozen=True, slots=True)
class Right(t.Generic[T]):
    value: T


# By convention `Right` holds the good value and `Left` the bad one
Either = Left[L] | Right[R]


def fold(
    either: Either[L, R],
    on_left: t.Callable[[L], U],
    on_right: t.Callable[[R], U],
) -> U:
    """Collapses `either` into a single value, calling only the callable
    that matches the branch it holds.
    """
    match either:
        case Left(value):
            return on_left(value)
        case Right(value):
            return on_right(value)
        case _:
            raise TypeError(f"Expected Left or Right, got: {either!r}")
