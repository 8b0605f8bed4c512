from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from heartwood.errors import IllegalStateError

L = TypeVar("L")
R = TypeVar("R")


@dataclass(frozen=True)
class Either(Generic[L, R]):
    """
    Represents a value of one of two possible types (a disjoint union).

    Equal iff same side and equal values, `Left(x) != Right(x)`. Hashing
    follows the wrapped value, so an unhashable value (e.g. a list) makes
    `hash()` raise TypeError.
    """

    value: L | R

    @staticmethod
    def left(value: L) -> "Either[L, Any]":
        return Left(value)

    @staticmethod
    def right(value: R) -> "Either[Any, R]":
        return Right(value)

    @staticmethod
    def one_of(left: L | None, right: R | None) -> "Either[L, R]":
        """
        Either holding whichever argument is not None.

        Raises:
            ValueError: if both arguments are None, or both are not None.
        """
        if (left is None) == (right is None):
            raise ValueError("Exactly one of left or right must be None")
        if left is None:
            return Right(right)
        return Left(left)

    def is_left(self) -> bool:
        raise NotImplementedError()

    def is_right(self) -> bool:
        return not self.is_left()

    def get_left(self) -> L:
        raise NotImplementedError()

    def get_right(self) -> R:
        raise NotImplementedError()

    def left_value(self) -> L | None:
        return self.get_left() if self.is_left() else None

    def right_value(self) -> R | None:
        return self.get_right() if self.is_right() else None


@dataclass(frozen=True)
class Left(Either[L, Any]):
    value: L

    def is_left(self) -> bool:
        return True

    def get_left(self) -> L:
        return self.value

    def get_right(self) -> NoReturn:
        raise IllegalStateError("No right value")

    def __str__(self) -> str:
        return f"Left {{{self.value}}}"


@dataclass(frozen=True)
class Right(Either[Any, R]):
    value: R

    def is_left(self) -> bool:
        return False

    def get_left(self) -> NoReturn:
        raise IllegalStateError("No left value")

    def get_right(self) -> R:
        return self.value

    def __str__(self) -> str:
        return f"Right {{{self.value}}}"
