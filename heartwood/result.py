import functools
from collections.abc import Callable, Iterable, Iterator
from dataclasses import dataclass
from typing import Any, Generic, NoReturn, TypeVar

from heartwood.errors import IllegalStateError

T = TypeVar("T")
S = TypeVar("S")
A = TypeVar("A")
R = TypeVar("R")


@dataclass(frozen=True)
class Try(Generic[T], Iterable[T]):
    """
    Outcome of a computation that may have raised: either `Success` holding
    the value, or `Failure` holding the exception.

    Usage:

        answer = (
            Try.execute(deep_thought.ask, "What is the ultimate question?")
            .then(interpret_answer)
            .recover(lambda: 42)
        )

    Every step that runs caller code captures `Exception` into a `Failure`,
    so the chain above never raises.

    As with `Either`, `hash()` of a `Success` raises TypeError when the value
    is unhashable.
    """

    @staticmethod
    def execute(fn: Callable[..., R], /, *args: Any, **kwargs: Any) -> "Try[R]":
        """
        Call `fn(*args, **kwargs)` and wrap the outcome. A function returning
        `None` (a procedure) yields `Success(None)`.
        """
        try:
            return Success(fn(*args, **kwargs))
        except Exception as e:
            return Failure(e)

    @staticmethod
    def lift(fn: Callable[[A], R]) -> Callable[[A], "Try[R]"]:
        """
        Turn a one-argument function that may raise into one returning `Try`:

            parse = Try.lift(int)
            parse("69").get_value()  # 69
        """

        @functools.wraps(fn)
        def lifted(arg: A) -> "Try[R]":
            return Try.execute(fn, arg)

        return lifted

    @staticmethod
    def success(value: T) -> "Try[T]":
        return Success(value)

    @staticmethod
    def failure(exception: Exception) -> "Try[Any]":
        return Failure(exception)

    def is_successful(self) -> bool:
        raise NotImplementedError()

    def get_value(self) -> T:
        """Raises IllegalStateError on a `Failure`, check `is_successful()` first."""
        raise NotImplementedError()

    def get_failure(self) -> Exception:
        """Raises IllegalStateError on a `Success`, check `is_successful()` first."""
        raise NotImplementedError()

    def on_success(self, handler: Callable[[T], Any]) -> "Try[T]":
        if self.is_successful():
            handler(self.get_value())
        return self

    def on_failure(self, handler: Callable[[Exception], Any]) -> "Try[T]":
        if not self.is_successful():
            handler(self.get_failure())
        return self

    def on_failure_raise(
        self, exception_mapper: Callable[[Exception], BaseException]
    ) -> "Try[T]":
        """
        Convert back to raising style: on `Failure` raise
        `exception_mapper(exception)`, chained from the captured exception.
        """
        if not self.is_successful():
            failure = self.get_failure()
            raise exception_mapper(failure) from failure
        return self

    def then(self, mapper: Callable[[T], S]) -> "Try[S]":
        """
        Map the success value, capturing anything `mapper` raises. A `Failure`
        is passed through and `mapper` is not called.
        """
        if self.is_successful():
            return Try.execute(mapper, self.get_value())
        return Failure(self.get_failure())

    def then_try(self, mapper: Callable[[T], "Try[S]"]) -> "Try[S]":
        """Like `then`, but `mapper` returns a `Try` which is not wrapped again."""
        if not self.is_successful():
            return Failure(self.get_failure())
        mapped = Try.execute(mapper, self.get_value())
        if not mapped.is_successful():
            return Failure(mapped.get_failure())
        inner = mapped.get_value()
        if not isinstance(inner, Try):
            return Failure(
                TypeError(f"then_try mapper must return a Try, got {type(inner).__name__}")
            )
        return inner

    def get(self) -> T | None:
        """
        Success value or None on failure. Beware: a `Success(None)` can't be
        told apart from a failure this way.
        """
        return self.get_value() if self.is_successful() else None

    def stream(self) -> Iterator[T]:
        """Fresh iterator over the success value, empty on failure."""
        return iter([self.get_value()]) if self.is_successful() else iter([])

    def __iter__(self) -> Iterator[T]:
        return self.stream()

    def recover(self, alternative: Callable[[], T]) -> "Try[T]":
        """
        On `Failure` run `alternative` with the same capture as `execute`,
        a `Success` is returned as is.
        """
        if self.is_successful():
            return self
        return Try.execute(alternative)


@dataclass(frozen=True)
class Success(Try[T]):
    value: T

    def is_successful(self) -> bool:
        return True

    def get_value(self) -> T:
        return self.value

    def get_failure(self) -> NoReturn:
        raise IllegalStateError("Success does not contain failure")

    def __str__(self) -> str:
        return f"Success {{{self.value}}}"


@dataclass(frozen=True)
class Failure(Try[T]):
    exception: Exception

    def __post_init__(self) -> None:
        if self.exception is None:
            raise ValueError("exception is required, None supplied")

    def is_successful(self) -> bool:
        return False

    def get_value(self) -> NoReturn:
        raise IllegalStateError("Failure does not contain result") from self.exception

    def get_failure(self) -> Exception:
        return self.exception

    def __str__(self) -> str:
        return f"Failure {{{self.exception!r}}}"
