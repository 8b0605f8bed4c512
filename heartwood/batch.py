import logging
import time
from collections.abc import Callable, Iterable, Iterator
from datetime import timedelta
from typing import TypeVar

from tqdm import tqdm

from heartwood.result import Failure, Success, Try

logger = logging.getLogger(__name__)

T = TypeVar("T")
R = TypeVar("R")


def execute_each(
    fn: Callable[[T], R],
    items: Iterable[T],
    label: str | None = None,
    progress: bool = False,
) -> Iterator[Try[R]]:
    """
    Given an iterable of inputs, returns a lazy iterator of failsafe results of
    `fn`, one `Try` per input, in input order. `label` is a human-readable name
    for this batch, when given the success/failure counts and the time taken
    are logged once the iterator is exhausted or closed. `progress` shows a
    tqdm progress bar.
    """
    successes = failures = 0
    it = tqdm(items, desc=label, disable=not progress)
    if label is None:
        for item in it:
            yield Try.execute(fn, item)
        return
    t_0 = time.monotonic()
    try:
        for item in it:
            result = Try.execute(fn, item)
            if result.is_successful():
                successes += 1
            else:
                failures += 1
            yield result
    finally:
        logger.info(
            f"{label}: {successes:,} succeeded, {failures:,} failed, "
            f"took {timedelta(seconds=time.monotonic() - t_0)}"
        )


def sequence(tries: Iterable[Try[T]]) -> Try[list[T]]:
    """
    Turn an iterable of tries into a try of a list. Stops at, and returns, the
    first `Failure`.

    For example:
    ```
    sequence([Try.success(1), Try.success(2)]) -> Success([1, 2])
    ```
    """
    values: list[T] = []
    for t in tries:
        if not t.is_successful():
            return Failure(t.get_failure())
        values.append(t.get_value())
    return Success(values)


def partition(tries: Iterable[Try[T]]) -> tuple[list[T], list[Exception]]:
    """Split tries into success values and failure exceptions, order preserved."""
    values: list[T] = []
    exceptions: list[Exception] = []
    for t in tries:
        t.on_success(values.append).on_failure(exceptions.append)
    return values, exceptions
