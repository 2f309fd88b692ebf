"""Read tracking for Computeds built without an explicit dependency list.

While a derive function runs for the first time, every observable whose value
is read is appended to the active collector. The collected observables become
the Computed's fixed dependencies. Later recomputes run untracked.
"""

from __future__ import annotations

import contextvars
from typing import TYPE_CHECKING, Callable, TypeVar

if TYPE_CHECKING:
    from bindfx.observable import ReadableObservable

T = TypeVar("T")

# Observables read so far by the derive function under evaluation.
# None outside of a collect() call.
current_reads: contextvars.ContextVar[list | None] = contextvars.ContextVar(
    "current_reads", default=None
)


def report_read(observable: ReadableObservable) -> None:
    """Record a read if a collector is active."""
    reads = current_reads.get()
    if reads is not None:
        reads.append(observable)


def collect(fn: Callable[[], T]) -> tuple[T, tuple]:
    """Evaluate fn and return its result with the observables it read.

    Duplicates are dropped, first-read order is kept.
    """
    reads: list = []
    token = current_reads.set(reads)
    try:
        result = fn()
    finally:
        current_reads.reset(token)
    return result, tuple(dict.fromkeys(reads))


def untracked(fn: Callable[[], T]) -> T:
    """Evaluate fn with any active collector suspended."""
    token = current_reads.set(None)
    try:
        return fn()
    finally:
        current_reads.reset(token)
