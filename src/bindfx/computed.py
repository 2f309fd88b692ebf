"""Computed values — derived, read-only state.

A Computed wraps a zero-argument function and a fixed set of dependencies.
The function runs once at construction to produce the initial value. Every
time a dependency notifies, the function runs again and the Computed
notifies its own listeners, whether or not the result changed.

Dependencies are either passed explicitly or collected from the observables
the function reads during that first run. Either way they are fixed for the
life of the Computed.

A Computed has no setter. Assigning to .value raises AttributeError.
"""

from __future__ import annotations

from typing import Callable, Iterable, TypeVar, overload
from bindfx._tracking import collect, untracked
from bindfx.observable import ReadableObservable

T = TypeVar("T")


class Computed(ReadableObservable[T]):
    """A derived value recomputed whenever one of its dependencies notifies."""

    __slots__ = ("_fn", "_deps")

    def __init__(
        self,
        fn: Callable[[], T],
        deps: Iterable[ReadableObservable] | None = None,
    ) -> None:
        value, tracked = collect(fn)
        super().__init__(value)
        self._fn = fn
        self._deps = tracked if deps is None else tuple(deps)
        for dep in self._deps:
            dep.subscribe(self._on_dependency_changed)

    @property
    def dependencies(self) -> tuple:
        return self._deps

    def _on_dependency_changed(self, _value: object) -> None:
        """Recompute and re-notify. No equality check: listeners always fire."""
        self._value = untracked(self._fn)
        self.notify()

    def __repr__(self) -> str:
        name = getattr(self._fn, "__name__", "fn")
        return f"Computed({name}, value={self._value!r})"


@overload
def computed(fn: Callable[[], T]) -> Computed[T]: ...


@overload
def computed(
    *, deps: Iterable[ReadableObservable]
) -> Callable[[Callable[[], T]], Computed[T]]: ...


def computed(fn=None, *, deps=None):
    """Decorator/factory to create a Computed from a function.

    Usage:
        first = Observable("John")
        last = Observable("Smith")

        @computed
        def full():
            return f"{first.value} {last.value}".strip()

        full.value  # "John Smith"

        @computed(deps=[first])
        def initial():
            return first.value[:1]
    """
    if fn is None:
        return lambda f: Computed(f, deps)
    return Computed(fn, deps)
