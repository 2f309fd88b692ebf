"""Observable values — state that notifies its listeners on change.

Reading and writing are split into two capabilities. ReadableObservable is
the read side every consumer sees: the current value, subscribe and notify.
Observable adds the write side. Computed (see bindfx.computed) only ever
exposes the read side.

State lives in instance slots, so an observable and its listeners are freed
together with the scope that owns it.

Notification is synchronous: notify() runs every listener, in subscription
order, before returning to the writer. A listener that raises aborts the
remaining listeners and the error propagates to whoever set the value.
"""

from __future__ import annotations

from typing import Callable, Generic, TypeVar
from bindfx._tracking import report_read

T = TypeVar("T")

Listener = Callable[[T], None]


class ReadableObservable(Generic[T]):
    """Read capability shared by Observable and Computed."""

    __slots__ = ("_value", "_listeners", "__weakref__")

    def __init__(self, value: T) -> None:
        self._value = value
        self._listeners: list[Listener[T]] = []

    @property
    def value(self) -> T:
        """The current value. Reading it inside a tracked derivation records the dependency."""
        report_read(self)
        return self._value

    def get(self) -> T:
        return self.value

    def subscribe(self, listener: Listener[T]) -> None:
        """Append listener. It is called with the new value on every notification."""
        self._listeners.append(listener)

    def notify(self) -> None:
        """Call every listener with the current value, in subscription order."""
        value = self._value
        # Snapshot: listeners subscribed during this pass wait for the next one.
        for listener in list(self._listeners):
            listener(value)


class Observable(ReadableObservable[T]):
    """A single mutable value that notifies its listeners when it changes."""

    __slots__ = ()

    @ReadableObservable.value.setter
    def value(self, value: T) -> None:
        old = self._value
        if old is value or old == value:
            return
        self._value = value
        self.notify()

    def set(self, value: T) -> None:
        self.value = value

    def __repr__(self) -> str:
        return f"Observable({self._value!r})"
