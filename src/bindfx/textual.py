"""Textual binding layer — two-way sync between observables and Input widgets.

A BoundInput names the registry entry it shows through its data_bind
attribute. apply_bindings() scans a widget tree once, resolves every name,
and wires each pair:

- the widget starts out showing the observable's value,
- every notification overwrites the widget's text,
- every keystroke-level Input.Changed writes the current text back into the observable.

Display writes are made with Input.Changed prevented, so only user edits flow
back. Computeds are wired like any other entry; typing into a widget bound to
one raises AttributeError from the keystroke handler.
"""

from __future__ import annotations

import logging
from typing import Callable

from textual.widgets import Input

from bindfx.observable import ReadableObservable
from bindfx.registry import Registry

logger = logging.getLogger("bindfx.textual")

BIND_ATTRIBUTE = "data_bind"

Writer = Callable[[str], None]


class BindingError(Exception):
    """A widget tree that cannot be bound as requested."""


class BindingsAlreadyApplied(BindingError):
    """apply() called on a session that already ran."""


class BoundInput(Input):
    """An Input that syncs with the registry entry named by data_bind."""

    def __init__(self, value: str | None = None, *, data_bind: str, **kwargs) -> None:
        super().__init__(value, **kwargs)
        self.data_bind = data_bind
        self._writer: Writer | None = None

    @property
    def is_bound(self) -> bool:
        return self._writer is not None

    def attach(self, writer: Writer) -> None:
        """Install the callback that receives user edits."""
        if self._writer is not None:
            raise BindingError(f"{self!r} is already bound to {self.data_bind!r}")
        self._writer = writer

    def on_input_changed(self, event: Input.Changed) -> None:
        # event.value is the text when the message was posted; later keystrokes
        # may already be in self.value.
        if event.input is self and self._writer is not None:
            self._writer(self.value)


def _display(element, value: object) -> None:
    """Show value in element without posting Input.Changed."""
    text = "" if value is None else str(value)
    with element.prevent(Input.Changed):
        element.value = text


def bind_value(element, observable: ReadableObservable) -> None:
    """Wire one widget and one observable together, both directions."""
    _display(element, observable.value)
    observable.subscribe(lambda value: _display(element, value))

    def _write(text: str) -> None:
        observable.value = text

    element.attach(_write)
    logger.debug("Bound %r to %r", getattr(element, BIND_ATTRIBUTE), observable)


class BindingSession:
    """One-shot binding of a widget tree against a registry.

    apply() resolves every BoundInput under root before touching any of them,
    then wires them all. A session applies once; a second apply() raises
    BindingsAlreadyApplied.
    """

    def __init__(self, root, registry: Registry) -> None:
        self._root = root
        self._registry = registry
        self._bindings: tuple = ()
        self._applied = False

    @property
    def applied(self) -> bool:
        return self._applied

    @property
    def bindings(self) -> tuple:
        """(element, observable) pairs wired by apply(), in document order."""
        return self._bindings

    def _resolve(self) -> list[tuple]:
        pairs = []
        for element in self._root.query(BoundInput):
            name = getattr(element, BIND_ATTRIBUTE)
            if element.is_bound:
                raise BindingError(f"{element!r} is already bound to {name!r}")
            try:
                observable = self._registry.resolve(name)
            except KeyError:
                logger.error("No observable registered for %s=%r", BIND_ATTRIBUTE, name)
                raise
            pairs.append((element, observable))
        return pairs

    def apply(self) -> BindingSession:
        if self._applied:
            raise BindingsAlreadyApplied("bindings for this session were already applied")
        pairs = self._resolve()
        for element, observable in pairs:
            bind_value(element, observable)
        self._bindings = tuple(pairs)
        self._applied = True
        logger.info("Applied %d bindings", len(pairs))
        return self


def apply_bindings(root, registry: Registry) -> BindingSession:
    """Bind every BoundInput under root. Run once per application bootstrap."""
    return BindingSession(root, registry).apply()
