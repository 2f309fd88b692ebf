"""Registry — named observables that widgets bind to.

A Registry maps validated string names to Observables or Computeds. The
binding layer resolves every widget's name through it once, at setup time,
so a miswired name fails loudly instead of leaving a dead widget.
"""

from __future__ import annotations

import logging
import re
from typing import Iterator, Mapping

from bindfx.observable import Observable, ReadableObservable

logger = logging.getLogger("bindfx.registry")

_NAME = re.compile(r"[A-Za-z_][A-Za-z0-9_-]*")


class UnknownBindingError(KeyError):
    """A binding name that is not in the registry."""

    def __init__(self, name: str) -> None:
        super().__init__(name)
        self.name = name

    def __str__(self) -> str:
        return f"no observable registered under {self.name!r}"


class Registry:
    """Name -> observable mapping, in registration order."""

    def __init__(self, observables: Mapping[str, ReadableObservable] | None = None) -> None:
        self._observables: dict[str, ReadableObservable] = {}
        for name, observable in (observables or {}).items():
            self.register(name, observable)

    @classmethod
    def from_schema(cls, schema: dict[str, object], initial: dict | None = None) -> Registry:
        """One Observable per schema key, holding initial[key] or the schema default."""
        registry = cls()
        for key, default in schema.items():
            value = initial.get(key, default) if initial else default
            registry.register(key, Observable(value))
        return registry

    def register(self, name: str, observable: ReadableObservable) -> ReadableObservable:
        if not isinstance(name, str) or not _NAME.fullmatch(name):
            raise ValueError(f"invalid binding name: {name!r}")
        if name in self._observables:
            raise ValueError(f"binding name already registered: {name!r}")
        if not isinstance(observable, ReadableObservable):
            raise TypeError(f"expected an Observable or Computed for {name!r}, got {observable!r}")
        self._observables[name] = observable
        logger.debug("Registered %r -> %r", name, observable)
        return observable

    def resolve(self, name: str) -> ReadableObservable:
        try:
            return self._observables[name]
        except KeyError:
            raise UnknownBindingError(name) from None

    __getitem__ = resolve

    def get(self, name: str) -> object:
        return self.resolve(name).value

    def set(self, name: str, value: object) -> None:
        self.resolve(name).value = value

    def __contains__(self, name: object) -> bool:
        return name in self._observables

    def __iter__(self) -> Iterator[str]:
        return iter(self._observables)

    def __len__(self) -> int:
        return len(self._observables)

    def __repr__(self) -> str:
        return f"Registry({list(self._observables)!r})"
