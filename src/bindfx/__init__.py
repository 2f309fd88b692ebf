"""BindFX: observable values, computed values and two-way Textual bindings."""

from importlib.metadata import version as _version

__version__ = _version("bindfx")

from bindfx.observable import Observable, ReadableObservable
from bindfx.computed import Computed, computed
from bindfx.registry import Registry, UnknownBindingError
# textual binding layer NOT auto-imported: import bindfx.textual

__all__ = [
    "Observable",
    "ReadableObservable",
    "Computed",
    "computed",
    "Registry",
    "UnknownBindingError",
]
