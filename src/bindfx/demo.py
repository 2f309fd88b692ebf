"""First/last/full name form: two editable inputs and a derived one.

Run with `bindfx-demo` or `python -m bindfx.demo`.
"""

from __future__ import annotations

from textual.app import App, ComposeResult
from textual.widgets import Label

from bindfx.computed import Computed
from bindfx.observable import Observable
from bindfx.registry import Registry
from bindfx.textual import BindingSession, BoundInput, apply_bindings


class NameApp(App):
    """Edits a first and last name; the full name follows."""

    CSS = """
    Label {
        margin: 1 1 0 1;
    }
    """

    def __init__(self, first: str = "John", last: str = "Smith") -> None:
        super().__init__()
        self.registry = Registry()
        first_name = self.registry.register("first", Observable(first))
        last_name = self.registry.register("last", Observable(last))
        self.registry.register(
            "full",
            Computed(
                lambda: f"{first_name.value} {last_name.value}".strip(),
                [first_name, last_name],
            ),
        )
        self.bindings: BindingSession | None = None

    def compose(self) -> ComposeResult:
        yield Label("First name")
        yield BoundInput(data_bind="first", id="first", select_on_focus=False)
        yield Label("Last name")
        yield BoundInput(data_bind="last", id="last", select_on_focus=False)
        yield Label("Full name")
        # Bound to a Computed, which rejects writes.
        yield BoundInput(data_bind="full", id="full", disabled=True)

    def on_mount(self) -> None:
        self.bindings = apply_bindings(self, self.registry)


def main() -> None:
    NameApp().run()


if __name__ == "__main__":
    main()
