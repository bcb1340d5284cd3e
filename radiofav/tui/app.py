#!/usr/bin/env python3
from textual.app import App, ComposeResult
from textual.binding import Binding
from textual.containers import Horizontal, Vertical
from textual.widgets import Footer, Header, Input, Label, ListItem, ListView

from radiofav.core import notify
from radiofav.core.config import JsonPreferences
from radiofav.core.errors import FavoriteListError
from radiofav.core.favorites import FavoriteListStore


class RadioFav(App):
    TITLE = "radiofav"

    CSS = """
    Screen {
        background: black;
    }
    #sidebar {
        width: 30%;
        border: round white;
        padding: 1 1;
    }
    #main {
        width: 70%;
        border: round white;
        padding: 1 1;
    }
    #status {
        margin-top: 1;
        height: 3;
        border: round white;
        padding: 0 1;
    }
    """

    BINDINGS = [
        Binding("q", "quit", "Quit"),
        Binding("n", "new_list", "New List"),
        Binding("d", "delete_list", "Delete List"),
        Binding("r", "refresh", "Refresh"),
    ]

    def __init__(self, store: FavoriteListStore | None = None):
        super().__init__()
        self.store = store or FavoriteListStore(JsonPreferences())
        self._names: list[str] = []

    # ------------------------------------------------------------
    # Layout
    # ------------------------------------------------------------

    def compose(self) -> ComposeResult:
        yield Header(show_clock=True)

        with Horizontal():
            with Vertical(id="sidebar"):
                yield Label("Lists")
                self.lists_view = ListView()
                yield self.lists_view

            with Vertical(id="main"):
                self.title_label = Label("")
                yield self.title_label

                self.name_input = Input(placeholder="New list name…")
                yield self.name_input

                self.stations_view = ListView()
                yield self.stations_view

                self.status = Label("Ready.", id="status")
                yield self.status

        yield Footer()

    def on_mount(self) -> None:
        self.refresh_all()

    # ------------------------------------------------------------
    # Views
    # ------------------------------------------------------------

    def refresh_all(self):
        self.refresh_lists()
        self.refresh_stations()

    def refresh_lists(self):
        self.lists_view.clear()
        current = self.store.get_current_list_name()
        self._names = self.store.list_names()

        for name in self._names:
            marker = "*" if name == current else " "
            self.lists_view.append(ListItem(Label(f"{marker} {name}")))

    def refresh_stations(self):
        self.stations_view.clear()
        self.title_label.update(f"Stations in '{self.store.get_current_list_name()}'")

        for i, st in enumerate(self.store.get_stations(), 1):
            self.stations_view.append(ListItem(Label(f"{i:3}  {st.label()}")))

    def on_list_view_selected(self, event: ListView.Selected) -> None:
        if event.list_view is not self.lists_view:
            return

        name = self._highlighted_list()
        if name is None:
            return

        try:
            self.store.set_current_list_name(name)
        except FavoriteListError as e:
            self.set_status(str(e))
            return

        self.refresh_all()
        self.set_status(f"Switched to {name}.")

    def on_input_submitted(self, event: Input.Submitted) -> None:
        if event.input is not self.name_input:
            return

        self.action_new_list()

    # ------------------------------------------------------------
    # Actions
    # ------------------------------------------------------------

    def action_refresh(self):
        self.store.reload()
        self.refresh_all()
        self.set_status("Refreshed.")

    def action_new_list(self):
        name = self.name_input.value.strip()
        if not name:
            self.set_status("Type a name first.")
            return

        try:
            self.store.add_list(name)
        except FavoriteListError as e:
            self.set_status(str(e))
            return

        self.name_input.value = ""
        self.refresh_lists()
        self.set_status(f"Created {name}.")

    def action_delete_list(self):
        name = self._highlighted_list()
        if name is None:
            self.set_status("No list highlighted.")
            return

        if not self.store.remove_list(name):
            self.set_status(f"Cannot remove {name}.")
            return

        self.refresh_all()
        self.set_status(f"Removed {name}.")
        notify.notify("radiofav", f"Removed list {name}")

    # ------------------------------------------------------------
    # Helpers
    # ------------------------------------------------------------

    def _highlighted_list(self) -> str | None:
        idx = self.lists_view.index
        if idx is None or not (0 <= idx < len(self._names)):
            return None
        return self._names[idx]

    def set_status(self, msg: str):
        self.status.update(msg)


def main():
    RadioFav().run()


if __name__ == "__main__":
    main()
