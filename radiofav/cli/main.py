# radiofav/cli/main.py

import sys

from radiofav.core.config import JsonPreferences
from radiofav.core.errors import FavoriteListError
from radiofav.core.favorites import FavoriteListStore
from radiofav.core.log import configure_logging
from radiofav.core.station import FavoriteStation


HELP = """radiofav — favorite station lists

Usage:
  radiofav [-v] <command> [args]
  radiofav tui

Lists:
  radiofav lists
  radiofav current
  radiofav use <name>
  radiofav new <name>
  radiofav rm <name>

Stations (current list):
  radiofav show [name]
  radiofav add <frequency-khz> <title...>
  radiofav del <index>
  radiofav mv <from> <to>
"""


# ------------------------------------------------------------
# Entry
# ------------------------------------------------------------

def main(argv=None):
    argv = list(sys.argv[1:] if argv is None else argv)

    verbose = False
    while argv and argv[0] in ("-v", "--verbose"):
        verbose = True
        argv.pop(0)
    configure_logging(verbose)

    if not argv:
        show_cmd(open_store(), [])
        return

    if argv[0] in ("-h", "--help", "help"):
        print(HELP)
        return

    cmd, *args = argv

    if cmd == "tui":
        from radiofav.tui.app import main as tui_main
        tui_main()
        return

    dispatch_command(open_store(), cmd, args)


# ------------------------------------------------------------
# Utilities
# ------------------------------------------------------------

def open_store() -> FavoriteListStore:
    return FavoriteListStore(JsonPreferences())


def fail(msg: str):
    print(msg, file=sys.stderr)
    sys.exit(1)


def parse_index(raw: str, count: int) -> int:
    """1-based user index -> 0-based list index."""
    if not raw.isdigit() or not (1 <= int(raw) <= count):
        fail(f"Index out of range: {raw} (1..{count})")
    return int(raw) - 1


# ------------------------------------------------------------
# Command dispatch
# ------------------------------------------------------------

COMMANDS = {}


def command(name):
    def register(fn):
        COMMANDS[name] = fn
        return fn
    return register


def dispatch_command(store: FavoriteListStore, cmd: str, args: list[str]) -> None:
    handler = COMMANDS.get(cmd)
    if handler is None:
        fail(f"Unknown command: {cmd}")

    try:
        handler(store, args)
    except FavoriteListError as e:
        fail(str(e))


# ------------------------------------------------------------
# Lists
# ------------------------------------------------------------

@command("lists")
def lists_cmd(store: FavoriteListStore, args: list[str]) -> None:
    current = store.get_current_list_name()
    for name in store.list_names():
        marker = "*" if name == current else " "
        print(f"{marker} {name}")


@command("current")
def current_cmd(store: FavoriteListStore, args: list[str]) -> None:
    print(store.get_current_list_name())


@command("use")
def use_cmd(store: FavoriteListStore, args: list[str]) -> None:
    if not args:
        fail("Usage: radiofav use <name>")

    store.set_current_list_name(args[0])
    print(f"Current list: {args[0]}")


@command("new")
def new_cmd(store: FavoriteListStore, args: list[str]) -> None:
    if not args:
        fail("Usage: radiofav new <name>")

    store.add_list(args[0])
    print(f"Created list: {args[0]}")


@command("rm")
def rm_cmd(store: FavoriteListStore, args: list[str]) -> None:
    if not args:
        fail("Usage: radiofav rm <name>")

    if store.remove_list(args[0]):
        print("Removed.")
    else:
        fail(f"Could not remove list: {args[0]}")


# ------------------------------------------------------------
# Stations
# ------------------------------------------------------------

@command("show")
def show_cmd(store: FavoriteListStore, args: list[str]) -> None:
    if args:
        store.set_current_list_name(args[0])

    stations = store.get_stations()
    print(f"[{store.get_current_list_name()}]")
    if not stations:
        print("No stations saved.")
        return

    for i, st in enumerate(stations, 1):
        print(f"{i:3}  {st.label()}")


@command("add")
def add_cmd(store: FavoriteListStore, args: list[str]) -> None:
    if not args or not args[0].isdigit():
        fail("Usage: radiofav add <frequency-khz> <title...>")

    station = FavoriteStation.create(int(args[0]), " ".join(args[1:]))
    store.add_station(station)
    if not store.save():
        fail("Could not save list.")
    print(f"Added: {station.label()}")


@command("del")
def del_cmd(store: FavoriteListStore, args: list[str]) -> None:
    if not args:
        fail("Usage: radiofav del <index>")

    idx = parse_index(args[0], len(store.get_stations()))
    station = store.remove_station(idx)
    if not store.save():
        fail("Could not save list.")
    print(f"Removed: {station.label()}")


@command("mv")
def mv_cmd(store: FavoriteListStore, args: list[str]) -> None:
    if len(args) < 2:
        fail("Usage: radiofav mv <from> <to>")

    count = len(store.get_stations())
    src = parse_index(args[0], count)
    dst = parse_index(args[1], count)
    store.move_station(src, dst)
    if not store.save():
        fail("Could not save list.")
    print(f"Moved: {store.get_stations()[dst].label()} -> {dst + 1}")
