"""Top-level interactive menu of the unit converter."""

from __future__ import annotations

from collections.abc import Sequence

from unitconv.distance import distance_menu
from unitconv.screen import Reader, Writer, clear_screen
from unitconv.temperature import temperature_menu
from unitconv.weight import weight_menu

_SUBMENUS = {
    "1": temperature_menu,
    "2": distance_menu,
    "3": weight_menu,
}


def main_menu(read: Reader | None = None, write: Writer | None = None) -> None:
    """Let the user pick a kind of unit until they choose to exit."""
    read = read if read is not None else input
    write = write if write is not None else print

    while True:
        write("         Unit Conversor")
        write("Choose one type of unit to convert:")
        write("1. temperature")
        write("2. distance")
        write("3. weight")
        write("4. exit")
        choice = read("Please choose one option: ").strip()

        clear_screen()
        if choice == "4":
            write("Program finished!")
            return
        submenu = _SUBMENUS.get(choice)
        if submenu is None:
            write("ERROR: Invalid option! Try again \n\n")
        else:
            submenu(read, write)


def main(argv: Sequence[str] | None = None) -> int:
    """Run the interactive converter; returns the process exit status."""
    try:
        main_menu()
    except (EOFError, KeyboardInterrupt):
        print()
    return 0