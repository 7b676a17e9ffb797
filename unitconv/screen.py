"""Terminal helpers shared by the interactive conversion menus."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Callable, Sequence
from typing import NamedTuple

Reader = Callable[[str], str]
Writer = Callable[[str], object]


def clear_screen() -> None:
    """Clear the terminal using the platform's clear command."""
    if sys.platform == "win32":
        command = ["cmd", "/c", "cls"]
    else:
        command = ["clear"]
    try:
        subprocess.run(command, check=False)
    except OSError:
        pass


class _Conversion(NamedTuple):
    label: str
    source: str
    target: str
    convert: Callable[[float], float]


def _format_number(value: float) -> str:
    """Format a number the way a default C++ output stream does."""
    return f"{value:g}"


def _parse_value(text: str) -> float | None:
    try:
        return float(text.strip())
    except ValueError:
        return None


def _conversion_menu(
    title: str,
    conversions: Sequence[_Conversion],
    read: Reader | None,
    write: Writer | None,
    *,
    positive_only: bool,
) -> None:
    """Run a conversion menu until the user picks exit or enters a bad value."""
    read = read if read is not None else input
    write = write if write is not None else print
    options = {str(number): entry for number, entry in enumerate(conversions, start=1)}
    exit_key = str(len(conversions) + 1)

    while True:
        write(f"         Convert {title}")
        write("Choose one type of unit to convert:")
        for key, entry in options.items():
            write(f"{key}. {entry.label}")
        write(f"{exit_key}. exit")
        choice = read("Please choose one option: ").strip()

        if choice == exit_key:
            clear_screen()
            return

        value = _parse_value(read("Enter the value to convert: "))
        if value is None or (positive_only and value <= 0):
            clear_screen()
            write("ERROR: Invalid value\n\n")
            return

        entry = options.get(choice)
        if entry is None:
            write("Invalid option!")
        else:
            result = entry.convert(value)
            write(
                f"{_format_number(value)} {entry.source} = "
                f"{_format_number(result)} {entry.target}"
            )
        write("")