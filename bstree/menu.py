"""Interactive text menu for the tree program."""

from __future__ import annotations

import re
import sys
from collections.abc import Iterable
from typing import Optional, TextIO

MENU_LINES = (
    "-------------MENU--------------",
    "1.  Insert node",
    "2.  Print Tree",
    "3.  Transversal PreOrder",
    "4.  Transversal InOrder",
    "5.  Transversal PostOrder",
    "6.  Transversal LevelOrder",
    "7.  Serach Node Tree",
    "8.  Jumlah Daun/Leaf",
    "9.  Mencari Kedalaman Node Tree",
    "10. Membandingkan 2 Node Tree",
    "0. Exit",
    "-------------------------------",
)
PROMPT = "Pilihan Anda: "
EXIT_CHOICE = 0
MENU_CHOICES = range(1, 11)

_NUMBER = re.compile(r"\s*([+-]?\d+)")


def render_menu() -> str:
    """The menu text followed by the prompt."""
    return "".join(f"{line}\n" for line in MENU_LINES) + PROMPT


def _parse_choice(line: str) -> Optional[int]:
    match = _NUMBER.match(line)
    return int(match.group(1)) if match else None


def run_menu(lines: Iterable[str], out: TextIO) -> list[Optional[int]]:
    """Show the menu and act on each input line until the exit choice or end of input.

    Returns the choices read, in order; ``None`` stands for a line without a number.
    """
    choices: list[Optional[int]] = []
    source = iter(lines)
    while True:
        out.write(render_menu())
        line = next(source, None)
        if line is None:
            break
        choice = _parse_choice(line)
        choices.append(choice)
        if choice == EXIT_CHOICE:
            out.write("Program selesai.\n")
            break
        if choice not in MENU_CHOICES:
            out.write("Pilihan tidak valid!\n")
    return choices


def main(argv: Optional[list[str]] = None) -> int:
    """Run the menu on standard input and output."""
    run_menu(sys.stdin, sys.stdout)
    return 0


if __name__ == "__main__":
    sys.exit(main())