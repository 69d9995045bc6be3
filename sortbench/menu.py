"""Interactive text menus for choosing what to measure."""

from __future__ import annotations

import re
import sys
import time
from collections.abc import Callable

from sortbench.measurement import Algorithm, Structure
from sortbench.tables import algorithm_table, batch_mode

ReadLine = Callable[[], str]
Write = Callable[[str], object]

_CLEAR = "\033[2J\033[H"
_INTEGER = re.compile(r"\s*([+-]?\d+)")
_INVALID = "Invalid input. Please enter a number.\n"
_IMPOSSIBLE = "Impossible mode. Please try again.\n"


def _read_choice(read_line: ReadLine) -> int | None:
    match = _INTEGER.match(read_line())
    return int(match.group(1)) if match else None


def _pause(read_line: ReadLine, write: Write) -> None:
    write("Press Enter to continue . . . ")
    read_line()


def algorithm_menu(algorithm: Algorithm | str, read_line: ReadLine, write: Write) -> None:
    """Let the user pick a structure to measure ``algorithm`` on, until Return."""
    algorithm = Algorithm(algorithm)
    while True:
        write(_CLEAR)
        write(
            f"Select data structure for sorting by Algorithm - {algorithm.label} :\n"
            "1. Arr3D\n2. Vector\n3. Return\n"
        )
        choice = _read_choice(read_line)
        if choice is None:
            write(_INVALID)
            if algorithm is Algorithm.SHELL2:
                time.sleep(1)
            else:
                _pause(read_line, write)
            continue
        if choice == 1:
            write(algorithm_table(algorithm, Structure.ARRAY3D))
            _pause(read_line, write)
        elif choice == 2:
            write(algorithm_table(algorithm, Structure.VECTOR))
            _pause(read_line, write)
        elif choice == 3:
            write("Returning...\n")
            time.sleep(2)
            return
        else:
            write(_IMPOSSIBLE)
            time.sleep(1)


def main_menu(read_line: ReadLine, write: Write) -> int:
    """Run the main menu until Exit or end of input; return the exit status."""
    try:
        while True:
            write(_CLEAR)
            write(
                "MAIN MENU:\n"
                "1. Algorithm - Select1\n"
                "2. Algorithm - Select8\n"
                "3. Algorithm - Shell_2\n"
                "4. Batch_mode:\n"
                "5. Exit\n"
                "Select algorithm or mode:\n"
            )
            choice = _read_choice(read_line)
            if choice is None:
                write(_INVALID)
                time.sleep(1)
            elif choice == 1:
                algorithm_menu(Algorithm.SELECT1, read_line, write)
            elif choice == 2:
                algorithm_menu(Algorithm.SELECT8, read_line, write)
            elif choice == 3:
                algorithm_menu(Algorithm.SHELL2, read_line, write)
            elif choice == 4:
                write(batch_mode())
                _pause(read_line, write)
            elif choice == 5:
                return 0
            else:
                write(_IMPOSSIBLE)
                time.sleep(1)
    except EOFError:
        return 0


def _write_stdout(text: str) -> None:
    sys.stdout.write(text)
    sys.stdout.flush()


def main(argv: list[str] | None = None) -> int:
    """Start the interactive benchmark on standard input and output."""
    return main_menu(input, _write_stdout)


if __name__ == "__main__":
    raise SystemExit(main())