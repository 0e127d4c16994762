"""Driver-level input handling shared by ``repl`` and ``run``.

``EXIT`` belongs to the drivers, not to the command interpreter.
"""

from __future__ import annotations

from collections.abc import Iterable, Iterator

EXIT_COMMAND = "EXIT"


def is_exit(line: str) -> bool:
    return line.strip().upper() == EXIT_COMMAND


def until_exit(lines: Iterable[str]) -> Iterator[str]:
    """Yield lines (without trailing newlines) up to the first ``EXIT``."""
    for line in lines:
        if is_exit(line):
            return
        yield line.rstrip("\r\n")
