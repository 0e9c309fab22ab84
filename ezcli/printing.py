"""Coloured hint, warning and error output."""

from __future__ import annotations

import sys
from enum import Enum
from typing import TextIO

ANSI_RED = "\x1b[31m"
ANSI_YELLOW = "\x1b[33m"
ANSI_BLUE = "\x1b[34m"
ANSI_RESET = "\x1b[0m"

EMPTY_PREFIX = ""


class PrintType(Enum):
    """Kind of message, carrying its default prefix and colour."""

    HINT = ("HINT: ", ANSI_BLUE)
    WARN = ("WARN: ", ANSI_YELLOW)
    ERROR = ("ERROR: ", ANSI_RED)

    @property
    def prefix(self) -> str:
        return self.value[0]

    @property
    def color(self) -> str:
        return self.value[1]


def cliprint(
    kind: PrintType,
    prefix: str | None,
    message: str,
    file: TextIO | None = None,
) -> None:
    """Write a coloured line; a ``None`` prefix selects the default one."""
    stream = sys.stdout if file is None else file
    used_prefix = kind.prefix if prefix is None else prefix
    stream.write(f"{kind.color}{used_prefix}{message}{ANSI_RESET}\n")