"""Option definitions and token matching."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass
from enum import Enum, IntEnum

NONOPT = "NONOPT"


class OptionType(IntEnum):
    """How an option is written; the value is the number of leading hyphens."""

    BARE = 0
    SINGLE = 1
    DOUBLE = 2


class ReturnType(Enum):
    """Outcome reported by an option body."""

    NORMAL = "normal"
    WARN = "warn"
    FAIL = "fail"


OptionBody = Callable[[str | None], "ReturnType | None"]


@dataclass
class Option:
    """A command line option and the callable that handles it."""

    type: OptionType
    name: str
    body: OptionBody
    want_input: bool = False

    def expand(self) -> str:
        """Return the option name with its leading hyphens."""
        return "-" * int(self.type) + self.name

    def matches(self, token: str) -> bool:
        """Tell whether ``token`` is exactly this option as typed."""
        return token == self.expand()