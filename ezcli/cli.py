"""The command line interface description and option lookup."""

from __future__ import annotations

from collections.abc import Callable, Sequence
from dataclasses import dataclass, field

from ezcli.options import NONOPT, Option


def default_help(cli: Cli, opts: Sequence[Option]) -> None:
    """Print the built-in help text."""
    print(f"help! {cli.cmd}", end="")
    if opts:
        print(f"help! {opts[0].name}", end="")


HelpHandler = Callable[["Cli", Sequence[Option]], None]


@dataclass
class Cli:
    """A command, its options, and the words that request help."""

    cmd: str
    allow_non_opt: bool = False
    options: list[Option] = field(default_factory=list)
    help_aliases: Sequence[str] = ()
    help: HelpHandler = default_help

    def __post_init__(self) -> None:
        self.options = list(self.options)
        self.help_aliases = tuple(self.help_aliases)

    def add_option(self, opt: Option) -> None:
        """Append an option after the existing ones."""
        self.options.append(opt)

    def match_any(self, token: str) -> Option | None:
        """Return the first option that ``token`` names, if any."""
        return next((opt for opt in self.options if opt.matches(token)), None)

    def match_nonopt(self) -> Option | None:
        """Return the option that handles positional arguments, if any."""
        return next((opt for opt in self.options if opt.name == NONOPT), None)

    def is_help_alias(self, token: str) -> bool:
        return token in self.help_aliases

    def show_help(self) -> None:
        self.help(self, self.options)