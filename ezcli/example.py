"""A small demonstration command built with the library."""

from __future__ import annotations

import sys
from collections.abc import Sequence

from ezcli.cli import Cli
from ezcli.options import NONOPT, Option, OptionType, ReturnType
from ezcli.printing import EMPTY_PREFIX, PrintType, cliprint
from ezcli.runner import CliError, run_cli


def _eat(food: str | None) -> ReturnType:
    print(f"human: consuming {food}")
    return ReturnType.NORMAL


def _sleep(_: str | None) -> ReturnType:
    print("human: sleeping...")
    return ReturnType.NORMAL


def _secret(secret_text: str | None) -> ReturnType:
    print(f"human: {secret_text}...")
    return ReturnType.NORMAL


def _unwanted(name: str | None) -> ReturnType:
    print(f"human: my name is {name}, and nobody wants me...")
    return ReturnType.NORMAL


def _nonopt(arg: str | None) -> ReturnType:
    print(arg, end="")
    return ReturnType.NORMAL


def build_cli() -> Cli:
    """Build the demonstration command."""
    cli = Cli(
        "human",
        True,
        [
            Option(OptionType.BARE, "eat", _eat, want_input=True),
            Option(OptionType.BARE, "sleep", _sleep),
            Option(OptionType.DOUBLE, "secret", _secret, want_input=True),
            Option(OptionType.SINGLE, "S", _secret, want_input=True),
            Option(OptionType.BARE, NONOPT, _nonopt),
        ],
        ["help", "--help"],
    )
    cli.add_option(Option(OptionType.BARE, "unwanted", _unwanted, want_input=True))
    cli.add_option(Option(OptionType.BARE, "unwanted2", _unwanted, want_input=True))
    return cli


def main(argv: Sequence[str] | None = None) -> int:
    """Run the demonstration command; ``argv`` excludes the program name."""
    args = sys.argv[1:] if argv is None else list(argv)
    cli = build_cli()
    try:
        run_cli(cli, [cli.cmd, *args])
    except CliError as exc:
        cliprint(PrintType.ERROR, EMPTY_PREFIX, str(exc))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())