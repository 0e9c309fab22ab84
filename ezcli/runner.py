"""Parsing an argument list and running the matching option bodies."""

from __future__ import annotations

from collections.abc import Sequence

from ezcli.cli import Cli
from ezcli.options import ReturnType
from ezcli.printing import EMPTY_PREFIX, PrintType, cliprint

HINT_PREFIX = "ezcli: "


class CliError(Exception):
    """Raised when the arguments cannot be run or an option fails."""


def check_result(cli: Cli, result: ReturnType | None) -> None:
    """Raise on a failing result and print a note on a warning."""
    if result is ReturnType.FAIL:
        raise CliError(f"{cli.cmd}: exited with an error.")
    if result is ReturnType.WARN:
        cliprint(PrintType.WARN, EMPTY_PREFIX, f"{cli.cmd}: there are some warnings.")


def handle_nonopt(
    cli: Cli, token: str, is_unrecognized: bool, any_option_seen: bool
) -> bool:
    """Feed a positional argument to the non-option handler.

    Returns True when the token was consumed here.
    """
    if not is_unrecognized:
        return False
    if not cli.allow_non_opt:
        raise CliError(f"{cli.cmd}: unrecognized option '{token}'.")
    if any_option_seen:
        raise CliError(
            f"{cli.cmd}: can't chain non-option '{token}' after any options."
        )
    nonopt = cli.match_nonopt()
    if nonopt is None:
        raise CliError(f"{cli.cmd}: no handler for non-option '{token}'.")
    nonopt.body(token)
    return True


def run_cli(cli: Cli, argv: Sequence[str]) -> None:
    """Run ``argv`` against ``cli``; ``argv[0]`` is the command name."""
    args = list(argv)
    any_option_seen = False
    last = len(args) - 1

    for position, (previous, token) in enumerate(zip(args, args[1:]), start=1):
        opt = cli.match_any(token)
        opt_prev = cli.match_any(previous)

        if position == 1 and cli.is_help_alias(token):
            cli.show_help()
            break

        if handle_nonopt(cli, token, opt is None and opt_prev is None, any_option_seen):
            continue

        if opt is None:
            if opt_prev is not None and not opt_prev.want_input:
                raise CliError(
                    f"{cli.cmd}: '{token}' cannot be passed to '{opt_prev.name}' "
                    "as it requires no arguments."
                )
            continue

        if position == last:
            if opt.want_input:
                raise CliError(f"{cli.cmd}: '{token}' requires an argument.")
            cliprint(PrintType.HINT, HINT_PREFIX, f"{opt.name} -> NULL")
            check_result(cli, opt.body(None))
            any_option_seen = True
            break

        following = args[position + 1]
        if opt.want_input and cli.match_any(following) is not None:
            raise CliError(f"{cli.cmd}: unallowed argument '{following}'.")

        arg = following if opt.want_input else None
        shown = "NULL" if arg is None else arg
        cliprint(PrintType.HINT, HINT_PREFIX, f"{opt.name} -> {shown}")
        check_result(cli, opt.body(arg))
        any_option_seen = True

    print()