# ezcli

A small library for declaring command line options and running them against a list of arguments.

An `Option` (in `ezcli.options`) has a type that says how many hyphens it is written with, a
name, a body that is called with the option's input (or `None`), and `want_input`, which says
whether the option takes an input (default `False`).

| `OptionType` | written as  |
|--------------|-------------|
| `BARE`       | `option`    |
| `SINGLE`     | `-option`   |
| `DOUBLE`     | `--option`  |

`Option.expand()` gives the option as it is typed, and `Option.matches(token)` tells whether a
token is exactly that.

A body returns a `ReturnType`:

- `NORMAL`: carry on.
- `WARN`: carry on, after printing a warning.
- `FAIL`: stop; `run_cli` raises `CliError`.

## Installing

```
pip install .
```

## Using it

```python
import sys

from ezcli.cli import Cli
from ezcli.options import Option, OptionType, ReturnType
from ezcli.runner import CliError, run_cli


def eat(food):
    print(f"consuming {food}")
    return ReturnType.NORMAL


cli = Cli(
    "human",
    allow_non_opt=False,
    options=[Option(OptionType.BARE, "eat", eat, want_input=True)],
    help_aliases=["help", "--help"],
)
cli.add_option(Option(OptionType.DOUBLE, "nap", lambda _: ReturnType.NORMAL))

try:
    run_cli(cli, sys.argv)
except CliError as exc:
    print(exc)
    sys.exit(1)
```

`run_cli` expects `argv` to begin with the command name, the way `sys.argv` does. Before each
option body runs, a blue hint such as `ezcli: eat -> apple` is printed (`-> NULL` when the option
takes no input). A blank line is printed when the run finishes.

If the first argument is one of the help aliases, `Cli.show_help()` is called and nothing else
runs. The help handler is the `help` field of `Cli`; the built-in `default_help` prints only the
command name and the name of the first option, so supply your own handler for real help text.

Arguments that do not follow an option are passed to the option named `NONOPT` (found with
`Cli.match_nonopt()`), but only when `allow_non_opt` is true and no option has been run yet.
Otherwise `run_cli` raises `CliError`, as it does for a missing input, an input given to an
option that takes none, an option given where an input was expected, a positional argument with
no `NONOPT` option to take it, and a body that returns `ReturnType.FAIL`. `run_cli` itself never
exits the process; the caller decides what to do with the error.

Messages are printed in colour with `cliprint(kind, prefix, message, file=None)` from
`ezcli.printing`: `PrintType.HINT` in blue, `PrintType.WARN` in yellow, `PrintType.ERROR` in red.
A prefix of `None` selects the default `HINT: `, `WARN: ` or `ERROR: `.

## Example command

The package ships a small demonstration command, `ezcli-example`, built by
`ezcli.example.build_cli()`. It knows `eat <food>`, `sleep`, `--secret <text>`, `-S <text>`,
`unwanted <name>` and `unwanted2 <name>`, and echoes positional arguments given before any option.
Errors are printed in red and the command exits with status 1.

```
ezcli-example eat apple --secret hello
ezcli-example help
```

## Tests

```
pip install .[test]
pytest
```