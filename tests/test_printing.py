import io

import pytest

from ezcli.printing import (
    ANSI_BLUE,
    ANSI_RED,
    ANSI_RESET,
    ANSI_YELLOW,
    EMPTY_PREFIX,
    PrintType,
    cliprint,
)


def test_hint_default_prefix():
    buf = io.StringIO()
    cliprint(PrintType.HINT, None, "msg", file=buf)
    assert buf.getvalue() == "\x1b[34mHINT: msg\x1b[0m\n"


def test_warn_default_prefix_and_color():
    buf = io.StringIO()
    cliprint(PrintType.WARN, None, "careful", file=buf)
    assert buf.getvalue() == ANSI_YELLOW + "WARN: careful" + ANSI_RESET + "\n"


def test_error_with_empty_prefix():
    buf = io.StringIO()
    cliprint(PrintType.ERROR, EMPTY_PREFIX, "broken", file=buf)
    assert buf.getvalue() == ANSI_RED + "broken" + ANSI_RESET + "\n"


def test_custom_prefix():
    buf = io.StringIO()
    cliprint(PrintType.HINT, "ezcli: ", "eat -> NULL", file=buf)
    assert buf.getvalue() == ANSI_BLUE + "ezcli: eat -> NULL" + ANSI_RESET + "\n"


def test_default_stream_is_stdout(capsys):
    cliprint(PrintType.ERROR, None, "oops")
    assert capsys.readouterr().out == ANSI_RED + "ERROR: oops" + ANSI_RESET + "\n"


@pytest.mark.parametrize(
    "kind, expected",
    [
        (PrintType.HINT, ANSI_BLUE + "HINT: x" + ANSI_RESET + "\n"),
        (PrintType.WARN, ANSI_YELLOW + "WARN: x" + ANSI_RESET + "\n"),
        (PrintType.ERROR, ANSI_RED + "ERROR: x" + ANSI_RESET + "\n"),
    ],
)
def test_print_type_default_prefixes(kind, expected):
    buf = io.StringIO()
    cliprint(kind, None, "x", file=buf)
    assert buf.getvalue() == expected