"""Interactive prompt that reports shell metacharacters found in a line."""

from __future__ import annotations

import sys

from .chars import (
    has_double_pipe,
    is_backslash,
    is_pipe,
    is_quote,
    is_relational_op,
    is_relop_double,
)


def scan_line(line: str) -> str | None:
    """Return a message naming the first metacharacter found, or None."""
    if has_double_pipe(line):
        return "have a ||"
    for pos, c in enumerate(line):
        if is_relop_double(line, pos):
            return "have a double <<"
        if is_relational_op(c):
            return "have a < or > operator"
        if is_pipe(c):
            return "have a | "
        if is_quote(c):
            return 'have a " '
        if is_backslash(c):
            return "have a \\ "
    return None


def main(argv: list[str] | None = None) -> int:
    """Read lines at a ``$>`` prompt, echoing them until a metacharacter appears."""
    args = sys.argv[1:] if argv is None else argv
    if args:
        print("error")
        return 1
    try:
        import readline
    except ImportError:
        readline = None
    while True:
        try:
            line = input("$>")
        except EOFError:
            return 0
        message = scan_line(line)
        if message is not None:
            print(message)
            return 0
        print(f" {line}")
        if readline is not None:
            readline.add_history(line)