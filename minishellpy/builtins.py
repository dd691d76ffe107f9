"""Commands handled by the shell itself."""

from __future__ import annotations

import sys
from collections.abc import Sequence
from typing import TextIO

from .environment import Environment
from .tokens import Token


def has_n_option(word: str) -> bool:
    """Return True if ``-n`` appears anywhere in ``word``."""
    return "-n" in word


def echo(tokens: Sequence[Token], out: TextIO | None = None) -> int:
    """Print the words after the first token.

    With a ``-n`` option the words are written back to back with no
    newline; otherwise each word is followed by a space and the line ends
    with a newline.
    """
    stream = out if out is not None else sys.stdout
    words = [t.word for t in tokens[1:]]
    if words and has_n_option(words[0]):
        stream.write("".join(words[1:]))
    else:
        stream.write("".join(f"{w} " for w in words) + "\n")
    return 0


def find_token_by_rank(tokens: Sequence[Token], rank: int) -> Token | None:
    """Return the first token with the given rank, or None."""
    return next((t for t in tokens if t.rank == rank), None)


def run_builtin(
    tokens: Sequence[Token], env: Environment, out: TextIO | None = None
) -> bool:
    """Run the line as a builtin if it is one; return True if it was handled."""
    if tokens and tokens[0].rank == 1 and tokens[0].word == "echo":
        echo(tokens, out)
        return True
    return False