"""Turning a token list into a command."""

from __future__ import annotations

from collections.abc import Iterable

from .tokens import Command, Redirection, ShellSyntaxError, Token, TokenType

_OPERAND_TYPES = (TokenType.WORD, TokenType.PIPE)


def count_pipes(tokens: Iterable[Token]) -> int:
    """Return the number of pipe tokens."""
    return sum(1 for t in tokens if t.type is TokenType.PIPE)


def check_redirections(tokens: Iterable[Token]) -> None:
    """Check that every redirection operator is followed by a target.

    Raises ShellSyntaxError naming the offending token, or ``'newline'``
    when an operator ends the line.
    """
    items = list(tokens)
    for current, following in zip(items, [*items[1:], None]):
        if current.type in _OPERAND_TYPES:
            continue
        if following is None:
            raise ShellSyntaxError("'newline'")
        if following.type not in _OPERAND_TYPES:
            raise ShellSyntaxError(following.word)


def parse(tokens: Iterable[Token]) -> Command:
    """Build a command from tokens.

    The first word is the command name, other words are its arguments, and
    each operator takes the following token as its target file. An operator
    with nothing after it is kept as an argument.
    """
    command = Command()
    lowest_rank: int | None = None
    it = iter(tokens)
    pending = next(it, None)
    while pending is not None:
        token = pending
        pending = next(it, None)
        if not token.is_word() and pending is not None:
            command.redirections.append(Redirection(file=pending.word, type=token.type))
            pending = next(it, None)
        elif token.is_word() and (lowest_rank is None or token.rank < lowest_rank):
            command.name = token.word
            lowest_rank = token.rank
        else:
            command.args.append(token.word)
    return command