"""Core data types shared by the lexer, parser and executor."""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import IntEnum


class TokenType(IntEnum):
    """Kind of a lexical token."""

    WORD = 1
    PIPE = 2
    OUTPUT = 3
    HEREDOC = 4
    OUT_HEREDOC = 5
    INPUT = 6


@dataclass
class Token:
    """A single token of a command line, with its position (rank) in the line."""

    word: str
    rank: int
    type: TokenType = TokenType.WORD

    def is_word(self) -> bool:
        """Return True if the token is a plain word rather than an operator."""
        return self.type is TokenType.WORD


@dataclass
class Redirection:
    """A redirection operator together with its target file."""

    file: str
    type: TokenType


@dataclass
class Command:
    """A parsed simple command: its name, arguments and redirections."""

    name: str | None = None
    args: list[str] = field(default_factory=list)
    redirections: list[Redirection] = field(default_factory=list)

    def argv(self) -> list[str]:
        """Return the argument vector handed to the program."""
        if self.name is None:
            return list(self.args)
        return [self.name, *self.args]


class ShellSyntaxError(Exception):
    """Raised when a command line is syntactically invalid."""

    def __init__(self, token: str) -> None:
        self.token = token
        super().__init__(f"syntax error near unexpected token {token}")