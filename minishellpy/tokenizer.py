"""Splitting a command line into tokens."""

from __future__ import annotations

from .expand import EnvLike, expand_word
from .quotes import clean_quotes
from .tokens import Token, TokenType

_OPERATORS: tuple[tuple[str, TokenType], ...] = (
    ("<<", TokenType.HEREDOC),
    (">>", TokenType.OUT_HEREDOC),
    ("|", TokenType.PIPE),
    ("<", TokenType.INPUT),
    (">", TokenType.OUTPUT),
)

_METACHARS = "|<>"


def _match_operator(s: str, pos: int) -> tuple[str, TokenType] | None:
    for text, ttype in _OPERATORS:
        if s.startswith(text, pos):
            return text, ttype
    return None


def _scan_word(s: str, pos: int, sep: str) -> int:
    """Return the end of the word starting at ``pos``; quoted parts are kept whole."""
    n = len(s)
    while pos < n and s[pos] != sep and s[pos] not in _METACHARS:
        c = s[pos]
        if c in ("'", '"'):
            end = s.find(c, pos + 1)
            pos = n if end < 0 else end + 1
        else:
            pos += 1
    return pos


def count_words(s: str, sep: str = " ") -> int:
    """Count the tokens (words and operators) in ``s``."""
    n = len(s)
    count = 0
    i = 0
    while i < n:
        while i < n and s[i] == sep:
            i += 1
        if i >= n:
            break
        op = _match_operator(s, i)
        if op is not None:
            i += len(op[0])
        else:
            i = _scan_word(s, i, sep)
        count += 1
    return count


def read_token(s: str, pos: int) -> tuple[TokenType, str, int]:
    """Read one raw token from ``s`` at ``pos``, skipping leading spaces.

    Returns the token type, its raw text and the position just past it.
    Raises ValueError if only spaces remain.
    """
    n = len(s)
    while pos < n and s[pos] == " ":
        pos += 1
    if pos >= n:
        raise ValueError(f"no token at position {pos}")
    op = _match_operator(s, pos)
    if op is not None:
        text, ttype = op
        return ttype, text, pos + len(text)
    end = _scan_word(s, pos, " ")
    return TokenType.WORD, s[pos:end], end


def split_token(s: str, env: EnvLike, sep: str = " ") -> list[Token]:
    """Split ``s`` into tokens, expanding variables and removing quotes.

    Tokens are ranked from 1 in the order they appear.
    """
    tokens: list[Token] = []
    pos = 0
    for rank in range(1, count_words(s, sep) + 1):
        ttype, raw, pos = read_token(s, pos)
        word = clean_quotes(expand_word(raw, env))
        tokens.append(Token(word=word, rank=rank, type=ttype))
    return tokens