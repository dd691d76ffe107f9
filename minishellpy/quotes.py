"""Quote scanning and removal for shell words."""

from __future__ import annotations


def _skip_quoted(s: str, pos: int, quote: str) -> int:
    n = len(s)
    while True:
        pos += 1
        while pos < n and s[pos] != quote:
            pos += 1
        pos += 1
        if pos > n:
            pos -= 1
        if pos < n and s[pos] == quote:
            continue
        return pos


def skip_double_quotes(s: str, pos: int) -> int:
    """Skip a double-quoted run starting at ``pos`` (and any directly adjacent ones).

    Returns the index just past the closing quote, or ``len(s)`` if unclosed.
    """
    return _skip_quoted(s, pos, '"')


def skip_single_quotes(s: str, pos: int) -> int:
    """Skip a single-quoted run starting at ``pos`` (and any directly adjacent ones)."""
    return _skip_quoted(s, pos, "'")


def has_unclosed_quotes(s: str) -> bool:
    """Return True if some quote in ``s`` is never closed."""
    i = 0
    n = len(s)
    while i < n:
        c = s[i]
        if c in ("'", '"'):
            end = s.find(c, i + 1)
            if end < 0:
                return True
            i = end
        i += 1
    return False


def clean_quotes(word: str) -> str:
    """Remove quoting from ``word``, keeping the quoted text verbatim.

    An unclosed quote extends to the end of the word.
    """
    parts: list[str] = []
    i = 0
    n = len(word)
    while i < n:
        c = word[i]
        if c in ("'", '"'):
            end = word.find(c, i + 1)
            if end < 0:
                end = n
            parts.append(word[i + 1:end])
            i = end + 1
        else:
            parts.append(c)
            i += 1
    return "".join(parts)