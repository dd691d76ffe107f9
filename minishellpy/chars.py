"""Character and two-character predicates for shell metacharacters."""

from __future__ import annotations


def is_relational_op(c: str) -> bool:
    """Return True for a redirection character (< or >)."""
    return c in ("<", ">")


def is_quote(c: str) -> bool:
    """Return True for a double quote."""
    return c == '"'


def is_single_quote(c: str) -> bool:
    """Return True for a single quote."""
    return c == "'"


def is_any_quote(c: str) -> bool:
    """Return True for either kind of quote."""
    return is_quote(c) or is_single_quote(c)


def is_pipe(c: str) -> bool:
    """Return True for the pipe character."""
    return c == "|"


def is_backslash(c: str) -> bool:
    """Return True for a backslash."""
    return c == "\\"


def is_semicolon(c: str) -> bool:
    """Return True for a semicolon."""
    return c == ";"


def is_dash(c: str) -> bool:
    """Return True for a dash."""
    return c == "-"


def _pair_at(s: str, pos: int, pair: str) -> bool:
    return pos >= 0 and s[pos:pos + 2] == pair


def is_double_pipe(s: str, pos: int) -> bool:
    """Return True if ``||`` starts at ``pos``."""
    return _pair_at(s, pos, "||")


def is_inf_double(s: str, pos: int) -> bool:
    """Return True if ``<<`` starts at ``pos``."""
    return _pair_at(s, pos, "<<")


def is_sup_double(s: str, pos: int) -> bool:
    """Return True if ``>>`` starts at ``pos``."""
    return _pair_at(s, pos, ">>")


def is_relop_double(s: str, pos: int) -> bool:
    """Return True if ``<<`` or ``>>`` starts at ``pos``."""
    return is_inf_double(s, pos) or is_sup_double(s, pos)


def is_double_dash(s: str, pos: int) -> bool:
    """Return True if ``--`` starts at ``pos``."""
    return _pair_at(s, pos, "--")


def has_double_pipe(s: str) -> bool:
    """Return True if the line contains ``||`` anywhere."""
    return "||" in s