"""Expansion of ``$NAME`` references in shell words."""

from __future__ import annotations

from collections.abc import Mapping
from typing import Union

from .environment import Environment

EnvLike = Union[Environment, Mapping[str, str]]


def _is_name_char(c: str) -> bool:
    return c == "_" or (c.isascii() and c.isalnum())


def _lookup(env: EnvLike, name: str) -> str:
    value = env.get(name)
    return value if value is not None else ""


def expand_word(word: str, env: EnvLike) -> str:
    """Replace ``$NAME`` references in ``word`` with their values from ``env``.

    Text inside single quotes is left untouched; references inside double
    quotes are expanded. Unknown variables expand to the empty string. A
    ``$`` not followed by a letter, digit or underscore is kept as is.
    Quote characters themselves are preserved.
    """
    out: list[str] = []
    n = len(word)
    i = 0
    in_double = False
    while i < n:
        c = word[i]
        if c == "'" and not in_double:
            end = word.find("'", i + 1)
            end = n if end < 0 else end + 1
            out.append(word[i:end])
            i = end
        elif c == '"':
            in_double = not in_double
            out.append(c)
            i += 1
        elif c == "$" and i + 1 < n and _is_name_char(word[i + 1]):
            j = i + 1
            while j < n and _is_name_char(word[j]):
                j += 1
            out.append(_lookup(env, word[i + 1:j]))
            i = j
        else:
            out.append(c)
            i += 1
    return "".join(out)