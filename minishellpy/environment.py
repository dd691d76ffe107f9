"""An ordered copy of the process environment."""

from __future__ import annotations

from collections.abc import Iterable, Mapping


class Environment:
    """Ordered mapping of environment variable names to values."""

    def __init__(self, variables: Mapping[str, str] | None = None) -> None:
        self._vars: dict[str, str] = dict(variables or {})

    @classmethod
    def from_strings(cls, entries: Iterable[str]) -> "Environment":
        """Build an environment from ``NAME=value`` strings.

        The first definition of a name wins. Raises ValueError for an entry
        without ``=``.
        """
        env = cls()
        for entry in entries:
            name, sep, value = entry.partition("=")
            if not sep:
                raise ValueError(f"invalid environment entry: {entry!r}")
            env._vars.setdefault(name, value)
        return env

    def get(self, name: str) -> str | None:
        """Return the value of ``name``, or None if it is not defined."""
        return self._vars.get(name)

    def to_strings(self) -> list[str]:
        """Return the variables as ``NAME=value`` strings, in order."""
        return [f"{name}={value}" for name, value in self._vars.items()]

    def __len__(self) -> int:
        return len(self._vars)

    def __contains__(self, name: object) -> bool:
        return name in self._vars

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._vars!r})"