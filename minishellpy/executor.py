"""Locating programs on PATH and running parsed commands."""

from __future__ import annotations

import os
import subprocess
from contextlib import ExitStack
from typing import IO

from .environment import Environment
from .tokens import Command, TokenType


class ExecutionError(Exception):
    """Raised when a command cannot be started or its redirections fail."""


def split_path(s: str, sep: str = ":") -> list[str]:
    """Split ``s`` on ``sep``, dropping empty fields."""
    return [part for part in s.split(sep) if part]


def search_path(env: Environment) -> str | None:
    """Return the value of ``PATH`` in ``env``, or None if it is not set."""
    return env.get("PATH")


def resolve_command(command: str, directories: list[str]) -> str | None:
    """Return the first ``directory/command`` that exists and is executable."""
    for directory in directories:
        candidate = f"{directory}/{command}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
    return None


def _open(stack: ExitStack, path: str, mode: str) -> IO[bytes]:
    try:
        handle = open(path, mode)
    except OSError as exc:
        raise ExecutionError(f"minishell: {path}: {exc.strerror}") from exc
    if mode != "rb":
        os.chmod(path, 0o644) if not os.path.exists(path) else None
    return stack.enter_context(handle)


def _child_environment(env: Environment) -> dict[str, str]:
    result: dict[str, str] = {}
    for entry in env.to_strings():
        name, _, value = entry.partition("=")
        result[name] = value
    return result


def execute(env: Environment, command: Command) -> int | None:
    """Run ``command`` with the program found on ``PATH``, honouring redirections.

    Output redirections (``>`` truncating, ``>>`` appending) are all created;
    the last one receives standard output. An input redirection (``<``)
    feeds standard input and ends redirection processing, leaving standard
    output untouched. Returns the exit status, or None when there is no
    ``PATH`` or no matching program.
    """
    path_value = search_path(env)
    if path_value is None or command.name is None:
        return None
    program = resolve_command(command.name, split_path(path_value, ":"))
    if program is None:
        return None

    with ExitStack() as stack:
        stdin: IO[bytes] | None = None
        stdout: IO[bytes] | None = None
        for redir in command.redirections:
            if redir.type is TokenType.OUTPUT:
                stdout = _open(stack, redir.file, "wb")
            elif redir.type is TokenType.OUT_HEREDOC:
                stdout = _open(stack, redir.file, "ab")
            elif redir.type is TokenType.INPUT:
                stdin = _open(stack, redir.file, "rb")
                stdout = None
                break
        try:
            completed = subprocess.run(
                command.argv(),
                executable=program,
                env=_child_environment(env),
                stdin=stdin,
                stdout=stdout,
                check=False,
            )
        except OSError as exc:
            raise ExecutionError(f"minishell: {command.name}: {exc.strerror}") from exc
    return completed.returncode