"""Locate the executable for a command line."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping

from pipex.textutils import env_lookup, split


class CommandError(Exception):
    """A command could not be started; carries the exit status to report."""

    default_message = ""
    default_status = 1

    def __init__(self, message: str | None = None, exit_status: int | None = None):
        self.message = self.default_message if message is None else message
        self.exit_status = self.default_status if exit_status is None else exit_status
        super().__init__(self.message)


class CommandNotFound(CommandError):
    """The command does not exist."""

    default_message = "Command not found"
    default_status = 127


class CommandPermissionDenied(CommandError):
    """The command exists but is not executable."""

    default_message = "Permission denied"
    default_status = 126


def _env_entries(env: Mapping[str, str] | Iterable[str]) -> list[str]:
    if isinstance(env, Mapping):
        return [f"{key}={value}" for key, value in env.items()]
    return list(env)


def has_slash(word: str) -> bool:
    """True when *word* contains a ``/`` and so names a path directly."""
    return "/" in word


def search_path(env: Mapping[str, str] | Iterable[str]) -> list[str] | None:
    """The directories listed in PATH, or None if PATH is not set."""
    value = env_lookup(_env_entries(env), "PATH")
    if value is None:
        return None
    return split(value, ":")


def find_in_path(name: str, dirs: Iterable[str]) -> str | None:
    """Return the first ``dir/name`` that is executable.

    Raises CommandPermissionDenied as soon as a candidate exists but is not
    executable; returns None when no candidate exists.
    """
    for directory in dirs:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.F_OK | os.X_OK):
            return candidate
        if os.access(candidate, os.F_OK):
            raise CommandPermissionDenied()
    return None


def resolve_command(
    command: str, env: Mapping[str, str] | Iterable[str]
) -> tuple[str, list[str]]:
    """Split *command* on spaces and find its executable.

    Returns ``(path, argv)`` where argv is the list of words.
    """
    argv = split(command, " ")
    if not argv:
        raise CommandNotFound()
    name = argv[0]
    if has_slash(name):
        if not os.access(name, os.F_OK):
            raise CommandNotFound()
        if not os.access(name, os.X_OK):
            raise CommandPermissionDenied()
        return name, argv
    dirs = search_path(env)
    if dirs is None:
        raise CommandError()
    found = find_in_path(name, dirs)
    if found is None:
        raise CommandNotFound()
    return found, argv