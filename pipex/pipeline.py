"""Run ``< infile cmd1 | cmd2 > outfile`` and report the status of cmd2."""

from __future__ import annotations

import os
import subprocess
import sys
from collections.abc import Iterable, Mapping, Sequence
from contextlib import ExitStack
from typing import BinaryIO

from pipex.resolve import CommandError, resolve_command

Env = Mapping[str, str] | Iterable[str]


class UsageError(ValueError):
    """The command line does not have the form ``infile cmd1 cmd2 outfile``."""


def validate_args(args: Sequence[str]) -> tuple[str, str, str, str]:
    """Check that there are exactly four non-empty arguments and return them."""
    if len(args) != 4:
        raise UsageError("expected: infile cmd1 cmd2 outfile")
    if any(arg == "" for arg in args):
        raise UsageError("arguments must not be empty")
    infile, cmd1, cmd2, outfile = args
    return infile, cmd1, cmd2, outfile


def open_input(path: str) -> BinaryIO:
    """Open *path* for reading."""
    return open(path, "rb")


def open_output(path: str) -> BinaryIO:
    """Open *path* for writing, creating it with mode 0644 and truncating it."""
    fd = os.open(path, os.O_WRONLY | os.O_CREAT | os.O_TRUNC, 0o644)
    return os.fdopen(fd, "wb")


def _report(message: str) -> None:
    print(message, file=sys.stderr, flush=True)


def _child_env(env: Env | None) -> dict[str, str]:
    if env is None:
        return dict(os.environ)
    if isinstance(env, Mapping):
        return dict(env)
    result: dict[str, str] = {}
    for entry in env:
        key, _, value = entry.partition("=")
        result.setdefault(key, value)
    return result


def _start(command: str, env: Env, child_env: dict[str, str], stdin, stdout):
    """Start *command*; return the process, or the exit status if it could not start."""
    try:
        path, argv = resolve_command(command, env)
    except CommandError as error:
        if error.message:
            _report(error.message)
        return error.exit_status
    try:
        return subprocess.Popen(
            argv, executable=path, stdin=stdin, stdout=stdout, env=child_env
        )
    except OSError as error:
        _report(f"Error execve: {error.strerror}")
        return 126


def _open_or_report(opener, path: str, stack: ExitStack) -> BinaryIO | None:
    try:
        return stack.enter_context(opener(path))
    except OSError as error:
        _report(f"{path}: {error.strerror}")
        return None


def run_pipeline(
    infile: str, cmd1: str, cmd2: str, outfile: str, env: Env | None = None
) -> int:
    """Run cmd1 reading *infile*, piped into cmd2 writing *outfile*.

    Returns the exit status of cmd2, or 1 if it was ended by a signal.
    Failures of the first command are reported but do not stop the second.
    """
    lookup_env: Env = os.environ if env is None else env
    child_env = _child_env(env)
    read_end, write_end = os.pipe()
    first = second = None
    with ExitStack() as stack:
        try:
            source = _open_or_report(open_input, infile, stack)
            if source is not None:
                first = _start(cmd1, lookup_env, child_env, source, write_end)
            os.close(write_end)
            write_end = -1

            sink = _open_or_report(open_output, outfile, stack)
            if sink is None:
                second = 1
            else:
                second = _start(cmd2, lookup_env, child_env, read_end, sink)
            os.close(read_end)
            read_end = -1
        finally:
            for fd in (read_end, write_end):
                if fd >= 0:
                    os.close(fd)

    if isinstance(first, subprocess.Popen):
        first.wait()
    if isinstance(second, subprocess.Popen):
        status = second.wait()
        return status if status >= 0 else 1
    return second


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``pipex infile cmd1 cmd2 outfile``."""
    args = sys.argv[1:] if argv is None else list(argv)
    try:
        infile, cmd1, cmd2, outfile = validate_args(args)
    except UsageError:
        return 1
    return run_pipeline(infile, cmd1, cmd2, outfile, os.environ)


if __name__ == "__main__":
    raise SystemExit(main())