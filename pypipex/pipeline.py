"""Run ``< infile cmd1 | cmd2 > outfile`` with two child processes."""

from __future__ import annotations

import errno
import os
import signal
import subprocess
import sys
from collections.abc import Mapping, Sequence
from contextlib import suppress
from typing import NamedTuple

from pypipex.command import parse_command
from pypipex.resolve import find_executable


class PipexError(Exception):
    """A failure that ends the program with ``exit_code``."""

    def __init__(self, message: str, exit_code: int = 1) -> None:
        super().__init__(message)
        self.exit_code = exit_code


class CommandNotFound(PipexError):
    """No search directory holds an executable of this name."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: command not found", 127)
        self.name = name


class _Files(NamedTuple):
    infile: int
    outfile: int
    created: bool


def open_files(infile: str, outfile: str) -> _Files:
    """Open the input for reading and truncate the output.

    A missing input is reported and created empty; ``created`` tells the
    caller to remove it again when done.
    """
    created = False
    in_flags = os.O_RDONLY
    if not os.access(infile, os.F_OK):
        print(os.strerror(errno.ENOENT), file=sys.stderr)
        created = True
        in_flags |= os.O_CREAT
    try:
        in_fd = os.open(infile, in_flags, 0o644)
    except OSError as err:
        raise PipexError(err.strerror or str(err)) from err
    try:
        out_fd = os.open(outfile, os.O_CREAT | os.O_RDWR | os.O_TRUNC, 0o644)
    except OSError as err:
        os.close(in_fd)
        if created:
            with suppress(FileNotFoundError):
                os.unlink(infile)
        raise PipexError(err.strerror or str(err)) from err
    return _Files(in_fd, out_fd, created)


def _launch(text: str, env: Mapping[str, str], stdin: int, stdout: int) -> subprocess.Popen:
    try:
        words = parse_command(text)
    except ValueError as err:
        raise PipexError(str(err)) from err
    if not words:
        raise PipexError(os.strerror(errno.EACCES))
    path = find_executable(words[0], env)
    if path is None:
        raise CommandNotFound(words[0])
    try:
        return subprocess.Popen(
            words, executable=path, env=dict(env), stdin=stdin, stdout=stdout
        )
    except OSError as err:
        raise PipexError(err.strerror or str(err)) from err


def _start(text: str, env: Mapping[str, str], stdin: int, stdout: int) -> subprocess.Popen | int:
    try:
        return _launch(text, env, stdin, stdout)
    except PipexError as err:
        print(err, file=sys.stderr)
        return err.exit_code


def _status(child: subprocess.Popen | int) -> int:
    if isinstance(child, int):
        return child
    code = child.wait()
    if code < 0:
        return 128 + signal.Signals(-code).value
    return code


def run_pipeline(
    infile: str, first: str, second: str, outfile: str, env: Mapping[str, str]
) -> tuple[int, int]:
    """Feed ``infile`` through both commands into ``outfile``.

    Returns the exit status of each command; a command that could not be
    started reports 127 when it was not found and 1 otherwise.
    """
    files = open_files(infile, outfile)
    read_end, write_end = os.pipe()
    children: list[subprocess.Popen | int] = []
    try:
        for text, stdin, stdout in (
            (first, files.infile, write_end),
            (second, read_end, files.outfile),
        ):
            children.append(_start(text, env, stdin, stdout))
    finally:
        for fd in (files.infile, files.outfile, read_end, write_end):
            os.close(fd)
        if files.created:
            with suppress(FileNotFoundError):
                os.unlink(infile)
    first_status, second_status = (_status(child) for child in children)
    return first_status, second_status


def main(argv: Sequence[str] | None = None) -> int:
    """Command entry point: ``pypipex infile cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        sys.stderr.write("Wrong nb of arguments\n")
        return 1
    env = dict(os.environ)
    if not env:
        sys.stderr.write("No environment\n")
        return 1
    infile, first, second, outfile = args
    try:
        run_pipeline(infile, first, second, outfile, env)
    except PipexError as err:
        print(err, file=sys.stderr)
        return err.exit_code
    return 0


if __name__ == "__main__":
    sys.exit(main())