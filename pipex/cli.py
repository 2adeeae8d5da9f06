"""Command-line entry points: a two-command pipe and a multi-command variant."""

from __future__ import annotations

import os
import sys
import tempfile
from collections.abc import Sequence
from typing import BinaryIO

from pipex.heredoc import collect_here_doc
from pipex.pipeline import run_pipeline, split_command
from pipex.textops import split, strncmp

USAGE_ERROR = "Error:\n Incorrect number of arguments.\n"
HERE_DOC = "here_doc"
OUTPUT_MODE = 0o644


def _usage_error() -> int:
    sys.stderr.write(USAGE_ERROR)
    sys.stderr.flush()
    return 1


def _report(name: str, exc: OSError) -> int:
    reason = exc.strerror or str(exc)
    print(f"{name}: {reason}", file=sys.stderr)
    sys.stderr.flush()
    return 1


def _open_output(path: str) -> BinaryIO:
    """Open ``path`` for writing, truncating it and creating it with mode 0644."""
    descriptor = os.open(path, os.O_CREAT | os.O_WRONLY | os.O_TRUNC, OUTPUT_MODE)
    return os.fdopen(descriptor, "wb")


def _run(commands: list[list[str]], source: BinaryIO, sink: BinaryIO) -> int:
    sys.stdout.flush()
    return run_pipeline(commands, source, sink, dict(os.environ))


def main(argv: Sequence[str] | None = None) -> int:
    """Run ``infile cmd1 cmd2 outfile`` as ``< infile cmd1 | cmd2 > outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) != 4:
        return _usage_error()
    infile, first, second, outfile = args
    try:
        source = open(infile, "rb")
    except OSError as exc:
        return _report(infile, exc)
    with source:
        try:
            sink = _open_output(outfile)
        except OSError as exc:
            return _report(outfile, exc)
        with sink:
            try:
                commands = [split_command(first), split_command(second)]
            except ValueError as exc:
                print(exc, file=sys.stderr)
                return 1
            return _run(commands, source, sink)


def _here_doc(args: list[str]) -> int:
    if len(args) != 5:
        return _usage_error()
    _, limiter, first, second, outfile = args
    try:
        sink = _open_output(outfile)
    except OSError as exc:
        return _report(outfile, exc)
    with sink, tempfile.TemporaryFile("w+b") as buffer:
        try:
            text = collect_here_doc(limiter, sys.stdin, sys.stdout)
        except OSError:
            return 1
        buffer.write(text.encode())
        buffer.flush()
        buffer.seek(0)
        return _run([split(first, " "), split(second, " ")], buffer, sink)


def bonus_main(argv: Sequence[str] | None = None) -> int:
    """Run ``infile cmd1 ... cmdN outfile``, or ``here_doc LIMITER cmd1 cmd2 outfile``."""
    args = list(sys.argv[1:] if argv is None else argv)
    if len(args) < 4:
        return _usage_error()
    if strncmp(HERE_DOC, args[0], len(HERE_DOC)) == 0:
        return _here_doc(args)
    infile, *command_texts, outfile = args
    try:
        source = open(infile, "rb")
    except OSError as exc:
        return _report(infile, exc)
    with source:
        try:
            sink = _open_output(outfile)
        except OSError as exc:
            return _report(outfile, exc)
        with sink:
            commands = [split(text, " ") for text in command_texts]
            return _run(commands, source, sink)