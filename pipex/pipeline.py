"""Run a chain of commands connected by pipes."""

from __future__ import annotations

import subprocess
import sys
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from pipex.resolve import resolve_command
from pipex.textops import split

NOT_FOUND_STATUS = 127


class CommandNotFoundError(Exception):
    """Raised when a command cannot be located or started."""

    def __init__(self, name: str) -> None:
        super().__init__(f"{name}: command not a found")
        self.name = name


def split_command(text: str) -> list[str]:
    """Split a command string on spaces into an argument list."""
    argv = split(text, " ")
    if not argv:
        raise ValueError(f"empty command: {text!r}")
    return argv


def _spawn(
    argv: Sequence[str],
    stdin: Any,
    stdout: Any,
    env: Mapping[str, str],
) -> subprocess.Popen:
    program = resolve_command(argv, env)
    name = argv[0] if argv else ""
    if program is None:
        raise CommandNotFoundError(name)
    try:
        return subprocess.Popen(
            list(argv), executable=program, stdin=stdin, stdout=stdout, env=dict(env)
        )
    except OSError as exc:
        raise CommandNotFoundError(name) from exc


def _exit_status(returncode: int) -> int:
    # A child killed by a signal carries no exit code; it reads as 0.
    return returncode if returncode >= 0 else 0


def run_pipeline(
    commands: Iterable[Sequence[str]],
    source: Any,
    sink: Any,
    env: Mapping[str, str],
) -> int:
    """Run ``commands`` from ``source`` to ``sink``; return the last one's status.

    ``source`` and ``sink`` are open files or file descriptors. A command that
    cannot be found is reported on standard error and counts as exit status
    127; the next command then reads empty input.
    """
    stages = [list(argv) for argv in commands]
    if not stages:
        raise ValueError("at least one command is required")

    processes: list[subprocess.Popen | None] = []
    upstream: Any = source
    last_index = len(stages) - 1
    for index, argv in enumerate(stages):
        is_last = index == last_index
        downstream = sink if is_last else subprocess.PIPE
        try:
            process: subprocess.Popen | None = _spawn(argv, upstream, downstream, env)
        except CommandNotFoundError as exc:
            print(exc, file=sys.stderr)
            sys.stderr.flush()
            process = None
        finally:
            if upstream is not source and hasattr(upstream, "close"):
                upstream.close()
        processes.append(process)
        if process is not None and process.stdout is not None:
            upstream = process.stdout
        else:
            upstream = subprocess.DEVNULL

    statuses = [
        NOT_FOUND_STATUS if process is None else _exit_status(process.wait())
        for process in processes
    ]
    return statuses[-1]