"""Locate the executable for a command the way a shell searches PATH."""

from __future__ import annotations

import os
from collections.abc import Iterable, Mapping, Sequence

from pipex.textops import split


def search_path(directories: Iterable[str], name: str) -> str | None:
    """Return the first ``directory/name`` that is executable, or None."""
    for directory in directories:
        candidate = f"{directory}/{name}"
        if os.access(candidate, os.X_OK):
            return candidate
    return None


def resolve_command(argv: Sequence[str], env: Mapping[str, str]) -> str | None:
    """Find the program to run for ``argv``.

    A name containing a slash is used as is when it is executable. Otherwise
    the directories listed in ``env["PATH"]`` are searched in order. Returns
    None when nothing suitable is found.
    """
    if not argv or not argv[0]:
        return None
    name = argv[0]
    if "/" in name and os.access(name, os.X_OK):
        return name
    path = env.get("PATH")
    if path is None:
        return None
    return search_path(split(path, ":"), name)