"""Read here-document text from a stream until a limiter line."""

from __future__ import annotations

import sys
from typing import TextIO

PROMPT = "> "


def collect_here_doc(
    limiter: str,
    reader: TextIO | None = None,
    prompt: TextIO | None = None,
) -> str:
    """Collect lines from ``reader`` until a line equal to ``limiter``.

    A prompt is written to ``prompt`` before every read, including the read
    that finds the limiter or the end of input. The limiter line must be
    followed by a newline to end the document. Text read before the end of
    input is kept when the limiter never appears. Read errors propagate.
    """
    source = sys.stdin if reader is None else reader
    terminator = f"{limiter}\n"
    collected: list[str] = []
    while True:
        if prompt is not None:
            prompt.write(PROMPT)
            prompt.flush()
        line = source.readline()
        if not line or line == terminator:
            break
        collected.append(line)
    return "".join(collected)