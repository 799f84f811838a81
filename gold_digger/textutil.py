"""Small text helpers: file-extension checks and chunked line reading."""

from __future__ import annotations

from typing import IO, Iterator

BUFFER_SIZE = 100


def has_extension(path: str, suffix: str) -> bool:
    """Return True when *path* ends with *suffix* (for example ``".ber"``)."""
    if not suffix or len(path) < len(suffix):
        return False
    return path.endswith(suffix)


def read_lines(stream: IO[str]) -> Iterator[str]:
    """Yield the lines of a text stream, each keeping its trailing newline.

    The stream is read in fixed-size chunks. A final line without a newline
    is yielded as it is; an empty remainder yields nothing.
    """
    pending = ""
    while True:
        chunk = stream.read(BUFFER_SIZE)
        if not chunk:
            break
        pending += chunk
        while "\n" in pending:
            line, _, pending = pending.partition("\n")
            yield line + "\n"
    if pending:
        yield pending