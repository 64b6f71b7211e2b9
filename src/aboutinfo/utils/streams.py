"""Scoped byte streams over locators."""

from __future__ import annotations

from contextlib import contextmanager, suppress
from pathlib import Path
from typing import BinaryIO, Iterator


@contextmanager
def scoped_stream(locator: Path) -> Iterator[BinaryIO]:
    """Open ``locator`` for binary reading and always close it.

    Open failures propagate; failures while closing are ignored.
    """

    stream = locator.open("rb")
    try:
        yield stream
    finally:
        with suppress(OSError):
            stream.close()
