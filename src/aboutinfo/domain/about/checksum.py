"""Lazily computed CRC-32 of the feature image."""

from __future__ import annotations

import threading
import zlib
from functools import partial
from pathlib import Path
from typing import BinaryIO, Callable, Optional

from aboutinfo.utils.streams import scoped_stream

from .value_objects import ChecksumState

BUFFER_SIZE = 2048

Resolve = Callable[[Optional[str]], Optional[Path]]


def crc32_of_stream(stream: BinaryIO, buffer_size: int = BUFFER_SIZE) -> int:
    crc = 0
    for chunk in iter(partial(stream.read, buffer_size), b""):
        crc = zlib.crc32(chunk, crc)
    return crc & 0xFFFFFFFF


class ChecksumCache:
    """Computes the checksum of one named resource at most once.

    Missing names, unresolvable locators and I/O errors all settle into the
    absent state without being reported.
    """

    def __init__(self, resolve: Resolve, resource_name: Optional[str]) -> None:
        self._resolve = resolve
        self._resource_name = resource_name
        self._state = ChecksumState.uncomputed()
        self._lock = threading.Lock()

    @property
    def state(self) -> ChecksumState:
        return self._state

    def get(self) -> Optional[int]:
        state = self._state
        if not state.computed:
            with self._lock:
                if not self._state.computed:
                    self._state = self._compute()
                state = self._state
        return state.value

    def _compute(self) -> ChecksumState:
        if not self._resource_name:
            return ChecksumState.absent()
        try:
            locator = self._resolve(self._resource_name)
            if locator is None:
                return ChecksumState.absent()
            with scoped_stream(locator) as stream:
                value = crc32_of_stream(stream)
        except OSError:
            return ChecksumState.absent()
        return ChecksumState.present(value)


__all__ = ["BUFFER_SIZE", "ChecksumCache", "crc32_of_stream"]
