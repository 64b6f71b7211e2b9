"""Domain primitives for product about information."""

from __future__ import annotations

from .checksum import BUFFER_SIZE, ChecksumCache, crc32_of_stream
from .properties import PropertiesSyntaxError, parse_properties
from .record import AboutInfo
from .substitution import build_mappings, substitute
from .value_objects import (
    AboutConfigurationError,
    AboutFields,
    ChecksumState,
    ChecksumStatus,
    ImageReference,
    LoadResult,
)

__all__ = [
    "AboutConfigurationError",
    "AboutFields",
    "AboutInfo",
    "BUFFER_SIZE",
    "ChecksumCache",
    "ChecksumState",
    "ChecksumStatus",
    "ImageReference",
    "LoadResult",
    "PropertiesSyntaxError",
    "build_mappings",
    "crc32_of_stream",
    "parse_properties",
    "substitute",
]
