"""Soft loading of properties bundles."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from aboutinfo.domain.about import LoadResult, PropertiesSyntaxError, parse_properties
from aboutinfo.utils.streams import scoped_stream


def decode_properties(raw: bytes) -> str:
    try:
        return raw.decode("utf-8")
    except UnicodeDecodeError:
        return raw.decode("iso-8859-1")


def load_bundle(locator: Optional[Path]) -> LoadResult[Dict[str, str]]:
    """Read a properties file; failures are returned, not raised."""

    if locator is None:
        return LoadResult()
    try:
        with scoped_stream(locator) as stream:
            raw = stream.read()
        bundle = parse_properties(decode_properties(raw))
    except (OSError, PropertiesSyntaxError) as exc:
        return LoadResult.failed(exc, locator)
    return LoadResult.loaded(bundle, locator)


__all__ = ["decode_properties", "load_bundle"]
