"""Locale-aware resolution of about resource names."""

from __future__ import annotations

from pathlib import Path
from typing import Optional

from aboutinfo.ports import FeatureDescriptor

NL_VARIABLE = "$nl$"


class LocatorResolver:
    """Resolves logical file names to the national-language variant on disk.

    Resources referenced from about files are optional, so a name that
    cannot be found simply resolves to ``None``.
    """

    def __init__(self, descriptor: Optional[FeatureDescriptor]) -> None:
        self._descriptor = descriptor

    @property
    def descriptor(self) -> Optional[FeatureDescriptor]:
        return self._descriptor

    def resolve(self, logical_name: Optional[str]) -> Optional[Path]:
        if not logical_name or self._descriptor is None:
            return None
        return self._descriptor.find(f"{NL_VARIABLE}/{logical_name.lstrip('/')}")


__all__ = ["LocatorResolver", "NL_VARIABLE"]
