"""Filesystem-backed feature registry.

Each installed feature is a directory under the registry root named after
the feature id and holding a ``feature.yaml`` manifest::

    features/
      org.example.product/
        feature.yaml
        about.ini
        nl/de/about.properties
        nl/de/CH/about.properties
"""

from __future__ import annotations

from dataclasses import dataclass
from functools import lru_cache
from pathlib import Path, PurePosixPath
from typing import Any, Dict, List, Optional

import yaml
from jsonschema import Draft202012Validator

from aboutinfo.resources import load_schema

MANIFEST_FILENAME = "feature.yaml"
NL_DIRECTORY = "nl"
NL_VARIABLE = "$nl$"
_SCHEMA_RESOURCE = "feature_manifest.schema.json"


class FeatureManifestError(RuntimeError):
    """Raised when a feature manifest is unreadable or invalid."""

    def __init__(self, message: str, *, path: Path) -> None:
        super().__init__(message)
        self.path = path


@lru_cache(maxsize=1)
def _validator() -> Draft202012Validator:
    return Draft202012Validator(load_schema(_SCHEMA_RESOURCE))


def nl_search_prefixes(nl: str) -> List[PurePosixPath]:
    """Return locale directories to search, most specific first.

    ``de_CH`` yields ``nl/de/CH``, ``nl/de`` and the feature root.
    """

    parts = [part for part in nl.replace("-", "_").split("_") if part]
    prefixes: List[PurePosixPath] = []
    if len(parts) >= 2:
        prefixes.append(PurePosixPath(NL_DIRECTORY, parts[0].lower(), parts[1].upper()))
    if parts:
        prefixes.append(PurePosixPath(NL_DIRECTORY, parts[0].lower()))
    prefixes.append(PurePosixPath())
    return prefixes


def is_plain_segment(name: str) -> bool:
    """True when ``name`` names a single directory entry below the root."""

    if not name or "\\" in name:
        return False
    parts = PurePosixPath(name).parts
    return len(parts) == 1 and parts[0] == name and name not in (".", "..")


@dataclass(frozen=True)
class DirectoryFeatureDescriptor:
    feature_id: str
    root: Path
    label: Optional[str] = None
    provider_name: Optional[str] = None
    version: Optional[str] = None
    nl: str = ""

    def find(self, relative: str) -> Optional[Path]:
        path = PurePosixPath(relative.replace("\\", "/"))
        parts = path.parts
        if parts and parts[0] == NL_VARIABLE:
            prefixes = nl_search_prefixes(self.nl)
            path = PurePosixPath(*parts[1:])
        else:
            prefixes = [PurePosixPath()]
        if not path.parts or path.is_absolute() or ".." in path.parts:
            return None
        for prefix in prefixes:
            candidate = self.root.joinpath(*prefix.parts, *path.parts)
            try:
                if candidate.is_file():
                    return candidate.resolve()
            except OSError:
                # name rejected by the filesystem, e.g. ENAMETOOLONG
                continue
        return None

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.feature_id,
            "label": self.label,
            "provider": self.provider_name,
            "version": self.version,
            "path": self.root.as_posix(),
        }


class DirectoryFeatureRegistry:
    """Looks up installed features below a root directory."""

    def __init__(self, root: Path, *, nl: str = "") -> None:
        self._root = root.expanduser().resolve()
        self._nl = nl

    @property
    def root(self) -> Path:
        return self._root

    def get_descriptor(self, feature_id: str) -> Optional[DirectoryFeatureDescriptor]:
        if not is_plain_segment(feature_id):
            return None
        feature_dir = self._root / feature_id
        manifest_path = feature_dir / MANIFEST_FILENAME
        try:
            if not manifest_path.is_file():
                return None
        except OSError:
            return None
        manifest = self._read_manifest(manifest_path)
        if manifest["id"] != feature_id:
            raise FeatureManifestError(
                f"manifest id mismatch: directory={feature_id} manifest={manifest['id']}",
                path=manifest_path,
            )
        return DirectoryFeatureDescriptor(
            feature_id=feature_id,
            root=feature_dir,
            label=manifest.get("label"),
            provider_name=manifest.get("provider"),
            version=manifest.get("version"),
            nl=self._nl,
        )

    def list(self) -> List[DirectoryFeatureDescriptor]:
        if not self._root.is_dir():
            return []
        descriptors: List[DirectoryFeatureDescriptor] = []
        for entry in sorted(self._root.iterdir()):
            if not entry.is_dir():
                continue
            descriptor = self.get_descriptor(entry.name)
            if descriptor is not None:
                descriptors.append(descriptor)
        return descriptors

    def _read_manifest(self, path: Path) -> Dict[str, Any]:
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, yaml.YAMLError) as exc:
            raise FeatureManifestError(f"Cannot read feature manifest {path}: {exc}", path=path) from exc
        if not isinstance(data, dict):
            raise FeatureManifestError(f"Feature manifest {path} must be a mapping", path=path)
        errors = sorted(_validator().iter_errors(data), key=lambda error: error.json_path)
        if errors:
            details = "; ".join(f"{error.json_path}: {error.message}" for error in errors)
            raise FeatureManifestError(f"Feature manifest {path} invalid: {details}", path=path)
        return data


__all__ = [
    "DirectoryFeatureDescriptor",
    "DirectoryFeatureRegistry",
    "FeatureManifestError",
    "MANIFEST_FILENAME",
    "is_plain_segment",
    "nl_search_prefixes",
]
