"""Port definitions for the feature registry and failure reporting."""

from __future__ import annotations

from pathlib import Path
from typing import Protocol


class FeatureDescriptor(Protocol):  # pragma: no cover
    """Installed feature as seen by the about info core.

    ``find`` maps a relative path to an absolute locator. A leading ``$nl$``
    segment asks for the national-language variant of the file.
    """

    @property
    def label(self) -> str | None:
        ...

    @property
    def provider_name(self) -> str | None:
        ...

    def find(self, relative: str) -> Path | None:
        ...


class FeatureRegistry(Protocol):  # pragma: no cover
    def get_descriptor(self, feature_id: str) -> FeatureDescriptor | None:
        ...


class FailureReporter(Protocol):  # pragma: no cover
    def report(self, message: str, cause: BaseException | None = None) -> None:
        ...
