"""Reads about files into :class:`AboutInfo` records."""

from __future__ import annotations

from pathlib import Path
from typing import Dict, Optional

from aboutinfo.domain.about import (
    AboutConfigurationError,
    AboutFields,
    AboutInfo,
    ImageReference,
    build_mappings,
    substitute,
)
from aboutinfo.ports import FailureReporter, FeatureDescriptor

from .bundles import load_bundle
from .locator import LocatorResolver

WINDOW_IMAGE = "windowImage"
ABOUT_TEXT = "aboutText"
ABOUT_IMAGE = "aboutImage"
FEATURE_IMAGE = "featureImage"
WELCOME_PAGE = "welcomePage"
APP_NAME = "appName"


class AboutInfoParser:
    """Builds about records from an about file plus its optional bundles.

    Only the about file itself is required. If it cannot be read the failure
    is reported once and an empty record is returned so that products with a
    broken about file stay usable. Bundle failures are reported individually
    and leave localized fields at their raw values.
    """

    def __init__(self, resolver: LocatorResolver, reporter: FailureReporter) -> None:
        self._resolver = resolver
        self._reporter = reporter

    def parse(
        self,
        primary: Optional[Path],
        bundle_locator: Optional[Path] = None,
        mappings_locator: Optional[Path] = None,
        *,
        feature_id: Optional[str] = None,
        version_id: Optional[object] = None,
        descriptor: Optional[FeatureDescriptor] = None,
    ) -> AboutInfo:
        if descriptor is None:
            descriptor = self._resolver.descriptor
        try:
            fields = self.read_fields(primary, bundle_locator, mappings_locator)
        except AboutConfigurationError as exc:
            self._reporter.report(exc.message, exc.cause)
            fields = AboutFields()
        return AboutInfo(feature_id, version_id, descriptor, fields, resolve=self._resolver.resolve)

    def read_primary(self, primary: Optional[Path]) -> Dict[str, str]:
        if primary is None:
            raise AboutConfigurationError("Cannot read about info file: no locator", locator=None)
        result = load_bundle(primary)
        if result.error is not None:
            raise AboutConfigurationError(
                f"Cannot read about info file {primary}",
                locator=primary,
                cause=result.error,
            ) from result.error
        return result.value or {}

    def read_fields(
        self,
        primary: Optional[Path],
        bundle_locator: Optional[Path] = None,
        mappings_locator: Optional[Path] = None,
    ) -> AboutFields:
        ini = self.read_primary(primary)
        bundle = self._load_optional(bundle_locator, "Cannot read about properties file")
        mappings = build_mappings(self._load_optional(mappings_locator, "Cannot read about mappings file"))

        return AboutFields(
            window_image=self._image(ini, WINDOW_IMAGE),
            about_text=substitute(_raw(ini, ABOUT_TEXT), bundle, mappings),
            about_image=self._image(ini, ABOUT_IMAGE),
            feature_image_name=_raw(ini, FEATURE_IMAGE),
            feature_image=self._image(ini, FEATURE_IMAGE),
            welcome_page=self._resolver.resolve(_raw(ini, WELCOME_PAGE)),
            app_name=substitute(_raw(ini, APP_NAME), bundle, mappings),
        )

    def _load_optional(self, locator: Optional[Path], message: str) -> Optional[Dict[str, str]]:
        result = load_bundle(locator)
        if result.error is not None:
            self._reporter.report(f"{message} {locator}", result.error)
        return result.value

    def _image(self, ini: Dict[str, str], key: str) -> Optional[ImageReference]:
        locator = self._resolver.resolve(_raw(ini, key))
        if locator is None:
            return None
        return ImageReference(locator)


def _raw(ini: Dict[str, str], key: str) -> Optional[str]:
    return ini.get(key) or None


__all__ = [
    "ABOUT_IMAGE",
    "ABOUT_TEXT",
    "APP_NAME",
    "AboutInfoParser",
    "FEATURE_IMAGE",
    "WELCOME_PAGE",
    "WINDOW_IMAGE",
]
