"""Loads about information for installed features."""

from __future__ import annotations

from typing import Optional

from aboutinfo.domain.about import AboutInfo
from aboutinfo.ports import FailureReporter, FeatureDescriptor, FeatureRegistry

from .locator import LocatorResolver
from .parser import AboutInfoParser

ABOUT_INI = "about.ini"
ABOUT_PROPERTIES = "about.properties"
ABOUT_MAPPINGS = "about.mappings"


class AboutInfoService:
    def __init__(
        self,
        registry: FeatureRegistry,
        reporter: FailureReporter,
        *,
        ini_name: str = ABOUT_INI,
        properties_name: str = ABOUT_PROPERTIES,
        mappings_name: str = ABOUT_MAPPINGS,
    ) -> None:
        self._registry = registry
        self._reporter = reporter
        self._ini_name = ini_name
        self._properties_name = properties_name
        self._mappings_name = mappings_name

    def load(self, feature_id: str, version_id: Optional[object] = None) -> AboutInfo:
        """Return the about record for a feature.

        An unknown feature or a feature without an about file yields an empty
        record after a single failure report.
        """
        descriptor = self._registry.get_descriptor(feature_id)
        if descriptor is None:
            self._reporter.report(f"Unable to find feature {feature_id}")
            return AboutInfo(feature_id, version_id)
        return self.load_descriptor(feature_id, descriptor, version_id)

    def load_descriptor(
        self,
        feature_id: str,
        descriptor: FeatureDescriptor,
        version_id: Optional[object] = None,
    ) -> AboutInfo:
        """Parse the about files of an already resolved feature."""
        resolver = LocatorResolver(descriptor)
        ini_locator = resolver.resolve(self._ini_name)
        if ini_locator is None:
            self._reporter.report(f"Unable to locate {self._ini_name} for feature {feature_id}")
            return AboutInfo(feature_id, version_id, descriptor)

        parser = AboutInfoParser(resolver, self._reporter)
        return parser.parse(
            ini_locator,
            resolver.resolve(self._properties_name),
            resolver.resolve(self._mappings_name),
            feature_id=feature_id,
            version_id=version_id,
            descriptor=descriptor,
        )


__all__ = ["ABOUT_INI", "ABOUT_MAPPINGS", "ABOUT_PROPERTIES", "AboutInfoService"]
