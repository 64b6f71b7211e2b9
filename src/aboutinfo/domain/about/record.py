"""The about info record exposed to callers."""

from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Optional

from aboutinfo.ports import FeatureDescriptor

from .checksum import ChecksumCache, Resolve
from .value_objects import AboutFields, ImageReference


def _resolve_nothing(name: Optional[str]) -> Optional[Path]:
    return None


class AboutInfo:
    """About information for one ``(feature_id, version_id)`` pair.

    Product name, provider name and feature label are read through the
    feature descriptor on every access and are ``None`` without one. The
    only state that changes after construction is the memoized feature image
    checksum.
    """

    def __init__(
        self,
        feature_id: Optional[str],
        version_id: Optional[object] = None,
        descriptor: Optional[FeatureDescriptor] = None,
        fields: Optional[AboutFields] = None,
        *,
        resolve: Resolve = _resolve_nothing,
    ) -> None:
        self._feature_id = feature_id
        self._version_id = version_id
        self._descriptor = descriptor
        self._fields = fields if fields is not None else AboutFields()
        self._checksum = ChecksumCache(resolve, self._fields.feature_image_name)

    @property
    def feature_id(self) -> Optional[str]:
        return self._feature_id

    @property
    def descriptor(self) -> Optional[FeatureDescriptor]:
        return self._descriptor

    @property
    def fields(self) -> AboutFields:
        return self._fields

    @property
    def app_name(self) -> Optional[str]:
        """Application name handed to the windowing layer; never shown to users."""
        return self._fields.app_name

    @property
    def product_name(self) -> Optional[str]:
        if self._descriptor is None:
            return None
        return self._descriptor.label

    @property
    def provider_name(self) -> Optional[str]:
        if self._descriptor is None:
            return None
        return self._descriptor.provider_name

    @property
    def version(self) -> Optional[str]:
        if self._version_id is None:
            return None
        return str(self._version_id)

    @property
    def feature_label(self) -> Optional[str]:
        return self.product_name

    @property
    def about_text(self) -> Optional[str]:
        return self._fields.about_text

    @property
    def window_image(self) -> Optional[ImageReference]:
        return self._fields.window_image

    @property
    def about_image(self) -> Optional[ImageReference]:
        return self._fields.about_image

    @property
    def feature_image(self) -> Optional[ImageReference]:
        return self._fields.feature_image

    @property
    def feature_image_name(self) -> Optional[str]:
        return self._fields.feature_image_name

    @property
    def feature_image_crc(self) -> Optional[int]:
        return self._checksum.get()

    @property
    def welcome_page(self) -> Optional[Path]:
        return self._fields.welcome_page

    def to_dict(self, *, include_checksum: bool = True) -> Dict[str, Any]:
        def _image(value: Optional[ImageReference]) -> Optional[str]:
            return value.locator.as_posix() if value is not None else None

        payload: Dict[str, Any] = {
            "feature_id": self.feature_id,
            "version": self.version,
            "product_name": self.product_name,
            "provider_name": self.provider_name,
            "app_name": self.app_name,
            "about_text": self.about_text,
            "window_image": _image(self.window_image),
            "about_image": _image(self.about_image),
            "feature_image": _image(self.feature_image),
            "feature_image_name": self.feature_image_name,
            "welcome_page": self.welcome_page.as_posix() if self.welcome_page is not None else None,
        }
        if include_checksum:
            crc = self.feature_image_crc
            payload["feature_image_crc"] = f"{crc:08x}" if crc is not None else None
        return payload

    def __repr__(self) -> str:
        return f"AboutInfo(feature_id={self._feature_id!r}, version={self.version!r})"


__all__ = ["AboutInfo"]
