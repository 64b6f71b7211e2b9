"""Value objects describing parsed about information."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Generic, Optional, TypeVar

T = TypeVar("T")


class AboutConfigurationError(RuntimeError):
    """Raised when the primary about file cannot be opened or parsed."""

    def __init__(self, message: str, *, locator: Optional[Path], cause: Optional[BaseException] = None) -> None:
        super().__init__(message)
        self.message = message
        self.locator = locator
        self.cause = cause


@dataclass(frozen=True)
class LoadResult(Generic[T]):
    """Outcome of a soft resource load.

    ``value`` is ``None`` when nothing was loaded. ``error`` is set only when a
    locator existed but could not be read; a missing locator is not an error.
    """

    value: Optional[T] = None
    error: Optional[BaseException] = None
    locator: Optional[Path] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def loaded(cls, value: T, locator: Path) -> "LoadResult[T]":
        return cls(value=value, locator=locator)

    @classmethod
    def failed(cls, error: BaseException, locator: Path) -> "LoadResult[T]":
        return cls(error=error, locator=locator)


@dataclass(frozen=True)
class ImageReference:
    """Reference to an image resource; decoding is left to the caller."""

    locator: Path

    def to_dict(self) -> Dict[str, Any]:
        return {"locator": self.locator.as_posix()}


class ChecksumStatus(str, Enum):
    UNCOMPUTED = "uncomputed"
    PRESENT = "present"
    ABSENT = "absent"


@dataclass(frozen=True)
class ChecksumState:
    """Memoized checksum outcome; ``value`` is set only when present."""

    status: ChecksumStatus
    value: Optional[int] = None

    def __post_init__(self) -> None:
        if (self.status is ChecksumStatus.PRESENT) != (self.value is not None):
            raise ValueError(f"checksum state {self.status.value} inconsistent with value {self.value!r}")

    @classmethod
    def uncomputed(cls) -> "ChecksumState":
        return cls(ChecksumStatus.UNCOMPUTED)

    @classmethod
    def present(cls, value: int) -> "ChecksumState":
        return cls(ChecksumStatus.PRESENT, value)

    @classmethod
    def absent(cls) -> "ChecksumState":
        return cls(ChecksumStatus.ABSENT)

    @property
    def computed(self) -> bool:
        return self.status is not ChecksumStatus.UNCOMPUTED


@dataclass(frozen=True)
class AboutFields:
    """Fields read from the about file. Anything not in the file stays ``None``."""

    app_name: Optional[str] = None
    about_text: Optional[str] = None
    window_image: Optional[ImageReference] = None
    about_image: Optional[ImageReference] = None
    feature_image: Optional[ImageReference] = None
    feature_image_name: Optional[str] = None
    welcome_page: Optional[Path] = None


__all__ = [
    "AboutConfigurationError",
    "AboutFields",
    "ChecksumState",
    "ChecksumStatus",
    "ImageReference",
    "LoadResult",
]
