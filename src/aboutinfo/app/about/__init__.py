"""Application services for about information."""

from .bundles import load_bundle
from .locator import LocatorResolver
from .parser import AboutInfoParser
from .service import AboutInfoService

__all__ = [
    "AboutInfoParser",
    "AboutInfoService",
    "LocatorResolver",
    "load_bundle",
]
