"""Ports consumed by the about info core."""

from .collaborators import FailureReporter, FeatureDescriptor, FeatureRegistry

__all__ = ["FailureReporter", "FeatureDescriptor", "FeatureRegistry"]
