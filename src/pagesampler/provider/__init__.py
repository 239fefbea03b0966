"""Measurement provider backed by the PageSpeed Insights API."""

from .client import MeasurementProvider, PageSpeedClient, ProviderError

__all__ = [
    "MeasurementProvider",
    "PageSpeedClient",
    "ProviderError",
]
