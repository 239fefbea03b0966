"""Reduce collected samples into per-metric statistics."""

from .aggregator import AggregationError, Suffix, aggregate, parse_value

__all__ = ["AggregationError", "Suffix", "aggregate", "parse_value"]
