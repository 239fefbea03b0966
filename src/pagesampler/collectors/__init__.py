"""Sampling: response extraction and the collection loop."""

from .extractor import extract_sample, extract_timestamp
from .sampler import collect

__all__ = ["collect", "extract_sample", "extract_timestamp"]
