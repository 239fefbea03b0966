"""JSON rendering of aggregated statistics."""

import json
from typing import Any

from pagesampler.models import AggregateStat


def stats_to_dict(stats: dict[str, AggregateStat]) -> dict[str, dict[str, Any]]:
    """Convert aggregated stats to a JSON-serializable dict, preserving order."""
    return {label: stat.to_dict() for label, stat in stats.items()}


def stats_to_json(stats: dict[str, AggregateStat], indent: int = 2) -> str:
    return json.dumps(stats_to_dict(stats), indent=indent)
