"""Data models shared by the collector, aggregator and reporters."""

from dataclasses import dataclass, field
from typing import NamedTuple


@dataclass
class MetricReading:
    """A single labelled value from one measurement run."""

    label: str
    value: int | float | str


@dataclass
class Sample:
    """Metrics extracted from one accepted provider response.

    The first reading is always the overall performance score.
    """

    timestamp: str
    readings: list[MetricReading] = field(default_factory=list)

    @property
    def labels(self) -> list[str]:
        return [reading.label for reading in self.readings]

    def get(self, label: str) -> int | float | str | None:
        """Return the value recorded for ``label``, or None if absent."""
        for reading in self.readings:
            if reading.label == label:
                return reading.value
        return None


@dataclass
class AggregateStat:
    """Aggregated statistics for one metric.

    ``min`` and ``max`` stay None when only one sample was collected.
    """

    avg: int | float | str
    min: int | float | str | None = None
    max: int | float | str | None = None

    def to_dict(self) -> dict[str, int | float | str]:
        data: dict[str, int | float | str] = {"avg": self.avg}
        if self.min is not None:
            data["min"] = self.min
        if self.max is not None:
            data["max"] = self.max
        return data


class CollectionResult(NamedTuple):
    """Outcome of a collection run."""

    samples: list[Sample]
    elapsed_seconds: float
    skipped: int
