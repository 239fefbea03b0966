"""Per-metric avg/min/max over a set of samples.

Lighthouse reports most timings as display strings such as ``"1.2s"`` or
``"3,456ms"``. Each metric keeps the unit of its first reading for the
whole run; values are parsed to floats for the arithmetic and rendered
back with that unit.
"""

import logging
import math
import statistics
from enum import Enum

from pagesampler.models import AggregateStat, Sample

logger = logging.getLogger(__name__)

THOUSANDS_SEPARATOR = ","


class AggregationError(Exception):
    """Raised when samples cannot be reduced to statistics."""


class Suffix(Enum):
    """Unit suffix carried by a metric's display value."""

    NONE = ""
    MILLISECONDS = "ms"
    SECONDS = "s"

    @classmethod
    def detect(cls, value: int | float | str) -> "Suffix":
        if isinstance(value, (int, float)):
            return cls.NONE
        if value.endswith(cls.MILLISECONDS.value):
            return cls.MILLISECONDS
        if value.endswith(cls.SECONDS.value):
            return cls.SECONDS
        return cls.NONE

    def render(self, number: float) -> int | float | str:
        """Render a number with this suffix, dropping a trailing ``.0``."""
        if float(number).is_integer():
            number = int(number)
        if self is Suffix.NONE:
            return number
        return f"{number}{self.value}"


def _round_half_up(number: float, places: int = 2) -> float:
    scale = 10**places
    return math.floor(number * scale + 0.5) / scale


def _convert(number: float, source: Suffix, target: Suffix) -> float:
    if source is target or Suffix.NONE in (source, target):
        return number
    if source is Suffix.SECONDS:
        return round(number * 1000, 3)
    return round(number / 1000, 6)


def parse_value(value: int | float | str, suffix: Suffix = Suffix.NONE) -> float:
    """Parse a reading into a float expressed in ``suffix`` units.

    Numeric readings pass through. Strings lose their unit suffix and
    thousands separators; a reading in seconds for a millisecond metric
    (or the reverse) is converted.

    Raises:
        AggregationError: If the string is not a number once stripped.
    """
    if isinstance(value, (int, float)):
        return float(value)

    own = Suffix.detect(value)
    text = value[: len(value) - len(own.value)] if own.value else value
    text = text.replace(THOUSANDS_SEPARATOR, "")
    try:
        number = float(text)
    except ValueError as e:
        raise AggregationError(f"Cannot parse metric value {value!r}") from e
    return _convert(number, own, suffix)


def _aggregate_metric(label: str, samples: list[Sample]) -> AggregateStat:
    reference = samples[0].get(label)
    suffix = Suffix.detect(reference)

    values = []
    for sample in samples:
        value = sample.get(label)
        if value is None:
            raise AggregationError(
                f"Sample {sample.timestamp} has no value for '{label}'"
            )
        values.append(parse_value(value, suffix))

    low, high = min(values), max(values)
    avg = min(max(_round_half_up(statistics.mean(values)), low), high)

    if len(samples) == 1:
        return AggregateStat(avg=suffix.render(avg))
    return AggregateStat(
        avg=suffix.render(avg),
        min=suffix.render(low),
        max=suffix.render(high),
    )


def aggregate(samples: list[Sample]) -> dict[str, AggregateStat]:
    """Compute avg/min/max for every metric of the first sample.

    Args:
        samples: Accepted samples, all carrying the first sample's labels.

    Returns:
        Mapping of label to statistics, in the first sample's label order.
        ``min``/``max`` are omitted when there is a single sample.

    Raises:
        AggregationError: If there are no samples, a sample lacks a metric,
            or a value cannot be parsed.
    """
    if not samples:
        raise AggregationError("No samples to aggregate")

    labels = samples[0].labels
    logger.debug(f"Aggregating {len(labels)} metrics over {len(samples)} samples")
    return {label: _aggregate_metric(label, samples) for label in labels}
