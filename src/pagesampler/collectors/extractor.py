"""Turn a PageSpeed response into a flat, ordered Sample."""

import math
import re
from typing import Any

from pagesampler.models import MetricReading, Sample
from pagesampler.provider.client import ProviderError

PERFORMANCE_LABEL = "Performance"
METRICS_GROUP = "metrics"

_WHITESPACE = re.compile(r"\s")


def extract_timestamp(data: dict[str, Any]) -> str:
    """Return the analysis timestamp used to recognise repeated runs."""
    try:
        timestamp = data["analysisUTCTimestamp"]
    except (KeyError, TypeError) as e:
        raise ProviderError("Response has no analysisUTCTimestamp") from e
    if not isinstance(timestamp, str) or not timestamp:
        raise ProviderError("Response has an empty analysisUTCTimestamp")
    return timestamp


def _metric_readings(lighthouse: dict[str, Any]) -> list[MetricReading]:
    audits = lighthouse["audits"]
    refs = lighthouse["categories"]["performance"]["auditRefs"]

    readings = []
    for ref in refs:
        if ref.get("group") != METRICS_GROUP:
            continue
        audit = audits[ref["id"]]
        display_value = audit.get("displayValue")
        if display_value is None:
            raise ProviderError(f"Audit '{ref['id']}' has no displayValue")
        readings.append(
            MetricReading(
                label=audit["title"],
                value=_WHITESPACE.sub("", display_value),
            )
        )
    return readings


def extract_sample(data: dict[str, Any]) -> Sample:
    """Build a Sample from one PageSpeed response.

    The overall score (0-1) becomes a 0-100 "Performance" reading in first
    position, followed by every audit of the performance category tagged
    with the ``metrics`` group, in report order.

    Raises:
        ProviderError: If the Lighthouse report is missing or incomplete.
    """
    timestamp = extract_timestamp(data)
    try:
        lighthouse = data["lighthouseResult"]
        score = lighthouse["categories"]["performance"]["score"]
        readings = _metric_readings(lighthouse)
    except (KeyError, TypeError, AttributeError) as e:
        raise ProviderError(f"Malformed Lighthouse report: missing {e}") from e

    if not isinstance(score, (int, float)):
        raise ProviderError("Lighthouse report has no performance score")

    performance = MetricReading(label=PERFORMANCE_LABEL, value=math.ceil(score * 100))
    return Sample(timestamp=timestamp, readings=[performance, *readings])
