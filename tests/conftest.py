"""Shared fixtures: synthetic PageSpeed Insights responses."""

import re

import pytest

DEFAULT_METRICS = {
    "First Contentful Paint": "1.2 s",
    "Largest Contentful Paint": "2.5 s",
    "Total Blocking Time": "120 ms",
    "Cumulative Layout Shift": "0.003",
    "Speed Index": "3,456 ms",
}


def _audit_id(title: str) -> str:
    return re.sub(r"[^a-z]+", "-", title.lower()).strip("-")


@pytest.fixture
def make_response():
    """Build a PageSpeed API payload.

    ``metrics`` maps audit title to display value; each becomes an audit
    referenced from the performance category in the ``metrics`` group.
    Unrelated audit refs are added so extraction has something to filter.
    """

    def _make(timestamp="2024-05-01T10:00:00.000Z", score=0.9, metrics=None):
        metrics = DEFAULT_METRICS if metrics is None else metrics
        audits = {
            "uses-long-cache-ttl": {
                "title": "Uses efficient cache policy",
                "displayValue": "3 resources found",
            },
            "final-screenshot": {"title": "Final Screenshot"},
        }
        refs = [
            {"id": "uses-long-cache-ttl", "weight": 0, "group": "diagnostics"},
            {"id": "final-screenshot", "weight": 0},
        ]
        for title, display_value in metrics.items():
            audit_id = _audit_id(title)
            audits[audit_id] = {"title": title, "displayValue": display_value}
            refs.append({"id": audit_id, "weight": 10, "group": "metrics"})

        return {
            "id": "https://example.com/",
            "analysisUTCTimestamp": timestamp,
            "lighthouseResult": {
                "audits": audits,
                "categories": {
                    "performance": {"id": "performance", "score": score, "auditRefs": refs}
                },
            },
        }

    return _make
