"""Sequential sample collection with timestamp deduplication."""

import logging
import time
from typing import Callable

from pagesampler.config.models import Strategy
from pagesampler.models import CollectionResult, Sample
from pagesampler.provider.client import MeasurementProvider

from .extractor import extract_sample, extract_timestamp

logger = logging.getLogger(__name__)

ProgressCallback = Callable[[int, int], None]


def collect(
    provider: MeasurementProvider,
    url: str,
    strategy: Strategy | str,
    target_count: int,
    *,
    interval: float = 1.0,
    on_progress: ProgressCallback | None = None,
) -> CollectionResult:
    """Collect ``target_count`` distinct measurements of ``url``.

    The provider may hand back a cached analysis; responses whose
    timestamp was already seen are skipped without counting toward the
    target and without waiting. After each accepted sample, except the
    last, the loop sleeps ``interval`` seconds.

    Provider errors propagate unchanged and abort the run.

    Returns:
        CollectionResult of accepted samples, elapsed seconds and the
        number of skipped duplicates.
    """
    samples: list[Sample] = []
    seen: set[str] = set()
    skipped = 0
    start = time.perf_counter()

    while len(samples) < target_count:
        data = provider.run(url, strategy)
        timestamp = extract_timestamp(data)

        if timestamp in seen:
            skipped += 1
            logger.debug(f"Skipping repeated analysis {timestamp}")
            continue

        seen.add(timestamp)
        samples.append(extract_sample(data))
        logger.debug(f"Accepted analysis {timestamp} ({len(samples)}/{target_count})")

        if on_progress is not None:
            on_progress(len(samples), target_count)

        if len(samples) < target_count:
            time.sleep(interval)

    elapsed = time.perf_counter() - start
    return CollectionResult(samples=samples, elapsed_seconds=elapsed, skipped=skipped)
