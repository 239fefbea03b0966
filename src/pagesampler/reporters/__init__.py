"""Console and JSON output."""

from .console import ConsoleReporter
from .json_reporter import stats_to_dict

__all__ = ["ConsoleReporter", "stats_to_dict"]
