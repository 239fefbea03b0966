"""Rich console output for a sampling run."""

from contextlib import contextmanager
from typing import Iterator

from rich.console import Console
from rich.progress import Progress, TextColumn
from rich.table import Table

from pagesampler.collectors.sampler import ProgressCallback
from pagesampler.models import AggregateStat

from .json_reporter import stats_to_json


class ConsoleReporter:
    """Prints collection progress and the final summary."""

    def __init__(
        self, console: Console | None = None, status_console: Console | None = None
    ) -> None:
        self.console = console if console is not None else Console()
        # progress and timing lines; kept off stdout when it carries JSON
        self.status_console = status_console if status_console is not None else self.console

    @contextmanager
    def collecting(self, total: int) -> Iterator[ProgressCallback]:
        """Show "Collecting results: K of N" while the body runs.

        Yields the callback to hand to :func:`pagesampler.collectors.collect`.
        The display is torn down even if collection fails.
        """
        with Progress(
            TextColumn("Collecting results: {task.completed:.0f} of {task.total:.0f}"),
            console=self.status_console,
        ) as progress:
            task = progress.add_task("collect", total=total)

            def _update(completed: int, _total: int) -> None:
                progress.update(task, completed=completed)

            yield _update

    def finish(self, elapsed_seconds: float, skipped: int) -> None:
        self.status_console.print(f"{elapsed_seconds:.1f}s | {skipped} results skipped")

    def summary(self, stats: dict[str, AggregateStat], fmt: str = "table") -> None:
        """Print aggregated statistics as a table or as JSON."""
        if fmt == "json":
            self.console.print_json(stats_to_json(stats))
            return

        with_range = any(stat.min is not None for stat in stats.values())

        table = Table(title="PageSpeed Results")
        table.add_column("Metric", style="cyan")
        table.add_column("Avg")
        if with_range:
            table.add_column("Min", style="green")
            table.add_column("Max", style="red")

        for label, stat in stats.items():
            row = [label, str(stat.avg)]
            if with_range:
                row += [str(stat.min), str(stat.max)]
            table.add_row(*row)

        self.console.print(table)
