"""pagesampler CLI - Main entry point."""

import logging
from pathlib import Path
from typing import NoReturn

import click
from rich.console import Console
from rich.markup import escape

from pagesampler import __version__

console = Console()
err_console = Console(stderr=True)
logger = logging.getLogger(__name__)

LOG_FORMAT = "%(asctime)s [%(name)s] %(levelname)s: %(message)s"


def _setup_logging(verbose: bool) -> None:
    """Send package logs to stderr, replacing any handler from a previous run."""
    pkg_logger = logging.getLogger("pagesampler")
    for handler in list(pkg_logger.handlers):
        pkg_logger.removeHandler(handler)

    handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT))
    pkg_logger.addHandler(handler)
    pkg_logger.setLevel(logging.DEBUG if verbose else logging.WARNING)


def _fail(kind: str, error: Exception) -> NoReturn:
    err_console.print(f"[red]{kind}:[/red] {escape(str(error))}")
    raise SystemExit(1) from error


@click.command()
@click.version_option(version=__version__, prog_name="pagesampler")
@click.option("--url", "-u", default=None, help="URL to measure (required)")
@click.option(
    "--count",
    "-c",
    type=int,
    default=None,
    help="Number of distinct results to collect [default: 1]",
)
@click.option(
    "--strategy",
    "-s",
    default=None,
    help="Emulated client: mobile or desktop [default: mobile]",
)
@click.option(
    "--interval",
    type=float,
    default=None,
    help="Seconds to wait between accepted results [default: 1]",
)
@click.option(
    "--config",
    "config_path",
    type=click.Path(exists=True, dir_okay=False, path_type=Path),
    help="YAML file with default settings",
)
@click.option(
    "--format",
    "fmt",
    type=click.Choice(["table", "json"]),
    default="table",
    help="Summary output format",
)
@click.option(
    "--api-key",
    envvar="PAGESPEED_API_KEY",
    default=None,
    help="PageSpeed Insights API key (or PAGESPEED_API_KEY)",
)
@click.option("--verbose", "-v", is_flag=True, help="Enable debug logging")
def main(url, count, strategy, interval, config_path, fmt, api_key, verbose):
    """Sample PageSpeed Insights for a URL and report min/max/avg per metric.

    Example: pagesampler -u https://example.com -c 5 -s desktop
    """
    from pagesampler.aggregation import AggregationError, aggregate
    from pagesampler.collectors import collect
    from pagesampler.config import ConfigError, build_config
    from pagesampler.provider import PageSpeedClient, ProviderError
    from pagesampler.reporters import ConsoleReporter

    _setup_logging(verbose)

    try:
        config = build_config(
            {
                "url": url,
                "count": count,
                "strategy": strategy,
                "interval": interval,
                "api_key": api_key,
            },
            config_path,
        )
    except ConfigError as e:
        _fail("Configuration error", e)

    logger.info(
        f"Collecting {config.count} result(s) for {config.url} "
        f"({config.strategy.value})"
    )
    reporter = ConsoleReporter(
        console, status_console=err_console if fmt == "json" else console
    )

    with PageSpeedClient(config) as client:
        try:
            with reporter.collecting(config.count) as on_progress:
                result = collect(
                    client,
                    config.url,
                    config.strategy,
                    config.count,
                    interval=config.interval,
                    on_progress=on_progress,
                )
        except ProviderError as e:
            _fail("Provider error", e)

    reporter.finish(result.elapsed_seconds, result.skipped)

    try:
        stats = aggregate(result.samples)
    except AggregationError as e:
        _fail("Aggregation error", e)

    reporter.summary(stats, fmt)


if __name__ == "__main__":
    main()
