"""HTTP client for the PageSpeed Insights v5 API.

The client issues one ``runPagespeed`` request per call and returns the
decoded JSON body untouched. Interpreting the Lighthouse report is left
to :mod:`pagesampler.collectors.extractor`.
"""

import logging
from typing import Any, Protocol

import httpx

from pagesampler.config.models import SamplerConfig, Strategy

logger = logging.getLogger(__name__)


class ProviderError(Exception):
    """Raised when a measurement cannot be obtained or understood."""


class MeasurementProvider(Protocol):
    """Anything that can run one measurement for a URL."""

    def run(self, url: str, strategy: Strategy | str) -> dict[str, Any]: ...


class PageSpeedClient:
    """Synchronous PageSpeed Insights client.

    One ``httpx.Client`` is kept open for the lifetime of the instance so
    consecutive samples reuse the same connection. Use as a context
    manager, or call :meth:`close` when done.
    """

    def __init__(self, config: SamplerConfig, client: httpx.Client | None = None) -> None:
        self._config = config
        self._base_url = config.base_url.rstrip("/")
        self._http = client or httpx.Client(timeout=config.timeout)

    def __enter__(self) -> "PageSpeedClient":
        return self

    def __exit__(self, *exc_info) -> None:
        self.close()

    def close(self) -> None:
        self._http.close()

    def _params(self, url: str, strategy: Strategy | str) -> dict[str, str]:
        params = {"url": url, "strategy": Strategy(strategy).value}
        if self._config.api_key:
            params["key"] = self._config.api_key
        return params

    def run(self, url: str, strategy: Strategy | str) -> dict[str, Any]:
        """Run one PageSpeed analysis.

        Args:
            url: Page to analyse.
            strategy: ``mobile`` or ``desktop``.

        Returns:
            The decoded API response.

        Raises:
            ProviderError: On transport failure, an HTTP error status,
                an API error payload, or a body that is not a JSON object.
        """
        params = self._params(url, strategy)
        logger.debug(f"Requesting PageSpeed run for {url} ({params['strategy']})")

        try:
            resp = self._http.get(self._base_url, params=params)
        except httpx.HTTPError as e:
            raise ProviderError(f"Cannot reach PageSpeed API: {e}") from e

        try:
            data = resp.json()
        except ValueError as e:
            if resp.status_code >= 400:
                raise ProviderError(
                    f"PageSpeed API returned HTTP {resp.status_code}"
                ) from e
            raise ProviderError("PageSpeed API returned a non-JSON body") from e

        if not isinstance(data, dict):
            raise ProviderError("PageSpeed API returned an unexpected payload")

        error = data.get("error")
        if error or resp.status_code >= 400:
            message = ""
            if isinstance(error, dict):
                message = error.get("message", "")
            if len(message) > 200:
                message = message[:197] + "..."
            raise ProviderError(
                f"PageSpeed API error (HTTP {resp.status_code}): {message or resp.text[:200]}"
            )

        return data
