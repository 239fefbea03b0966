"""Pydantic models for pagesampler configuration."""

from enum import Enum

from pydantic import BaseModel, Field, field_validator

DEFAULT_BASE_URL = "https://www.googleapis.com/pagespeedonline/v5/runPagespeed"


class Strategy(str, Enum):
    """Client profile the provider simulates."""

    MOBILE = "mobile"
    DESKTOP = "desktop"


class SamplerConfig(BaseModel):
    """Settings for one sampling run.

    Attributes:
        url: Page to measure.
        count: Number of distinct measurement runs to collect.
        strategy: Mobile or desktop emulation.
        interval: Seconds to wait between accepted samples.
        timeout: Per-request timeout in seconds. None waits indefinitely.
        api_key: Optional key forwarded verbatim to the API.
        base_url: PageSpeed Insights endpoint.
    """

    url: str
    count: int = Field(default=1, ge=1)
    strategy: Strategy = Strategy.MOBILE
    interval: float = Field(default=1.0, ge=0.0)
    timeout: float | None = Field(default=None, gt=0.0)
    api_key: str | None = None
    base_url: str = DEFAULT_BASE_URL

    @field_validator("url")
    @classmethod
    def _url_not_blank(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("a URL is required (--url or -u)")
        return value
