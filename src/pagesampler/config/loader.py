"""YAML configuration loading with Pydantic validation."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from .models import SamplerConfig


class ConfigError(Exception):
    """Raised when configuration loading or validation fails."""


def load_yaml(path: Path) -> dict:
    """Load a YAML file and return its contents as a dict.

    Args:
        path: Path to the YAML file.

    Returns:
        Parsed YAML contents.

    Raises:
        ConfigError: If the file cannot be read or parsed.
    """
    try:
        with open(path) as f:
            data = yaml.safe_load(f)
    except FileNotFoundError:
        raise ConfigError(f"Configuration file not found: {path}") from None
    except yaml.YAMLError as e:
        raise ConfigError(f"Invalid YAML in {path}: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Expected a mapping at the top level of {path}")
    return data


def _describe(error: ValidationError) -> str:
    parts = []
    for err in error.errors():
        loc = ".".join(str(p) for p in err["loc"]) or "config"
        parts.append(f"{loc}: {err['msg']}")
    return "; ".join(parts)


def build_config(
    overrides: dict[str, Any], path: Path | None = None
) -> SamplerConfig:
    """Merge an optional YAML file with command-line overrides.

    Overrides whose value is None are ignored so that file values and
    model defaults still apply.

    Raises:
        ConfigError: If the file is unreadable or the merged values are invalid.
    """
    data: dict[str, Any] = load_yaml(path) if path else {}
    data.update({k: v for k, v in overrides.items() if v is not None})
    try:
        return SamplerConfig(**data)
    except ValidationError as e:
        raise ConfigError(_describe(e)) from e
