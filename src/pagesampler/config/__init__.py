"""Run configuration for pagesampler."""

from .loader import ConfigError, build_config, load_yaml
from .models import SamplerConfig, Strategy

__all__ = [
    "ConfigError",
    "SamplerConfig",
    "Strategy",
    "build_config",
    "load_yaml",
]
