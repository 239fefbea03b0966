"""Tests for configuration loading and merging."""

from pathlib import Path

import pytest

from pagesampler.config.loader import ConfigError, build_config, load_yaml
from pagesampler.config.models import Strategy


@pytest.fixture
def tmp_yaml(tmp_path):
    """Create a temporary YAML file."""

    def _create(content: str, filename: str = "pagesampler.yaml") -> Path:
        path = tmp_path / filename
        path.write_text(content)
        return path

    return _create


class TestLoadYaml:
    def test_valid_yaml(self, tmp_yaml):
        path = tmp_yaml("url: https://example.com\ncount: 3")
        data = load_yaml(path)
        assert data == {"url": "https://example.com", "count": 3}

    def test_empty_yaml(self, tmp_yaml):
        assert load_yaml(tmp_yaml("")) == {}

    def test_file_not_found(self):
        with pytest.raises(ConfigError, match="not found"):
            load_yaml(Path("/nonexistent/pagesampler.yaml"))

    def test_invalid_yaml(self, tmp_yaml):
        path = tmp_yaml("invalid: [yaml: {broken")
        with pytest.raises(ConfigError, match="Invalid YAML"):
            load_yaml(path)

    def test_non_mapping(self, tmp_yaml):
        path = tmp_yaml("- just\n- a list\n")
        with pytest.raises(ConfigError, match="mapping"):
            load_yaml(path)


class TestBuildConfig:
    def test_overrides_only(self):
        config = build_config({"url": "https://example.com", "count": 4})
        assert config.url == "https://example.com"
        assert config.count == 4
        assert config.strategy is Strategy.MOBILE

    def test_none_overrides_ignored(self, tmp_yaml):
        path = tmp_yaml("url: https://from-file.test\nstrategy: desktop\ncount: 2")
        config = build_config({"url": None, "strategy": None, "count": None}, path)
        assert config.url == "https://from-file.test"
        assert config.strategy is Strategy.DESKTOP
        assert config.count == 2

    def test_overrides_win_over_file(self, tmp_yaml):
        path = tmp_yaml("url: https://from-file.test\ncount: 2\ninterval: 5")
        config = build_config({"url": "https://cli.test", "count": 7}, path)
        assert config.url == "https://cli.test"
        assert config.count == 7
        assert config.interval == 5

    def test_missing_url(self):
        with pytest.raises(ConfigError, match="url"):
            build_config({"url": None, "count": 3})

    def test_invalid_strategy(self):
        with pytest.raises(ConfigError, match="strategy"):
            build_config({"url": "https://example.com", "strategy": "tablet"})

    def test_invalid_file_value(self, tmp_yaml):
        path = tmp_yaml("url: https://example.com\ncount: 0")
        with pytest.raises(ConfigError, match="count"):
            build_config({}, path)
