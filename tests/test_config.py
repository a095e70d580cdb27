from pathlib import Path

import pytest
from pydantic import ValidationError

from railnet.config import NetworkConfig, SearchConfig, get_config, reset_config


def test_defaults():
    config = get_config()

    assert config.search.default_max_results == 3
    assert config.search.max_expansions == 1_000_000
    assert config.network.default_file == "notional_ra.json"
    assert config.network.default_path.name == "notional_ra.json"
    assert config.observability.level == "WARNING"


def test_config_is_cached():
    assert get_config() is get_config()


def test_environment_overrides(monkeypatch, tmp_path):
    monkeypatch.setenv("RAILNET_SEARCH_MAX_EXPANSIONS", "50")
    monkeypatch.setenv("RAILNET_NETWORK_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("RAILNET_LOG_LEVEL", "DEBUG")
    reset_config()

    config = get_config()

    assert config.search.max_expansions == 50
    assert config.network.data_dir == tmp_path
    assert config.observability.level == "DEBUG"


def test_search_limits_must_be_positive():
    with pytest.raises(ValidationError):
        SearchConfig(max_expansions=0)
    with pytest.raises(ValidationError):
        SearchConfig(default_max_results=0)


def test_resolve_keeps_absolute_paths(tmp_path):
    config = NetworkConfig(data_dir=Path("/srv/networks"))
    absolute = tmp_path / "custom.json"

    assert config.resolve(str(absolute)) == absolute
    assert config.resolve("uk.json") == Path("/srv/networks/uk.json")
