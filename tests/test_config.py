# -*- coding: utf-8 -*-
import pytest

from model_compass.config import (
    CONFIG_DIR,
    DEFAULT_WEIGHTS,
    ENV_CONFIG_VAR,
    HUMAN_CONTEXT_WEIGHTS,
    CompassConfig,
    deep_merge,
    load_yaml,
    reload_config,
    weights_for,
)
from model_compass.errors import ConfigError


@pytest.fixture
def restore_config(monkeypatch):
    yield monkeypatch
    monkeypatch.delenv(ENV_CONFIG_VAR, raising=False)
    reload_config()


def test_weight_profiles_sum_to_one():
    assert DEFAULT_WEIGHTS.total() == pytest.approx(1.0)
    assert HUMAN_CONTEXT_WEIGHTS.total() == pytest.approx(1.0)
    assert DEFAULT_WEIGHTS.human_context_fit == 0.0


def test_weights_for():
    assert weights_for(True) is HUMAN_CONTEXT_WEIGHTS
    assert weights_for(False) is DEFAULT_WEIGHTS


def test_defaults():
    config = CompassConfig()
    assert config is CompassConfig()
    assert config.latency_budget_ms == 50
    assert config.decision_id_prefix == "dec_"
    assert config.combined_modality_weight == pytest.approx(0.6)
    assert config.diversity_margin == pytest.approx(0.06)
    assert config.registry_file == CONFIG_DIR / "models.yaml"
    assert config.get("engine.missing", "fallback") == "fallback"


def test_deep_merge_keeps_untouched_keys():
    base = {"engine": {"a": 1, "b": 2}, "x": 1}
    merged = deep_merge(base, {"engine": {"b": 3}})
    assert merged == {"engine": {"a": 1, "b": 3}, "x": 1}
    assert base["engine"]["b"] == 2


def test_user_override_merges_over_defaults(tmp_path, restore_config):
    override = tmp_path / "compass.yaml"
    override.write_text("engine:\n  latency_budget_ms: 80\nlogging:\n  level: debug\n")
    restore_config.setenv(ENV_CONFIG_VAR, str(override))

    config = reload_config()
    assert config.latency_budget_ms == 80
    assert config.decision_id_prefix == "dec_"
    assert config.log_level == "DEBUG"


def test_missing_override_file_raises(tmp_path, restore_config):
    restore_config.setenv(ENV_CONFIG_VAR, str(tmp_path / "nope.yaml"))
    with pytest.raises(ConfigError):
        reload_config()


def test_invalid_override_value_raises(tmp_path, restore_config):
    override = tmp_path / "compass.yaml"
    override.write_text("engine:\n  combined_modality_weight: 1.5\n")
    restore_config.setenv(ENV_CONFIG_VAR, str(override))
    with pytest.raises(ConfigError):
        reload_config()


def test_load_yaml(tmp_path):
    assert load_yaml(tmp_path / "absent.yaml") == {}

    bad = tmp_path / "bad.yaml"
    bad.write_text("key: [unclosed\n")
    with pytest.raises(ConfigError):
        load_yaml(bad)

    listing = tmp_path / "list.yaml"
    listing.write_text("- a\n- b\n")
    with pytest.raises(ConfigError):
        load_yaml(listing)
