# -*- coding: utf-8 -*-
import pytest

from model_compass.analyzer import Intent
from model_compass.context import Constraints
from model_compass.errors import RegistryError, ConfigError
from model_compass.registry import CandidateRegistry, parse_candidate, registry

from conftest import candidate_data


# -----------------------------------------------------------------------------
# Bundled catalog
# -----------------------------------------------------------------------------

def test_bundled_catalog_loads():
    assert len(registry) == 9
    assert registry.providers() == ["anthropic", "openai", "google"]
    assert "gpt-4o" in registry
    assert registry.get("nope") is None


def test_bundled_catalog_is_dense_and_bounded():
    for candidate in registry.all():
        assert set(candidate.task_strengths.intents) == set(Intent)
        for value in candidate.task_strengths.intents.values():
            assert 0.0 <= value <= 1.0
        assert candidate.capabilities.supports_web_search is False


def test_modality_score_respects_flags():
    opus = registry.get("claude-opus-4-5")
    assert opus.modality_score("vision") == pytest.approx(0.96)
    assert opus.modality_score("audio") == 0.0
    assert opus.modality_score("text") == 1.0


def test_by_modality_capability_orders_best_first():
    ranked = registry.by_modality_capability(registry.available(), "audio")
    assert [c.id for c in ranked][:2] == ["gemini-2.5-pro", "gpt-4o"]
    assert all(c.capabilities.supports_audio for c in ranked)


# -----------------------------------------------------------------------------
# Constraints
# -----------------------------------------------------------------------------

def test_filter_by_constraints(small_registry):
    pool = small_registry.available()
    assert [c.id for c in pool] == ["alpha-large", "beta-fast", "gamma-vision"]

    cheap = small_registry.filter_by_constraints(pool, Constraints(max_cost_per_1k_tokens=0.005))
    assert "alpha-large" not in [c.id for c in cheap]

    fast = small_registry.filter_by_constraints(pool, Constraints(max_latency_ms=500))
    assert [c.id for c in fast] == ["beta-fast"]

    vision = small_registry.filter_by_constraints(pool, Constraints(require_vision=True))
    assert [c.id for c in vision] == ["gamma-vision"]

    allowed = small_registry.filter_by_constraints(
        pool, Constraints(allowed_models=["alpha-large", "beta-fast"], excluded_models=["beta-fast"]))
    assert [c.id for c in allowed] == ["alpha-large"]

    assert small_registry.filter_by_constraints(pool, None) == pool


# -----------------------------------------------------------------------------
# Validation
# -----------------------------------------------------------------------------

def test_missing_strength_entry_raises():
    data = candidate_data()
    del data["task_strengths"]["intents"]["coding"]
    with pytest.raises(RegistryError, match="coding"):
        parse_candidate(data)


def test_unknown_strength_entry_raises():
    data = candidate_data()
    data["task_strengths"]["domains"]["astrology"] = 0.5
    with pytest.raises(RegistryError):
        parse_candidate(data)


def test_out_of_range_ratio_raises():
    data = candidate_data()
    data["human_factors"]["empathy"] = 1.5
    with pytest.raises(RegistryError):
        parse_candidate(data)


def test_missing_sections_raise():
    data = candidate_data()
    del data["pricing"]
    with pytest.raises(RegistryError):
        parse_candidate(data)

    data = candidate_data()
    del data["provider"]
    with pytest.raises(RegistryError, match="provider"):
        parse_candidate(data)


def test_registry_error_is_config_error():
    with pytest.raises(ConfigError):
        CandidateRegistry.from_dict({"candidates": []})


def test_duplicate_ids_rejected():
    with pytest.raises(RegistryError, match="duplicate"):
        CandidateRegistry.from_dict({"candidates": [candidate_data("x"), candidate_data("x")]})


def test_from_file(tmp_path):
    import yaml

    path = tmp_path / "models.yaml"
    path.write_text(yaml.safe_dump({"candidates": [candidate_data("one"), candidate_data("two", "other")]}))
    reg = CandidateRegistry.from_file(path)
    assert len(reg) == 2
    assert reg.providers() == ["acme", "other"]

    with pytest.raises(RegistryError):
        CandidateRegistry.from_file(tmp_path / "missing.yaml")
