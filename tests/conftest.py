# -*- coding: utf-8 -*-
"""Shared fixtures: synthetic candidates and small registries."""

import copy

import pytest

from model_compass.analyzer import Intent, Domain, Complexity
from model_compass.registry import CandidateRegistry, parse_candidate
from model_compass.scorer import CandidateScore


def candidate_data(candidate_id="test-model", provider="acme", strength=0.8, **overrides):
    """Raw catalog entry with a flat strength table; overrides replace top-level keys."""
    data = {
        "id": candidate_id,
        "name": candidate_id.replace("-", " ").title(),
        "provider": provider,
        "description": "synthetic candidate",
        "pricing": {"input_per_1k": 0.001, "output_per_1k": 0.002},
        "capabilities": {
            "max_input_tokens": 100000,
            "max_output_tokens": 8000,
            "supports_streaming": True,
            "supports_vision": False,
            "supports_audio": False,
            "vision_score": 0.0,
            "audio_score": 0.0,
        },
        "performance": {"avg_latency_ms": 800, "reliability_percent": 99.5},
        "task_strengths": {
            "intents": {i.value: strength for i in Intent},
            "domains": {d.value: strength for d in Domain},
            "complexity": {c.value: strength for c in Complexity},
        },
        "human_factors": {
            "empathy": 0.8,
            "playfulness": 0.7,
            "professionalism": 0.8,
            "conciseness": 0.7,
            "verbosity": 0.7,
            "conversational_tone": 0.8,
            "formal_tone": 0.8,
            "late_night_suitability": 0.7,
            "work_hours_suitability": 0.9,
        },
        "specializations": [],
        "available": True,
    }
    for key, value in overrides.items():
        data[key] = copy.deepcopy(value)
    return data


def make_candidate(candidate_id="test-model", provider="acme", strength=0.8, **overrides):
    return parse_candidate(candidate_data(candidate_id, provider, strength, **overrides))


def make_score(candidate_id, provider, composite):
    return CandidateScore(candidate=make_candidate(candidate_id, provider), composite_score=composite)


@pytest.fixture
def candidate_factory():
    return make_candidate


@pytest.fixture
def score_factory():
    return make_score


@pytest.fixture
def small_registry():
    """Three providers, one vision-capable candidate, one unavailable."""
    return CandidateRegistry([
        make_candidate("alpha-large", "alpha", 0.9,
                       pricing={"input_per_1k": 0.01, "output_per_1k": 0.03},
                       performance={"avg_latency_ms": 2500}),
        make_candidate("beta-fast", "beta", 0.75,
                       pricing={"input_per_1k": 0.0001, "output_per_1k": 0.0004},
                       performance={"avg_latency_ms": 300}),
        make_candidate("gamma-vision", "gamma", 0.8,
                       capabilities={"supports_vision": True, "vision_score": 0.9}),
        make_candidate("delta-offline", "delta", 0.99, available=False),
    ])
