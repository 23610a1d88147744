# -*- coding: utf-8 -*-
import pytest

from model_compass.errors import NoCandidatesError
from model_compass.selector import calculate_confidence, select_fallback, select_models

from conftest import make_candidate, make_score


def test_empty_selection_raises():
    with pytest.raises(NoCandidatesError):
        select_models([])


def test_single_candidate_confidence():
    result = select_models([make_score("a", "acme", 0.7)])
    assert result.confidence == 0.95
    assert result.backups == []


def test_wide_margin_is_confident():
    ranked = [make_score("a", "acme", 0.90), make_score("b", "beta", 0.65)]
    assert calculate_confidence(ranked) > 0.9


def test_narrow_margin_is_hesitant():
    ranked = [make_score("a", "acme", 0.80), make_score("b", "beta", 0.79)]
    assert calculate_confidence(ranked) < 0.7


def test_tie_gives_base_confidence():
    ranked = [make_score("a", "acme", 0.8), make_score("b", "beta", 0.8)]
    assert calculate_confidence(ranked) == pytest.approx(0.6)


def test_at_most_two_backups_in_rank_order():
    ranked = [make_score(f"m{i}", "acme", 0.9 - i * 0.05) for i in range(5)]
    result = select_models(ranked)
    assert result.primary.candidate.id == "m0"
    assert [b.candidate.id for b in result.backups] == ["m1", "m2"]
    assert 0.5 <= result.confidence <= 0.98


def test_fallback_picks_most_general_candidate():
    weak = make_candidate("weak", strength=0.5)
    strong = make_candidate("strong", strength=0.9)
    also_strong = make_candidate("also-strong", strength=0.9)
    assert select_fallback([weak, strong, also_strong]).id == "strong"
    assert select_fallback([]) is None
