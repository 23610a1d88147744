# -*- coding: utf-8 -*-
import pytest

from model_compass.analyzer import TaskAnalyzer
from model_compass.factors import COST_EFFICIENCY, FactorScore, SPECIALIZATION, SPEED, TASK_FITNESS
from model_compass.reasoning import (
    Impact,
    backup_summary,
    classify_impact,
    generate_fallback_reasoning,
    generate_fast_path_reasoning,
    generate_reasoning,
    primary_summary,
)
from model_compass.scorer import CandidateScore

from conftest import make_candidate


@pytest.fixture
def coding_analysis():
    return TaskAnalyzer().analyze("Write a Python function to sort an array")


def scored(factors, composite=0.8):
    return CandidateScore(candidate=make_candidate("test-model"), factors=factors, composite_score=composite)


@pytest.mark.parametrize("score,impact", [
    (0.95, Impact.POSITIVE),
    (0.7, Impact.POSITIVE),
    (0.55, Impact.NEUTRAL),
    (0.4, Impact.NEGATIVE),
    (0.1, Impact.NEGATIVE),
])
def test_classify_impact(score, impact):
    assert classify_impact(score) == impact


def test_primary_summary_leads_with_strongest_factor(coding_analysis):
    score = scored([
        FactorScore(TASK_FITNESS, 0.92, 0.45, 0.414),
        FactorScore(SPEED, 0.85, 0.07, 0.0595),
        FactorScore(COST_EFFICIENCY, 0.2, 0.10, 0.02),
    ])
    summary = primary_summary(score, coding_analysis)
    assert summary == ("Test Model excels at coding tasks and responds quickly, "
                       "though it is on the pricier side.")


def test_primary_summary_caveat_skips_other_weak_factors(coding_analysis):
    score = scored([
        FactorScore(TASK_FITNESS, 0.92, 0.45, 0.414),
        FactorScore(SPECIALIZATION, 0.0, 0.15, 0.0),
        FactorScore(COST_EFFICIENCY, 0.5, 0.10, 0.05),
        FactorScore(SPEED, 0.3, 0.07, 0.021),
    ])
    summary = primary_summary(score, coding_analysis)
    assert summary == "Test Model excels at coding tasks, though responses may take a moment."


def test_primary_summary_without_positives(coding_analysis):
    score = scored([FactorScore(TASK_FITNESS, 0.5, 0.45, 0.225)])
    assert primary_summary(score, coding_analysis) == "Test Model is the best available option for this request."


def test_backup_summary(coding_analysis):
    score = scored([FactorScore(COST_EFFICIENCY, 0.95, 0.1, 0.095)], composite=0.7)
    assert backup_summary(score, coding_analysis, 1) == (
        "Test Model is a solid backup option, more budget-friendly while still capable.")
    assert backup_summary(scored([], composite=0.6), coding_analysis, 2) == "Test Model could also work for this request."


def test_generate_reasoning_lists_every_factor(coding_analysis):
    factors = [FactorScore(TASK_FITNESS, 0.9, 0.45, 0.405), FactorScore(SPEED, 0.3, 0.07, 0.021)]
    reasoning = generate_reasoning(scored(factors), coding_analysis, is_primary=True)
    assert [f.name for f in reasoning.factors] == [TASK_FITNESS, SPEED]
    assert [f.impact for f in reasoning.factors] == [Impact.POSITIVE, Impact.NEGATIVE]
    assert reasoning.to_dict()["factors"][1]["impact"] == "negative"


def test_fast_path_and_fallback_reasoning():
    score = CandidateScore(candidate=make_candidate("eye"), composite_score=0.96)
    reasoning = generate_fast_path_reasoning(score, "vision")
    assert "image processing" in reasoning.summary
    assert "96%" in reasoning.summary

    fallback = generate_fallback_reasoning(make_candidate("plain"))
    assert "fallback" in fallback.summary
    assert fallback.factors[0].impact == Impact.NEUTRAL
