# -*- coding: utf-8 -*-
import pytest

from model_compass.analyzer import Complexity, Domain, Intent, Modality, QueryAnalysis, Tone
from model_compass.context import (
    ConversationContext,
    EmotionalState,
    EnergyLevel,
    HumanContext,
    Mood,
    ResponseLength,
    ResponseStyle,
    TemporalContext,
    UserPreferences,
)
from model_compass.factors import (
    conversation_coherence,
    cost_efficiency,
    energy_fit,
    human_context_fit,
    modality_fitness,
    mood_fit,
    specialization,
    speed,
    style_fit,
    task_fitness,
    time_fit,
    user_preference,
)

from conftest import make_candidate


def analysis(intent=Intent.CODING, domain=Domain.TECHNOLOGY, complexity=Complexity.STANDARD,
             modality=Modality.TEXT):
    return QueryAnalysis(intent=intent, domain=domain, complexity=complexity, tone=Tone.CASUAL,
                         modality=modality)


@pytest.fixture
def cheap():
    return make_candidate("cheap", "acme",
                          pricing={"input_per_1k": 0.0001, "output_per_1k": 0.0001},
                          performance={"avg_latency_ms": 200})


@pytest.fixture
def pricey():
    return make_candidate("pricey", "other",
                          pricing={"input_per_1k": 0.01, "output_per_1k": 0.03},
                          performance={"avg_latency_ms": 3000})


def test_task_fitness_blends_strengths():
    factor = task_fitness(make_candidate(strength=0.8), analysis())
    assert factor.score == pytest.approx(0.8)
    assert factor.detail.startswith("Strong fit for coding")


def test_specialization_bonuses():
    coder = make_candidate(specializations=["coding"])
    assert specialization(coder, analysis()).score == pytest.approx(0.85)
    assert specialization(coder, analysis(Intent.CREATIVE, Domain.CREATIVE_ARTS)).score == 0.0
    fast = make_candidate(specializations=["fast_tasks", "budget"])
    quick_chat = analysis(Intent.CONVERSATION, Domain.GENERAL, Complexity.QUICK)
    assert specialization(fast, quick_chat).score == pytest.approx(0.75)


def test_modality_fitness():
    blind = make_candidate()
    seeing = make_candidate(capabilities={"supports_vision": True, "vision_score": 0.93})
    assert modality_fitness(blind, analysis()).score == 1.0
    assert modality_fitness(blind, analysis(modality=Modality.IMAGE)).score == 0.0
    assert modality_fitness(seeing, analysis(modality=Modality.TEXT_IMAGE)).score == pytest.approx(0.93)


def test_cost_and_speed_are_relative(cheap, pricey):
    pool = [cheap, pricey]
    assert cost_efficiency(cheap, pool).score == 1.0
    assert cost_efficiency(pricey, pool).score == 0.0
    assert speed(cheap, pool).score == 1.0
    assert speed(pricey, pool).score == 0.0
    assert cost_efficiency(cheap, [cheap]).score == 0.5
    assert speed(pricey, pool).detail.startswith("Slower responses")


def test_conversation_coherence(cheap, pricey):
    pool = [cheap, pricey]
    assert conversation_coherence(cheap, None, pool).score == 0.5
    assert conversation_coherence(cheap, ConversationContext(previous_model_used="cheap"), pool).score == 1.0
    assert conversation_coherence(pricey, ConversationContext(previous_model_used="cheap"), pool).score == 0.4

    sibling = make_candidate("cheap-v2", "acme")
    assert conversation_coherence(sibling, ConversationContext(previous_model_used="cheap"), pool).score == 0.7


def test_coherence_with_unknown_previous_model(cheap):
    ctx = ConversationContext(previous_model_used="acme-legacy-7")
    assert conversation_coherence(cheap, ctx, [cheap]).score == 0.7


def test_user_preference(cheap):
    prefer = HumanContext(user_preferences=UserPreferences(preferred_models=["cheap"]))
    avoid = HumanContext(user_preferences=UserPreferences(avoid_models=["cheap"]))
    assert user_preference(cheap, None).score == 0.5
    assert user_preference(cheap, prefer).score == pytest.approx(0.9)
    assert user_preference(cheap, avoid).score == pytest.approx(0.1)


def test_mood_and_energy_fit():
    candidate = make_candidate()
    assert mood_fit(candidate, None) is None
    assert mood_fit(candidate, Mood.STRESSED)[0] == pytest.approx(0.8)
    assert mood_fit(candidate, Mood.CALM)[0] == 0.8
    assert energy_fit(candidate, EnergyLevel.LOW)[0] == pytest.approx(0.7)
    assert energy_fit(candidate, EnergyLevel.HIGH)[0] == pytest.approx(0.75)


def test_time_fit():
    candidate = make_candidate()
    assert time_fit(candidate, None) is None
    assert time_fit(candidate, TemporalContext(local_time="23:30"))[0] == pytest.approx(0.7)
    assert time_fit(candidate, TemporalContext(local_time="10:00"))[0] == pytest.approx(0.9)
    assert time_fit(candidate, TemporalContext(local_time="19:00"))[0] == 0.8
    # explicit flag wins over the clock
    assert time_fit(candidate, TemporalContext(local_time="10:00", is_working_hours=False))[0] == pytest.approx(0.7)


def test_style_fit():
    candidate = make_candidate()
    assert style_fit(candidate, UserPreferences()) is None
    concise = UserPreferences(preferred_response_style=ResponseStyle.CONCISE,
                              preferred_response_length=ResponseLength.SHORT)
    assert style_fit(candidate, concise)[0] == pytest.approx(0.7)
    medium_only = UserPreferences(preferred_response_length=ResponseLength.MEDIUM)
    assert style_fit(candidate, medium_only)[0] == pytest.approx(0.8)


def test_human_context_fit_averages_subfits():
    candidate = make_candidate()
    assert human_context_fit(candidate, None) is None
    assert human_context_fit(candidate, HumanContext()) is None

    ctx = HumanContext(
        emotional_state=EmotionalState(mood=Mood.STRESSED, energy_level=EnergyLevel.LOW),
        temporal_context=TemporalContext(local_time="23:00"),
    )
    factor = human_context_fit(candidate, ctx)
    assert factor.score == pytest.approx((0.8 + 0.7 + 0.7) / 3)
    assert 0.0 <= factor.score <= 1.0
