# -*- coding: utf-8 -*-
from model_compass.analyzer import Modality
from model_compass.context import (
    Constraints,
    ConversationContext,
    EnergyLevel,
    HumanContext,
    Mood,
    ResponseStyle,
    RouteRequest,
)


def test_human_context_from_dict_parses_enums():
    ctx = HumanContext.from_dict({
        "emotional_state": {"mood": "Stressed", "energy_level": "low"},
        "temporal_context": {"local_time": "23:15", "is_working_hours": False},
        "user_preferences": {"preferred_response_style": "concise", "avoid_models": "gpt-4o"},
    })
    assert ctx.emotional_state.mood == Mood.STRESSED
    assert ctx.emotional_state.energy_level == EnergyLevel.LOW
    assert ctx.temporal_context.is_working_hours is False
    assert ctx.user_preferences.preferred_response_style == ResponseStyle.CONCISE
    assert ctx.user_preferences.avoid_models == ["gpt-4o"]
    assert ctx.has_signals()


def test_invalid_enum_values_are_dropped():
    ctx = HumanContext.from_dict({"emotional_state": {"mood": "ecstatic-ish"}})
    assert ctx.emotional_state.mood is None
    assert not ctx.has_signals()


def test_malformed_sub_contexts_are_absent():
    ctx = HumanContext.from_dict({
        "emotional_state": "tired",
        "temporal_context": {"local_time": 2330, "timezone": 1},
        "environmental_context": ["rainy"],
        "user_preferences": {"avoid_models": 42},
    })
    assert ctx.emotional_state is None
    assert ctx.environmental_context is None
    assert ctx.temporal_context.local_time is None
    assert ctx.temporal_context.timezone is None
    assert ctx.user_preferences.avoid_models == []
    assert not ctx.has_signals()
    assert HumanContext.from_dict("tired") is None


def test_route_request_with_malformed_human_context():
    request = RouteRequest.from_dict({
        "prompt": "Help me plan tomorrow",
        "human_context": {
            "emotional_state": "tired",
            "temporal_context": {"local_time": 2330},
        },
    })
    assert request.human_context.emotional_state is None
    assert request.human_context.temporal_context.local_time is None


def test_empty_human_context():
    assert HumanContext.from_dict(None) is None
    assert HumanContext.from_dict({}) is None
    assert not HumanContext().has_signals()


def test_human_context_to_dict_is_compact():
    ctx = HumanContext.from_dict({"emotional_state": {"mood": "happy"}})
    assert ctx.to_dict() == {"emotional_state": {"mood": "happy"}}


def test_constraints():
    assert Constraints().is_empty()
    constraints = Constraints.from_dict({"max_cost_per_1k_tokens": "0.01", "require_vision": True})
    assert constraints.max_cost_per_1k_tokens == 0.01
    assert constraints.require_vision
    assert not constraints.is_empty()
    data = constraints.to_dict()
    assert data["max_cost_per_1k_tokens"] == 0.01
    assert data["require_vision"] is True
    assert "allowed_models" not in data


def test_route_request_from_dict():
    request = RouteRequest.from_dict({
        "prompt": "Describe this",
        "modality": "textimage",
        "conversation_context": {"previous_model_used": "gpt-4o", "message_count": "3"},
        "available_providers": ["openai"],
    })
    assert request.modality == Modality.TEXT_IMAGE
    assert request.conversation_context == ConversationContext(previous_model_used="gpt-4o", message_count=3)
    assert request.available_providers == ["openai"]
    assert request.human_context is None
    assert request.constraints is None


def test_route_request_parses_string_modality():
    assert RouteRequest(prompt="", modality="voice").modality == Modality.VOICE
    assert RouteRequest(prompt="hi").modality == Modality.TEXT
