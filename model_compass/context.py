#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
REQUEST CONTEXT - MODEL-COMPASS 1.0
===================================

Typed inputs of a routing request.

- HumanContext: mood, schedule, environment and style preferences
- Constraints: hard filters on the candidate pool
- ConversationContext: what happened earlier in the conversation
- RouteRequest: the prompt plus all of the above

Each type has a from_dict() for collaborators that receive plain JSON
(the CLI, an HTTP layer). Invalid enum values inside a human context are
dropped rather than rejected: a wrong mood must never fail a route.
"""

from dataclasses import dataclass, field, asdict
from enum import Enum
from typing import Any, Dict, List, Optional, Type, TypeVar, Union
import logging

from .analyzer import Modality, parse_modality

logger = logging.getLogger(__name__)

E = TypeVar("E", bound=Enum)

# =============================================================================
# HUMAN CONTEXT ENUMS
# =============================================================================

class Mood(Enum):
    HAPPY = "happy"
    NEUTRAL = "neutral"
    STRESSED = "stressed"
    FRUSTRATED = "frustrated"
    EXCITED = "excited"
    TIRED = "tired"
    ANXIOUS = "anxious"
    CALM = "calm"


class EnergyLevel(Enum):
    LOW = "low"
    MODERATE = "moderate"
    HIGH = "high"


class Weather(Enum):
    SUNNY = "sunny"
    CLOUDY = "cloudy"
    RAINY = "rainy"
    SNOWY = "snowy"
    STORMY = "stormy"
    HOT = "hot"
    COLD = "cold"


class Location(Enum):
    HOME = "home"
    WORK = "work"
    COMMUTE = "commute"
    TRAVEL = "travel"
    OUTDOORS = "outdoors"
    OTHER = "other"


class ResponseStyle(Enum):
    CONCISE = "concise"
    DETAILED = "detailed"
    CONVERSATIONAL = "conversational"
    FORMAL = "formal"
    CASUAL = "casual"


class ResponseLength(Enum):
    SHORT = "short"
    MEDIUM = "medium"
    LONG = "long"


def _parse_enum(enum_cls: Type[E], value: Any) -> Optional[E]:
    """Enum member for value, or None (logged) when value is not a member."""
    if value is None or isinstance(value, enum_cls):
        return value
    try:
        return enum_cls(str(value).strip().lower())
    except ValueError:
        logger.debug(f"Ignoring invalid {enum_cls.__name__} value: {value!r}")
        return None


def _string_list(value: Any) -> List[str]:
    if not value:
        return []
    if isinstance(value, str):
        return [value]
    if not isinstance(value, (list, tuple, set, frozenset)):
        return []
    return [str(item) for item in value]


def _string_or_none(value: Any) -> Optional[str]:
    return value if isinstance(value, str) else None


def _sub_context(data: Dict[str, Any], key: str) -> Dict[str, Any]:
    """Nested context block, or {} (logged) when it is missing or not a mapping."""
    value = data.get(key)
    if value is None:
        return {}
    if not isinstance(value, dict):
        logger.debug(f"Ignoring invalid {key}: {value!r}")
        return {}
    return value


def _compact(data: Dict[str, Any]) -> Dict[str, Any]:
    """Drop None values and empty lists/dicts, convert enums to values."""
    result = {}
    for key, value in data.items():
        if isinstance(value, Enum):
            value = value.value
        elif isinstance(value, dict):
            value = _compact(value)
        if value is None or value == [] or value == {}:
            continue
        result[key] = value
    return result


# =============================================================================
# HUMAN CONTEXT
# =============================================================================

@dataclass
class EmotionalState:
    mood: Optional[Mood] = None
    energy_level: Optional[EnergyLevel] = None


@dataclass
class TemporalContext:
    local_time: Optional[str] = None          # "HH:MM"
    timezone: Optional[str] = None
    day_of_week: Optional[str] = None
    is_working_hours: Optional[bool] = None


@dataclass
class EnvironmentalContext:
    weather: Optional[Weather] = None
    location: Optional[Location] = None


@dataclass
class UserPreferences:
    preferred_response_style: Optional[ResponseStyle] = None
    preferred_response_length: Optional[ResponseLength] = None
    preferred_models: List[str] = field(default_factory=list)
    avoid_models: List[str] = field(default_factory=list)


@dataclass
class HistoryHints:
    recent_topics: List[str] = field(default_factory=list)
    frequent_intents: List[str] = field(default_factory=list)


@dataclass
class HumanContext:
    """Optional signals about the person behind the prompt."""
    emotional_state: Optional[EmotionalState] = None
    temporal_context: Optional[TemporalContext] = None
    environmental_context: Optional[EnvironmentalContext] = None
    user_preferences: Optional[UserPreferences] = None
    history_hints: Optional[HistoryHints] = None

    def has_signals(self) -> bool:
        """True when at least one leaf value is populated."""
        emotional = self.emotional_state
        if emotional and (emotional.mood or emotional.energy_level):
            return True
        temporal = self.temporal_context
        if temporal and (temporal.local_time or temporal.is_working_hours is not None):
            return True
        env = self.environmental_context
        if env and (env.weather or env.location):
            return True
        prefs = self.user_preferences
        if prefs and (prefs.preferred_response_style or prefs.preferred_response_length
                      or prefs.preferred_models or prefs.avoid_models):
            return True
        hints = self.history_hints
        if hints and (hints.recent_topics or hints.frequent_intents):
            return True
        return False

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['HumanContext']:
        if not data or not isinstance(data, dict):
            return None

        emotional = _sub_context(data, "emotional_state")
        temporal = _sub_context(data, "temporal_context")
        env = _sub_context(data, "environmental_context")
        prefs = _sub_context(data, "user_preferences")
        hints = _sub_context(data, "history_hints")

        working = temporal.get("is_working_hours")
        return cls(
            emotional_state=EmotionalState(
                mood=_parse_enum(Mood, emotional.get("mood")),
                energy_level=_parse_enum(EnergyLevel, emotional.get("energy_level")),
            ) if emotional else None,
            temporal_context=TemporalContext(
                local_time=_string_or_none(temporal.get("local_time")),
                timezone=_string_or_none(temporal.get("timezone")),
                day_of_week=_string_or_none(temporal.get("day_of_week")),
                is_working_hours=working if isinstance(working, bool) else None,
            ) if temporal else None,
            environmental_context=EnvironmentalContext(
                weather=_parse_enum(Weather, env.get("weather")),
                location=_parse_enum(Location, env.get("location")),
            ) if env else None,
            user_preferences=UserPreferences(
                preferred_response_style=_parse_enum(ResponseStyle, prefs.get("preferred_response_style")),
                preferred_response_length=_parse_enum(ResponseLength, prefs.get("preferred_response_length")),
                preferred_models=_string_list(prefs.get("preferred_models")),
                avoid_models=_string_list(prefs.get("avoid_models")),
            ) if prefs else None,
            history_hints=HistoryHints(
                recent_topics=_string_list(hints.get("recent_topics")),
                frequent_intents=_string_list(hints.get("frequent_intents")),
            ) if hints else None,
        )

    def to_dict(self) -> Dict[str, Any]:
        return _compact(asdict(self))


# =============================================================================
# CONSTRAINTS & CONVERSATION
# =============================================================================

@dataclass
class Constraints:
    """Hard filters; every populated field must hold for a candidate to stay."""
    max_cost_per_1k_tokens: Optional[float] = None
    max_latency_ms: Optional[float] = None
    allowed_models: List[str] = field(default_factory=list)
    excluded_models: List[str] = field(default_factory=list)
    require_streaming: bool = False
    require_vision: bool = False
    require_audio: bool = False

    def is_empty(self) -> bool:
        return not (self.max_cost_per_1k_tokens is not None or self.max_latency_ms is not None
                    or self.allowed_models or self.excluded_models
                    or self.require_streaming or self.require_vision or self.require_audio)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['Constraints']:
        if not data:
            return None
        max_cost = data.get("max_cost_per_1k_tokens")
        max_latency = data.get("max_latency_ms")
        return cls(
            max_cost_per_1k_tokens=float(max_cost) if max_cost is not None else None,
            max_latency_ms=float(max_latency) if max_latency is not None else None,
            allowed_models=_string_list(data.get("allowed_models")),
            excluded_models=_string_list(data.get("excluded_models")),
            require_streaming=bool(data.get("require_streaming", False)),
            require_vision=bool(data.get("require_vision", False)),
            require_audio=bool(data.get("require_audio", False)),
        )

    def to_dict(self) -> Dict[str, Any]:
        return _compact(asdict(self))


@dataclass
class ConversationContext:
    user_id: Optional[str] = None
    conversation_id: Optional[str] = None
    previous_model_used: Optional[str] = None
    message_count: int = 0
    session_duration_minutes: float = 0.0

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> Optional['ConversationContext']:
        if not data:
            return None
        return cls(
            user_id=data.get("user_id"),
            conversation_id=data.get("conversation_id"),
            previous_model_used=data.get("previous_model_used"),
            message_count=int(data.get("message_count", 0) or 0),
            session_duration_minutes=float(data.get("session_duration_minutes", 0) or 0),
        )


# =============================================================================
# ROUTE REQUEST
# =============================================================================

@dataclass
class RouteRequest:
    """Everything the engine needs to route one prompt."""
    prompt: str
    modality: Union[Modality, str] = Modality.TEXT
    conversation_context: Optional[ConversationContext] = None
    human_context: Optional[HumanContext] = None
    constraints: Optional[Constraints] = None
    available_providers: Optional[List[str]] = None

    def __post_init__(self):
        if not isinstance(self.modality, Modality):
            self.modality = parse_modality(self.modality)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'RouteRequest':
        providers = data.get("available_providers")
        return cls(
            prompt=str(data.get("prompt", "")),
            modality=data.get("modality", "text"),
            conversation_context=ConversationContext.from_dict(data.get("conversation_context")),
            human_context=HumanContext.from_dict(data.get("human_context")),
            constraints=Constraints.from_dict(data.get("constraints")),
            available_providers=_string_list(providers) if providers else None,
        )
