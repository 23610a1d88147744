#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SCORING FACTORS - MODEL-COMPASS 1.0
===================================

One function per scoring factor. Each returns an unweighted FactorScore
(score in [0, 1] plus a human-readable detail); the scorer applies the
weight profile afterwards.

Factors:
- Task Fitness: intent/domain/complexity strengths
- Specialization: purpose-built tags matching the request
- Modality Fitness: vision/audio capability for non-text input
- Cost Efficiency / Speed: relative to the other candidates in the call
- Conversation Coherence: continuity with the previous model
- User Preference: explicit preferred/avoided models
- Human Context Fit: mood, energy, time of day and style
"""

from dataclasses import dataclass, replace
from typing import Dict, FrozenSet, List, Optional, Tuple
import logging

from .analyzer import QueryAnalysis, Intent, Domain, Complexity, Modality
from .context import (
    ConversationContext,
    HumanContext,
    Mood,
    EnergyLevel,
    ResponseStyle,
    ResponseLength,
    TemporalContext,
    UserPreferences,
)
from .helpers import clamp, normalize, invert_score, parse_time_to_hours, is_late_night, is_working_hours
from .registry import CandidateDefinition, registry

logger = logging.getLogger(__name__)

# =============================================================================
# FACTOR SCORE
# =============================================================================

@dataclass(frozen=True)
class FactorScore:
    """One scored factor of one candidate."""
    name: str
    score: float
    weight: float = 0.0
    weighted_score: float = 0.0
    detail: str = ""

    def with_weight(self, weight: float) -> 'FactorScore':
        return replace(self, weight=weight, weighted_score=self.score * weight)

    def scaled(self, ratio: float) -> 'FactorScore':
        """Scale weight and weighted score by ratio (combined-modality merge)."""
        return replace(self, weight=self.weight * ratio, weighted_score=self.weighted_score * ratio)

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "score": round(self.score, 3),
            "weight": round(self.weight, 3),
            "weighted_score": round(self.weighted_score, 4),
            "detail": self.detail,
        }


TASK_FITNESS = "Task Fitness"
SPECIALIZATION = "Specialization"
MODALITY_FITNESS = "Modality Fitness"
COST_EFFICIENCY = "Cost Efficiency"
SPEED = "Speed"
CONVERSATION_COHERENCE = "Conversation Coherence"
USER_PREFERENCE = "User Preference"
HUMAN_CONTEXT_FIT = "Human Context Fit"
MODALITY_CAPABILITY = "Modality Capability"


def _pct(value: float) -> int:
    return int(round(value * 100))


# =============================================================================
# TASK FITNESS
# =============================================================================

def task_fitness(candidate: CandidateDefinition, analysis: QueryAnalysis) -> FactorScore:
    """50% intent, 30% domain, 20% complexity strength."""
    strengths = candidate.task_strengths
    intent_score = strengths.intents[analysis.intent]
    domain_score = strengths.domains[analysis.domain]
    complexity_score = strengths.complexity[analysis.complexity]

    score = clamp(intent_score * 0.5 + domain_score * 0.3 + complexity_score * 0.2)

    intent, domain = analysis.intent.value, analysis.domain.value
    ip, dp = _pct(intent_score), _pct(domain_score)
    if score >= 0.9:
        detail = f"Excels at {intent} tasks ({ip}%) with strong {domain} domain knowledge ({dp}%)"
    elif score >= 0.8:
        detail = f"Strong fit for {intent} ({ip}%) and handles {domain} topics well ({dp}%)"
    elif score >= 0.7:
        detail = f"Capable at {intent} tasks ({ip}%) with decent {domain} knowledge ({dp}%)"
    else:
        detail = f"Can handle {intent} ({ip}%) though not its strongest area for {domain} ({dp}%)"

    return FactorScore(TASK_FITNESS, score, detail=detail)


# =============================================================================
# SPECIALIZATION
# =============================================================================

INTENT_SPECIALIZATIONS: Dict[Intent, FrozenSet[str]] = {
    Intent.CODING: frozenset({"coding"}),
    Intent.CREATIVE: frozenset({"creative_writing"}),
    Intent.ANALYSIS: frozenset({"reasoning", "research"}),
    Intent.FACTUAL: frozenset({"research", "web_search"}),
    Intent.CONVERSATION: frozenset({"general_purpose", "fast_tasks"}),
    Intent.TASK: frozenset({"general_purpose"}),
    Intent.BRAINSTORM: frozenset({"creative_writing", "reasoning"}),
    Intent.TRANSLATION: frozenset({"multilingual"}),
    Intent.SUMMARIZATION: frozenset({"general_purpose", "fast_tasks"}),
    Intent.EXTRACTION: frozenset({"fast_tasks", "general_purpose"}),
}

DOMAIN_SPECIALIZATIONS: Dict[Domain, FrozenSet[str]] = {
    Domain.TECHNOLOGY: frozenset({"coding"}),
    Domain.SCIENCE: frozenset({"reasoning", "math", "research"}),
    Domain.FINANCE: frozenset({"reasoning", "math"}),
    Domain.CREATIVE_ARTS: frozenset({"creative_writing", "multimodal"}),
    Domain.EDUCATION: frozenset({"research"}),
    Domain.LEGAL: frozenset({"reasoning"}),
    Domain.BUSINESS: frozenset({"general_purpose"}),
    Domain.LIFESTYLE: frozenset({"general_purpose"}),
    Domain.GENERAL: frozenset({"general_purpose"}),
    Domain.HEALTH: frozenset({"research"}),
}

COMPLEXITY_SPECIALIZATIONS: Dict[Complexity, FrozenSet[str]] = {
    Complexity.QUICK: frozenset({"fast_tasks", "budget"}),
    Complexity.STANDARD: frozenset(),
    Complexity.DEMANDING: frozenset({"reasoning"}),
}


def specialization(candidate: CandidateDefinition, analysis: QueryAnalysis) -> FactorScore:
    """0.6 for an intent match, 0.25 for domain, 0.15 for complexity."""
    tags = set(candidate.specializations)
    matched: List[str] = []
    score = 0.0

    for table, key, bonus in (
        (INTENT_SPECIALIZATIONS, analysis.intent, 0.6),
        (DOMAIN_SPECIALIZATIONS, analysis.domain, 0.25),
        (COMPLEXITY_SPECIALIZATIONS, analysis.complexity, 0.15),
    ):
        hits = tags & table.get(key, frozenset())
        if hits:
            score += bonus
            matched.extend(sorted(hits - set(matched)))

    score = clamp(score)
    if matched:
        detail = f"Purpose-built for {', '.join(t.replace('_', ' ') for t in matched)}"
    elif tags:
        detail = "Specializations do not target this request"
    else:
        detail = "No declared specializations"

    return FactorScore(SPECIALIZATION, score, detail=detail)


# =============================================================================
# MODALITY FITNESS
# =============================================================================

def modality_fitness(candidate: CandidateDefinition, analysis: QueryAnalysis) -> FactorScore:
    """1.0 for text; otherwise the vision/audio capability score."""
    if analysis.modality in (Modality.IMAGE, Modality.TEXT_IMAGE):
        score = candidate.modality_score("vision")
        pct = _pct(score)
        if score >= 0.9:
            detail = f"Excellent vision capabilities ({pct}%) for image understanding"
        elif score >= 0.8:
            detail = f"Strong vision support ({pct}%) for image analysis"
        elif score > 0:
            detail = f"Basic vision capabilities ({pct}%)"
        else:
            detail = "Does not support vision/image input"
    elif analysis.modality in (Modality.VOICE, Modality.TEXT_VOICE):
        score = candidate.modality_score("audio")
        pct = _pct(score)
        if score >= 0.9:
            detail = f"Excellent audio processing ({pct}%) for voice input"
        elif score >= 0.8:
            detail = f"Strong audio support ({pct}%) for voice handling"
        elif score > 0:
            detail = f"Basic audio capabilities ({pct}%)"
        else:
            detail = "Does not support audio/voice input"
    else:
        score = 1.0
        detail = "Text-only request, all candidates supported"

    return FactorScore(MODALITY_FITNESS, clamp(score), detail=detail)


# =============================================================================
# COST & SPEED
# =============================================================================

def _format_cost(avg_cost: float) -> str:
    if avg_cost < 0.001:
        return f"${avg_cost * 1000:.3f}/million tokens"
    return f"${avg_cost:.4f}/1K tokens"


def cost_efficiency(candidate: CandidateDefinition, candidates: List[CandidateDefinition]) -> FactorScore:
    """Cheaper than the other candidates in the call scores higher."""
    costs = [c.avg_cost for c in candidates] or [candidate.avg_cost]
    score = invert_score(normalize(candidate.avg_cost, min(costs), max(costs)))

    cost_str = _format_cost(candidate.avg_cost)
    if score >= 0.9:
        detail = f"Very cost-effective at {cost_str}"
    elif score >= 0.7:
        detail = f"Reasonably priced at {cost_str}"
    elif score >= 0.4:
        detail = f"Mid-range pricing at {cost_str}"
    else:
        detail = f"Premium pricing at {cost_str}"

    return FactorScore(COST_EFFICIENCY, score, detail=detail)


def speed(candidate: CandidateDefinition, candidates: List[CandidateDefinition]) -> FactorScore:
    """Lower average latency than the other candidates scores higher."""
    latency = candidate.performance.avg_latency_ms
    latencies = [c.performance.avg_latency_ms for c in candidates] or [latency]
    score = invert_score(normalize(latency, min(latencies), max(latencies)))

    if latency < 500:
        detail = f"Very fast responses (~{latency:.0f}ms average)"
    elif latency < 1000:
        detail = f"Quick responses (~{latency:.0f}ms average)"
    elif latency < 2000:
        detail = f"Moderate response time (~{latency / 1000:.1f}s average)"
    else:
        detail = f"Slower responses (~{latency / 1000:.1f}s average) but thorough"

    return FactorScore(SPEED, score, detail=detail)


# =============================================================================
# CONVERSATION & PREFERENCES
# =============================================================================

def _provider_of(model_id: str, candidates: List[CandidateDefinition]) -> Optional[str]:
    for c in candidates:
        if c.id == model_id:
            return c.provider
    known = registry.get(model_id)
    return known.provider if known else None


def conversation_coherence(
    candidate: CandidateDefinition,
    conversation: Optional[ConversationContext],
    candidates: Optional[List[CandidateDefinition]] = None,
) -> FactorScore:
    """1.0 same model, 0.7 same provider, 0.4 otherwise, 0.5 for a new conversation."""
    previous = conversation.previous_model_used if conversation else None
    if not previous:
        return FactorScore(
            CONVERSATION_COHERENCE, 0.5,
            detail="New conversation, no prior model to stay coherent with",
        )

    previous_provider = _provider_of(previous, candidates or [])
    if previous_provider is not None:
        same_provider = previous_provider == candidate.provider
    else:
        # Unknown id: fall back to the provider name appearing in it
        same_provider = candidate.provider in previous

    if candidate.id == previous:
        score, detail = 1.0, "Same model as the previous message, keeps the conversation seamless"
    elif same_provider:
        score, detail = 0.7, f"Same provider ({candidate.provider}), good conversation continuity"
    else:
        score, detail = 0.4, "Different provider from the previous message, may affect conversation flow"

    return FactorScore(CONVERSATION_COHERENCE, score, detail=detail)


def user_preference(candidate: CandidateDefinition, human_context: Optional[HumanContext]) -> FactorScore:
    """Neutral 0.5, pushed up for preferred and down for avoided models."""
    prefs = human_context.user_preferences if human_context else None
    preferred = prefs.preferred_models if prefs else []
    avoided = prefs.avoid_models if prefs else []

    score = 0.5
    detail = "No model preferences configured" if not preferred and not avoided else "Not in your preference lists"
    if candidate.id in preferred:
        score = clamp(score + 0.4)
        detail = "Matches your preferred models list"
    if candidate.id in avoided:
        score = clamp(score - 0.4)
        detail = "In your avoid list, not preferred"

    return FactorScore(USER_PREFERENCE, score, detail=detail)


# =============================================================================
# HUMAN CONTEXT FIT
# =============================================================================

SubFit = Optional[Tuple[float, str]]


def _tiered(score: float, high: str, mid: str, low: str, high_at: float = 0.85, mid_at: float = 0.7) -> str:
    if score >= high_at:
        return high
    if score >= mid_at:
        return mid
    return low


def mood_fit(candidate: CandidateDefinition, mood: Optional[Mood]) -> SubFit:
    if mood is None:
        return None
    hf = candidate.human_factors

    if mood in (Mood.FRUSTRATED, Mood.STRESSED, Mood.ANXIOUS):
        score = hf.empathy
        return score, _tiered(score,
                              "Really understands when you're stressed, responds with patience",
                              "Good at providing calm, supportive responses",
                              "May not be the most empathetic choice right now")
    if mood in (Mood.EXCITED, Mood.HAPPY):
        score = hf.playfulness
        return score, _tiered(score,
                              "Great at matching your playful energy",
                              "Can engage with your good mood",
                              "Tends to be more serious in tone")
    if mood == Mood.TIRED:
        score = hf.conciseness
        return score, _tiered(score,
                              "Gives quick, focused answers when you're tired",
                              "Reasonably concise responses",
                              "May give longer responses than you want right now")
    return 0.8, "Works well for your current state"


def energy_fit(candidate: CandidateDefinition, energy: Optional[EnergyLevel]) -> SubFit:
    if energy is None:
        return None
    hf = candidate.human_factors

    if energy == EnergyLevel.LOW:
        score = hf.conciseness
        return score, _tiered(score,
                              "Perfect for low energy, keeps responses short and clear",
                              "Reasonably brief when you need it",
                              "Might be more verbose than you want")
    if energy == EnergyLevel.HIGH:
        score = (hf.verbosity + hf.conversational_tone) / 2
        if score >= 0.8:
            return score, "Can match your high energy with engaging responses"
        return score, "Provides solid responses for your energy level"
    return 0.8, "Good balance for your current energy"


def time_fit(candidate: CandidateDefinition, temporal: Optional[TemporalContext]) -> SubFit:
    if temporal is None or (not temporal.local_time and temporal.is_working_hours is None):
        return None
    hf = candidate.human_factors

    score, detail = 0.8, "Works well at any time"

    hours = parse_time_to_hours(temporal.local_time)
    if hours is not None:
        if is_late_night(hours):
            score = hf.late_night_suitability
            detail = _tiered(score,
                             "Perfect for late night, won't overwhelm you",
                             "Works reasonably well at this hour",
                             "Might be a bit much for late night")
        elif is_working_hours(hours):
            score = hf.work_hours_suitability
            detail = ("Ideal for work hours, professional and efficient" if score >= 0.9
                      else "Suitable for work time use")

    # Explicit flag wins over the clock
    if temporal.is_working_hours is True:
        score = hf.work_hours_suitability
        detail = "Well-suited for your work context" if score >= 0.9 else "Can handle professional tasks"
    elif temporal.is_working_hours is False:
        score = hf.late_night_suitability
        detail = "Good for after-hours use"

    return score, detail


def style_fit(candidate: CandidateDefinition, prefs: Optional[UserPreferences]) -> SubFit:
    if prefs is None or (prefs.preferred_response_style is None and prefs.preferred_response_length is None):
        return None
    hf = candidate.human_factors

    score, detail = 0.8, "Adapts to your preferred style"
    style = prefs.preferred_response_style

    if style == ResponseStyle.CONCISE:
        score = hf.conciseness
        detail = _tiered(score, "Excellent at giving concise responses",
                         "Can keep responses reasonably short", "Tends to be more detailed")
    elif style == ResponseStyle.DETAILED:
        score = hf.verbosity
        detail = _tiered(score, "Great at providing detailed, thorough responses",
                         "Provides good detail when needed", "Keeps things relatively brief")
    elif style == ResponseStyle.CONVERSATIONAL:
        score = hf.conversational_tone
        detail = _tiered(score, "Natural, conversational style that feels like chatting",
                         "Fairly conversational approach", "More formal in tone")
    elif style == ResponseStyle.FORMAL:
        score = hf.formal_tone
        detail = _tiered(score, "Professional and formal communication style",
                         "Can maintain formal tone", "More casual by default", high_at=0.9)
    elif style == ResponseStyle.CASUAL:
        score = hf.conversational_tone * 0.8 + hf.playfulness * 0.2
        detail = ("Relaxed, casual communication style" if score >= 0.8
                  else "Slightly more formal than casual")

    length = prefs.preferred_response_length
    if length is not None:
        if length == ResponseLength.SHORT:
            length_score = hf.conciseness
        elif length == ResponseLength.LONG:
            length_score = hf.verbosity
        else:
            length_score = 0.8
        score = (score + length_score) / 2

    return score, detail


def human_context_fit(candidate: CandidateDefinition, human_context: Optional[HumanContext]) -> Optional[FactorScore]:
    """Mean of the mood, energy, time and style sub-fits; None when none apply."""
    if human_context is None:
        return None

    emotional = human_context.emotional_state
    subfits = [
        mood_fit(candidate, emotional.mood if emotional else None),
        energy_fit(candidate, emotional.energy_level if emotional else None),
        time_fit(candidate, human_context.temporal_context),
        style_fit(candidate, human_context.user_preferences),
    ]
    subfits = [fit for fit in subfits if fit is not None]
    if not subfits:
        return None

    score = clamp(sum(s for s, _ in subfits) / len(subfits))
    return FactorScore(HUMAN_CONTEXT_FIT, score, detail=subfits[0][1])
