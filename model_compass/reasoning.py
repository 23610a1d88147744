#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
REASONING - MODEL-COMPASS 1.0
=============================

Template-based explanations for routing decisions.

Each recommendation carries a one-sentence summary plus its factors
classified as positive (score >= 0.7), negative (<= 0.4) or neutral.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List

from .analyzer import QueryAnalysis
from .factors import (
    FactorScore,
    TASK_FITNESS,
    MODALITY_FITNESS,
    COST_EFFICIENCY,
    SPEED,
    CONVERSATION_COHERENCE,
    HUMAN_CONTEXT_FIT,
    MODALITY_CAPABILITY,
)
from .registry import CandidateDefinition
from .scorer import CandidateScore

POSITIVE_THRESHOLD = 0.7
NEGATIVE_THRESHOLD = 0.4


class Impact(Enum):
    POSITIVE = "positive"
    NEUTRAL = "neutral"
    NEGATIVE = "negative"


@dataclass(frozen=True)
class ReasoningFactor:
    name: str
    impact: Impact
    weight: float
    detail: str

    def to_dict(self) -> Dict:
        return {
            "name": self.name,
            "impact": self.impact.value,
            "weight": round(self.weight, 3),
            "detail": self.detail,
        }


@dataclass(frozen=True)
class Reasoning:
    summary: str
    factors: List[ReasoningFactor] = field(default_factory=list)

    def to_dict(self) -> Dict:
        return {
            "summary": self.summary,
            "factors": [f.to_dict() for f in self.factors],
        }


def classify_impact(score: float) -> Impact:
    if score >= POSITIVE_THRESHOLD:
        return Impact.POSITIVE
    if score <= NEGATIVE_THRESHOLD:
        return Impact.NEGATIVE
    return Impact.NEUTRAL


def to_reasoning_factor(factor: FactorScore) -> ReasoningFactor:
    return ReasoningFactor(
        name=factor.name,
        impact=classify_impact(factor.score),
        weight=factor.weight,
        detail=factor.detail,
    )


def _positive_factors(factors: List[FactorScore]) -> List[FactorScore]:
    """Factors at or above the positive threshold, biggest contribution first."""
    positives = [f for f in factors if f.score >= POSITIVE_THRESHOLD]
    return sorted(positives, key=lambda f: f.weighted_score, reverse=True)


# =============================================================================
# SUMMARIES
# =============================================================================

def primary_summary(score: CandidateScore, analysis: QueryAnalysis) -> str:
    name = score.candidate.name
    intent, domain, modality = analysis.intent.value, analysis.domain.value, analysis.modality.value
    positives = _positive_factors(score.factors)

    parts = []
    if positives:
        strongest = positives[0]
        if strongest.name == TASK_FITNESS:
            if round(strongest.score * 100) >= 90:
                parts.append(f"{name} excels at {intent} tasks")
            else:
                parts.append(f"{name} handles {intent} requests really well")
        elif strongest.name == MODALITY_FITNESS:
            parts.append(f"{name} has excellent {modality} processing capabilities")
        elif strongest.name == COST_EFFICIENCY:
            parts.append(f"{name} offers great value for this request")
        elif strongest.name == SPEED:
            parts.append(f"{name} will respond quickly")
        elif strongest.name == CONVERSATION_COHERENCE:
            parts.append(f"{name} maintains your conversation flow")
        elif strongest.name == HUMAN_CONTEXT_FIT:
            parts.append(f"{name} is well-suited for your current context")
        else:
            parts.append(f"{name} is a strong choice for this request")
    else:
        parts.append(f"{name} is the best available option for this request")

    if len(positives) > 1 and positives[1].score >= 0.8:
        second = {
            TASK_FITNESS: f"with solid {domain} domain knowledge",
            SPEED: "and responds quickly",
            COST_EFFICIENCY: "at a reasonable cost",
            HUMAN_CONTEXT_FIT: "and fits your personal context well",
        }.get(positives[1].name)
        if second:
            parts.append(second)

    summary = " ".join(parts)

    # Only cost and speed weaknesses get a caveat, whatever else scored low
    weakness = next((f for f in score.factors
                     if f.score <= NEGATIVE_THRESHOLD and f.name in (COST_EFFICIENCY, SPEED)), None)
    if weakness is not None:
        if weakness.name == COST_EFFICIENCY:
            summary += ", though it is on the pricier side"
        else:
            summary += ", though responses may take a moment"

    return summary + "."


def backup_summary(score: CandidateScore, analysis: QueryAnalysis, rank: int) -> str:
    name = score.candidate.name
    composite = score.composite_score

    if rank == 1:
        opening = f"{name} is a strong alternative" if composite >= 0.8 else f"{name} is a solid backup option"
    else:
        opening = f"{name} is another good choice" if composite >= 0.75 else f"{name} could also work"

    positives = _positive_factors(score.factors)
    if not positives:
        return f"{opening} for this request."

    top = positives[0].name
    if top == TASK_FITNESS:
        return f"{opening} with good {analysis.intent.value} capabilities."
    if top == COST_EFFICIENCY:
        return f"{opening}, more budget-friendly while still capable."
    if top == SPEED:
        return f"{opening} if you need faster responses."
    if top == MODALITY_FITNESS:
        return f"{opening} with strong {analysis.modality.value} support."
    if top == HUMAN_CONTEXT_FIT:
        return f"{opening} that matches your current context."
    return f"{opening} for this type of request."


# =============================================================================
# PUBLIC GENERATORS
# =============================================================================

def generate_reasoning(score: CandidateScore, analysis: QueryAnalysis, is_primary: bool,
                       backup_rank: int = 1) -> Reasoning:
    """Reasoning for a standard-path recommendation (primary or backup)."""
    summary = primary_summary(score, analysis) if is_primary else backup_summary(score, analysis, backup_rank)
    return Reasoning(summary=summary, factors=[to_reasoning_factor(f) for f in score.factors])


def _modality_name(modality_type: str) -> str:
    return "image" if modality_type == "vision" else "audio"


def generate_fast_path_reasoning(score: CandidateScore, modality_type: str) -> Reasoning:
    pct = round(score.composite_score * 100)
    summary = (f"{score.candidate.name} was selected for its excellent {_modality_name(modality_type)} "
               f"processing capabilities ({pct}% capability score).")
    factor = ReasoningFactor(
        name=MODALITY_CAPABILITY,
        impact=Impact.POSITIVE,
        weight=1.0,
        detail=f"Top-tier {modality_type} processing with {pct}% capability",
    )
    return Reasoning(summary=summary, factors=[factor])


def generate_fallback_reasoning(candidate: CandidateDefinition) -> Reasoning:
    return Reasoning(
        summary=(f"{candidate.name} was selected as a general-purpose fallback since the "
                 f"requested constraints eliminated preferred options."),
        factors=[ReasoningFactor(
            name="Fallback Selection",
            impact=Impact.NEUTRAL,
            weight=1.0,
            detail="Selected as most capable general model when constraints limited options",
        )],
    )


def generate_reconciled_reasoning(score: CandidateScore, analysis: QueryAnalysis, modality_type: str) -> Reasoning:
    """Reasoning for a combined text+image / text+voice recommendation."""
    name = score.candidate.name
    modality_name = _modality_name(modality_type)
    modality_factor = next((f for f in score.factors if "Modality" in f.name), None)
    task_factor = next((f for f in score.factors if "Task" in f.name), None)

    if modality_factor and task_factor and modality_factor.score >= 0.8 and task_factor.score >= 0.7:
        summary = (f"{name} balances strong {modality_name} processing with good text analysis "
                   f"capabilities, ideal for your combined request.")
    elif modality_factor and modality_factor.score >= 0.85:
        summary = (f"{name} excels at {modality_name} processing, which takes priority for your "
                   f"request, while handling the text portion well.")
    else:
        summary = f"{name} provides the best balance of {modality_name} and text capabilities for this combined request."

    return Reasoning(summary=summary, factors=[to_reasoning_factor(f) for f in score.factors])
