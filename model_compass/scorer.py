#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SCORER - MODEL-COMPASS 1.0
==========================

Turns a QueryAnalysis into a ranked list of CandidateScore.

Three entry points, one per routing path:
- score_all(): full multi-factor scoring for text requests
- quick_score_for_modality(): capability-only ranking for pure image/voice
- score_combined_modality(): blend of the two for text+image / text+voice

All functions are pure: same inputs, same ranking.
"""

from dataclasses import dataclass, field
from typing import Dict, List, Optional
import logging

from .analyzer import QueryAnalysis
from .config import ScoringWeights, weights_for, config
from .context import HumanContext, Constraints, ConversationContext
from .factors import (
    FactorScore,
    MODALITY_CAPABILITY,
    task_fitness,
    specialization,
    modality_fitness,
    cost_efficiency,
    speed,
    conversation_coherence,
    user_preference,
    human_context_fit,
)
from .registry import CandidateDefinition

logger = logging.getLogger(__name__)

# =============================================================================
# DATA TYPES
# =============================================================================

@dataclass
class CandidateScore:
    """A candidate with its factor breakdown."""
    candidate: CandidateDefinition
    factors: List[FactorScore] = field(default_factory=list)
    composite_score: float = 0.0

    def factor(self, name: str) -> Optional[FactorScore]:
        for f in self.factors:
            if f.name == name:
                return f
        return None

    def to_dict(self) -> Dict:
        return {
            "candidate_id": self.candidate.id,
            "provider": self.candidate.provider,
            "composite_score": round(self.composite_score, 4),
            "factors": [f.to_dict() for f in self.factors],
        }


@dataclass
class ScoringContext:
    """Everything the factors look at besides the candidate itself."""
    analysis: QueryAnalysis
    all_candidates: List[CandidateDefinition]
    human_context: Optional[HumanContext] = None
    constraints: Optional[Constraints] = None
    conversation_context: Optional[ConversationContext] = None


# =============================================================================
# FULL SCORING
# =============================================================================

def score_candidate(candidate: CandidateDefinition, context: ScoringContext) -> CandidateScore:
    """Score one candidate on every applicable factor."""
    has_human_context = context.human_context is not None
    weights: ScoringWeights = weights_for(has_human_context)
    pool = context.all_candidates

    factors = [
        task_fitness(candidate, context.analysis).with_weight(weights.task_fitness),
        specialization(candidate, context.analysis).with_weight(weights.specialization),
        modality_fitness(candidate, context.analysis).with_weight(weights.modality_fitness),
        cost_efficiency(candidate, pool).with_weight(weights.cost_efficiency),
        speed(candidate, pool).with_weight(weights.speed),
        conversation_coherence(candidate, context.conversation_context, pool).with_weight(
            weights.conversation_coherence),
        user_preference(candidate, context.human_context).with_weight(weights.user_preference),
    ]

    if has_human_context and weights.human_context_fit:
        fit = human_context_fit(candidate, context.human_context)
        if fit is not None:
            factors.append(fit.with_weight(weights.human_context_fit))

    return CandidateScore(
        candidate=candidate,
        factors=factors,
        composite_score=sum(f.weighted_score for f in factors),
    )


def score_all(context: ScoringContext, diversity_margin: Optional[float] = None) -> List[CandidateScore]:
    """Score every candidate in the context, best first, with provider diversity applied."""
    scores = [score_candidate(c, context) for c in context.all_candidates]
    scores.sort(key=lambda s: s.composite_score, reverse=True)
    margin = config.diversity_margin if diversity_margin is None else diversity_margin
    return enforce_provider_diversity(scores, margin)


def enforce_provider_diversity(scores: List[CandidateScore], margin: float = 0.06) -> List[CandidateScore]:
    """
    Avoid a single-provider top three when a close alternative exists.

    If the first three share a provider, the best-ranked candidate from
    another provider swaps places with rank 3, but only when it trails
    rank 3 by at most margin. Ranks 1 and 2 never move.
    """
    if len(scores) < 3:
        return scores

    top_provider = scores[0].candidate.provider
    if any(s.candidate.provider != top_provider for s in scores[:3]):
        return scores

    alternative_index = next(
        (i for i, s in enumerate(scores) if s.candidate.provider != top_provider), None
    )
    if alternative_index is None:
        return scores

    gap = scores[2].composite_score - scores[alternative_index].composite_score
    if gap > margin:
        return scores

    result = list(scores)
    result[2], result[alternative_index] = result[alternative_index], result[2]
    logger.debug(
        f"Diversity swap: {result[2].candidate.id} moved to rank 3 "
        f"(gap {gap:.3f} <= {margin})"
    )
    return result


# =============================================================================
# MODALITY SCORING
# =============================================================================

def quick_score_for_modality(candidates: List[CandidateDefinition], modality_type: str) -> List[CandidateScore]:
    """Rank by vision/audio capability alone; incapable candidates are dropped."""
    scores = []
    for c in candidates:
        capability = c.modality_score(modality_type)
        if capability <= 0:
            continue
        factor = FactorScore(
            MODALITY_CAPABILITY, capability, weight=1.0, weighted_score=capability,
            detail=f"{round(capability * 100)}% {modality_type} processing capability",
        )
        scores.append(CandidateScore(candidate=c, factors=[factor], composite_score=capability))

    scores.sort(key=lambda s: s.composite_score, reverse=True)
    return scores


def score_combined_modality(
    text_scores: List[CandidateScore],
    modality_scores: List[CandidateScore],
    modality_weight: float = 0.6,
) -> List[CandidateScore]:
    """
    Blend capability and text rankings.

    Only candidates present in both lists survive. Composite is
    modality_weight * capability + (1 - modality_weight) * text score;
    factor weights are scaled the same way so they still add up.
    """
    text_weight = 1.0 - modality_weight
    text_by_id = {s.candidate.id: s for s in text_scores}

    combined = []
    for modality_score in modality_scores:
        text_score = text_by_id.get(modality_score.candidate.id)
        if text_score is None:
            continue
        factors = ([f.scaled(modality_weight) for f in modality_score.factors]
                   + [f.scaled(text_weight) for f in text_score.factors])
        combined.append(CandidateScore(
            candidate=modality_score.candidate,
            factors=factors,
            composite_score=(modality_score.composite_score * modality_weight
                             + text_score.composite_score * text_weight),
        ))

    combined.sort(key=lambda s: s.composite_score, reverse=True)
    return combined
