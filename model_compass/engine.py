#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ROUTING ENGINE - MODEL-COMPASS 1.0
==================================

Orchestrates analysis, scoring, selection and reasoning.

Three paths, chosen by modality:
- fast-path (image, voice): capability ranking only, no text analysis
- standard (text): full multi-factor scoring
- combined (text+image, text+voice): text scoring blended with capability

Usage:
    from model_compass.engine import route
    from model_compass.context import RouteRequest

    response = route(RouteRequest(prompt="Write a haiku about autumn"))
    print(response.primary_model.name, response.confidence)
"""

from dataclasses import dataclass
from typing import Any, Dict, List, Optional, Tuple, Union
import logging

from .analyzer import (
    Modality,
    QueryAnalysis,
    TaskAnalyzer,
    analyzer as default_analyzer,
    default_analysis,
    fast_path_analysis,
    get_modality_type,
    is_combined_modality,
    is_pure_modality,
    parse_modality,
)
from .config import CompassConfig, config as default_config
from .context import RouteRequest
from .errors import NoCandidatesError
from .helpers import Stopwatch, generate_decision_id, round_to
from .reasoning import (
    Reasoning,
    generate_fallback_reasoning,
    generate_fast_path_reasoning,
    generate_reasoning,
    generate_reconciled_reasoning,
)
from .registry import CandidateDefinition, CandidateRegistry, registry as default_registry
from .scorer import (
    CandidateScore,
    ScoringContext,
    quick_score_for_modality,
    score_all,
    score_combined_modality,
)
from .selector import select_fallback, select_models

logger = logging.getLogger(__name__)

# =============================================================================
# RESPONSE TYPES
# =============================================================================

@dataclass
class Recommendation:
    id: str
    name: str
    provider: str
    score: float
    reasoning: Reasoning
    supports_web_search: bool = False

    @classmethod
    def from_score(cls, score: CandidateScore, reasoning: Reasoning) -> 'Recommendation':
        return cls.from_candidate(score.candidate, score.composite_score, reasoning)

    @classmethod
    def from_candidate(cls, candidate: CandidateDefinition, score: float, reasoning: Reasoning) -> 'Recommendation':
        return cls(
            id=candidate.id,
            name=candidate.name,
            provider=candidate.provider,
            score=round_to(score, 3),
            reasoning=reasoning,
            supports_web_search=candidate.capabilities.supports_web_search,
        )

    def to_dict(self) -> Dict[str, Any]:
        return {
            "id": self.id,
            "name": self.name,
            "provider": self.provider,
            "score": self.score,
            "reasoning": self.reasoning.to_dict(),
            "supports_web_search": self.supports_web_search,
        }


@dataclass
class Timing:
    total_ms: float = 0.0
    analysis_ms: float = 0.0
    scoring_ms: float = 0.0
    selection_ms: float = 0.0

    def to_dict(self) -> Dict[str, float]:
        return {
            "total_ms": round_to(self.total_ms, 2),
            "analysis_ms": round_to(self.analysis_ms, 2),
            "scoring_ms": round_to(self.scoring_ms, 2),
            "selection_ms": round_to(self.selection_ms, 2),
        }


@dataclass
class ProviderHint:
    """Set when the overall best candidate belongs to an unavailable provider."""
    recommended_id: str
    recommended_name: str
    recommended_provider: str
    reason: str
    score_difference: float

    def to_dict(self) -> Dict[str, Any]:
        return {
            "recommended_model": {
                "id": self.recommended_id,
                "name": self.recommended_name,
                "provider": self.recommended_provider,
            },
            "reason": self.reason,
            "score_difference": self.score_difference,
        }


@dataclass
class RouteResponse:
    decision_id: str
    primary_model: Recommendation
    backup_models: List[Recommendation]
    confidence: float
    analysis: QueryAnalysis
    timing: Timing
    provider_hint: Optional[ProviderHint] = None

    def to_dict(self) -> Dict[str, Any]:
        data = {
            "decision_id": self.decision_id,
            "primary_model": self.primary_model.to_dict(),
            "backup_models": [b.to_dict() for b in self.backup_models],
            "confidence": round_to(self.confidence, 3),
            "analysis": self.analysis.to_dict(),
            "timing": self.timing.to_dict(),
        }
        if self.provider_hint is not None:
            data["provider_hint"] = self.provider_hint.to_dict()
        return data


@dataclass
class AnalyzeResponse:
    analysis: QueryAnalysis
    analysis_ms: float = 0.0

    def to_dict(self) -> Dict[str, Any]:
        return {
            "analysis": self.analysis.to_dict(),
            "timing": {"analysis_ms": round_to(self.analysis_ms, 2)},
        }


# =============================================================================
# ENGINE
# =============================================================================

class RoutingEngine:
    """
    Routing pipeline over a candidate registry.

    The engine holds no per-request state: one instance can serve any
    number of threads.

    Usage:
        engine = RoutingEngine()
        response = engine.route(RouteRequest(prompt="Translate this into French"))
    """

    def __init__(
        self,
        candidate_registry: Optional[CandidateRegistry] = None,
        settings: Optional[CompassConfig] = None,
        task_analyzer: Optional[TaskAnalyzer] = None,
    ):
        self.registry = candidate_registry or default_registry
        self.settings = settings or default_config
        self.analyzer = task_analyzer or default_analyzer

    # -------------------------------------------------------------------------
    # Public API
    # -------------------------------------------------------------------------

    def route(self, request: RouteRequest) -> RouteResponse:
        """
        Route a request to the best candidate.

        Raises:
            NoCandidatesError: If no candidate exists even after relaxing constraints
        """
        sw = Stopwatch()
        modality = request.modality if isinstance(request.modality, Modality) else parse_modality(request.modality)

        if is_pure_modality(modality):
            response = self._fast_path(request, modality, sw)
        else:
            response = self._standard_path(request, modality, sw)

        response.timing.total_ms = sw.elapsed()
        budget = self.settings.latency_budget_ms
        if response.timing.total_ms > budget:
            logger.warning(
                f"Routing took {response.timing.total_ms:.1f}ms (budget {budget:.0f}ms) "
                f"for decision {response.decision_id}"
            )
        return response

    def analyze_only(self, prompt: str, modality: Union[str, Modality] = Modality.TEXT) -> AnalyzeResponse:
        sw = Stopwatch()
        analysis = self.analyzer.analyze(prompt, modality)
        return AnalyzeResponse(analysis=analysis, analysis_ms=sw.elapsed())

    # -------------------------------------------------------------------------
    # Candidate pool
    # -------------------------------------------------------------------------

    def candidate_pool(self, request: RouteRequest) -> List[CandidateDefinition]:
        """Available candidates passing the constraints, relaxed once if nothing passes."""
        available = self.registry.available()
        pool = self.registry.filter_by_constraints(available, request.constraints)
        if not pool:
            if request.constraints is not None and available:
                logger.warning("No candidate satisfies the constraints, ignoring them")
            pool = available
        if not pool:
            raise NoCandidatesError("No candidates available")
        return pool

    # -------------------------------------------------------------------------
    # Paths
    # -------------------------------------------------------------------------

    def _fast_path(self, request: RouteRequest, modality: Modality, sw: Stopwatch) -> RouteResponse:
        modality_type = get_modality_type(modality)
        pool = self.candidate_pool(request)
        sw.lap()

        capable = self.registry.by_modality_capability(pool, modality_type)
        scores = quick_score_for_modality(capable, modality_type)
        scoring_ms = sw.lap()

        if not scores:
            return self._fallback_response(pool, modality)

        restricted, hint = self._restrict_providers(scores, request.available_providers)
        if not restricted:
            return self._provider_unavailable_response(
                scores[0], fast_path_analysis(modality), hint, Timing(scoring_ms=scoring_ms))
        selection = select_models(restricted)
        primary = Recommendation.from_score(
            selection.primary, generate_fast_path_reasoning(selection.primary, modality_type))
        backups = [Recommendation.from_score(b, generate_fast_path_reasoning(b, modality_type))
                   for b in selection.backups]
        selection_ms = sw.lap()

        return RouteResponse(
            decision_id=self._decision_id(),
            primary_model=primary,
            backup_models=backups,
            confidence=selection.confidence,
            analysis=fast_path_analysis(modality),
            timing=Timing(analysis_ms=0.0, scoring_ms=scoring_ms, selection_ms=selection_ms),
            provider_hint=hint,
        )

    def _standard_path(self, request: RouteRequest, modality: Modality, sw: Stopwatch) -> RouteResponse:
        analysis = self.analyzer.analyze(request.prompt, modality, request.human_context)
        analysis_ms = sw.lap()

        pool = self.candidate_pool(request)
        context = ScoringContext(
            analysis=analysis,
            all_candidates=pool,
            human_context=request.human_context,
            constraints=request.constraints,
            conversation_context=request.conversation_context,
        )
        text_scores = score_all(context, self.settings.diversity_margin)

        if is_combined_modality(modality):
            return self._combined(request, analysis, pool, text_scores, analysis_ms, sw)

        scoring_ms = sw.lap()
        scores, hint = self._restrict_providers(text_scores, request.available_providers)
        if not scores:
            return self._provider_unavailable_response(
                text_scores[0], analysis, hint, Timing(analysis_ms=analysis_ms, scoring_ms=scoring_ms))
        selection = select_models(scores)
        primary = Recommendation.from_score(
            selection.primary, generate_reasoning(selection.primary, analysis, is_primary=True))
        backups = [
            Recommendation.from_score(b, generate_reasoning(b, analysis, is_primary=False, backup_rank=rank))
            for rank, b in enumerate(selection.backups, start=1)
        ]
        selection_ms = sw.lap()

        logger.debug(
            f"Routed {analysis.intent.value}/{analysis.domain.value} over {len(pool)} candidates "
            f"to {primary.id} ({primary.score})"
        )
        return RouteResponse(
            decision_id=self._decision_id(),
            primary_model=primary,
            backup_models=backups,
            confidence=selection.confidence,
            analysis=analysis,
            timing=Timing(analysis_ms=analysis_ms, scoring_ms=scoring_ms, selection_ms=selection_ms),
            provider_hint=hint,
        )

    def _combined(
        self,
        request: RouteRequest,
        analysis: QueryAnalysis,
        pool: List[CandidateDefinition],
        text_scores: List[CandidateScore],
        analysis_ms: float,
        sw: Stopwatch,
    ) -> RouteResponse:
        modality_type = get_modality_type(analysis.modality)
        capable = self.registry.by_modality_capability(pool, modality_type)
        modality_scores = quick_score_for_modality(capable, modality_type)
        combined = score_combined_modality(
            text_scores, modality_scores, self.settings.combined_modality_weight)
        scoring_ms = sw.lap()

        if not combined:
            return self._fallback_response(pool, analysis.modality)

        restricted, hint = self._restrict_providers(combined, request.available_providers)
        if not restricted:
            return self._provider_unavailable_response(
                combined[0], analysis, hint, Timing(analysis_ms=analysis_ms, scoring_ms=scoring_ms))
        selection = select_models(restricted)
        primary = Recommendation.from_score(
            selection.primary, generate_reconciled_reasoning(selection.primary, analysis, modality_type))
        backups = [Recommendation.from_score(b, generate_reconciled_reasoning(b, analysis, modality_type))
                   for b in selection.backups]
        selection_ms = sw.lap()

        return RouteResponse(
            decision_id=self._decision_id(),
            primary_model=primary,
            backup_models=backups,
            confidence=selection.confidence,
            analysis=analysis,
            timing=Timing(analysis_ms=analysis_ms, scoring_ms=scoring_ms, selection_ms=selection_ms),
            provider_hint=hint,
        )

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------

    def _decision_id(self) -> str:
        return generate_decision_id(self.settings.decision_id_prefix)

    def _fallback_response(self, pool: List[CandidateDefinition], modality: Modality) -> RouteResponse:
        candidate = select_fallback(pool)
        if candidate is None:
            raise NoCandidatesError("No candidates available")
        logger.warning(f"No capable candidate for {modality.value}, falling back to {candidate.id}")
        return RouteResponse(
            decision_id=self._decision_id(),
            primary_model=Recommendation.from_candidate(candidate, 0.5, generate_fallback_reasoning(candidate)),
            backup_models=[],
            confidence=0.5,
            analysis=default_analysis(modality),
            timing=Timing(),
        )

    def _provider_unavailable_response(
        self,
        best: CandidateScore,
        analysis: QueryAnalysis,
        hint: ProviderHint,
        timing: Timing,
    ) -> RouteResponse:
        """Overall best candidate, unscored and without backups, flagged by the hint."""
        candidate = best.candidate
        return RouteResponse(
            decision_id=self._decision_id(),
            primary_model=Recommendation.from_candidate(candidate, 0.0, generate_fallback_reasoning(candidate)),
            backup_models=[],
            confidence=0.0,
            analysis=analysis,
            timing=timing,
            provider_hint=hint,
        )

    @staticmethod
    def _restrict_providers(
        scores: List[CandidateScore],
        providers: Optional[List[str]],
    ) -> Tuple[List[CandidateScore], Optional[ProviderHint]]:
        """
        Drop scores from providers the caller cannot use, hinting at a lost winner.

        Returns an empty list with a hint when no allowed provider has a candidate.
        """
        if not providers or not scores:
            return scores, None

        allowed = set(providers)
        kept = [s for s in scores if s.candidate.provider in allowed]
        best = scores[0]
        if not kept:
            logger.warning(f"No candidate from providers {sorted(allowed)}, best is {best.candidate.id}")
            return [], ProviderHint(
                recommended_id=best.candidate.id,
                recommended_name=best.candidate.name,
                recommended_provider=best.candidate.provider,
                reason=(f"Our top recommendation for this query is {best.candidate.name} "
                        f"({best.candidate.provider}), but this provider is not currently configured"),
                score_difference=0.0,
            )

        if best.candidate.provider in allowed:
            return kept, None

        hint = ProviderHint(
            recommended_id=best.candidate.id,
            recommended_name=best.candidate.name,
            recommended_provider=best.candidate.provider,
            reason=(f"{best.candidate.name} scored highest for this query but "
                    f"{best.candidate.provider} is not currently available"),
            score_difference=round_to(best.composite_score - kept[0].composite_score, 3),
        )
        return kept, hint


# =============================================================================
# GLOBAL INSTANCE
# =============================================================================

engine = RoutingEngine()


def route(request: Union[RouteRequest, Dict[str, Any]]) -> RouteResponse:
    """Convenience function to route a request (RouteRequest or plain dict)."""
    if isinstance(request, dict):
        request = RouteRequest.from_dict(request)
    return engine.route(request)


def analyze_only(prompt: str, modality: Union[str, Modality] = Modality.TEXT) -> AnalyzeResponse:
    """Convenience function to analyze a prompt without routing it."""
    return engine.analyze_only(prompt, modality)
