#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
SELECTOR - MODEL-COMPASS 1.0
============================

Picks the primary candidate and up to two backups from a ranked list,
and turns the winning margin into a confidence value.
"""

from dataclasses import dataclass, field
from typing import List, Optional
import math
import logging

from .errors import NoCandidatesError
from .helpers import clamp
from .registry import CandidateDefinition
from .scorer import CandidateScore

logger = logging.getLogger(__name__)

MAX_BACKUPS = 2

# Confidence curve: base + boost * (1 - e^(-5 * margin / MARGIN_SCALE))
BASE_CONFIDENCE = 0.6
MAX_BOOST = 0.35
MARGIN_SCALE = 0.2
SINGLE_CANDIDATE_CONFIDENCE = 0.95


@dataclass
class SelectionResult:
    primary: CandidateScore
    backups: List[CandidateScore] = field(default_factory=list)
    confidence: float = 0.0


def calculate_confidence(ranked: List[CandidateScore]) -> float:
    """
    Map the margin between rank 1 and rank 2 to [0.5, 0.98].

    A margin of 0 gives 0.6, 0.1 gives about 0.92, 0.2 and above saturate
    near 0.95. A lone candidate gets 0.95.
    """
    if len(ranked) == 1:
        return SINGLE_CANDIDATE_CONFIDENCE

    margin = ranked[0].composite_score - ranked[1].composite_score
    normalized = clamp(margin / MARGIN_SCALE, 0.0, 1.0)
    boost = MAX_BOOST * (1 - math.exp(-5 * normalized))
    return clamp(BASE_CONFIDENCE + boost, 0.5, 0.98)


def select_models(ranked: List[CandidateScore]) -> SelectionResult:
    """
    Select primary and backups from a list already sorted best first.

    Raises:
        NoCandidatesError: If ranked is empty
    """
    if not ranked:
        raise NoCandidatesError()

    result = SelectionResult(
        primary=ranked[0],
        backups=list(ranked[1:1 + MAX_BACKUPS]),
        confidence=calculate_confidence(ranked),
    )
    logger.debug(f"Selected {result.primary.candidate.id} (confidence {result.confidence:.3f})")
    return result


def select_fallback(candidates: List[CandidateDefinition]) -> Optional[CandidateDefinition]:
    """Most generally capable candidate: best mean intent+domain strength, first wins ties."""
    best, best_avg = None, -1.0
    for c in candidates:
        values = list(c.task_strengths.intents.values()) + list(c.task_strengths.domains.values())
        avg = sum(values) / len(values)
        if avg > best_avg:
            best, best_avg = c, avg
    return best
