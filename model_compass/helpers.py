#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
HELPERS - MODEL-COMPASS 1.0
===========================

Small numeric, time and text utilities shared by the analyzer, the
scorer and the engine.
"""

import re
import time
import uuid
from collections import Counter
from typing import Any, List, Optional

# =============================================================================
# NUMERIC
# =============================================================================

def clamp(value: float, minimum: float = 0.0, maximum: float = 1.0) -> float:
    """Restrict value to [minimum, maximum]."""
    return max(minimum, min(maximum, value))


def normalize(value: float, minimum: float, maximum: float) -> float:
    """
    Min-max normalize value into [0, 1].

    A degenerate range (minimum == maximum) gives 0.5 so that equal
    candidates all sit in the middle.
    """
    if maximum == minimum:
        return 0.5
    return clamp((value - minimum) / (maximum - minimum))


def invert_score(score: float) -> float:
    return 1.0 - clamp(score)


def round_to(value: float, places: int = 3) -> float:
    return round(value, places)


# =============================================================================
# TIME
# =============================================================================

_TIME_RE = re.compile(r"^(\d{1,2}):(\d{2})$")


def parse_time_to_hours(value: Any) -> Optional[float]:
    """
    Parse "HH:MM" into fractional hours.

    Returns None for anything that is not a valid 24h clock time.
    """
    if not value or not isinstance(value, str):
        return None
    match = _TIME_RE.match(value.strip())
    if not match:
        return None
    hours, minutes = int(match.group(1)), int(match.group(2))
    if hours > 23 or minutes > 59:
        return None
    return hours + minutes / 60.0


def is_late_night(hours: float) -> bool:
    return hours >= 22 or hours < 6


def is_working_hours(hours: float) -> bool:
    return 9 <= hours < 18


class Stopwatch:
    """
    Millisecond stopwatch on perf_counter.

    Usage:
        sw = Stopwatch()
        ...
        elapsed = sw.lap()     # ms since start or previous lap
        total = sw.elapsed()   # ms since start
    """

    def __init__(self):
        self._start = time.perf_counter()
        self._last = self._start

    def lap(self) -> float:
        now = time.perf_counter()
        delta = (now - self._last) * 1000.0
        self._last = now
        return delta

    def elapsed(self) -> float:
        return (time.perf_counter() - self._start) * 1000.0


# =============================================================================
# TEXT
# =============================================================================

STOP_WORDS = frozenset({
    "a", "an", "the", "and", "or", "but", "is", "are", "was", "were",
    "be", "been", "being", "have", "has", "had", "do", "does", "did",
    "will", "would", "could", "should", "may", "might", "must", "can",
    "to", "of", "in", "for", "on", "with", "at", "by", "from", "as",
    "into", "through", "during", "before", "after", "above", "below",
    "up", "down", "out", "off", "over", "under", "again", "further",
    "then", "once", "here", "there", "when", "where", "why", "how",
    "all", "each", "few", "more", "most", "other", "some", "such",
    "no", "nor", "not", "only", "own", "same", "so", "than", "too",
    "very", "just", "i", "me", "my", "myself", "we", "our", "ours",
    "ourselves", "you", "your", "yours", "yourself", "yourselves",
    "he", "him", "his", "himself", "she", "her", "hers", "herself",
    "it", "its", "itself", "they", "them", "their", "theirs",
    "themselves", "what", "which", "who", "whom", "this", "that",
    "these", "those", "am", "if", "because", "until", "while",
    "about", "against", "between",
    # request filler
    "please", "help", "need", "want", "like", "know", "think",
    "make", "get", "go", "see", "come", "take", "use", "find",
})

_NON_WORD_RE = re.compile(r"[^\w\s]")


def tokenize(text: str) -> List[str]:
    """Lowercase, replace punctuation with spaces, split on whitespace."""
    return _NON_WORD_RE.sub(" ", text.lower()).split()


def extract_keywords(text: str, max_keywords: int = 10) -> List[str]:
    """
    Most frequent significant tokens of text.

    Tokens shorter than 3 characters and stop words are dropped. Ties keep
    first-seen order (Counter preserves insertion order and sorted() is
    stable).
    """
    tokens = [t for t in tokenize(text) if len(t) > 2 and t not in STOP_WORDS]
    counts = Counter(tokens)
    ranked = sorted(counts, key=lambda token: -counts[token])
    return ranked[:max_keywords]


def generate_decision_id(prefix: str = "dec_") -> str:
    return f"{prefix}{uuid.uuid4().hex[:16]}"
