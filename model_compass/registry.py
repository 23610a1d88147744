#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CANDIDATE REGISTRY - MODEL-COMPASS 1.0
======================================

Static catalog of routable candidates, loaded once from YAML.

Every candidate declares pricing, capabilities, average latency, a dense
strength table (every intent, domain and complexity level) and the human
factors used by the human-context scorer. The catalog is validated on
load and immutable afterwards; lookups by id are O(1).

Usage:
    from model_compass.registry import registry
    candidate = registry.get("gpt-4o")
    cheap = registry.filter_by_constraints(registry.available(), Constraints(max_cost_per_1k_tokens=0.001))
"""

from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Iterable, List, Optional, Tuple
import logging

from .analyzer import Intent, Domain, Complexity
from .config import load_yaml, config
from .context import Constraints
from .errors import RegistryError

logger = logging.getLogger(__name__)

# =============================================================================
# DATA TYPES
# =============================================================================

@dataclass(frozen=True)
class Pricing:
    input_per_1k: float
    output_per_1k: float

    @property
    def average(self) -> float:
        return (self.input_per_1k + self.output_per_1k) / 2


@dataclass(frozen=True)
class Capabilities:
    max_input_tokens: int = 0
    max_output_tokens: int = 0
    supports_streaming: bool = False
    supports_vision: bool = False
    supports_audio: bool = False
    supports_function_calling: bool = False
    supports_json_mode: bool = False
    supports_web_search: bool = False
    vision_score: float = 0.0
    audio_score: float = 0.0


@dataclass(frozen=True)
class Performance:
    avg_latency_ms: float
    reliability_percent: float = 100.0


@dataclass(frozen=True)
class TaskStrengths:
    intents: Dict[Intent, float]
    domains: Dict[Domain, float]
    complexity: Dict[Complexity, float]


@dataclass(frozen=True)
class HumanFactors:
    empathy: float
    playfulness: float
    professionalism: float
    conciseness: float
    verbosity: float
    conversational_tone: float
    formal_tone: float
    late_night_suitability: float
    work_hours_suitability: float


@dataclass(frozen=True)
class CandidateDefinition:
    """One routable backend model."""
    id: str
    name: str
    provider: str
    description: str
    pricing: Pricing
    capabilities: Capabilities
    performance: Performance
    task_strengths: TaskStrengths
    human_factors: HumanFactors
    specializations: Tuple[str, ...] = field(default_factory=tuple)
    available: bool = True

    @property
    def avg_cost(self) -> float:
        """Average of input and output price per 1K tokens."""
        return self.pricing.average

    def modality_score(self, modality_type: str) -> float:
        """Capability score for "vision" / "audio"; 0 when the flag is off."""
        caps = self.capabilities
        if modality_type == "vision":
            return caps.vision_score if caps.supports_vision else 0.0
        if modality_type == "audio":
            return caps.audio_score if caps.supports_audio else 0.0
        return 1.0

    def to_dict(self) -> Dict[str, Any]:
        caps = self.capabilities
        return {
            "id": self.id,
            "name": self.name,
            "provider": self.provider,
            "description": self.description,
            "pricing": {
                "input_per_1k": self.pricing.input_per_1k,
                "output_per_1k": self.pricing.output_per_1k,
            },
            "capabilities": {
                "max_input_tokens": caps.max_input_tokens,
                "max_output_tokens": caps.max_output_tokens,
                "supports_streaming": caps.supports_streaming,
                "supports_vision": caps.supports_vision,
                "supports_audio": caps.supports_audio,
                "supports_function_calling": caps.supports_function_calling,
                "supports_json_mode": caps.supports_json_mode,
                "supports_web_search": caps.supports_web_search,
                "vision_score": caps.vision_score,
                "audio_score": caps.audio_score,
            },
            "performance": {
                "avg_latency_ms": self.performance.avg_latency_ms,
                "reliability_percent": self.performance.reliability_percent,
            },
            "task_strengths": {
                "intents": {k.value: v for k, v in self.task_strengths.intents.items()},
                "domains": {k.value: v for k, v in self.task_strengths.domains.items()},
                "complexity": {k.value: v for k, v in self.task_strengths.complexity.items()},
            },
            "human_factors": dict(self.human_factors.__dict__),
            "specializations": list(self.specializations),
            "available": self.available,
        }


# =============================================================================
# PARSING & VALIDATION
# =============================================================================

def _ratio(value: Any, where: str) -> float:
    try:
        number = float(value)
    except (TypeError, ValueError):
        raise RegistryError(f"{where}: expected a number, got {value!r}")
    if not 0.0 <= number <= 1.0:
        raise RegistryError(f"{where}: {number} is outside [0, 1]")
    return number


def _strength_table(raw: Any, enum_cls, where: str) -> Dict:
    if not isinstance(raw, dict):
        raise RegistryError(f"{where}: missing strength table")
    table = {}
    for member in enum_cls:
        if member.value not in raw:
            raise RegistryError(f"{where}: missing entry for '{member.value}'")
        table[member] = _ratio(raw[member.value], f"{where}.{member.value}")
    unknown = set(raw) - {m.value for m in enum_cls}
    if unknown:
        raise RegistryError(f"{where}: unknown entries {sorted(unknown)}")
    return table


def parse_candidate(raw: Dict[str, Any]) -> CandidateDefinition:
    """
    Build a CandidateDefinition from its YAML mapping.

    Raises:
        RegistryError: On any missing field or out-of-range ratio
    """
    candidate_id = raw.get("id")
    if not candidate_id:
        raise RegistryError("candidate without id")

    try:
        pricing_raw = raw["pricing"]
        caps_raw = dict(raw.get("capabilities") or {})
        perf_raw = raw["performance"]
        strengths_raw = raw["task_strengths"]
        factors_raw = raw["human_factors"]

        pricing = Pricing(
            input_per_1k=float(pricing_raw["input_per_1k"]),
            output_per_1k=float(pricing_raw["output_per_1k"]),
        )
        for key in ("vision_score", "audio_score"):
            caps_raw[key] = _ratio(caps_raw.get(key, 0.0), f"{candidate_id}.capabilities.{key}")
        capabilities = Capabilities(**caps_raw)
        performance = Performance(
            avg_latency_ms=float(perf_raw["avg_latency_ms"]),
            reliability_percent=float(perf_raw.get("reliability_percent", 100.0)),
        )
        strengths = TaskStrengths(
            intents=_strength_table(strengths_raw.get("intents"), Intent, f"{candidate_id}.intents"),
            domains=_strength_table(strengths_raw.get("domains"), Domain, f"{candidate_id}.domains"),
            complexity=_strength_table(strengths_raw.get("complexity"), Complexity, f"{candidate_id}.complexity"),
        )
        human_factors = HumanFactors(**{
            key: _ratio(value, f"{candidate_id}.human_factors.{key}")
            for key, value in factors_raw.items()
        })
    except (KeyError, TypeError) as e:
        raise RegistryError(f"{candidate_id}: malformed definition ({e})") from e

    if not raw.get("provider"):
        raise RegistryError(f"{candidate_id}: missing 'provider'")
    if pricing.input_per_1k < 0 or pricing.output_per_1k < 0:
        raise RegistryError(f"{candidate_id}: negative pricing")
    if performance.avg_latency_ms < 0:
        raise RegistryError(f"{candidate_id}: negative latency")

    return CandidateDefinition(
        id=str(candidate_id),
        name=str(raw.get("name", candidate_id)),
        provider=str(raw["provider"]),
        description=str(raw.get("description", "")),
        pricing=pricing,
        capabilities=capabilities,
        performance=performance,
        task_strengths=strengths,
        human_factors=human_factors,
        specializations=tuple(raw.get("specializations") or ()),
        available=bool(raw.get("available", True)),
    )


# =============================================================================
# REGISTRY
# =============================================================================

class CandidateRegistry:
    """
    Immutable candidate catalog.

    Usage:
        reg = CandidateRegistry.from_file(Path("models.yaml"))
        reg.get("claude-sonnet-4-5")
        reg.by_modality_capability(reg.available(), "vision")
    """

    def __init__(self, candidates: Iterable[CandidateDefinition]):
        self._candidates: Tuple[CandidateDefinition, ...] = tuple(candidates)
        self._by_id: Dict[str, CandidateDefinition] = {}
        for candidate in self._candidates:
            if candidate.id in self._by_id:
                raise RegistryError(f"duplicate candidate id: {candidate.id}")
            self._by_id[candidate.id] = candidate

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'CandidateRegistry':
        raw_candidates = data.get("candidates")
        if not isinstance(raw_candidates, list) or not raw_candidates:
            raise RegistryError("catalog must define a non-empty 'candidates' list")
        return cls(parse_candidate(raw) for raw in raw_candidates)

    @classmethod
    def from_file(cls, filepath: Path) -> 'CandidateRegistry':
        if not filepath.exists():
            raise RegistryError(f"catalog file not found: {filepath}")
        reg = cls.from_dict(load_yaml(filepath))
        logger.info(f"Registry loaded: {len(reg)} candidates from {filepath.name}")
        return reg

    def __len__(self) -> int:
        return len(self._candidates)

    def __contains__(self, candidate_id: str) -> bool:
        return candidate_id in self._by_id

    # -------------------------------------------------------------------------
    # Lookups
    # -------------------------------------------------------------------------

    def all(self) -> List[CandidateDefinition]:
        return list(self._candidates)

    def available(self) -> List[CandidateDefinition]:
        return [c for c in self._candidates if c.available]

    def get(self, candidate_id: str) -> Optional[CandidateDefinition]:
        return self._by_id.get(candidate_id)

    def providers(self) -> List[str]:
        """Distinct providers in catalog order."""
        return list(dict.fromkeys(c.provider for c in self._candidates))

    # -------------------------------------------------------------------------
    # Filtering
    # -------------------------------------------------------------------------

    @staticmethod
    def filter_by_constraints(
        candidates: List[CandidateDefinition],
        constraints: Optional[Constraints],
    ) -> List[CandidateDefinition]:
        """Keep the candidates satisfying every populated constraint."""
        if constraints is None:
            return list(candidates)

        def passes(c: CandidateDefinition) -> bool:
            if constraints.allowed_models and c.id not in constraints.allowed_models:
                return False
            if c.id in constraints.excluded_models:
                return False
            if constraints.max_cost_per_1k_tokens is not None and c.avg_cost > constraints.max_cost_per_1k_tokens:
                return False
            if constraints.max_latency_ms is not None and c.performance.avg_latency_ms > constraints.max_latency_ms:
                return False
            if constraints.require_streaming and not c.capabilities.supports_streaming:
                return False
            if constraints.require_vision and not c.capabilities.supports_vision:
                return False
            if constraints.require_audio and not c.capabilities.supports_audio:
                return False
            return True

        return [c for c in candidates if passes(c)]

    @staticmethod
    def by_modality_capability(
        candidates: List[CandidateDefinition],
        modality_type: str,
    ) -> List[CandidateDefinition]:
        """Candidates with a nonzero vision/audio score, best first (stable)."""
        capable = [c for c in candidates if c.modality_score(modality_type) > 0]
        return sorted(capable, key=lambda c: c.modality_score(modality_type), reverse=True)


# =============================================================================
# GLOBAL INSTANCE
# =============================================================================

registry = CandidateRegistry.from_file(config.registry_file)


def get_candidate(candidate_id: str) -> Optional[CandidateDefinition]:
    """Convenience lookup on the global registry."""
    return registry.get(candidate_id)
