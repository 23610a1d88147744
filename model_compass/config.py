#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
CENTRALIZED CONFIGURATION - MODEL-COMPASS 1.0
=============================================

Loads router settings from YAML and holds the scoring weight profiles.

Settings come from config/settings.yaml inside the package, optionally
overridden by a user file named in the MODEL_COMPASS_CONFIG environment
variable. Weight profiles are code constants: changing them changes
routing behavior and belongs in a release, not in a settings file.
"""

import os
import copy
import logging
from dataclasses import dataclass, asdict
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from .errors import ConfigError

logger = logging.getLogger(__name__)

# =============================================================================
# DEFAULT PATHS
# =============================================================================

PROJECT_ROOT = Path(__file__).parent

CONFIG_DIR = PROJECT_ROOT / "config"

SETTINGS_FILE = CONFIG_DIR / "settings.yaml"

# Environment variable pointing to a user override file
ENV_CONFIG_VAR = "MODEL_COMPASS_CONFIG"

# Used when a key is missing from every settings file
DEFAULT_SETTINGS: Dict[str, Any] = {
    "engine": {
        "latency_budget_ms": 50,
        "decision_id_prefix": "dec_",
        "combined_modality_weight": 0.6,
    },
    "scoring": {
        "diversity_margin": 0.06,
    },
    "registry": {
        "file": "models.yaml",
    },
    "logging": {
        "level": "WARNING",
    },
}

# =============================================================================
# YAML LOADING
# =============================================================================

def load_yaml(filepath: Path) -> Dict[str, Any]:
    """
    Load a YAML mapping from disk.

    Args:
        filepath: Path to YAML file

    Returns:
        Dictionary with file contents ({} when the file is missing)

    Raises:
        ConfigError: If the file is malformed or not a mapping
    """
    if not filepath.exists():
        logger.warning(f"Config file not found: {filepath}")
        return {}

    try:
        with open(filepath, 'r', encoding='utf-8') as f:
            data = yaml.safe_load(f) or {}
    except yaml.YAMLError as e:
        raise ConfigError(f"YAML parsing error in {filepath}: {e}") from e
    except OSError as e:
        raise ConfigError(f"Cannot read {filepath}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"{filepath} must contain a mapping at top level")

    logger.debug(f"Config loaded from {filepath}")
    return data


def deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """Return base updated recursively with override (inputs untouched)."""
    merged = copy.deepcopy(base)
    for key, value in override.items():
        if isinstance(value, dict) and isinstance(merged.get(key), dict):
            merged[key] = deep_merge(merged[key], value)
        else:
            merged[key] = copy.deepcopy(value)
    return merged


# =============================================================================
# MAIN CONFIGURATION CLASS
# =============================================================================

class CompassConfig:
    """
    Centralized router settings.

    Singleton that loads and exposes all settings.

    Usage:
        config = CompassConfig()
        budget = config.latency_budget_ms
        margin = config.get("scoring.diversity_margin", 0.06)
    """

    _instance: Optional['CompassConfig'] = None

    def __new__(cls):
        """Singleton pattern - only one instance."""
        if cls._instance is None:
            cls._instance = super().__new__(cls)
            cls._instance._initialized = False
        return cls._instance

    def __init__(self):
        """Initialize configuration (only once)."""
        if self._initialized:
            return

        self._settings: Dict[str, Any] = {}
        self.user_config_file: Optional[Path] = None

        self.reload()
        self._initialized = True

    def reload(self) -> None:
        """Reload settings from the package file and the user override."""
        settings = deep_merge(DEFAULT_SETTINGS, load_yaml(SETTINGS_FILE))

        override = os.environ.get(ENV_CONFIG_VAR)
        self.user_config_file = Path(override).expanduser() if override else None
        if self.user_config_file is not None:
            if not self.user_config_file.exists():
                raise ConfigError(f"{ENV_CONFIG_VAR} points to a missing file: {self.user_config_file}")
            settings = deep_merge(settings, load_yaml(self.user_config_file))
            logger.info(f"User settings applied from {self.user_config_file}")

        self._settings = settings
        self._validate()
        logger.debug("Configuration reloaded")

    def _validate(self) -> None:
        if self.latency_budget_ms <= 0:
            raise ConfigError("engine.latency_budget_ms must be positive")
        if not 0.0 <= self.combined_modality_weight <= 1.0:
            raise ConfigError("engine.combined_modality_weight must lie in [0, 1]")
        if self.diversity_margin < 0:
            raise ConfigError("scoring.diversity_margin must not be negative")

    # -------------------------------------------------------------------------
    # Generic Access
    # -------------------------------------------------------------------------

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a setting by dotted key.

        Args:
            key: Dotted path, e.g. "engine.latency_budget_ms"
            default: Returned when any segment is missing
        """
        node: Any = self._settings
        for part in key.split("."):
            if not isinstance(node, dict) or part not in node:
                return default
            node = node[part]
        return node

    def as_dict(self) -> Dict[str, Any]:
        return copy.deepcopy(self._settings)

    # -------------------------------------------------------------------------
    # Typed Access
    # -------------------------------------------------------------------------

    @property
    def latency_budget_ms(self) -> float:
        return float(self.get("engine.latency_budget_ms", 50))

    @property
    def decision_id_prefix(self) -> str:
        return str(self.get("engine.decision_id_prefix", "dec_"))

    @property
    def combined_modality_weight(self) -> float:
        return float(self.get("engine.combined_modality_weight", 0.6))

    @property
    def diversity_margin(self) -> float:
        return float(self.get("scoring.diversity_margin", 0.06))

    @property
    def registry_file(self) -> Path:
        path = Path(self.get("registry.file", "models.yaml")).expanduser()
        return path if path.is_absolute() else CONFIG_DIR / path

    @property
    def log_level(self) -> str:
        return str(self.get("logging.level", "WARNING")).upper()


# =============================================================================
# SCORING WEIGHT PROFILES
# =============================================================================

@dataclass(frozen=True)
class ScoringWeights:
    """Weight of each scoring factor. A profile sums to 1.0."""
    task_fitness: float
    specialization: float
    modality_fitness: float
    cost_efficiency: float
    user_preference: float
    conversation_coherence: float
    speed: float
    human_context_fit: float = 0.0

    def total(self) -> float:
        return sum(asdict(self).values())

    def to_dict(self) -> Dict[str, float]:
        return asdict(self)


DEFAULT_WEIGHTS = ScoringWeights(
    task_fitness=0.45,
    specialization=0.05,
    modality_fitness=0.15,
    cost_efficiency=0.10,
    user_preference=0.10,
    conversation_coherence=0.08,
    speed=0.07,
)

# Human context takes 0.15, mostly out of task fitness
HUMAN_CONTEXT_WEIGHTS = ScoringWeights(
    task_fitness=0.36,
    specialization=0.04,
    modality_fitness=0.12,
    cost_efficiency=0.08,
    user_preference=0.10,
    conversation_coherence=0.08,
    speed=0.07,
    human_context_fit=0.15,
)


def weights_for(has_human_context: bool) -> ScoringWeights:
    """Pick the weight profile for a request."""
    return HUMAN_CONTEXT_WEIGHTS if has_human_context else DEFAULT_WEIGHTS


# =============================================================================
# GLOBAL INSTANCE
# =============================================================================

config = CompassConfig()


def get_config() -> CompassConfig:
    """Return the global configuration instance."""
    return config


def reload_config() -> CompassConfig:
    """Reload settings from disk and return the global instance."""
    config.reload()
    return config
