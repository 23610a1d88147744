#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
MODEL-COMPASS - Prompt-to-Model Routing Engine
==============================================

Picks the best model for a prompt among candidates from several providers,
with backups, a confidence value and a plain-language explanation.

Features:
    - Rule-based prompt analysis (intent, domain, complexity, tone, keywords)
    - Multi-factor candidate scoring with optional human context
    - Fast-path for pure image/voice requests, blended scoring for mixed ones
    - Provider diversity among the top picks
    - Routing benchmark with accuracy, provider spread and latency reports

Usage:
    from model_compass import route, RouteRequest

    response = route(RouteRequest(prompt="Write a Python function to sort an array"))
    print(response.primary_model.name, response.confidence)

Version: 1.0.0
License: MIT
"""

__version__ = "1.0.0"
__license__ = "MIT"

from .errors import CompassError, ConfigError, RegistryError, NoCandidatesError
from .config import config, get_config, reload_config
from .analyzer import analyzer, analyze, QueryAnalysis, Intent, Domain, Complexity, Tone, Modality
from .context import (
    RouteRequest,
    HumanContext,
    Constraints,
    ConversationContext,
)
from .registry import registry, CandidateRegistry, CandidateDefinition
from .engine import engine, route, analyze_only, RoutingEngine, RouteResponse, AnalyzeResponse

__all__ = [
    "__version__",
    "CompassError",
    "ConfigError",
    "RegistryError",
    "NoCandidatesError",
    "config",
    "get_config",
    "reload_config",
    "analyzer",
    "analyze",
    "QueryAnalysis",
    "Intent",
    "Domain",
    "Complexity",
    "Tone",
    "Modality",
    "RouteRequest",
    "HumanContext",
    "Constraints",
    "ConversationContext",
    "registry",
    "CandidateRegistry",
    "CandidateDefinition",
    "engine",
    "route",
    "analyze_only",
    "RoutingEngine",
    "RouteResponse",
    "AnalyzeResponse",
]
