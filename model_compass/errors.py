#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
ERRORS - MODEL-COMPASS 1.0
==========================

Exception hierarchy for the routing core.

Callers outside the core (CLI, HTTP layer) catch CompassError and map it
to their own error surface. NoCandidatesError is the only error a routing
call raises at request time; everything else comes from loading data.
"""


class CompassError(Exception):
    """Base class for every error raised by model_compass."""


class ConfigError(CompassError):
    """Settings file unreadable or invalid."""


class RegistryError(ConfigError):
    """Candidate catalog malformed (missing table entry, ratio out of range, ...)."""


class NoCandidatesError(CompassError):
    """No candidate left to select from."""

    def __init__(self, message: str = "No candidates available for selection"):
        super().__init__(message)
