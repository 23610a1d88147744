#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Entry point for running the package directly with python -m.

Usage Examples:
    python -m model_compass route "Write a haiku about autumn"
    python -m model_compass route "" --modality image --json
    python -m model_compass benchmark --quiet
"""

import sys

from .main import main

if __name__ == "__main__":
    sys.exit(main())
