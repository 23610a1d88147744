#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Model-Compass - Prompt-to-Model Routing Engine
==============================================
Setup configuration for package installation.

Installation:
    pip install -e .              # Development mode (editable)
    pip install -e .[dev]         # With test tooling
    pip install .                 # Production mode

After installation:
    model-compass --help          # Show all commands
    model-compass route "prompt"  # Route a prompt
    model-compass benchmark       # Routing benchmark

License: MIT
"""

from setuptools import setup, find_packages
from pathlib import Path

# Read README for long description
readme_path = Path(__file__).parent / "README.md"
long_description = readme_path.read_text(encoding="utf-8") if readme_path.exists() else ""

# Version
__version__ = "1.0.0"

setup(
    name="model-compass",
    version=__version__,
    description="Rule-based routing of prompts to the best model across providers",
    long_description=long_description,
    long_description_content_type="text/markdown",
    license="MIT",

    # Package discovery
    packages=find_packages(include=["model_compass", "model_compass.*"]),
    include_package_data=True,

    # Python version requirement
    python_requires=">=3.10",

    # Core dependencies
    install_requires=[
        "pyyaml>=6.0",
        "numpy>=1.24.0",
        "tqdm>=4.65.0",
    ],

    # Optional dependencies
    extras_require={
        "dev": [
            "pytest>=7.0.0",
            "black>=23.0.0",
            "isort>=5.0.0",
            "mypy>=1.0.0",
        ],
    },

    # CLI entry points
    entry_points={
        "console_scripts": [
            "model-compass=model_compass.main:main",
        ],
    },

    # Package data
    package_data={
        "model_compass": [
            "config/*.yaml",
        ],
    },

    # Classifiers for PyPI
    classifiers=[
        "Development Status :: 4 - Beta",
        "Environment :: Console",
        "Intended Audience :: Developers",
        "License :: OSI Approved :: MIT License",
        "Operating System :: OS Independent",
        "Programming Language :: Python :: 3",
        "Programming Language :: Python :: 3.10",
        "Programming Language :: Python :: 3.11",
        "Programming Language :: Python :: 3.12",
        "Topic :: Scientific/Engineering :: Artificial Intelligence",
        "Topic :: Software Development :: Libraries :: Python Modules",
    ],

    # Keywords for searchability
    keywords=[
        "llm",
        "routing",
        "model-selection",
        "cli",
    ],
)
