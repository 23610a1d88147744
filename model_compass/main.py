#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
Model-Compass 1.0 - CLI Entry Point
===================================

Command-line interface for the model-compass routing engine.

Usage:
    model-compass route "prompt" [--modality M] [--json] [context flags]
    model-compass analyze "prompt" [--modality M] [--json]
    model-compass models list [--all]
    model-compass models show <id>
    model-compass benchmark [--category C] [--iterations N] [--output DIR]
    model-compass config show
    model-compass --version
"""

import argparse
import json
import logging
import sys
from pathlib import Path
from typing import Any, Dict, List, Optional

from . import __version__
from .errors import CompassError

logger = logging.getLogger(__name__)


def _print_json(data: Dict[str, Any]) -> None:
    print(json.dumps(data, indent=2, ensure_ascii=False))


def _print_analysis(analysis) -> None:
    print(f"   Intent:     {analysis.intent.value}")
    print(f"   Domain:     {analysis.domain.value}")
    print(f"   Complexity: {analysis.complexity.value}")
    print(f"   Tone:       {analysis.tone.value}")
    print(f"   Modality:   {analysis.modality.value}")
    if analysis.keywords:
        print(f"   Keywords:   {', '.join(analysis.keywords)}")


# =============================================================================
# ROUTE COMMAND
# =============================================================================

def build_request(args) -> 'RouteRequest':
    """Turn route flags into a RouteRequest (plain dict through from_dict)."""
    from .context import RouteRequest

    data: Dict[str, Any] = {"prompt": args.prompt, "modality": args.modality}

    if args.previous_model:
        data["conversation_context"] = {"previous_model_used": args.previous_model}

    human: Dict[str, Dict[str, Any]] = {}
    if args.mood or args.energy:
        human["emotional_state"] = {"mood": args.mood, "energy_level": args.energy}
    if args.local_time or args.working_hours is not None:
        human["temporal_context"] = {"local_time": args.local_time, "is_working_hours": args.working_hours}
    if args.style or args.length or args.prefer or args.avoid:
        human["user_preferences"] = {
            "preferred_response_style": args.style,
            "preferred_response_length": args.length,
            "preferred_models": args.prefer,
            "avoid_models": args.avoid,
        }
    if human:
        data["human_context"] = human

    constraints = {
        "max_cost_per_1k_tokens": args.max_cost,
        "max_latency_ms": args.max_latency,
        "allowed_models": args.allow,
        "excluded_models": args.exclude,
        "require_streaming": args.require_streaming,
        "require_vision": args.require_vision,
        "require_audio": args.require_audio,
    }
    if any(v for v in constraints.values()) or args.max_cost is not None or args.max_latency is not None:
        data["constraints"] = constraints

    if args.provider:
        data["available_providers"] = args.provider

    return RouteRequest.from_dict(data)


def cmd_route(args):
    """Route a prompt and print the decision."""
    from .engine import engine

    response = engine.route(build_request(args))
    if args.json:
        _print_json(response.to_dict())
        return

    primary = response.primary_model
    print(f"\n[>] Decision {response.decision_id}")
    print(f"\n[OK] {primary.name} ({primary.provider}) score {primary.score:.3f}, "
          f"confidence {response.confidence:.0%}")
    print(f"     {primary.reasoning.summary}")
    for factor in primary.reasoning.factors:
        print(f"       [{factor.impact.value:<8}] {factor.name}: {factor.detail}")

    if response.backup_models:
        print("\n   Backups:")
        for backup in response.backup_models:
            print(f"      - {backup.name} ({backup.provider}) {backup.score:.3f}: {backup.reasoning.summary}")

    if response.provider_hint:
        print(f"\n[!] {response.provider_hint.reason}")

    print("\n   Analysis:")
    _print_analysis(response.analysis)
    print(f"\n   Timing: {response.timing.total_ms:.2f}ms total")


# =============================================================================
# ANALYZE COMMAND
# =============================================================================

def cmd_analyze(args):
    """Analyze a prompt without routing it."""
    from .engine import engine

    response = engine.analyze_only(args.prompt, args.modality)
    if args.json:
        _print_json(response.to_dict())
        return

    print("\n[>] Analysis:\n")
    _print_analysis(response.analysis)
    print(f"\n   Took {response.analysis_ms:.2f}ms")


# =============================================================================
# MODELS COMMAND
# =============================================================================

def cmd_models(args):
    """List or show registry candidates."""
    from .registry import registry

    if args.models_action == "list":
        candidates = registry.all() if args.all else registry.available()
        print(f"\n[>] {len(candidates)} candidate(s):\n")
        for c in candidates:
            flags = []
            if c.capabilities.supports_vision:
                flags.append("vision")
            if c.capabilities.supports_audio:
                flags.append("audio")
            if not c.available:
                flags.append("unavailable")
            suffix = f" [{', '.join(flags)}]" if flags else ""
            print(f"   {c.id:<24} {c.provider:<10} ${c.avg_cost:.5f}/1K  "
                  f"{c.performance.avg_latency_ms:>5.0f}ms{suffix}")
        return

    if not args.model_id:
        print("[ERR] Usage: model-compass models show <id>")
        sys.exit(1)

    candidate = registry.get(args.model_id)
    if candidate is None:
        print(f"[ERR] Unknown model: {args.model_id}")
        sys.exit(1)
    _print_json(candidate.to_dict())


# =============================================================================
# BENCHMARK COMMAND
# =============================================================================

def cmd_benchmark(args):
    """Run the routing benchmark."""
    from .benchmark import RoutingBenchmark, print_summary

    bench = RoutingBenchmark(iterations=args.iterations)
    try:
        bench.run(categories=args.category, verbose=not args.quiet)
    except ValueError as e:
        print(f"[ERR] {e}")
        sys.exit(1)

    print_summary(bench.summarize())

    if args.output:
        paths = bench.save_results(args.output)
        print("[>] Results saved:")
        for path in paths.values():
            print(f"   - {path}")


# =============================================================================
# CONFIG COMMAND
# =============================================================================

def cmd_config(args):
    """Show the effective configuration."""
    from .config import config, DEFAULT_WEIGHTS, HUMAN_CONTEXT_WEIGHTS

    print("\n[>] Current Configuration:\n")
    for section, values in config.as_dict().items():
        print(f"   {section}:")
        if isinstance(values, dict):
            for key, value in values.items():
                print(f"      {key}: {value}")
        else:
            print(f"      {values}")

    print("\n   Weights (default / with human context):")
    human = HUMAN_CONTEXT_WEIGHTS.to_dict()
    for name, value in DEFAULT_WEIGHTS.to_dict().items():
        print(f"      {name:<24} {value:.2f} / {human[name]:.2f}")


# =============================================================================
# MAIN PARSER
# =============================================================================

def _add_modality(parser: argparse.ArgumentParser) -> None:
    parser.add_argument(
        "--modality", "-m",
        default="text",
        help="text, image, voice, text+image or text+voice (aliases accepted)"
    )


def create_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="model-compass",
        description="Model-Compass - pick the best model for a prompt",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  model-compass route "Write a Python function to sort an array"
  model-compass route "Summarize this report" --mood stressed --style concise
  model-compass route "" --modality image --json
  model-compass route "Explain recursion" --provider anthropic --max-cost 0.01
  model-compass analyze "Compose a poem about the ocean"
  model-compass models list --all
  model-compass benchmark --iterations 10 --output reports/
        """
    )
    parser.add_argument(
        "--version", "-v",
        action="version",
        version=f"Model-Compass {__version__}"
    )
    parser.add_argument(
        "--debug", "-d",
        action="store_true",
        help="Enable debug logging"
    )

    subparsers = parser.add_subparsers(dest="command", help="Available commands")

    # -------------------------------------------------------------------------
    # Command: route
    # -------------------------------------------------------------------------
    route_parser = subparsers.add_parser(
        "route",
        help="Route a prompt to the best model",
        description="Analyze, score and select a primary model plus backups."
    )
    route_parser.add_argument("prompt", help="Prompt text (may be empty for image/voice)")
    _add_modality(route_parser)
    route_parser.add_argument("--json", action="store_true", help="Print the full decision as JSON")
    route_parser.add_argument("--previous-model", help="Model used for the previous message")

    human = route_parser.add_argument_group("human context")
    human.add_argument("--mood", help="happy, neutral, stressed, frustrated, excited, tired, anxious, calm")
    human.add_argument("--energy", help="low, moderate or high")
    human.add_argument("--local-time", help="Local time as HH:MM")
    hours = human.add_mutually_exclusive_group()
    hours.add_argument("--working-hours", dest="working_hours", action="store_true", default=None,
                       help="User is within working hours")
    hours.add_argument("--after-hours", dest="working_hours", action="store_false",
                       help="User is outside working hours")
    human.add_argument("--style", help="concise, detailed, conversational, formal or casual")
    human.add_argument("--length", help="short, medium or long")
    human.add_argument("--prefer", action="append", default=[], metavar="ID", help="Preferred model (repeatable)")
    human.add_argument("--avoid", action="append", default=[], metavar="ID", help="Model to avoid (repeatable)")

    limits = route_parser.add_argument_group("constraints")
    limits.add_argument("--max-cost", type=float, help="Max average cost per 1K tokens")
    limits.add_argument("--max-latency", type=float, help="Max average latency in ms")
    limits.add_argument("--allow", action="append", default=[], metavar="ID", help="Allowed model (repeatable)")
    limits.add_argument("--exclude", action="append", default=[], metavar="ID", help="Excluded model (repeatable)")
    limits.add_argument("--require-streaming", action="store_true")
    limits.add_argument("--require-vision", action="store_true")
    limits.add_argument("--require-audio", action="store_true")
    limits.add_argument("--provider", action="append", default=[], metavar="P",
                        help="Provider the caller can use (repeatable)")
    route_parser.set_defaults(working_hours=None)

    # -------------------------------------------------------------------------
    # Command: analyze
    # -------------------------------------------------------------------------
    analyze_parser = subparsers.add_parser(
        "analyze",
        help="Analyze a prompt without routing",
        description="Show intent, domain, complexity, tone and keywords."
    )
    analyze_parser.add_argument("prompt", help="Prompt text")
    _add_modality(analyze_parser)
    analyze_parser.add_argument("--json", action="store_true", help="Print JSON")

    # -------------------------------------------------------------------------
    # Command: models
    # -------------------------------------------------------------------------
    models_parser = subparsers.add_parser(
        "models",
        help="Candidate registry",
        description="List or inspect candidate models."
    )
    models_parser.add_argument("models_action", choices=["list", "show"], help="Action to perform")
    models_parser.add_argument("model_id", nargs="?", help="Model ID (required for 'show')")
    models_parser.add_argument("--all", action="store_true", help="Include unavailable models")

    # -------------------------------------------------------------------------
    # Command: benchmark
    # -------------------------------------------------------------------------
    bench_parser = subparsers.add_parser(
        "benchmark",
        help="Run the routing benchmark",
        description="Route a fixed prompt suite and report accuracy, provider spread and latency."
    )
    bench_parser.add_argument("--category", "-c", action="append", help="Category to run (repeatable)")
    bench_parser.add_argument("--iterations", "-n", type=int, default=1, help="Routes per prompt (default: 1)")
    bench_parser.add_argument("--output", "-o", type=Path, help="Directory for JSON/Markdown reports")
    bench_parser.add_argument("--quiet", "-q", action="store_true", help="No progress bar")

    # -------------------------------------------------------------------------
    # Command: config
    # -------------------------------------------------------------------------
    config_parser = subparsers.add_parser(
        "config",
        help="Configuration",
        description="Show the effective configuration."
    )
    config_parser.add_argument("config_action", choices=["show"], help="Action to perform")

    return parser


def main(argv: Optional[List[str]] = None) -> int:
    """Main entry point."""
    parser = create_parser()
    args = parser.parse_args(argv)

    from .config import config
    level = logging.DEBUG if args.debug else getattr(logging, config.log_level, logging.WARNING)
    logging.basicConfig(level=level, format="%(levelname)s %(name)s: %(message)s")

    commands = {
        "route": cmd_route,
        "analyze": cmd_analyze,
        "models": cmd_models,
        "benchmark": cmd_benchmark,
        "config": cmd_config,
    }

    if args.command not in commands:
        parser.print_help()
        return 1

    try:
        commands[args.command](args)
    except CompassError as e:
        logger.debug("Command failed", exc_info=True)
        print(f"[ERR] {e}")
        return 1
    except KeyboardInterrupt:
        print("\n[!] Interrupted")
        return 130
    return 0


if __name__ == "__main__":
    sys.exit(main())
