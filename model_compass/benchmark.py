#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
BENCHMARK - Routing Quality Module 1.0
======================================

Routes a fixed suite of categorized prompts through the engine and
reports how the router behaves.

Features:
- Intent accuracy by category (expected vs detected)
- Provider distribution of primary picks (monopoly check)
- Latency statistics (mean, p50, p95, max) against the budget
- JSON and Markdown reports

Nothing is sent to any model: this measures the router itself.

Usage:
    model-compass benchmark
    model-compass benchmark --category coding --category creative
    model-compass benchmark --iterations 20 --output reports/
"""

import json
from collections import Counter
from dataclasses import dataclass, asdict, field
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional

import numpy as np
from tqdm import tqdm

from .context import RouteRequest
from .engine import RoutingEngine, engine as default_engine

# =============================================================================
# CONFIGURATION
# =============================================================================

# category -> list of (prompt, modality, expected intent or None)
BENCHMARK_PROMPTS: Dict[str, List[Dict]] = {
    "coding": [
        {"prompt": "Write a Python function to sort an array", "expected_intent": "coding"},
        {"prompt": "Debug this JavaScript API endpoint that returns a 500 error", "expected_intent": "coding"},
        {"prompt": "Refactor this SQL query to use a database index", "expected_intent": "coding"},
    ],
    "creative": [
        {"prompt": "Write a short story about a robot learning to love", "expected_intent": "creative"},
        {"prompt": "Compose a poem about the ocean at night", "expected_intent": "creative"},
        {"prompt": "Generate an image of a sunset over the mountains", "expected_intent": "creative"},
    ],
    "analysis": [
        {"prompt": "Compare the pros and cons of remote work for small teams", "expected_intent": "analysis"},
        {"prompt": "Analyze the sales trends in this quarterly data", "expected_intent": "analysis"},
    ],
    "factual": [
        {"prompt": "What is the capital of Australia?", "expected_intent": "factual"},
        {"prompt": "Who invented the telephone?", "expected_intent": "factual"},
    ],
    "conversation": [
        {"prompt": "hey how are you", "expected_intent": "conversation"},
        {"prompt": "Thanks so much for the help earlier", "expected_intent": "conversation"},
    ],
    "task": [
        {"prompt": "Plan a schedule for my week and draft an email to my manager", "expected_intent": "task"},
    ],
    "translation": [
        {"prompt": "Translate this paragraph into Spanish", "expected_intent": "translation"},
        {"prompt": "How do you say good morning in Japanese", "expected_intent": "translation"},
    ],
    "summarization": [
        {"prompt": "Summarize this article in three bullet points", "expected_intent": "summarization"},
    ],
    "brainstorm": [
        {"prompt": "Brainstorm ideas for a team building event", "expected_intent": "brainstorm"},
    ],
    "extraction": [
        {"prompt": "Extract all the names and email addresses from this text", "expected_intent": "extraction"},
    ],
    "modality": [
        {"prompt": "", "modality": "image", "expected_intent": None},
        {"prompt": "", "modality": "voice", "expected_intent": None},
        {"prompt": "What is shown in this picture?", "modality": "text+image", "expected_intent": None},
        {"prompt": "Transcribe and summarize this voice memo", "modality": "text+voice", "expected_intent": None},
    ],
}


# =============================================================================
# DATACLASSES
# =============================================================================

@dataclass
class BenchmarkResult:
    """One routed prompt."""
    category: str
    prompt: str
    modality: str
    expected_intent: Optional[str]
    detected_intent: str
    primary_id: str
    primary_provider: str
    confidence: float
    latency_ms: float
    over_budget: bool = False

    @property
    def intent_correct(self) -> Optional[bool]:
        if self.expected_intent is None:
            return None
        return self.detected_intent == self.expected_intent

    def to_dict(self) -> Dict:
        data = asdict(self)
        data["intent_correct"] = self.intent_correct
        return data


@dataclass
class BenchmarkSummary:
    """Aggregated benchmark figures."""
    total_routes: int
    intent_accuracy: float
    accuracy_by_category: Dict[str, float]
    provider_wins: Dict[str, int]
    max_provider_share: float
    latency_mean_ms: float
    latency_p50_ms: float
    latency_p95_ms: float
    latency_max_ms: float
    over_budget: int
    budget_ms: float
    timestamp: str = field(default_factory=lambda: datetime.now().isoformat(timespec="seconds"))

    def to_dict(self) -> Dict:
        return asdict(self)


# =============================================================================
# MAIN CLASS
# =============================================================================

class RoutingBenchmark:
    """
    Router benchmark.

    Routes every prompt of the selected categories, optionally several
    times for stabler latency figures, and summarizes the outcome.
    """

    def __init__(self, routing_engine: Optional[RoutingEngine] = None, iterations: int = 1):
        """
        Initialize the benchmark.

        Args:
            routing_engine: Engine under test (global engine if None)
            iterations: Times each prompt is routed
        """
        self.engine = routing_engine or default_engine
        self.iterations = max(1, iterations)
        self.results: List[BenchmarkResult] = []
        self.timestamp = datetime.now().strftime("%Y-%m-%d_%H-%M")

    # -------------------------------------------------------------------------
    # EXECUTION
    # -------------------------------------------------------------------------

    def run(self, categories: Optional[List[str]] = None, verbose: bool = True) -> List[BenchmarkResult]:
        """
        Run the benchmark.

        Args:
            categories: Categories to run (all if None)
            verbose: Show a progress bar

        Returns:
            List of results

        Raises:
            ValueError: On an unknown category
        """
        selected = categories or list(BENCHMARK_PROMPTS)
        unknown = [c for c in selected if c not in BENCHMARK_PROMPTS]
        if unknown:
            raise ValueError(f"Unknown benchmark categories: {', '.join(unknown)}")

        cases = [(category, case) for category in selected for case in BENCHMARK_PROMPTS[category]]
        jobs = [job for job in cases for _ in range(self.iterations)]
        budget = self.engine.settings.latency_budget_ms

        self.results = []
        progress = tqdm(jobs, desc="Routing", unit="prompt", disable=not verbose)
        for category, case in progress:
            modality = case.get("modality", "text")
            response = self.engine.route(RouteRequest(prompt=case["prompt"], modality=modality))
            self.results.append(BenchmarkResult(
                category=category,
                prompt=case["prompt"],
                modality=modality,
                expected_intent=case.get("expected_intent"),
                detected_intent=response.analysis.intent.value,
                primary_id=response.primary_model.id,
                primary_provider=response.primary_model.provider,
                confidence=response.confidence,
                latency_ms=response.timing.total_ms,
                over_budget=response.timing.total_ms > budget,
            ))

        return self.results

    # -------------------------------------------------------------------------
    # ANALYSIS
    # -------------------------------------------------------------------------

    def summarize(self) -> BenchmarkSummary:
        """Aggregate the current results."""
        if not self.results:
            raise ValueError("Benchmark was not run")

        graded = [r for r in self.results if r.intent_correct is not None]
        accuracy = sum(r.intent_correct for r in graded) / len(graded) if graded else 0.0

        by_category: Dict[str, float] = {}
        for category in dict.fromkeys(r.category for r in graded):
            rows = [r for r in graded if r.category == category]
            by_category[category] = sum(r.intent_correct for r in rows) / len(rows)

        wins = Counter(r.primary_provider for r in self.results)
        latencies = np.array([r.latency_ms for r in self.results], dtype=float)

        return BenchmarkSummary(
            total_routes=len(self.results),
            intent_accuracy=round(accuracy, 3),
            accuracy_by_category={k: round(v, 3) for k, v in by_category.items()},
            provider_wins=dict(wins.most_common()),
            max_provider_share=round(max(wins.values()) / len(self.results), 3),
            latency_mean_ms=round(float(latencies.mean()), 3),
            latency_p50_ms=round(float(np.percentile(latencies, 50)), 3),
            latency_p95_ms=round(float(np.percentile(latencies, 95)), 3),
            latency_max_ms=round(float(latencies.max()), 3),
            over_budget=sum(r.over_budget for r in self.results),
            budget_ms=self.engine.settings.latency_budget_ms,
        )

    def generate_report(self) -> str:
        """Generate a Markdown report."""
        if not self.results:
            return "# No Results\n\nBenchmark was not run."

        summary = self.summarize()
        lines = [
            "# Routing Benchmark",
            f"## Generated on {datetime.now().strftime('%Y-%m-%d %H:%M')}",
            "",
            f"**Routes:** {summary.total_routes} ({self.iterations} iteration(s) per prompt)",
            f"**Intent accuracy:** {summary.intent_accuracy:.0%}",
            "",
            "---",
            "",
            "## Accuracy by Category",
            "",
            "| Category | Accuracy |",
            "|----------|----------|",
        ]
        for category, value in summary.accuracy_by_category.items():
            lines.append(f"| {category} | {value:.0%} |")

        lines.extend([
            "",
            "## Provider Distribution",
            "",
            "| Provider | Primary picks |",
            "|----------|---------------|",
        ])
        for provider, count in summary.provider_wins.items():
            lines.append(f"| {provider} | {count} |")
        lines.append(f"\n**Largest provider share:** {summary.max_provider_share:.0%}")

        lines.extend([
            "",
            "## Latency",
            "",
            f"- Mean: {summary.latency_mean_ms:.2f}ms",
            f"- p50: {summary.latency_p50_ms:.2f}ms",
            f"- p95: {summary.latency_p95_ms:.2f}ms",
            f"- Max: {summary.latency_max_ms:.2f}ms",
            f"- Over {summary.budget_ms:.0f}ms budget: {summary.over_budget}",
            "",
            "## Misclassified Prompts",
            "",
        ])
        misses = [r for r in self.results if r.intent_correct is False]
        if misses:
            for r in dict((r.prompt, r) for r in misses).values():
                lines.append(f"- `{r.prompt}`: expected {r.expected_intent}, got {r.detected_intent}")
        else:
            lines.append("None.")

        return "\n".join(lines)

    def save_results(self, output_dir: Path) -> Dict[str, Path]:
        """Write JSON and Markdown reports; returns their paths."""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        json_path = output_dir / f"routing_benchmark_{self.timestamp}.json"
        md_path = output_dir / f"routing_benchmark_{self.timestamp}.md"

        with open(json_path, 'w', encoding='utf-8') as f:
            json.dump(
                {
                    "summary": self.summarize().to_dict(),
                    "results": [r.to_dict() for r in self.results],
                },
                f,
                indent=2,
                ensure_ascii=False,
            )

        with open(md_path, 'w', encoding='utf-8') as f:
            f.write(self.generate_report())

        return {"json": json_path, "markdown": md_path}


# =============================================================================
# OUTPUT
# =============================================================================

def print_summary(summary: BenchmarkSummary) -> None:
    print(f"\n{'='*60}")
    print("[TEST] ROUTING BENCHMARK")
    print(f"{'='*60}")
    print(f"[>] Routes:          {summary.total_routes}")
    print(f"[>] Intent accuracy: {summary.intent_accuracy:.0%}")
    for category, value in summary.accuracy_by_category.items():
        print(f"      {category:<14} {value:.0%}")
    print(f"[>] Provider wins:   {summary.provider_wins}")
    print(f"[>] Max share:       {summary.max_provider_share:.0%}")
    print(f"[>] Latency p50/p95: {summary.latency_p50_ms:.2f}ms / {summary.latency_p95_ms:.2f}ms")
    if summary.over_budget:
        print(f"[WARN] {summary.over_budget} route(s) over the {summary.budget_ms:.0f}ms budget")
    print(f"{'='*60}\n")
