#!/usr/bin/env python3
"""
Basic usage example for Model-Compass.

This script demonstrates how to use Model-Compass programmatically:
analyze prompts, route them, and read the decision.
"""

from model_compass.analyzer import TaskAnalyzer
from model_compass.context import RouteRequest
from model_compass.engine import RoutingEngine


def main():
    # Initialize components
    analyzer = TaskAnalyzer()
    engine = RoutingEngine()

    # Example queries
    queries = [
        "Write a Python function to calculate the Fibonacci sequence",
        "Explain what a neural network is in simple terms",
        "Write a short story about a lighthouse keeper",
    ]

    for query in queries:
        print(f"\n{'='*60}")
        print(f"Query: {query}")
        print('='*60)

        # Step 1: Analyze the query
        analysis = analyzer.analyze(query)
        print(f"\nAnalysis:")
        print(f"   Intent: {analysis.intent.value}")
        print(f"   Domain: {analysis.domain.value}")
        print(f"   Complexity: {analysis.complexity.value}")
        print(f"   Keywords: {', '.join(analysis.keywords)}")

        # Step 2: Route to the best model
        response = engine.route(RouteRequest(prompt=query))
        primary = response.primary_model
        print(f"\nRouting:")
        print(f"   Model: {primary.name} ({primary.provider})")
        print(f"   Confidence: {response.confidence:.0%}")
        print(f"   Why: {primary.reasoning.summary}")
        for backup in response.backup_models:
            print(f"   Backup: {backup.name} ({backup.provider})")


def simple_example():
    """
    Even simpler example using the global instance and a plain dict,
    with human context and a provider restriction.
    """
    from model_compass import route

    response = route({
        "prompt": "Help me plan tomorrow's meetings",
        "human_context": {
            "emotional_state": {"mood": "tired", "energy_level": "low"},
            "temporal_context": {"local_time": "23:40"},
        },
        "available_providers": ["anthropic", "google"],
    })

    print(f"{response.primary_model.name}: {response.primary_model.reasoning.summary}")
    if response.provider_hint:
        print(f"Hint: {response.provider_hint.reason}")

    # Image input: fast path, no text analysis
    image = route({"prompt": "", "modality": "image"})
    print(f"Image -> {image.primary_model.name} in {image.timing.total_ms:.2f}ms")


if __name__ == "__main__":
    main()
    # simple_example()  # Uncomment to try human context
