# -*- coding: utf-8 -*-
import pytest

from model_compass.analyzer import (
    Complexity,
    Domain,
    Intent,
    Modality,
    Tone,
    TaskAnalyzer,
    default_analysis,
    fast_path_analysis,
    get_modality_type,
    is_combined_modality,
    is_pure_modality,
    parse_modality,
)
from model_compass.context import HumanContext, EmotionalState, Mood


@pytest.fixture
def analyzer():
    return TaskAnalyzer()


# -----------------------------------------------------------------------------
# Intent
# -----------------------------------------------------------------------------

@pytest.mark.parametrize("prompt,intent", [
    ("Write a Python function to sort an array", Intent.CODING),
    ("Debug this JavaScript API endpoint that returns a 500 error", Intent.CODING),
    ("Write a short story about a robot learning to love", Intent.CREATIVE),
    ("Compose a poem about the ocean at night", Intent.CREATIVE),
    ("Generate an image of a sunset", Intent.CREATIVE),
    ("Compare the pros and cons of remote work for small teams", Intent.ANALYSIS),
    ("What is the capital of Australia?", Intent.FACTUAL),
    ("hey how are you", Intent.CONVERSATION),
    ("Plan a schedule for my week and draft an email to my manager", Intent.TASK),
    ("Brainstorm ideas for a team building event", Intent.BRAINSTORM),
    ("Translate this paragraph into Spanish", Intent.TRANSLATION),
    ("Summarize this article in three bullet points", Intent.SUMMARIZATION),
    ("Extract all the names and email addresses from this text", Intent.EXTRACTION),
])
def test_detect_intent(analyzer, prompt, intent):
    assert analyzer.detect_intent(prompt) == intent


def test_photo_analysis_is_not_creative(analyzer):
    prompt = "Analyze the composition of this photograph and describe the lighting"
    assert analyzer.detect_intent(prompt) != Intent.CREATIVE


@pytest.mark.parametrize("prompt, intent", [
    ("Analyze the composition of this image", Intent.ANALYSIS),
    ("Evaluate the lighting in this picture", Intent.ANALYSIS),
    ("What is in this picture?", Intent.FACTUAL),
])
def test_image_mentions_alone_are_not_creative(analyzer, prompt, intent):
    assert analyzer.detect_intent(prompt) == intent


def test_describe_image_is_not_creative(analyzer):
    assert analyzer.detect_intent("Describe this image") != Intent.CREATIVE
    assert analyzer.detect_intent("Draw me a cat") == Intent.CREATIVE


def test_technical_phrasing_vetoes_creative_pattern(analyzer):
    assert not analyzer.has_creative_pattern("Write a script that can debug the story parser")
    assert analyzer.has_creative_pattern("Tell me a story about dragons")


def test_unmatched_question_is_factual(analyzer):
    assert analyzer.detect_intent("Why is the sky blue?") == Intent.FACTUAL
    assert analyzer.detect_intent("zxcv qwerty") == Intent.CONVERSATION


# -----------------------------------------------------------------------------
# Domain
# -----------------------------------------------------------------------------

def test_robot_story_is_creative_arts(analyzer):
    prompt = "Write a short story about a robot learning to love"
    assert analyzer.detect_domain(prompt, Intent.CREATIVE) == Domain.CREATIVE_ARTS


def test_domain_keywords(analyzer):
    assert analyzer.detect_domain("Write a Python function to sort an array") == Domain.TECHNOLOGY
    assert analyzer.detect_domain("How should I invest for retirement with a small budget") == Domain.FINANCE
    assert analyzer.detect_domain("Hello there") == Domain.GENERAL


# -----------------------------------------------------------------------------
# Complexity & tone
# -----------------------------------------------------------------------------

def test_short_prompt_is_quick(analyzer):
    assert analyzer.detect_complexity("Hi") == Complexity.QUICK


def test_long_architecture_prompt_is_demanding(analyzer):
    prompt = (
        "Design a comprehensive and scalable distributed system architecture for a global "
        "payments platform. It must handle multiple currencies and integrate with several banks, "
        "and it should also support fraud detection, audit logging and regional compliance rules. "
        "Describe the implementation phases, the framework choices and the data storage patterns, "
        "and explain how each service communicates with the others under heavy load."
    )
    assert len(prompt.split()) > 50
    assert analyzer.detect_complexity(prompt) == Complexity.DEMANDING


def test_tone(analyzer):
    assert analyzer.detect_tone("This is broken again and I am stuck!!!") == Tone.FRUSTRATED
    assert analyzer.detect_tone("I need this report ASAP, the deadline is today") == Tone.URGENT
    assert analyzer.detect_tone("Could you review the attached numbers") == Tone.PROFESSIONAL
    assert analyzer.detect_tone("tell me a thing") == Tone.CASUAL


# -----------------------------------------------------------------------------
# Full analysis & modality
# -----------------------------------------------------------------------------

def test_analyze_is_pure(analyzer):
    prompt = "Refactor this SQL query to use a database index"
    assert analyzer.analyze(prompt) == analyzer.analyze(prompt)


def test_analyze_records_human_context(analyzer):
    plain = analyzer.analyze("Write a poem about rain")
    empty = analyzer.analyze("Write a poem about rain", human_context=HumanContext())
    moody = analyzer.analyze(
        "Write a poem about rain",
        human_context=HumanContext(emotional_state=EmotionalState(mood=Mood.TIRED)),
    )
    assert not plain.human_context_used
    assert not empty.human_context_used
    assert moody.human_context_used


def test_analyze_keywords(analyzer):
    analysis = analyzer.analyze("Write a Python function to sort an array", "text")
    assert analysis.keywords[:2] == ("write", "python")
    assert len(analysis.keywords) <= 10
    assert analysis.to_dict()["modality"] == "text"


@pytest.mark.parametrize("alias", ["text+image", "textimage", "text_image", " TEXT+IMAGE "])
def test_modality_aliases(alias):
    assert parse_modality(alias) == Modality.TEXT_IMAGE


def test_unknown_modality_falls_back_to_text():
    assert parse_modality("hologram") == Modality.TEXT
    assert parse_modality(None) == Modality.TEXT


def test_modality_classification():
    assert is_pure_modality(Modality.IMAGE) and is_pure_modality(Modality.VOICE)
    assert not is_pure_modality(Modality.TEXT_IMAGE)
    assert is_combined_modality(Modality.TEXT_VOICE)
    assert get_modality_type(Modality.TEXT_IMAGE) == "vision"
    assert get_modality_type(Modality.VOICE) == "audio"
    assert get_modality_type(Modality.TEXT) == "text"


def test_fixed_analyses():
    assert fast_path_analysis(Modality.IMAGE).intent == Intent.TASK
    fallback = default_analysis()
    assert fallback.intent == Intent.CONVERSATION
    assert fallback.keywords == ()
