# -*- coding: utf-8 -*-
import pytest

from model_compass.helpers import (
    STOP_WORDS,
    Stopwatch,
    clamp,
    extract_keywords,
    generate_decision_id,
    invert_score,
    is_late_night,
    is_working_hours,
    normalize,
    parse_time_to_hours,
    tokenize,
)


def test_clamp_bounds():
    assert clamp(1.4) == 1.0
    assert clamp(-0.2) == 0.0
    assert clamp(0.3) == 0.3
    assert clamp(15, 0, 10) == 10


def test_normalize_degenerate_range_is_half():
    assert normalize(3.0, 3.0, 3.0) == 0.5


def test_normalize_scales_into_unit_interval():
    assert normalize(5, 0, 10) == 0.5
    assert normalize(12, 0, 10) == 1.0
    assert invert_score(0.25) == 0.75


@pytest.mark.parametrize("value,expected", [
    ("09:30", 9.5),
    ("0:00", 0.0),
    ("23:59", 23 + 59 / 60),
])
def test_parse_time_valid(value, expected):
    assert parse_time_to_hours(value) == pytest.approx(expected)


@pytest.mark.parametrize("value", [None, "", "24:00", "12:60", "noon", "12h30", 2330, 9.5, ["09:30"]])
def test_parse_time_invalid(value):
    assert parse_time_to_hours(value) is None


def test_time_windows():
    assert is_late_night(23.5)
    assert is_late_night(2)
    assert not is_late_night(12)
    assert is_working_hours(9)
    assert not is_working_hours(18)


def test_tokenize_strips_punctuation():
    assert tokenize("Hello, World! It's") == ["hello", "world", "it", "s"]


def test_keywords_drop_stop_words_and_short_tokens():
    keywords = extract_keywords("Please help me write the Python function for an array")
    assert "python" in keywords
    assert "function" in keywords
    assert not set(keywords) & STOP_WORDS
    assert all(len(k) > 2 for k in keywords)


def test_keywords_capped_and_ties_stable():
    text = " ".join(f"word{i}" for i in range(15))
    keywords = extract_keywords(text)
    assert keywords == [f"word{i}" for i in range(10)]
    assert extract_keywords("zebra apple zebra mango apple zebra") == ["zebra", "apple", "mango"]


def test_stopwatch_is_monotonic():
    sw = Stopwatch()
    first = sw.lap()
    assert first >= 0
    assert sw.elapsed() >= first


def test_decision_ids_are_unique_and_prefixed():
    ids = {generate_decision_id("dec_") for _ in range(50)}
    assert len(ids) == 50
    assert all(i.startswith("dec_") and len(i) == 20 for i in ids)
