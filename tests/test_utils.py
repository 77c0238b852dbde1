"""Unit tests for trip_planner.utils."""

import random

from trip_planner.utils import jitter, match_city, normalize_number, strip_code_fences


def test_match_city_uses_first_substring_match_and_default():
    table = {"paris": 1, "new york": 2, "york": 3}
    assert match_city("Weekend in PARIS, France", table) == 1
    assert match_city("New York City", table) == 2
    assert match_city("Lima", table, default="new york") == 2
    assert match_city("Lima", table) is None


def test_jitter_stays_within_half_spread():
    rng = random.Random(3)
    values = [jitter(10.0, 0.02, rng) for _ in range(200)]
    assert all(9.99 <= value <= 10.01 for value in values)


def test_strip_code_fences_handles_json_fence():
    text = '```json\n{"days": []}\n```'
    assert strip_code_fences(text) == '{"days": []}'
    assert strip_code_fences('  {"a": 1} ') == '{"a": 1}'


def test_normalize_number_collapses_integral_floats():
    assert normalize_number(50000.0) == 50000
    assert isinstance(normalize_number(50000.0), int)
    assert normalize_number(1234.5) == 1234.5
