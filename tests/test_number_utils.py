"""Tests for numeric parsing helpers."""

import pytest

from hockey_tracker.utils import as_count, parse_number, parse_trailing_minute, round_half_up


@pytest.mark.parametrize(
    "raw, expected",
    [
        (30, 30.0),
        (2.5, 2.5),
        ("15", 15.0),
        ("  7.25 ", 7.25),
        ("2 goles", 2.0),
        ("-3", -3.0),
        (".5", 0.5),
        ("1e2", 100.0),
    ],
)
def test_parse_number_accepts_numeric_prefixes(raw, expected):
    assert parse_number(raw) == expected


@pytest.mark.parametrize("raw", [None, "", "Own goal", "abc12", True, [1], {"a": 1}, float("nan")])
def test_parse_number_rejects_non_numeric(raw):
    assert parse_number(raw) is None


def test_round_half_up_matches_browser_rounding():
    assert round_half_up(12.5) == 13
    assert round_half_up(12.49) == 12
    assert round_half_up(-2.5) == -2
    assert round_half_up(30.0) == 30


def test_parse_trailing_minute():
    assert parse_trailing_minute("Sale minuto 30") == 30
    assert parse_trailing_minute("Entra minuto 05") == 5
    assert parse_trailing_minute("Sale minuto") is None
    assert parse_trailing_minute("Sale minuto 30 bis") is None
    assert parse_trailing_minute("") is None


def test_as_count_keeps_whole_totals_integral():
    assert as_count(3.0) == 3
    assert isinstance(as_count(3.0), int)
    assert as_count(2.5) == 2.5


def test_parse_number_rejects_values_beyond_float_range():
    assert parse_number(10 ** 400) is None
    assert parse_number(-(10 ** 400)) is None
    assert parse_number("1e999") is None


def test_parse_trailing_minute_rejects_oversized_digit_runs():
    assert parse_trailing_minute("Sale minuto " + "9" * 5000) is None


def test_as_count_returns_float_for_fractional_totals():
    assert isinstance(as_count(2.5), float)
