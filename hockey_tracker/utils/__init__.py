"""
Utilities package for the Hockey Match Tracker.

This package contains utility functions and constants used throughout the application.
"""
from .number_utils import parse_number, round_half_up, parse_trailing_minute, as_count
from .constants import (
    APP_TITLE, MATCH_DURATION_MIN, CATEGORY_PREFIX,
    EXIT_LABEL, ENTER_LABEL, OPPONENT_GOAL_LABEL
)

__all__ = [
    "parse_number", "round_half_up", "parse_trailing_minute", "as_count",
    "APP_TITLE", "MATCH_DURATION_MIN", "CATEGORY_PREFIX",
    "EXIT_LABEL", "ENTER_LABEL", "OPPONENT_GOAL_LABEL"
]
