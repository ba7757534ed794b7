"""
Hockey Match Tracker

Records field-hockey match events submitted by a browser UI, stores them in
MongoDB and computes per-player playing time and statistics for each match.
"""
from .config import Settings
from .models import MatchAction, MatchSubmission, PlayerSummary, MatchSummary
from .services import MatchSummaryCalculator, MatchRepository, parse_submission
from .ui import create_app, run_web_app
from .utils import APP_TITLE, MATCH_DURATION_MIN

__version__ = "1.0.0"

__all__ = [
    "Settings", "MatchAction", "MatchSubmission", "PlayerSummary", "MatchSummary",
    "MatchSummaryCalculator", "MatchRepository", "parse_submission",
    "create_app", "run_web_app", "APP_TITLE", "MATCH_DURATION_MIN"
]
