"""
Models package for the Hockey Match Tracker.

This package contains the core data models used throughout the application.
"""
from .match_action import ActionKind, MatchAction, TimeEvent, ArchivedAction, resolve_kind
from .submission import Roster, MatchSubmission
from .match_report import PlayerSummary, MatchSummary, MatchSummaryResult

__all__ = [
    "ActionKind", "MatchAction", "TimeEvent", "ArchivedAction", "resolve_kind",
    "Roster", "MatchSubmission",
    "PlayerSummary", "MatchSummary", "MatchSummaryResult"
]
