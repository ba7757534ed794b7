"""
Submission models for the Hockey Match Tracker application.

This module contains the roster and the validated match submission that the
summary calculator works on.
"""
from dataclasses import dataclass, field
from typing import Any, Iterable, List, Optional

from .match_action import MatchAction


def _clean_names(names: Iterable[Any]) -> List[str]:
    """Trim names, drop empty ones and collapse duplicates keeping first-seen order."""
    cleaned = []
    for name in names:
        if name is None:
            continue
        text = str(name).strip()
        if text:
            cleaned.append(text)
    return list(dict.fromkeys(cleaned))


@dataclass
class Roster:
    """
    Players available for a match.

    Attributes:
        starters: Players on the field at minute 0
        substitutes: Players on the bench at minute 0
    """
    starters: List[str] = field(default_factory=list)
    substitutes: List[str] = field(default_factory=list)

    @classmethod
    def from_names(cls, starters: Iterable[Any], substitutes: Iterable[Any]) -> "Roster":
        return cls(starters=_clean_names(starters), substitutes=_clean_names(substitutes))

    @property
    def all_players(self) -> List[str]:
        """Ordered union of starters and substitutes."""
        return list(dict.fromkeys(self.starters + self.substitutes))


@dataclass
class MatchSubmission:
    """
    A validated match submission.

    Attributes:
        date: Match date as submitted (trimmed)
        category: Category as submitted (trimmed)
        category_key: Lowercase category identifier used for collection names
        roster: Starters and substitutes
        actions: Parsed actions in submission order
        own_goals: Own goals total supplied by the UI
        opponent_goals: Opponent goals total supplied by the UI
    """
    date: str
    category: str
    category_key: str
    roster: Roster
    actions: List[MatchAction] = field(default_factory=list)
    own_goals: Optional[Any] = None
    opponent_goals: Optional[Any] = None
