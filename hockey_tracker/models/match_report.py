"""Dataclasses representing computed match summaries."""

from dataclasses import dataclass, field, fields
from typing import Any, Dict, List, Optional, Tuple

from .match_action import ActionKind, ArchivedAction

# PlayerSummary attribute -> stored document field
SUMMARY_DOCUMENT_FIELDS = {
    "date": "partido_fecha",
    "player": "jugadora_nombre",
    "minutes_played": "tiempo_jugado",
    "goals": "goles",
    "gesture_block": "gesto_bloqueo",
    "gesture_flick": "gesto_flick",
    "gesture_line_exit": "gesto_salida_linea",
    "gesture_for": "gesto_a_favor",
    "gesture_against": "gesto_en_contra",
    "yellow_cards": "tarjeta_amarilla",
    "red_cards": "tarjeta_roja",
    "green_cards": "tarjeta_verde",
    "tackles_won": "quite_positivo",
    "tackles_lost": "quite_negativo",
    "recoveries": "recuperacion",
}

# Statistic kind -> PlayerSummary counter
SUMMARY_COUNTERS = {
    ActionKind.GOAL: "goals",
    ActionKind.GESTURE_BLOCK: "gesture_block",
    ActionKind.GESTURE_FLICK: "gesture_flick",
    ActionKind.GESTURE_LINE_EXIT: "gesture_line_exit",
    ActionKind.GESTURE_FOR: "gesture_for",
    ActionKind.GESTURE_AGAINST: "gesture_against",
    ActionKind.CARD_YELLOW: "yellow_cards",
    ActionKind.CARD_RED: "red_cards",
    ActionKind.CARD_GREEN: "green_cards",
    ActionKind.TACKLE_WON: "tackles_won",
    ActionKind.TACKLE_LOST: "tackles_lost",
    ActionKind.RECOVERY: "recoveries",
}


@dataclass
class PlayerSummary:
    """Playing time and statistic counters for one player in one match."""

    date: str
    player: str
    minutes_played: int = 0
    goals: int = 0
    gesture_block: int = 0
    gesture_flick: int = 0
    gesture_line_exit: int = 0
    gesture_for: int = 0
    gesture_against: int = 0
    yellow_cards: int = 0
    red_cards: int = 0
    green_cards: int = 0
    tackles_won: int = 0
    tackles_lost: int = 0
    recoveries: int = 0

    def to_document(self) -> Dict[str, Any]:
        """Convert to the stored document format."""
        return {
            document_key: getattr(self, attr)
            for attr, document_key in SUMMARY_DOCUMENT_FIELDS.items()
        }

    @classmethod
    def from_document(cls, document: Dict[str, Any]) -> "PlayerSummary":
        """Create from a stored document, ignoring unknown fields such as ``_id``."""
        values = {}
        for item in fields(cls):
            document_key = SUMMARY_DOCUMENT_FIELDS[item.name]
            if document_key in document and document[document_key] is not None:
                values[item.name] = document[document_key]
        values.setdefault("date", "")
        values.setdefault("player", "")
        return cls(**values)


@dataclass
class MatchSummary:
    """Match level totals, keyed by date and category."""

    date: str
    category: str
    own_goals_total: Optional[Any] = None
    opponent_goals_total: Optional[Any] = None

    def to_document(self) -> Dict[str, Any]:
        return {
            "partido_fecha": self.date,
            "categoria": self.category,
            "goles_propios_totales": self.own_goals_total,
            "goles_rival_totales": self.opponent_goals_total,
        }


@dataclass
class MatchSummaryResult:
    """Everything computed for one submitted match."""

    archived_actions: List[ArchivedAction] = field(default_factory=list)
    player_summaries: List[PlayerSummary] = field(default_factory=list)
    match_summary: Optional[MatchSummary] = None
    action_totals: Dict[Tuple[str, str], float] = field(default_factory=dict)
