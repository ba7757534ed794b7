"""
Match action models for the Hockey Match Tracker application.

This module contains the tagged record used for every action recorded during a
match. The browser submits actions as loosely typed positional tuples; each
tuple is resolved once into a :class:`MatchAction` with an :class:`ActionKind`
so that later passes never have to string-match labels again.
"""
import logging
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Optional, Sequence, Tuple

from ..utils import (
    ENTER_LABEL, EXIT_LABEL, OPPONENT_GOAL_LABEL,
    parse_number, parse_trailing_minute, round_half_up
)

logger = logging.getLogger(__name__)


class ActionKind(Enum):
    """Kinds of action recorded by the sideline UI."""
    EXIT = "exit"
    ENTER = "enter"
    GOAL = "goal"
    GESTURE_BLOCK = "gesture_block"
    GESTURE_FLICK = "gesture_flick"
    GESTURE_LINE_EXIT = "gesture_line_exit"
    GESTURE_FOR = "gesture_for"
    GESTURE_AGAINST = "gesture_against"
    CARD_YELLOW = "card_yellow"
    CARD_RED = "card_red"
    CARD_GREEN = "card_green"
    TACKLE_WON = "tackle_won"
    TACKLE_LOST = "tackle_lost"
    RECOVERY = "recovery"
    OPPONENT_GOAL = "opponent_goal"
    OTHER = "other"


# Exact labels used by the UI for counted statistics
STAT_LABELS: Dict[str, ActionKind] = {
    "Gol": ActionKind.GOAL,
    "Gesto Bloqueo": ActionKind.GESTURE_BLOCK,
    "Gesto Flick": ActionKind.GESTURE_FLICK,
    "Gesto Salida Linea": ActionKind.GESTURE_LINE_EXIT,
    "Gesto a Favor": ActionKind.GESTURE_FOR,
    "Gesto en Contra": ActionKind.GESTURE_AGAINST,
    "Tarjeta amarilla": ActionKind.CARD_YELLOW,
    "Tarjeta roja": ActionKind.CARD_RED,
    "Tarjeta verde": ActionKind.CARD_GREEN,
    "Quite positivo": ActionKind.TACKLE_WON,
    "Quite negativo": ActionKind.TACKLE_LOST,
    "Recuperación": ActionKind.RECOVERY,
}

TIME_EVENT_KINDS = frozenset({ActionKind.EXIT, ActionKind.ENTER})


def resolve_kind(label: str) -> ActionKind:
    """
    Resolve a free-form action label into its :class:`ActionKind`.

    Substitution labels carry the minute ("Sale minuto 30"), so they are
    matched by substring; every other label is matched exactly.

    Args:
        label: Trimmed action label

    Returns:
        The matching kind, or ``ActionKind.OTHER`` for unknown labels
    """
    if EXIT_LABEL in label:
        return ActionKind.EXIT
    if ENTER_LABEL in label:
        return ActionKind.ENTER
    if label == OPPONENT_GOAL_LABEL:
        return ActionKind.OPPONENT_GOAL
    return STAT_LABELS.get(label, ActionKind.OTHER)


def _clean_text(value: Any) -> str:
    if value is None:
        return ""
    return str(value).strip()


@dataclass(frozen=True)
class MatchAction:
    """
    A single action recorded during a match.

    Attributes:
        index: Position of the action in the submitted list
        player: Trimmed player name (may be empty for malformed input)
        label: Trimmed action label as shown in the UI
        kind: Resolved action kind
        raw_value: Value exactly as submitted
        value: Numeric value, or None when absent or not numeric
        label_minute: Minute encoded at the end of a substitution label
        extras: Any fields submitted after the value
        arity: Number of fields in the submitted tuple
    """
    index: int
    player: str
    label: str
    kind: ActionKind
    raw_value: Any = None
    value: Optional[float] = None
    label_minute: Optional[int] = None
    extras: Tuple[Any, ...] = field(default_factory=tuple)
    arity: int = 0

    @classmethod
    def from_raw(cls, raw: Any, index: int = 0) -> Optional["MatchAction"]:
        """
        Build a MatchAction from a submitted action tuple.

        Args:
            raw: Sequence ``(player, label, value, *extras)``
            index: Position of the action in the submitted list

        Returns:
            The parsed action, or None when the entry is not a sequence
        """
        if not isinstance(raw, (list, tuple)):
            logger.warning("Skipping action that is not a list: %r", raw)
            return None

        fields: Sequence[Any] = raw
        player = _clean_text(fields[0]) if len(fields) > 0 else ""
        label = _clean_text(fields[1]) if len(fields) > 1 else ""
        raw_value = fields[2] if len(fields) > 2 else None
        kind = resolve_kind(label) if label else ActionKind.OTHER

        label_minute = None
        if kind in TIME_EVENT_KINDS:
            label_minute = parse_trailing_minute(label)

        return cls(
            index=index,
            player=player,
            label=label,
            kind=kind,
            raw_value=raw_value,
            value=parse_number(raw_value),
            label_minute=label_minute,
            extras=tuple(fields[3:]),
            arity=len(fields),
        )

    @property
    def is_time_event(self) -> bool:
        """Whether this action records a substitution."""
        return self.kind in TIME_EVENT_KINDS

    @property
    def is_complete(self) -> bool:
        """Whether the action has player, label and value fields."""
        return self.arity >= 3 and bool(self.player) and bool(self.label)

    def value_or_one(self) -> float:
        """Numeric value, counting the occurrence as 1 when there is none."""
        return 1.0 if self.value is None else self.value

    def value_minute(self) -> Optional[int]:
        """Minute recorded in the value field for substitution actions."""
        if not self.is_time_event or self.value is None:
            return None
        return round_half_up(self.value)


@dataclass(frozen=True)
class TimeEvent:
    """A player entering or leaving the field at a given minute."""
    player: str
    kind: ActionKind
    minute: int

    @property
    def is_exit(self) -> bool:
        return self.kind is ActionKind.EXIT


@dataclass
class ArchivedAction:
    """Cleaned echo of a submitted action, stored in the audit log."""
    date: str
    category: str
    player: str
    label: str
    value: Optional[float] = None
    minute: Optional[int] = None

    def to_document(self) -> Dict[str, Any]:
        """Convert to the stored document format."""
        return {
            "partido_fecha": self.date,
            "categoria": self.category,
            "jugadora_nombre": self.player,
            "accion_tipo": self.label,
            "valor": self.value,
            "minuto": self.minute,
        }
