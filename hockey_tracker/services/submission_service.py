"""
Submission service for the Hockey Match Tracker application.

This module validates the JSON payload sent by the browser when a match is
finished and turns it into a :class:`MatchSubmission`.
"""
import logging
from typing import Any, Dict, List, Optional

from ..models import MatchAction, MatchSubmission, Roster
from ..utils import CATEGORY_PREFIX

logger = logging.getLogger(__name__)

REQUIRED_FIELDS = ("fecha", "accionesData", "categoria", "titulares", "suplentes")
LIST_FIELDS = ("accionesData", "titulares", "suplentes")


class SubmissionValidationError(Exception):
    """Raised when a match submission cannot be processed."""

    def __init__(self, message: str, errors: Optional[List[str]] = None):
        super().__init__(message)
        self.message = message
        self.errors = errors or []


def _is_missing(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str) and value == "":
        return True
    return False


def normalize_category(category: Any) -> str:
    """
    Turn a category label into the lowercase identifier used in collection names.

    Example:
        >>> normalize_category("Jugadoras Sub 14")
        'sub 14'
    """
    if category is None:
        return ""
    return str(category).replace(CATEGORY_PREFIX, "", 1).strip().lower()


def validate_payload(payload: Any) -> List[str]:
    """
    Validate the shape of a submission payload.

    Args:
        payload: Decoded JSON body

    Returns:
        List of validation error messages (empty if valid)
    """
    if not isinstance(payload, dict):
        return ["Request body must be a JSON object"]

    errors = []
    missing = [name for name in REQUIRED_FIELDS if _is_missing(payload.get(name))]
    if missing:
        errors.append(f"Missing required fields: {', '.join(missing)}")

    for name in LIST_FIELDS:
        value = payload.get(name)
        if not _is_missing(value) and not isinstance(value, list):
            errors.append(f"Field '{name}' must be a list")

    if "categoria" not in missing and not normalize_category(payload.get("categoria")):
        errors.append("Invalid category name for summary")

    return errors


def parse_actions(raw_actions: List[Any]) -> List[MatchAction]:
    """Parse submitted action tuples, skipping entries that are not lists."""
    actions = []
    for index, raw in enumerate(raw_actions):
        action = MatchAction.from_raw(raw, index)
        if action is not None:
            actions.append(action)
    return actions


def parse_submission(payload: Dict[str, Any]) -> MatchSubmission:
    """
    Validate a payload and build the corresponding :class:`MatchSubmission`.

    Args:
        payload: Decoded JSON body with ``fecha``, ``accionesData``,
            ``titulares``, ``suplentes``, ``categoria`` and optionally
            ``golesPropios`` / ``golesRival``

    Returns:
        Validated submission

    Raises:
        SubmissionValidationError: If required fields are missing or invalid
    """
    errors = validate_payload(payload)
    if errors:
        logger.error("Rejected match submission: %s", "; ".join(errors))
        raise SubmissionValidationError("Invalid match submission", errors)

    category = str(payload["categoria"]).strip()
    submission = MatchSubmission(
        date=str(payload["fecha"]).strip(),
        category=category,
        category_key=normalize_category(category),
        roster=Roster.from_names(payload["titulares"], payload["suplentes"]),
        actions=parse_actions(payload["accionesData"]),
        own_goals=payload.get("golesPropios"),
        opponent_goals=payload.get("golesRival"),
    )
    logger.info(
        "Processing submission for date %s, category %s: %d actions, %d starters, %d substitutes",
        submission.date,
        submission.category,
        len(submission.actions),
        len(submission.roster.starters),
        len(submission.roster.substitutes),
    )
    return submission
