"""Match summary calculation for the Hockey Match Tracker."""

from __future__ import annotations

import csv
import io
import logging
from collections import defaultdict
from typing import Dict, Iterable, List, Optional, Tuple

from ..models import (
    ActionKind, ArchivedAction, MatchAction, MatchSubmission, MatchSummary,
    MatchSummaryResult, PlayerSummary, Roster, TimeEvent, resolve_kind
)
from ..models.match_report import SUMMARY_COUNTERS, SUMMARY_DOCUMENT_FIELDS
from ..utils import MATCH_DURATION_MIN, as_count

logger = logging.getLogger(__name__)


class SummaryCsvExporter:
    """Export player summaries as a CSV table."""

    HEADER = list(SUMMARY_DOCUMENT_FIELDS.values())

    def export_to_csv(self, summaries: Iterable[PlayerSummary]) -> str:
        """Return a CSV document with one row per player summary."""
        buffer = io.StringIO()
        writer = csv.writer(buffer, lineterminator="\n")
        writer.writerow(self.HEADER)
        for summary in summaries:
            document = summary.to_document()
            writer.writerow([document[column] for column in self.HEADER])
        csv_text = buffer.getvalue()
        buffer.close()
        return csv_text


class MatchSummaryCalculator:
    """
    Compute archived actions, playing time and statistics for one match.

    The calculator holds no state between calls; every method works only on
    its arguments.
    """

    def __init__(self, match_duration_minutes: int = MATCH_DURATION_MIN) -> None:
        if match_duration_minutes <= 0:
            raise ValueError("Match duration must be positive")
        self.match_duration_minutes = match_duration_minutes

    def summarize(self, submission: MatchSubmission) -> MatchSummaryResult:
        """Build a :class:`MatchSummaryResult` for a validated submission."""
        archived = self.build_archive(submission)
        logger.info("Prepared %d actions for insertion", len(archived))

        result = MatchSummaryResult(
            archived_actions=archived,
            player_summaries=self.build_player_summaries(submission),
            match_summary=self.build_match_summary(submission),
            action_totals=self.aggregate_statistics(submission.actions),
        )
        logger.info("Prepared %d player summaries", len(result.player_summaries))
        return result

    # ------------------------------------------------------------------ #
    # Archive
    # ------------------------------------------------------------------ #

    def build_archive(self, submission: MatchSubmission) -> List[ArchivedAction]:
        """
        Return the cleaned list of actions for the audit log.

        Opponent goals are match level and never archived per player. Actions
        missing the player, the label or the value field are skipped.
        """
        archived = []
        for action in submission.actions:
            if action.kind is ActionKind.OPPONENT_GOAL:
                continue
            if not action.is_complete:
                logger.warning("Skipping incomplete action #%d: %r", action.index, action)
                continue
            archived.append(
                ArchivedAction(
                    date=submission.date,
                    category=submission.category,
                    player=action.player,
                    label=action.label,
                    value=action.value,
                    minute=action.value_minute(),
                )
            )
        return archived

    # ------------------------------------------------------------------ #
    # Playing time
    # ------------------------------------------------------------------ #

    def extract_time_events(self, actions: Iterable[MatchAction]) -> List[TimeEvent]:
        """
        Return substitution events in chronological order.

        Events without a player, without a minute at the end of the label or
        with a minute outside the match are dropped. Events sharing a minute
        keep their submission order.
        """
        events = []
        for action in actions:
            if not action.is_time_event:
                continue
            minute = action.label_minute
            if not action.player or minute is None:
                continue
            if minute < 0 or minute > self.match_duration_minutes:
                logger.warning(
                    "Ignoring %s for %s at minute %d outside the match",
                    action.label, action.player, minute,
                )
                continue
            events.append(TimeEvent(player=action.player, kind=action.kind, minute=minute))
        events.sort(key=lambda event: event.minute)
        return events

    def compute_minutes_played(
        self, roster: Roster, actions: Iterable[MatchAction]
    ) -> Dict[str, int]:
        """
        Reconstruct minutes on the field for every roster player.

        Starters are on the field from minute 0. An exit for a player who is
        not on the field, or an entrance for a player who already is, is
        logged and ignored.

        Args:
            roster: Starters and substitutes
            actions: Parsed match actions

        Returns:
            Minutes played keyed by player name, in roster order
        """
        minutes: Dict[str, int] = defaultdict(int)
        entered_at: Dict[str, int] = {starter: 0 for starter in roster.starters}

        for event in self.extract_time_events(actions):
            player = event.player
            if event.is_exit:
                if player not in entered_at:
                    logger.warning(
                        "%s left at minute %d but was not on the field", player, event.minute
                    )
                    continue
                minutes[player] += max(event.minute - entered_at.pop(player), 0)
            else:
                if player in entered_at:
                    logger.warning(
                        "%s entered at minute %d but was already on the field",
                        player, event.minute,
                    )
                    continue
                entered_at[player] = event.minute

        for player, entry_minute in entered_at.items():
            minutes[player] += max(self.match_duration_minutes - entry_minute, 0)

        return {player: minutes[player] for player in roster.all_players}

    # ------------------------------------------------------------------ #
    # Statistics
    # ------------------------------------------------------------------ #

    def aggregate_statistics(
        self, actions: Iterable[MatchAction]
    ) -> Dict[Tuple[str, str], float]:
        """
        Total every counted statistic per player and label.

        Actions without a numeric value count as one occurrence. Unknown
        labels are totalled as well.
        """
        totals: Dict[Tuple[str, str], float] = {}
        for action in actions:
            if action.is_time_event or action.kind is ActionKind.OPPONENT_GOAL:
                continue
            if not action.is_complete:
                continue
            key = (action.player, action.label)
            totals[key] = totals.get(key, 0.0) + action.value_or_one()
        return totals

    def build_player_summaries(self, submission: MatchSubmission) -> List[PlayerSummary]:
        """Return one :class:`PlayerSummary` per roster player."""
        minutes = self.compute_minutes_played(submission.roster, submission.actions)
        counters: Dict[str, Dict[str, float]] = defaultdict(lambda: defaultdict(float))
        for (player, label), total in self.aggregate_statistics(submission.actions).items():
            counter = SUMMARY_COUNTERS.get(resolve_kind(label))
            if counter is None:
                continue
            counters[player][counter] += total

        summaries = []
        for player in submission.roster.all_players:
            summary = PlayerSummary(
                date=submission.date,
                player=player,
                minutes_played=minutes.get(player, 0),
            )
            for counter, total in counters.get(player, {}).items():
                setattr(summary, counter, as_count(total))
            summaries.append(summary)
        return summaries

    def build_match_summary(self, submission: MatchSubmission) -> MatchSummary:
        """Return the match totals exactly as supplied by the UI."""
        return MatchSummary(
            date=submission.date,
            category=submission.category,
            own_goals_total=submission.own_goals,
            opponent_goals_total=submission.opponent_goals,
        )


def summarize_match(
    submission: MatchSubmission, match_duration_minutes: Optional[int] = None
) -> MatchSummaryResult:
    """Convenience wrapper around :class:`MatchSummaryCalculator`."""
    calculator = MatchSummaryCalculator(
        MATCH_DURATION_MIN if match_duration_minutes is None else match_duration_minutes
    )
    return calculator.summarize(submission)
