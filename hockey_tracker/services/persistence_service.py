"""
Persistence service for the Hockey Match Tracker application.

This module stores archived actions, player summaries and match totals in
MongoDB, and reads player lists and stored summaries back.
"""
import logging
from dataclasses import dataclass
from typing import Dict, List, Optional

from pymongo import UpdateOne
from pymongo.errors import BulkWriteError, PyMongoError

from ..config import Settings
from ..models import (
    ArchivedAction, MatchSubmission, MatchSummary, MatchSummaryResult, PlayerSummary
)
from .database import MongoDatabase

logger = logging.getLogger(__name__)


class StorageError(Exception):
    """Raised when the database rejects or fails a read or write."""
    pass


@dataclass
class SaveReport:
    """Counts reported by the database after saving a match."""
    inserted_actions: int = 0
    upserted_summaries: int = 0
    matched_summaries: int = 0
    modified_summaries: int = 0

    def to_dict(self) -> Dict[str, int]:
        return {
            "inserted_actions": self.inserted_actions,
            "upserted_summaries": self.upserted_summaries,
            "matched_summaries": self.matched_summaries,
            "modified_summaries": self.modified_summaries,
        }


class MatchRepository:
    """
    Repository for match data stored in MongoDB.

    Player summaries live in one collection per category
    (``<summary prefix><category key>``) and are upserted by date and player,
    so saving the same match twice updates it in place.
    """

    def __init__(self, database: MongoDatabase, settings: Optional[Settings] = None):
        self.database = database
        self.settings = settings or Settings()

    def summary_collection_name(self, category_key: str) -> str:
        return f"{self.settings.summary_collection_prefix}{category_key}"

    def players_collection_name(self, category: str) -> str:
        return f"{self.settings.players_collection_prefix}{category.strip().lower()}"

    def save_match(self, submission: MatchSubmission, result: MatchSummaryResult) -> SaveReport:
        """
        Store everything computed for a match.

        Args:
            submission: Validated submission the result was computed from
            result: Archived actions, player summaries and match totals

        Returns:
            Counts reported by the database

        Raises:
            StorageError: If any write fails
        """
        report = SaveReport()
        report.inserted_actions = self.insert_actions(result.archived_actions)
        upserted, matched, modified = self.upsert_player_summaries(
            submission.category_key, result.player_summaries
        )
        report.upserted_summaries = upserted
        report.matched_summaries = matched
        report.modified_summaries = modified
        if result.match_summary is not None:
            self.upsert_match_summary(result.match_summary)
        logger.info("Saved match %s (%s)", submission.date, submission.category)
        return report

    def insert_actions(self, actions: List[ArchivedAction]) -> int:
        """Append archived actions to the actions collection."""
        if not actions:
            logger.info("No raw actions to insert")
            return 0
        documents = [action.to_document() for action in actions]
        try:
            collection = self.database.collection(self.settings.actions_collection)
            result = collection.insert_many(documents)
        except PyMongoError as e:
            logger.exception("Failed to insert actions")
            raise StorageError(str(e)) from e
        inserted = len(result.inserted_ids)
        logger.info("Inserted %d raw actions", inserted)
        return inserted

    def upsert_player_summaries(self, category_key: str, summaries: List[PlayerSummary]):
        """
        Upsert player summaries into the category's summary collection.

        Returns:
            Tuple of (upserted, matched, modified) counts
        """
        if not summaries:
            logger.info("No summary data to save")
            return 0, 0, 0

        collection_name = self.summary_collection_name(category_key)
        operations = []
        for summary in summaries:
            document = summary.to_document()
            operations.append(
                UpdateOne(
                    {
                        "partido_fecha": document["partido_fecha"],
                        "jugadora_nombre": document["jugadora_nombre"],
                    },
                    {"$set": document},
                    upsert=True,
                )
            )

        logger.info("Executing bulk write of %d summaries into %s", len(operations), collection_name)
        try:
            result = self.database.collection(collection_name).bulk_write(operations)
        except BulkWriteError as e:
            logger.error("Bulk write errors: %s", e.details.get("writeErrors"))
            raise StorageError("Failed to save player summaries") from e
        except PyMongoError as e:
            logger.exception("Failed to save player summaries")
            raise StorageError(str(e)) from e

        logger.info(
            "Bulk write result: upserted %d, matched %d, modified %d",
            result.upserted_count, result.matched_count, result.modified_count,
        )
        return result.upserted_count, result.matched_count, result.modified_count

    def upsert_match_summary(self, summary: MatchSummary) -> None:
        """Upsert match totals keyed by date and category."""
        document = summary.to_document()
        try:
            self.database.collection(self.settings.match_summary_collection).update_one(
                {"partido_fecha": document["partido_fecha"], "categoria": document["categoria"]},
                {"$set": document},
                upsert=True,
            )
        except PyMongoError as e:
            logger.exception("Failed to save match summary")
            raise StorageError(str(e)) from e
        logger.info("Match summary saved for %s (%s)", summary.date, summary.category)

    def list_player_names(self, category: str) -> List[str]:
        """
        Get the player names registered for a category.

        Args:
            category: Category as selected in the UI

        Returns:
            Trimmed, non-empty names in stored order
        """
        collection_name = self.players_collection_name(category)
        try:
            cursor = self.database.collection(collection_name).find({})
            if self.settings.player_list_limit:
                cursor = cursor.limit(self.settings.player_list_limit)
            documents = list(cursor)
        except PyMongoError as e:
            logger.exception("Failed to read players from %s", collection_name)
            raise StorageError(str(e)) from e

        names = []
        for document in documents:
            name = document.get("nombre")
            name = str(name).strip() if name is not None else ""
            if name:
                names.append(name)
        logger.info("Found %d players in %s", len(names), collection_name)
        return names

    def find_player_summaries(
        self, category_key: str, date: Optional[str] = None
    ) -> List[PlayerSummary]:
        """Get stored player summaries for a category, optionally for one date."""
        query = {"partido_fecha": date} if date else {}
        collection_name = self.summary_collection_name(category_key)
        try:
            cursor = self.database.collection(collection_name).find(query)
            documents = list(cursor.sort([("partido_fecha", 1), ("jugadora_nombre", 1)]))
        except PyMongoError as e:
            logger.exception("Failed to read summaries from %s", collection_name)
            raise StorageError(str(e)) from e
        return [PlayerSummary.from_document(document) for document in documents]
