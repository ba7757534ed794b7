"""
Unit tests for MatchRepository.

MongoDB is replaced by MagicMock collections; the tests check which documents
reach the driver and how driver failures are reported.
"""
import unittest
from unittest.mock import MagicMock

from pymongo import UpdateOne
from pymongo.errors import BulkWriteError, ServerSelectionTimeoutError

from hockey_tracker.config import Settings
from hockey_tracker.models import (
    ArchivedAction, MatchSubmission, MatchSummary, MatchSummaryResult, PlayerSummary, Roster
)
from hockey_tracker.services import ConfigurationError, MatchRepository, StorageError


class TestMatchRepository(unittest.TestCase):
    """Test cases for MatchRepository."""

    def setUp(self) -> None:
        self.collections = {}
        self.database = MagicMock()
        self.database.collection.side_effect = self._collection
        self.settings = Settings(database_name="hockey_test")
        self.repository = MatchRepository(self.database, self.settings)

        self.submission = MatchSubmission(
            date="2025-03-08",
            category="Jugadoras Sub 14",
            category_key="sub 14",
            roster=Roster.from_names(["Ana"], ["Carla"]),
        )
        self.result = MatchSummaryResult(
            archived_actions=[
                ArchivedAction("2025-03-08", "Jugadoras Sub 14", "Ana", "Gol", 1.0, None),
            ],
            player_summaries=[
                PlayerSummary(date="2025-03-08", player="Ana", minutes_played=60, goals=1),
                PlayerSummary(date="2025-03-08", player="Carla"),
            ],
            match_summary=MatchSummary("2025-03-08", "Jugadoras Sub 14", 1, 0),
        )

    def _collection(self, name):
        if name not in self.collections:
            self.collections[name] = MagicMock(name=name)
        return self.collections[name]

    def test_collection_names(self) -> None:
        self.assertEqual(self.repository.summary_collection_name("sub 14"), "resumen_sub 14")
        self.assertEqual(self.repository.players_collection_name(" Sub14 "), "jugadoras_sub14")

    def test_save_match_writes_actions_summaries_and_totals(self) -> None:
        self._collection("acciones").insert_many.return_value = MagicMock(inserted_ids=["x"])
        self._collection("resumen_sub 14").bulk_write.return_value = MagicMock(
            upserted_count=1, matched_count=1, modified_count=1
        )

        report = self.repository.save_match(self.submission, self.result)

        self.assertEqual(
            report.to_dict(),
            {
                "inserted_actions": 1,
                "upserted_summaries": 1,
                "matched_summaries": 1,
                "modified_summaries": 1,
            },
        )
        self.collections["acciones"].insert_many.assert_called_once_with(
            [self.result.archived_actions[0].to_document()]
        )

        operations = self.collections["resumen_sub 14"].bulk_write.call_args[0][0]
        ana = self.result.player_summaries[0].to_document()
        self.assertEqual(len(operations), 2)
        self.assertEqual(
            operations[0],
            UpdateOne(
                {"partido_fecha": "2025-03-08", "jugadora_nombre": "Ana"},
                {"$set": ana},
                upsert=True,
            ),
        )

        self.collections["resumen_partidos"].update_one.assert_called_once_with(
            {"partido_fecha": "2025-03-08", "categoria": "Jugadoras Sub 14"},
            {
                "$set": {
                    "partido_fecha": "2025-03-08",
                    "categoria": "Jugadoras Sub 14",
                    "goles_propios_totales": 1,
                    "goles_rival_totales": 0,
                }
            },
            upsert=True,
        )

    def test_empty_action_list_is_not_inserted(self) -> None:
        self.assertEqual(self.repository.insert_actions([]), 0)
        self.assertNotIn("acciones", self.collections)

    def test_empty_summary_list_is_not_written(self) -> None:
        self.assertEqual(self.repository.upsert_player_summaries("sub 14", []), (0, 0, 0))
        self.assertNotIn("resumen_sub 14", self.collections)

    def test_bulk_write_errors_raise_storage_error(self) -> None:
        error = BulkWriteError({"writeErrors": [{"index": 0, "errmsg": "duplicate"}]})
        self._collection("resumen_sub 14").bulk_write.side_effect = error

        with self.assertLogs("hockey_tracker.services.persistence_service", level="ERROR"):
            with self.assertRaises(StorageError):
                self.repository.upsert_player_summaries("sub 14", self.result.player_summaries)

    def test_driver_errors_raise_storage_error(self) -> None:
        self._collection("acciones").insert_many.side_effect = ServerSelectionTimeoutError("timeout")

        with self.assertRaises(StorageError):
            self.repository.insert_actions(self.result.archived_actions)

    def test_missing_database_name_propagates(self) -> None:
        self.database.collection.side_effect = ConfigurationError("MONGODB_DATABASE is not set")

        with self.assertRaises(ConfigurationError):
            self.repository.list_player_names("Sub14")

    def test_list_player_names_cleans_names(self) -> None:
        self._collection("jugadoras_sub14").find.return_value = [
            {"nombre": " Ana "}, {"nombre": ""}, {"apellido": "Perez"}, {"nombre": 7},
        ]

        names = self.repository.list_player_names("Sub14")

        self.assertEqual(names, ["Ana", "7"])
        self.collections["jugadoras_sub14"].find.assert_called_once_with({})

    def test_list_player_names_applies_limit(self) -> None:
        self.repository.settings.player_list_limit = 2
        cursor = MagicMock()
        cursor.limit.return_value = [{"nombre": "Ana"}, {"nombre": "Bea"}]
        self._collection("jugadoras_sub14").find.return_value = cursor

        self.assertEqual(self.repository.list_player_names("sub14"), ["Ana", "Bea"])
        cursor.limit.assert_called_once_with(2)

    def test_find_player_summaries_filters_by_date(self) -> None:
        cursor = MagicMock()
        cursor.sort.return_value = [
            {
                "_id": "abc",
                "partido_fecha": "2025-03-08",
                "jugadora_nombre": "Ana",
                "tiempo_jugado": 45,
                "goles": 2,
            }
        ]
        self._collection("resumen_sub 14").find.return_value = cursor

        summaries = self.repository.find_player_summaries("sub 14", "2025-03-08")

        self.collections["resumen_sub 14"].find.assert_called_once_with(
            {"partido_fecha": "2025-03-08"}
        )
        self.assertEqual(
            summaries,
            [PlayerSummary(date="2025-03-08", player="Ana", minutes_played=45, goals=2)],
        )


if __name__ == "__main__":
    unittest.main()
