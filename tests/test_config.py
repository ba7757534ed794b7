"""Tests for environment based settings and the database handle."""

from unittest.mock import patch

import pytest

from hockey_tracker.config import Settings
from hockey_tracker.services import ConfigurationError, MongoDatabase


def test_defaults_without_environment():
    settings = Settings.from_env({})

    assert settings.database_name is None
    assert settings.actions_collection == "acciones"
    assert settings.summary_collection_prefix == "resumen_"
    assert settings.match_summary_collection == "resumen_partidos"
    assert settings.server_selection_timeout_ms == 5000
    assert settings.player_list_limit == 0
    assert settings.port == 7122
    assert settings.log_level == "INFO"


def test_environment_overrides():
    settings = Settings.from_env(
        {
            "MONGODB_URI": "mongodb://db:27017",
            "MONGODB_DATABASE": "hockey",
            "MONGODB_ACTIONS_COLLECTION": "actions",
            "MONGODB_RESUMEN_COLLECTION_PREFIX": "summary_",
            "MONGODB_PLAYERS_COLLECTION_PREFIX": "players_",
            "PLAYER_LIST_LIMIT": "10",
            "HOCKEY_TRACKER_PORT": "8080",
            "LOG_LEVEL": "debug",
        }
    )

    assert settings.mongodb_uri == "mongodb://db:27017"
    assert settings.database_name == "hockey"
    assert settings.actions_collection == "actions"
    assert settings.summary_collection_prefix == "summary_"
    assert settings.players_collection_prefix == "players_"
    assert settings.player_list_limit == 10
    assert settings.port == 8080
    assert settings.log_level == "DEBUG"


def test_invalid_integer_is_rejected():
    with pytest.raises(ValueError, match="HOCKEY_TRACKER_PORT"):
        Settings.from_env({"HOCKEY_TRACKER_PORT": "http"})


def test_database_requires_name():
    database = MongoDatabase("mongodb://localhost:27017")

    with pytest.raises(ConfigurationError):
        database.db


def test_database_lifecycle():
    with patch("hockey_tracker.services.database.MongoClient") as client_class:
        with MongoDatabase.from_settings(Settings(database_name="hockey")) as database:
            assert database.is_connected
            database.collection("acciones")

        client_class.assert_called_once_with(
            "mongodb://localhost:27017", serverSelectionTimeoutMS=5000
        )
        client_class.return_value.__getitem__.assert_called_once_with("hockey")
        client_class.return_value.close.assert_called_once_with()
        assert not database.is_connected
