"""Pytest configuration and fixtures for Hockey Match Tracker tests."""

import pytest

from hockey_tracker.config import Settings
from hockey_tracker.models import PlayerSummary
from hockey_tracker.services import SaveReport
from hockey_tracker.ui import create_app


class FakeMatchRepository:
    """In-memory stand-in for MatchRepository, used by the web API tests."""

    def __init__(self):
        self.players = {"sub 14": ["Ana", "Bea", "Carla"]}
        self.saved = []
        self.summaries = {}
        self.error = None

    def list_player_names(self, category):
        if self.error:
            raise self.error
        return list(self.players.get(category.strip().lower(), []))

    def save_match(self, submission, result):
        if self.error:
            raise self.error
        self.saved.append((submission, result))
        stored = self.summaries.setdefault(submission.category_key, {})
        for summary in result.player_summaries:
            stored[(summary.date, summary.player)] = summary
        return SaveReport(
            inserted_actions=len(result.archived_actions),
            upserted_summaries=len(result.player_summaries),
        )

    def find_player_summaries(self, category_key, date=None):
        if self.error:
            raise self.error
        stored = self.summaries.get(category_key, {})
        return [
            summary
            for (summary_date, _), summary in sorted(stored.items())
            if date is None or summary_date == date
        ]


def build_payload(**overrides):
    """Build a valid saveActions payload."""
    payload = {
        "fecha": "2025-03-08",
        "categoria": "Jugadoras Sub 14",
        "titulares": ["Ana", "Bea"],
        "suplentes": ["Carla"],
        "accionesData": [
            ["Ana", "Sale minuto 30", 30],
            ["Carla", "Entra minuto 30", 30],
            ["Bea", "Gol", 1],
        ],
        "golesPropios": 1,
        "golesRival": 0,
    }
    payload.update(overrides)
    return payload


@pytest.fixture
def make_payload():
    return build_payload


@pytest.fixture
def settings():
    return Settings(database_name="hockey_test")


@pytest.fixture
def repository():
    return FakeMatchRepository()


@pytest.fixture
def app(settings, repository):
    return create_app(settings, repository)


@pytest.fixture
def client(app):
    return app.test_client()


@pytest.fixture
def sample_summary():
    return PlayerSummary(date="2025-03-08", player="Ana", minutes_played=60, goals=2)
