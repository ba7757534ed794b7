"""
Service factory for the Hockey Match Tracker.

Creates configured service instances with their dependencies injected, so
that the web layer never builds storage handles itself.
"""
from typing import Optional

from ..config import Settings
from .database import MongoDatabase
from .persistence_service import MatchRepository
from .summary_service import MatchSummaryCalculator, SummaryCsvExporter


class ServiceFactory:
    """Factory for creating service instances sharing one database handle."""

    def __init__(self, settings: Optional[Settings] = None):
        self.settings = settings or Settings.from_env()
        self._database: Optional[MongoDatabase] = None
        self._exporter: Optional[SummaryCsvExporter] = None

    def get_database(self) -> MongoDatabase:
        """Get the shared database handle (not connected until first use)."""
        if self._database is None:
            self._database = MongoDatabase.from_settings(self.settings)
        return self._database

    def create_repository(self, database: Optional[MongoDatabase] = None) -> MatchRepository:
        """
        Create a MatchRepository.

        Args:
            database: Optional database handle (defaults to the shared one)

        Returns:
            Configured MatchRepository instance
        """
        return MatchRepository(database or self.get_database(), self.settings)

    def create_calculator(self, match_duration_minutes: Optional[int] = None) -> MatchSummaryCalculator:
        if match_duration_minutes is None:
            return MatchSummaryCalculator()
        return MatchSummaryCalculator(match_duration_minutes)

    def get_exporter(self) -> SummaryCsvExporter:
        if self._exporter is None:
            self._exporter = SummaryCsvExporter()
        return self._exporter

    def close(self) -> None:
        """Release the shared database handle."""
        if self._database is not None:
            self._database.close()
