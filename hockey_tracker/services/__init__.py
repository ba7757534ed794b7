"""
Services package for the Hockey Match Tracker.

This package contains service classes that handle business logic and storage.
"""
from .submission_service import (
    SubmissionValidationError, parse_submission, validate_payload, normalize_category
)
from .summary_service import MatchSummaryCalculator, SummaryCsvExporter, summarize_match
from .database import MongoDatabase, ConfigurationError
from .persistence_service import MatchRepository, SaveReport, StorageError
from .service_factory import ServiceFactory

__all__ = [
    "SubmissionValidationError", "parse_submission", "validate_payload", "normalize_category",
    "MatchSummaryCalculator", "SummaryCsvExporter", "summarize_match",
    "MongoDatabase", "ConfigurationError",
    "MatchRepository", "SaveReport", "StorageError",
    "ServiceFactory"
]
