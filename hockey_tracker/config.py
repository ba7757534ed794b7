"""
Configuration for the Hockey Match Tracker application.

Settings are read from environment variables, falling back to the defaults in
:mod:`hockey_tracker.utils.constants`.
"""
import os
from dataclasses import dataclass
from typing import Mapping, Optional

from .utils import constants


def _get_int(env: Mapping[str, str], key: str, default: int) -> int:
    raw = env.get(key)
    if raw is None or raw.strip() == "":
        return default
    try:
        return int(raw)
    except ValueError:
        raise ValueError(f"{key} must be an integer, got {raw!r}")


@dataclass
class Settings:
    """
    Runtime settings.

    Attributes:
        mongodb_uri: MongoDB connection string
        database_name: Database holding every collection (required for storage)
        actions_collection: Collection receiving archived actions
        summary_collection_prefix: Prefix of the per-category player summary collections
        players_collection_prefix: Prefix of the per-category player list collections
        match_summary_collection: Collection receiving match totals
        server_selection_timeout_ms: Driver timeout when no server is reachable
        player_list_limit: Maximum names returned by the player list (0 for no limit)
        cors_origin: Value of the Access-Control-Allow-Origin header
        host: Address the web server binds to
        port: Port the web server listens on
        log_level: Root logging level name
    """
    mongodb_uri: str = constants.DEFAULT_MONGODB_URI
    database_name: Optional[str] = None
    actions_collection: str = constants.DEFAULT_ACTIONS_COLLECTION
    summary_collection_prefix: str = constants.DEFAULT_SUMMARY_COLLECTION_PREFIX
    players_collection_prefix: str = constants.DEFAULT_PLAYERS_COLLECTION_PREFIX
    match_summary_collection: str = constants.DEFAULT_MATCH_SUMMARY_COLLECTION
    server_selection_timeout_ms: int = constants.DEFAULT_SERVER_SELECTION_TIMEOUT_MS
    player_list_limit: int = constants.DEFAULT_PLAYER_LIST_LIMIT
    cors_origin: str = constants.DEFAULT_CORS_ORIGIN
    host: str = constants.DEFAULT_HOST
    port: int = constants.DEFAULT_PORT
    log_level: str = constants.DEFAULT_LOG_LEVEL

    @classmethod
    def from_env(cls, env: Optional[Mapping[str, str]] = None) -> "Settings":
        """
        Build settings from environment variables.

        Args:
            env: Mapping to read from (defaults to ``os.environ``)

        Returns:
            Settings instance

        Raises:
            ValueError: If a numeric variable is not an integer
        """
        env = os.environ if env is None else env
        return cls(
            mongodb_uri=env.get("MONGODB_URI") or constants.DEFAULT_MONGODB_URI,
            database_name=env.get("MONGODB_DATABASE") or None,
            actions_collection=env.get("MONGODB_ACTIONS_COLLECTION")
            or constants.DEFAULT_ACTIONS_COLLECTION,
            summary_collection_prefix=env.get("MONGODB_RESUMEN_COLLECTION_PREFIX")
            or constants.DEFAULT_SUMMARY_COLLECTION_PREFIX,
            players_collection_prefix=env.get("MONGODB_PLAYERS_COLLECTION_PREFIX")
            or constants.DEFAULT_PLAYERS_COLLECTION_PREFIX,
            match_summary_collection=env.get("MONGODB_MATCH_SUMMARY_COLLECTION")
            or constants.DEFAULT_MATCH_SUMMARY_COLLECTION,
            server_selection_timeout_ms=_get_int(
                env,
                "MONGODB_SERVER_SELECTION_TIMEOUT_MS",
                constants.DEFAULT_SERVER_SELECTION_TIMEOUT_MS,
            ),
            player_list_limit=max(
                0, _get_int(env, "PLAYER_LIST_LIMIT", constants.DEFAULT_PLAYER_LIST_LIMIT)
            ),
            cors_origin=env.get("CORS_ALLOW_ORIGIN") or constants.DEFAULT_CORS_ORIGIN,
            host=env.get("HOCKEY_TRACKER_HOST") or constants.DEFAULT_HOST,
            port=_get_int(env, "HOCKEY_TRACKER_PORT", constants.DEFAULT_PORT),
            log_level=(env.get("LOG_LEVEL") or constants.DEFAULT_LOG_LEVEL).upper(),
        )
