"""
Constants for the Hockey Match Tracker application.

This module contains configuration defaults and action labels used throughout
the application.
"""

# Application metadata
APP_TITLE = "Hockey Match Tracker"

# Match timing
MATCH_DURATION_MIN = 60

# Category names arrive as "Jugadoras <category>" from the browser
CATEGORY_PREFIX = "Jugadoras "

# Action labels recorded by the browser UI
EXIT_LABEL = "Sale minuto"
ENTER_LABEL = "Entra minuto"
OPPONENT_GOAL_LABEL = "Gol Rival"

# Storage defaults (overridable through environment variables)
DEFAULT_MONGODB_URI = "mongodb://localhost:27017"
DEFAULT_ACTIONS_COLLECTION = "acciones"
DEFAULT_SUMMARY_COLLECTION_PREFIX = "resumen_"
DEFAULT_PLAYERS_COLLECTION_PREFIX = "jugadoras_"
DEFAULT_MATCH_SUMMARY_COLLECTION = "resumen_partidos"
DEFAULT_SERVER_SELECTION_TIMEOUT_MS = 5000
DEFAULT_PLAYER_LIST_LIMIT = 0  # 0 means no limit

# Web server defaults
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 7122
DEFAULT_CORS_ORIGIN = "*"
DEFAULT_LOG_LEVEL = "INFO"
