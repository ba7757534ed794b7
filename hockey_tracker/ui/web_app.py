"""
Web application module for the Hockey Match Tracker.

This module contains the Flask web server providing the JSON API used by the
browser UI: loading the players of a category, saving a finished match and
reading back the stored player summaries.
"""
import logging
import re
from typing import Any, Dict, Optional

from flask import Flask, Response, jsonify, request

from ..config import Settings
from ..services import (
    ConfigurationError, MatchRepository, ServiceFactory, StorageError,
    SubmissionValidationError, normalize_category, parse_submission
)

logger = logging.getLogger(__name__)

_UNSAFE_FILENAME_CHARS = re.compile(r"[^A-Za-z0-9_-]")

EXTENSION_KEY = "hockey_tracker"


class WebAppState:
    """
    State holder for one application instance.

    Owns the service factory and with it the database handle, which is
    released by :meth:`close` when the server shuts down.
    """

    def __init__(
        self,
        settings: Optional[Settings] = None,
        repository: Optional[MatchRepository] = None,
    ):
        self.settings = settings or Settings.from_env()
        self.service_factory = ServiceFactory(self.settings)
        self.repository = repository or self.service_factory.create_repository()
        self.calculator = self.service_factory.create_calculator()
        self.exporter = self.service_factory.get_exporter()

    def close(self) -> None:
        self.service_factory.close()


def _success(message: str, data: Any = None, status: int = 200):
    body: Dict[str, Any] = {"status": "success", "message": message}
    if data is not None:
        body["data"] = data
    return jsonify(body), status


def _error(message: str, status: int, **details):
    body: Dict[str, Any] = {"status": "error", "message": message}
    body.update(details)
    return jsonify(body), status


def export_filename(category: str) -> str:
    """Build the CSV download name for a category, keeping only header-safe characters."""
    stem = _UNSAFE_FILENAME_CHARS.sub("", normalize_category(category).replace(" ", "_"))
    return f"resumen_{stem}.csv" if stem else "resumen.csv"


def create_app(
    settings: Optional[Settings] = None,
    repository: Optional[MatchRepository] = None,
) -> Flask:
    """
    Create and configure the Flask application with API endpoints.

    Args:
        settings: Runtime settings (read from the environment when omitted)
        repository: Storage repository (built from settings when omitted)

    Returns:
        Configured Flask application instance
    """
    state = WebAppState(settings, repository)
    app = Flask(__name__)
    app.extensions[EXTENSION_KEY] = state

    @app.after_request
    def add_cors_headers(response):
        response.headers["Access-Control-Allow-Origin"] = state.settings.cors_origin
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type"
        return response

    @app.errorhandler(404)
    def not_found(error):
        return _error("Not Found", 404)

    @app.errorhandler(405)
    def method_not_allowed(error):
        logger.info("Method Not Allowed: %s %s", request.method, request.path)
        return _error("Method Not Allowed", 405)

    # ==================== API Endpoints ==================== #

    @app.route("/api/players", methods=["GET"])
    @app.route("/.netlify/functions/getJugadoras", methods=["GET"])
    def get_players():
        """List the players registered for a category."""
        category = request.args.get("categoria")
        if not category:
            logger.info("Missing categoria parameter")
            return _error("Missing category parameter", 400)

        try:
            names = state.repository.list_player_names(category)
        except ConfigurationError as e:
            logger.error("Storage is not configured: %s", e)
            return _error("Server configuration error: database name not set", 500)
        except StorageError as e:
            return _error("Error while loading players", 500, error=str(e))

        return _success(f"Found {len(names)} players", data=names)

    @app.route("/api/actions", methods=["POST"])
    @app.route("/.netlify/functions/saveActions", methods=["POST"])
    def save_actions():
        """Compute and store the summary of a finished match."""
        payload = request.get_json(force=True, silent=True)
        if payload is None:
            logger.error("Could not parse request body as JSON")
            return _error("Invalid JSON request body", 400)

        try:
            submission = parse_submission(payload)
        except SubmissionValidationError as e:
            return _error(e.message, 400, errors=e.errors)

        result = state.calculator.summarize(submission)

        try:
            report = state.repository.save_match(submission, result)
        except ConfigurationError as e:
            logger.error("Storage is not configured: %s", e)
            return _error("Server configuration error: database name not set", 500)
        except StorageError as e:
            return _error("Internal error while processing the request", 500, error=str(e))

        return _success(
            "Actions and summary saved",
            data={
                "actions": len(result.archived_actions),
                "players": len(result.player_summaries),
                **report.to_dict(),
            },
        )

    def _load_summaries():
        category = request.args.get("categoria")
        if not category:
            return None, _error("Missing category parameter", 400)
        category_key = normalize_category(category)
        if not category_key:
            return None, _error("Invalid category name", 400)
        date = request.args.get("fecha") or None
        try:
            return state.repository.find_player_summaries(category_key, date), None
        except ConfigurationError as e:
            logger.error("Storage is not configured: %s", e)
            return None, _error("Server configuration error: database name not set", 500)
        except StorageError as e:
            return None, _error("Error while loading summaries", 500, error=str(e))

    @app.route("/api/summaries", methods=["GET"])
    def get_summaries():
        """Get stored player summaries for a category."""
        summaries, failure = _load_summaries()
        if failure is not None:
            return failure
        return _success(
            f"Found {len(summaries)} summaries",
            data=[summary.to_document() for summary in summaries],
        )

    @app.route("/api/summaries/export", methods=["GET"])
    def export_summaries():
        """Export stored player summaries for a category as CSV."""
        summaries, failure = _load_summaries()
        if failure is not None:
            return failure
        csv_content = state.exporter.export_to_csv(summaries)
        filename = export_filename(request.args["categoria"])
        return Response(
            csv_content,
            mimetype="text/csv",
            headers={"Content-Disposition": f'attachment; filename="{filename}"'},
        )

    return app


def run_web_app(settings: Optional[Settings] = None) -> None:
    """
    Run the web application until interrupted.

    Args:
        settings: Runtime settings (read from the environment when omitted)
    """
    settings = settings or Settings.from_env()
    app = create_app(settings)
    state: WebAppState = app.extensions[EXTENSION_KEY]
    try:
        app.run(host=settings.host, port=settings.port, debug=False)
    finally:
        state.close()
