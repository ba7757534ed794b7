#!/usr/bin/env python3
"""
Main entry point for the Hockey Match Tracker web application.

This script configures logging and launches the Flask-based web server.
"""
import logging

from hockey_tracker.config import Settings
from hockey_tracker.ui.web_app import run_web_app

if __name__ == "__main__":
    settings = Settings.from_env()
    logging.basicConfig(
        level=settings.log_level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run_web_app(settings)
