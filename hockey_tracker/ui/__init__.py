"""
UI package for the Hockey Match Tracker.

This package contains the Flask web server backing the browser UI.
"""
from .web_app import create_app, run_web_app, WebAppState

__all__ = ["create_app", "run_web_app", "WebAppState"]
