# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
Logging setup for the demo site.

Server errors and render failures go to the Flask app logger; this module
sends that logger to rotating files and the console, and holds the message
helpers the middleware logs with.
"""

import logging
from logging.handlers import RotatingFileHandler
from pathlib import Path

from .config import Config

FILE_FORMAT = "[%(asctime)s] %(levelname)s in %(module)s (%(funcName)s): %(message)s"
CONSOLE_FORMAT = "[%(asctime)s] %(levelname)s: %(message)s"


def _rotating_handler(path, level):
    handler = RotatingFileHandler(
        path, maxBytes=Config.LOG_MAX_BYTES, backupCount=Config.LOG_BACKUP_COUNT
    )
    handler.setLevel(level)
    handler.setFormatter(logging.Formatter(FILE_FORMAT))
    return handler


def setup_logging(app):
    """
    Attach handlers to app.logger.

    - LOG_DIR/app.log: everything at LOG_LEVEL and above
    - LOG_DIR/error.log: server errors and render failures only
    - console: INFO, or DEBUG when the app runs in debug mode

    Args:
        app: Flask application instance
    """
    log_dir = Path(Config.LOG_DIR)
    log_dir.mkdir(parents=True, exist_ok=True)
    level = getattr(logging, Config.LOG_LEVEL.upper(), logging.INFO)

    console = logging.StreamHandler()
    console.setLevel(logging.DEBUG if app.debug else logging.INFO)
    console.setFormatter(logging.Formatter(CONSOLE_FORMAT))

    app.logger.setLevel(level)
    app.logger.addHandler(_rotating_handler(log_dir / "app.log", level))
    app.logger.addHandler(_rotating_handler(log_dir / "error.log", logging.ERROR))
    app.logger.addHandler(console)

    app.logger.info(f"Logging to {log_dir} at {logging.getLevelName(level)}")


def log_server_error(logger, status, path):
    """Log a request classified as a server error"""
    logger.error(f"Internal server error. Status: {status.code} - path: {path}")


def log_render_failure(logger, error):
    """Log a failed error page render"""
    logger.error(f"Failed to render custom error page - {error}")


def log_rate_limit(logger, identifier, endpoint):
    """Log rate limit event"""
    logger.warning(f"Rate limit exceeded: {identifier} on {endpoint}")
