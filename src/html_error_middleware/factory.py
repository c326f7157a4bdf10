# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
Application factory for the demo site.

create_app() builds a Flask app with the error middleware in front of the
demo routes. Tests call it with overrides to get an isolated app.
"""

from flask import Flask

from .config import Config
from .extensions import error_middleware, limiter
from .logging_config import setup_logging
from .routes import register_routes


def create_app(config_overrides=None):
    """
    Build the demo application.

    Args:
        config_overrides: Uppercase Config attributes to set before
                         validation, e.g. {"FLASK_ENV": "testing"}

    Returns:
        Flask: Configured app

    Raises:
        ValueError: If the effective configuration does not validate
    """
    for key, value in (config_overrides or {}).items():
        if isinstance(key, str) and key.isupper():
            setattr(Config, key, value)

    errors = Config.validate()
    if errors:
        raise ValueError("Configuration validation failed", errors)

    app = Flask(__name__)
    app.config.from_object(Config)
    Config.ensure_directories()

    setup_logging(app)
    limiter.init_app(app)

    # Installed before the routes so every view is covered
    error_middleware.init_app(app)
    register_routes(app)

    app.logger.info(f"Demo app ready ({Config.FLASK_ENV})")
    return app
