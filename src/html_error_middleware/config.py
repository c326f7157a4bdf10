# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
Configuration module for HTML Error Middleware.

Loads configuration from environment variables with sensible defaults.
Supports command-line argument overrides.
"""

import argparse
import os
from pathlib import Path

ENVIRONMENTS = ("production", "development", "testing")


class Config:
    """Application configuration class."""

    # Flask Configuration
    SECRET_KEY = os.getenv("SECRET_KEY", "dev-secret-key-change-in-production")

    # Error Page Configuration
    ERROR_NOT_FOUND_PAGE = os.getenv("ERROR_NOT_FOUND_PAGE", "errors/404.html")
    ERROR_SERVER_TEMPLATE = os.getenv("ERROR_SERVER_TEMPLATE", "errors/server_error.html")

    # Rate Limiting Configuration (names read by Flask-Limiter)
    RATELIMIT_ENABLED = os.getenv("RATE_LIMIT_ENABLED", "true").lower() == "true"
    RATELIMIT_STORAGE_URI = os.getenv("REDIS_URL", "memory://")
    RATELIMIT_DEFAULT = os.getenv("RATE_LIMIT_DEFAULT", "200 per day")

    # Logging Configuration
    LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")
    LOG_DIR = os.getenv("LOG_DIR", "logs")
    LOG_MAX_BYTES = int(os.getenv("LOG_MAX_BYTES", str(10 * 1024 * 1024)))  # 10MB
    LOG_BACKUP_COUNT = int(os.getenv("LOG_BACKUP_COUNT", "5"))

    # Flask Server Configuration
    # Default to 0.0.0.0 in Docker containers, 127.0.0.1 otherwise
    _in_container = os.path.exists("/.dockerenv") or os.getenv("KUBERNETES_SERVICE_HOST")
    HOST = os.getenv("FLASK_HOST", "0.0.0.0" if _in_container else "127.0.0.1")
    PORT = int(os.getenv("FLASK_PORT", "5000"))
    DEBUG = os.getenv("FLASK_DEBUG", "false").lower() == "true"
    FLASK_ENV = os.getenv("FLASK_ENV", "production")

    @classmethod
    def from_cli_args(cls, args=None):
        """
        Update configuration from command-line arguments.

        Args:
            args: Parsed argparse Namespace object or None to parse from sys.argv
        """
        if args is None:
            parser = cls.create_argument_parser()
            # Use parse_known_args so test runners (pytest) or other wrappers
            # passing extra args don't cause argparse to exit the process.
            args, _ = parser.parse_known_args()

        # Override configuration from CLI args
        if args.host:
            cls.HOST = args.host
        if args.port:
            cls.PORT = args.port
        if args.debug:
            cls.DEBUG = True
            cls.FLASK_ENV = "development"
        if args.env:
            cls.FLASK_ENV = args.env
        if args.not_found_page:
            cls.ERROR_NOT_FOUND_PAGE = args.not_found_page
        if args.server_error_template:
            cls.ERROR_SERVER_TEMPLATE = args.server_error_template
        if args.log_level:
            cls.LOG_LEVEL = args.log_level.upper()

    @staticmethod
    def create_argument_parser():
        """Create and return argument parser for CLI options."""
        parser = argparse.ArgumentParser(
            description="HTML Error Middleware - demo site for templated error pages",
            formatter_class=argparse.ArgumentDefaultsHelpFormatter,
        )

        # Server options
        server_group = parser.add_argument_group("Server Options")
        server_group.add_argument(
            "--host", type=str, help="Host to bind the server to (default: 127.0.0.1)"
        )
        server_group.add_argument(
            "--port", "-p", type=int, help="Port to bind the server to (default: 5000)"
        )
        server_group.add_argument("--debug", "-d", action="store_true", help="Enable debug mode")
        server_group.add_argument(
            "--env", type=str, choices=list(ENVIRONMENTS), help="Environment tag"
        )

        # Error page options
        pages_group = parser.add_argument_group("Error Page Options")
        pages_group.add_argument(
            "--not-found-page", type=str, help="Template rendered for 404 responses"
        )
        pages_group.add_argument(
            "--server-error-template",
            type=str,
            help="Template rendered for every other error status",
        )

        # Logging options
        logging_group = parser.add_argument_group("Logging Options")
        logging_group.add_argument(
            "--log-level",
            type=str,
            choices=["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"],
            help="Logging level",
        )

        return parser

    @classmethod
    def validate(cls):
        """Validate required configuration values."""
        errors = []

        if not cls.ERROR_NOT_FOUND_PAGE:
            errors.append("ERROR_NOT_FOUND_PAGE must name a template.")
        if not cls.ERROR_SERVER_TEMPLATE:
            errors.append("ERROR_SERVER_TEMPLATE must name a template.")

        if cls.FLASK_ENV not in ENVIRONMENTS:
            errors.append(
                f"FLASK_ENV must be one of {', '.join(ENVIRONMENTS)} (got {cls.FLASK_ENV!r})."
            )

        if not cls.SECRET_KEY or cls.SECRET_KEY == "dev-secret-key-change-in-production":
            if cls.FLASK_ENV == "production":
                errors.append(
                    "SECRET_KEY must be set to a secure random value in production. "
                    "Generate one with: python -c 'import secrets; print(secrets.token_hex(32))'"
                )

        return errors

    @classmethod
    def ensure_directories(cls):
        """Ensure required directories exist."""
        Path(cls.LOG_DIR).mkdir(parents=True, exist_ok=True)

    @classmethod
    def to_dict(cls):
        """Return configuration as dictionary (for Flask app.config.from_object)."""
        return {
            key: value
            for key, value in cls.__dict__.items()
            if not key.startswith("_") and key.isupper()
        }
