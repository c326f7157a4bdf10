# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
Shared test fixtures and configuration for pytest.

This module provides fixtures for:
- Flask application with test configuration
- HTTP test client
- A recording renderer that can be told to fail
- Mocked application logger
"""

import sys
from pathlib import Path

import pytest

# Add src to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "src"))

from html_error_middleware.factory import create_app
from html_error_middleware.renderers import Renderer


class RenderError(Exception):
    """Raised by RecordingRenderer when told to fail."""


class RecordingRenderer(Renderer):
    """Renderer that records every call and optionally fails."""

    def __init__(self):
        self.calls = []
        self.should_raise = False
        self.failing_pages = set()

    @property
    def page(self):
        return self.calls[-1][0] if self.calls else None

    @property
    def context(self):
        return self.calls[-1][1] if self.calls else None

    def render(self, page, context=None):
        self.calls.append((page, context))
        if self.should_raise or page in self.failing_pages:
            raise RenderError(f"cannot render {page}")
        return "Test"


@pytest.fixture
def app(tmp_path):
    """Create and configure a test Flask application instance using factory pattern."""
    test_app = create_app(
        config_overrides={
            "TESTING": True,
            "FLASK_ENV": "testing",
            "SECRET_KEY": "test-secret-key",
            "LOG_DIR": str(tmp_path / "logs"),
        }
    )

    with test_app.app_context():
        yield test_app


@pytest.fixture
def client(app, monkeypatch):
    """Create a test client for the app with rate limiting disabled."""
    from html_error_middleware.extensions import limiter

    # Disable rate limiter for this test only
    monkeypatch.setattr(limiter, "enabled", False)
    return app.test_client()


@pytest.fixture
def error_pages(app):
    """Return the error page settings resolved for the app."""
    return app.extensions["html_error_middleware"]


@pytest.fixture
def middleware(error_pages):
    """Return the error middleware registered on the app."""
    return error_pages.middleware


@pytest.fixture
def renderer(error_pages):
    """Swap the app's error page renderer for a recording one."""
    recording = RecordingRenderer()
    error_pages.renderer = recording
    return recording


@pytest.fixture
def mock_logger(mocker, app):
    """Mock the application logger."""
    return mocker.patch.object(app, "logger")


@pytest.fixture(autouse=True)
def reset_config():
    """Reset Config class attributes before and after each test to avoid cross-test contamination."""
    from html_error_middleware.config import Config

    # Define default values to reset to
    default_values = {
        "SECRET_KEY": "dev-secret-key-change-in-production",
        "ERROR_NOT_FOUND_PAGE": "errors/404.html",
        "ERROR_SERVER_TEMPLATE": "errors/server_error.html",
        "RATELIMIT_ENABLED": True,
        "RATELIMIT_STORAGE_URI": "memory://",
        "RATELIMIT_DEFAULT": "200 per day",
        "LOG_LEVEL": "INFO",
        "LOG_DIR": "logs",
        "HOST": "127.0.0.1",
        "PORT": 5000,
        "DEBUG": False,
        "FLASK_ENV": "production",
    }

    # Reset BEFORE test runs
    for key, value in default_values.items():
        setattr(Config, key, value)

    yield

    # Reset AFTER test runs
    for key, value in default_values.items():
        setattr(Config, key, value)
