# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
Flask extensions module.

This module provides singleton extension instances that are initialized
by the application factory. This pattern ensures extensions are properly
configured and can be safely imported throughout the application.
"""

from flask import current_app, request
from flask_limiter import Limiter
from flask_limiter.util import get_remote_address

from .logging_config import log_rate_limit
from .middleware import HTMLErrorMiddleware


def _log_rate_limit_breach(request_limit):
    """Log requests rejected by the rate limiter; the 429 page is left to the middleware."""
    log_rate_limit(current_app.logger, get_remote_address(), request.endpoint)


# Rate limiting extension
limiter = Limiter(
    key_func=get_remote_address,
    on_breach=_log_rate_limit_breach,
)

# Error page middleware
error_middleware = HTMLErrorMiddleware()
