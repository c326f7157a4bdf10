# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
Error middleware module.

This module provides the Flask extension that turns error responses and
raised errors into rendered HTML error pages. Every outcome of the
downstream handler chain ends in a well-formed response with the status
it was classified as, even when the error page itself fails to render.
"""

from flask import Blueprint, current_app, request

from .logging_config import log_render_failure, log_server_error
from .renderers import TemplateRenderer, attempt_render
from .status import NOT_FOUND, classify

FALLBACK_BODY = (
    "<h1>Internal Error</h1><p>There was an internal error. Please try again later.</p>"
)
FALLBACK_CONTENT_TYPE = "text/html; charset=utf-8"

EXTENSION_NAME = "html_error_middleware"
ERROR_PAGE_MARKER = "is_error_page"

# Ships the default error templates; templates in the host app take precedence
templates_blueprint = Blueprint(EXTENSION_NAME, __name__, template_folder="templates")


class ErrorPageState:
    """Error page settings resolved for one Flask app."""

    def __init__(self, middleware, not_found_page, server_error_template, environment, renderer):
        self.middleware = middleware
        self.not_found_page = not_found_page
        self.server_error_template = server_error_template
        self.environment = environment
        self.renderer = renderer


class HTMLErrorMiddleware:
    """
    Flask extension rendering HTML pages for error outcomes.

    404s render the not-found page. Every other error status, and a 404
    whose page fails to render, renders the server-error template with the
    Status as context. If that fails too, a fixed HTML body is returned.

    One instance can serve several apps; the settings resolved for each app
    live in its ``app.extensions`` entry.
    """

    def __init__(
        self,
        app=None,
        not_found_page=None,
        server_error_template=None,
        environment=None,
        renderer=None,
        logger=None,
    ):
        """
        Initialize extension, optionally with an app instance.

        Args:
            app: Flask application instance
            not_found_page: Template rendered for 404s (default: ERROR_NOT_FOUND_PAGE)
            server_error_template: Template rendered for other errors
                                  (default: ERROR_SERVER_TEMPLATE)
            environment: Environment tag (default: FLASK_ENV). Error details
                         are never exposed, whatever the environment.
            renderer: Renderer for error pages (default: TemplateRenderer)
            logger: Logger for server errors (default: current_app.logger)
        """
        self._not_found_page = not_found_page
        self._server_error_template = server_error_template
        self._environment = environment
        self._renderer = renderer
        self._logger = logger
        if app:
            self.init_app(app)

    def init_app(self, app):
        """
        Initialize the extension with a Flask app.

        Args:
            app: Flask application instance
        """
        state = self._resolve_state(app)

        if EXTENSION_NAME not in app.blueprints:
            app.register_blueprint(templates_blueprint)

        # Abort errors and arbitrary errors arrive here
        app.register_error_handler(Exception, self.handle)
        # Responses returned by views arrive here
        app.after_request(self._after_request)

        app.logger.info(
            f"Error pages: {state.not_found_page} (404), {state.server_error_template} (other)"
        )

        if not hasattr(app, "extensions"):
            app.extensions = {}
        app.extensions[EXTENSION_NAME] = state

    def _resolve_state(self, app):
        return ErrorPageState(
            self,
            not_found_page=self._not_found_page
            or app.config.get("ERROR_NOT_FOUND_PAGE", "errors/404.html"),
            server_error_template=self._server_error_template
            or app.config.get("ERROR_SERVER_TEMPLATE", "errors/server_error.html"),
            environment=self._environment or app.config.get("FLASK_ENV", "production"),
            renderer=self._renderer or TemplateRenderer(),
        )

    @property
    def state(self):
        """Settings for the current app; resolved on the fly if init_app never ran for it."""
        state = current_app.extensions.get(EXTENSION_NAME)
        if state is None or state.middleware is not self:
            return self._resolve_state(current_app)
        return state

    @property
    def logger(self):
        return self._logger or current_app.logger

    def handle(self, outcome):
        """
        Produce the response for a downstream outcome.

        Args:
            outcome: Response returned by the handler chain, or the
                     exception it raised

        Returns:
            Response: The outcome itself when below 400, otherwise an
                      error page carrying the classified status
        """
        status = classify(outcome)
        if status is None:
            return outcome

        state = self.state
        if status.code == NOT_FOUND:
            result = attempt_render(state.renderer, state.not_found_page)
            if result.ok:
                return self._make_response(result.content, status)

        return self._render_server_error_page(state, status)

    def _after_request(self, response):
        # Error pages built by handle() pass through after_request as well
        if getattr(response, ERROR_PAGE_MARKER, False):
            return response
        return self.handle(response)

    def _render_server_error_page(self, state, status):
        log_server_error(self.logger, status, request.path)

        result = attempt_render(state.renderer, state.server_error_template, status)
        if result.ok:
            return self._make_response(result.content, status)
        return self._present_default_error(status, result.error)

    def _present_default_error(self, status, error):
        log_render_failure(self.logger, error)
        return self._make_response(FALLBACK_BODY, status, content_type=FALLBACK_CONTENT_TYPE)

    def _make_response(self, content, status, content_type=None):
        response = current_app.response_class(
            content, status=status.code, content_type=content_type
        )
        setattr(response, ERROR_PAGE_MARKER, True)
        return response
