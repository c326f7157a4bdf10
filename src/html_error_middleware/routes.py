# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
Routes module.

Demonstration endpoints, one per kind of downstream outcome the error
middleware handles.
"""

from flask import abort, render_template

from .extensions import limiter


class DemoError(Exception):
    """Plain error raised by a view, with no HTTP status attached."""


def register_routes(app):
    """
    Register all routes with the Flask application.

    Args:
        app: Flask application instance
    """

    @app.route("/")
    def index():
        """List the demonstration endpoints."""
        return render_template("index.html")

    @app.route("/ok")
    def ok():
        return "ok"

    @app.route("/server-error")
    def server_error():
        abort(500)

    @app.route("/unknown-error")
    def unknown_error():
        raise DemoError("view failed without an HTTP status")

    @app.route("/unauthorized")
    def unauthorized():
        abort(401)

    @app.route("/forbidden")
    def forbidden():
        abort(403)

    @app.route("/missing")
    def missing():
        abort(404)

    @app.route("/teapot")
    def teapot():
        """Return an error status without raising."""
        return "I'm a teapot", 418

    @app.route("/limited")
    @limiter.limit("1 per minute")
    def limited():
        """Allow one request per minute; later ones get a 429 page."""
        return "ok"
