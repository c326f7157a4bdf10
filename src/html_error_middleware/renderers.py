# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
Renderer module.

Error pages are produced through a small renderer interface so the
middleware does not depend on a particular template setup. The default
renderer goes through Flask's Jinja environment.
"""

from typing import NamedTuple

from flask import render_template


class RenderResult(NamedTuple):
    """Outcome of a render attempt: content on success, error on failure."""

    content: str | None = None
    error: Exception | None = None

    @property
    def ok(self):
        return self.error is None


class Renderer:
    """Base class for error page renderers."""

    def render(self, page, context=None):
        """
        Render a page.

        Args:
            page: Page identifier
            context: Optional data for the page (a Status for error templates)

        Returns:
            str: Rendered HTML
        """
        raise NotImplementedError


class TemplateRenderer(Renderer):
    """Render pages as Jinja templates of the current Flask app."""

    def __init__(self, context_name="status"):
        self.context_name = context_name

    def render(self, page, context=None):
        if context is None:
            return render_template(page)
        return render_template(page, **{self.context_name: context})


def attempt_render(renderer, page, context=None):
    """
    Render a page, capturing any failure.

    Args:
        renderer: Renderer to use
        page: Page identifier
        context: Optional page data

    Returns:
        RenderResult: Rendered content, or the error that prevented it
    """
    try:
        return RenderResult(content=renderer.render(page, context))
    except Exception as e:
        return RenderResult(error=e)
