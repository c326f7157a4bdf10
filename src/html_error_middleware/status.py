# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
HTTP status module.

This module provides the Status value passed to error templates and the
classification of downstream outcomes into a Status.
"""

from typing import NamedTuple

from werkzeug.exceptions import HTTPException
from werkzeug.http import HTTP_STATUS_CODES

BAD_REQUEST = 400
NOT_FOUND = 404
INTERNAL_SERVER_ERROR = 500


class Status(NamedTuple):
    """HTTP status code paired with its reason phrase."""

    code: int
    reason_phrase: str

    def __str__(self):
        return f"{self.code} {self.reason_phrase}"

    @classmethod
    def from_code(cls, code):
        """
        Build a Status for a numeric code.

        Args:
            code: HTTP status code

        Returns:
            Status: Code with its canonical reason phrase
        """
        return cls(code, HTTP_STATUS_CODES.get(code, "Unknown Error"))

    @classmethod
    def from_error(cls, error):
        """
        Build a Status for a raised error.

        Abort errors keep the status they carry. Anything else, including
        an HTTPException without a code, is an internal server error.
        """
        if isinstance(error, HTTPException) and error.code is not None:
            return cls.from_code(error.code)
        return cls.from_code(INTERNAL_SERVER_ERROR)


def classify(outcome):
    """
    Classify a downstream outcome.

    Args:
        outcome: Response object or raised exception

    Returns:
        Status: Target status, or None when the outcome passes through
    """
    if isinstance(outcome, BaseException):
        return Status.from_error(outcome)
    if outcome.status_code >= BAD_REQUEST:
        return Status.from_code(outcome.status_code)
    return None
