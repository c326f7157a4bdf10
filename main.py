# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
Main entry point for the HTML Error Middleware demo site.

Runs the demonstration application from a source checkout.
"""

from html_error_middleware.main import main

if __name__ == "__main__":
    main()
