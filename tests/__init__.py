# Copyright 2025 Ilja Heitlager
# SPDX-License-Identifier: Apache-2.0

"""
Test suite for HTML Error Middleware.

This package contains tests for all components:
- Status classification and renderers
- The error middleware, through the demo site and directly
- Configuration and logging
"""
