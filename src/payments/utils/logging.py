"""Logging for the payments package."""

import structlog

logger = structlog.get_logger("payments")
