"""
Application configuration.

Values are read from the environment once, at import time, and copied
into ``app.config`` by :func:`upi_analyzer.create_app`.
"""

from __future__ import annotations

import os

from upi_analyzer.utils.financial import (
    LARGE_TRANSACTION_THRESHOLD,
    SMALL_TRANSACTION_FLOOR,
    to_decimal,
)


class Config:
    API_BASE = os.getenv("UPI_API_BASE", "/upi/v1")
    LARGE_TRANSACTION_THRESHOLD = to_decimal(
        os.getenv("UPI_LARGE_TRANSACTION_THRESHOLD", LARGE_TRANSACTION_THRESHOLD)
    )
    SMALL_TRANSACTION_FLOOR = to_decimal(
        os.getenv("UPI_SMALL_TRANSACTION_FLOOR", SMALL_TRANSACTION_FLOOR)
    )
    LOG_LEVEL = os.getenv("UPI_LOG_LEVEL", "INFO")
