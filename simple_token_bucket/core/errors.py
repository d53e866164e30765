"""Errors raised by the token bucket itself.

Failures coming from a clock or a persistence backend are never wrapped; they
reach the caller as raised.
"""

from __future__ import annotations

from datetime import timedelta
from typing import Any, Dict, Optional


class TokenBucketError(Exception):
    def __init__(self, message: str, details: Optional[Dict[str, Any]] = None):
        self.message = message
        self.details = details or {}
        super().__init__(message)


class ConfigurationError(TokenBucketError, ValueError):
    """Invalid bucket or application settings."""


class InvalidLimitError(ConfigurationError):
    def __init__(self, message: str, quantity: int, window: timedelta):
        self.quantity = quantity
        self.window = window
        super().__init__(message, {"quantity": quantity, "window": str(window)})


class InvalidQuantityError(ConfigurationError):
    def __init__(self, quantity: int):
        self.quantity = quantity
        super().__init__(
            f"cannot consume a negative quantity: {quantity}", {"quantity": quantity}
        )
