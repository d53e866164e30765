"""Environment-driven settings for wiring a bucket.

Reads ``.env`` (if present) before consulting the process environment:

* ``TOKEN_BUCKET_KEY`` - bucket key (default ``default``)
* ``TOKEN_BUCKET_QUANTITY`` - tokens per window (default 10)
* ``TOKEN_BUCKET_WINDOW_SECONDS`` - window length in seconds (default one day)
* ``TOKEN_BUCKET_LOG_LEVEL`` - logging level name for entry points (default INFO)
"""

from __future__ import annotations

import logging
import math
import os
from dataclasses import dataclass
from datetime import timedelta

from dotenv import load_dotenv  # type: ignore

from ..core.errors import ConfigurationError
from ..core.types import Limit

DEFAULT_KEY = "default"
DEFAULT_QUANTITY = 10
DEFAULT_WINDOW_SECONDS = 86400.0


def _to_window(seconds: float) -> timedelta:
    try:
        return timedelta(seconds=seconds)
    except (OverflowError, ValueError) as e:
        raise ConfigurationError(
            f"window of {seconds!r} seconds is out of range",
            {"window_seconds": seconds},
        ) from e


@dataclass(frozen=True)
class BucketConfig:
    key: str = DEFAULT_KEY
    quantity: int = DEFAULT_QUANTITY
    window_seconds: float = DEFAULT_WINDOW_SECONDS
    log_level: str = "INFO"

    @property
    def window(self) -> timedelta:
        return _to_window(self.window_seconds)

    def limit(self) -> Limit:
        return Limit(self.quantity, self.window).validate()


def _env_number(name: str, default, cast):
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        value = cast(raw.strip())
    except ValueError as e:
        raise ConfigurationError(
            f"{name} must be a number, got {raw!r}", {"variable": name}
        ) from e
    if isinstance(value, float) and not math.isfinite(value):
        raise ConfigurationError(
            f"{name} must be finite, got {raw!r}", {"variable": name}
        )
    return value


def _env_log_level(name: str, default: str) -> str:
    level = (os.getenv(name) or default).strip().upper()
    # getLevelName maps registered names to their numeric level
    if not isinstance(logging.getLevelName(level), int):
        raise ConfigurationError(
            f"{name} is not a logging level: {level!r}", {"variable": name}
        )
    return level


def load_bucket_config(dotenv: bool = True) -> BucketConfig:
    if dotenv:
        load_dotenv()
    window_seconds = _env_number(
        "TOKEN_BUCKET_WINDOW_SECONDS", DEFAULT_WINDOW_SECONDS, float
    )
    _to_window(window_seconds)
    return BucketConfig(
        key=os.getenv("TOKEN_BUCKET_KEY") or DEFAULT_KEY,
        quantity=_env_number("TOKEN_BUCKET_QUANTITY", DEFAULT_QUANTITY, int),
        window_seconds=window_seconds,
        log_level=_env_log_level("TOKEN_BUCKET_LOG_LEVEL", "INFO"),
    )
