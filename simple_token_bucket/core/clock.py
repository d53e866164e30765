"""Clocks supplying the current instant to a bucket."""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime, timedelta, timezone
from typing import Optional


class Clock(ABC):
    @abstractmethod
    def now(self) -> datetime: ...


class SystemClock(Clock):
    """Wall clock in UTC."""

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class ManualClock(Clock):
    """Clock that only moves when told to; used by tests and simulations."""

    def __init__(self, start: Optional[datetime] = None):
        self._now = start or datetime.fromtimestamp(0, tz=timezone.utc)

    def now(self) -> datetime:
        return self._now

    def set(self, instant: datetime):
        self._now = instant

    def advance(self, delta: timedelta) -> datetime:
        self._now = self._now + delta
        return self._now
