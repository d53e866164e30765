"""Core type definitions for the token bucket.

Both values are frozen: a transition builds a new ``BucketState`` instead of
mutating the current one.
"""

from __future__ import annotations

from dataclasses import dataclass, replace
from datetime import datetime, timedelta

from .errors import InvalidLimitError


@dataclass(frozen=True)
class Limit:
    quantity: int
    window: timedelta

    def validate(self) -> "Limit":
        """Raise ``InvalidLimitError`` unless quantity >= 0 and window > 0.

        A non-positive window would refill on every access.
        """
        if self.quantity < 0:
            raise InvalidLimitError(
                f"quantity must be >= 0, got {self.quantity}",
                quantity=self.quantity,
                window=self.window,
            )
        if self.window <= timedelta(0):
            raise InvalidLimitError(
                f"window must be positive, got {self.window}",
                quantity=self.quantity,
                window=self.window,
            )
        return self


@dataclass(frozen=True)
class BucketState:
    limit: Limit
    remaining_tokens: int
    last_refill: datetime

    def with_tokens(self, remaining_tokens: int, last_refill: datetime) -> "BucketState":
        # limit is always carried over
        return replace(self, remaining_tokens=remaining_tokens, last_refill=last_refill)

    def window_elapsed(self, instant: datetime) -> bool:
        return instant - self.last_refill >= self.limit.window
