"""Persistent token bucket.

Tokens are not dripped back over time: once a full window has passed since
the last refill, the next access resets the bucket to its quota and restarts
the window at that access. Each transition is written to the persistence
backend before the call returns, so a restarted process resumes from the last
saved state.

Instances are not thread-safe; serialise access to a bucket externally.
"""

from __future__ import annotations

import logging
from datetime import datetime, timedelta
from typing import Optional

from .base import TokenBucket
from ..core.clock import Clock
from ..core.errors import InvalidQuantityError
from ..core.types import BucketState, Limit
from ..io import metrics
from ..persistence.base import BucketPersistence

logger = logging.getLogger(__name__)


class PersistentTokenBucket(TokenBucket):
    def __init__(
        self,
        persistence: BucketPersistence,
        key: str,
        default_quantity: int,
        default_window: timedelta,
        clock: Clock,
    ):
        default_limit = Limit(default_quantity, default_window).validate()
        self.persistence = persistence
        self.key = key
        self.clock = clock
        recovered = self._retrieve_state()
        if recovered is not None:
            # refill waits for the first access
            self._state = recovered
            logger.debug(
                "recovered bucket %s: remaining=%s last_refill=%s",
                key,
                recovered.remaining_tokens,
                recovered.last_refill.isoformat(),
            )
        else:
            self._state = BucketState(default_limit, default_quantity, clock.now())
            self.persistence.save(self._state)
            logger.debug(
                "created bucket %s with %s tokens per %s",
                key,
                default_quantity,
                default_window,
            )

    @property
    def state(self) -> BucketState:
        return self._state

    @property
    def limit(self) -> Limit:
        return self._state.limit

    def try_consume(self, quantity: int) -> bool:
        if quantity < 0:
            raise InvalidQuantityError(quantity)
        now = self.clock.now()
        self._refill(now)
        remaining = self._state.remaining_tokens
        allowed = remaining >= quantity
        if allowed:
            self._update_state(remaining - quantity, now)
        logger.debug(
            "bucket %s consume %s -> %s (remaining=%s)",
            self.key,
            quantity,
            "allowed" if allowed else "rejected",
            self._state.remaining_tokens,
        )
        metrics.inc_decision(self.key, allowed)
        return allowed

    def get_remaining(self) -> int:
        self._refill(self.clock.now())
        return self._state.remaining_tokens

    def _refill(self, now: datetime):
        if self._state.window_elapsed(now):
            logger.debug("bucket %s window elapsed, refilling", self.key)
            self._update_state(self._state.limit.quantity, now)
            metrics.inc_refill(self.key)

    def _update_state(self, remaining_tokens: int, now: datetime):
        # the backend's return value never replaces the in-memory state
        self._state = self._state.with_tokens(remaining_tokens, now)
        self.persistence.save(self._state)

    def _retrieve_state(self) -> Optional[BucketState]:
        return self.persistence.load(self.key)
