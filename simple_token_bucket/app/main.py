"""App bootstrap for an in-memory bucket."""

from __future__ import annotations

from typing import Optional

from .config import BucketConfig
from ..bucket.persistent import PersistentTokenBucket
from ..core.clock import Clock, SystemClock
from ..persistence.memory import InMemoryBucketPersistence
from ..state.store import BucketStore


def build_memory_bucket(
    config: BucketConfig,
    clock: Optional[Clock] = None,
    store: Optional[BucketStore] = None,
    history: Optional[int] = 1,
) -> tuple[PersistentTokenBucket, InMemoryBucketPersistence]:
    persistence = InMemoryBucketPersistence(config.key, store, history)
    bucket = PersistentTokenBucket(
        persistence,
        config.key,
        config.quantity,
        config.window,
        clock or SystemClock(),
    )
    return bucket, persistence
