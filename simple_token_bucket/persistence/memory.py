"""In-memory persistence for tests, demos and simulations.

Several ``InMemoryBucketPersistence`` views may share one ``BucketStore``; each
view writes under the key it was created for, which is how a second bucket for
the same key recovers what the first one saved.

Nothing survives the process. ``history`` bounds how many saved states are
kept in ``saved``; ``None`` keeps every one, which only suits short runs.
"""

from __future__ import annotations

from collections import deque
from typing import Deque, Optional

from .base import BucketPersistence
from ..core.types import BucketState
from ..state.store import BucketStore


class InMemoryBucketPersistence(BucketPersistence):
    def __init__(
        self,
        key: str,
        store: Optional[BucketStore] = None,
        history: Optional[int] = None,
    ):
        self.key = key
        self.store = store if store is not None else BucketStore()
        self.saved: Deque[BucketState] = deque(maxlen=history)
        self.save_count = 0

    def load(self, key: str) -> Optional[BucketState]:
        return self.store.get(key)

    def save(self, state: BucketState) -> BucketState:
        self.store.upsert(self.key, state)
        self.saved.append(state)
        self.save_count += 1
        return state
