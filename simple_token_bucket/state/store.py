"""In-memory table of bucket records."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Dict, Optional

from ..core.types import BucketState


@dataclass
class BucketStore:
    records: Dict[str, BucketState] = field(default_factory=dict)

    def get(self, key: str) -> Optional[BucketState]:
        return self.records.get(key)

    def upsert(self, key: str, state: BucketState):
        self.records[key] = state
