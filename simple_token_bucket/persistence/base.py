"""Persistence abstraction for bucket state."""

from __future__ import annotations

from abc import ABC, abstractmethod
from typing import Optional

from ..core.types import BucketState


class BucketPersistence(ABC):
    """Durable home of a bucket's state.

    ``load`` returns ``None`` when nothing was stored for the key; it must not
    raise for a missing record. ``save`` receives no key: an implementation is
    either scoped to a single key or stores the key alongside the state. Both
    calls are synchronous and any exception they raise propagates to the
    bucket's caller.
    """

    @abstractmethod
    def load(self, key: str) -> Optional[BucketState]: ...

    @abstractmethod
    def save(self, state: BucketState) -> Optional[BucketState]: ...
