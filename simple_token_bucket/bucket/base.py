"""Token bucket abstraction."""

from __future__ import annotations

from abc import ABC, abstractmethod


class TokenBucket(ABC):
    @abstractmethod
    def try_consume(self, quantity: int) -> bool: ...

    @abstractmethod
    def get_remaining(self) -> int: ...
