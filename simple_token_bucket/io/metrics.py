"""Metrics instrumentation for bucket decisions and refills."""

from __future__ import annotations

from typing import Any, Optional

try:  # pragma: no cover - optional dependency
    from prometheus_client import Counter as _PromCounter
except ImportError:  # pragma: no cover
    _PromCounter = None  # type: ignore

decisions_total: Optional[Any]
refills_total: Optional[Any]
if _PromCounter is not None:
    decisions_total = _PromCounter(
        "token_bucket_decisions_total",
        "Consume attempts by outcome",
        ["key", "allowed"],
    )
    refills_total = _PromCounter(
        "token_bucket_refills_total", "Window resets to full quota", ["key"]
    )
else:
    decisions_total = None
    refills_total = None


def inc_decision(key: str, allowed: bool) -> None:
    if decisions_total is not None:
        decisions_total.labels(key=key, allowed=str(allowed).lower()).inc()


def inc_refill(key: str) -> None:
    if refills_total is not None:
        refills_total.labels(key=key).inc()
