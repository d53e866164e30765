from datetime import timedelta

import pytest

from simple_token_bucket.bucket.persistent import PersistentTokenBucket
from simple_token_bucket.core.clock import ManualClock
from simple_token_bucket.persistence.memory import InMemoryBucketPersistence

prometheus_client = pytest.importorskip("prometheus_client")

KEY = "metrics.bucket"


def _sample(name, **labels):
    value = prometheus_client.REGISTRY.get_sample_value(name, {"key": KEY, **labels})
    return value or 0.0


def test_decisions_and_refills_are_counted():
    allowed = _sample("token_bucket_decisions_total", allowed="true")
    rejected = _sample("token_bucket_decisions_total", allowed="false")
    refills = _sample("token_bucket_refills_total")

    clock = ManualClock()
    bucket = PersistentTokenBucket(
        InMemoryBucketPersistence(KEY), KEY, 2, timedelta(minutes=1), clock
    )
    assert bucket.try_consume(2)
    assert not bucket.try_consume(1)
    clock.advance(timedelta(minutes=1))
    assert bucket.get_remaining() == 2

    assert _sample("token_bucket_decisions_total", allowed="true") == allowed + 1
    assert _sample("token_bucket_decisions_total", allowed="false") == rejected + 1
    assert _sample("token_bucket_refills_total") == refills + 1
