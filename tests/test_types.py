from datetime import datetime, timedelta, timezone

import pytest

from simple_token_bucket.core.errors import ConfigurationError, InvalidLimitError
from simple_token_bucket.core.types import BucketState, Limit

T0 = datetime(2024, 1, 1, tzinfo=timezone.utc)


def test_state_equality_is_by_value():
    a = BucketState(Limit(10, timedelta(days=1)), 4, T0)
    b = BucketState(Limit(10, timedelta(days=1)), 4, T0)
    assert a == b
    assert a != BucketState(Limit(10, timedelta(days=1)), 5, T0)


def test_with_tokens_replaces_whole_state():
    state = BucketState(Limit(10, timedelta(hours=1)), 10, T0)
    later = T0 + timedelta(minutes=5)
    new = state.with_tokens(7, later)
    assert new == BucketState(state.limit, 7, later)
    assert state.remaining_tokens == 10
    with pytest.raises(AttributeError):
        new.remaining_tokens = 1  # type: ignore[misc]


def test_window_elapsed_boundary():
    state = BucketState(Limit(1, timedelta(hours=1)), 0, T0)
    assert not state.window_elapsed(T0 + timedelta(minutes=59))
    assert state.window_elapsed(T0 + timedelta(hours=1))


def test_limit_validation():
    assert Limit(0, timedelta(seconds=1)).validate() == Limit(0, timedelta(seconds=1))
    with pytest.raises(InvalidLimitError) as exc:
        Limit(-3, timedelta(seconds=1)).validate()
    assert exc.value.quantity == -3
    assert isinstance(exc.value, ConfigurationError)
    assert isinstance(exc.value, ValueError)
    with pytest.raises(InvalidLimitError):
        Limit(3, timedelta(0)).validate()


def test_unvalidated_limit_is_a_plain_value():
    # recovered records are held as-is
    assert Limit(-1, timedelta(0)).quantity == -1
