from dataclasses import FrozenInstanceError
from unittest.mock import MagicMock

import pytest
from pydantic import ValidationError

from coreason_aem_client.domain import PackageIdentity, Response, Result, RetryPolicy


def test_result_defaults() -> None:
    """Test that derived results carry no response and succeed by default."""
    result = Result(message="Package g/p-1.0 exists", data=True)
    assert result.response is None
    assert result.is_success() is True
    assert result.data is True


def test_result_is_immutable() -> None:
    """Test that a Result cannot be mutated after construction."""
    result = Result(message="msg", response=Response(200, "body"))
    with pytest.raises(FrozenInstanceError):
        result.message = "other"  # type: ignore[misc]


def test_package_identity() -> None:
    """Test label and call parameters of a package identity."""
    identity = PackageIdentity(group_name="g", package_name="p", package_version="1.0")
    assert identity.label == "g/p-1.0"
    assert identity.call_params() == {"group_name": "g", "package_name": "p", "package_version": "1.0"}

    with pytest.raises(ValidationError):
        identity.package_version = "2.0"  # type: ignore[misc]


def test_retry_policy_defaults() -> None:
    """Test the fixed two second interval defaults."""
    policy = RetryPolicy.from_options()
    assert policy.max_tries == 30
    assert policy.base_sleep_seconds == 2
    assert policy.max_sleep_seconds == 2


def test_retry_policy_numeric_strings() -> None:
    """Test that numeric strings behave exactly like numbers."""
    from_text = RetryPolicy.from_options({"max_tries": "5", "base_sleep_seconds": "1", "max_sleep_seconds": "3"})
    from_numbers = RetryPolicy.from_options({"max_tries": 5, "base_sleep_seconds": 1, "max_sleep_seconds": 3})
    assert from_text == from_numbers
    assert from_text.max_tries == 5


def test_retry_policy_partial_merge() -> None:
    """Test that supplied fields are merged over defaults and None is ignored."""
    defaults = RetryPolicy(max_tries=10, base_sleep_seconds=1, max_sleep_seconds=1)
    policy = RetryPolicy.from_options({"max_tries": 3, "max_sleep_seconds": None, "unknown": 1}, defaults=defaults)
    assert policy == RetryPolicy(max_tries=3, base_sleep_seconds=1, max_sleep_seconds=1)


def test_retry_policy_base_only_widens_cap() -> None:
    """Test that supplying only a larger base delay raises the default cap with it."""
    policy = RetryPolicy.from_options({"base_sleep_seconds": 5})
    assert policy.base_sleep_seconds == 5
    assert policy.max_sleep_seconds == 5


def test_retry_policy_passthrough() -> None:
    """Test that an existing policy is returned as is."""
    policy = RetryPolicy(max_tries=2)
    assert RetryPolicy.from_options(policy) is policy


def test_retry_policy_invalid() -> None:
    """Test rejection of impossible policies."""
    with pytest.raises(ValidationError):
        RetryPolicy(max_tries=0)
    with pytest.raises(ValidationError):
        RetryPolicy(base_sleep_seconds=4, max_sleep_seconds=2)
    with pytest.raises(ValidationError):
        RetryPolicy.from_options({"max_tries": "many"})


def test_retry_policy_wait_strategy_doubles_and_caps() -> None:
    """Test that the delay doubles from the base and stops at the cap."""
    wait = RetryPolicy(max_tries=6, base_sleep_seconds=1, max_sleep_seconds=4).wait_strategy()
    delays = [wait(MagicMock(attempt_number=n)) for n in range(1, 6)]
    assert delays == [1, 2, 4, 4, 4]


def test_retry_policy_default_wait_is_fixed() -> None:
    """Test that equal base and cap give a fixed interval."""
    wait = RetryPolicy().wait_strategy()
    assert [wait(MagicMock(attempt_number=n)) for n in range(1, 4)] == [2, 2, 2]
