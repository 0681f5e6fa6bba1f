import resource
from unittest import mock

import pytest

from taskpool.fdlimit import MIN_OPEN_FILES_LIMIT, raise_limit


def test_raises_low_soft_limit_to_minimum():
    with mock.patch("resource.getrlimit", return_value=(256, 4096)), mock.patch(
        "resource.setrlimit"
    ) as setrlimit:
        result = raise_limit()
    assert result is None
    setrlimit.assert_called_once_with(resource.RLIMIT_NOFILE, (1024, 4096))


def test_leaves_high_soft_limit_alone():
    with mock.patch("resource.getrlimit", return_value=(2048, 4096)), mock.patch(
        "resource.setrlimit"
    ) as setrlimit:
        result = raise_limit()
    assert result is None
    assert setrlimit.call_count == 0


def test_leaves_infinite_soft_limit_alone():
    infinite = resource.RLIM_INFINITY
    with mock.patch("resource.getrlimit", return_value=(infinite, infinite)), mock.patch(
        "resource.setrlimit"
    ) as setrlimit:
        result = raise_limit()
    assert result is None
    assert setrlimit.call_count == 0


def test_does_nothing_when_hard_limit_too_low():
    with mock.patch("resource.getrlimit", return_value=(256, 512)), mock.patch(
        "resource.setrlimit"
    ) as setrlimit:
        result = raise_limit()
    assert result is None
    assert setrlimit.call_count == 0


def test_infinite_hard_limit_allows_raising():
    infinite = resource.RLIM_INFINITY
    with mock.patch("resource.getrlimit", return_value=(256, infinite)), mock.patch(
        "resource.setrlimit"
    ) as setrlimit:
        result = raise_limit()
    assert result is None
    setrlimit.assert_called_once_with(
        resource.RLIMIT_NOFILE, (MIN_OPEN_FILES_LIMIT, infinite)
    )


def test_setrlimit_failure_propagates():
    with mock.patch("resource.getrlimit", return_value=(256, 4096)), mock.patch(
        "resource.setrlimit", side_effect=OSError("denied")
    ):
        with pytest.raises(OSError, match="denied"):
            raise_limit()


def test_real_limit_after_raise():
    result = raise_limit()
    assert result is None
    soft, hard = resource.getrlimit(resource.RLIMIT_NOFILE)
    infinite = resource.RLIM_INFINITY
    hard_too_low = hard != infinite and hard < MIN_OPEN_FILES_LIMIT
    assert soft == infinite or soft >= MIN_OPEN_FILES_LIMIT or hard_too_low