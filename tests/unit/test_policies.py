from __future__ import annotations

from unittest.mock import Mock

import pytest

from aretry import RetryPolicy
from aretry.backoff import NO_DELAY
from aretry.policies import ALWAYS, NONE
from aretry.rules import ALWAYS as ALWAYS_RULE
from aretry.rules import NEVER
from tests.helpers import FlakyError, flaky

##########################
#     Tests for NONE     #
##########################


def test_none() -> None:
    assert NONE == RetryPolicy(NEVER, NO_DELAY)


def test_none_success(mock_sleep: Mock) -> None:
    operation = Mock(return_value=7)
    assert NONE.call(operation) == 7
    operation.assert_called_once_with()
    mock_sleep.assert_not_called()


def test_none_failure(mock_sleep: Mock) -> None:
    failure = FlakyError("boom")
    operation = Mock(side_effect=failure)
    with pytest.raises(FlakyError) as exc_info:
        NONE.call(operation)
    assert exc_info.value is failure
    operation.assert_called_once_with()
    mock_sleep.assert_not_called()


############################
#     Tests for ALWAYS     #
############################


def test_always() -> None:
    assert ALWAYS == RetryPolicy(ALWAYS_RULE, NO_DELAY)


def test_always_retries_until_success(mock_sleep: Mock) -> None:  # noqa: ARG001
    operation = flaky(20)
    assert ALWAYS.call(operation) == "done"
    assert operation.call_count == 21
