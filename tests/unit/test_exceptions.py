from __future__ import annotations

from aretry.exceptions import RetryCancelledError, RetryError, UndeclaredFailureError

#########################################
#     Tests for RetryCancelledError     #
#########################################


def test_retry_cancelled_error() -> None:
    failure = OSError("boom")
    error = RetryCancelledError("fetch", attempt=2, failure=failure)
    assert isinstance(error, RetryError)
    assert isinstance(error, RuntimeError)
    assert str(error) == "fetch cancelled while waiting to retry after attempt 2"
    assert error.name == "fetch"
    assert error.attempt == 2
    assert error.failure is failure


def test_retry_cancelled_error_without_failure() -> None:
    assert RetryCancelledError("fetch", attempt=1).failure is None


############################################
#     Tests for UndeclaredFailureError     #
############################################


def test_undeclared_failure_error() -> None:
    failure = KeyError("k")
    error = UndeclaredFailureError("Api.get", failure, (OSError, ValueError))
    assert isinstance(error, RetryError)
    assert str(error) == (
        "Api.get failed with undeclared KeyError (declared: OSError, ValueError): 'k'"
    )
    assert error.name == "Api.get"
    assert error.failure is failure
    assert error.declared == (OSError, ValueError)
