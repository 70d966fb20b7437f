r"""Exceptions raised by the retry engine itself.

Failures raised by the retried operation are never wrapped by
``RetryPolicy.call``: they propagate with their original type and
identity. The classes below only cover the cases where the engine has
to report something the operation did not raise.
"""

from __future__ import annotations

__all__ = ["RetryCancelledError", "RetryError", "UndeclaredFailureError"]


class RetryError(RuntimeError):
    """Base class for errors raised by the retry engine."""


class RetryCancelledError(RetryError):
    """Raised when a call is cancelled while waiting between attempts.

    Args:
        name: The name of the cancelled call.
        attempt: The attempt that failed right before the cancellation.
        failure: The failure raised by that attempt, if any.

    Example:
        ```pycon
        >>> from aretry.exceptions import RetryCancelledError
        >>> error = RetryCancelledError("fetch", attempt=2, failure=OSError("boom"))
        >>> str(error)
        'fetch cancelled while waiting to retry after attempt 2'
        >>> error.failure
        OSError('boom')

        ```
    """

    def __init__(self, name: str, attempt: int, failure: Exception | None = None) -> None:
        super().__init__(f"{name} cancelled while waiting to retry after attempt {attempt}")
        self.name = name
        self.attempt = attempt
        self.failure = failure


class UndeclaredFailureError(RetryError):
    """Raised by a proxy when a method fails with a kind of exception
    its interface does not declare.

    The original exception is available as ``failure`` and is also set
    as ``__cause__``.

    Args:
        name: The qualified name of the proxied method.
        failure: The exception raised by the target.
        declared: The exception types the interface method declares.
    """

    def __init__(
        self,
        name: str,
        failure: Exception,
        declared: tuple[type[Exception], ...],
    ) -> None:
        declared_names = ", ".join(t.__name__ for t in declared)
        super().__init__(
            f"{name} failed with undeclared {type(failure).__name__} "
            f"(declared: {declared_names}): {failure}"
        )
        self.name = name
        self.failure = failure
        self.declared = declared
