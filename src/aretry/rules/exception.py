r"""Rule classifying failures by exception type."""

from __future__ import annotations

__all__ = ["ExceptionIn"]

from aretry.rules.base import BaseRule


class ExceptionIn(BaseRule):
    """Rule that allows a retry when the failure is an instance of one
    of the given exception types.

    It is usually combined with an attempt limit, either to retry only
    some failures (``max_attempts(5) & exception_in(OSError)``) or to
    give up immediately on others
    (``max_attempts(5) & ~exception_in(ValueError)``).

    Args:
        *types: The exception types. At least one is required.

    Raises:
        ValueError: If no type is given.
        TypeError: If a value is not an exception type.
    """

    def __init__(self, *types: type[BaseException]) -> None:
        if not types:
            msg = "at least one exception type is required"
            raise ValueError(msg)
        for exc_type in types:
            if not (isinstance(exc_type, type) and issubclass(exc_type, BaseException)):
                msg = f"expected an exception type, got {exc_type!r}"
                raise TypeError(msg)
        self.types = tuple(types)

    def should_retry(self, attempt: int, failure: Exception) -> bool:  # noqa: ARG002
        return isinstance(failure, self.types)

    def __repr__(self) -> str:
        names = ", ".join(t.__name__ for t in self.types)
        return f"{self.__class__.__qualname__}({names})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ExceptionIn):
            return NotImplemented
        return self.types == other.types

    def __hash__(self) -> int:
        return hash((self.__class__, self.types))
