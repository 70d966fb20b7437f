r"""Abstract base class for retry rules and the boolean combinators
used to compose them."""

from __future__ import annotations

__all__ = ["ALWAYS", "NEVER", "AllOf", "AnyOf", "BaseRule", "Constant", "Not"]

from abc import ABC, abstractmethod


class BaseRule(ABC):
    """Abstract base class for retry rules.

    A rule decides, after a failed attempt, whether another attempt is
    allowed. Rules are stateless and can be shared between concurrent
    calls.

    Rules compose with ``&``, ``|`` and ``~``:

    ```pycon
    >>> from aretry.rules import exception_in, max_attempts
    >>> rule = max_attempts(5) & ~exception_in(KeyError)
    >>> rule.should_retry(1, OSError())
    True
    >>> rule.should_retry(1, KeyError())
    False
    >>> rule.should_retry(5, OSError())
    False

    ```
    """

    @abstractmethod
    def should_retry(self, attempt: int, failure: Exception) -> bool:
        """Indicate whether another attempt is allowed.

        Args:
            attempt: The number of the attempt that failed (1-indexed).
            failure: The exception raised by that attempt.

        Returns:
            ``True`` if the operation may be attempted again.
        """

    def __and__(self, other: object) -> BaseRule:
        if not isinstance(other, BaseRule):
            return NotImplemented
        return AllOf(self, other)

    def __or__(self, other: object) -> BaseRule:
        if not isinstance(other, BaseRule):
            return NotImplemented
        return AnyOf(self, other)

    def __invert__(self) -> BaseRule:
        return Not(self)


class Constant(BaseRule):
    """Rule that always returns the same answer.

    Use the ``ALWAYS`` and ``NEVER`` instances.

    Args:
        value: The answer returned for every failure.
    """

    def __init__(self, value: bool) -> None:
        self.value = value

    def should_retry(self, attempt: int, failure: Exception) -> bool:  # noqa: ARG002
        return self.value

    def __repr__(self) -> str:
        return "ALWAYS" if self.value else "NEVER"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Constant):
            return NotImplemented
        return self.value == other.value

    def __hash__(self) -> int:
        return hash((self.__class__, self.value))


class AllOf(BaseRule):
    """Rule that allows a retry only if both rules allow it."""

    def __init__(self, left: BaseRule, right: BaseRule) -> None:
        self.left = left
        self.right = right

    def should_retry(self, attempt: int, failure: Exception) -> bool:
        return self.left.should_retry(attempt, failure) and self.right.should_retry(
            attempt, failure
        )

    def __repr__(self) -> str:
        return f"({self.left!r} & {self.right!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AllOf):
            return NotImplemented
        return self.left == other.left and self.right == other.right

    def __hash__(self) -> int:
        return hash((self.__class__, self.left, self.right))


class AnyOf(BaseRule):
    """Rule that allows a retry if either rule allows it."""

    def __init__(self, left: BaseRule, right: BaseRule) -> None:
        self.left = left
        self.right = right

    def should_retry(self, attempt: int, failure: Exception) -> bool:
        return self.left.should_retry(attempt, failure) or self.right.should_retry(
            attempt, failure
        )

    def __repr__(self) -> str:
        return f"({self.left!r} | {self.right!r})"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, AnyOf):
            return NotImplemented
        return self.left == other.left and self.right == other.right

    def __hash__(self) -> int:
        return hash((self.__class__, self.left, self.right))


class Not(BaseRule):
    """Rule that negates another rule."""

    def __init__(self, rule: BaseRule) -> None:
        self.rule = rule

    def should_retry(self, attempt: int, failure: Exception) -> bool:
        return not self.rule.should_retry(attempt, failure)

    def __repr__(self) -> str:
        return f"~{self.rule!r}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Not):
            return NotImplemented
        return self.rule == other.rule

    def __hash__(self) -> int:
        return hash((self.__class__, self.rule))


ALWAYS = Constant(True)
NEVER = Constant(False)
