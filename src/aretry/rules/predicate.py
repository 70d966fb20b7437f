r"""Rule delegating the decision to a function."""

from __future__ import annotations

__all__ = ["Predicate"]

from typing import TYPE_CHECKING

from aretry.rules.base import BaseRule

if TYPE_CHECKING:
    from collections.abc import Callable


class Predicate(BaseRule):
    """Rule that calls ``func(attempt, failure)`` to decide whether to
    retry.

    Useful to classify failures by something other than their type,
    for example an error code carried by the exception.

    Args:
        func: The function returning ``True`` if another attempt is
            allowed.

    Raises:
        TypeError: If ``func`` is not callable.

    Example:
        ```pycon
        >>> from aretry.rules import Predicate
        >>> rule = Predicate(lambda attempt, failure: "timeout" in str(failure))
        >>> rule.should_retry(1, OSError("read timeout"))
        True
        >>> rule.should_retry(1, OSError("refused"))
        False

        ```
    """

    def __init__(self, func: Callable[[int, Exception], bool]) -> None:
        if not callable(func):
            msg = f"func must be callable, got {func!r}"
            raise TypeError(msg)
        self.func = func

    def should_retry(self, attempt: int, failure: Exception) -> bool:
        return bool(self.func(attempt, failure))

    def __repr__(self) -> str:
        name = getattr(self.func, "__qualname__", repr(self.func))
        return f"{self.__class__.__qualname__}({name})"
