r"""Transparent retry of every method of an interface.

A proxy is an instance of a subclass of the interface, generated once
per interface, whose methods forward to the target through the retry
policy. Each method call runs its own attempt loop; the policy is
shared by all of them. Every other public attribute of the interface,
properties and constants included, is read from the target without
retry.

Python has no checked exceptions, so an interface method lists the
failures its callers are expected to handle with ``raises``. When such a
method finally fails with an exception outside that list, the proxy
raises ``UndeclaredFailureError`` instead, with the original exception
as cause. Methods without ``raises`` propagate every failure unchanged.

Example:
    ```pycon
    >>> from abc import ABC, abstractmethod
    >>> from aretry import RetryPolicy, raises
    >>> from aretry.backoff import NO_DELAY
    >>> from aretry.rules import max_attempts
    >>> class Api(ABC):
    ...     @abstractmethod
    ...     @raises(OSError)
    ...     def execute(self) -> str: ...
    ...
    >>> class FlakyApi(Api):
    ...     def __init__(self) -> None:
    ...         self.calls = 0
    ...     def execute(self) -> str:
    ...         self.calls += 1
    ...         if self.calls < 3:
    ...             raise OSError("exe failed")
    ...         return f"exe-{self.calls}"
    ...
    >>> api = RetryPolicy(max_attempts(99), NO_DELAY).proxy(Api, FlakyApi())
    >>> api.execute()
    'exe-3'
    >>> isinstance(api, Api)
    True

    ```
"""

from __future__ import annotations

__all__ = ["capability_methods", "create_proxy", "declared_failures", "raises"]

import functools
import inspect
import logging
from typing import TYPE_CHECKING, Any, TypeVar

from aretry.exceptions import RetryError, UndeclaredFailureError

if TYPE_CHECKING:
    import threading
    from collections.abc import Callable

    from aretry.policy import RetryPolicy

T = TypeVar("T")
F = TypeVar("F", bound="Callable[..., Any]")

logger: logging.Logger = logging.getLogger(__name__)

_RAISES_ATTR = "__aretry_raises__"


def raises(*types: type[Exception]) -> Callable[[F], F]:
    """Declare the failures an interface method may raise to its
    callers.

    Args:
        *types: The exception types callers are expected to handle.

    Returns:
        A decorator recording ``types`` on the method.

    Raises:
        TypeError: If a value is not an exception type.
    """
    for exc_type in types:
        if not (isinstance(exc_type, type) and issubclass(exc_type, Exception)):
            msg = f"expected an exception type, got {exc_type!r}"
            raise TypeError(msg)

    def decorator(func: F) -> F:
        setattr(func, _RAISES_ATTR, tuple(types))
        return func

    return decorator


def declared_failures(func: Callable[..., Any]) -> tuple[type[Exception], ...] | None:
    """Return the failures declared on ``func`` with ``raises``, or
    ``None`` if it declares nothing."""
    return getattr(func, _RAISES_ATTR, None)


def capability_methods(interface: type) -> dict[str, Callable[..., Any]]:
    """Return the public methods of ``interface``, inherited ones
    included.

    Static methods, class methods, properties and other attributes are
    not part of the capability: the proxy reads them from the target
    without retry.

    Args:
        interface: The interface class.

    Returns:
        A mapping from method name to the function defined on the
        interface.
    """
    methods = {}
    for name in dir(interface):
        if name.startswith("_"):
            continue
        member = inspect.getattr_static(interface, name)
        if inspect.isfunction(member):
            methods[name] = member
    return methods


def _reraise_checked(
    qualname: str, failure: Exception, declared: tuple[type[Exception], ...] | None
) -> None:
    """Raise ``UndeclaredFailureError`` if ``failure`` is not compatible
    with the declared failures; return otherwise."""
    if declared is None or isinstance(failure, (RetryError, *declared)):
        return
    logger.debug(f"{qualname} raised undeclared {type(failure).__name__}, wrapping it")
    raise UndeclaredFailureError(qualname, failure, declared) from failure


def _make_forwarder(interface: type, name: str, func: Callable[..., Any]) -> Callable[..., Any]:
    qualname = f"{interface.__name__}.{name}"
    declared = declared_failures(func)

    if inspect.iscoroutinefunction(func):

        @functools.wraps(func)
        async def forward_async(self: Any, *args: Any, **kwargs: Any) -> Any:
            method = getattr(self._aretry_target, name)
            try:
                return await self._aretry_policy.call_async(
                    lambda: method(*args, **kwargs), name=qualname
                )
            except Exception as exc:
                _reraise_checked(qualname, exc, declared)
                raise

        forwarder = forward_async
    else:

        @functools.wraps(func)
        def forward(self: Any, *args: Any, **kwargs: Any) -> Any:
            method = getattr(self._aretry_target, name)
            try:
                return self._aretry_policy.call(
                    lambda: method(*args, **kwargs),
                    name=qualname,
                    cancel_event=self._aretry_cancel_event,
                )
            except Exception as exc:
                _reraise_checked(qualname, exc, declared)
                raise

        forwarder = forward

    # functools.wraps copies __isabstractmethod__, which would keep the
    # generated class abstract.
    forwarder.__isabstractmethod__ = False
    return forwarder


def _make_attribute_forwarder(name: str) -> property:
    def fget(self: Any) -> Any:
        return getattr(self._aretry_target, name)

    def fset(self: Any, value: Any) -> None:
        setattr(self._aretry_target, name, value)

    return property(fget, fset, doc=f"Forwards ``{name}`` to the target.")


def _init(
    self: Any,
    policy: RetryPolicy,
    target: Any,
    cancel_event: threading.Event | None = None,
) -> None:
    object.__setattr__(self, "_aretry_policy", policy)
    object.__setattr__(self, "_aretry_target", target)
    object.__setattr__(self, "_aretry_cancel_event", cancel_event)


def _getattr(self: Any, name: str) -> Any:
    # Only reached for names the interface does not define.
    if name.startswith("_aretry_"):
        raise AttributeError(name)
    return getattr(self._aretry_target, name)


def _repr(self: Any) -> str:
    return f"<{type(self).__name__} proxy of {self._aretry_target!r}>"


@functools.cache
def _proxy_class(interface: type) -> type:
    namespace: dict[str, Any] = {
        "__init__": _init,
        "__getattr__": _getattr,
        "__repr__": _repr,
        "__module__": interface.__module__,
    }
    methods = capability_methods(interface)
    for name in dir(interface):
        if name.startswith("_"):
            continue
        if name in methods:
            namespace[name] = _make_forwarder(interface, name, methods[name])
        else:
            # Properties, constants and abstract attributes are read from
            # the target, which also makes abstract properties concrete.
            namespace[name] = _make_attribute_forwarder(name)
    return type(f"Retrying{interface.__name__}", (interface,), namespace)


def create_proxy(
    policy: RetryPolicy,
    interface: type[T],
    target: T,
    *,
    cancel_event: threading.Event | None = None,
) -> T:
    """Create a proxy calling every method of ``interface`` on
    ``target`` with retry.

    Args:
        policy: The retry policy shared by all calls.
        interface: The interface class. Its public methods are the ones
            retried.
        target: The object implementing the interface.
        cancel_event: Optional event that cancels the synchronous calls
            when set while waiting between attempts.

    Returns:
        The proxy, an instance of a generated subclass of ``interface``.

    Raises:
        TypeError: If ``interface`` is not a class or if ``target`` lacks
            one of its methods.
    """
    if not isinstance(interface, type):
        msg = f"interface must be a class, got {interface!r}"
        raise TypeError(msg)
    missing = [
        name
        for name in capability_methods(interface)
        if not callable(getattr(target, name, None))
    ]
    if missing:
        msg = (
            f"{type(target).__name__} does not implement {interface.__name__}: "
            f"missing {', '.join(sorted(missing))}"
        )
        raise TypeError(msg)
    return _proxy_class(interface)(policy, target, cancel_event)
