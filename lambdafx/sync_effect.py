from __future__ import annotations
from typing import Any, Callable, Generic, TypeVar

from .debug import deep_inspect

A = TypeVar("A")
B = TypeVar("B")


class SyncEffect(Generic[A]):
    """A deferred synchronous computation.

    Nothing runs until ``trigger`` is called, and every call runs the whole
    chain again. Exceptions are never caught; they reach the caller of
    ``trigger``.

    Example:
        ```python
        eff = SyncEffect.of(lambda: read_config()).map(parse)
        eff.trigger()                     # runs read_config, then parse
        Either.attempt(eff.trigger)       # capture a raise as Failure
        ```
    """
    def __init__(self, thunk: Callable[..., A]): self._thunk = thunk

    @staticmethod
    def of(thunk: Callable[..., A]) -> "SyncEffect[A]":
        return SyncEffect(thunk)

    @staticmethod
    def wrap(value: A) -> "SyncEffect[A]":
        def wrapped(*_: Any) -> A: return value
        return SyncEffect(wrapped)

    def trigger(self, *args: Any) -> A:
        return self._thunk(*args)

    def map(self, f: Callable[[A], B]) -> "SyncEffect[B]":
        def mapped(*args: Any) -> B: return f(self._thunk(*args))
        return SyncEffect(mapped)

    def flat_map(self, f: Callable[[A], "SyncEffect[B]"]) -> "SyncEffect[B]":
        # the effect produced by f is triggered without arguments
        def bound(*args: Any) -> B: return f(self._thunk(*args)).trigger()
        return SyncEffect(bound)

    def ap(self, other: "SyncEffect[Any]") -> "SyncEffect[Any]":
        return self.flat_map(lambda fn: other.map(fn))

    def inspect(self) -> str: return f"SyncEffect({deep_inspect(self._thunk)})"
    def __repr__(self) -> str: return self.inspect()
