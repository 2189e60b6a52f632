from __future__ import annotations
from functools import reduce
from typing import Any, Callable, Protocol, TypeVar, runtime_checkable

from .arity import nary

A = TypeVar("A")


@runtime_checkable
class Applicative(Protocol):
    def map(self, f: Callable[[Any], Any]) -> Any: ...
    def ap(self, other: Any) -> Any: ...


@runtime_checkable
class Monad(Applicative, Protocol):
    def flat_map(self, f: Callable[[Any], Any]) -> Any: ...


def identity(value: A) -> A:
    return value


def compose(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose right to left: ``compose(f, g)(x) == f(g(x))``."""
    def composed(value: Any) -> Any: return reduce(lambda acc, f: f(acc), reversed(fns), value)
    return composed


def pipe(*fns: Callable[[Any], Any]) -> Callable[[Any], Any]:
    """Compose left to right: ``pipe(f, g)(x) == g(f(x))``."""
    def piped(value: Any) -> Any: return reduce(lambda acc, f: f(acc), fns, value)
    return piped


@nary
def fmap(f: Callable[[Any], Any]) -> Callable[[Applicative], Any]:
    return lambda container: container.map(f)


@nary
def flat_map(f: Callable[[Any], Any]) -> Callable[[Monad], Any]:
    return lambda container: container.flat_map(f)


@nary
def ap(container_of_fn: Applicative) -> Callable[[Applicative], Any]:
    return lambda container: container_of_fn.ap(container)


@nary
def lift_a2(fn: Callable[[Any, Any], Any]) -> Callable[..., Any]:
    """Apply a two-argument function across two applicatives.

    Works for any container with ``map`` and ``ap``; the result short-circuits
    like the containers do.

    ``fn`` takes both arguments at once; a curried ``fn`` is applied with
    ``a1.map(fn).ap(a2)`` instead.

    Example:
        ```python
        lift_a2(operator.add, Just(2), Just(3))      # Just(5)
        lift_a2(operator.add)(Just(2))(NOTHING)      # Nothing
        ```
    """
    def first(a1: Applicative) -> Callable[[Applicative], Any]:
        def second(a2: Applicative) -> Any:
            return a1.map(lambda x: lambda y: fn(x, y)).ap(a2)
        return second
    return first


@nary
def lift_a3(fn: Callable[[Any, Any, Any], Any]) -> Callable[..., Any]:
    """Apply a three-argument function across three applicatives.

    ``fn`` takes all three arguments at once; a curried ``fn`` is applied with
    ``a1.map(fn).ap(a2).ap(a3)`` instead.
    """
    def first(a1: Applicative) -> Callable[..., Any]:
        def second(a2: Applicative) -> Callable[[Applicative], Any]:
            def third(a3: Applicative) -> Any:
                return a1.map(lambda x: lambda y: lambda z: fn(x, y, z)).ap(a2).ap(a3)
            return third
        return second
    return first
