from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, List, TypeVar

from .arity import nary
from .debug import deep_inspect
from .predicates import is_nothing

T = TypeVar("T")
U = TypeVar("U")


class Maybe(Generic[T]):
    """A value that may be absent.

    ``Maybe.of`` classifies its input: None, an empty string, an empty
    sequence or an empty mapping become ``NOTHING``, anything else ``Just``.

    Example:
        ```python
        Maybe.of(3).map(lambda a: a + 2)          # Just(5)
        Maybe.of([]).map(lambda a: a + 2)         # Nothing
        Maybe.of(3).flat_map(lambda a: Just(a))   # Just(3)
        ```
    """
    def is_just(self) -> bool: raise NotImplementedError
    def is_nothing(self) -> bool: return not self.is_just()

    @staticmethod
    def of(value: Any) -> "Maybe[Any]":
        return NOTHING if is_nothing(value) else Just(value)

    @staticmethod
    def just(value: T) -> "Maybe[T]":
        return Just(value)

    @staticmethod
    def nothing() -> "Maybe[Any]":
        return NOTHING

    def map(self, f: Callable[[T], U]) -> "Maybe[U]":
        if self.is_just():
            return Maybe.of(f(self.value))  # type: ignore[attr-defined]
        return NOTHING

    def flat_map(self, f: Callable[[T], Any]) -> Any:
        # whatever f returns is passed through, wrapped or not
        if self.is_just():
            return f(self.value)  # type: ignore[attr-defined]
        return NOTHING

    def map_to_value(self, f: Callable[[T], U], default: Any = None) -> Any:
        return f(self.value) if self.is_just() else default  # type: ignore[attr-defined]

    def ap(self, other: "Maybe[Any]") -> "Maybe[Any]":
        if self.is_just():
            return other.map(self.value)  # type: ignore[attr-defined]
        return NOTHING

    def get_or_else(self, default: U) -> T | U:
        return self.value if self.is_just() else default  # type: ignore[attr-defined]

    def inspect(self) -> str: raise NotImplementedError
    def __repr__(self) -> str: return self.inspect()


@dataclass(frozen=True, repr=False)
class Just(Maybe[T]):
    value: T
    def is_just(self) -> bool: return True
    def inspect(self) -> str: return f"Just({deep_inspect(self.value)})"


class _Nothing(Maybe[Any]):
    __slots__ = ()
    @property
    def value(self) -> None: return None
    def is_just(self) -> bool: return False
    def inspect(self) -> str: return "Nothing"


NOTHING: Maybe[Any] = _Nothing()


@nary
def maybe(on_nothing: Callable[[], U]) -> Callable[..., Any]:
    """Eliminate a Maybe: ``maybe(on_nothing)(on_just)(m)`` or ``maybe(on_nothing, on_just, m)``."""
    def with_just(on_just: Callable[[Any], U]) -> Callable[[Maybe[Any]], U]:
        def eliminate(m: Maybe[Any]) -> U:
            return on_nothing() if m.is_nothing() else on_just(m.value)  # type: ignore[attr-defined]
        return eliminate
    return with_just


def merge_maybes(*maybes: Maybe[Any]) -> Maybe[List[Any]]:
    """Collect every Just value into one list; any Nothing makes the result Nothing."""
    def step(acc: Maybe[List[Any]], current: Maybe[Any]) -> Maybe[List[Any]]:
        if current.is_nothing() or acc.is_nothing():
            return NOTHING
        return Just([*acc.value, current.value])  # type: ignore[attr-defined]
    return reduce(step, maybes, Just([]))
