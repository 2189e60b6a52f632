from __future__ import annotations
from dataclasses import dataclass
from functools import reduce
from typing import Any, Callable, Generic, List, TypeVar

from .arity import nary
from .debug import deep_inspect

E = TypeVar("E")
A = TypeVar("A")
B = TypeVar("B")


class Either(Generic[E, A]):
    """Success or Failure, each holding one payload in ``value``.

    Unlike ``Maybe`` there is no emptiness rule: ``Success([])`` stays a
    Success.

    Example:
        ```python
        Either.of(3).map(lambda a: a + 2)              # Success(5)
        Failure("bad").map(lambda a: a + 2)            # Failure('bad')
        Either.attempt(lambda: int("x"))               # Failure("invalid literal ...")
        Failure("bad").or_of(0)                        # Success(0)
        ```
    """
    def is_failure(self) -> bool: raise NotImplementedError
    def is_success(self) -> bool: return not self.is_failure()

    @staticmethod
    def of(value: A) -> "Either[Any, A]":
        return Success(value)

    @staticmethod
    def success(value: A) -> "Either[Any, A]":
        return Success(value)

    @staticmethod
    def failure(error: E) -> "Either[E, Any]":
        return Failure(error)

    @staticmethod
    def attempt(thunk: Callable[[], A]) -> "Either[Any, A]":
        """Run ``thunk`` now; a raised exception becomes a Failure.

        The Failure holds the exception message, or the exception itself when
        its message is empty.
        """
        try:
            return Success(thunk())
        except Exception as ex:
            return Failure(str(ex) or ex)

    def map(self, f: Callable[[A], B]) -> "Either[E, B]":
        if self.is_success():
            return Success(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def flat_map(self, f: Callable[[A], Any]) -> Any:
        # whatever f returns is passed through, wrapped or not
        if self.is_success():
            return f(self.value)  # type: ignore[attr-defined]
        return self

    def map_to_value(self, f: Callable[[A], B], default: Any = None) -> Any:
        return f(self.value) if self.is_success() else default  # type: ignore[attr-defined]

    def ap(self, other: "Either[E, Any]") -> "Either[E, Any]":
        if self.is_success():
            return other.map(self.value)  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def catch_map(self, f: Callable[[E], B]) -> "Either[B, A]":
        if self.is_failure():
            return Failure(f(self.value))  # type: ignore[attr-defined]
        return self  # type: ignore[return-value]

    def bimap(self, on_failure: Callable[[E], Any], *rest: Callable[[A], Any]) -> Any:
        """Map the failure with ``on_failure`` or the success with ``on_success``.

        Called as ``bimap(on_failure, on_success)`` or ``bimap(on_failure)(on_success)``.
        """
        def with_success(on_success: Callable[[A], Any]) -> "Either[Any, Any]":
            return self.catch_map(on_failure) if self.is_failure() else self.map(on_success)
        if not rest:
            return with_success
        return with_success(*rest)

    def or_of(self, value: A) -> "Either[E, A]":
        return Success(value) if self.is_failure() else self

    def or_else(self, f: Callable[[E], "Either[Any, A]"]) -> "Either[Any, A]":
        return f(self.value) if self.is_failure() else self  # type: ignore[attr-defined]

    def or_try(self, thunk: Callable[[], A]) -> "Either[Any, A]":
        return Either.attempt(thunk) if self.is_failure() else self

    def get_or_else(self, default: A) -> A:
        return self.value if self.is_success() else default  # type: ignore[attr-defined]

    def inspect(self) -> str:
        name = "Failure" if self.is_failure() else "Success"
        return f"{name}({deep_inspect(self.value)})"  # type: ignore[attr-defined]

    def __repr__(self) -> str: return self.inspect()


@dataclass(frozen=True, repr=False)
class Success(Either[E, A]):
    value: A
    def is_failure(self) -> bool: return False


@dataclass(frozen=True, repr=False)
class Failure(Either[E, A]):
    value: E
    def is_failure(self) -> bool: return True


@nary
def either(on_failure: Callable[[Any], B]) -> Callable[..., Any]:
    """Eliminate an Either: ``either(on_failure)(on_success)(e)`` or ``either(on_failure, on_success, e)``."""
    def with_success(on_success: Callable[[Any], B]) -> Callable[[Either[Any, Any]], B]:
        def eliminate(e: Either[Any, Any]) -> B:
            return on_failure(e.value) if e.is_failure() else on_success(e.value)  # type: ignore[attr-defined]
        return eliminate
    return with_success


def _collect_failure(acc: Either[Any, Any], error: Any) -> Either[List[Any], Any]:
    if acc.is_failure():
        return Failure([*acc.value, error])  # type: ignore[attr-defined]
    return Failure([error])


def merge_eithers(*eithers: Either[Any, Any]) -> Either[List[Any], List[Any]]:
    """Success of all values, or Failure of every failure payload in order.

    Example:
        ```python
        merge_eithers(Success("a"), Failure("e1"), Failure("e2"), Success("b"))
        # Failure(['e1', 'e2'])
        ```
    """
    def step(acc: Either[Any, List[Any]], current: Either[Any, Any]) -> Either[Any, List[Any]]:
        if current.is_failure():
            return _collect_failure(acc, current.value)  # type: ignore[attr-defined]
        if acc.is_failure():
            return acc
        return Success([*acc.value, current.value])  # type: ignore[attr-defined]
    return reduce(step, eithers, Success([]))


def validate_eithers(*checks: Callable[[A], Either[Any, Any]]) -> Callable[[A], Either[List[Any], A]]:
    """Build a validator running every check against one input.

    The result is Success(input) when all checks succeed, otherwise a Failure
    of all failure payloads in check order.
    """
    def validate(value: A) -> Either[List[Any], A]:
        def step(acc: Either[Any, A], check: Callable[[A], Either[Any, Any]]) -> Either[Any, A]:
            result = check(value)
            if result.is_failure():
                return _collect_failure(acc, result.value)  # type: ignore[attr-defined]
            return acc
        return reduce(step, checks, Success(value))
    return validate
