from __future__ import annotations
from functools import reduce, wraps
from typing import Any, Callable


def nary(fn: Callable[..., Any]) -> Callable[..., Any]:
    """Make a curried unary chain callable with any split of its arguments.

    Example:
        ```python
        add = nary(lambda a: lambda b: a + b)
        add(1)(2) == add(1, 2)  # True
        ```
    """
    @wraps(fn)
    def call(*args: Any) -> Any:
        if not args:
            return fn()
        return reduce(lambda acc, arg: acc(arg), args, fn)
    return call
