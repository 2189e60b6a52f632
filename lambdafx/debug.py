from __future__ import annotations
from collections.abc import Mapping
from typing import Any


def _inspect_function(fn: Any) -> str:
    return getattr(fn, "__qualname__", None) or getattr(fn, "__name__", None) or repr(fn)


def deep_inspect(value: Any) -> str:
    """Render a value, recursing into containers, sequences and mappings.

    Containers render through their own ``inspect()``; strings are single
    quoted; functions render as their qualified name.

    Example:
        ```python
        deep_inspect([1, "a", {"k": Just(2)}])  # "[1, 'a', {'k': Just(2)}]"
        ```
    """
    if value is None:
        return "None"
    if isinstance(value, str):
        return f"'{value}'"
    render = getattr(value, "inspect", None)
    if callable(render) and not isinstance(value, type):
        return render()
    if callable(value):
        return _inspect_function(value)
    if isinstance(value, Mapping):
        return "{" + ", ".join(f"{deep_inspect(k)}: {deep_inspect(v)}" for k, v in value.items()) + "}"
    if isinstance(value, list):
        return "[" + ", ".join(deep_inspect(x) for x in value) + "]"
    if isinstance(value, tuple):
        inner = ", ".join(deep_inspect(x) for x in value)
        return f"({inner},)" if len(value) == 1 else f"({inner})"
    return repr(value)
