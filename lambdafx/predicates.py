from __future__ import annotations
from collections.abc import Mapping, Sequence
from typing import Any


def is_nothing(value: Any) -> bool:
    """True for None, an empty string, an empty sequence or an empty mapping."""
    if value is None:
        return True
    if isinstance(value, (str, Sequence, Mapping)):
        return len(value) == 0
    return False


def is_just(value: Any) -> bool:
    return not is_nothing(value)
