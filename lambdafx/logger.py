from __future__ import annotations
import sys, datetime as _dt, json
from typing import Any, Callable, Dict, Optional, TextIO, TypeVar

from .debug import deep_inspect

A = TypeVar("A")

_LEVELS = {"DEBUG": 10, "INFO": 20, "WARN": 30, "ERROR": 40}


class ConsoleLogger:
    """Line-oriented logger writing to an injected stream.

    Args:
        name: Logger name included in every line
        level: Minimum level emitted (DEBUG, INFO, WARN, ERROR)
        json_output: Emit one JSON object per line instead of text
        context: Fields attached to every line
        stream: Destination, ``sys.stderr`` when omitted

    Example:
        ```python
        log = ConsoleLogger("pipeline", level="DEBUG").bind(stage="parse")
        log.info("parsed", rows=3)
        # [2024-01-01T00:00:00+00:00] pipeline INFO: parsed rows=3 stage=parse
        ```
    """
    def __init__(self, name: str = "lambdafx", level: str = "INFO", json_output: bool = False,
                 context: Optional[Dict[str, Any]] = None, stream: Optional[TextIO] = None):
        self.name = name
        self.level = _LEVELS.get(level.upper(), 20)
        self.json_output = json_output
        self.context = dict(context or {})
        self.stream = stream

    def set_level(self, level: str) -> None:
        self.level = _LEVELS.get(level.upper(), self.level)

    def bind(self, **fields: Any) -> "ConsoleLogger":
        ctx = dict(self.context); ctx.update(fields)
        return ConsoleLogger(self.name, level=self.level_name, json_output=self.json_output, context=ctx, stream=self.stream)

    @property
    def level_name(self) -> str:
        for k, v in _LEVELS.items():
            if v == self.level: return k
        return "INFO"

    def _log(self, level: str, msg: str, **fields: Any) -> None:
        if _LEVELS[level] < self.level:
            return
        out = self.stream if self.stream is not None else sys.stderr
        ts = _dt.datetime.now(_dt.timezone.utc).isoformat()
        all_fields: Dict[str, Any] = {}
        all_fields.update(self.context)
        all_fields.update(fields)
        if self.json_output:
            data: Dict[str, Any] = {"ts": ts, "name": self.name, "level": level, "msg": msg}
            if all_fields:
                data["fields"] = all_fields
            print(json.dumps(data, separators=(",", ":"), default=deep_inspect), file=out)
        else:
            extras = "".join([f" {k}={v}" for k, v in sorted(all_fields.items())]) if all_fields else ""
            print(f"[{ts}] {self.name} {level}: {msg}{extras}", file=out)

    def debug(self, msg: str, **fields: Any) -> None: self._log("DEBUG", msg, **fields)
    def info(self, msg: str, **fields: Any) -> None: self._log("INFO", msg, **fields)
    def warn(self, msg: str, **fields: Any) -> None: self._log("WARN", msg, **fields)
    def error(self, msg: str, **fields: Any) -> None: self._log("ERROR", msg, **fields)


def tap(sink: Callable[[A], Any]) -> Callable[[A], A]:
    """Return a pass-through that hands each value to ``sink`` first."""
    def passthrough(value: A) -> A:
        sink(value)
        return value
    return passthrough


def spy(logger: ConsoleLogger) -> Callable[[A], A]:
    """Pass-through logging ``deep_inspect`` of each value at DEBUG.

    Example:
        ```python
        Maybe.of(3).map(spy(log)).map(lambda a: a + 1)   # logs "3"
        ```
    """
    return tap(lambda value: logger.debug(deep_inspect(value)))
