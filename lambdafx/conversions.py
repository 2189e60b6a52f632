from __future__ import annotations
from typing import Any, NoReturn

from .async_effect import AsyncEffect, Rejection
from .either import Either, Failure, Success, either
from .maybe import NOTHING, Maybe, maybe
from .sync_effect import SyncEffect

NOTHING_MESSAGE = "Maybe is Nothing."


def _raising(error: Any) -> SyncEffect[Any]:
    def raise_error(*_: Any) -> NoReturn:
        raise Rejection.wrap(error)
    return SyncEffect(raise_error)


def _rejecting(error: Any) -> AsyncEffect[Any, Any]:
    def reject_error(reject, _resolve, *_: Any) -> None: reject(error)
    return AsyncEffect(reject_error)


def _resolving(value: Any) -> AsyncEffect[Any, Any]:
    def resolve_value(_reject, resolve, *_: Any) -> None: resolve(value)
    return AsyncEffect(resolve_value)


def maybe_to_either(m: Maybe[Any]) -> Either[str, Any]:
    return maybe(lambda: Failure(NOTHING_MESSAGE), Success, m)


def maybe_to_sync_effect(m: Maybe[Any]) -> SyncEffect[Any]:
    """Nothing becomes an effect raising ``Rejection(NOTHING_MESSAGE)`` on trigger."""
    return maybe(lambda: _raising(NOTHING_MESSAGE), SyncEffect.wrap, m)


def maybe_to_async_effect(m: Maybe[Any]) -> AsyncEffect[str, Any]:
    return maybe(lambda: _rejecting(NOTHING_MESSAGE), _resolving, m)


def either_to_maybe(e: Either[Any, Any]) -> Maybe[Any]:
    """Failure becomes Nothing; a Success value is classified by ``Maybe.of``."""
    return either(lambda _: NOTHING, Maybe.of, e)


def either_to_sync_effect(e: Either[Any, Any]) -> SyncEffect[Any]:
    """Failure becomes an effect raising its payload on trigger.

    Exception payloads are raised as they are, anything else wrapped in
    ``Rejection``.
    """
    return either(_raising, SyncEffect.wrap, e)


def either_to_async_effect(e: Either[Any, Any]) -> AsyncEffect[Any, Any]:
    return either(_rejecting, _resolving, e)
