from .arity import nary
from .predicates import is_nothing, is_just
from .debug import deep_inspect
from .maybe import Maybe, Just, NOTHING, maybe, merge_maybes
from .either import Either, Success, Failure, either, merge_eithers, validate_eithers
from .sync_effect import SyncEffect
from .async_effect import AsyncEffect, Rejection, merge_async_effects
from .conversions import (
    NOTHING_MESSAGE,
    maybe_to_either,
    maybe_to_sync_effect,
    maybe_to_async_effect,
    either_to_maybe,
    either_to_sync_effect,
    either_to_async_effect,
)
from .core import (
    Applicative,
    Monad,
    identity,
    compose,
    pipe,
    fmap,
    flat_map,
    ap,
    lift_a2,
    lift_a3,
)
from .logger import ConsoleLogger, tap, spy
from .anyio_runtime import AnyIORuntime, AnyIOFiber
