from __future__ import annotations
import asyncio
from inspect import isawaitable
from typing import Any, Awaitable, Callable, Generic, List, TypeVar

from .debug import deep_inspect

E = TypeVar("E"); A = TypeVar("A"); B = TypeVar("B")

Reject = Callable[[Any], None]
Resolve = Callable[[Any], None]


class Rejection(Exception):
    """Carries a rejection payload across an exception boundary."""
    def __init__(self, error: Any):
        super().__init__(repr(error)); self.error = error

    @staticmethod
    def wrap(error: Any) -> BaseException:
        return error if isinstance(error, BaseException) else Rejection(error)

    @staticmethod
    def unwrap(ex: BaseException) -> Any:
        return ex.error if isinstance(ex, Rejection) else ex


def _consume(fut: asyncio.Future) -> None:
    if not fut.cancelled():
        fut.exception()


class AsyncEffect(Generic[E, A]):
    """A deferred computation that settles through reject/resolve callbacks.

    The wrapped computation is called as ``computation(reject, resolve, *args)``
    and must eventually call exactly one of the callbacks. It may also be an
    ``async def``; the coroutine is scheduled on the running loop. Exceptions
    raised by the computation, synchronously or from its coroutine, reject the
    effect.

    Args:
        computation: Function receiving ``reject``, ``resolve`` and any trigger
            arguments.

    Example:
        ```python
        def later(reject, resolve):
            asyncio.get_running_loop().call_later(0.01, resolve, "7urtle")

        eff = AsyncEffect.of(later).map(str.upper)
        eff.trigger(print, print)          # prints 7URTLE later
        value = await eff.promise()        # "7URTLE"
        ```
    """
    def __init__(self, computation: Callable[..., Any]): self._computation = computation

    @staticmethod
    def of(computation: Callable[..., Any]) -> "AsyncEffect[Any, Any]":
        return AsyncEffect(computation)

    @staticmethod
    def of_promise(factory: Callable[..., Awaitable[A]]) -> "AsyncEffect[Any, A]":
        """Adapt a callable returning an awaitable into an AsyncEffect.

        A ``Rejection`` raised by the awaitable rejects with its original
        payload, so ``of_promise(lambda: eff.promise())`` behaves like ``eff``.
        """
        def from_awaitable(reject: Reject, resolve: Resolve, *args: Any) -> None:
            loop = asyncio.get_running_loop()
            fut = asyncio.ensure_future(factory(*args), loop=loop)

            def settle(f: asyncio.Future) -> None:
                if f.cancelled():
                    reject(asyncio.CancelledError())
                elif f.exception() is not None:
                    reject(Rejection.unwrap(f.exception()))
                else:
                    resolve(f.result())
            fut.add_done_callback(settle)
        return AsyncEffect(from_awaitable)

    def trigger(self, reject: Reject, *rest: Any) -> Any:
        """Run the effect: ``trigger(reject, resolve, *args)`` or ``trigger(reject)(resolve)``.

        Only the first callback invocation counts; later ones are ignored.
        """
        if not rest:
            def with_resolve(resolve: Resolve, *args: Any) -> None:
                self._fork(reject, resolve, *args)
            return with_resolve
        self._fork(reject, *rest)
        return None

    def _fork(self, reject: Reject, resolve: Resolve, *args: Any) -> None:
        settled = False

        def on_reject(error: Any) -> None:
            nonlocal settled
            if settled: return
            settled = True; reject(error)

        def on_resolve(value: Any) -> None:
            nonlocal settled
            if settled: return
            settled = True; resolve(value)

        try:
            result = self._computation(on_reject, on_resolve, *args)
        except Exception as ex:
            # a raise after settling comes from the caller's own callback
            if settled: raise
            on_reject(ex)
            return
        if not isawaitable(result):
            return
        try:
            loop = asyncio.get_running_loop()
        except RuntimeError:
            if asyncio.iscoroutine(result): result.close()
            raise
        task = asyncio.ensure_future(result, loop=loop)

        def settle(t: asyncio.Future) -> None:
            # left unretrieved after settling so asyncio reports it
            if settled: return
            if t.cancelled():
                on_reject(asyncio.CancelledError())
            elif t.exception() is not None:
                on_reject(t.exception())
        task.add_done_callback(settle)

    def promise(self, *args: Any) -> "asyncio.Future[A]":
        """Trigger the effect into a future on the running loop.

        Rejection payloads that are not exceptions are wrapped in ``Rejection``.
        """
        fut: asyncio.Future = asyncio.get_running_loop().create_future()

        def on_reject(error: Any) -> None:
            if fut.done(): return
            if isinstance(error, asyncio.CancelledError): fut.cancel()
            else: fut.set_exception(Rejection.wrap(error))

        def on_resolve(value: Any) -> None:
            if not fut.done(): fut.set_result(value)

        self._fork(on_reject, on_resolve, *args)
        return fut

    def map(self, f: Callable[[A], B]) -> "AsyncEffect[E, B]":
        def mapped(reject: Reject, resolve: Resolve, *args: Any) -> None:
            def on_value(a: A) -> None:
                try: b = f(a)
                except Exception as ex:
                    reject(ex); return
                resolve(b)
            self._fork(reject, on_value, *args)
        return AsyncEffect(mapped)

    def flat_map(self, f: Callable[[A], "AsyncEffect[E, B]"]) -> "AsyncEffect[E, B]":
        # the effect produced by f is triggered with the same arguments
        def bound(reject: Reject, resolve: Resolve, *args: Any) -> None:
            def on_value(a: A) -> None:
                try: nxt = f(a)
                except Exception as ex:
                    reject(ex); return
                nxt._fork(reject, resolve, *args)
            self._fork(reject, on_value, *args)
        return AsyncEffect(bound)

    def ap(self, other: "AsyncEffect[E, Any]") -> "AsyncEffect[E, Any]":
        return self.flat_map(lambda fn: other.map(fn))

    def inspect(self) -> str: return f"AsyncEffect({deep_inspect(self._computation)})"
    def __repr__(self) -> str: return self.inspect()


def merge_async_effects(*effects: AsyncEffect[Any, Any]) -> AsyncEffect[Any, List[Any]]:
    """Run all effects concurrently.

    Resolves with every value in argument order, or rejects with the first
    rejection observed. Effects still running after a rejection are not
    cancelled; their outcomes are discarded.
    """
    async def merged(reject: Reject, resolve: Resolve, *args: Any) -> None:
        futures = [effect.promise(*args) for effect in effects]
        if not futures:
            resolve([]); return
        for fut in futures:
            fut.add_done_callback(_consume)
        done, _ = await asyncio.wait(futures, return_when=asyncio.FIRST_EXCEPTION)
        for fut in futures:
            if fut not in done:
                continue
            if fut.cancelled():
                reject(asyncio.CancelledError()); return
            if fut.exception() is not None:
                reject(Rejection.unwrap(fut.exception())); return
        resolve([fut.result() for fut in futures])
    return AsyncEffect(merged)
