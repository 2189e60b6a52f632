from __future__ import annotations
from typing import Any, Callable, Generic, Optional, TypeVar
import anyio
import anyio.abc
from .async_effect import AsyncEffect, Rejection
from .either import Either, Failure, Success

E = TypeVar('E'); A = TypeVar('A')

class AnyIOFiber(Generic[E, A]):
    def __init__(self, done_event: anyio.Event, get_result: Callable[[], Either[E, A]]):
        self._done = done_event; self._get_result = get_result
    async def await_(self) -> Either[E, A]:
        await self._done.wait()
        return self._get_result()
    async def join(self) -> A:
        res = await self.await_()
        if res.is_failure(): raise Rejection.wrap(res.value)  # type: ignore[attr-defined]
        return res.value  # type: ignore[attr-defined]

class AnyIORuntime:
    """Awaits asynchronous effects from anyio code on the asyncio backend.

    ``promise``, ``of_promise``, ``merge_async_effects`` and ``async def``
    computations schedule work on the running asyncio loop, so effects using
    them need ``anyio.run(..., backend="asyncio")``. ``settle``/``run`` work
    outside a task group; ``fork`` needs ``async with``.

    Example:
        ```python
        async with AnyIORuntime() as rt:
            fiber = await rt.fork(fetch_user)
            other = await rt.run(fetch_orders)
            user = await fiber.join()
        ```
    """
    def __init__(self) -> None: self._tg: Optional[anyio.abc.TaskGroup] = None
    async def __aenter__(self) -> 'AnyIORuntime': self._tg = await anyio.create_task_group().__aenter__(); return self
    async def __aexit__(self, et, e, tb): assert self._tg is not None; await self._tg.__aexit__(et, e, tb); self._tg=None
    async def settle(self, eff: AsyncEffect[E, A], *args: Any) -> Either[E, A]:
        done = anyio.Event(); result: dict[str, Any] = {}
        def on_reject(error: Any) -> None: result.update(outcome=Failure(error)); done.set()
        def on_resolve(value: Any) -> None: result.update(outcome=Success(value)); done.set()
        eff.trigger(on_reject, on_resolve, *args)
        await done.wait()
        return result['outcome']
    async def run(self, eff: AsyncEffect[E, A], *args: Any) -> A:
        res = await self.settle(eff, *args)
        if res.is_failure(): raise Rejection.wrap(res.value)  # type: ignore[attr-defined]
        return res.value  # type: ignore[attr-defined]
    async def fork(self, eff: AsyncEffect[E, A], *args: Any) -> AnyIOFiber[E, A]:
        if self._tg is None: raise RuntimeError("Use AnyIORuntime in 'async with' context")
        done = anyio.Event(); result: dict[str, Any] = {}
        async def worker(task_status=anyio.TASK_STATUS_IGNORED):
            task_status.started()
            try: result['outcome'] = await self.settle(eff, *args)
            except Exception as ex: result['outcome'] = Failure(ex)
            finally: done.set()
        await self._tg.start(worker)
        def _get() -> Either[E, A]: return result['outcome']
        return AnyIOFiber(done, _get)
