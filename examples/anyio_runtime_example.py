"""
AnyIO runtime example: fork asynchronous effects and collect Either outcomes.

Run: python examples/anyio_runtime_example.py
"""
import anyio

from lambdafx import AnyIORuntime, AsyncEffect, either


async def slow_double(reject, resolve, value):
    await anyio.sleep(0.02)
    resolve(value * 2)


async def main():
    async with AnyIORuntime() as rt:
        f1 = await rt.fork(AsyncEffect.of(slow_double), 21)
        f2 = await rt.fork(AsyncEffect.of(lambda reject, resolve: reject("nope")))
        for fiber in (f1, f2):
            res = await fiber.await_()
            print(either(lambda e: f"failed: {e}", lambda v: f"ok: {v}", res))


if __name__ == "__main__":
    anyio.run(main)
