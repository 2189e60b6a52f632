"""
AsyncEffect pipeline: deferred callbacks, awaitables and concurrent merge.

Run: python examples/async_pipeline.py
"""
import asyncio

from lambdafx import AsyncEffect, Rejection, lift_a2, merge_async_effects


def fetch(name, delay):
    def run(reject, resolve):
        asyncio.get_running_loop().call_later(delay, resolve, {"name": name, "delay": delay})
    return AsyncEffect.of(run)


async def load_price(symbol):
    await asyncio.sleep(0.01)
    return {"AAA": 10.0, "BBB": 4.5}[symbol]


async def main():
    users = merge_async_effects(fetch("ada", 0.03), fetch("alan", 0.01)).map(lambda rows: [r["name"] for r in rows])
    print("users =>", await users.promise())

    total = lift_a2(
        lambda a, b: a + b,
        AsyncEffect.of_promise(lambda: load_price("AAA")),
        AsyncEffect.of_promise(lambda: load_price("BBB")),
    )
    print("total =>", await total.promise())

    missing = AsyncEffect.of_promise(lambda: load_price("ZZZ"))
    try:
        await missing.promise()
    except KeyError as ex:
        print("missing =>", repr(ex))

    refused = AsyncEffect.of(lambda reject, resolve: reject("no access"))
    try:
        await refused.promise()
    except Rejection as r:
        print("refused =>", r.error)


if __name__ == "__main__":
    asyncio.run(main())
