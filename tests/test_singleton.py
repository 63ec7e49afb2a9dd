import asyncio

from kungfu import Ok

from pullseq import AsyncFn, Handle, range_of, singleton

from fakes import PullCounter, error_of, slow_source, value_of


def test_singleton_replays_value_forever() -> None:
    calls = []

    def factory() -> str:
        calls.append(1)
        return "config"

    async def run():
        handle = singleton(factory)
        return [value_of(await handle.pull()) for _ in range(5)]

    assert asyncio.run(run()) == ["config"] * 5
    assert len(calls) == 1


def test_singleton_caches_failure() -> None:
    calls = []

    def factory() -> str:
        calls.append(1)
        raise RuntimeError(f"attempt {len(calls)}")

    async def run():
        handle = singleton(factory)
        return [error_of(await handle.pull()) for _ in range(4)]

    errors = asyncio.run(run())
    assert len(calls) == 1
    assert str(errors[0]) == "attempt 1"
    assert all(e is errors[0] for e in errors)


def test_singleton_fans_out_to_concurrent_callers() -> None:
    calls = []

    async def factory():
        calls.append(1)
        await asyncio.sleep(0.01)
        return Ok(object())

    async def run():
        handle = singleton(AsyncFn(factory))
        return await asyncio.gather(*(handle.pull() for _ in range(5)))

    outcomes = asyncio.run(run())
    assert len(calls) == 1
    values = [value_of(o) for o in outcomes]
    assert all(v is values[0] for v in values)


def test_singleton_async_factory_raising_runs_once() -> None:
    calls = []

    async def factory():
        calls.append(1)
        await asyncio.sleep(0.01)
        raise RuntimeError("factory exploded")

    async def run():
        handle = singleton(AsyncFn(factory))
        concurrent = await asyncio.gather(*(handle.pull() for _ in range(3)))
        later = [await handle.pull() for _ in range(2)]
        return [error_of(o) for o in concurrent + later]

    errors = asyncio.run(run())
    assert len(calls) == 1
    assert isinstance(errors[0], RuntimeError)
    assert all(e is errors[0] for e in errors)


def test_memoize_caches_exception_from_async_map() -> None:
    calls = []

    async def explode(x: int):
        calls.append(x)
        raise LookupError(x)

    async def run():
        handle = range_of(0).map_async(explode).singleton()
        return [error_of(await handle.pull()) for _ in range(3)]

    errors = asyncio.run(run())
    assert calls == [0]
    assert isinstance(errors[0], LookupError)
    assert all(e is errors[0] for e in errors)


def test_memoize_pulls_parent_once() -> None:
    async def run():
        counter = PullCounter(range_of(5))
        handle = counter.handle().singleton()
        values = [value_of(await handle.pull()) for _ in range(3)]
        return counter.calls, values

    calls, values = asyncio.run(run())
    assert calls == 1
    assert values == [5, 5, 5]


def test_memoize_with_queued_callers_over_async_parent() -> None:
    async def run():
        counter = PullCounter(slow_source(["only"]))
        handle = counter.handle().singleton()
        outcomes = await asyncio.gather(*(handle.pull() for _ in range(3)))
        return counter.calls, [value_of(o) for o in outcomes]

    calls, values = asyncio.run(run())
    assert calls == 1
    assert values == ["only"] * 3


def test_singleton_composes_with_take() -> None:
    async def run():
        return await Handle.range(0).map(lambda x: x + 1).singleton().take(3).to_list()

    assert asyncio.run(run()).unwrap() == [1, 1, 1]
