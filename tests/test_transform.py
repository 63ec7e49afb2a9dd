import asyncio

from kungfu import Error, Ok

from pullseq import (
    AsyncFn,
    Handle,
    InlineScheduler,
    SyncFn,
    TrampolinePolicy,
    failure,
    filter_each,
    is_end,
    map_each,
    range_of,
)

from fakes import PullCounter, error_of, slow_source, value_of


# map


def test_map_sync() -> None:
    async def run():
        return await range_of(0, 5).map(lambda x: x * x).to_list()

    assert asyncio.run(run()).unwrap() == [0, 1, 4, 9, 16]


def test_map_explicit_sync_shape() -> None:
    async def run():
        return await map_each(Handle.from_iterable(["1", "22"]), SyncFn(len)).to_list()

    assert asyncio.run(run()).unwrap() == [1, 2]


def test_map_async() -> None:
    async def double(x: int):
        await asyncio.sleep(0)
        return Ok(x * 2)

    async def run():
        return await range_of(1, 4).map_async(double).to_list()

    assert asyncio.run(run()).unwrap() == [2, 4, 6]


def test_map_async_error_becomes_failure() -> None:
    async def check(x: int):
        if x == 2:
            return Error(f"rejected {x}")
        return Ok(x)

    async def run():
        return await map_each(range_of(0, 5), AsyncFn(check)).to_list()

    assert error_of(asyncio.run(run())) == "rejected 2"


def test_map_exception_surfaces_and_stops_the_sequence() -> None:
    async def run():
        handle = range_of(0, 10).map(lambda x: 10 // (x - 3))
        outcomes = [await handle.pull() for _ in range(6)]
        return outcomes

    outcomes = asyncio.run(run())
    assert [value_of(o) for o in outcomes[:3]] == [-4, -5, -10]
    errors = [error_of(o) for o in outcomes[3:]]
    assert isinstance(errors[0], ZeroDivisionError)
    assert all(e is errors[0] for e in errors)


def test_map_exception_from_to_list() -> None:
    async def run():
        return await range_of(0, 10).map(lambda x: 10 // (x - 3)).to_list()

    assert isinstance(error_of(asyncio.run(run())), ZeroDivisionError)


def test_map_passes_upstream_failure_through() -> None:
    calls = []

    async def run():
        handle = Handle.sync(lambda: failure("upstream")).map(calls.append)
        return await handle.pull()

    assert error_of(asyncio.run(run())) == "upstream"
    assert calls == []


# filter


def test_filter_skips_multiples_of_three() -> None:
    async def run():
        return await range_of(1, 10).filter(lambda x: x % 3 != 0).to_list()

    assert asyncio.run(run()).unwrap() == [1, 2, 4, 5, 7, 8]


def test_filter_async() -> None:
    async def is_even(x: int):
        await asyncio.sleep(0)
        return Ok(x % 2 == 0)

    async def run():
        return await slow_source([1, 2, 3, 4]).filter_async(is_even).to_list()

    assert asyncio.run(run()).unwrap() == [2, 4]


def test_filter_predicate_failure_aborts_search() -> None:
    seen = []

    def predicate(x: int) -> bool:
        seen.append(x)
        if x == 2:
            raise ValueError("bad predicate")
        return x > 5

    async def run():
        return await range_of(0, 10).filter(predicate).pull()

    assert isinstance(error_of(asyncio.run(run())), ValueError)
    assert seen == [0, 1, 2]


def test_filter_long_rejection_run_is_trampolined() -> None:
    scheduler = InlineScheduler()

    async def run():
        handle = filter_each(
            range_of(0, 2000),
            lambda x: x == 1999,
            scheduler=scheduler,
            policy=TrampolinePolicy(max_stack=100),
        )
        return await handle.to_list(scheduler=InlineScheduler())

    assert asyncio.run(run()).unwrap() == [1999]
    assert scheduler.deferrals == 19


def test_filter_rejecting_everything_ends() -> None:
    async def run():
        return await range_of(0, 50).filter(lambda _: False).pull()

    assert is_end(asyncio.run(run()))


# take


def test_take_limits() -> None:
    async def run():
        return await range_of(0, 10).take(3).to_list()

    assert asyncio.run(run()).unwrap() == [0, 1, 2]


def test_take_never_touches_parent_after_limit() -> None:
    async def run():
        counter = PullCounter(range_of(0, 10))
        handle = counter.handle().take(2)
        outcomes = [await handle.pull() for _ in range(6)]
        return counter.calls, outcomes

    calls, outcomes = asyncio.run(run())
    assert calls == 2
    assert [value_of(o) for o in outcomes[:2]] == [0, 1]
    assert all(is_end(o) for o in outcomes[2:])


def test_take_non_positive_is_exhausted() -> None:
    async def run():
        counter = PullCounter(range_of(0))
        zero = await counter.handle().take(0).to_list()
        negative = await counter.handle().take(-3).to_list()
        return counter.calls, zero, negative

    calls, zero, negative = asyncio.run(run())
    assert calls == 0
    assert zero.unwrap() == []
    assert negative.unwrap() == []


def test_take_more_than_available() -> None:
    async def run():
        return await range_of(0, 3).take(10).to_list()

    assert asyncio.run(run()).unwrap() == [0, 1, 2]
