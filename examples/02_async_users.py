from __future__ import annotations

from _infra import FakeBackend, User, banner, run

from kungfu import Error, Ok, Result
from pullseq import Handle, singleton


async def main() -> None:
    banner("02_async_users: map_async + filter + singleton")

    api = FakeBackend(name="api", delay_seconds=0.005, missing=frozenset({7}))

    async def is_active(user: User) -> Result[bool, Exception]:
        return Ok(user.is_active)

    users = (
        Handle.range(1, 10)
        .map_async(api.fetch_user)
        .filter_async(is_active)
    )

    match await users.for_each(lambda u: print(f"active: {u.name}")):
        case Ok(count):
            print(f"visited {count} users")
        case Error(err):
            print(f"stopped: {err}")

    settings = singleton(lambda: {"region": "eu", "shards": 4})
    first, second = await settings.pull(), await settings.pull()
    print(f"same settings object: {first.unwrap().unwrap() is second.unwrap().unwrap()}")


if __name__ == "__main__":
    run(main)
