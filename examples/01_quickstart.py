from __future__ import annotations

from _infra import banner, run

from kungfu import Error, Ok
from pullseq import Handle


async def main() -> None:
    banner("01_quickstart: range + filter + map + take + to_list")

    pipeline = (
        Handle.range(1)
        .filter(lambda x: x % 3 != 0)
        .map(lambda x: x * x)
        .zip_with_index()
        .take(5)
    )

    match await pipeline.to_list():
        case Ok(items):
            for value, index in items:
                print(f"#{index}: {value}")
        case Error(err):
            print(f"error: {err!r}")

    banner("01_quickstart: a failing transform stops the drain")

    broken = Handle.range(0, 10).map(lambda x: 100 // (x - 4))
    match await broken.to_list():
        case Ok(items):
            print(items)
        case Error(err):
            print(f"error: {err!r}")


if __name__ == "__main__":
    run(main)
