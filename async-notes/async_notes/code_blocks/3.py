# Functions are first-class objects.
# They can be assigned to variables, defined inside other functions,
# returned to be called later and passed as arguments.
#
# A function passed as an argument to another function is a "callback":
# it does not run unless the containing function calls it back.
import asyncio
from typing import Callable


def kind_of(people: list[str]) -> list[str]:
    # map accepts a callback which states how each element will be transformed
    return list(map(lambda person: person + " kind", people))


# A named callback
def greeting(name: str) -> None:
    print(f"Hello {name}, welcome to Scotch!")


def introduction(first_name: str, last_name: str, callback: Callable[[str], None]) -> None:
    full_name = f"{first_name} {last_name}"

    callback(full_name)


async def say_hello(times: int, interval_in_seconds: float) -> None:
    # The event loop can call a callback repeatedly, like a ticking interval
    loop = asyncio.get_running_loop()
    finished = loop.create_future()
    count = 0

    def tick() -> None:
        nonlocal count
        print("hello!")
        count += 1
        if count < times:
            loop.call_later(interval_in_seconds, tick)
        else:
            finished.set_result(count)

    loop.call_later(interval_in_seconds, tick)
    await finished


async def main():
    print(kind_of(["man", "woman", "child"]))
    # > ['man kind', 'woman kind', 'child kind']

    # Notice: no parentheses after "greeting", the function itself is passed, not its result
    introduction("Chris", "Nwamba", greeting)
    # > Hello Chris Nwamba, welcome to Scotch!

    await say_hello(times=3, interval_in_seconds=1)
    # > hello!
    # > hello!
    # > hello!


if __name__ == "__main__":
    import asyncio

    from async_notes.logging_config import setup_logging
    from async_notes.settings import get_settings

    setup_logging(get_settings().log_level)

    coroutine = main()
    asyncio.run(coroutine)
