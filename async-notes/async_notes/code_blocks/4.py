# Callback hell.
#
# Every step below needs the result of the previous one, and every step
# hands its result to a callback instead of returning it.
# Nesting the callbacks makes the code drift to the right with each step,
# and it quickly becomes hard to read and to refactor.
# Callbacks are fine for short deferred operations,
# deferred values (next section) were introduced for everything else.
import asyncio
from typing import Callable


def lookup(value: str, callback: Callable[[str], None]) -> None:
    # Pretend the value comes from somewhere slow: the answer arrives on a later loop turn
    asyncio.get_running_loop().call_soon(callback, value)


def set_info(name: str, on_done: Callable[[list[str]], None]) -> None:
    info = [name]

    def address(my_address: str) -> None:
        info.append(my_address)

        def office_address(my_office_address: str) -> None:
            info.append(my_office_address)

            def telephone_number(my_telephone_number: str) -> None:
                info.append(my_telephone_number)

                def next_of_kin(my_next_of_kin: str) -> None:
                    info.append(my_next_of_kin)
                    print("done")  # let's begin to close each function!
                    on_done(info)

                lookup("Jane Doe", next_of_kin)

            lookup("555-0100", telephone_number)

        lookup("1 Office Park", office_address)

    lookup("12 Home Lane", address)


async def main():
    finished = asyncio.get_running_loop().create_future()
    set_info("John Doe", finished.set_result)
    print(await finished)
    # > done
    # > ['John Doe', '12 Home Lane', '1 Office Park', '555-0100', 'Jane Doe']


if __name__ == "__main__":
    import asyncio

    from async_notes.logging_config import setup_logging
    from async_notes.settings import get_settings

    setup_logging(get_settings().log_level)

    coroutine = main()
    asyncio.run(coroutine)
