from async_notes.date import order_uber, plan_date
from async_notes.settings import get_settings

import asyncio

# async and await.
#
# An async function is syntactic sugar over deferred values:
# calling it returns a coroutine which resolves to whatever the function returns,
# or rejects with whatever the function raises.

RIDE = "2017 Dodge Charger"


async def my_ride() -> str:
    return RIDE


# does the same thing with an explicit deferred value
def your_ride() -> asyncio.Future[str]:
    ride = asyncio.get_running_loop().create_future()
    ride.set_result(RIDE)
    return ride


# and when it fails
def foo() -> asyncio.Future[int]:
    rejected = asyncio.get_running_loop().create_future()
    rejected.set_exception(ValueError(25))
    return rejected


# is equal to
async def bar() -> int:
    raise ValueError(25)


# "await" suspends the coroutine until the deferred value settles
# and resumes it with the value, or raises the error right there.
# No more continuations: the chain from section 6 reads top to bottom
# and failures are caught with a plain try/except.
async def my_date(weather: bool) -> None:
    try:
        date_details = await plan_date(weather)
        message = await order_uber(date_details)
        print(message)
    except Exception as e:
        print(e)


async def main():
    print(await my_ride(), await your_ride())
    # > 2017 Dodge Charger 2017 Dodge Charger

    for rejected in (foo(), bar()):
        try:
            await rejected
        except ValueError as e:
            print(repr(e))
    # > ValueError(25)
    # > ValueError(25)

    await my_date(get_settings().weather)
    # > Get me an Uber ASAP to 55th Street, we are going on a date!

    # and with ASYNC_NOTES_WEATHER=false
    # > Bad weather, so no Date


if __name__ == "__main__":
    import asyncio

    from async_notes.logging_config import setup_logging

    setup_logging(get_settings().log_level)

    coroutine = main()
    asyncio.run(coroutine)
