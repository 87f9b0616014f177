from async_notes.date import order_uber, plan_date
from async_notes.deferred import catch, then
from async_notes.settings import get_settings

import asyncio

# Chaining deferred values.
#
# Sometimes a deferred operation depends on the result of the previous one.
# Let's order an uber if we are going on a date:
# order_uber(date_details) returns a second future built from the first one's location.
#
# order_uber is registered as the success continuation of the date,
# so it runs only when the date is on.
# The next "then" receives what order_uber settled to,
# and a single "catch" at the end sees a failure of any stage.


async def my_date(weather: bool) -> None:
    def on_failed(error):
        print(error)

    await catch(then(then(plan_date(weather), order_uber), print), on_failed)


async def main():
    await my_date(get_settings().weather)
    # > Get me an Uber ASAP to 55th Street, we are going on a date!

    # and with ASYNC_NOTES_WEATHER=false order_uber is never called
    # > Bad weather, so no Date


if __name__ == "__main__":
    import asyncio

    from async_notes.logging_config import setup_logging

    setup_logging(get_settings().log_level)

    coroutine = main()
    asyncio.run(coroutine)
