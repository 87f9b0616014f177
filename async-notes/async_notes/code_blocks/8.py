from async_notes.date import order_uber, plan_date
from async_notes.deferred import catch, then
from async_notes.settings import get_settings

import asyncio

# Handlers never interrupt synchronous code.
#
# plan_date settles its future before returning, the outcome is known immediately.
# Still, asyncio hands done-callbacks to the event loop (loop.call_soon),
# and the loop gets control back only when the current code reaches an await.
# So everything written after the registration runs first.


async def main():
    weather = get_settings().weather

    date = plan_date(weather)
    reservation = then(date, lambda details: print(f"table {details.table} is booked"))
    ride = catch(then(then(date, order_uber), print), print)

    print("done scheduling")

    await asyncio.gather(reservation, ride, return_exceptions=True)
    # > done scheduling
    # > table 5 is booked
    # > Get me an Uber ASAP to 55th Street, we are going on a date!

    # and with ASYNC_NOTES_WEATHER=false
    # > done scheduling
    # > Bad weather, so no Date

    # The handlers ran in the order their futures settled:
    # the booking only waited for the date, the ride waited for the date and for order_uber


if __name__ == "__main__":
    import asyncio

    from async_notes.logging_config import setup_logging

    setup_logging(get_settings().log_level)

    coroutine = main()
    asyncio.run(coroutine)
