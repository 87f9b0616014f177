from async_notes.date import plan_date
from async_notes.deferred import catch, then
from async_notes.settings import get_settings

import asyncio

# A deferred value ("promise") stands for the result of an operation
# which may not be available yet. It has three states:
#   - pending: the initial state, the operation has not finished
#   - fulfilled: the operation completed and produced a value
#   - rejected: the operation failed and produced an error
# It settles only once and never changes its state afterwards.
#
# In asyncio the deferred value is asyncio.Future:
#   future.set_result(value)    ~ resolve(value)
#   future.set_exception(error) ~ reject(error)
#
# "I promise to do this whenever that is true. If it isn't true, then I won't."
# plan_date(weather) resolves to the reservation details when the weather is good
# and rejects with BadWeatherError("Bad weather, so no Date") otherwise.


async def handle_date(weather: bool) -> None:
    date = plan_date(weather)

    def on_resolved(done):
        # the value passed to set_result() is here
        print("promise resolved successfully")

    def on_failed(error):
        # the exception passed to set_exception() is here
        print("promise FAILED")

    # Exactly one of the handlers runs
    await catch(then(date, on_resolved), on_failed)


async def my_date(weather: bool) -> None:
    # Handlers receive the settled value, so let's take this a step further
    def going_on_a_date(done):
        print("We are going on a date!")
        print(done)

    def no_date(error):
        print(error)

    await catch(then(plan_date(weather), going_on_a_date), no_date)


async def main():
    weather = get_settings().weather

    await handle_date(weather)
    # > promise resolved successfully

    await my_date(weather)
    # > We are going on a date!
    # > name='Cubana Restaurant' location='55th Street' table=5

    # and with ASYNC_NOTES_WEATHER=false
    # > promise FAILED
    # > Bad weather, so no Date

    # Note: handlers are called through the event loop,
    # they run only after the synchronous code around them completes (see section 8)


if __name__ == "__main__":
    import asyncio

    from async_notes.logging_config import setup_logging

    setup_logging(get_settings().log_level)

    coroutine = main()
    asyncio.run(coroutine)
