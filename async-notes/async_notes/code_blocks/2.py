from async_notes.settings import get_settings
from async_notes.timeit import timer

import asyncio
import pydantic


async def farm(watering_delay_seconds: pydantic.NonNegativeFloat) -> None:
    # Now watering takes longer than planting and fertilizing
    loop = asyncio.get_running_loop()
    watered = loop.create_future()

    def water_plant() -> None:
        print("Water plant")
        watered.set_result(None)

    print("Plant maize")

    # call_later does not pause anything for 3 seconds,
    # it only asks the event loop to call water_plant once the time has passed
    # and returns immediately
    loop.call_later(watering_delay_seconds, water_plant)

    print("Add fertilizer")

    # The timer callback only fires while the loop is free to run it,
    # so let the loop run until the plant is watered
    await watered


async def main():
    with timer():
        await farm(get_settings().watering_delay_seconds)
        # > Plant maize
        # > Add fertilizer
        # > Water plant

    # > elapsed time: 3.00 seconds

    # Fertilizing did not wait for watering: the deferred callback ran last


if __name__ == "__main__":
    import asyncio

    from async_notes.logging_config import setup_logging

    setup_logging(get_settings().log_level)

    coroutine = main()
    asyncio.run(coroutine)
