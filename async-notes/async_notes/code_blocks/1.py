# Synchronous execution.
#
# Every statement waits for the previous one to finish completely.
# No matter how long a step takes, the next one won't start until it is done,
# so the output always follows the order of the source code.
#
# Entry points are still asynchronous functions ("async def main"),
# a called asynchronous function turns into a "coroutine"
# and nothing in its body runs until the asyncio runtime handles it.
def farm() -> None:
    print("Plant corn")
    print("Water plant")
    print("Add fertilizer")


async def main():
    farm()
    # > Plant corn
    # > Water plant
    # > Add fertilizer


# This part will look the same in every section.
if __name__ == "__main__":
    import asyncio

    from async_notes.logging_config import setup_logging
    from async_notes.settings import get_settings

    setup_logging(get_settings().log_level)

    # Turning the function "main" into a coroutine.
    coroutine = main()
    # Letting asyncio runtime execute your coroutine.
    asyncio.run(coroutine)
