from contextlib import contextmanager
import logging
import time

logger = logging.getLogger(__name__)


@contextmanager
def timer(label: str = "elapsed time"):
    """
    Usage:
        >>> with timer():
        ...     # example: a timer callback fired after 3 seconds
        ...     await asyncio.sleep(3)
        ...
        elapsed time: 3.00 seconds

    """
    start_time = time.perf_counter()
    try:
        yield
    finally:
        elapsed = time.perf_counter() - start_time
        logger.debug("%s took %.4f seconds", label, elapsed)
        print(f"{label}: {elapsed:.2f} seconds")
