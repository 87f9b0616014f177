"""
Promise-style helpers on top of asyncio.Future.

An asyncio.Future already behaves like a promise: it starts pending, settles
exactly once (to a result or to an exception) and runs its done-callbacks
through the event loop, so a callback never runs in the middle of the code
that registered it. What it lacks is the ``.then()`` / ``.catch()`` chaining,
which is what this module adds.
"""

import asyncio
import enum
import inspect
import logging
from typing import Any, Callable, TypeVar

logger = logging.getLogger(__name__)

T = TypeVar("T")


class DeferredState(enum.Enum):
    PENDING = "pending"
    FULFILLED = "fulfilled"
    REJECTED = "rejected"


def state_of(future: asyncio.Future) -> DeferredState:
    if not future.done():
        return DeferredState.PENDING
    # there is no cancellation in these examples, a cancelled future counts as rejected
    if future.cancelled() or future.exception() is not None:
        return DeferredState.REJECTED
    return DeferredState.FULFILLED


def _copy_outcome(source: asyncio.Future, target: asyncio.Future) -> None:
    if target.done():
        return
    if source.cancelled():
        target.cancel()
        return
    error = source.exception()
    if error is not None:
        target.set_exception(error)
    else:
        target.set_result(source.result())


def _adopt(target: asyncio.Future, value: Any) -> None:
    # A continuation may hand back another deferred value (a future or a coroutine).
    # In that case the chained future settles together with it instead of holding it.
    if inspect.isawaitable(value):
        inner = asyncio.ensure_future(value, loop=target.get_loop())
        inner.add_done_callback(lambda settled: _copy_outcome(settled, target))
    else:
        target.set_result(value)


def then(future: asyncio.Future, on_fulfilled: Callable[[Any], T]) -> asyncio.Future:
    """
    Register ``on_fulfilled`` as the success continuation of ``future``.

    Returns a new future that settles to whatever the continuation returns.
    If ``future`` is rejected the continuation is skipped and the same error
    is passed down the chain, so one ``catch`` at the end sees failures of
    every stage.

    Usage:
        >>> chained = then(plan_date(weather=True), order_uber)
        >>> await chained
        'Get me an Uber ASAP to 55th Street, we are going on a date!'

    """
    chained = future.get_loop().create_future()

    def on_settled(source: asyncio.Future) -> None:
        if chained.done():
            return
        if source.cancelled():
            chained.cancel()
            return

        error = source.exception()
        if error is not None:
            logger.debug("skipping %r, previous stage rejected with %r", on_fulfilled, error)
            chained.set_exception(error)
            return

        try:
            value = on_fulfilled(source.result())
        except Exception as e:
            # a failing continuation rejects the rest of the chain
            chained.set_exception(e)
            return
        _adopt(chained, value)

    future.add_done_callback(on_settled)
    return chained


def catch(future: asyncio.Future, on_rejected: Callable[[BaseException], T]) -> asyncio.Future:
    """
    Register ``on_rejected`` as the failure handler of ``future``.

    A fulfilled value passes through untouched. A rejection is replaced by
    whatever the handler returns (or by the handler's own exception).
    """
    chained = future.get_loop().create_future()

    def on_settled(source: asyncio.Future) -> None:
        if chained.done():
            return
        if source.cancelled():
            chained.cancel()
            return

        error = source.exception()
        if error is None:
            chained.set_result(source.result())
            return

        logger.info("handling rejection %r with %r", error, on_rejected)
        try:
            value = on_rejected(error)
        except Exception as e:
            chained.set_exception(e)
            return
        _adopt(chained, value)

    future.add_done_callback(on_settled)
    return chained
