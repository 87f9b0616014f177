import asyncio
import logging

import pydantic

logger = logging.getLogger(__name__)

BAD_WEATHER_MESSAGE = "Bad weather, so no Date"


class ReservationOutcome(pydantic.BaseModel):
    model_config = pydantic.ConfigDict(frozen=True)

    name: str
    location: str
    table: pydantic.NonNegativeInt


class BadWeatherError(Exception):
    def __init__(self, message: str = BAD_WEATHER_MESSAGE):
        super().__init__(message)
        self.message = message


DATE_DETAILS = ReservationOutcome(
    name="Cubana Restaurant",
    location="55th Street",
    table=5,
)


def plan_date(weather: bool) -> asyncio.Future[ReservationOutcome]:
    """
    Must be called while an event loop is running.

    The outcome is known right away, yet whoever attaches handlers to the
    returned future still gets called only on a later turn of the loop.

    Raises:
        RuntimeError: when there is no running event loop.
    """
    date = asyncio.get_running_loop().create_future()
    if weather:
        date.set_result(DATE_DETAILS)
    else:
        date.set_exception(BadWeatherError())
    logger.debug("date planned with weather=%r", weather)
    return date


def ride_request_message(location: str) -> str:
    return f"Get me an Uber ASAP to {location}, we are going on a date!"


def order_uber(date_details: ReservationOutcome) -> asyncio.Future[str]:
    ride = asyncio.get_running_loop().create_future()
    ride.set_result(ride_request_message(date_details.location))
    logger.debug("uber ordered to %s", date_details.location)
    return ride
