"""ZIP → coordinates → weather, as one awaitable that never raises.

The two calls are dependent (the second needs the first's coordinates), so
they run strictly one after another.  Each blocking ``requests`` call is
pushed to a worker thread so the event loop stays free.
"""

import asyncio
import logging

from .errors import GeoError, ResolutionError, WeatherError
from .models import (
    Failure,
    GeoResult,
    ResolutionOutcome,
    Success,
    WeatherResult,
    is_number,
)
from .services import ApiReply, OneCallService, ZipLookupService

logger = logging.getLogger(__name__)


def _geo_from_reply(reply: ApiReply, postal_code: str) -> GeoResult:
    payload = reply.payload
    if not reply.ok or not isinstance(payload, dict):
        raise GeoError(reply.message(), postal_code)
    if not (is_number(payload.get("lat")) and is_number(payload.get("lon"))):
        raise GeoError(reply.message(), postal_code)
    try:
        return GeoResult.from_payload(payload)
    except ValueError as exc:
        raise GeoError(str(exc), postal_code) from exc


def _weather_from_reply(reply: ApiReply, location: str, postal_code: str) -> WeatherResult:
    payload = reply.payload
    if not reply.ok or not isinstance(payload, dict):
        raise WeatherError(reply.message(), postal_code)
    if not payload.get("current") or not payload.get("daily"):
        raise WeatherError(reply.message(), postal_code)
    try:
        return WeatherResult.from_payload(location, payload)
    except ValueError as exc:
        raise WeatherError(str(exc), postal_code) from exc


async def resolve(postal_code: str, credential: str | None) -> ResolutionOutcome:
    """
    Look up the weather for ``postal_code``.

    Returns ``Success(WeatherResult)`` or ``Failure`` classified as
    GeoError / WeatherError / TransportError.  Single attempt, no retries.
    """
    try:
        logger.debug("Geocoding ZIP %s", postal_code)
        geo_reply = await asyncio.to_thread(
            ZipLookupService.zip_to_latlon, postal_code, credential
        )
        geo = _geo_from_reply(geo_reply, postal_code)

        logger.debug("Fetching forecast for %.4f, %.4f", geo.latitude, geo.longitude)
        weather_reply = await asyncio.to_thread(
            OneCallService.get_forecast, geo.latitude, geo.longitude, credential, postal_code
        )
        result = _weather_from_reply(weather_reply, geo.location, postal_code)
    except ResolutionError as exc:
        logger.warning("%s for ZIP %s: %s", exc.kind.value, postal_code, exc.message)
        return Failure.from_error(exc)

    return Success(result)
