"""Typed shapes for the geocoding / One Call payloads and the lookup outcome.

The two upstream services answer with untyped JSON.  Everything is parsed
into these frozen dataclasses before any field is read, so a ``Success``
outcome always satisfies:

* ``daily`` is non‑empty,
* ``current.conditions`` and every ``day.conditions`` are non‑empty.

Parsing problems raise ``ValueError`` naming the offending field; the
resolver decides which stage error that becomes.
"""

from __future__ import annotations

import math
from dataclasses import asdict, dataclass
from datetime import datetime, timezone
from typing import Any, Mapping, Tuple, Union

from .config import DEFAULT_ZIP_CODE
from .errors import FailureKind, ResolutionError

ZIP_PARAM = "zipCode"


# ----------------------------------------------------------------------
# Field helpers
# ----------------------------------------------------------------------
def is_number(value: Any) -> bool:
    if isinstance(value, bool) or not isinstance(value, (int, float)):
        return False
    return isinstance(value, int) or math.isfinite(value)


def _number(payload: Mapping[str, Any], key: str, where: str) -> float:
    value = payload.get(key)
    if not is_number(value):
        raise ValueError(f"{where}.{key} is missing or not numeric")
    return value


def _string(payload: Mapping[str, Any], key: str, where: str) -> str:
    value = payload.get(key)
    if not isinstance(value, str):
        raise ValueError(f"{where}.{key} is missing or not a string")
    return value


def _timestamp(payload: Mapping[str, Any], key: str, where: str) -> datetime:
    seconds = _number(payload, key, where)
    try:
        return datetime.fromtimestamp(seconds, tz=timezone.utc)
    except (OverflowError, OSError, ValueError) as exc:
        raise ValueError(f"{where}.{key} is out of range") from exc


def _mapping(payload: Mapping[str, Any], key: str, where: str) -> Mapping[str, Any]:
    value = payload.get(key)
    if not isinstance(value, Mapping):
        raise ValueError(f"{where}.{key} is missing or not an object")
    return value


# ----------------------------------------------------------------------
# Request / geocoding
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class LookupRequest:
    postal_code: str

    @classmethod
    def from_params(cls, params: Mapping[str, str]) -> "LookupRequest":
        """Read ``zipCode`` from query parameters, falling back to the default."""
        return cls(params.get(ZIP_PARAM) or DEFAULT_ZIP_CODE)


@dataclass(frozen=True)
class GeoResult:
    latitude: float
    longitude: float
    place_name: str
    country_code: str

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "GeoResult":
        return cls(
            latitude=_number(payload, "lat", "geo"),
            longitude=_number(payload, "lon", "geo"),
            place_name=_string(payload, "name", "geo"),
            country_code=_string(payload, "country", "geo"),
        )

    @property
    def location(self) -> str:
        return f"{self.place_name}, {self.country_code}"


# ----------------------------------------------------------------------
# Weather
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class Condition:
    description: str
    icon_id: str


def _conditions(payload: Mapping[str, Any], where: str) -> Tuple[Condition, ...]:
    raw = payload.get("weather")
    if not isinstance(raw, list) or not raw:
        raise ValueError(f"{where}.weather is missing or empty")
    conditions = []
    for i, entry in enumerate(raw):
        if not isinstance(entry, Mapping):
            raise ValueError(f"{where}.weather[{i}] is not an object")
        conditions.append(
            Condition(
                description=_string(entry, "description", f"{where}.weather[{i}]"),
                icon_id=_string(entry, "icon", f"{where}.weather[{i}]"),
            )
        )
    return tuple(conditions)


@dataclass(frozen=True)
class CurrentConditions:
    observed_at: datetime
    temperature: float
    feels_like: float
    pressure: float
    humidity: float
    wind_speed: float
    conditions: Tuple[Condition, ...]
    sunrise: datetime
    sunset: datetime

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any]) -> "CurrentConditions":
        where = "current"
        return cls(
            observed_at=_timestamp(payload, "dt", where),
            temperature=_number(payload, "temp", where),
            feels_like=_number(payload, "feels_like", where),
            pressure=_number(payload, "pressure", where),
            humidity=_number(payload, "humidity", where),
            wind_speed=_number(payload, "wind_speed", where),
            conditions=_conditions(payload, where),
            sunrise=_timestamp(payload, "sunrise", where),
            sunset=_timestamp(payload, "sunset", where),
        )


@dataclass(frozen=True)
class DayForecast:
    date: datetime
    temp_min: float
    temp_max: float
    conditions: Tuple[Condition, ...]

    @classmethod
    def from_payload(cls, payload: Mapping[str, Any], index: int) -> "DayForecast":
        where = f"daily[{index}]"
        temp = _mapping(payload, "temp", where)
        return cls(
            date=_timestamp(payload, "dt", where),
            temp_min=_number(temp, "min", f"{where}.temp"),
            temp_max=_number(temp, "max", f"{where}.temp"),
            conditions=_conditions(payload, where),
        )


@dataclass(frozen=True)
class WeatherResult:
    location: str
    current: CurrentConditions
    daily: Tuple[DayForecast, ...]
    timezone_offset: int = 0

    @classmethod
    def from_payload(cls, location: str, payload: Mapping[str, Any]) -> "WeatherResult":
        current = _mapping(payload, "current", "weather")
        raw_daily = payload.get("daily")
        if not isinstance(raw_daily, list) or not raw_daily:
            raise ValueError("weather.daily is missing or empty")
        daily = []
        for i, day in enumerate(raw_daily):
            if not isinstance(day, Mapping):
                raise ValueError(f"daily[{i}] is not an object")
            daily.append(DayForecast.from_payload(day, i))
        offset = 0
        if "timezone_offset" in payload:
            offset = int(_number(payload, "timezone_offset", "weather"))
            # datetime.timezone only takes offsets strictly inside ±24h
            if abs(offset) >= 86400:
                raise ValueError("weather.timezone_offset is out of range")
        return cls(
            location=location,
            current=CurrentConditions.from_payload(current),
            daily=tuple(daily),
            timezone_offset=offset,
        )


# ----------------------------------------------------------------------
# Outcome – the only value handed from the resolver to the view
# ----------------------------------------------------------------------
def _jsonable(value: Any) -> Any:
    if isinstance(value, datetime):
        return value.isoformat()
    if isinstance(value, dict):
        return {k: _jsonable(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_jsonable(v) for v in value]
    return value


@dataclass(frozen=True)
class Success:
    result: WeatherResult

    def to_dict(self) -> dict:
        return _jsonable(asdict(self.result))


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    message: str
    postal_code: str

    @classmethod
    def from_error(cls, error: ResolutionError) -> "Failure":
        return cls(kind=error.kind, message=error.message, postal_code=error.postal_code)

    def to_dict(self) -> dict:
        return {"error": self.message, "kind": self.kind.value, "zipCode": self.postal_code}


ResolutionOutcome = Union[Success, Failure]
