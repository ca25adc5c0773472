"""Failure taxonomy for a single ZIP → weather lookup."""

from enum import Enum


class FailureKind(str, Enum):
    GEO = "GeoError"
    WEATHER = "WeatherError"
    TRANSPORT = "TransportError"


class ResolutionError(Exception):
    """Base class – every lookup failure carries its message and the ZIP used."""

    kind: FailureKind

    def __init__(self, message: str, postal_code: str):
        super().__init__(message)
        self.message = message
        self.postal_code = postal_code


class GeoError(ResolutionError):
    """The geocoding service rejected the ZIP or answered with an unusable body."""

    kind = FailureKind.GEO


class WeatherError(ResolutionError):
    """The weather service rejected the coordinates or answered with an unusable body."""

    kind = FailureKind.WEATHER


class TransportError(ResolutionError):
    """Network failure or malformed JSON during either call."""

    kind = FailureKind.TRANSPORT
