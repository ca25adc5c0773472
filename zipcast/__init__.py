"""
zipcast package – current conditions and a 7‑day forecast for a US ZIP code.

Public entry points
-------------------
* `zipcast.resolve` – awaitable ZIP → weather lookup returning
  `Success` or `Failure`
* `zipcast.ViewController` – draft ZIP / extra‑info state and the
  loading / error / success render step
* `zipcast.main` – the command‑line driver (`python -m zipcast.main 90210`)

    >>> from zipcast import resolve, ViewController
"""

__all__ = [
    "VERSION",
    "resolve",
    "ViewController",
    "Success",
    "Failure",
    "WeatherResult",
    "GeoError",
    "WeatherError",
    "TransportError",
]

VERSION = "0.1.0"

from .errors import GeoError, TransportError, WeatherError  # noqa: F401,E402
from .models import Failure, Success, WeatherResult  # noqa: F401,E402
from .resolver import resolve  # noqa: F401,E402
from .view import ViewController  # noqa: F401,E402
