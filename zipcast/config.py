import os

from dotenv import load_dotenv

load_dotenv()

# ----------------------------------------------------------------------
# OpenWeatherMap credential – not validated here; a missing key shows up
# as a geocoding error on the first lookup
# ----------------------------------------------------------------------
OPENWEATHERMAP_API_KEY = os.getenv("OPENWEATHERMAP_API_KEY")

DEFAULT_ZIP_CODE = "10001"
COUNTRY_CODE = "US"

# Flask session signing key (draft ZIP + extra‑info toggle live in the session)
SECRET_KEY = os.getenv("FLASK_SECRET_KEY") or os.urandom(24)

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO")


class Colours:
    """ANSI escape codes used by the command‑line driver."""

    RED = "\033[91m"
    GREEN = "\033[92m"
    YELLOW = "\033[93m"
    CYAN = "\033[96m"
    BOLD = "\033[1m"
    RESET = "\033[0m"
