from .base import ApiReply, get_json


class OneCallService:
    """Wraps the OpenWeatherMap One Call 3.0 API (current + daily forecast)."""

    BASE_URL = "https://api.openweathermap.org/data/3.0/onecall"
    EXCLUDE = ("minutely", "hourly", "alerts")
    UNITS = "imperial"

    @staticmethod
    def get_forecast(lat: float, lon: float, api_key: str | None, zip_code: str) -> ApiReply:
        """
        Returns the raw reply for the coordinates.  Only the ``current`` and
        ``daily`` sections are requested, in °F / mph.

        ``zip_code`` is only carried along so transport failures can name it.
        """
        params = {
            "lat": lat,
            "lon": lon,
            "exclude": ",".join(OneCallService.EXCLUDE),
            "units": OneCallService.UNITS,
            "appid": api_key,
        }
        return get_json(OneCallService.BASE_URL, params, zip_code)
