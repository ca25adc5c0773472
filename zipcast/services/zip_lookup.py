from ..config import COUNTRY_CODE
from .base import ApiReply, get_json


class ZipLookupService:
    """Resolve a ZIP to lat/lon + place name with OpenWeatherMap's geocoder."""

    BASE_URL = "https://api.openweathermap.org/geo/1.0/zip"

    @staticmethod
    def zip_to_latlon(zip_code: str, api_key: str | None) -> ApiReply:
        """Return the raw reply for ``zip=<zip_code>,US``; the caller validates it."""
        params = {"zip": f"{zip_code},{COUNTRY_CODE}", "appid": api_key}
        return get_json(ZipLookupService.BASE_URL, params, zip_code)
