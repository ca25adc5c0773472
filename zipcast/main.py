import asyncio
import logging
import sys

from .config import Colours, DEFAULT_ZIP_CODE, LOG_LEVEL, OPENWEATHERMAP_API_KEY
from .models import ZIP_PARAM
from .resolver import resolve
from .view import ErrorView, ViewController


def colourize(temp: int, colour: str) -> str:
    """Helper to wrap a whole‑degree temperature with the proper ANSI colour."""
    return f"{colour}{temp}°F{Colours.RESET}"


def main(argv=None) -> int:
    logging.basicConfig(level=LOG_LEVEL, format="%(levelname)s %(name)s: %(message)s")
    argv = sys.argv[1:] if argv is None else argv

    # ------------------------------------------------------------------
    # 1️⃣ Gather the ZIP (argument or prompt)
    # ------------------------------------------------------------------
    zip_code = argv[0] if argv else input(f"Enter ZIP [{DEFAULT_ZIP_CODE}]: ").strip()
    controller = ViewController.for_params({ZIP_PARAM: zip_code})
    controller.toggle_extra_info()

    # ------------------------------------------------------------------
    # 2️⃣ ZIP → lat/lon → current + daily
    # ------------------------------------------------------------------
    outcome = asyncio.run(resolve(controller.draft_postal_code, OPENWEATHERMAP_API_KEY))
    view = controller.render(outcome, is_fetching=False)
    if isinstance(view, ErrorView):
        print(f"{Colours.RED}{view.message}{Colours.RESET}", file=sys.stderr)
        return 1

    # ------------------------------------------------------------------
    # 3️⃣ Current conditions
    # ------------------------------------------------------------------
    current = view.current
    print(f"\n{Colours.BOLD}{current.location}{Colours.RESET} – {current.description}")
    print(
        f"\tCurrent: {current.temperature}°F (feels like {current.feels_like}°F), "
        f"High: {colourize(current.high, Colours.RED)}, Low: {colourize(current.low, Colours.CYAN)}"
    )
    if view.extra_info_visible:
        extra = current.extra
        print(
            f"\tWind {extra.wind_speed} mph, humidity {extra.humidity}%, "
            f"pressure {extra.pressure} hPa, sunrise {extra.sunrise}, sunset {extra.sunset}"
        )

    # ------------------------------------------------------------------
    # 4️⃣ Forecast
    # ------------------------------------------------------------------
    print()
    for card in view.forecast:
        print(
            f"{card.label:<12} {colourize(card.high, Colours.RED)} / "
            f"{colourize(card.low, Colours.CYAN)}  {card.description}"
        )
    return 0


if __name__ == "__main__":
    sys.exit(main())
