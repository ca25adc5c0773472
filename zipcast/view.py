"""Client-side state for the weather page.

The controller owns two things: the draft ZIP typed into the search box and
whether the "extra info" block is open.  Everything else (the latest outcome
and whether a fetch is in flight) is handed in by whoever drives navigation,
and ``render`` turns it into one of three view models.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, ClassVar, Dict, Mapping, Optional, Tuple, Union

from .config import DEFAULT_ZIP_CODE
from .models import ZIP_PARAM, Failure, ResolutionOutcome, WeatherResult
from .utils import day_label, icon_url, round_half_up, time_of_day

MAX_FORECAST_DAYS = 7


@dataclass(frozen=True)
class Navigation:
    """A request to move to new query parameters."""

    params: Dict[str, str]
    preserve_scroll: bool = True


# ----------------------------------------------------------------------
# View models
# ----------------------------------------------------------------------
@dataclass(frozen=True)
class LoadingView:
    kind: ClassVar[str] = "loading"


@dataclass(frozen=True)
class ErrorView:
    kind: ClassVar[str] = "error"
    message: str


@dataclass(frozen=True)
class ExtraInfo:
    wind_speed: float
    humidity: float
    pressure: float
    sunrise: str
    sunset: str


@dataclass(frozen=True)
class CurrentPanel:
    location: str
    description: str
    icon_url: str
    temperature: int
    feels_like: int
    high: int
    low: int
    extra: ExtraInfo


@dataclass(frozen=True)
class ForecastCard:
    label: str
    description: str
    icon_url: str
    high: int
    low: int


@dataclass(frozen=True)
class SuccessView:
    kind: ClassVar[str] = "success"
    draft_postal_code: str
    extra_info_visible: bool
    current: CurrentPanel
    forecast: Tuple[ForecastCard, ...]


RenderState = Union[LoadingView, ErrorView, SuccessView]


def _current_panel(result: WeatherResult) -> CurrentPanel:
    current = result.current
    today = result.daily[0]
    extra = ExtraInfo(
        wind_speed=current.wind_speed,
        humidity=current.humidity,
        pressure=current.pressure,
        sunrise=time_of_day(current.sunrise, result.timezone_offset),
        sunset=time_of_day(current.sunset, result.timezone_offset),
    )
    return CurrentPanel(
        location=result.location,
        description=current.conditions[0].description,
        icon_url=icon_url(current.conditions[0].icon_id, large=True),
        temperature=round_half_up(current.temperature),
        feels_like=round_half_up(current.feels_like),
        high=round_half_up(today.temp_max),
        low=round_half_up(today.temp_min),
        extra=extra,
    )


def _forecast_cards(result: WeatherResult) -> Tuple[ForecastCard, ...]:
    return tuple(
        ForecastCard(
            label=day_label(index, day.date, result.timezone_offset),
            description=day.conditions[0].description,
            icon_url=icon_url(day.conditions[0].icon_id),
            high=round_half_up(day.temp_max),
            low=round_half_up(day.temp_min),
        )
        for index, day in enumerate(result.daily[:MAX_FORECAST_DAYS])
    )


@dataclass
class ViewController:
    draft_postal_code: str = DEFAULT_ZIP_CODE
    extra_info_visible: bool = False

    @classmethod
    def for_params(cls, params: Mapping[str, str]) -> "ViewController":
        """Fresh controller whose draft mirrors the active ``zipCode``."""
        return cls(draft_postal_code=params.get(ZIP_PARAM) or DEFAULT_ZIP_CODE)

    # ------------------------------------------------------------------
    # Operations
    # ------------------------------------------------------------------
    def on_submit(self) -> Navigation:
        """Publish the draft as the only query parameter; the fetch follows the navigation."""
        return Navigation(params={ZIP_PARAM: self.draft_postal_code}, preserve_scroll=True)

    def toggle_extra_info(self) -> None:
        self.extra_info_visible = not self.extra_info_visible

    def render(self, outcome: Optional[ResolutionOutcome], is_fetching: bool) -> RenderState:
        """
        Loading while a fetch is in flight or before any outcome exists, then
        the failure message, then the full page.

        The extra details are always part of the success panel;
        ``extra_info_visible`` says whether they are shown.
        """
        if is_fetching or outcome is None:
            return LoadingView()
        if isinstance(outcome, Failure):
            return ErrorView(outcome.message)
        result = outcome.result
        return SuccessView(
            draft_postal_code=self.draft_postal_code,
            extra_info_visible=self.extra_info_visible,
            current=_current_panel(result),
            forecast=_forecast_cards(result),
        )

    # ------------------------------------------------------------------
    # Session round‑trip
    # ------------------------------------------------------------------
    def to_state(self) -> Dict[str, Any]:
        return {"extra": self.extra_info_visible}

    @classmethod
    def from_state(cls, state: Optional[Mapping[str, Any]], params: Mapping[str, str]) -> "ViewController":
        """Restore the toggle from the session; the draft always starts at the active ZIP."""
        controller = cls.for_params(params)
        if state:
            controller.extra_info_visible = bool(state.get("extra", False))
        return controller
