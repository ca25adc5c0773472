import math
from datetime import datetime, timedelta, timezone

ICON_URL = "https://openweathermap.org/img/wn/{icon}{scale}.png"


def round_half_up(value: float) -> int:
    """Round to the nearest whole degree, .5 always going up (2.5 → 3, -0.5 → 0)."""
    return int(math.floor(value + 0.5))


def icon_url(icon_id: str, large: bool = False) -> str:
    return ICON_URL.format(icon=icon_id, scale="@2x" if large else "")


def to_local(moment: datetime, offset_seconds: int = 0) -> datetime:
    """Shift an aware UTC timestamp into the location's fixed UTC offset."""
    return moment.astimezone(timezone(timedelta(seconds=offset_seconds)))


def time_of_day(moment: datetime, offset_seconds: int = 0) -> str:
    """``6:42:13 AM`` style clock time at the location."""
    local = to_local(moment, offset_seconds)
    hour = local.hour % 12 or 12
    meridiem = "AM" if local.hour < 12 else "PM"
    return f"{hour}:{local:%M:%S} {meridiem}"


def day_label(index: int, moment: datetime, offset_seconds: int = 0) -> str:
    """Forecast card heading: Today, Tomorrow, then ``Wed, Oct 21``."""
    if index == 0:
        return "Today"
    if index == 1:
        return "Tomorrow"
    local = to_local(moment, offset_seconds)
    weekday = ("Mon", "Tue", "Wed", "Thu", "Fri", "Sat", "Sun")[local.weekday()]
    month = ("Jan", "Feb", "Mar", "Apr", "May", "Jun",
             "Jul", "Aug", "Sep", "Oct", "Nov", "Dec")[local.month - 1]
    return f"{weekday}, {month} {local.day}"
