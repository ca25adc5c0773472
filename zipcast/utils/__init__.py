"""
utils package – small, pure‑function display helpers.
"""

from .formatting import day_label, icon_url, round_half_up, time_of_day   # noqa: F401

__all__ = [
    "day_label",
    "icon_url",
    "round_half_up",
    "time_of_day",
]
