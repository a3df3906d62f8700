from __future__ import annotations

from datetime import datetime, tzinfo
from typing import Literal

from pydantic import BaseModel, ConfigDict


WIND_UNIT_FACTORS = {
    "m/s": 1.0,
    "km/h": 3.6,
    "mph": 2.237,
}


class DashboardContext(BaseModel):
    """Per-request display preferences; replaces the dashboard's global settings state."""

    model_config = ConfigDict(frozen=True, extra="ignore")

    units: Literal["metric", "imperial", "standard"] = "metric"
    wind_unit: Literal["m/s", "km/h", "mph"] = "m/s"
    time_format: Literal["12", "24"] = "24"

    @classmethod
    def for_request(
        cls, units: str, wind_unit: str | None = None, time_format: str = "24"
    ) -> "DashboardContext":
        default_wind_unit = "mph" if units == "imperial" else "m/s"
        return cls(units=units, wind_unit=wind_unit or default_wind_unit, time_format=time_format)


def wind_speed_to_ms(speed: float, units: str) -> float:
    # Imperial responses carry miles per hour; metric and standard carry m/s.
    if units == "imperial":
        return speed / WIND_UNIT_FACTORS["mph"]
    return speed


def convert_wind_speed(speed_ms: float, unit: str) -> float:
    factor = WIND_UNIT_FACTORS.get(unit)
    if factor is None:
        raise ValueError(f"Unsupported wind unit '{unit}'. Use one of: {sorted(WIND_UNIT_FACTORS)}.")
    return speed_ms * factor


def format_wind_speed(speed_ms: float | None, unit: str = "m/s") -> str | None:
    if speed_ms is None:
        return None
    return f"{convert_wind_speed(speed_ms, unit):.1f} {unit}"


def format_slot_time(timestamp_seconds: int, tz: tzinfo, time_format: str = "24") -> str:
    stamp = datetime.fromtimestamp(timestamp_seconds, tz=tz)
    if time_format == "12":
        return stamp.strftime("%I:%M %p")
    return stamp.strftime("%H:%M")
