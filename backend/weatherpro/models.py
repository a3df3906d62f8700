from __future__ import annotations

from dataclasses import dataclass, field
from datetime import date, tzinfo, timezone


@dataclass(frozen=True)
class WeatherSample:
    """One forecast slot as delivered by the provider (3-hour resolution)."""

    timestamp_seconds: int
    temperature: float | None = None
    feels_like: float | None = None
    humidity_percent: int | None = None
    wind_speed: float | None = None
    condition_main: str | None = None
    icon: str | None = None
    description: str | None = None
    precipitation_probability: float | None = None


@dataclass(frozen=True)
class DaySummary:
    calendar_date: date
    max_temp: float | None
    min_temp: float | None
    avg_temp: float | None
    avg_humidity: float | None
    avg_wind_speed: float | None
    dominant_condition: str | None
    representative_icon: str | None
    sample_count: int


@dataclass(frozen=True)
class HourlyView:
    timestamp_seconds: int
    temperature: float | None
    feels_like: float | None
    humidity_percent: int | None
    wind_speed: float | None
    precipitation_probability: float
    condition_main: str | None = None
    icon: str | None = None


@dataclass(frozen=True)
class ForecastSeries:
    city_name: str | None
    country: str | None
    samples: tuple[WeatherSample, ...]
    tz: tzinfo = timezone.utc


@dataclass(frozen=True)
class CurrentConditions:
    city_name: str | None
    country: str | None
    timestamp_seconds: int | None
    temperature: float | None
    feels_like: float | None
    temp_min: float | None
    temp_max: float | None
    humidity_percent: int | None
    pressure_hpa: float | None
    wind_speed: float | None
    visibility_m: float | None
    condition_main: str | None
    description: str | None
    icon: str | None
    sunrise: int | None = None
    sunset: int | None = None
    latitude: float | None = None
    longitude: float | None = None
    timezone_offset_seconds: int = 0
    clouds_percent: int | None = None
    wind_deg: float = 0.0
    pressure_trend: str | None = None
    daylight_seconds: int | None = None


@dataclass(frozen=True)
class AirQualityReport:
    aqi: int | None
    label: str
    color: str | None
    description: str | None
    components: dict[str, float | None] = field(default_factory=dict)


@dataclass(frozen=True)
class Advice:
    icon: str
    title: str
    text: str
    priority: str
