from __future__ import annotations

import logging
import os
from dataclasses import dataclass


LOG_FORMAT = "%(asctime)s %(levelname)s [%(name)s] %(message)s"
LOG_LEVELS = {"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"}


@dataclass(frozen=True)
class Settings:
    app_name: str = "Weather Pro Forecast API"
    app_version: str = "1.0.0"
    openweather_api_key: str = ""
    openweather_base_url: str = "https://api.openweathermap.org/data/2.5"
    openweather_geo_url: str = "https://api.openweathermap.org/geo/1.0"
    units: str = "metric"
    language: str = "en"
    request_timeout_seconds: float = 10.0
    forecast_max_days: int = 7
    hourly_slot_count: int = 16
    log_level: str = "INFO"
    frontend_origins: tuple[str, ...] = ("http://localhost:5173", "http://127.0.0.1:5173")


def get_settings() -> Settings:
    origins_raw = os.getenv("FRONTEND_ORIGINS", "").strip()
    units_raw = os.getenv("WEATHER_UNITS", "").strip().lower()
    timeout_raw = os.getenv("REQUEST_TIMEOUT_SECONDS", "").strip()
    max_days_raw = os.getenv("FORECAST_MAX_DAYS", "").strip()
    hourly_raw = os.getenv("HOURLY_SLOT_COUNT", "").strip()
    log_level_raw = os.getenv("LOG_LEVEL", "").strip().upper()

    parsed_origins = tuple(item.strip() for item in origins_raw.split(",") if item.strip())

    try:
        timeout_seconds = float(timeout_raw) if timeout_raw else 10.0
    except ValueError:
        timeout_seconds = 10.0

    try:
        forecast_max_days = int(max_days_raw) if max_days_raw else 7
    except ValueError:
        forecast_max_days = 7

    try:
        hourly_slot_count = int(hourly_raw) if hourly_raw else 16
    except ValueError:
        hourly_slot_count = 16

    return Settings(
        openweather_api_key=os.getenv("OPENWEATHER_API_KEY", "").strip(),
        openweather_base_url=os.getenv("OPENWEATHER_BASE_URL", "").strip().rstrip("/") or Settings.openweather_base_url,
        openweather_geo_url=os.getenv("OPENWEATHER_GEO_URL", "").strip().rstrip("/") or Settings.openweather_geo_url,
        units=units_raw if units_raw in {"metric", "imperial", "standard"} else Settings.units,
        request_timeout_seconds=max(1.0, timeout_seconds),
        forecast_max_days=min(7, max(1, forecast_max_days)),
        hourly_slot_count=min(40, max(1, hourly_slot_count)),
        log_level=log_level_raw if log_level_raw in LOG_LEVELS else Settings.log_level,
        frontend_origins=parsed_origins or Settings.frontend_origins,
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
