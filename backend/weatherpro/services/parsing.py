from __future__ import annotations

import logging
from datetime import timedelta, timezone
from typing import Any

from weatherpro.models import AirQualityReport, CurrentConditions, ForecastSeries, WeatherSample


logger = logging.getLogger(__name__)

AQI_LEVELS = {
    1: {"label": "Good", "color": "#10b981", "description": "Air quality is satisfactory"},
    2: {"label": "Fair", "color": "#f59e0b", "description": "Air quality is acceptable"},
    3: {"label": "Moderate", "color": "#ef4444", "description": "Sensitive groups may experience issues"},
    4: {"label": "Poor", "color": "#8b5cf6", "description": "Everyone may experience health effects"},
    5: {
        "label": "Very Poor",
        "color": "#7c3aed",
        "description": "Health alert: everyone may experience serious effects",
    },
}

POLLUTANT_KEYS = ("co", "no2", "o3", "pm2_5", "pm10", "so2")


def parse_forecast(payload: Any) -> ForecastSeries:
    payload = _as_dict(payload)
    city = _as_dict(payload.get("city"))
    entries = payload.get("list", [])
    if not isinstance(entries, list):
        entries = []

    samples: list[WeatherSample] = []
    for entry in entries:
        if not isinstance(entry, dict):
            continue
        sample = parse_sample(entry)
        if sample is None:
            logger.debug("Skipping forecast entry without a usable timestamp: %r", entry.get("dt"))
            continue
        samples.append(sample)

    return ForecastSeries(
        city_name=city.get("name"),
        country=city.get("country"),
        samples=tuple(samples),
        tz=utc_offset_timezone(city.get("timezone")),
    )


def parse_sample(entry: dict) -> WeatherSample | None:
    timestamp = _as_int(entry.get("dt"))
    if timestamp is None:
        return None

    main = _as_dict(entry.get("main"))
    wind = _as_dict(entry.get("wind"))
    weather = _first_weather(entry)
    return WeatherSample(
        timestamp_seconds=timestamp,
        temperature=_as_float(main.get("temp")),
        feels_like=_as_float(main.get("feels_like")),
        humidity_percent=_as_int(main.get("humidity")),
        wind_speed=_as_float(wind.get("speed")),
        condition_main=_as_str(weather.get("main")),
        icon=_as_str(weather.get("icon")),
        description=_as_str(weather.get("description")),
        precipitation_probability=_as_float(entry.get("pop")),
    )


def parse_current(payload: Any) -> CurrentConditions:
    payload = _as_dict(payload)
    main = _as_dict(payload.get("main"))
    wind = _as_dict(payload.get("wind"))
    sys_block = _as_dict(payload.get("sys"))
    coord = _as_dict(payload.get("coord"))
    weather = _first_weather(payload)
    pressure = _as_float(main.get("pressure"))
    sunrise = _as_int(sys_block.get("sunrise"))
    sunset = _as_int(sys_block.get("sunset"))
    return CurrentConditions(
        city_name=_as_str(payload.get("name")),
        country=_as_str(sys_block.get("country")),
        timestamp_seconds=_as_int(payload.get("dt")),
        temperature=_as_float(main.get("temp")),
        feels_like=_as_float(main.get("feels_like")),
        temp_min=_as_float(main.get("temp_min")),
        temp_max=_as_float(main.get("temp_max")),
        humidity_percent=_as_int(main.get("humidity")),
        pressure_hpa=pressure,
        wind_speed=_as_float(wind.get("speed")),
        visibility_m=_as_float(payload.get("visibility")),
        condition_main=_as_str(weather.get("main")),
        description=_as_str(weather.get("description")),
        icon=_as_str(weather.get("icon")),
        sunrise=sunrise,
        sunset=sunset,
        latitude=_as_float(coord.get("lat")),
        longitude=_as_float(coord.get("lon")),
        timezone_offset_seconds=_as_int(payload.get("timezone")) or 0,
        clouds_percent=_as_int(_as_dict(payload.get("clouds")).get("all")),
        wind_deg=_as_float(wind.get("deg")) or 0.0,
        pressure_trend=pressure_trend(pressure),
        daylight_seconds=sunset - sunrise if sunrise is not None and sunset is not None else None,
    )


def pressure_trend(pressure_hpa: float | None) -> str | None:
    if pressure_hpa is None:
        return None
    if pressure_hpa > 1013:
        return "High"
    if pressure_hpa < 1000:
        return "Low"
    return "Normal"


def parse_air_quality(payload: Any) -> AirQualityReport | None:
    payload = _as_dict(payload)
    entries = payload.get("list", [])
    if not isinstance(entries, list) or not entries or not isinstance(entries[0], dict):
        return None

    first = entries[0]
    aqi = _as_int(_as_dict(first.get("main")).get("aqi"))
    components = _as_dict(first.get("components"))
    level = AQI_LEVELS.get(aqi) if aqi is not None else None
    return AirQualityReport(
        aqi=aqi,
        label=level["label"] if level else "Unknown",
        color=level["color"] if level else None,
        description=level["description"] if level else None,
        components={key: _as_float(components.get(key)) for key in POLLUTANT_KEYS},
    )


def parse_city_suggestions(payload: Any) -> list[dict]:
    if not isinstance(payload, list):
        return []

    suggestions: list[dict] = []
    for item in payload:
        if not isinstance(item, dict):
            continue
        latitude = _as_float(item.get("lat"))
        longitude = _as_float(item.get("lon"))
        if latitude is None or longitude is None:
            continue
        suggestions.append(
            {
                "name": item.get("name"),
                "country": item.get("country"),
                "state": item.get("state"),
                "latitude": latitude,
                "longitude": longitude,
            }
        )
    return suggestions


def utc_offset_timezone(offset_seconds: object) -> timezone:
    offset = _as_int(offset_seconds)
    if not offset:
        return timezone.utc
    try:
        return timezone(timedelta(seconds=offset))
    except (ValueError, OverflowError):
        logger.warning("Ignoring out-of-range UTC offset %s; grouping in UTC", offset)
        return timezone.utc


def _first_weather(payload: dict) -> dict:
    weather = payload.get("weather")
    if isinstance(weather, list) and weather and isinstance(weather[0], dict):
        return weather[0]
    return {}


def _as_dict(value: object) -> dict:
    return value if isinstance(value, dict) else {}


def _as_str(value: object) -> str | None:
    if isinstance(value, str) and value:
        return value
    return None


def _as_float(value: object) -> float | None:
    if isinstance(value, bool):
        return None
    try:
        return float(value)
    except (TypeError, ValueError):
        return None


def _as_int(value: object) -> int | None:
    if isinstance(value, bool):
        return None
    try:
        return int(value)
    except (TypeError, ValueError, OverflowError):
        return None
