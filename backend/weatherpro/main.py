from __future__ import annotations

import asyncio
import logging
from dataclasses import asdict
from datetime import datetime, timezone

import httpx
from fastapi import FastAPI, HTTPException, Query
from fastapi.middleware.cors import CORSMiddleware

from weatherpro.config import configure_logging, get_settings
from weatherpro.models import CurrentConditions, DaySummary, ForecastSeries, HourlyView
from weatherpro.schemas import CompareRequest
from weatherpro.services.advisor import generate_weather_advice
from weatherpro.services.aggregator import group_by_day, limit_hourly
from weatherpro.services.parsing import (
    parse_air_quality,
    parse_city_suggestions,
    parse_current,
    parse_forecast,
)
from weatherpro.services.units import DashboardContext, format_slot_time, format_wind_speed, wind_speed_to_ms
from weatherpro.services.weather_client import (
    CityNotFoundError,
    InvalidApiKeyError,
    WeatherClient,
    WeatherServiceError,
)


settings = get_settings()
configure_logging(settings.log_level)
logger = logging.getLogger(__name__)

weather_client = WeatherClient(settings=settings)

UNITS_PATTERN = r"^(metric|imperial|standard)$"
WIND_UNIT_PATTERN = r"^(m/s|km/h|mph)$"

app = FastAPI(title=settings.app_name, version=settings.app_version)

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.frontend_origins),
    allow_credentials=False,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.on_event("shutdown")
async def shutdown_event() -> None:
    await weather_client.close()


@app.get("/api/health")
async def health() -> dict:
    return {
        "status": "ok",
        "service": settings.app_name,
        "timestamp_utc": datetime.now(tz=timezone.utc).isoformat(),
    }


@app.get("/api/weather/current")
async def current_weather(
    city: str | None = Query(default=None, max_length=80),
    latitude: float | None = Query(default=None, ge=-90, le=90),
    longitude: float | None = Query(default=None, ge=-180, le=180),
    units: str | None = Query(default=None, pattern=UNITS_PATTERN),
    wind_unit: str | None = Query(default=None, pattern=WIND_UNIT_PATTERN),
) -> dict:
    context = DashboardContext.for_request(units or settings.units, wind_unit)
    _require_location(city, latitude, longitude)
    try:
        if latitude is not None and longitude is not None:
            payload = await weather_client.fetch_current_weather_by_coords(
                latitude=latitude, longitude=longitude, units=context.units
            )
        else:
            payload = await weather_client.fetch_current_weather(city or "", units=context.units)
    except (WeatherServiceError, httpx.HTTPError) as exc:
        raise _provider_http_error(exc, "Weather") from exc

    current = parse_current(payload)
    return {
        "units": context.units,
        "current": _serialize_current(current, context),
        "advice": [asdict(item) for item in generate_weather_advice(current)],
    }


@app.get("/api/forecast/daily")
async def daily_forecast(
    city: str | None = Query(default=None, max_length=80),
    latitude: float | None = Query(default=None, ge=-90, le=90),
    longitude: float | None = Query(default=None, ge=-180, le=180),
    units: str | None = Query(default=None, pattern=UNITS_PATTERN),
) -> dict:
    context = DashboardContext.for_request(units or settings.units)
    series = await _load_forecast(city, latitude, longitude, context)
    days = group_by_day(series.samples, tz=series.tz, max_days=settings.forecast_max_days)
    return {
        "units": context.units,
        "location": _serialize_series_location(series),
        "days": [_serialize_day(day) for day in days],
    }


@app.get("/api/forecast/hourly")
async def hourly_forecast(
    city: str | None = Query(default=None, max_length=80),
    latitude: float | None = Query(default=None, ge=-90, le=90),
    longitude: float | None = Query(default=None, ge=-180, le=180),
    count: int | None = Query(default=None, ge=1, le=40),
    units: str | None = Query(default=None, pattern=UNITS_PATTERN),
    wind_unit: str | None = Query(default=None, pattern=WIND_UNIT_PATTERN),
    time_format: str = Query(default="24", pattern=r"^(12|24)$"),
) -> dict:
    context = DashboardContext.for_request(units or settings.units, wind_unit, time_format)
    series = await _load_forecast(city, latitude, longitude, context)
    hours = limit_hourly(series.samples, count=count or settings.hourly_slot_count)
    return {
        "units": context.units,
        "location": _serialize_series_location(series),
        "hours": [_serialize_hour(hour, series, context) for hour in hours],
    }


@app.get("/api/air-quality")
async def air_quality(
    latitude: float = Query(ge=-90, le=90),
    longitude: float = Query(ge=-180, le=180),
) -> dict:
    try:
        payload = await weather_client.fetch_air_quality(latitude=latitude, longitude=longitude)
    except (WeatherServiceError, httpx.HTTPError) as exc:
        raise _provider_http_error(exc, "Air quality") from exc

    report = parse_air_quality(payload)
    if report is None:
        raise HTTPException(status_code=502, detail="Air quality provider returned no readings.")
    return {"air_quality": asdict(report)}


@app.get("/api/geocode")
async def geocode(query: str = Query(min_length=2, max_length=80)) -> dict:
    try:
        payload = await weather_client.search_cities(query=query)
    except (WeatherServiceError, httpx.HTTPError) as exc:
        raise _provider_http_error(exc, "Geocoding") from exc
    return {"results": parse_city_suggestions(payload)}


@app.post("/api/compare")
async def compare_cities(
    payload: CompareRequest,
    units: str | None = Query(default=None, pattern=UNITS_PATTERN),
    wind_unit: str | None = Query(default=None, pattern=WIND_UNIT_PATTERN),
) -> dict:
    context = DashboardContext.for_request(units or settings.units, wind_unit)
    try:
        first, second = await asyncio.gather(
            weather_client.fetch_current_weather(payload.city1, units=context.units),
            weather_client.fetch_current_weather(payload.city2, units=context.units),
        )
    except (WeatherServiceError, httpx.HTTPError) as exc:
        raise _provider_http_error(exc, "Weather") from exc

    return {
        "units": context.units,
        "cities": [
            _serialize_current(parse_current(first), context),
            _serialize_current(parse_current(second), context),
        ],
    }


async def _load_forecast(
    city: str | None, latitude: float | None, longitude: float | None, context: DashboardContext
) -> ForecastSeries:
    _require_location(city, latitude, longitude)
    try:
        if latitude is not None and longitude is not None:
            payload = await weather_client.fetch_forecast_by_coords(
                latitude=latitude, longitude=longitude, units=context.units
            )
        else:
            payload = await weather_client.fetch_forecast(city or "", units=context.units)
    except (WeatherServiceError, httpx.HTTPError) as exc:
        raise _provider_http_error(exc, "Forecast") from exc
    return parse_forecast(payload)


def _require_location(city: str | None, latitude: float | None, longitude: float | None) -> None:
    if latitude is not None and longitude is not None:
        return
    if city is None or not city.strip():
        raise HTTPException(status_code=400, detail="Provide either city or latitude and longitude.")


def _provider_http_error(exc: Exception, provider: str) -> HTTPException:
    if isinstance(exc, CityNotFoundError):
        return HTTPException(status_code=404, detail=str(exc))
    if isinstance(exc, InvalidApiKeyError):
        logger.error("Weather provider rejected the configured API key")
        return HTTPException(status_code=502, detail=str(exc))
    logger.warning("%s provider call failed: %s", provider, exc)
    return HTTPException(status_code=502, detail=f"{provider} provider error: {exc}")


def _serialize_current(current: CurrentConditions, context: DashboardContext) -> dict:
    return {
        **asdict(current),
        "wind_display": _wind_display(current.wind_speed, context),
    }


def _serialize_series_location(series: ForecastSeries) -> dict:
    offset = series.tz.utcoffset(None)
    return {
        "name": series.city_name,
        "country": series.country,
        "timezone_offset_seconds": int(offset.total_seconds()) if offset is not None else 0,
    }


def _serialize_day(day: DaySummary) -> dict:
    return {**asdict(day), "calendar_date": day.calendar_date.isoformat()}


def _serialize_hour(hour: HourlyView, series: ForecastSeries, context: DashboardContext) -> dict:
    return {
        **asdict(hour),
        "time_label": format_slot_time(hour.timestamp_seconds, series.tz, context.time_format),
        "wind_display": _wind_display(hour.wind_speed, context),
    }


def _wind_display(speed: float | None, context: DashboardContext) -> str | None:
    if speed is None:
        return None
    return format_wind_speed(wind_speed_to_ms(speed, context.units), context.wind_unit)
