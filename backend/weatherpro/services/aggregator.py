from __future__ import annotations

import logging
from collections import Counter
from collections.abc import Sequence
from datetime import date, datetime, timezone, tzinfo
from statistics import mean

from weatherpro.models import DaySummary, HourlyView, WeatherSample


logger = logging.getLogger(__name__)

MAX_FORECAST_DAYS = 7
HOURLY_SLOT_COUNT = 16


def group_by_day(
    samples: Sequence[WeatherSample],
    tz: tzinfo = timezone.utc,
    max_days: int = MAX_FORECAST_DAYS,
) -> list[DaySummary]:
    """
    Collapse a chronologically ordered list of forecast slots into per-day summaries.

    Days are keyed by the calendar date of each sample in ``tz`` and keep the order in
    which they first appear. Input order is trusted and never re-sorted. A sample that
    lacks a field only drops out of the statistic that needs it.
    """
    groups: dict[date, list[WeatherSample]] = {}
    for sample in samples:
        groups.setdefault(_calendar_date(sample.timestamp_seconds, tz), []).append(sample)

    summaries = [_summarize_day(day, day_samples) for day, day_samples in groups.items()]
    if len(summaries) > max_days:
        logger.debug("Dropping %d forecast days beyond the %d-day window", len(summaries) - max_days, max_days)
    return summaries[: max(0, max_days)]


def limit_hourly(samples: Sequence[WeatherSample], count: int = HOURLY_SLOT_COUNT) -> list[HourlyView]:
    return [_hourly_view(sample) for sample in samples[: max(0, count)]]


def dominant_condition(conditions: Sequence[str | None]) -> str | None:
    counts = Counter(condition for condition in conditions if condition is not None)
    if not counts:
        return None
    # max() keeps the first key reaching the top count; Counter preserves insertion order.
    return max(counts, key=counts.__getitem__)


def _summarize_day(day: date, day_samples: list[WeatherSample]) -> DaySummary:
    temps = _present([sample.temperature for sample in day_samples])
    return DaySummary(
        calendar_date=day,
        max_temp=max(temps) if temps else None,
        min_temp=min(temps) if temps else None,
        avg_temp=_safe_mean(temps),
        avg_humidity=_safe_mean(_present([sample.humidity_percent for sample in day_samples])),
        avg_wind_speed=_safe_mean(_present([sample.wind_speed for sample in day_samples])),
        dominant_condition=dominant_condition([sample.condition_main for sample in day_samples]),
        representative_icon=day_samples[0].icon,
        sample_count=len(day_samples),
    )


def _hourly_view(sample: WeatherSample) -> HourlyView:
    precipitation = sample.precipitation_probability
    return HourlyView(
        timestamp_seconds=sample.timestamp_seconds,
        temperature=sample.temperature,
        feels_like=sample.feels_like,
        humidity_percent=sample.humidity_percent,
        wind_speed=sample.wind_speed,
        precipitation_probability=0.0 if precipitation is None else float(precipitation),
        condition_main=sample.condition_main,
        icon=sample.icon,
    )


def _calendar_date(timestamp_seconds: int, tz: tzinfo) -> date:
    return datetime.fromtimestamp(timestamp_seconds, tz=tz).date()


def _present(values: list[float | int | None]) -> list[float]:
    return [float(value) for value in values if value is not None]


def _safe_mean(values: list[float]) -> float | None:
    if not values:
        return None
    return float(mean(values))
