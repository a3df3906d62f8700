from datetime import timedelta, timezone

import pytest
from pydantic import ValidationError

from weatherpro.services.units import (
    DashboardContext,
    convert_wind_speed,
    format_slot_time,
    format_wind_speed,
    wind_speed_to_ms,
)


def test_convert_wind_speed_units() -> None:
    assert convert_wind_speed(10.0, "m/s") == 10.0
    assert convert_wind_speed(10.0, "km/h") == pytest.approx(36.0)
    assert convert_wind_speed(10.0, "mph") == pytest.approx(22.37)


def test_convert_wind_speed_rejects_unknown_unit() -> None:
    with pytest.raises(ValueError, match="Unsupported wind unit"):
        convert_wind_speed(1.0, "knots")


def test_format_wind_speed() -> None:
    assert format_wind_speed(4.16, "m/s") == "4.2 m/s"
    assert format_wind_speed(5.0, "km/h") == "18.0 km/h"
    assert format_wind_speed(None) is None


def test_format_slot_time_honours_time_format() -> None:
    # 2026-02-19 15:00 UTC
    stamp = 1771513200
    plus_two = timezone(timedelta(hours=2))

    assert format_slot_time(stamp, timezone.utc) == "15:00"
    assert format_slot_time(stamp, plus_two) == "17:00"
    assert format_slot_time(stamp, timezone.utc, "12") == "03:00 PM"


def test_dashboard_context_defaults_and_validation() -> None:
    context = DashboardContext()

    assert context.wind_unit == "m/s"
    assert context.time_format == "24"
    with pytest.raises(ValidationError):
        DashboardContext(wind_unit="knots")


def test_dashboard_context_for_request_picks_wind_unit_per_system() -> None:
    assert DashboardContext.for_request("imperial").wind_unit == "mph"
    assert DashboardContext.for_request("metric").wind_unit == "m/s"
    assert DashboardContext.for_request("imperial", "km/h", "12").time_format == "12"
    with pytest.raises(ValidationError):
        DashboardContext.for_request("kelvin")


def test_wind_speed_to_ms_normalises_imperial_readings() -> None:
    assert wind_speed_to_ms(2.237, "imperial") == pytest.approx(1.0)
    assert wind_speed_to_ms(4.0, "metric") == 4.0
    assert wind_speed_to_ms(4.0, "standard") == 4.0
