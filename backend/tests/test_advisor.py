from weatherpro.models import CurrentConditions
from weatherpro.services.advisor import generate_weather_advice


def _conditions(**overrides) -> CurrentConditions:  # noqa: ANN003
    values = {
        "city_name": "Chennai",
        "country": "IN",
        "timestamp_seconds": 1771492800,
        "temperature": 22.0,
        "feels_like": 22.0,
        "temp_min": 20.0,
        "temp_max": 24.0,
        "humidity_percent": 55,
        "pressure_hpa": 1012.0,
        "wind_speed": 3.0,
        "visibility_m": 10000.0,
        "condition_main": "Clouds",
        "description": "scattered clouds",
        "icon": "03d",
    }
    values.update(overrides)
    return CurrentConditions(**values)


def test_pleasant_conditions_when_nothing_triggers() -> None:
    advice = generate_weather_advice(_conditions())

    assert [item.title for item in advice] == ["Pleasant Conditions"]
    assert advice[0].priority == "low"


def test_hot_humid_rainy_day_collects_each_rule_group() -> None:
    advice = generate_weather_advice(
        _conditions(temperature=36.5, condition_main="Rain", humidity_percent=88, wind_speed=16.2)
    )

    assert [item.title for item in advice] == [
        "Extreme Heat",
        "Rainy Weather",
        "High Humidity",
        "Strong Winds",
    ]


def test_temperature_thresholds() -> None:
    assert generate_weather_advice(_conditions(temperature=31.0))[0].title == "Hot Weather"
    assert generate_weather_advice(_conditions(temperature=-2.0))[0].title == "Freezing Cold"
    assert generate_weather_advice(_conditions(temperature=5.0))[0].title == "Cold Weather"


def test_condition_matching_is_case_insensitive() -> None:
    assert generate_weather_advice(_conditions(condition_main="Drizzle"))[0].title == "Rainy Weather"
    assert generate_weather_advice(_conditions(condition_main="Snow"))[0].title == "Snowy Conditions"
    assert generate_weather_advice(_conditions(condition_main="Thunderstorm"))[0].title == "Thunderstorm Alert"
    assert generate_weather_advice(_conditions(condition_main="Clear"))[0].priority == "low"


def test_low_humidity_and_poor_visibility() -> None:
    advice = generate_weather_advice(_conditions(humidity_percent=20, visibility_m=400.0, condition_main="Mist"))

    assert [item.title for item in advice] == ["Low Humidity", "Poor Visibility"]


def test_missing_readings_do_not_trigger_advice() -> None:
    advice = generate_weather_advice(
        _conditions(temperature=None, humidity_percent=None, wind_speed=None, visibility_m=None, condition_main=None)
    )

    assert [item.title for item in advice] == ["Pleasant Conditions"]
