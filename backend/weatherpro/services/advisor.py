from __future__ import annotations

from weatherpro.models import Advice, CurrentConditions


PLEASANT_CONDITIONS = Advice(
    icon="😊",
    title="Pleasant Conditions",
    text="Weather conditions are comfortable. Have a great day!",
    priority="low",
)


def generate_weather_advice(current: CurrentConditions) -> list[Advice]:
    """
    Build the advice cards shown next to the current conditions.

    Each rule group (temperature, sky condition, humidity, wind, visibility) adds at most
    one card. Missing readings never trigger a card.
    """
    advice = [
        item
        for item in (
            _temperature_advice(current.temperature),
            _condition_advice(current.condition_main),
            _humidity_advice(current.humidity_percent),
            _wind_advice(current.wind_speed),
            _visibility_advice(current.visibility_m),
        )
        if item is not None
    ]
    return advice or [PLEASANT_CONDITIONS]


def _temperature_advice(temp: float | None) -> Advice | None:
    if temp is None:
        return None
    if temp > 35:
        return Advice(
            icon="🥵",
            title="Extreme Heat",
            text="Stay hydrated and avoid prolonged sun exposure. Drink plenty of water.",
            priority="high",
        )
    if temp > 30:
        return Advice(
            icon="☀️",
            title="Hot Weather",
            text="Apply sunscreen and stay in shaded areas. Light clothing recommended.",
            priority="medium",
        )
    if temp < 0:
        return Advice(
            icon="🥶",
            title="Freezing Cold",
            text="Dress in layers and protect exposed skin. Risk of frostbite.",
            priority="high",
        )
    if temp < 10:
        return Advice(
            icon="🧥",
            title="Cold Weather",
            text="Wear warm clothing and consider carrying a jacket.",
            priority="medium",
        )
    return None


def _condition_advice(condition: str | None) -> Advice | None:
    if not condition:
        return None
    weather = condition.lower()
    if "rain" in weather or "drizzle" in weather:
        return Advice(
            icon="☔",
            title="Rainy Weather",
            text="Don't forget your umbrella and wear waterproof clothing.",
            priority="high",
        )
    if "snow" in weather:
        return Advice(
            icon="❄️",
            title="Snowy Conditions",
            text="Drive carefully and allow extra time for travel. Watch for icy patches.",
            priority="high",
        )
    if "thunder" in weather:
        return Advice(
            icon="⛈️",
            title="Thunderstorm Alert",
            text="Stay indoors and avoid open areas. Unplug electronics.",
            priority="high",
        )
    if "clear" in weather:
        return Advice(
            icon="🌞",
            title="Perfect Weather",
            text="Great day for outdoor activities! Enjoy the sunshine.",
            priority="low",
        )
    return None


def _humidity_advice(humidity: int | None) -> Advice | None:
    if humidity is None:
        return None
    if humidity > 80:
        return Advice(
            icon="💧",
            title="High Humidity",
            text="Air conditioning recommended. Stay cool and comfortable.",
            priority="medium",
        )
    if humidity < 30:
        return Advice(
            icon="🏜️",
            title="Low Humidity",
            text="Use moisturizer and stay hydrated. Dry air conditions.",
            priority="medium",
        )
    return None


def _wind_advice(wind_speed: float | None) -> Advice | None:
    if wind_speed is None or wind_speed <= 15:
        return None
    return Advice(
        icon="🌬️",
        title="Strong Winds",
        text="Secure loose objects and be cautious when driving.",
        priority="medium",
    )


def _visibility_advice(visibility_m: float | None) -> Advice | None:
    if visibility_m is None or visibility_m >= 1000:
        return None
    return Advice(
        icon="🌫️",
        title="Poor Visibility",
        text="Drive slowly and use headlights. Foggy conditions.",
        priority="high",
    )
