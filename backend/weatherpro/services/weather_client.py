from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import httpx

from weatherpro.config import Settings


logger = logging.getLogger(__name__)


class WeatherServiceError(Exception):
    """Base class for failures reported by the weather provider."""


class CityNotFoundError(WeatherServiceError):
    def __init__(self, city: str) -> None:
        super().__init__("City not found. Please check the spelling.")
        self.city = city


class InvalidApiKeyError(WeatherServiceError):
    def __init__(self) -> None:
        super().__init__("Invalid API key. Please check your configuration.")


class UpstreamError(WeatherServiceError):
    def __init__(self, status_code: int, resource: str, reason: str | None = None) -> None:
        detail = f"Failed to fetch {resource} data (HTTP {status_code})"
        super().__init__(f"{detail}: {reason}." if reason else f"{detail}.")
        self.status_code = status_code
        self.resource = resource


@dataclass
class WeatherClient:
    settings: Settings
    transport: httpx.AsyncBaseTransport | None = field(default=None, repr=False)
    _client: httpx.AsyncClient = field(init=False, repr=False)

    def __post_init__(self) -> None:
        self._client = httpx.AsyncClient(
            timeout=self.settings.request_timeout_seconds,
            transport=self.transport,
        )

    async def close(self) -> None:
        await self._client.aclose()

    async def fetch_current_weather(self, city: str, units: str | None = None) -> dict:
        return await self._get_object(
            url=f"{self.settings.openweather_base_url}/weather",
            params={"q": city.strip(), **self._unit_params(units)},
            resource="weather",
            city=city,
        )

    async def fetch_current_weather_by_coords(
        self, latitude: float, longitude: float, units: str | None = None
    ) -> dict:
        return await self._get_object(
            url=f"{self.settings.openweather_base_url}/weather",
            params={"lat": latitude, "lon": longitude, **self._unit_params(units)},
            resource="weather",
        )

    async def fetch_forecast(self, city: str, units: str | None = None) -> dict:
        return await self._get_object(
            url=f"{self.settings.openweather_base_url}/forecast",
            params={"q": city.strip(), **self._unit_params(units)},
            resource="forecast",
            city=city,
        )

    async def fetch_forecast_by_coords(self, latitude: float, longitude: float, units: str | None = None) -> dict:
        return await self._get_object(
            url=f"{self.settings.openweather_base_url}/forecast",
            params={"lat": latitude, "lon": longitude, **self._unit_params(units)},
            resource="forecast",
        )

    async def fetch_air_quality(self, latitude: float, longitude: float) -> dict:
        return await self._get_object(
            url=f"{self.settings.openweather_base_url}/air_pollution",
            params={"lat": latitude, "lon": longitude},
            resource="air quality",
        )

    async def search_cities(self, query: str, limit: int = 5) -> list[dict]:
        query = query.strip()
        if not query:
            return []

        payload = await self._get_json(
            url=f"{self.settings.openweather_geo_url}/direct",
            params={"q": query, "limit": limit},
            resource="city suggestion",
        )
        return payload if isinstance(payload, list) else []

    async def _get_object(self, *, resource: str, **kwargs: Any) -> dict:
        payload = await self._get_json(resource=resource, **kwargs)
        if not isinstance(payload, dict):
            logger.warning("Weather provider sent a %s body for %s request", type(payload).__name__, resource)
            raise UpstreamError(200, resource, "unexpected response shape")
        return payload

    async def _get_json(
        self,
        *,
        url: str,
        params: dict[str, Any],
        resource: str,
        city: str | None = None,
    ) -> Any:
        if not self.settings.openweather_api_key:
            raise InvalidApiKeyError()

        logger.info("Fetching %s data from %s", resource, url)
        response = await self._client.get(url, params={**params, "appid": self.settings.openweather_api_key})
        if response.is_success:
            try:
                return response.json()
            except ValueError as exc:
                logger.warning("Weather provider sent a non-JSON body for %s request", resource)
                raise UpstreamError(response.status_code, resource, "response is not valid JSON") from exc

        status_code = response.status_code
        logger.warning("Weather provider answered %s for %s request", status_code, resource)
        if status_code == 404 and city is not None:
            raise CityNotFoundError(city)
        if status_code == 401:
            raise InvalidApiKeyError()
        raise UpstreamError(status_code, resource)

    def _unit_params(self, units: str | None = None) -> dict[str, str]:
        return {"units": units or self.settings.units, "lang": self.settings.language}
