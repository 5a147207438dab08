# ABOUTME: Service layer for WeatherAPI.com current and forecast lookups.
# ABOUTME: Builds request URLs, calls the transport, and decodes responses into WeatherInfo.

import logging
from enum import Enum
from urllib.parse import quote, urlencode

import httpx
from pydantic import BaseModel, ConfigDict, Field, PositiveInt, ValidationError, model_validator

from weatherbot.errors import DecodeError, InvalidQueryError
from weatherbot.models import WeatherInfo
from weatherbot.transport import send_request

logger = logging.getLogger(__name__)

WEATHER_API_URL = "http://api.weatherapi.com/v1"


class WeatherKind(str, Enum):
    """Which WeatherAPI endpoint a query targets."""

    CURRENT = "current"
    FORECAST = "forecast"


class WeatherQuery(BaseModel):
    """One weather lookup: the endpoint kind, the city, and the day count for forecasts."""

    model_config = ConfigDict(frozen=True)

    kind: WeatherKind
    city: str = Field(min_length=1)
    days: PositiveInt | None = None

    @model_validator(mode="after")
    def _check_days(self) -> "WeatherQuery":
        if self.kind is WeatherKind.FORECAST and self.days is None:
            raise ValueError("a forecast query needs a day count")
        if self.kind is WeatherKind.CURRENT and self.days is not None:
            raise ValueError("a current weather query takes no day count")
        return self

    @classmethod
    def current(cls, city: str) -> "WeatherQuery":
        return cls._build(kind=WeatherKind.CURRENT, city=city)

    @classmethod
    def forecast(cls, city: str, days: int) -> "WeatherQuery":
        return cls._build(kind=WeatherKind.FORECAST, city=city, days=days)

    @classmethod
    def _build(cls, **fields) -> "WeatherQuery":
        try:
            return cls(**fields)
        except ValidationError as e:
            raise InvalidQueryError(f"Invalid weather query: {e.errors()[0]['msg']}") from e


def parse_weather_info(body: str, kind: WeatherKind) -> WeatherInfo:
    """Decode a WeatherAPI JSON body into WeatherInfo.

    The forecast block is kept only for forecast queries, where it is required.
    """
    try:
        info = WeatherInfo.model_validate_json(body)
    except ValidationError as e:
        logger.warning("Unable to parse weather API response: %s", e)
        raise DecodeError(f"Parsing weather JSON failed: {e.error_count()} error(s)") from e

    if kind is WeatherKind.CURRENT:
        return info.model_copy(update={"forecast": None})
    if info.forecast is None:
        logger.warning("Forecast response has no forecast block")
        raise DecodeError("Parsing weather JSON failed: forecast block missing")
    return info


class WeatherClient:
    """Client for the WeatherAPI current.json and forecast.json endpoints.

    Holds only immutable configuration, so one instance can serve concurrent calls.
    """

    def __init__(self, http_client: httpx.AsyncClient, api_key: str, base_url: str = WEATHER_API_URL):
        self._http_client = http_client
        self._api_key = api_key
        self._base_url = base_url.rstrip("/")

    def build_url(self, query: WeatherQuery) -> str:
        """Build the full request URL, percent-encoding every query value."""
        if query.kind is WeatherKind.CURRENT:
            params = {"key": self._api_key, "q": query.city, "aqi": "yes"}
        else:
            params = {"key": self._api_key, "q": query.city, "aqi": "no", "days": query.days, "alerts": "no"}
        return f"{self._base_url}/{query.kind.value}.json?{urlencode(params, quote_via=quote)}"

    async def fetch(self, query: WeatherQuery, timeout: float | None = None) -> WeatherInfo:
        """Fetch and decode weather for a query."""
        body = await send_request(self._http_client, self.build_url(query), timeout=timeout)
        info = parse_weather_info(body, query.kind)
        logger.debug("Parsed %s weather for %s", query.kind.value, info.location.formatted_location())
        return info

    async def get_current_weather(self, city: str, timeout: float | None = None) -> WeatherInfo:
        return await self.fetch(WeatherQuery.current(city), timeout=timeout)

    async def get_forecast(self, city: str, days: int, timeout: float | None = None) -> WeatherInfo:
        return await self.fetch(WeatherQuery.forecast(city, days), timeout=timeout)
