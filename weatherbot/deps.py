# ABOUTME: Dependency container for the weather agent using Pydantic BaseModel.
# ABOUTME: Holds the httpx.AsyncClient and WeatherAPI settings read from the environment.

import os

import httpx
from pydantic import BaseModel, ConfigDict

from weatherbot.errors import ConfigurationError
from weatherbot.weather_service import WEATHER_API_URL, WeatherClient


class WeatherDeps(BaseModel):
    """Dependencies injected into agent tools via RunContext."""

    model_config = ConfigDict(arbitrary_types_allowed=True)

    http_client: httpx.AsyncClient
    api_key: str | None = None
    base_url: str = WEATHER_API_URL

    def weather_client(self) -> WeatherClient:
        """Build a WeatherClient, failing if no API key was configured."""
        if not self.api_key:
            raise ConfigurationError("WEATHER_API_KEY is not set")
        return WeatherClient(self.http_client, self.api_key, self.base_url)


def create_deps(http_client: httpx.AsyncClient | None = None) -> WeatherDeps:
    """Create WeatherDeps from WEATHER_API_KEY and WEATHER_API_URL.

    A missing key is not an error here; commands report it when they run.
    """
    return WeatherDeps(
        http_client=http_client or httpx.AsyncClient(),
        api_key=os.environ.get("WEATHER_API_KEY"),
        base_url=os.environ.get("WEATHER_API_URL", WEATHER_API_URL),
    )
