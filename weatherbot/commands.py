# ABOUTME: Chat commands for today's weather and the weekly forecast.
# ABOUTME: Sources config from WeatherDeps, renders WeatherInfo, and maps errors to user messages.

import logging

from weatherbot.deps import WeatherDeps
from weatherbot.errors import (
    ConfigurationError,
    DecodeError,
    InvalidQueryError,
    UpstreamError,
    WeatherError,
    WeatherTransportError,
)

logger = logging.getLogger(__name__)

WEEKLY_FORECAST_DAYS = 7


async def todays_weather(deps: WeatherDeps, city: str) -> str:
    """Return the rendered current weather for a city."""
    info = await deps.weather_client().get_current_weather(city)
    return info.display_weather_info()


async def weekly_weather(deps: WeatherDeps, city: str, days: int = WEEKLY_FORECAST_DAYS) -> str:
    """Return the rendered current weather plus a multi-day forecast for a city."""
    info = await deps.weather_client().get_forecast(city, days)
    return info.display_weather_info()


def describe_error(error: WeatherError) -> str:
    """Turn a pipeline error into a message fit for the chat user."""
    if isinstance(error, ConfigurationError):
        logger.error("Failed to get the WEATHER_API_KEY. Did you set it properly?")
        return "The weather service is not configured. Please ask the bot owner to set WEATHER_API_KEY."
    if isinstance(error, InvalidQueryError):
        return "I need a city name and a day count of at least 1 to look up the weather."
    if isinstance(error, WeatherTransportError):
        return "I couldn't reach the weather service right now. Please try again later."
    if isinstance(error, UpstreamError):
        return "The weather service couldn't answer that request. Check the city name and try again."
    if isinstance(error, DecodeError):
        return "The weather service sent back data I couldn't read."
    return "Something went wrong while fetching the weather."
