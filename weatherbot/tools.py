# ABOUTME: Agent tool definitions wrapping the weather chat commands.
# ABOUTME: Registers today's weather and weekly weather tools on the agent via decorators.

from pydantic import PositiveInt
from pydantic_ai import ModelRetry, RunContext

from weatherbot.agent import agent
from weatherbot.commands import WEEKLY_FORECAST_DAYS, describe_error, todays_weather, weekly_weather
from weatherbot.deps import WeatherDeps
from weatherbot.errors import UpstreamError, WeatherError, WeatherTransportError


@agent.tool
async def get_todays_weather(ctx: RunContext[WeatherDeps], city: str) -> str:
    """Get the current weather for a city.

    Args:
        ctx: Agent run context with HTTP client and API settings.
        city: Name of the city (e.g. "Toronto", "New York").
    """
    try:
        return await todays_weather(ctx.deps, city)
    except (WeatherTransportError, UpstreamError) as e:
        raise ModelRetry(f"Weather API failed for '{city}': {e}") from e
    except WeatherError as e:
        return describe_error(e)


@agent.tool
async def get_weekly_weather(
    ctx: RunContext[WeatherDeps], city: str, days: PositiveInt = WEEKLY_FORECAST_DAYS
) -> str:
    """Get the current weather and a daily forecast for a city.

    Args:
        ctx: Agent run context with HTTP client and API settings.
        city: Name of the city (e.g. "Toronto", "New York").
        days: Number of forecast days (default 7).
    """
    try:
        return await weekly_weather(ctx.deps, city, days)
    except (WeatherTransportError, UpstreamError) as e:
        raise ModelRetry(f"Forecast API failed for '{city}': {e}") from e
    except WeatherError as e:
        return describe_error(e)
