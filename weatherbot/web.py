# ABOUTME: ASGI web entry point for the weather chatbot UI.
# ABOUTME: Creates a Starlette app via agent.to_web() with WeatherAPI deps from the environment.

import logging

from weatherbot.agent import agent
from weatherbot.deps import create_deps

logger = logging.getLogger(__name__)

_deps = create_deps()
if not _deps.api_key:
    logger.warning("WEATHER_API_KEY is not set; weather commands will report a configuration error")

app = agent.to_web(deps=_deps)
