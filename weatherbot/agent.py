# ABOUTME: Pydantic AI agent definition for the weather chatbot.
# ABOUTME: Configures the LLM and system instructions, and imports tool registrations.

import os

from dotenv import load_dotenv
from pydantic_ai import Agent
from pydantic_ai.models.openrouter import OpenRouterModel
from pydantic_ai.providers.openrouter import OpenRouterProvider

from weatherbot.deps import WeatherDeps

load_dotenv()

model = OpenRouterModel(
    os.environ.get("OPENROUTER_MODEL", "anthropic/claude-sonnet-4-5"),
    provider=OpenRouterProvider(api_key=os.environ.get("OPENROUTER_API_KEY", "")),
)

agent = Agent(
    model,
    deps_type=WeatherDeps,
    retries=2,
    system_prompt=(
        "You are a weather bot. You answer questions about the current weather and the "
        "forecast for a city.\n\n"
        "When answering questions:\n"
        "1. Use the today's weather tool for current conditions in a city.\n"
        "2. Use the weekly weather tool for forecasts; pass the number of days the user asks for, "
        "or leave the default of 7.\n"
        "3. The tools return a Markdown summary. Relay it to the user as-is, then add a short remark "
        "if it helps.\n"
        "4. If a tool reports a problem, tell the user plainly what went wrong.\n"
        "5. You ONLY answer questions about weather. "
        "If the user asks about unrelated topics, politely decline and suggest a weather question instead.\n"
    ),
)


# Import tools module to register @agent.tool decorators
import weatherbot.tools  # noqa: E402, F401
