# ABOUTME: Frozen Pydantic models for WeatherAPI current and forecast responses.
# ABOUTME: Field names match the upstream JSON; WeatherInfo renders the chat summary.

from pydantic import BaseModel, ConfigDict


class _WeatherModel(BaseModel):
    """Immutable base; unknown upstream fields are ignored."""

    model_config = ConfigDict(frozen=True, extra="ignore")


class Location(_WeatherModel):
    """Resolved location. localtime changes every call so it is left out of equality."""

    name: str
    region: str
    country: str
    localtime: str

    def formatted_location(self) -> str:
        return f"{self.name}, {self.region}, {self.country}"

    def _identity(self) -> tuple[str, str, str]:
        return (self.name, self.region, self.country)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Location):
            return NotImplemented
        return self._identity() == other._identity()

    def __hash__(self) -> int:
        return hash(self._identity())


class Condition(_WeatherModel):
    text: str
    icon: str


class CurrentWeather(_WeatherModel):
    """Current conditions block of a WeatherAPI response."""

    temp_c: float
    feelslike_c: float
    wind_kph: float
    wind_dir: str
    precip_mm: float
    condition: Condition


class ForecastDayWeather(_WeatherModel):
    maxtemp_c: float
    mintemp_c: float
    totalprecip_mm: float


class ForecastDay(_WeatherModel):
    date: str
    day: ForecastDayWeather


class Forecast(_WeatherModel):
    """Forecast days in the order the API returned them."""

    forecastday: tuple[ForecastDay, ...]


class WeatherInfo(_WeatherModel):
    """Decoded WeatherAPI document; forecast is only set for forecast queries."""

    location: Location
    current: CurrentWeather
    forecast: Forecast | None = None

    def display_weather_info(self) -> str:
        """Render the Markdown summary sent back to the chat user."""
        lines = [
            f"# {self.location.formatted_location()}",
            "## Today:",
            f"Temp: {self.current.temp_c}, Feels Like: {self.current.feelslike_c}",
        ]
        if self.forecast is not None:
            lines.append(f"## Next {len(self.forecast.forecastday)} days:")
            for forecast_day in self.forecast.forecastday:
                lines.extend(
                    [
                        f"* {forecast_day.date}",
                        f" * Max Temp: {forecast_day.day.maxtemp_c}",
                        f" * Min Temp: {forecast_day.day.mintemp_c}",
                        f" * Projected Precipition: {forecast_day.day.totalprecip_mm}",
                    ]
                )
        return "".join(f"{line}\n" for line in lines)
