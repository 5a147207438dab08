# ABOUTME: Typed error taxonomy for the weather fetch-and-render pipeline.
# ABOUTME: Each failure kind is a distinct exception so callers can tell them apart.


class WeatherError(Exception):
    """Base class for every failure raised by the weather pipeline."""


class ConfigurationError(WeatherError):
    """Required configuration (the WeatherAPI key) is missing."""


class WeatherTransportError(WeatherError):
    """The weather API could not be reached (DNS, connection, timeout)."""


class UpstreamError(WeatherError):
    """The weather API answered with a non-success status."""

    def __init__(self, status_code: int | None = None):
        self.status_code = status_code
        super().__init__("Error retrieving information from the weather API")

    def __str__(self) -> str:
        message = super().__str__()
        if self.status_code is None:
            return message
        return f"{message} (status {self.status_code})"


class DecodeError(WeatherError):
    """The weather API response was not valid JSON or lacked required fields."""


class InvalidQueryError(WeatherError):
    """The requested city or day count cannot form a valid weather query."""
