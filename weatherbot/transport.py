# ABOUTME: Single-shot HTTP GET against the weather API.
# ABOUTME: Returns the raw body on 2xx and classifies every other outcome as a typed error.

import logging

import httpx

from weatherbot.errors import DecodeError, UpstreamError, WeatherTransportError

logger = logging.getLogger(__name__)


def redact_url(url: str) -> str:
    """Hide the API key query parameter so URLs can be logged safely."""
    return str(httpx.URL(url).copy_set_param("key", "REDACTED"))


async def send_request(client: httpx.AsyncClient, url: str, timeout: float | None = None) -> str:
    """Perform exactly one GET on url and return the response body text.

    Args:
        client: Shared async HTTP client.
        url: Fully-formed absolute URL, query string included.
        timeout: Optional deadline in seconds; the client default applies when omitted.

    Raises:
        WeatherTransportError: The request never got a response.
        UpstreamError: The API responded with a non-2xx status.
        DecodeError: The response body could not be decoded (e.g. corrupt gzip).
    """
    logger.debug("GET %s", redact_url(url))
    kwargs = {} if timeout is None else {"timeout": timeout}
    try:
        resp = await client.get(url, **kwargs)
    except httpx.TransportError as e:
        logger.warning("Weather API unreachable: %s", type(e).__name__)
        raise WeatherTransportError(f"Could not reach the weather API: {type(e).__name__}") from e
    except httpx.DecodingError as e:
        logger.warning("Weather API response body could not be decoded: %s", e)
        raise DecodeError(f"Could not decode the weather API response body: {e}") from e

    if not resp.is_success:
        logger.warning("Weather API returned status %s", resp.status_code)
        raise UpstreamError(resp.status_code)
    return resp.text
