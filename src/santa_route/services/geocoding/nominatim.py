"""HTTP client for resolving addresses through Nominatim."""

from __future__ import annotations

import logging
import time

import httpx

from ...config import settings

logger = logging.getLogger(__name__)


class GeocodingError(RuntimeError):
    """The geocoder could not be reached or returned something unusable."""


class NominatimClient:
    def __init__(
        self,
        base_url: str | None = None,
        user_agent: str | None = None,
        timeout: float | None = None,
        max_retries: int | None = None,
        backoff_seconds: float | None = None,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self.base_url = (base_url or settings.geocoder_base_url).rstrip("/")
        if not self.base_url:
            raise ValueError("Geocoder base URL is not configured.")
        self.user_agent = user_agent or settings.geocoder_user_agent
        self.timeout = timeout if timeout is not None else settings.geocoder_timeout_seconds
        self.max_retries = max_retries if max_retries is not None else settings.geocoder_max_retries
        self.backoff_seconds = (
            backoff_seconds if backoff_seconds is not None else settings.geocoder_backoff_seconds
        )
        self._transport = transport

    def _get_client(self) -> httpx.Client:
        return httpx.Client(
            timeout=httpx.Timeout(self.timeout, connect=min(self.timeout, 10.0)),
            headers={"User-Agent": self.user_agent},
            transport=self._transport,
        )

    def geocode(self, address: str) -> tuple[float, float] | None:
        """Return (lat, lon) for the best match, or None when nothing matches."""
        query = address.strip()
        if not query:
            raise ValueError("Address must not be empty.")

        params = {"format": "json", "q": query, "limit": 1}
        url = f"{self.base_url}/search"

        client = self._get_client()
        try:
            attempt = 0
            while True:
                try:
                    response = client.get(url, params=params)
                    response.raise_for_status()
                    try:
                        payload = response.json()
                    except ValueError as e:
                        raise GeocodingError(f"Geocoder returned a non-JSON response for '{query}'.") from e
                    return _parse_first_match(payload)
                except httpx.HTTPStatusError as e:
                    if e.response.status_code < 500:
                        raise GeocodingError(
                            f"Geocoder rejected the request ({e.response.status_code}) for '{query}'."
                        ) from e
                    attempt += 1
                    if attempt > self.max_retries:
                        raise GeocodingError(
                            f"Geocoder failed with status {e.response.status_code} after {attempt} attempts."
                        ) from e
                    logger.warning(f"Geocoder returned {e.response.status_code}, retrying (attempt {attempt}/{self.max_retries})")
                    time.sleep(self.backoff_seconds * attempt)
                except httpx.TransportError as e:
                    attempt += 1
                    if attempt > self.max_retries:
                        raise GeocodingError(f"Failed to reach geocoder at {self.base_url}: {e}") from e
                    logger.warning(f"Geocoder network error, retrying (attempt {attempt}/{self.max_retries}): {e}")
                    time.sleep(self.backoff_seconds * attempt)
        finally:
            client.close()


def _parse_first_match(payload: object) -> tuple[float, float] | None:
    if not isinstance(payload, list):
        raise GeocodingError("Geocoder response is not a list of matches.")
    if not payload:
        return None
    first = payload[0]
    try:
        return float(first["lat"]), float(first["lon"])
    except (KeyError, TypeError, ValueError) as e:
        raise GeocodingError(f"Geocoder match is missing usable coordinates: {first!r}") from e


def check_health(base_url: str | None = None) -> bool:
    """Check geocoder reachability with a lookup that is known to resolve."""
    base = base_url or settings.geocoder_base_url
    if not base:
        return False
    try:
        response = httpx.get(
            f"{base.rstrip('/')}/search",
            params={"format": "json", "q": "Rovaniemi", "limit": 1},
            headers={"User-Agent": settings.geocoder_user_agent},
            timeout=5.0,
        )
        response.raise_for_status()
        return isinstance(response.json(), list)
    except httpx.HTTPError:
        return False
    except ValueError:
        return False
