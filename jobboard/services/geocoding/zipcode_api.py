"""Zip code service client."""

import logging
from typing import Any
from urllib.parse import quote

import httpx

from jobboard.core.exceptions import DependencyError, ValidationError
from jobboard.services.geocoding.base import Geocoder, ZipCode

logger = logging.getLogger(__name__)


def _to_float(value: Any) -> float:
    try:
        return float(value)
    except (TypeError, ValueError):
        return 0.0


class ZipCodeClient(Geocoder):
    """Client for a ZipCodeAPI-style REST service.

    The API key is part of the URL path: ``{base_url}/{api_key}/{endpoint}``.
    """

    SERVICE = "ZipCodeAPI"

    def __init__(
        self,
        api_key: str,
        base_url: str = "https://www.zipcodeapi.com/rest",
        timeout: float = 10.0,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.api_key = api_key
        self.client = httpx.AsyncClient(
            base_url=f"{base_url.rstrip('/')}/{api_key}",
            timeout=httpx.Timeout(timeout),
            headers={"Accept": "application/json"},
            transport=transport,
        )

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb):
        await self.close()

    async def close(self) -> None:
        """Close the HTTP client."""
        await self.client.aclose()

    async def _get(self, endpoint: str) -> Any:
        """GET an endpoint and decode the JSON body."""
        try:
            response = await self.client.get(endpoint)
        except httpx.TimeoutException as e:
            logger.error(f"Zip code request timed out: {endpoint}")
            raise DependencyError(self.SERVICE, "Request timed out") from e
        except httpx.RequestError as e:
            # the request URL carries the API key, so only the error type is reported
            error_type = type(e).__name__
            logger.error(f"Zip code network error: {error_type}")
            raise DependencyError(self.SERVICE, f"Network error: {error_type}") from e

        if response.status_code >= 400:
            logger.error(
                f"Zip code service error on {endpoint}: "
                f"{response.status_code} {response.text}"
            )
            raise DependencyError(
                self.SERVICE, "Lookup failed", status_code=response.status_code
            )

        try:
            return response.json()
        except ValueError as e:
            raise DependencyError(self.SERVICE, "Invalid response body") from e

    async def get_zip_code(self, zipcode: str) -> ZipCode:
        if not zipcode:
            raise ValidationError("Zip code is required")

        data = await self._get(f"/info.json/{quote(zipcode, safe='')}/degrees")
        if not isinstance(data, dict):
            raise DependencyError(self.SERVICE, "Invalid response body")
        return ZipCode(
            zip_code=str(data.get("zip_code", zipcode)),
            latitude=_to_float(data.get("lat")),
            longitude=_to_float(data.get("lng")),
            city=data.get("city") or "",
            state=data.get("state") or "",
        )

    async def get_zip_codes_in_radius(self, zipcode: str, radius: float) -> list[ZipCode]:
        if not zipcode:
            raise ValidationError("Zip code is required")

        data = await self._get(
            f"/radius.json/{quote(zipcode, safe='')}/{radius:g}/mile"
        )
        items = data.get("zip_codes") if isinstance(data, dict) else None
        if not isinstance(items, list):
            raise DependencyError(self.SERVICE, "Invalid response body")
        return [
            ZipCode(
                zip_code=str(item.get("zip_code", "")),
                city=item.get("city") or "",
                state=item.get("state") or "",
                distance=_to_float(item.get("distance")),
            )
            for item in items
            if isinstance(item, dict) and item.get("zip_code")
        ]

    async def autocomplete(self, chars: str) -> list[dict[str, Any]]:
        if not chars:
            raise ValidationError("Autocomplete text is required")

        data = await self._get(f"/autocomplete.json/{quote(chars, safe='')}")
        if isinstance(data, dict):
            return data.get("results", [])
        return data
