"""Nearby Kroger store location resolution."""

from __future__ import annotations

import httpx
from pydantic import ValidationError

from silverpoint.auth import TokenManager
from silverpoint.logger import get_logger
from silverpoint.models import StoreLocation

logger = get_logger(__name__)


class LocationResolver:
    """Finds Kroger locations around a coordinate."""

    def __init__(self, tokens: TokenManager) -> None:
        self.tokens = tokens

    @property
    def locations_url(self) -> str:
        return f"{self.tokens.base_url.rstrip('/')}/locations"

    async def find_nearby(
        self,
        lat: float,
        lng: float,
        radius_miles: int = 10,
    ) -> list[StoreLocation]:
        """Return stores within ``radius_miles``; empty when unavailable."""
        token = await self.tokens.get_token()
        if token is None:
            return []

        try:
            async with httpx.AsyncClient(timeout=self.tokens.timeout) as client:
                response = await client.get(
                    self.locations_url,
                    headers={"Authorization": f"Bearer {token.value}"},
                    params={
                        "filter.latLong.near": f"{lat},{lng}",
                        "filter.radiusInMiles": radius_miles,
                    },
                )
            if response.status_code != 200:
                logger.warning(
                    "Locations fetch failed: %s %s",
                    response.status_code,
                    response.text,
                )
                return []
            data = response.json().get("data") or []
        except (httpx.HTTPError, ValueError, AttributeError) as e:
            logger.warning("Locations fetch error: %s", e)
            return []

        if not isinstance(data, list):
            logger.warning("Locations response has no data list: %r", data)
            return []

        locations = []
        for item in data:
            location = _parse_location(item)
            if location is not None:
                locations.append(location)
        return locations


def _parse_location(item: dict) -> StoreLocation | None:
    """Parse a raw Kroger location; None if a required field is missing."""
    try:
        geo = item["geolocation"]
        return StoreLocation(
            id=item["locationId"],
            name=item["name"],
            lat=geo["latitude"],
            lng=geo["longitude"],
        )
    except (KeyError, TypeError, ValidationError):
        logger.debug("Skipping malformed location entry: %r", item)
        return None
