"""Google Places nearby search, used as the secondary store source."""

from __future__ import annotations

import httpx

from silverpoint.config import DEFAULT_GOOGLE_PLACES_URL
from silverpoint.logger import get_logger
from silverpoint.models import StoreLocation

logger = get_logger(__name__)

SEARCH_RADIUS_METERS = 16093


class PlacesClient:
    """Finds grocery stores near a coordinate with the Places API."""

    def __init__(
        self,
        api_key: str,
        url: str = DEFAULT_GOOGLE_PLACES_URL,
        timeout: float = 5.0,
    ) -> None:
        self.api_key = api_key
        self.url = url
        self.timeout = timeout

    @property
    def configured(self) -> bool:
        return bool(self.api_key.strip())

    async def nearby_grocery_stores(self, lat: float, lng: float) -> list[StoreLocation]:
        """Return supermarkets within ten miles; empty on any failure."""
        if not self.configured:
            return []

        try:
            async with httpx.AsyncClient(timeout=self.timeout) as client:
                response = await client.get(
                    self.url,
                    params={
                        "location": f"{lat},{lng}",
                        "radius": SEARCH_RADIUS_METERS,
                        "type": "supermarket",
                        "keyword": "grocery",
                        "key": self.api_key,
                    },
                )
            if response.status_code != 200:
                logger.warning("Places search failed: %s", response.status_code)
                return []
            data = response.json()
        except (httpx.HTTPError, ValueError) as e:
            logger.warning("Places search error: %s", e)
            return []

        if not isinstance(data, dict) or data.get("status") != "OK":
            status = data.get("status") if isinstance(data, dict) else None
            logger.info("Places search returned status %s", status)
            return []

        results = data.get("results") or []
        if not isinstance(results, list):
            logger.warning("Places response has no results list: %r", results)
            return []

        stores = []
        for place in results:
            store = _parse_place(place)
            if store is not None:
                stores.append(store)
        return stores


def _parse_place(place: dict) -> StoreLocation | None:
    try:
        location = place["geometry"]["location"]
        name = place.get("name") or "Unknown Store"
        return StoreLocation(
            id=place.get("place_id") or name,
            name=name,
            lat=location["lat"],
            lng=location["lng"],
        )
    except (KeyError, TypeError, AttributeError, ValueError):
        logger.debug("Skipping malformed place entry: %r", place)
        return None
