"""Search orchestration: live Kroger prices first, synthesized offers second."""

from __future__ import annotations

import asyncio
import math
from collections.abc import Sequence

from silverpoint.auth import TokenManager
from silverpoint.config import Settings
from silverpoint.fallback_stores import load_fallback_stores
from silverpoint.geo import distance_miles
from silverpoint.logger import get_logger
from silverpoint.models import SearchResult, StoreLocation
from silverpoint.places import PlacesClient
from silverpoint.pricing import draw_store_offer, seeded_random
from silverpoint.products import ProductPriceResolver
from silverpoint.store import LocationResolver

logger = get_logger(__name__)

DEFAULT_TERM = "item"
MAX_PRIMARY_LOCATIONS = 3
MAX_NEARBY_FALLBACK_RESULTS = 5
MAX_FALLBACK_RESULTS = 3
MAX_PSEUDO_DISTANCE_MILES = 10.0


def normalize_term(term: str | None) -> str:
    term = (term or "").strip()
    return term or DEFAULT_TERM


class SearchOrchestrator:
    """Answers "what does this cost nearby?" for a single request.

    The Kroger strategy runs only when coordinates are supplied and
    credentials are configured. If it produces nothing, the secondary
    strategy prices live Google Places stores (or the static store table)
    with synthesized offers. Results from the two strategies are never
    mixed.
    """

    def __init__(
        self,
        tokens: TokenManager,
        places: PlacesClient,
        fallback_stores: Sequence[StoreLocation],
    ) -> None:
        self.tokens = tokens
        self.locations = LocationResolver(tokens)
        self.products = ProductPriceResolver(tokens)
        self.places = places
        self.fallback_stores = tuple(fallback_stores)

    @classmethod
    def from_settings(cls, settings: Settings) -> "SearchOrchestrator":
        tokens = TokenManager(
            settings.kroger_client_id,
            settings.kroger_client_secret,
            base_url=settings.kroger_base_url,
            timeout=settings.http_timeout_seconds,
        )
        places = PlacesClient(
            settings.google_maps_api_key,
            url=settings.google_places_url,
            timeout=settings.http_timeout_seconds,
        )
        return cls(tokens, places, load_fallback_stores(settings.fallback_stores_file))

    async def search(
        self,
        term: str | None,
        lat: float | None = None,
        lng: float | None = None,
    ) -> list[SearchResult]:
        """Return offers for ``term`` sorted by ascending price."""
        term = normalize_term(term)
        origin = None
        if lat is not None and lng is not None:
            if math.isfinite(lat) and math.isfinite(lng):
                origin = (lat, lng)

        results: list[SearchResult] = []
        if origin is not None and self.tokens.configured:
            results = await self._search_kroger(term, origin)

        if not results:
            logger.info("Using synthesized offers for %r", term)
            results = await self._search_fallback(term, origin)

        return sorted(results, key=lambda r: r.price)

    async def _search_kroger(
        self, term: str, origin: tuple[float, float]
    ) -> list[SearchResult]:
        lat, lng = origin
        locations = await self.locations.find_nearby(lat, lng)
        ranked = sorted(
            ((distance_miles(lat, lng, loc.lat, loc.lng), loc) for loc in locations),
            key=lambda pair: pair[0],
        )[:MAX_PRIMARY_LOCATIONS]

        products = await asyncio.gather(
            *(self.products.price_at(term, loc.id) for _, loc in ranked)
        )

        results = []
        for (distance, location), product in zip(ranked, products):
            if product is None:
                continue
            results.append(
                SearchResult(
                    product_name=product.name,
                    store_name=location.name,
                    price=product.price,
                    distance_mi=round(distance, 1),
                    in_stock=product.in_stock,
                )
            )
        logger.info("Kroger priced %d of %d nearby stores", len(results), len(ranked))
        return results

    async def _search_fallback(
        self, term: str, origin: tuple[float, float] | None
    ) -> list[SearchResult]:
        stores: Sequence[StoreLocation] = ()
        if origin is not None and self.places.configured:
            stores = await self.places.nearby_grocery_stores(*origin)
        if not stores:
            stores = self.fallback_stores

        return synthesize_offers(term, stores, origin)


def synthesize_offers(
    term: str,
    stores: Sequence[StoreLocation],
    origin: tuple[float, float] | None,
) -> list[SearchResult]:
    """Price each store from one generator seeded by ``term``.

    Draws happen store by store in table order, so a term always maps to
    the same offers for the same store list.
    """
    rng = seeded_random(term)
    offers = []
    for store in stores:
        in_stock, price = draw_store_offer(rng)
        if origin is not None:
            distance = round(distance_miles(origin[0], origin[1], store.lat, store.lng), 1)
        else:
            # truncated so the rounded value stays below the cap
            distance = math.floor(rng.random() * MAX_PSEUDO_DISTANCE_MILES * 10) / 10
        offers.append(
            SearchResult(
                product_name=term,
                store_name=store.name,
                price=price,
                distance_mi=distance,
                in_stock=in_stock,
            )
        )

    if origin is not None:
        offers = sorted(offers, key=lambda r: r.distance_mi)[:MAX_NEARBY_FALLBACK_RESULTS]
    else:
        offers = offers[:MAX_FALLBACK_RESULTS]
    return sorted(offers, key=lambda r: r.price)
