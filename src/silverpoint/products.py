"""Per-location product pricing against the Kroger catalog."""

from __future__ import annotations

import httpx

from silverpoint.auth import TokenManager
from silverpoint.logger import get_logger
from silverpoint.models import PricedProduct
from silverpoint.pricing import synthesize_price

logger = get_logger(__name__)

OUT_OF_STOCK_LEVELS = frozenset({"OUT_OF_STOCK", "TEMPORARILY_OUT_OF_STOCK"})


def select_price(price_data: dict | None) -> float:
    """Return the promo price only when it is a genuine discount."""
    price_data = price_data or {}
    regular = price_data.get("regular") or 0.0
    promo = price_data.get("promo")
    if promo is None:
        promo = regular
    if 0 < promo < regular:
        return float(promo)
    return float(regular)


class ProductPriceResolver:
    """Looks up the first product matching a term at a single location."""

    def __init__(self, tokens: TokenManager) -> None:
        self.tokens = tokens

    @property
    def products_url(self) -> str:
        return f"{self.tokens.base_url.rstrip('/')}/products"

    async def price_at(self, term: str, location_id: str) -> PricedProduct | None:
        """Price ``term`` at ``location_id``; None when no product is found."""
        token = await self.tokens.get_token()
        if token is None:
            return None

        try:
            async with httpx.AsyncClient(timeout=self.tokens.timeout) as client:
                response = await client.get(
                    self.products_url,
                    headers={"Authorization": f"Bearer {token.value}"},
                    params={
                        "filter.term": term,
                        "filter.locationId": location_id,
                        "filter.limit": 1,
                    },
                )
            if response.status_code != 200:
                logger.warning(
                    "Products fetch failed for %s: %s %s",
                    location_id,
                    response.status_code,
                    response.text,
                )
                return None
            data = response.json().get("data", [])
            if not data:
                return None
            return _parse_product(data[0], term, location_id)
        except (httpx.HTTPError, ValueError, KeyError, TypeError, AttributeError) as e:
            logger.warning("Products fetch error for %s: %s", location_id, e)
            return None


def _parse_product(item: dict, term: str, location_id: str) -> PricedProduct | None:
    """Parse a raw Kroger product into a PricedProduct.

    Sandbox responses often omit pricing; those get a synthesized price.
    """
    items = item.get("items") or []
    if not items:
        return None
    first_item = items[0]
    price = select_price(first_item.get("price"))
    if price <= 0:
        price = synthesize_price(term, location_id)
    stock_level = (first_item.get("inventory") or {}).get("stockLevel")
    return PricedProduct(
        name=item["description"],
        price=price,
        in_stock=stock_level not in OUT_OF_STOCK_LEVELS,
    )
