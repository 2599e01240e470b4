"""Deterministic placeholder prices for stores without upstream pricing.

Every generator here is seeded from a SHA-256 digest of its inputs, so the
same inputs produce the same draws in every process. Python's built-in
``hash()`` is salted per interpreter and is not used.
"""

from __future__ import annotations

import hashlib
import random

BASE_PRICE = 1.00
PRICE_SPREAD = 8.99
PRICE_FLOOR = 0.50
IN_STOCK_PERCENT = 90


def seeded_random(*parts: str) -> random.Random:
    """Return a generator seeded by the concatenation of ``parts``."""
    digest = hashlib.sha256("".join(parts).encode()).digest()
    return random.Random(int.from_bytes(digest[:8], "big"))


def draw_base_price(rng: random.Random) -> float:
    """Draw an unrounded price in [1.00, 9.99)."""
    return BASE_PRICE + rng.random() * PRICE_SPREAD


def synthesize_price(term: str, location_id: str) -> float:
    """Placeholder price for a term at a location that reported none."""
    return round(draw_base_price(seeded_random(term, location_id)), 2)


def draw_store_offer(rng: random.Random) -> tuple[bool, float]:
    """Draw ``(in_stock, price)`` for one store from a shared stream.

    Consumes three draws in a fixed order: stock flag, base price, noise.
    """
    in_stock = rng.randrange(100) < IN_STOCK_PERCENT
    base = draw_base_price(rng)
    noise = rng.random() * 2.0 - 1.0
    return in_stock, round(max(PRICE_FLOOR, base + noise), 2)
