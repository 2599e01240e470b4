"""Static demo stores used when no live store source is available."""

from __future__ import annotations

from pathlib import Path

from pydantic import TypeAdapter

from silverpoint.models import StoreLocation

DEFAULT_STORES: tuple[StoreLocation, ...] = (
    StoreLocation(id="S1", name="Kroger (Downtown)", lat=34.0522, lng=-118.2437),
    StoreLocation(id="S2", name="Target (Westside)", lat=34.0400, lng=-118.4400),
    StoreLocation(id="S3", name="Walmart Supercenter", lat=40.7128, lng=-74.0060),
    StoreLocation(id="S4", name="Target (Manhattan)", lat=40.7500, lng=-73.9800),
    StoreLocation(id="S5", name="Aldi", lat=41.8781, lng=-87.6298),
    StoreLocation(id="S6", name="Trader Joe's", lat=41.9000, lng=-87.6500),
    StoreLocation(id="S7", name="H-E-B", lat=29.7604, lng=-95.3698),
    StoreLocation(id="S8", name="Safeway", lat=47.6062, lng=-122.3321),
    StoreLocation(id="S9", name="Publix", lat=25.7617, lng=-80.1918),
    StoreLocation(id="S10", name="King Soopers", lat=39.7392, lng=-104.9903),
    StoreLocation(id="S11", name="Meijer", lat=42.3314, lng=-83.0458),
    StoreLocation(id="S12", name="Whole Foods Market", lat=37.7749, lng=-122.4194),
    StoreLocation(id="S13", name="Wegmans", lat=42.3601, lng=-71.0589),
)


def load_fallback_stores(path: Path | None = None) -> tuple[StoreLocation, ...]:
    """Load the store table from a JSON list, or the built-in demo stores."""
    if path is None:
        return DEFAULT_STORES
    stores = TypeAdapter(list[StoreLocation]).validate_json(Path(path).read_text())
    return tuple(stores)
