"""Upstream URLs and canned payloads shared by the tests."""

KROGER = "https://api-ce.kroger.com/v1"
TOKEN_URL = f"{KROGER}/connect/oauth2/token"
LOCATIONS_URL = f"{KROGER}/locations"
PRODUCTS_URL = f"{KROGER}/products"
PLACES_URL = "https://maps.googleapis.com/maps/api/place/nearbysearch/json"


def kroger_location(location_id: str, name: str, lat: float, lng: float) -> dict:
    return {
        "locationId": location_id,
        "name": name,
        "geolocation": {"latitude": lat, "longitude": lng},
    }


def kroger_product(description: str, price: dict | None = None, stock: str = "HIGH") -> dict:
    item: dict = {"inventory": {"stockLevel": stock}}
    if price is not None:
        item["price"] = price
    return {"data": [{"productId": "0001111041700", "description": description, "items": [item]}]}
