"""Tests for the places module."""

import respx
from httpx import Response

from silverpoint.places import PlacesClient
from tests.helpers import PLACES_URL


@respx.mock
async def test_nearby_grocery_stores():
    route = respx.get(PLACES_URL).mock(
        return_value=Response(
            200,
            json={
                "status": "OK",
                "results": [
                    {
                        "place_id": "abc",
                        "name": "Grand Central Market",
                        "geometry": {"location": {"lat": 34.0508, "lng": -118.2489}},
                    },
                    {"geometry": {"location": {"lat": 34.06, "lng": -118.25}}},
                    {"name": "No Geometry"},
                ],
            },
        )
    )
    stores = await PlacesClient("maps-key").nearby_grocery_stores(34.05, -118.24)
    assert [s.name for s in stores] == ["Grand Central Market", "Unknown Store"]
    assert stores[0].id == "abc"

    params = route.calls.last.request.url.params
    assert params["location"] == "34.05,-118.24"
    assert params["radius"] == "16093"
    assert params["type"] == "supermarket"
    assert params["keyword"] == "grocery"
    assert params["key"] == "maps-key"


@respx.mock
async def test_nearby_grocery_stores_zero_results():
    respx.get(PLACES_URL).mock(
        return_value=Response(200, json={"status": "ZERO_RESULTS", "results": []})
    )
    assert await PlacesClient("maps-key").nearby_grocery_stores(34.05, -118.24) == []


@respx.mock
async def test_nearby_grocery_stores_failure():
    respx.get(PLACES_URL).mock(return_value=Response(403, text="Forbidden"))
    assert await PlacesClient("maps-key").nearby_grocery_stores(34.05, -118.24) == []


async def test_nearby_grocery_stores_unconfigured():
    client = PlacesClient("")
    assert client.configured is False
    assert await client.nearby_grocery_stores(34.05, -118.24) == []


@respx.mock
async def test_nearby_grocery_stores_non_list_results():
    respx.get(PLACES_URL).mock(
        return_value=Response(200, json={"status": "OK", "results": 7})
    )
    assert await PlacesClient("maps-key").nearby_grocery_stores(34.05, -118.24) == []
