"""Tests for the store module."""

import httpx
import respx
from httpx import Response

from silverpoint.auth import TokenManager
from silverpoint.store import LocationResolver
from tests.helpers import LOCATIONS_URL, TOKEN_URL, kroger_location


@respx.mock
async def test_find_nearby(tokens: TokenManager, token_payload: dict):
    respx.post(TOKEN_URL).mock(return_value=Response(200, json=token_payload))
    route = respx.get(LOCATIONS_URL).mock(
        return_value=Response(
            200,
            json={
                "data": [
                    kroger_location("70300022", "Ralphs - Downtown", 34.0447, -118.2510),
                ]
            },
        )
    )
    locations = await LocationResolver(tokens).find_nearby(34.05, -118.24)
    assert len(locations) == 1
    assert locations[0].id == "70300022"
    assert locations[0].name == "Ralphs - Downtown"
    assert locations[0].lat == 34.0447

    request = route.calls.last.request
    assert request.headers["Authorization"] == "Bearer abc123"
    assert request.url.params["filter.latLong.near"] == "34.05,-118.24"
    assert request.url.params["filter.radiusInMiles"] == "10"


@respx.mock
async def test_find_nearby_skips_malformed_entries(tokens: TokenManager, token_payload: dict):
    respx.post(TOKEN_URL).mock(return_value=Response(200, json=token_payload))
    respx.get(LOCATIONS_URL).mock(
        return_value=Response(
            200,
            json={
                "data": [
                    {"locationId": "1", "name": "No Geo"},
                    {"locationId": "2", "geolocation": {"latitude": 1, "longitude": 2}},
                    kroger_location("3", "Bad Lat", "north", -118.0),
                    kroger_location("4", "Good", 34.0, -118.0),
                ]
            },
        )
    )
    locations = await LocationResolver(tokens).find_nearby(34.05, -118.24)
    assert [loc.id for loc in locations] == ["4"]


async def test_find_nearby_without_credentials():
    resolver = LocationResolver(TokenManager("", ""))
    assert await resolver.find_nearby(34.05, -118.24) == []


@respx.mock
async def test_find_nearby_failure(tokens: TokenManager, token_payload: dict):
    respx.post(TOKEN_URL).mock(return_value=Response(200, json=token_payload))
    respx.get(LOCATIONS_URL).mock(
        return_value=Response(500, text="Internal Server Error")
    )
    assert await LocationResolver(tokens).find_nearby(34.05, -118.24) == []


@respx.mock
async def test_find_nearby_transport_error(tokens: TokenManager, token_payload: dict):
    respx.post(TOKEN_URL).mock(return_value=Response(200, json=token_payload))
    respx.get(LOCATIONS_URL).mock(side_effect=httpx.ReadTimeout("slow"))
    assert await LocationResolver(tokens).find_nearby(34.05, -118.24) == []


@respx.mock
async def test_find_nearby_bad_json(tokens: TokenManager, token_payload: dict):
    respx.post(TOKEN_URL).mock(return_value=Response(200, json=token_payload))
    respx.get(LOCATIONS_URL).mock(return_value=Response(200, text="<html>"))
    assert await LocationResolver(tokens).find_nearby(34.05, -118.24) == []


@respx.mock
async def test_find_nearby_null_data(tokens: TokenManager, token_payload: dict):
    respx.post(TOKEN_URL).mock(return_value=Response(200, json=token_payload))
    respx.get(LOCATIONS_URL).mock(return_value=Response(200, json={"data": None}))
    assert await LocationResolver(tokens).find_nearby(34.05, -118.24) == []


@respx.mock
async def test_find_nearby_non_list_data(tokens: TokenManager, token_payload: dict):
    respx.post(TOKEN_URL).mock(return_value=Response(200, json=token_payload))
    respx.get(LOCATIONS_URL).mock(
        return_value=Response(200, json={"data": {"locationId": "1"}})
    )
    assert await LocationResolver(tokens).find_nearby(34.05, -118.24) == []
