"""Pydantic models for upstream responses and search results."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class TokenResponse(BaseModel):
    """OAuth2 token response from the Kroger API."""

    access_token: str
    token_type: str = "Bearer"
    expires_in: int = 1800


class AccessToken(BaseModel):
    """A cached bearer token and the moment it stops being valid."""

    value: str
    expires_at: datetime


class StoreLocation(BaseModel):
    """A store that can be priced or ranked by distance."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    lat: float
    lng: float


class PricedProduct(BaseModel):
    """The first product matching a term at one Kroger location."""

    model_config = ConfigDict(frozen=True)

    name: str
    price: float = Field(gt=0)
    in_stock: bool = True


class SearchResult(BaseModel):
    """One ranked store offer, serialized in camelCase."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    product_name: str
    store_name: str
    price: float = Field(gt=0)
    distance_mi: float = Field(ge=0)
    in_stock: bool
