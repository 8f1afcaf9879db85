"""Tests for the RentCast prospect lookup client."""

from datetime import date
from decimal import Decimal
from unittest.mock import AsyncMock

import httpx
import pytest

from src.data.base import PropertyDataSource
from src.data.rentcast import RentCastClient
from src.models.property import Address


@pytest.fixture
def sample_address():
    return Address(street="123 Main St", city="Columbus", state="OH", zip_code="43215")


@pytest.fixture
def rentcast_property():
    return {
        "id": "123-Main-St,-Columbus,-OH-43215",
        "addressLine1": "123 Main St",
        "city": "Columbus",
        "state": "OH",
        "zipCode": "43215",
        "bedrooms": 3,
        "bathrooms": 1.5,
        "squareFootage": 1450,
        "lotSize": 6000,
        "yearBuilt": 1955,
        "propertyType": "Single Family",
        "lastSalePrice": 185000,
        "lastSaleDate": "2019-06-14T00:00:00.000Z",
        "propertyTaxes": {
            "2022": {"year": 2022, "total": 2850},
            "2023": {"year": 2023, "total": 3120.5},
        },
    }


@pytest.fixture
def client():
    return RentCastClient(api_key="test-key")


class TestLookupListing:
    async def test_maps_fields(self, client, sample_address, rentcast_property):
        client._get = AsyncMock(return_value=[rentcast_property])

        listing = await client.lookup_listing(sample_address)

        assert listing is not None
        assert listing.address == sample_address
        assert listing.bedrooms == 3
        assert listing.bathrooms == Decimal("1.5")
        assert listing.sqft == 1450
        assert listing.lot_sqft == 6000
        assert listing.year_built == 1955
        assert listing.property_type == "Single Family"
        assert listing.last_sale_price == Decimal("185000")
        assert listing.last_sale_date == date(2019, 6, 14)
        assert listing.listing_id == "123-Main-St,-Columbus,-OH-43215"
        assert listing.raw_data == rentcast_property
        assert listing.annual_tax == Decimal("3120.5")
        client._get.assert_awaited_once_with("/properties", {"address": sample_address.full})

    async def test_missing_fields_default(self, client, sample_address):
        client._get = AsyncMock(return_value=[{"bedrooms": None}])

        listing = await client.lookup_listing(sample_address)

        assert listing.address.street == "123 Main St"
        assert listing.bedrooms == 0
        assert listing.last_sale_date is None
        assert listing.annual_tax == Decimal("0")

    async def test_not_found(self, client, sample_address):
        client._get = AsyncMock(return_value=[])
        assert await client.lookup_listing(sample_address) is None

    async def test_http_error_returns_none(self, client, sample_address):
        request = httpx.Request("GET", "https://api.rentcast.io/v1/properties")
        response = httpx.Response(404, request=request)
        client._get = AsyncMock(
            side_effect=httpx.HTTPStatusError("not found", request=request, response=response)
        )
        assert await client.lookup_listing(sample_address) is None

    async def test_network_error_returns_none(self, client, sample_address):
        client._get = AsyncMock(side_effect=httpx.ConnectError("unreachable"))
        assert await client.lookup_listing(sample_address) is None


class TestSearchListings:
    async def test_by_zip_code(self, client, rentcast_property):
        client._get = AsyncMock(return_value=[rentcast_property, {"addressLine1": "9 Elm St"}])

        listings = await client.search_listings(city="Columbus", state="OH", zip_code="43215")

        assert [listing.address.street for listing in listings] == ["123 Main St", "9 Elm St"]
        assert listings[1].address.zip_code == "43215"
        client._get.assert_awaited_once_with("/properties", {"zipCode": "43215", "limit": 50})

    async def test_by_city_and_state(self, client):
        client._get = AsyncMock(return_value=[])

        assert await client.search_listings(city="Dayton", state="OH") == []
        client._get.assert_awaited_once_with(
            "/properties", {"city": "Dayton", "state": "OH", "limit": 50}
        )

    async def test_single_record_response(self, client, rentcast_property):
        client._get = AsyncMock(return_value=rentcast_property)
        listings = await client.search_listings(zip_code="43215")
        assert len(listings) == 1

    async def test_network_error_is_empty(self, client):
        client._get = AsyncMock(side_effect=httpx.ConnectError("unreachable"))
        assert await client.search_listings(zip_code="43215") == []


class TestClient:
    def test_configured(self):
        assert RentCastClient(api_key="abc").is_configured

    def test_satisfies_protocol(self, client):
        assert isinstance(client, PropertyDataSource)

    def test_street_only_address(self):
        assert Address(street="123 Main St, Columbus, OH 43215").full == "123 Main St, Columbus, OH 43215"
