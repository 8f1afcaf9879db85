"""RentCast API client for prospect research (public-record property data)."""

import logging
from datetime import date
from decimal import Decimal

import httpx

from src.config import settings
from src.data.cache import cached
from src.models.property import Address, ProspectListing

logger = logging.getLogger(__name__)

RENTCAST_BASE_URL = "https://api.rentcast.io/v1"
SEARCH_LIMIT = 50


def _latest_tax(prop: dict) -> Decimal:
    """Total from the most recent year in RentCast's propertyTaxes map."""
    taxes = prop.get("propertyTaxes") or {}
    if not taxes:
        return Decimal("0")
    latest = max(taxes.values(), key=lambda t: t.get("year", 0))
    return Decimal(str(latest.get("total", 0)))


def _parse_date(value: str | None) -> date | None:
    if not value:
        return None
    try:
        return date.fromisoformat(value[:10])
    except ValueError:
        return None


def _to_listing(prop: dict, fallback: Address) -> ProspectListing:
    """Map a RentCast property record, keeping the caller's address parts where it has none."""
    return ProspectListing(
        address=Address(
            street=prop.get("addressLine1") or prop.get("formattedAddress") or fallback.street,
            city=prop.get("city", fallback.city),
            state=prop.get("state", fallback.state),
            zip_code=prop.get("zipCode", fallback.zip_code),
        ),
        listing_id=str(prop.get("id") or ""),
        bedrooms=prop.get("bedrooms") or 0,
        bathrooms=Decimal(str(prop.get("bathrooms") or 0)),
        sqft=prop.get("squareFootage") or 0,
        lot_sqft=prop.get("lotSize") or 0,
        year_built=prop.get("yearBuilt") or 0,
        property_type=prop.get("propertyType", ""),
        last_sale_price=Decimal(str(prop.get("lastSalePrice") or 0)),
        last_sale_date=_parse_date(prop.get("lastSaleDate")),
        annual_tax=_latest_tax(prop),
        raw_data=prop,
    )


class RentCastClient:
    def __init__(self, api_key: str | None = None):
        self.api_key = api_key or settings.rentcast_api_key
        self.headers = {"X-Api-Key": self.api_key, "Accept": "application/json"}

    @property
    def is_configured(self) -> bool:
        return bool(self.api_key)

    @cached("rentcast")
    async def _get(self, endpoint: str, params: dict | None = None) -> dict | list:
        async with httpx.AsyncClient(timeout=15.0) as client:
            resp = await client.get(
                f"{RENTCAST_BASE_URL}{endpoint}",
                headers=self.headers,
                params=params or {},
            )
            resp.raise_for_status()
            return resp.json()

    async def _fetch(self, params: dict) -> dict | list | None:
        try:
            return await self._get("/properties", params)
        except httpx.HTTPStatusError as e:
            logger.warning("RentCast property request failed: %s", e)
        except httpx.RequestError as e:
            logger.warning("RentCast request error: %s", e)
        return None

    async def lookup_listing(self, address: Address) -> ProspectListing | None:
        """Fetch property details from RentCast; None when unknown or unreachable."""
        data = await self._fetch({"address": address.full})
        if not data:
            return None

        # RentCast returns a list; take first match
        prop = data[0] if isinstance(data, list) else data
        logger.debug("RentCast raw property keys: %s", list(prop.keys()))
        return _to_listing(prop, address)

    async def search_listings(
        self, city: str = "", state: str = "", zip_code: str = ""
    ) -> list[ProspectListing]:
        """Up to SEARCH_LIMIT properties in a zip code, or in a city and state.

        A zip code takes precedence over city/state. Empty when unreachable.
        """
        if zip_code:
            params = {"zipCode": zip_code}
        else:
            params = {"city": city, "state": state}
        params["limit"] = SEARCH_LIMIT

        data = await self._fetch(params)
        if not data:
            return []
        props = data if isinstance(data, list) else [data]
        return [_to_listing(prop, Address(street="", city=city, state=state, zip_code=zip_code))
                for prop in props]
