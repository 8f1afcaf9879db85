"""Protocol definitions for data sources."""

from typing import Protocol, runtime_checkable

from src.models.property import Address, ProspectListing


@runtime_checkable
class PropertyDataSource(Protocol):
    async def lookup_listing(self, address: Address) -> ProspectListing | None:
        """Fetch public-record details for an address."""
        ...

    async def search_listings(
        self, city: str = "", state: str = "", zip_code: str = ""
    ) -> list[ProspectListing]:
        """Fetch properties in a zip code, or in a city and state."""
        ...
