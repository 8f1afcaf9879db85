from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal


@dataclass(frozen=True)
class Address:
    street: str
    city: str = ""
    state: str = ""
    zip_code: str = ""

    @property
    def full(self) -> str:
        if not (self.city or self.state or self.zip_code):
            return self.street
        return f"{self.street}, {self.city}, {self.state} {self.zip_code}".strip()


@dataclass(frozen=True)
class ProspectListing:
    """Public-record details for a property under research."""
    address: Address
    listing_id: str = ""  # RentCast property id
    bedrooms: int = 0
    bathrooms: Decimal = Decimal("0")
    sqft: int = 0
    lot_sqft: int = 0
    year_built: int = 0
    property_type: str = ""

    last_sale_price: Decimal = Decimal("0")
    last_sale_date: date | None = None
    annual_tax: Decimal = Decimal("0")  # Most recent assessed year

    raw_data: dict = field(default_factory=dict, compare=False)
