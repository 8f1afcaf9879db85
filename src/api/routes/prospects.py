"""Prospect routes: deals under research, plus public-record lookup."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.deps import get_db, get_or_404, get_rentcast_client
from src.api.schemas import (
    ListingLookupRequest,
    ListingResponse,
    ListingSearchRequest,
    ProspectCreate,
    ProspectResponse,
    ProspectUpdate,
)
from src.data.rentcast import RentCastClient
from src.models.db import ProspectRecord
from src.models.ledger import ProspectStatus
from src.models.property import Address

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/prospects", tags=["prospects"])


@router.get("", response_model=list[ProspectResponse])
async def list_prospects(
    status: ProspectStatus | None = None,
    db: AsyncSession = Depends(get_db),
):
    stmt = select(ProspectRecord).order_by(ProspectRecord.created_at.desc())
    if status is not None:
        stmt = stmt.where(ProspectRecord.status == status.value)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.post("", response_model=ProspectResponse, status_code=201)
async def create_prospect(req: ProspectCreate, db: AsyncSession = Depends(get_db)):
    data = req.model_dump()
    data["status"] = req.status.value
    record = ProspectRecord(**data)
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


@router.post("/lookup", response_model=ListingResponse)
async def lookup_prospect(
    req: ListingLookupRequest,
    client: RentCastClient = Depends(get_rentcast_client),
):
    """Public-record details (beds, baths, sqft, last sale, taxes) for an address."""
    if not client.is_configured:
        raise HTTPException(status_code=503, detail="RentCast API key is not configured")

    address = Address(street=req.address, city=req.city, state=req.state, zip_code=req.zip_code)
    listing = await client.lookup_listing(address)
    if listing is None:
        raise HTTPException(status_code=404, detail=f"No property data found for {address.full}")

    return ListingResponse.from_listing(listing)


@router.post("/search", response_model=list[ListingResponse])
async def search_prospects(
    req: ListingSearchRequest,
    client: RentCastClient = Depends(get_rentcast_client),
):
    """Properties in a zip code, or a city and state, to pick new prospects from."""
    if not client.is_configured:
        raise HTTPException(status_code=503, detail="RentCast API key is not configured")

    listings = await client.search_listings(city=req.city, state=req.state, zip_code=req.zip_code)
    logger.info("RentCast search returned %d properties", len(listings))
    return [ListingResponse.from_listing(listing) for listing in listings]


@router.get("/{prospect_id}", response_model=ProspectResponse)
async def get_prospect(prospect_id: UUID, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, ProspectRecord, prospect_id, "Prospect")


@router.put("/{prospect_id}", response_model=ProspectResponse)
async def update_prospect(
    prospect_id: UUID,
    req: ProspectUpdate,
    db: AsyncSession = Depends(get_db),
):
    record = await get_or_404(db, ProspectRecord, prospect_id, "Prospect")
    changes = req.model_dump(exclude_unset=True)
    if changes.get("status") is not None:
        changes["status"] = ProspectStatus(changes["status"]).value
    else:
        changes.pop("status", None)
    for field, value in changes.items():
        setattr(record, field, value)
    await db.commit()
    await db.refresh(record)
    return record


@router.delete("/{prospect_id}", status_code=204)
async def delete_prospect(prospect_id: UUID, db: AsyncSession = Depends(get_db)):
    record = await get_or_404(db, ProspectRecord, prospect_id, "Prospect")
    await db.delete(record)
    await db.commit()
