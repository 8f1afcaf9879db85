"""Property and tenant routes."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.deps import get_db, get_or_404
from src.api.schemas import (
    PropertyCreate,
    PropertyResponse,
    PropertyUpdate,
    TenantCreate,
    TenantResponse,
)
from src.models.db import PropertyRecord, TenantRecord
from src.models.ledger import PropertyStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["properties"])


@router.get("/properties", response_model=list[PropertyResponse])
async def list_properties(
    status: PropertyStatus | None = None,
    db: AsyncSession = Depends(get_db),
):
    stmt = select(PropertyRecord).order_by(PropertyRecord.address)
    if status is not None:
        stmt = stmt.where(PropertyRecord.status == status.value)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.post("/properties", response_model=PropertyResponse, status_code=201)
async def create_property(req: PropertyCreate, db: AsyncSession = Depends(get_db)):
    data = req.model_dump()
    data["status"] = req.status.value
    record = PropertyRecord(**data)
    db.add(record)
    await db.commit()
    await db.refresh(record)
    logger.info("Added property %s", record.address)
    return record


@router.get("/properties/{property_id}", response_model=PropertyResponse)
async def get_property(property_id: UUID, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, PropertyRecord, property_id, "Property")


@router.put("/properties/{property_id}", response_model=PropertyResponse)
async def update_property(
    property_id: UUID,
    req: PropertyUpdate,
    db: AsyncSession = Depends(get_db),
):
    record = await get_or_404(db, PropertyRecord, property_id, "Property")
    changes = req.model_dump(exclude_unset=True)
    if changes.get("status") is not None:
        changes["status"] = PropertyStatus(changes["status"]).value
    else:
        changes.pop("status", None)
    for field, value in changes.items():
        setattr(record, field, value)
    await db.commit()
    await db.refresh(record)
    return record


@router.delete("/properties/{property_id}", status_code=204)
async def delete_property(property_id: UUID, db: AsyncSession = Depends(get_db)):
    """Delete a property with its tenants and maintenance log. Ledger rows are kept, unassigned."""
    record = await get_or_404(db, PropertyRecord, property_id, "Property")
    await db.delete(record)
    await db.commit()
    logger.info("Deleted property %s", property_id)


@router.get("/properties/{property_id}/tenants", response_model=list[TenantResponse])
async def list_tenants(property_id: UUID, db: AsyncSession = Depends(get_db)):
    await get_or_404(db, PropertyRecord, property_id, "Property")
    result = await db.execute(
        select(TenantRecord)
        .where(TenantRecord.property_id == property_id)
        .order_by(TenantRecord.lease_start)
    )
    return result.scalars().all()


@router.post(
    "/properties/{property_id}/tenants", response_model=TenantResponse, status_code=201
)
async def create_tenant(
    property_id: UUID,
    req: TenantCreate,
    db: AsyncSession = Depends(get_db),
):
    await get_or_404(db, PropertyRecord, property_id, "Property")
    record = TenantRecord(property_id=property_id, **req.model_dump())
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


@router.delete("/tenants/{tenant_id}", status_code=204)
async def delete_tenant(tenant_id: UUID, db: AsyncSession = Depends(get_db)):
    record = await get_or_404(db, TenantRecord, tenant_id, "Tenant")
    await db.delete(record)
    await db.commit()
