"""Maintenance log per property and the service provider directory."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.deps import get_db, get_or_404
from src.api.schemas import (
    MaintenanceCreate,
    MaintenanceResponse,
    MaintenanceUpdate,
    ServiceProviderCreate,
    ServiceProviderResponse,
    ServiceProviderUpdate,
)
from src.models.db import MaintenanceRecord, PropertyRecord, ServiceProviderRecord
from src.models.ledger import MaintenanceStatus

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1", tags=["maintenance"])


def _maintenance_values(data: dict) -> dict:
    if data.get("category") is not None:
        data["category"] = data["category"].value
    if data.get("status") is not None:
        data["status"] = data["status"].value
    else:
        data.pop("status", None)
    return data


@router.get(
    "/properties/{property_id}/maintenance", response_model=list[MaintenanceResponse]
)
async def list_maintenance(
    property_id: UUID,
    status: MaintenanceStatus | None = None,
    db: AsyncSession = Depends(get_db),
):
    """Maintenance history for a property, newest first."""
    await get_or_404(db, PropertyRecord, property_id, "Property")
    stmt = (
        select(MaintenanceRecord)
        .where(MaintenanceRecord.property_id == property_id)
        .order_by(MaintenanceRecord.date.desc())
    )
    if status is not None:
        stmt = stmt.where(MaintenanceRecord.status == status.value)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.post(
    "/properties/{property_id}/maintenance",
    response_model=MaintenanceResponse,
    status_code=201,
)
async def create_maintenance(
    property_id: UUID,
    req: MaintenanceCreate,
    db: AsyncSession = Depends(get_db),
):
    await get_or_404(db, PropertyRecord, property_id, "Property")
    record = MaintenanceRecord(property_id=property_id, **_maintenance_values(req.model_dump()))
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


@router.put("/maintenance/{record_id}", response_model=MaintenanceResponse)
async def update_maintenance(
    record_id: UUID,
    req: MaintenanceUpdate,
    db: AsyncSession = Depends(get_db),
):
    record = await get_or_404(db, MaintenanceRecord, record_id, "Maintenance record")
    changes = _maintenance_values(req.model_dump(exclude_unset=True))
    for required in ("date", "description"):
        if changes.get(required) is None:
            changes.pop(required, None)
    for field, value in changes.items():
        setattr(record, field, value)
    await db.commit()
    await db.refresh(record)
    return record


@router.delete("/maintenance/{record_id}", status_code=204)
async def delete_maintenance(record_id: UUID, db: AsyncSession = Depends(get_db)):
    record = await get_or_404(db, MaintenanceRecord, record_id, "Maintenance record")
    await db.delete(record)
    await db.commit()


@router.get("/providers", response_model=list[ServiceProviderResponse])
async def list_providers(
    type: str | None = None,
    db: AsyncSession = Depends(get_db),
):
    """All providers by name, or one trade's providers best rated first."""
    stmt = select(ServiceProviderRecord)
    if type is not None:
        stmt = stmt.where(ServiceProviderRecord.type == type).order_by(
            ServiceProviderRecord.rating.desc().nulls_last(), ServiceProviderRecord.name
        )
    else:
        stmt = stmt.order_by(ServiceProviderRecord.name)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.post("/providers", response_model=ServiceProviderResponse, status_code=201)
async def create_provider(req: ServiceProviderCreate, db: AsyncSession = Depends(get_db)):
    record = ServiceProviderRecord(**req.model_dump())
    db.add(record)
    await db.commit()
    await db.refresh(record)
    logger.info("Added %s provider %s", record.type, record.name)
    return record


@router.get("/providers/{provider_id}", response_model=ServiceProviderResponse)
async def get_provider(provider_id: UUID, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, ServiceProviderRecord, provider_id, "Service provider")


@router.put("/providers/{provider_id}", response_model=ServiceProviderResponse)
async def update_provider(
    provider_id: UUID,
    req: ServiceProviderUpdate,
    db: AsyncSession = Depends(get_db),
):
    record = await get_or_404(db, ServiceProviderRecord, provider_id, "Service provider")
    changes = req.model_dump(exclude_unset=True)
    # name and type are required columns
    for required in ("name", "type"):
        if changes.get(required) is None:
            changes.pop(required, None)
    for field, value in changes.items():
        setattr(record, field, value)
    await db.commit()
    await db.refresh(record)
    return record


@router.delete("/providers/{provider_id}", status_code=204)
async def delete_provider(provider_id: UUID, db: AsyncSession = Depends(get_db)):
    record = await get_or_404(db, ServiceProviderRecord, provider_id, "Service provider")
    await db.delete(record)
    await db.commit()
