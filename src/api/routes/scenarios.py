"""Saved scenario routes: store calculator inputs and re-run them later."""

import logging
from decimal import Decimal
from uuid import UUID

from fastapi import APIRouter, Depends, Query
from fastapi.exceptions import RequestValidationError
from pydantic import ValidationError
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.deps import get_db, get_or_404
from src.api.routes.calculator import result_to_response
from src.api.schemas import (
    SCENARIO_INPUTS,
    ProformaResponse,
    ScenarioCreate,
    ScenarioResponse,
    ScenarioUpdate,
)
from src.config import settings
from src.engine.proforma import calculate_proforma, calculate_str_proforma
from src.models.db import SavedScenarioRecord
from src.models.scenario import RentalType

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/scenarios", tags=["scenarios"])


def _normalize(rental_type: RentalType, data: dict) -> dict:
    """Validate calculator fields for the rental type and fill in defaults."""
    try:
        scenario = SCENARIO_INPUTS[rental_type].model_validate(data)
    except ValidationError as e:
        raise RequestValidationError(e.errors(include_url=False))
    return scenario.model_dump(mode="json")


@router.get("", response_model=list[ScenarioResponse])
async def list_scenarios(
    prospect_id: UUID | None = None,
    property_id: UUID | None = None,
    db: AsyncSession = Depends(get_db),
):
    stmt = select(SavedScenarioRecord).order_by(SavedScenarioRecord.created_at.desc())
    if prospect_id is not None:
        stmt = stmt.where(SavedScenarioRecord.prospect_id == prospect_id)
    if property_id is not None:
        stmt = stmt.where(SavedScenarioRecord.property_id == property_id)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.post("", response_model=ScenarioResponse, status_code=201)
async def create_scenario(req: ScenarioCreate, db: AsyncSession = Depends(get_db)):
    record = SavedScenarioRecord(
        name=req.name,
        rental_type=req.rental_type.value,
        scenario_data=_normalize(req.rental_type, req.scenario_data),
        prospect_id=req.prospect_id,
        property_id=req.property_id,
    )
    db.add(record)
    await db.commit()
    await db.refresh(record)
    logger.info("Saved %s scenario %r", record.rental_type, record.name)
    return record


@router.get("/{scenario_id}", response_model=ScenarioResponse)
async def get_scenario(scenario_id: UUID, db: AsyncSession = Depends(get_db)):
    return await get_or_404(db, SavedScenarioRecord, scenario_id, "Scenario")


@router.put("/{scenario_id}", response_model=ScenarioResponse)
async def update_scenario(
    scenario_id: UUID,
    req: ScenarioUpdate,
    db: AsyncSession = Depends(get_db),
):
    """Rename a scenario or replace its inputs. Inputs are re-validated
    against the (possibly new) rental type."""
    record = await get_or_404(db, SavedScenarioRecord, scenario_id, "Scenario")

    if req.name is not None:
        record.name = req.name

    rental_type = req.rental_type or RentalType(record.rental_type)
    if req.rental_type is not None or req.scenario_data is not None:
        data = req.scenario_data if req.scenario_data is not None else record.scenario_data
        record.scenario_data = _normalize(rental_type, data)
        record.rental_type = rental_type.value

    await db.commit()
    await db.refresh(record)
    return record


@router.delete("/{scenario_id}", status_code=204)
async def delete_scenario(scenario_id: UUID, db: AsyncSession = Depends(get_db)):
    record = await get_or_404(db, SavedScenarioRecord, scenario_id, "Scenario")
    await db.delete(record)
    await db.commit()


@router.get("/{scenario_id}/results", response_model=ProformaResponse)
async def scenario_results(
    scenario_id: UUID,
    projection_years: int = Query(settings.default_projection_years, ge=1, le=50),
    discount_rate: Decimal = Query(Decimal(str(settings.default_discount_rate)), gt=-100),
    db: AsyncSession = Depends(get_db),
):
    """Run a saved scenario through the engine matching its rental type."""
    record = await get_or_404(db, SavedScenarioRecord, scenario_id, "Scenario")
    rental_type = RentalType(record.rental_type)
    scenario = SCENARIO_INPUTS[rental_type].model_validate(record.scenario_data).to_scenario()

    if rental_type == RentalType.STR:
        result = calculate_str_proforma(scenario, projection_years, discount_rate)
    else:
        result = calculate_proforma(scenario, projection_years, discount_rate)
    return result_to_response(result)
