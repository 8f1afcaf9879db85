"""Ledger routes: manual entries and bank CSV import."""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends, HTTPException, Query
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.api.deps import get_db, get_or_404
from src.api.queries import year_range
from src.api.schemas import (
    ImportPreviewRequest,
    ImportPreviewResponse,
    ImportRequest,
    ImportResponse,
    ParsedTransactionResponse,
    TransactionBase,
    TransactionCreate,
    TransactionResponse,
)
from src.engine.bank_import import parse_bank_csv
from src.models.db import TransactionRecord
from src.models.ledger import ImportSource

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/v1/transactions", tags=["transactions"])


def _to_record(tx: TransactionBase, source: ImportSource) -> TransactionRecord:
    return TransactionRecord(
        property_id=tx.property_id,
        date=tx.date,
        amount=tx.amount,
        type=tx.type.value,
        category=tx.category,
        description=tx.description,
        vendor=tx.vendor,
        imported_from=source.value,
    )


@router.get("", response_model=list[TransactionResponse])
async def list_transactions(
    property_id: UUID | None = None,
    year: int | None = Query(None, ge=1900, le=2200),
    db: AsyncSession = Depends(get_db),
):
    """Ledger rows, newest first."""
    stmt = select(TransactionRecord).order_by(
        TransactionRecord.date.desc(), TransactionRecord.created_at.desc()
    )
    if property_id is not None:
        stmt = stmt.where(TransactionRecord.property_id == property_id)
    if year is not None:
        start, end = year_range(year)
        stmt = stmt.where(TransactionRecord.date >= start, TransactionRecord.date <= end)
    result = await db.execute(stmt)
    return result.scalars().all()


@router.post("", response_model=TransactionResponse, status_code=201)
async def create_transaction(req: TransactionCreate, db: AsyncSession = Depends(get_db)):
    record = _to_record(req, ImportSource.MANUAL)
    db.add(record)
    await db.commit()
    await db.refresh(record)
    return record


@router.delete("/{transaction_id}", status_code=204)
async def delete_transaction(transaction_id: UUID, db: AsyncSession = Depends(get_db)):
    record = await get_or_404(db, TransactionRecord, transaction_id, "Transaction")
    await db.delete(record)
    await db.commit()


@router.post("/import/preview", response_model=ImportPreviewResponse)
async def preview_import(req: ImportPreviewRequest):
    """Parse and categorize a bank export for review. Nothing is saved."""
    parsed = parse_bank_csv(req.csv_text)
    if not parsed:
        raise HTTPException(
            status_code=422,
            detail="No transactions found. Expected columns for date, description and amount.",
        )
    return ImportPreviewResponse(
        count=len(parsed),
        transactions=[ParsedTransactionResponse.model_validate(tx) for tx in parsed],
    )


@router.post("/import", response_model=ImportResponse, status_code=201)
async def commit_import(req: ImportRequest, db: AsyncSession = Depends(get_db)):
    """Save reviewed rows. A request-level property_id applies to rows without one."""
    for tx in req.transactions:
        if tx.property_id is None and req.property_id is not None:
            tx = tx.model_copy(update={"property_id": req.property_id})
        db.add(_to_record(tx, ImportSource.CSV))
    await db.commit()
    logger.info("Imported %d transactions from CSV", len(req.transactions))
    return ImportResponse(count=len(req.transactions))
