"""FastAPI dependency injection."""

from typing import TypeVar
from uuid import UUID

from fastapi import HTTPException
from sqlalchemy.ext.asyncio import AsyncEngine, AsyncSession, async_sessionmaker, create_async_engine

from src.config import settings
from src.data.rentcast import RentCastClient
from src.models.db import Base

engine = create_async_engine(settings.database_url, echo=settings.debug)
async_session = async_sessionmaker(engine, expire_on_commit=False)

RecordT = TypeVar("RecordT", bound=Base)


async def init_db(db_engine: AsyncEngine = engine) -> None:
    async with db_engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)


async def get_db() -> AsyncSession:
    async with async_session() as session:
        yield session


def get_rentcast_client() -> RentCastClient:
    return RentCastClient()


async def get_or_404(
    session: AsyncSession, model: type[RecordT], record_id: UUID, label: str
) -> RecordT:
    record = await session.get(model, record_id)
    if record is None:
        raise HTTPException(status_code=404, detail=f"{label} not found")
    return record
