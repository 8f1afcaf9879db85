"""API fixtures: the FastAPI app against a fresh in-memory SQLite database."""

import pytest
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from src.api.app import app
from src.api.deps import get_db, init_db


@pytest.fixture
async def client():
    engine = create_async_engine(
        "sqlite+aiosqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    await init_db(engine)
    session_factory = async_sessionmaker(engine, expire_on_commit=False)

    async def override_get_db():
        async with session_factory() as session:
            yield session

    app.dependency_overrides[get_db] = override_get_db
    async with AsyncClient(transport=ASGITransport(app=app), base_url="http://test") as ac:
        yield ac
    app.dependency_overrides.clear()
    await engine.dispose()


@pytest.fixture
def ltr_payload() -> dict:
    return {
        "purchase_price": "250000",
        "down_payment_pct": "20",
        "interest_rate": "7.0",
        "loan_term_years": 30,
        "closing_costs": "5000",
        "rehab_budget": "0",
        "monthly_rent": "2000",
        "vacancy_rate_pct": "5",
        "property_mgmt_pct": "0",
        "insurance_annual": "1500",
        "taxes_annual": "3000",
        "maintenance_reserve_pct": "0",
        "hoa_monthly": "0",
        "utilities_monthly": "0",
        "appreciation_rate_pct": "3",
        "rent_growth_rate_pct": "2",
    }
