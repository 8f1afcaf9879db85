"""FastAPI application entry point."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from src.api.deps import init_db
from src.api.routes import (
    budget,
    calculator,
    maintenance,
    properties,
    prospects,
    reports,
    scenarios,
    transactions,
)
from src.config import settings

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    await init_db()
    logger.info("Database tables ready")
    yield


app = FastAPI(
    title="RentalDesk",
    description="Rental property deal analysis and portfolio bookkeeping",
    version="0.1.0",
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(calculator.router)
app.include_router(scenarios.router)
app.include_router(properties.router)
app.include_router(maintenance.router)
app.include_router(prospects.router)
app.include_router(transactions.router)
app.include_router(budget.router)
app.include_router(reports.router)


@app.get("/health")
async def health():
    return {"status": "ok"}
