import asyncio
from contextlib import asynccontextmanager
from pathlib import Path

from fastapi import FastAPI, Request
from loguru import logger

from app.api.catalog import router as catalog_router
from app.api.plans import router as plans_router
from app.catalog.seed import load_seed_catalog, seed_database
from app.config.settings import settings
from app.core.logger import setup_logger
from app.db.models import Base
from app.db.session import check_database_connection, get_engine, get_session


def _seed_catalog() -> None:
    seed_path = Path(settings.seed_catalog_path)
    if not seed_path.exists():
        logger.warning("Seed catalog missing, skipping seeding", path=str(seed_path))
        return
    catalog = load_seed_catalog(seed_path)
    with get_session() as session:
        seed_database(session, catalog)


@asynccontextmanager
async def lifespan(_app: FastAPI):
    """Configure logging, ensure tables exist and seed the catalog.

    Note: FastAPI requires async for lifespan context manager,
    even if no await operations are used.
    """
    setup_logger(level=settings.log_level, log_file=settings.log_file)

    check_database_connection()

    logger.info("Ensuring database tables exist")
    Base.metadata.create_all(bind=get_engine())
    logger.info("Database tables verified")

    if settings.seed_on_startup:
        _seed_catalog()

    await asyncio.sleep(0)
    yield
    logger.info("Application shutdown")


app = FastAPI(title="Gym Tracker", lifespan=lifespan)

app.include_router(plans_router)
app.include_router(catalog_router)


@app.get("/health")
def health():
    return {"status": "ok"}


@app.middleware("http")
async def log_requests(request: Request, call_next):
    """Log all HTTP requests."""
    logger.debug(f"Request: {request.method} {request.url.path}")
    response = await call_next(request)
    logger.debug(f"Response: {response.status_code} for {request.method} {request.url.path}")
    return response
