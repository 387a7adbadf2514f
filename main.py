import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from mollie_components.config import get_settings
from mollie_components.constants import HOME_PAGE_ROUTE
from mollie_components.database import create_tables, dispose_engine, get_engine
from mollie_components.routers import components

settings = get_settings()

logging.basicConfig(level=settings.log_level, format="%(asctime)s - %(levelname)s - %(message)s")


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.db_create_tables:
        await create_tables(get_engine())
    yield
    await dispose_engine()


def initialize_app() -> FastAPI:
    """Initialize the FastAPI application."""

    _app = FastAPI(title=settings.app_name, lifespan=lifespan)

    _app.include_router(components.router)

    _app.add_api_route("/", home_page, methods=["GET"], name=HOME_PAGE_ROUTE, tags=["general"])
    _app.add_api_route("/healthcheck", health_check, methods=["GET"], tags=["general"])

    return _app


def home_page():
    return {"app": settings.app_name}


def health_check():
    return {"status": "alive"}


app = initialize_app()
