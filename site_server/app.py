"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI

from site_server.routers import robots, routes_api
from site_server.services.route_data import get_route_db

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    """Load route content once at startup."""
    db = get_route_db()
    logger.info("Serving %d routes", len(db.routes))
    yield


def create_app() -> FastAPI:
    app = FastAPI(
        title="Moving Again Site Preview",
        description=(
            "Dynamic endpoints of the Moving Again static site plus a read-only "
            "view of route page data at /api/v1/routes."
        ),
        version="1.0.0",
        docs_url="/api/v1/docs",
        redoc_url="/api/v1/redoc",
        openapi_url="/api/v1/openapi.json",
        lifespan=lifespan,
    )

    @app.get("/health", include_in_schema=False)
    async def health():
        return {"status": "ok"}

    app.include_router(robots.router, include_in_schema=False)
    app.include_router(routes_api.router)

    return app
