"""Shared fixtures for site server tests.

Provides:
- route_db: a RouteDB preloaded with a small route collection
- api_client: TestClient on a minimal app with only the routes API router
"""

from unittest.mock import patch

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from site_server.routers import routes_api
from site_server.services.route_data import RouteDB

# ---------------------------------------------------------------------------
# Sample route collection
# ---------------------------------------------------------------------------


def sample_route(origin, destination, origin_state, destination_state, transit, distance=None):
    slug = f"{origin.lower().replace(' ', '-')}-{destination.lower().replace(' ', '-')}"
    route = {
        "slug": f"/{slug}/",
        "slugFs": slug,
        "title": f"Backloading {origin} to {destination} | Interstate Removals",
        "origin": origin,
        "destination": destination,
        "originState": origin_state,
        "destinationState": destination_state,
        "transitDays": transit,
    }
    if distance:
        route["distanceKm"] = distance
    return route


SAMPLE_ROUTES = [
    sample_route("Sydney", "Melbourne", "NSW", "VIC", "3-5 business days", 880),
    sample_route("Sydney", "Brisbane", "NSW", "QLD", "3-5 business days", 920),
    sample_route("Sydney", "Perth", "NSW", "WA", "8-12 business days", 3930),
    sample_route("Melbourne", "Brisbane", "VIC", "QLD", "4-7 business days", 1670),
    sample_route("Gold Coast", "Cairns", "QLD", "QLD", "4-7 business days"),
    sample_route("Brisbane", "Gold Coast", "QLD", "QLD", "2-4 business days", 80),
]


@pytest.fixture
def route_db():
    db = RouteDB()
    db.set_routes(SAMPLE_ROUTES)
    return db


@pytest.fixture
def api_client(route_db):
    app = FastAPI()
    app.include_router(routes_api.router)
    with patch("site_server.routers.routes_api.get_route_db", return_value=route_db):
        yield TestClient(app)
