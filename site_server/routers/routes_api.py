"""Routes API: read-only view of route page data.

Serves the same route data, SEO strings, FAQs and related links the
static build renders, so pages can be checked without a full build.
"""

from __future__ import annotations

from typing import Optional

from fastapi import APIRouter, HTTPException, Query

from site_server.services.route_data import get_route_db
from site_utils.route_discovery import get_popular_routes_for_city, get_routes_by_states

router = APIRouter()


def _eq(a: str, b: str) -> bool:
    return (a or "").lower() == (b or "").lower()


# ---------------------------------------------------------------------------
# GET /api/v1/routes (list, filter)
# ---------------------------------------------------------------------------

@router.get(
    "/api/v1/routes",
    summary="List and filter route pages",
    tags=["Routes"],
)
async def list_routes(
    origin: Optional[str] = Query(None, description="Origin city name"),
    destination: Optional[str] = Query(None, description="Destination city name"),
    origin_state: Optional[str] = Query(None, description="Origin state code, e.g. NSW"),
    destination_state: Optional[str] = Query(None, description="Destination state code"),
):
    db = get_route_db()
    results = list(db.routes)

    if origin_state and destination_state:
        results = get_routes_by_states(results, origin_state.upper(), destination_state.upper())
    elif origin_state:
        results = [r for r in results if _eq(r.get("originState"), origin_state)]
    elif destination_state:
        results = [r for r in results if _eq(r.get("destinationState"), destination_state)]
    if origin:
        results = [r for r in results if _eq(r.get("origin"), origin)]
    if destination:
        results = [r for r in results if _eq(r.get("destination"), destination)]

    return {"count": len(results), "results": results}


# ---------------------------------------------------------------------------
# GET /api/v1/routes/{slug} (route page data)
# ---------------------------------------------------------------------------

@router.get(
    "/api/v1/routes/{slug}",
    summary="Get route page data",
    description=(
        "Route frontmatter plus generated SEO title/description, FAQs, related "
        "routes, the reverse route and hub page links. Legacy `-to-` slugs and "
        "reversed pairs resolve to the canonical route."
    ),
    tags=["Routes"],
)
async def get_route(slug: str):
    db = get_route_db()
    detail = db.route_detail(slug)
    if detail is None:
        raise HTTPException(status_code=404, detail=f"Route '{slug}' not found")

    canonical = detail["route"]["slugFs"]
    if canonical != slug:
        detail["canonical_slug"] = canonical
    return detail


# ---------------------------------------------------------------------------
# GET /api/v1/cities/{city}/routes (hub page route lists)
# ---------------------------------------------------------------------------

@router.get(
    "/api/v1/cities/{city}/routes",
    summary="Popular routes for a city hub page",
    tags=["Routes"],
)
async def city_routes(
    city: str,
    limit: int = Query(10, ge=1, le=50, description="Max routes per direction"),
):
    db = get_route_db()
    known = {r["origin"].lower(): r["origin"] for r in db.routes}
    known.update({r["destination"].lower(): r["destination"] for r in db.routes})
    name = known.get(city.replace("-", " ").lower())
    if name is None:
        raise HTTPException(status_code=404, detail=f"City '{city}' not found")

    popular = get_popular_routes_for_city(db.routes, name, limit=limit)
    return {"city": name, **popular}
