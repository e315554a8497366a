"""
Route discovery: filter and rank the route collection.

Popular routes rank capital-city counterparts first, then by the shortest
transit estimate. Transit strings are free text ("3-5 business days"); the
first integer is the sort key and anything unparseable sorts last.
"""

from __future__ import annotations

import re

from site_utils.geography import is_capital

UNKNOWN_TRANSIT_DAYS = 999

POPULAR_CITIES = [
    "Sydney",
    "Melbourne",
    "Brisbane",
    "Perth",
    "Adelaide",
    "Canberra",
    "Hobart",
    "Darwin",
]


def extract_days(transit_days) -> int:
    """'3-5 business days' -> 3. Unparseable text -> 999."""
    match = re.search(r"(\d+)", str(transit_days or ""))
    return int(match.group(1)) if match else UNKNOWN_TRANSIT_DAYS


def get_routes_from_city(routes: list[dict], city: str) -> list[dict]:
    return [r for r in routes if r.get("origin") == city]


def get_routes_to_city(routes: list[dict], city: str) -> list[dict]:
    return [r for r in routes if r.get("destination") == city]


def get_routes_for_city(routes: list[dict], city: str) -> list[dict]:
    """Routes with the city at either end."""
    return [r for r in routes if city in (r.get("origin"), r.get("destination"))]


def get_routes_by_states(routes: list[dict], origin_state: str,
                         destination_state: str) -> list[dict]:
    return [
        r for r in routes
        if r.get("originState") == origin_state
        and r.get("destinationState") == destination_state
    ]


def rank_routes(routes: list[dict], counterpart: str = "destination") -> list[dict]:
    """Capital counterparts first, then ascending transit days. Stable."""
    return sorted(
        routes,
        key=lambda r: (
            not is_capital(r.get(counterpart, "")),
            extract_days(r.get("transitDays")),
        ),
    )


def get_popular_routes_for_city(routes: list[dict], city: str,
                                limit: int = 10) -> dict:
    """Top routes leaving and arriving at a city, ranked for hub pages."""
    return {
        "from_city": rank_routes(get_routes_from_city(routes, city), "destination")[:limit],
        "to_city": rank_routes(get_routes_to_city(routes, city), "origin")[:limit],
    }


def get_all_cities(routes: list[dict]) -> set[str]:
    cities = set()
    for r in routes:
        for key in ("origin", "destination"):
            if r.get(key):
                cities.add(r[key])
    return cities


def get_orphan_routes(routes: list[dict], popular_cities: list[str] | None = None) -> list[dict]:
    """Routes touching no popular city (least likely to be linked internally)."""
    popular = set(POPULAR_CITIES if popular_cities is None else popular_cities)
    return [
        r for r in routes
        if r.get("origin") not in popular and r.get("destination") not in popular
    ]
