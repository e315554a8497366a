"""
Fixed Australian geography tables used by route pages.

Cities, capitals, state names and the road-distance table are module-level
constants. Lookups are case-insensitive on city names.
"""

from __future__ import annotations

import re

# ── Cities ────────────────────────────────────────────────────
# (name, state, population): every city with a route page.

CITIES = [
    ("Sydney", "NSW", 5312163),
    ("Melbourne", "VIC", 5078193),
    ("Brisbane", "QLD", 2514184),
    ("Perth", "WA", 2085973),
    ("Adelaide", "SA", 1376601),
    ("Gold Coast", "QLD", 679127),
    ("Newcastle", "NSW", 322278),
    ("Canberra", "ACT", 453558),
    ("Wollongong", "NSW", 302739),
    ("Hobart", "TAS", 238834),
    ("Geelong", "VIC", 192393),
    ("Townsville", "QLD", 180820),
    ("Cairns", "QLD", 153075),
    ("Darwin", "NT", 147255),
    ("Toowoomba", "QLD", 114024),
    ("Ballarat", "VIC", 109505),
    ("Bendigo", "VIC", 99122),
    ("Launceston", "TAS", 87328),
    ("Mackay", "QLD", 80148),
    ("Bundaberg", "QLD", 70826),
    ("Rockhampton", "QLD", 65195),
    ("Mandurah", "WA", 97641),
    ("Rockingham", "WA", 130000),
    ("Bunbury", "WA", 75106),
    ("Logan City", "QLD", 326615),
]

CAPITAL_CITIES = frozenset([
    "sydney",
    "melbourne",
    "brisbane",
    "perth",
    "adelaide",
    "hobart",
    "canberra",
    "darwin",
])

STATE_NAMES = {
    "NSW": "New South Wales",
    "VIC": "Victoria",
    "QLD": "Queensland",
    "WA": "Western Australia",
    "SA": "South Australia",
    "TAS": "Tasmania",
    "ACT": "Australian Capital Territory",
    "NT": "Northern Territory",
}

# ── Distances (km, by road) ───────────────────────────────────

DISTANCES = {
    "sydney-melbourne": 880,
    "sydney-brisbane": 920,
    "sydney-perth": 3930,
    "sydney-adelaide": 1380,
    "sydney-canberra": 290,
    "sydney-hobart": 1180,
    "sydney-darwin": 3930,
    "sydney-gold-coast": 840,
    "sydney-newcastle": 160,
    "sydney-wollongong": 80,
    "melbourne-brisbane": 1670,
    "melbourne-perth": 3410,
    "melbourne-adelaide": 730,
    "melbourne-hobart": 630,
    "melbourne-canberra": 660,
    "melbourne-geelong": 75,
    "melbourne-ballarat": 115,
    "melbourne-bendigo": 150,
    "brisbane-perth": 4310,
    "brisbane-adelaide": 1930,
    "brisbane-darwin": 3420,
    "brisbane-gold-coast": 80,
    "brisbane-townsville": 1350,
    "brisbane-cairns": 1700,
    "brisbane-toowoomba": 130,
    "brisbane-mackay": 970,
    "perth-adelaide": 2700,
    "perth-darwin": 4030,
    "perth-mandurah": 75,
    "perth-rockingham": 50,
    "perth-bunbury": 175,
    "adelaide-darwin": 3030,
    "hobart-launceston": 200,
}


def city_slug(name: str) -> str:
    """'Gold Coast' -> 'gold-coast'."""
    return re.sub(r"\s+", "-", (name or "").strip().lower())


CITY_SLUGS = {city_slug(name): name for name, _, _ in CITIES}


def is_capital(city: str) -> bool:
    return (city or "").strip().lower() in CAPITAL_CITIES


def get_distance(origin: str, destination: str) -> int | None:
    """Road distance between two cities in either direction, or None."""
    a, b = city_slug(origin), city_slug(destination)
    return DISTANCES.get(f"{a}-{b}") or DISTANCES.get(f"{b}-{a}")


def split_route_slug(slug: str) -> tuple[str, str] | None:
    """Split 'gold-coast-cairns' into ('gold-coast', 'cairns').

    Returns None when the slug is not two known city slugs.
    """
    slug = slug.strip("/")
    for first in sorted(CITY_SLUGS, key=len, reverse=True):
        if slug.startswith(first + "-"):
            rest = slug[len(first) + 1:]
            if rest.startswith("to-") and rest[3:] in CITY_SLUGS:
                return first, rest[3:]
            if rest in CITY_SLUGS:
                return first, rest
    return None
