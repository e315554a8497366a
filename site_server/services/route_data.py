"""Route content service: singleton loader for the routes API.

Loads every route file in the content collection once and answers slug
lookups, including legacy `origin-to-destination` slugs and reversed
pairs that redirect to the canonical page.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from site_server.config import ROUTES_DIR
from site_utils.faq_generator import generate_faqs_for_route
from site_utils.geography import city_slug, split_route_slug
from site_utils.hub_pages import get_city_hub_url
from site_utils.migration_stats import NET_INTERSTATE_MIGRATION, format_migration, get_migration_trend
from site_utils.related_routes import get_related_routes, get_reverse_route
from site_utils.route_content import load_routes
from site_utils.seo_generator import generate_route_seo

logger = logging.getLogger(__name__)


class RouteDB:
    """Singleton route collection loaded from the content directory."""

    def __init__(self) -> None:
        self._routes: list[dict] = []
        self._by_slug: dict[str, dict] = {}  # slugFs → route
        self._loaded = False

    def load(self, routes_dir: Path | None = None) -> None:
        """Load routes from disk. Safe to call multiple times (no-ops after first)."""
        if self._loaded:
            return

        rdir = routes_dir or ROUTES_DIR
        if rdir.is_dir():
            self.set_routes(load_routes(rdir))
        else:
            logger.warning("Routes dir not found at %s", rdir)
        self._loaded = True

    def set_routes(self, routes: list[dict]) -> None:
        self._routes = list(routes)
        self._by_slug = {r["slugFs"]: r for r in self._routes}
        self._loaded = True

    @property
    def routes(self) -> list[dict]:
        self.load()
        return self._routes

    def resolve_slug(self, slug: str) -> Optional[str]:
        """Canonical slugFs for a slug, legacy `-to-` slug, or reversed pair."""
        self.load()
        normalized = slug.strip("/").lower()
        if normalized in self._by_slug:
            return normalized

        parts = split_route_slug(normalized)
        if not parts:
            return None
        first, second = parts
        for candidate in (f"{first}-{second}", f"{second}-{first}"):
            if candidate in self._by_slug:
                return candidate
        return None

    def get_route(self, slug: str) -> Optional[dict]:
        canonical = self.resolve_slug(slug)
        return self._by_slug.get(canonical) if canonical else None

    def route_detail(self, slug: str) -> Optional[dict]:
        """Everything a route page renders: SEO, FAQs, related links."""
        route = self.get_route(slug)
        if route is None:
            return None

        reverse = get_reverse_route(self._routes, route)
        return {
            "route": route,
            "seo": generate_route_seo(route),
            "faqs": generate_faqs_for_route(route),
            "related": {
                "from_origin": [r["slugFs"] for r in get_related_routes(self._routes, route, by="origin")],
                "to_destination": [
                    r["slugFs"] for r in get_related_routes(self._routes, route, by="destination")
                ],
            },
            "reverse": reverse["slugFs"] if reverse else None,
            "hubs": {
                city_slug(route["origin"]): get_city_hub_url(route["origin"]),
                city_slug(route["destination"]): get_city_hub_url(route["destination"]),
            },
            "migration": {
                state: {"net": format_migration(state), "trend": get_migration_trend(state)}
                for state in (route["originState"], route["destinationState"])
                if state in NET_INTERSTATE_MIGRATION
            },
        }


# Module-level singleton
_db: RouteDB | None = None


def get_route_db() -> RouteDB:
    """FastAPI dependency returning the singleton RouteDB instance."""
    global _db
    if _db is None:
        _db = RouteDB()
        _db.load()
    return _db
