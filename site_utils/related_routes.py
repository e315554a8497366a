"""Related-route links shown at the foot of each route page."""

from __future__ import annotations

from site_utils.geography import city_slug

RELATED_CAPITALS = {"Sydney", "Melbourne", "Brisbane", "Perth", "Adelaide"}


def get_related_routes(routes: list[dict], current: dict, by: str = "origin",
                       limit: int = 6) -> list[dict]:
    """Other routes sharing the current route's origin (or destination).

    Routes whose other end is a major capital come first; order is
    otherwise preserved.
    """
    if by not in ("origin", "destination"):
        raise ValueError(f"by must be 'origin' or 'destination', got {by!r}")
    other = "destination" if by == "origin" else "origin"
    current_slug = current.get("slugFs")
    match_value = current.get(by)

    related = [
        r for r in routes
        if r.get("slugFs") != current_slug and r.get(by) == match_value
    ]
    related.sort(key=lambda r: r.get(other) not in RELATED_CAPITALS)
    return related[:limit]


def get_reverse_route(routes: list[dict], current: dict) -> dict | None:
    """The destination -> origin route, if the collection has one."""
    origin = city_slug(current.get("origin", ""))
    destination = city_slug(current.get("destination", ""))
    candidates = {f"{destination}-{origin}", f"{destination}-to-{origin}"}
    for r in routes:
        if r.get("slugFs") in candidates:
            return r
    return None
