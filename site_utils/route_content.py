"""
Route content collection schema, frontmatter parsing and loading.

Each route page is a Markdown/MDX file under src/content/routes/ whose YAML
frontmatter describes one canonical city pair. Routes are plain dicts keyed
by the frontmatter field names (slugFs, originState, ...).
"""

from __future__ import annotations

import logging
from pathlib import Path

import yaml

logger = logging.getLogger(__name__)

FRONTMATTER_DELIMITER = "---"

# field -> (accepted types, required)
ROUTE_FIELDS = {
    "slug": ((str,), False),
    "slugFs": ((str,), True),
    "title": ((str,), True),
    "metaDescription": ((str,), False),
    "origin": ((str,), True),
    "destination": ((str,), True),
    "originState": ((str,), True),
    "destinationState": ((str,), True),
    "distanceKm": ((int, float), False),
    "transitDays": ((str,), False),
    "canonicalUrl": ((str,), False),
    "relatedSlugs": ((list,), False),
    "lastUpdated": ((str,), False),
}


class RouteValidationError(ValueError):
    """Route frontmatter is missing a required field or has a bad type."""


def parse_frontmatter(text: str) -> tuple[dict, str]:
    """Split a content file into (frontmatter dict, body)."""
    if not text.startswith(FRONTMATTER_DELIMITER):
        return {}, text
    end = text.find(f"\n{FRONTMATTER_DELIMITER}", len(FRONTMATTER_DELIMITER))
    if end == -1:
        raise RouteValidationError("Unterminated frontmatter block")
    raw = text[len(FRONTMATTER_DELIMITER):end]
    body = text[end + len(FRONTMATTER_DELIMITER) + 1:].lstrip("\n")
    try:
        data = yaml.safe_load(raw) or {}
    except yaml.YAMLError as e:
        raise RouteValidationError(f"Invalid YAML frontmatter: {e}") from e
    if not isinstance(data, dict):
        raise RouteValidationError("Frontmatter must be a mapping")
    return data, body


def validate_route(data: dict) -> dict:
    """Check route data against ROUTE_FIELDS. Unknown keys are dropped."""
    route = {}
    for field, (types, required) in ROUTE_FIELDS.items():
        value = data.get(field)
        if value is None:
            if required:
                raise RouteValidationError(f"Missing required field: {field}")
            continue
        # bool is an int subclass; a YAML 'yes' is never a distance
        if isinstance(value, bool) or not isinstance(value, types):
            raise RouteValidationError(
                f"Field {field} should be {'/'.join(t.__name__ for t in types)}, "
                f"got {type(value).__name__}"
            )
        if field == "relatedSlugs" and not all(isinstance(s, str) for s in value):
            raise RouteValidationError("Field relatedSlugs must be a list of strings")
        route[field] = value
    return route


def load_route(path: Path) -> dict:
    """Load and validate a single route file."""
    data, _ = parse_frontmatter(Path(path).read_text(encoding="utf-8"))
    return validate_route(data)


def load_routes(routes_dir: Path) -> list[dict]:
    """Load every route file in a directory, skipping invalid ones."""
    routes_dir = Path(routes_dir)
    if not routes_dir.is_dir():
        logger.warning("Routes directory not found at %s", routes_dir)
        return []

    routes = []
    for path in sorted(routes_dir.iterdir()):
        if path.suffix not in (".md", ".mdx"):
            continue
        try:
            routes.append(load_route(path))
        except (OSError, RouteValidationError) as e:
            logger.warning("Skipping route %s: %s", path.name, e)
    logger.info("Loaded %d routes from %s", len(routes), routes_dir)
    return routes


def render_route_file(route: dict, body: str) -> str:
    """Serialize a route dict back into a content file."""
    frontmatter = yaml.safe_dump(
        validate_route(route), sort_keys=False, allow_unicode=True, width=1000,
    )
    return f"{FRONTMATTER_DELIMITER}\n{frontmatter}{FRONTMATTER_DELIMITER}\n\n{body.lstrip()}"
