#!/usr/bin/env python3
"""
Generate one content file per canonical city pair.

Every unordered pair of cities becomes a single route page, ordered larger
city first (by population) and slugged `origin-destination` to match the
legacy WordPress URLs. The reverse direction is written to
route-redirects.json as a permanent redirect to the canonical page.

Usage:
    python scripts/generate_routes.py
    python scripts/generate_routes.py --dry-run
    python scripts/generate_routes.py --output-dir /tmp/routes
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path

from astro_pages import PROJECT_ROOT, ROUTES_DIR

from site_utils.brand import SITE_URL
from site_utils.geography import CITIES, city_slug, get_distance
from site_utils.route_content import render_route_file

REDIRECTS_PATH = PROJECT_ROOT / "route-redirects.json"


def route_transit_time(distance_km) -> str:
    if not distance_km:
        return "5-10 business days"
    if distance_km < 300:
        return "2-4 business days"
    if distance_km < 600:
        return "3-5 business days"
    if distance_km < 1200:
        return "4-7 business days"
    if distance_km < 2000:
        return "6-9 business days"
    if distance_km < 3000:
        return "8-12 business days"
    return "10-14 business days"


def canonical_pairs(cities=CITIES) -> list[tuple]:
    """Every unordered city pair as (larger, smaller) by population."""
    ordered = sorted(cities, key=lambda c: c[2], reverse=True)
    return [
        (ordered[i], ordered[j])
        for i in range(len(ordered))
        for j in range(i + 1, len(ordered))
    ]


def build_route(origin: tuple, destination: tuple, now: str) -> dict:
    origin_name, origin_state, _ = origin
    dest_name, dest_state, _ = destination
    slug = f"{city_slug(origin_name)}-{city_slug(dest_name)}"
    distance = get_distance(origin_name, dest_name)

    route = {
        "slug": f"/{slug}/",
        "slugFs": slug,
        "title": f"Backloading {origin_name} to {dest_name} | Interstate Removals",
        "metaDescription": (
            f"Affordable backloading from {origin_name} to {dest_name}. Save up to 60% "
            "on your interstate move with Moving Again. Professional service, transit "
            "insurance included."
        ),
        "origin": origin_name,
        "destination": dest_name,
        "originState": origin_state,
        "destinationState": dest_state,
    }
    if distance:
        route["distanceKm"] = distance
    route.update({
        "transitDays": route_transit_time(distance),
        "canonicalUrl": f"{SITE_URL}/{slug}/",
        "relatedSlugs": [f"{city_slug(dest_name)}-{city_slug(origin_name)}"],
        "lastUpdated": now,
    })
    return route


def route_body(origin: str, destination: str) -> str:
    return f"""## {origin} to {destination} Backloading

Moving from {origin} to {destination}? Our backloading service offers an affordable way to transport your furniture and belongings interstate without paying for an entire truck.

### What is Backloading?

Backloading means sharing truck space with other customers heading in the same direction. Our trucks regularly travel between {origin} and {destination}, and we fill remaining space at reduced rates. You get the same professional handling, wrapping, and transit insurance at a lower price.

### Why Choose Moving Again?

- **Save 30-60%** compared to dedicated truck hire
- **Professional handling**: your items are wrapped and secured
- **Transit insurance** included on all moves
- **Flexible pickup**: we work with your schedule

### Service Options

**Standard Backloading**
Our most affordable option. You're flexible with pickup (48-hour window), and we match you with trucks heading from {origin} to {destination}.

**Express Service**
Need tighter timelines? Ask about our express options for priority pickup and faster transit.

### What Can We Move?

We handle all standard household items including:
- Beds, mattresses, and bedroom furniture
- Sofas, lounge suites, and living room items
- Dining tables, chairs, and cabinets
- Fridges, washing machines, and appliances
- Boxes, cartons, and personal effects

For specialty items like pianos, pool tables, or antiques, mention these when getting your quote.

### How to Get Started

1. **Get an instant quote**: enter your inventory in our online system
2. **Confirm your booking**: choose your preferred pickup window
3. **Prepare your items**: we'll provide a preparation checklist
4. **We collect and deliver**: professional handling door-to-door

Ready to save on your {origin} to {destination} move? Get your free quote today.
"""


def generate_all_routes(cities=CITIES, now: str | None = None) -> tuple[list, list]:
    """Return (route dicts, reverse-direction redirects)."""
    now = now or datetime.now(timezone.utc).isoformat()
    routes, redirects = [], []
    for origin, destination in canonical_pairs(cities):
        route = build_route(origin, destination, now)
        routes.append(route)
        redirects.append({
            "source": f"/{route['relatedSlugs'][0]}/",
            "destination": route["slug"],
            "permanent": True,
        })
    return routes, redirects


def write_routes(routes: list, output_dir: Path) -> int:
    output_dir.mkdir(parents=True, exist_ok=True)
    for i, route in enumerate(routes, 1):
        body = route_body(route["origin"], route["destination"])
        path = output_dir / f"{route['slugFs']}.mdx"
        path.write_text(render_route_file(route, body), encoding="utf-8")
        if i % 50 == 0:
            print(f"  ✓ Generated {i}/{len(routes)} routes")
    return len(routes)


def main(argv=None):
    parser = argparse.ArgumentParser(description="Generate route content files")
    parser.add_argument("--output-dir", type=Path, default=ROUTES_DIR,
                        help="Directory for generated route files")
    parser.add_argument("--redirects", type=Path, default=REDIRECTS_PATH,
                        help="Where to write the reverse-direction redirects")
    parser.add_argument("--dry-run", action="store_true",
                        help="Report what would be generated without writing")
    args = parser.parse_args(argv)

    routes, redirects = generate_all_routes()
    print(f"\n🚛 Generating {len(routes)} route pages...")

    if args.dry_run:
        print("🔍 DRY RUN MODE - No files will be written\n")
        for route in routes[:5]:
            print(f"  {route['slugFs']}  ({route['transitDays']})")
        print(f"  ... and {len(routes) - 5} more")
        print(f"\n📝 {len(redirects)} redirects would be saved to {args.redirects.name}")
        return 0

    count = write_routes(routes, args.output_dir)
    print(f"\n✅ Generated {count} route pages in {args.output_dir}")

    args.redirects.write_text(json.dumps(redirects, indent=2), encoding="utf-8")
    print(f"\n📝 {len(redirects)} redirects saved to: {args.redirects.name}")
    print(json.dumps(redirects[:5], indent=2))
    return 0


if __name__ == "__main__":
    sys.exit(main())
