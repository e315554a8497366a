#!/usr/bin/env python3
"""
Merge route redirects into vercel.json.

- keeps every non-route redirect as-is
- drops old `city-to-city` -> `city-to-city` route redirects
- adds the reverse-direction redirects from route-redirects.json
- adds legacy `-to-` URL redirects for both directions of each pair
- removes duplicate (source, destination) pairs, first one wins

Usage:
    python scripts/update_redirects.py
    python scripts/update_redirects.py --dry-run
"""

import argparse
import json
import re
import sys
from pathlib import Path

from astro_pages import PROJECT_ROOT

from site_utils.geography import split_route_slug

VERCEL_JSON = PROJECT_ROOT / "vercel.json"
ROUTE_REDIRECTS = PROJECT_ROOT / "route-redirects.json"

OLD_ROUTE_PATH_RE = re.compile(r"^/[a-z-]+-to-[a-z-]+/$")


def is_old_route_redirect(redirect: dict) -> bool:
    return bool(OLD_ROUTE_PATH_RE.match(redirect.get("source", ""))
                and OLD_ROUTE_PATH_RE.match(redirect.get("destination", "")))


def _with_to(path: str) -> str | None:
    """'/sydney-melbourne/' -> '/sydney-to-melbourne/'."""
    parts = split_route_slug(path)
    if not parts:
        return None
    return f"/{parts[0]}-to-{parts[1]}/"


def legacy_redirects(route_redirects: list) -> list:
    """`-to-` URLs for both directions of every redirected pair."""
    extra = []
    for redirect in route_redirects:
        for path in (redirect["destination"], redirect["source"]):
            legacy = _with_to(path)
            if legacy:
                extra.append({
                    "source": legacy,
                    "destination": redirect["destination"],
                    "permanent": True,
                })
    return extra


def dedupe_redirects(redirects: list) -> list:
    seen = set()
    unique = []
    for redirect in redirects:
        key = (redirect["source"], redirect["destination"])
        if key in seen:
            continue
        seen.add(key)
        unique.append(redirect)
    return unique


def merge_redirects(vercel_config: dict, route_redirects: list) -> dict:
    """Return a copy of vercel_config with route redirects merged in."""
    general = [r for r in vercel_config.get("redirects", []) if not is_old_route_redirect(r)]
    merged = dict(vercel_config)
    merged["redirects"] = dedupe_redirects(
        general + list(route_redirects) + legacy_redirects(route_redirects)
    )
    return merged


def main(argv=None):
    parser = argparse.ArgumentParser(description="Merge route redirects into vercel.json")
    parser.add_argument("--vercel", type=Path, default=VERCEL_JSON)
    parser.add_argument("--redirects", type=Path, default=ROUTE_REDIRECTS)
    parser.add_argument("--dry-run", action="store_true",
                        help="Report counts without writing vercel.json")
    args = parser.parse_args(argv)

    try:
        vercel_config = json.loads(args.vercel.read_text(encoding="utf-8"))
        route_redirects = json.loads(args.redirects.read_text(encoding="utf-8"))
    except (OSError, json.JSONDecodeError) as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1

    kept = [r for r in vercel_config.get("redirects", []) if not is_old_route_redirect(r)]
    print(f"Found {len(kept)} general redirects to keep")
    print(f"Found {len(route_redirects)} new route redirects")

    merged = merge_redirects(vercel_config, route_redirects)
    print(f"Total unique redirects: {len(merged['redirects'])}")

    if args.dry_run:
        print("🔍 DRY RUN MODE - vercel.json not modified")
        return 0

    args.vercel.write_text(json.dumps(merged, indent=2) + "\n", encoding="utf-8")
    print(f"✅ Updated {args.vercel.name} with new redirects")
    return 0


if __name__ == "__main__":
    sys.exit(main())
