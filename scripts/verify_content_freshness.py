#!/usr/bin/env python3
"""
Verify content freshness dates in the built site (read-only).

Checks every dist/**/*.html for an article:modified_time meta tag, that its
value is an ISO-8601 timestamp with a timezone, and whether it looks like
the build time (within the last two hours) rather than a git commit date.
Pages whose source file can be found are cross-checked against git. Files
that cannot be read are listed as errors and the rest are still checked.

Run `npm run build` first.

Usage:
    python scripts/verify_content_freshness.py
    python scripts/verify_content_freshness.py --json
"""

import argparse
import json
import re
import sys
from datetime import datetime, timedelta, timezone
from pathlib import Path

from astro_pages import DIST_DIR, PAGES_DIR, ROUTES_DIR, relative_path

from site_utils.file_dates import get_git_commit_date

BUILD_TIME_WINDOW = timedelta(hours=2)
GIT_MATCH_TOLERANCE = timedelta(hours=1)

MODIFIED_TIME_RE = re.compile(
    r"""<meta\s+property=["']article:modified_time["']\s+content=["']([^"']+)["']""",
    re.IGNORECASE,
)
SCHEMA_DATE_RE = re.compile(r"""["']dateModified["']\s*:\s*["']([^"']+)["']""", re.IGNORECASE)
TIMEZONE_RE = re.compile(r"(Z|[+-]\d{2}:\d{2})$")


def parse_iso_date(value: str) -> datetime | None:
    """Parse an ISO-8601 timestamp that carries both a time and a timezone."""
    if "T" not in value or not TIMEZONE_RE.search(value):
        return None
    try:
        return datetime.fromisoformat(value.replace("Z", "+00:00"))
    except ValueError:
        return None


def is_build_time(date: datetime, now: datetime | None = None) -> bool:
    now = now or datetime.now(timezone.utc)
    return now - date < BUILD_TIME_WINDOW


def find_source_file(html_path: Path, dist_dir: Path = DIST_DIR,
                     pages_dir: Path = PAGES_DIR, routes_dir: Path = ROUTES_DIR) -> Path | None:
    """Map dist/<slug>/index.html back to the page or route file that built it."""
    rel = Path(html_path).relative_to(dist_dir).as_posix()
    rel = re.sub(r"(^|/)index\.html$", "", rel)
    rel = re.sub(r"\.html$", "", rel).strip("/")
    if not rel:
        return pages_dir / "index.astro"

    candidates = [pages_dir / f"{rel}.astro"]
    if "/" not in rel:
        candidates += [routes_dir / f"{rel}.md", routes_dir / f"{rel}.mdx"]
    for candidate in candidates:
        if candidate.is_file():
            return candidate
    return None


def new_results() -> dict:
    return {
        "total_pages": 0,
        "with_meta_tag": 0,
        "with_valid_date": 0,
        "with_git_date": 0,
        "with_build_time": 0,
        "with_schema_date": 0,
        "missing_meta_tag": [],
        "invalid_date": [],
        "build_time_only": [],
        "errors": [],
    }


def analyze_page(html_path: Path, results: dict, now: datetime | None = None,
                 dist_dir: Path = DIST_DIR):
    html = Path(html_path).read_text(encoding="utf-8")
    rel = relative_path(html_path)
    results["total_pages"] += 1

    match = MODIFIED_TIME_RE.search(html)
    if not match:
        results["missing_meta_tag"].append(rel)
        return
    results["with_meta_tag"] += 1

    value = match.group(1)
    date = parse_iso_date(value)
    if date is None:
        results["invalid_date"].append({"path": rel, "date": value})
        return
    results["with_valid_date"] += 1

    if is_build_time(date, now):
        results["with_build_time"] += 1
        results["build_time_only"].append(rel)
    else:
        source = find_source_file(html_path, dist_dir=dist_dir)
        git_date = parse_iso_date(get_git_commit_date(source) or "") if source else None
        if git_date and abs(date - git_date) < GIT_MATCH_TOLERANCE:
            results["with_git_date"] += 1

    if SCHEMA_DATE_RE.search(html):
        results["with_schema_date"] += 1


def _pct(count: int, total: int) -> str:
    return f"{count / total * 100:.1f}%" if total else "0.0%"


def print_report(results: dict):
    total = results["total_pages"]
    print("📊 Results:\n")
    print(f"Total Pages: {total}")
    for label, key in (("Meta Tag", "with_meta_tag"), ("Valid Date", "with_valid_date"),
                       ("Git Date", "with_git_date"), ("Schema dateModified", "with_schema_date"),
                       ("Build Time Only", "with_build_time")):
        print(f"Pages with {label}: {results[key]} ({_pct(results[key], total)})")

    missing = results["missing_meta_tag"]
    if missing:
        print(f"\n❌ Pages Missing Meta Tag ({len(missing)}):")
        for path in missing[:10]:
            print(f"   - {path}")
        if len(missing) > 10:
            print(f"   ... and {len(missing) - 10} more")

    if results["invalid_date"]:
        print(f"\n⚠️  Pages with Invalid Date Format ({len(results['invalid_date'])}):")
        for entry in results["invalid_date"][:5]:
            print(f"   - {entry['path']}: {entry['date']}")

    if results["errors"]:
        print(f"\n❌ Files That Could Not Be Read ({len(results['errors'])}):")
        for entry in results["errors"]:
            print(f"   - {entry['path']}: {entry['error']}")

    build_only = results["build_time_only"]
    if build_only:
        print(f"\n⚠️  Pages Using Build Time (may need Git dates) ({len(build_only)}):")
        for path in build_only[:10]:
            print(f"   - {path}")
        if len(build_only) > 10:
            print(f"   ... and {len(build_only) - 10} more")

    print("\n📋 Assessment:")
    if not missing and not results["invalid_date"] and not results["errors"]:
        print("✅ All pages have valid article:modified_time meta tags")
        if results["with_build_time"] > results["with_git_date"]:
            print("⚠️  Many pages are using build time instead of Git commit dates")
        else:
            print("✅ Most pages are using Git commit dates")
        if results["with_schema_date"]:
            print(f"✅ {results['with_schema_date']} pages also have Schema.org dateModified")
    else:
        print("❌ Some pages are missing meta tags or have invalid dates")
    print()


def main(argv=None):
    parser = argparse.ArgumentParser(description="Verify content freshness dates in dist/")
    parser.add_argument("--dist", type=Path, default=DIST_DIR, help="Built site directory")
    parser.add_argument("--json", action="store_true", help="Output as JSON")
    args = parser.parse_args(argv)

    if not args.dist.is_dir():
        print(f'❌ {args.dist} not found. Run "npm run build" first.', file=sys.stderr)
        return 1

    html_files = sorted(args.dist.rglob("*.html"))
    results = new_results()
    if not args.json:
        print("🔍 Verifying Content Freshness Implementation...\n")
        print(f"Found {len(html_files)} HTML files to analyze...\n")
    for path in html_files:
        try:
            analyze_page(path, results, dist_dir=args.dist)
        except (OSError, ValueError) as e:
            results["errors"].append({"path": relative_path(path), "error": str(e)})

    if args.json:
        print(json.dumps(results, indent=2))
    else:
        print_report(results)
    return 1 if results["missing_meta_tag"] or results["invalid_date"] or results["errors"] else 0


if __name__ == "__main__":
    sys.exit(main())
