#!/usr/bin/env python3
"""
Meta description length report (read-only).

Buckets every page into ideal (120-160), too short, too long and missing
(unreadable files are listed separately and make the exit code 1),
prints the offenders and saves meta-description-analysis.json.

Usage:
    python scripts/analyze_meta_descriptions.py
    python scripts/analyze_meta_descriptions.py --json     # print JSON instead
"""

import argparse
import json
import re
import sys
from pathlib import Path

from astro_pages import PAGES_DIR, PROJECT_ROOT, find_astro_files, relative_path

from site_utils.brand import SITE_URL
from site_utils.seo_generator import DESC_MAX_LENGTH, DESC_MIN_LENGTH

REPORT_PATH = PROJECT_ROOT / "meta-description-analysis.json"

LAYOUT_DESC_RE = re.compile(r"<Layout\b[^>]*?\bdescription=([\"'])(.+?)\1", re.DOTALL)
ANY_DESC_RE = re.compile(r"\bdescription\s*=\s*([\"'])(.+?)\1", re.DOTALL)

BUCKETS = ("ideal", "tooShort", "tooLong", "missing")


def extract_description(content: str) -> str | None:
    """Layout description prop, else any description="..." attribute."""
    for pattern in (LAYOUT_DESC_RE, ANY_DESC_RE):
        match = pattern.search(content)
        if match:
            return match.group(2)
    return None


def page_url(path: Path, pages_dir: Path = PAGES_DIR) -> str:
    rel = Path(path).relative_to(pages_dir).with_suffix("").as_posix()
    if rel == "index":
        rel = ""
    elif rel.endswith("/index"):
        rel = rel[: -len("/index")]
    return f"{SITE_URL}/{rel}/" if rel else f"{SITE_URL}/"


def analyze(files, pages_dir: Path = PAGES_DIR) -> dict:
    """Bucket pages by description length. Unreadable files go to errors."""
    results = {bucket: [] for bucket in BUCKETS}
    results["errors"] = []
    for path in files:
        entry = {"file": relative_path(path)}
        try:
            entry["url"] = page_url(path, pages_dir)
            description = extract_description(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            results["errors"].append({**entry, "error": str(e)})
            continue
        if not description:
            results["missing"].append(entry)
            continue
        entry.update(description=description, length=len(description))
        if len(description) < DESC_MIN_LENGTH:
            results["tooShort"].append(entry)
        elif len(description) > DESC_MAX_LENGTH:
            results["tooLong"].append(entry)
        else:
            results["ideal"].append(entry)
    return results


def build_report(results: dict) -> dict:
    return {
        "summary": {
            "total": sum(len(results[bucket]) for bucket in BUCKETS),
            **{key: len(entries) for key, entries in results.items()},
        },
        "tooLong": results["tooLong"],
        "tooShort": results["tooShort"],
        "missing": results["missing"],
        "errors": results["errors"],
    }


def print_report(results: dict):
    print("\n📊 Meta Description Length Analysis\n")
    print("=" * 60)
    print(f"\n✅ Ideal Length ({DESC_MIN_LENGTH}-{DESC_MAX_LENGTH} chars): {len(results['ideal'])} pages")
    print(f"🟡 Too Short (< {DESC_MIN_LENGTH} chars): {len(results['tooShort'])} pages")
    print(f"🔴 Too Long (> {DESC_MAX_LENGTH} chars): {len(results['tooLong'])} pages")
    print(f"❌ Missing: {len(results['missing'])} pages")
    if results["errors"]:
        print(f"⚠️  Unreadable: {len(results['errors'])} files")

    if results["tooLong"]:
        print(f"\n🔴 Pages with Descriptions Too Long (> {DESC_MAX_LENGTH} chars):\n")
        for page in results["tooLong"]:
            print(f"  {page['url']}")
            print(f"    Length: {page['length']} chars")
            print(f"    Description: {page['description'][:80]}...")
            print(f"    File: {page['file']}\n")

    if results["tooShort"]:
        print(f"\n🟡 Pages with Descriptions Too Short (< {DESC_MIN_LENGTH} chars):\n")
        for page in results["tooShort"]:
            print(f"  {page['url']}")
            print(f"    Length: {page['length']} chars")
            print(f"    Description: {page['description']}")
            print(f"    File: {page['file']}\n")

    if results["missing"]:
        print("\n❌ Pages Missing Descriptions:\n")
        for page in results["missing"]:
            print(f"  {page['url']}")
            print(f"    File: {page['file']}\n")

    if results["errors"]:
        print("\n⚠️  Files That Could Not Be Read:\n")
        for entry in results["errors"]:
            print(f"  {entry['file']}: {entry['error']}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Analyze meta description lengths")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--output", type=Path, default=REPORT_PATH,
                        help="Where to save the JSON report")
    args = parser.parse_args(argv)

    results = analyze(find_astro_files(PAGES_DIR), PAGES_DIR)
    report = build_report(results)

    if args.json:
        print(json.dumps(report, indent=2))
        return 1 if results["errors"] else 0

    print_report(results)
    args.output.write_text(json.dumps(report, indent=2), encoding="utf-8")
    print(f"\n💾 Full report saved to: {relative_path(args.output)}\n")
    return 1 if results["errors"] else 0


if __name__ == "__main__":
    sys.exit(main())
