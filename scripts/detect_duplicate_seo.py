#!/usr/bin/env python3
"""
Duplicate title and description report (read-only).

Pulls the title and description props out of every page, groups them
case-insensitively and lists every value used by more than one page.
Template expressions such as ${city} are collapsed to [VAR] so pages built
from the same template are grouped together.

Usage:
    python scripts/detect_duplicate_seo.py
    python scripts/detect_duplicate_seo.py --json
"""

import argparse
import json
import re
import sys
from datetime import datetime, timezone
from pathlib import Path

from astro_pages import PAGES_DIR, PROJECT_ROOT, find_astro_files, relative_path

REPORT_PATH = PROJECT_ROOT / "analysis-duplicate-seo.json"


def _prop_patterns(name):
    return (
        re.compile(name + r"""\s*=\s*["']([^"']+)["']"""),
        re.compile(name + r"\s*=\s*\{`([^`]+)`\}"),
        re.compile(name + r"\s*=\s*\{([^}]+)\}"),
    )


TITLE_PATTERNS = _prop_patterns("title")
DESC_PATTERNS = _prop_patterns("description")
TEMPLATE_VAR_RE = re.compile(r"\$\{.*?\}")


def _first_match(content, patterns):
    for pattern in patterns:
        match = pattern.search(content)
        if match:
            return TEMPLATE_VAR_RE.sub("[VAR]", match.group(1)).strip()
    return None


def extract_seo(content: str) -> dict:
    """Title and description as written in the page, None when absent."""
    return {
        "title": _first_match(content, TITLE_PATTERNS),
        "description": _first_match(content, DESC_PATTERNS),
    }


def find_duplicates(entries, key):
    """[(normalised value, [files])] for values shared by two or more pages."""
    groups = {}
    for entry in entries:
        value = entry.get(key)
        if value:
            groups.setdefault(value.lower().strip(), []).append(entry["file"])
    return [(value, files) for value, files in groups.items() if len(files) > 1]


def analyze(files, pages_dir: Path = PAGES_DIR) -> dict:
    entries, errors = [], []
    for path in files:
        rel = Path(path).relative_to(pages_dir).as_posix()
        try:
            seo = extract_seo(Path(path).read_text(encoding="utf-8"))
        except (OSError, ValueError) as e:
            errors.append({"file": relative_path(path), "error": str(e)})
            continue
        if seo["title"] or seo["description"]:
            entries.append({"file": rel, **seo})
    return {
        "entries": entries,
        "duplicate_titles": find_duplicates(entries, "title"),
        "duplicate_descriptions": find_duplicates(entries, "description"),
        "errors": errors,
    }


def build_report(results: dict) -> dict:
    entries = results["entries"]
    return {
        "analyzedAt": datetime.now(timezone.utc).isoformat(),
        "summary": {
            "totalPages": len(entries),
            "pagesWithTitles": sum(1 for e in entries if e["title"]),
            "pagesWithDescriptions": sum(1 for e in entries if e["description"]),
            "duplicateTitles": len(results["duplicate_titles"]),
            "duplicateDescriptions": len(results["duplicate_descriptions"]),
            "errors": len(results["errors"]),
        },
        "duplicateTitles": [
            {"title": title, "files": files, "count": len(files)}
            for title, files in results["duplicate_titles"]
        ],
        "duplicateDescriptions": [
            {"description": desc, "files": files, "count": len(files)}
            for desc, files in results["duplicate_descriptions"]
        ],
        "errors": results["errors"],
        "allSEO": entries,
    }


def print_report(report: dict):
    summary = report["summary"]
    print("\n" + "=" * 70)
    print("📊 DUPLICATE DETECTION RESULTS")
    print("=" * 70 + "\n")
    print(f"Total Pages Analyzed: {summary['totalPages']}")
    print(f"Pages with Titles: {summary['pagesWithTitles']}")
    print(f"Pages with Descriptions: {summary['pagesWithDescriptions']}\n")

    if report["duplicateTitles"]:
        print("🔴 DUPLICATE TITLES\n")
        for dup in report["duplicateTitles"]:
            print(f'Title: "{dup["title"]}"')
            print(f"   Found in {dup['count']} pages:")
            for file in dup["files"]:
                print(f"   • {file}")
            print()
    else:
        print("✅ No duplicate titles found!\n")

    if report["duplicateDescriptions"]:
        print("🔴 DUPLICATE DESCRIPTIONS\n")
        for dup in report["duplicateDescriptions"]:
            desc = dup["description"]
            preview = desc[:80] + "..." if len(desc) > 80 else desc
            print(f'Description: "{preview}"')
            print(f"   Found in {dup['count']} pages:")
            for file in dup["files"]:
                print(f"   • {file}")
            print()
    else:
        print("✅ No duplicate descriptions found!\n")

    if report["errors"]:
        print("⚠️  Files That Could Not Be Read:\n")
        for entry in report["errors"]:
            print(f"  {entry['file']}: {entry['error']}")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Detect duplicate page titles and descriptions")
    parser.add_argument("--pages", type=Path, default=PAGES_DIR, help="Pages directory")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--output", type=Path, default=REPORT_PATH,
                        help="Where to save the JSON report")
    args = parser.parse_args(argv)

    results = analyze(find_astro_files(args.pages), args.pages)
    report = build_report(results)

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print("\n🔍 Detecting Duplicate Titles and Descriptions")
        print_report(report)
        args.output.write_text(json.dumps(report, indent=2), encoding="utf-8")
        print(f"💾 Full report saved to: {relative_path(args.output)}\n")
    return 1 if results["errors"] else 0


if __name__ == "__main__":
    sys.exit(main())
