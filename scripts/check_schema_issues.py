#!/usr/bin/env python3
"""
Schema markup report for every page (read-only).

Flags LocalBusiness pages without a telephone, FAQ sections without
FAQPage schema, pages without BreadcrumbList schema and LocalBusiness pages
without an aggregateRating. Missing ratings are optional and are not
counted in the issue total. Exits 1 when a telephone is missing or a page
could not be read.

Usage:
    python scripts/check_schema_issues.py
    python scripts/check_schema_issues.py --json
"""

import argparse
import json
import re
import sys
from datetime import datetime, timezone
from pathlib import Path

from astro_pages import PAGES_DIR, PROJECT_ROOT, find_astro_files, relative_path
from fix_schema_telephone import LOCAL_BUSINESS_RE, SCHEMA_DATA_RE

REPORT_PATH = PROJECT_ROOT / "schema-issues-report.json"

FAQ_ITEM_RE = re.compile(r"<details[^>]*>.*?</details>", re.DOTALL)

ISSUE_TYPES = ("missing-telephone", "missing-faq-schema", "missing-breadcrumb", "missing-rating")
OPTIONAL_ISSUES = {"missing-rating"}


def check_schema(content: str, page: str) -> list:
    """Issues for one page. ``page`` is its path relative to the pages dir."""
    issues = []
    local_business = bool(LOCAL_BUSINESS_RE.search(content))

    if local_business:
        schema_data = SCHEMA_DATA_RE.search(content)
        searched = schema_data.group(1) if schema_data else content
        if "telephone" not in searched:
            issues.append({"type": "missing-telephone", "severity": "high",
                           "message": "LocalBusiness schema missing telephone field"})

    if "<details" in content and ("summary" in content or "Frequently Asked Questions" in content):
        faq_count = len(FAQ_ITEM_RE.findall(content))
        if faq_count and "FAQPage" not in content:
            issues.append({"type": "missing-faq-schema", "severity": "medium",
                           "message": f"Found {faq_count} FAQ items but no FAQPage schema",
                           "faqCount": faq_count})

    wants_breadcrumbs = page != "index.astro" and "[...slug]" not in page
    if wants_breadcrumbs and "BreadcrumbList" not in content:
        issues.append({"type": "missing-breadcrumb", "severity": "low",
                       "message": "Page could benefit from BreadcrumbList schema"})

    if local_business and "aggregateRating" not in content and "AggregateRating" not in content:
        issues.append({"type": "missing-rating", "severity": "low",
                       "message": "LocalBusiness could include aggregateRating for star snippets (optional)"})

    return issues


def analyze(files, pages_dir: Path = PAGES_DIR) -> dict:
    by_type = {issue_type: [] for issue_type in ISSUE_TYPES}
    pages, errors = [], []
    for path in files:
        page = Path(path).relative_to(pages_dir).as_posix()
        try:
            issues = check_schema(Path(path).read_text(encoding="utf-8"), page)
        except (OSError, ValueError) as e:
            errors.append({"file": relative_path(path), "error": str(e)})
            continue
        file = relative_path(path)
        pages.append({"file": file, "issues": issues})
        for issue in issues:
            by_type[issue["type"]].append({"file": file, **issue})
    return {"pages": pages, "issuesByType": by_type, "errors": errors}


def total_issues(results: dict) -> int:
    return sum(len(found) for issue_type, found in results["issuesByType"].items()
               if issue_type not in OPTIONAL_ISSUES)


def _print_section(heading, issues, marker, limit=None, with_message=True):
    if not issues:
        return
    print(f"\n{heading}")
    print("─" * 70)
    for issue in issues[:limit]:
        print(f"  {marker} {issue['file']}")
        if with_message:
            print(f"     {issue['message']}")
    if limit and len(issues) > limit:
        print(f"  ... and {len(issues) - limit} more pages")


def print_report(results: dict):
    by_type = results["issuesByType"]
    _print_section("🔴 HIGH PRIORITY: Missing Telephone in LocalBusiness Schema",
                   by_type["missing-telephone"], "❌")
    _print_section("🟡 MEDIUM PRIORITY: Missing FAQPage Schema",
                   by_type["missing-faq-schema"], "⚠️ ")
    _print_section("🔵 LOW PRIORITY: Missing BreadcrumbList Schema",
                   by_type["missing-breadcrumb"], "💡", limit=10, with_message=False)
    _print_section("💡 OPTIONAL: Missing aggregateRating (for star snippets)",
                   by_type["missing-rating"], "💡", limit=5, with_message=False)

    print("\n" + "=" * 70)
    print("\n📊 SUMMARY\n")
    print(f"Total Pages Analyzed: {len(results['pages'])}")
    print(f"Pages with Issues: {sum(1 for p in results['pages'] if p['issues'])}")
    print("\nIssue Breakdown:")
    print(f"  🔴 Missing Telephone: {len(by_type['missing-telephone'])}")
    print(f"  🟡 Missing FAQ Schema: {len(by_type['missing-faq-schema'])}")
    print(f"  🔵 Missing Breadcrumbs: {len(by_type['missing-breadcrumb'])}")
    print(f"  💡 Missing Ratings (optional): {len(by_type['missing-rating'])}")

    if results["errors"]:
        print("\n⚠️  Files That Could Not Be Read:\n")
        for entry in results["errors"]:
            print(f"  {entry['file']}: {entry['error']}")

    total = total_issues(results)
    if not total:
        print("\n✅ No critical schema issues found!")
        return
    print(f"\n⚠️  Total Issues Found: {total}")
    print("\n💡 Next Steps:")
    if by_type["missing-telephone"]:
        print("  1. Run scripts/fix_schema_telephone.py")
    if by_type["missing-faq-schema"]:
        print("  2. Run scripts/add_faq_schema.py")
    if by_type["missing-breadcrumb"]:
        print("  3. Run scripts/add_breadcrumbs_to_pages.py")


def main(argv=None):
    parser = argparse.ArgumentParser(description="Check pages for schema markup issues")
    parser.add_argument("--pages", type=Path, default=PAGES_DIR, help="Pages directory")
    parser.add_argument("--json", action="store_true", help="Print the report as JSON")
    parser.add_argument("--output", type=Path, default=REPORT_PATH,
                        help="Where to save the JSON report")
    args = parser.parse_args(argv)

    files = find_astro_files(args.pages)
    results = analyze(files, args.pages)
    report = {
        "analyzedAt": datetime.now(timezone.utc).isoformat(),
        "totalPages": len(files),
        "totalIssues": total_issues(results),
        "issuesByType": results["issuesByType"],
        "errors": results["errors"],
        "allResults": results["pages"],
    }

    if args.json:
        print(json.dumps(report, indent=2))
    else:
        print("\n🔍 Checking All Pages for Schema Issues\n")
        print("=" * 70)
        print(f"\n📄 Found {len(files)} pages to analyze")
        print_report(results)
        args.output.write_text(json.dumps(report, indent=2), encoding="utf-8")
        print(f"\n💾 Detailed report saved to: {relative_path(args.output)}\n")
    return 1 if results["issuesByType"]["missing-telephone"] or results["errors"] else 0


if __name__ == "__main__":
    sys.exit(main())
