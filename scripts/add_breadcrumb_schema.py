#!/usr/bin/env python3
"""
Add BreadcrumbList JSON-LD to city pages that already define breadcrumbItems.

The schema block goes directly after the opening <Layout> tag and maps the
page's breadcrumbItems array into schema.org ListItems.

Usage:
    python scripts/add_breadcrumb_schema.py
    python scripts/add_breadcrumb_schema.py --dry-run
"""

import re
import sys

from astro_pages import PAGES_DIR, dry_run_parser, exit_code, find_city_files, run_batch

LAYOUT_OPEN_RE = re.compile(r"<Layout[^>]*>[ \t]*\n")
SCHEMA_MARKER = "<!-- BreadcrumbList Schema -->"

BREADCRUMB_SCHEMA = f"""  {SCHEMA_MARKER}
  <script
    type="application/ld+json"
    set:html={{JSON.stringify({{
      '@context': 'https://schema.org',
      '@type': 'BreadcrumbList',
      itemListElement: breadcrumbItems.map((item, index) => ({{
        '@type': 'ListItem',
        position: index + 1,
        name: item.name,
        item: item.url,
      }})),
    }})}}
  />
"""


def has_breadcrumb_schema(content: str) -> bool:
    return SCHEMA_MARKER in content or (
        "BreadcrumbList" in content and "itemListElement" in content
    )


def insert_after_layout(content: str, snippet: str):
    """Insert a snippet on the line after the opening <Layout> tag, or None."""
    match = LAYOUT_OPEN_RE.search(content)
    if not match:
        return None
    return content[:match.end()] + snippet + content[match.end():]


def add_breadcrumb_schema(content: str) -> dict:
    if has_breadcrumb_schema(content):
        return {"fixed": False, "reason": "Schema already exists"}
    if "breadcrumbItems" not in content:
        return {"fixed": False, "reason": "breadcrumbItems not found"}

    new_content = insert_after_layout(content, BREADCRUMB_SCHEMA)
    if new_content is None:
        return {"fixed": False, "reason": "Layout tag not found"}
    return {"fixed": True, "content": new_content}


def main(argv=None):
    args = dry_run_parser("Add BreadcrumbList schema to city pages").parse_args(argv)
    files = find_city_files(PAGES_DIR)
    print(f"Found {len(files)} city pages")
    results = run_batch(files, add_breadcrumb_schema, dry_run=args.dry_run,
                        title="Adding BreadcrumbList Schema", fixed_label="Added schema")
    return exit_code(results)


if __name__ == "__main__":
    sys.exit(main())
