#!/usr/bin/env python3
"""
Add breadcrumb data and BreadcrumbList JSON-LD to every page.

Trails by page type:
    City pages:    Home > Service Areas > City
    Service pages: Home > Service Name
    Other pages:   Home > Title Cased File Name

The homepage and dynamic routes ([...slug].astro) are skipped.

Usage:
    python scripts/add_breadcrumbs_to_pages.py
    python scripts/add_breadcrumbs_to_pages.py --dry-run
"""

import sys

from astro_pages import (
    CITY_NAMES,
    PAGES_DIR,
    SERVICE_PAGES,
    breadcrumb_url,
    dry_run_parser,
    exit_code,
    find_astro_files,
    insert_before_frontmatter_close,
    js_string,
    run_batch,
)
from add_breadcrumb_schema import LAYOUT_OPEN_RE, insert_after_layout

HEAD_SLOT_SCHEMA = """
  <!-- BreadcrumbList Schema -->
  <script
    type="application/ld+json"
    set:html={JSON.stringify({
      '@context': 'https://schema.org',
      '@type': 'BreadcrumbList',
      itemListElement: breadcrumbItems.map((item, index) => ({
        '@type': 'ListItem',
        position: index + 1,
        name: item.name,
        item: item.url,
      })),
    })}
    slot="head"
  />
"""


def page_title_from_slug(slug: str) -> str:
    """'moving-checklist' -> 'Moving Checklist'."""
    return " ".join(word[:1].upper() + word[1:] for word in slug.split("-") if word)


def generate_breadcrumbs(page_name: str):
    """Breadcrumb trail for a page file stem, or None for index/dynamic pages."""
    if page_name == "index" or page_name.startswith("["):
        return None

    trail = [{"name": "Home", "url": breadcrumb_url("")}]
    if page_name in CITY_NAMES:
        trail.append({"name": "Service Areas", "url": breadcrumb_url("service-areas")})
        trail.append({"name": CITY_NAMES[page_name], "url": breadcrumb_url(page_name)})
    elif page_name in SERVICE_PAGES:
        trail.append({"name": SERVICE_PAGES[page_name], "url": breadcrumb_url(page_name)})
    else:
        trail.append({"name": page_title_from_slug(page_name), "url": breadcrumb_url(page_name)})
    return trail


def breadcrumb_data_block(trail: list) -> str:
    items = ",\n".join(
        f"  {{ name: {js_string(item['name'])}, url: {js_string(item['url'])} }}"
        for item in trail
    )
    return f"// Breadcrumb data for schema\nconst breadcrumbItems = [\n{items},\n];"


def add_breadcrumbs(content: str, page_name: str) -> dict:
    trail = generate_breadcrumbs(page_name)
    if trail is None:
        return {"fixed": False, "reason": "Skipped (homepage or dynamic route)"}
    if "BreadcrumbList" in content or "breadcrumbItems" in content:
        return {"fixed": False, "reason": "Already has breadcrumbs"}
    if not LAYOUT_OPEN_RE.search(content):
        return {"fixed": False, "reason": "Could not find Layout component"}

    with_data = insert_before_frontmatter_close(content, breadcrumb_data_block(trail))
    if with_data is None:
        return {"fixed": False, "reason": "Could not find frontmatter end"}

    return {
        "fixed": True,
        "content": insert_after_layout(with_data, HEAD_SLOT_SCHEMA),
        "detail": " > ".join(item["name"] for item in trail),
    }


def main(argv=None):
    args = dry_run_parser("Add breadcrumbs to all pages").parse_args(argv)
    files = find_astro_files(PAGES_DIR)
    print(f"Found {len(files)} pages")
    results = run_batch(
        files,
        lambda content, path: add_breadcrumbs(content, path.stem),
        dry_run=args.dry_run,
        title="Adding Breadcrumbs",
        fixed_label="Added breadcrumbs",
        with_path=True,
    )
    return exit_code(results)


if __name__ == "__main__":
    sys.exit(main())
