#!/usr/bin/env python3
"""
Switch page schema from LocalBusiness to Organization.

Moving Again serves all of Australia, so the per-city pages describe an
Organization with an areaServed, not a local shopfront. The address and
priceRange fields are dropped from schemaData; everything else is kept.

Usage:
    python scripts/change_localbusiness_to_organization.py
    python scripts/change_localbusiness_to_organization.py --dry-run
"""

import re
import sys

from astro_pages import PAGES_DIR, dry_run_parser, exit_code, find_astro_files, run_batch

SKIP_FILES = ("404.astro",)

SCHEMA_TYPE_RE = re.compile(r"""schemaType=(["'])LocalBusiness\1""")
ADDRESS_RE = re.compile(r"address:\s*\{[^}]*\},?\s*")
PRICE_RANGE_RE = re.compile(r"""priceRange:\s*['"][^'"]*['"],?\s*""")


def find_schema_data(content: str) -> tuple[int, int] | None:
    """Span of the object inside schemaData={{ ... }}, braces balanced."""
    start = content.find("schemaData={{")
    if start == -1:
        return None
    body_start = start + len("schemaData={{")
    depth = 2
    for i in range(body_start, len(content)):
        if content[i] == "{":
            depth += 1
        elif content[i] == "}":
            depth -= 1
            if depth == 1:
                return body_start, i
    return None


def clean_schema_data(body: str) -> str:
    body = ADDRESS_RE.sub("", body)
    body = PRICE_RANGE_RE.sub("", body)
    body = re.sub(r",\s*,", ",", body)
    return re.sub(r",(\s*)$", r"\1", body)


def change_to_organization(content: str) -> dict:
    if "LocalBusiness" not in content:
        return {"fixed": False, "reason": "No LocalBusiness found"}

    content = SCHEMA_TYPE_RE.sub(lambda m: f"schemaType={m.group(1)}Organization{m.group(1)}", content)
    span = find_schema_data(content)
    if span:
        start, end = span
        content = content[:start] + clean_schema_data(content[start:end]) + content[end:]

    return {"fixed": True, "content": content, "detail": "LocalBusiness -> Organization"}


def main(argv=None):
    args = dry_run_parser("Change LocalBusiness schema to Organization").parse_args(argv)
    files = find_astro_files(PAGES_DIR, recursive=False, skip=SKIP_FILES)
    print(f"Found {len(files)} pages")
    results = run_batch(files, change_to_organization, dry_run=args.dry_run,
                        title="Changing LocalBusiness to Organization",
                        fixed_label="Changed to Organization")
    return exit_code(results)


if __name__ == "__main__":
    sys.exit(main())
