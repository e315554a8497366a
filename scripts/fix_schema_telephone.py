#!/usr/bin/env python3
"""
Add the schema telephone to LocalBusiness schemaData on pages missing it.

Usage:
    python scripts/fix_schema_telephone.py
    python scripts/fix_schema_telephone.py --dry-run
"""

import re
import sys

from astro_pages import PAGES_DIR, dry_run_parser, exit_code, find_astro_files, js_string, run_batch

from site_utils.brand import BRAND

TELEPHONE = BRAND["schema_telephone"]

LOCAL_BUSINESS_RE = re.compile(r"""schemaType=["']LocalBusiness["']""")
SCHEMA_DATA_RE = re.compile(r"schemaData\s*=\s*\{([^}]+)\}", re.DOTALL)
NAME_FIELD_RE = re.compile(r"""name:\s*['"][^'"]+['"]""")


def fix_telephone(content: str) -> dict:
    if not LOCAL_BUSINESS_RE.search(content):
        return {"fixed": False, "reason": "Not a LocalBusiness page"}
    if TELEPHONE in content or "telephone:" in content:
        return {"fixed": False, "reason": "Telephone already present"}

    match = SCHEMA_DATA_RE.search(content)
    if not match:
        return {"fixed": False, "reason": "Could not find schemaData block"}
    body = match.group(1)
    if "telephone" in body:
        return {"fixed": False, "reason": "Telephone field exists in different format"}

    field = f"telephone: {js_string(TELEPHONE)}"
    name = NAME_FIELD_RE.search(body)
    if name:
        new_body = f"{body[:name.end()]},\n    {field}{body[name.end():]}"
    else:
        # Keep the object's opening brace when schemaData={{ ... }}
        opener = "{" if body.lstrip().startswith("{") else ""
        rest = body.lstrip()[len(opener):].strip()
        new_body = f"{opener}\n    {field},\n    {rest}\n  "

    start, end = match.span(1)
    return {
        "fixed": True,
        "content": content[:start] + new_body + content[end:],
        "detail": "Added telephone",
    }


def main(argv=None):
    args = dry_run_parser("Add telephone to LocalBusiness schema").parse_args(argv)
    files = find_astro_files(PAGES_DIR)
    print(f"\n📄 Analyzing {len(files)} pages...")
    results = run_batch(files, fix_telephone, dry_run=args.dry_run,
                        title="Fixing Missing Telephone in LocalBusiness Schema",
                        fixed_label="Added telephone")
    return exit_code(results)


if __name__ == "__main__":
    sys.exit(main())
