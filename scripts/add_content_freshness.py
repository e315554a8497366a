#!/usr/bin/env python3
"""
Add content freshness dates to top-level pages.

Each page gets a getContentDate() import in its frontmatter and a
modifiedDate={pageDate} prop on its <Layout>, so the built HTML carries an
article:modified_time from the page's last git commit.

Usage:
    python scripts/add_content_freshness.py
    python scripts/add_content_freshness.py --dry-run
"""

import re
import sys

from astro_pages import PAGES_DIR, dry_run_parser, exit_code, find_astro_files, run_batch

# Already dated, or dated by their content collection
SKIP_PAGES = ("index.astro", "backloading.astro", "[...slug].astro", "404.astro")

DATE_IMPORT_BLOCK = """import { getContentDate } from '../utils/fileDates';
import { fileURLToPath } from 'url';

// Get content modification date
const currentFile = fileURLToPath(import.meta.url);
const pageDate = getContentDate(currentFile);"""

LAYOUT_TAG_RE = re.compile(r"<Layout\s+([^>]*)>")


def _insert_date_import(content: str) -> str | None:
    lines = content.split("\n")
    last_import = -1
    for i, line in enumerate(lines):
        stripped = line.strip()
        if stripped.startswith("import "):
            last_import = i
        elif last_import >= 0 and stripped == "---":
            break
    if last_import < 0:
        return None
    lines[last_import + 1:last_import + 1] = ["", DATE_IMPORT_BLOCK]
    return "\n".join(lines)


def add_content_freshness(content: str) -> dict:
    if "modifiedDate" in content:
        return {"fixed": False, "reason": "Already has modifiedDate"}
    if "import Layout from" not in content:
        return {"fixed": False, "reason": "No Layout import"}

    changes = []
    if "getContentDate" not in content:
        with_import = _insert_date_import(content)
        if with_import is not None:
            content = with_import
            changes.append("import")

    layout = LAYOUT_TAG_RE.search(content)
    if layout:
        props = layout.group(1).rstrip()
        tag = f"<Layout\n  {props}\n  modifiedDate={{pageDate}}>"
        content = content[:layout.start()] + tag + content[layout.end():]
        changes.append("modifiedDate prop")

    if not changes:
        return {"fixed": False, "reason": "No Layout tag"}
    return {"fixed": True, "content": content, "detail": " + ".join(changes)}


def main(argv=None):
    args = dry_run_parser("Add content freshness dates to pages").parse_args(argv)
    files = find_astro_files(PAGES_DIR, recursive=False, skip=SKIP_PAGES)
    results = run_batch(files, add_content_freshness, dry_run=args.dry_run,
                        title="Adding Content Freshness Dates",
                        fixed_label="Added content date")
    return exit_code(results)


if __name__ == "__main__":
    sys.exit(main())
