#!/usr/bin/env python3
"""
Fix <Layout description="..."> lengths across all pages.

Descriptions over 160 chars are cut at a word boundary near 155. Those
under 120 chars are expanded: contact and terms pages get canned copy,
everything else gets a quote call-to-action when it fits. Template-string
descriptions (containing ``${``) are left alone.

Usage:
    python scripts/fix_meta_description_length.py
    python scripts/fix_meta_description_length.py --dry-run
"""

import re
import sys
from pathlib import Path

from astro_pages import PAGES_DIR, dry_run_parser, exit_code, find_astro_files, run_batch

from site_utils.seo_generator import DESC_MAX_LENGTH, DESC_MIN_LENGTH, DESC_TARGET_LENGTH, ELLIPSIS

LAYOUT_DESCRIPTION_RE = re.compile(
    r"(?P<prefix><Layout\b[^>]*?\bdescription=)(?P<q>[\"'])(?P<desc>(?:(?!(?P=q)).)+)(?P=q)",
    re.DOTALL,
)

EXPANSION_SUFFIX = " Get your free quote today from Australia's trusted interstate removalists."

CANNED_DESCRIPTIONS = {
    "contact": (
        "Get in touch with Moving Again for interstate moving quotes, questions, "
        "or support. We're here to help with your move across Australia."
    ),
    "terms": (
        "Terms and conditions for booking removalist services with Moving Again. "
        "Please read and understand our terms prior to booking your interstate move."
    ),
}


def truncate_description(description: str, max_length: int = DESC_TARGET_LENGTH) -> str:
    if len(description) <= max_length:
        return description
    window = description[:max_length - len(ELLIPSIS)]
    last_space = window.rfind(" ")
    if last_space > max_length - 30:
        window = window[:last_space]
    return window.rstrip(" ,;:.") + ELLIPSIS


def expand_description(description: str, page_name: str = "") -> str:
    if len(description) >= DESC_MIN_LENGTH:
        return description
    for key, canned in CANNED_DESCRIPTIONS.items():
        if key in page_name:
            return canned
    base = description.strip()
    if EXPANSION_SUFFIX.strip() in base:
        return base
    if len(base) + len(EXPANSION_SUFFIX) <= DESC_MAX_LENGTH:
        return base + EXPANSION_SUFFIX
    return base


def fix_description(content: str, page_name: str = "") -> dict:
    changes = []

    def replace(match):
        desc = match.group("desc")
        if "${" in desc:
            return match.group(0)
        if len(desc) > DESC_MAX_LENGTH:
            new_desc = truncate_description(desc)
        elif len(desc) < DESC_MIN_LENGTH:
            new_desc = expand_description(desc, page_name)
        else:
            return match.group(0)
        if new_desc == desc:
            return match.group(0)
        changes.append(f"{len(desc)} -> {len(new_desc)} chars")
        q = match.group("q")
        if q in new_desc:
            q = "'" if q == '"' else '"'
        return f"{match.group('prefix')}{q}{new_desc}{q}"

    new_content = LAYOUT_DESCRIPTION_RE.sub(replace, content)
    if not changes:
        return {"fixed": False, "reason": "Description length OK"}
    return {"fixed": True, "content": new_content, "detail": ", ".join(changes)}


def main(argv=None):
    args = dry_run_parser("Fix meta description lengths").parse_args(argv)
    results = run_batch(
        find_astro_files(PAGES_DIR),
        lambda content, path: fix_description(content, Path(path).stem),
        dry_run=args.dry_run,
        title="Fixing Meta Description Lengths",
        fixed_label="Fixed description",
        with_path=True,
    )
    return exit_code(results)


if __name__ == "__main__":
    sys.exit(main())
