#!/usr/bin/env python3
"""
Add ARIA roles and labels to page markup.

- <nav>, <main>, <aside> get their landmark role when missing
- <button> without aria-label gets role="button"
- icon-only links (<a ...><img alt="...">) get an aria-label from the alt text

Usage:
    python scripts/add_aria_attributes.py
    python scripts/add_aria_attributes.py --dry-run
"""

import re
import sys

from astro_pages import PAGES_DIR, dry_run_parser, exit_code, find_astro_files, run_batch

LANDMARK_ROLES = {
    "nav": "navigation",
    "main": "main",
    "aside": "complementary",
}

BUTTON_RE = re.compile(r"<button\b(?![^>]*aria-label)([^>]*)>")
ICON_LINK_RE = re.compile(r"""<a\s+([^>]*href=["'][^"']+["'][^>]*)>(\s*)<img([^>]*)>""")
ALT_RE = re.compile(r"""alt=["']([^"']+)["']""")


def add_aria_attributes(content: str) -> dict:
    changes = []

    def button(match):
        attrs = match.group(1)
        if "role=" in attrs:
            return match.group(0)
        changes.append("button role")
        return f'<button{attrs} role="button">'

    def icon_link(match):
        link_attrs, gap, img_attrs = match.groups()
        if "aria-label" in link_attrs:
            return match.group(0)
        alt = ALT_RE.search(img_attrs)
        if not alt:
            return match.group(0)
        changes.append("link label")
        return f'<a {link_attrs} aria-label="{alt.group(1)}">{gap}<img{img_attrs}>'

    content = BUTTON_RE.sub(button, content)
    content = ICON_LINK_RE.sub(icon_link, content)

    for tag, role in LANDMARK_ROLES.items():
        pattern = re.compile(rf"<{tag}\b(?![^>]*role=)([^>]*)>")

        def landmark(match, tag=tag, role=role):
            changes.append(f"{tag} role")
            return f'<{tag}{match.group(1)} role="{role}">'

        content = pattern.sub(landmark, content)

    if not changes:
        return {"fixed": False, "reason": "No ARIA changes needed"}
    return {"fixed": True, "content": content, "detail": f"{len(changes)} attributes"}


def main(argv=None):
    args = dry_run_parser("Add ARIA attributes to pages").parse_args(argv)
    results = run_batch(find_astro_files(PAGES_DIR), add_aria_attributes,
                        dry_run=args.dry_run, title="Adding ARIA Attributes",
                        fixed_label="Added ARIA attributes")
    return exit_code(results)


if __name__ == "__main__":
    sys.exit(main())
