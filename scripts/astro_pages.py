"""
Shared helpers for the .astro page maintenance scripts.

Every script follows the same shape: find page files, run a pure
``transform(content) -> result`` over each one, write the file back unless
``--dry-run``, and print a summary. A transform returns either
``{"fixed": True, "content": new_content, ...}`` or
``{"fixed": False, "reason": "..."}``.

A failure on one file is recorded in ``errors`` and the batch carries on.
Writes that already happened stay.
"""

import argparse
import sys
from pathlib import Path

PROJECT_ROOT = Path(__file__).resolve().parent.parent
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from site_utils.brand import SITE_URL  # noqa: E402
from site_utils.geography import CITY_SLUGS  # noqa: E402

PAGES_DIR = PROJECT_ROOT / "src" / "pages"
CONTENT_DIR = PROJECT_ROOT / "src" / "content"
ROUTES_DIR = CONTENT_DIR / "routes"
DIST_DIR = PROJECT_ROOT / "dist"

# slug -> display name for every city hub page
CITY_NAMES = dict(CITY_SLUGS)

SERVICE_PAGES = {
    "backloading": "Backloading",
    "car-transport": "Car Transport",
    "moving-interstate": "Moving Interstate",
    "service-areas": "Service Areas",
}


def find_astro_files(directory: Path, recursive: bool = True, skip=()) -> list:
    """All .astro files under a directory, sorted, minus skipped names."""
    directory = Path(directory)
    if not directory.is_dir():
        return []
    pattern = "**/*.astro" if recursive else "*.astro"
    return sorted(p for p in directory.glob(pattern) if p.is_file() and p.name not in skip)


def find_city_files(directory: Path) -> list:
    """Top-level .astro pages named after a hub city (sydney.astro, gold-coast.astro)."""
    return [p for p in find_astro_files(directory, recursive=False) if p.stem in CITY_NAMES]


def relative_path(path: Path) -> str:
    try:
        return str(Path(path).relative_to(PROJECT_ROOT))
    except ValueError:
        return str(path)


def process_file(path: Path, transform, dry_run: bool = False,
                 with_path: bool = False) -> dict:
    """Apply a transform to one file, writing it back unless dry_run.

    with_path passes the file path as a second argument to the transform.
    """
    path = Path(path)
    content = path.read_text(encoding="utf-8")
    result = transform(content, path) if with_path else transform(content)
    if result.get("fixed") and result.get("content") == content:
        result = {"fixed": False, "reason": "No changes needed"}
    if result.get("fixed") and not dry_run:
        path.write_text(result["content"], encoding="utf-8")
    return result


def run_batch(files, transform, dry_run: bool = False, title: str = "",
              fixed_label: str = "Fixed", with_path: bool = False) -> dict:
    """Run a transform over every file, printing progress and a summary."""
    results = {"fixed": [], "skipped": [], "errors": []}

    print(f"\n🔧 {title}\n")
    print("=" * 60)
    if dry_run:
        print("🔍 DRY RUN MODE - No files will be modified\n")

    for path in files:
        rel = relative_path(path)
        try:
            result = process_file(path, transform, dry_run=dry_run, with_path=with_path)
        except (OSError, ValueError) as e:
            results["errors"].append({"file": rel, "error": str(e)})
            print(f"  ✗ {rel} - Error: {e}")
            continue

        if result.get("fixed"):
            detail = result.get("detail")
            results["fixed"].append({"file": rel, "detail": detail})
            verb = f"Would apply: {fixed_label.lower()}" if dry_run else fixed_label
            print(f"  ✓ {rel}  ({verb}{f' - {detail}' if detail else ''})")
        else:
            results["skipped"].append({"file": rel, "reason": result.get("reason", "")})
            print(f"  - {rel}  ⏭️  {result.get('reason', '')}")

    print("\n" + "=" * 60)
    print("\n📊 Summary:")
    print(f"  ✅ Fixed: {len(results['fixed'])} files")
    print(f"  ⏭️  Skipped: {len(results['skipped'])} files")
    print(f"  ❌ Errors: {len(results['errors'])} files")
    if dry_run and results["fixed"]:
        print(f"\n💡 Run without --dry-run to apply fixes to {len(results['fixed'])} files")
    print()
    return results


def dry_run_parser(description: str) -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description=description)
    parser.add_argument("--dry-run", action="store_true",
                        help="Report changes without writing files")
    return parser


def exit_code(results: dict) -> int:
    return 1 if results["errors"] else 0


# ── Snippet helpers ───────────────────────────────────────────


def frontmatter_end(content: str) -> int:
    """Index of the closing '---' of an .astro frontmatter fence, or -1."""
    if not content.startswith("---"):
        return -1
    idx = content.find("\n---", 3)
    return -1 if idx == -1 else idx + 1


def insert_before_frontmatter_close(content: str, snippet: str) -> str | None:
    """Insert a code snippet as the last statement of the frontmatter."""
    end = frontmatter_end(content)
    if end == -1:
        return None
    head = content[:end].rstrip()
    return f"{head}\n\n{snippet}\n{content[end:]}"


def js_string(value: str) -> str:
    """Single-quoted JS string literal."""
    escaped = value.replace("\\", "\\\\").replace("'", "\\'")
    return f"'{escaped}'"


def breadcrumb_url(slug: str) -> str:
    return f"{SITE_URL}/{slug}/" if slug else f"{SITE_URL}/"
