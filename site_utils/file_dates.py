"""
Content freshness dates.

A page's modified date prefers the last git commit touching its source,
falls back to the file's mtime, then to the current (build) time. All dates
are ISO-8601 strings with a timezone.
"""

from __future__ import annotations

import logging
import subprocess
from datetime import datetime, timezone
from pathlib import Path

logger = logging.getLogger(__name__)

PROJECT_ROOT = Path(__file__).resolve().parent.parent
CONTENT_DIR = Path("src") / "content"


def get_git_commit_date(file_path) -> str | None:
    """Committer date of the most recent commit for a file, or None."""
    path = Path(file_path)
    if not path.parent.is_dir():
        return None
    try:
        result = subprocess.run(
            ["git", "log", "-1", "--format=%cI", "--", path.name],
            cwd=path.parent,
            capture_output=True, text=True, timeout=15,
        )
    except (OSError, subprocess.SubprocessError) as e:
        logger.debug("git unavailable for %s: %s", path, e)
        return None
    if result.returncode != 0:
        return None
    return result.stdout.strip() or None


def get_file_modification_date(file_path) -> str | None:
    try:
        mtime = Path(file_path).stat().st_mtime
    except OSError:
        return None
    return datetime.fromtimestamp(mtime, tz=timezone.utc).isoformat()


def get_content_date(file_path) -> str:
    """Best available modified date for a file: git, then mtime, then now."""
    return (
        get_git_commit_date(file_path)
        or get_file_modification_date(file_path)
        or datetime.now(timezone.utc).isoformat()
    )


def get_content_collection_date(collection: str, slug: str, project_root=None) -> str:
    """Modified date for a content collection entry (e.g. 'routes', 'sydney-melbourne')."""
    root = Path(project_root) if project_root else PROJECT_ROOT
    base = root / CONTENT_DIR / collection
    for candidate in (base / f"{slug}.md", base / f"{slug}.mdx", base / slug):
        if candidate.is_file():
            return get_content_date(candidate)
    return get_content_date(base / f"{slug}.md")
