"""Preview server configuration, loaded from environment variables."""

import os
from pathlib import Path

from dotenv import load_dotenv

load_dotenv(Path(__file__).resolve().parent.parent / ".env")

# Root of the site repo
REPO_ROOT = Path(__file__).resolve().parent.parent

# Canonical site URL (robots.txt sitemap lines, canonical links)
SITE_URL = os.environ.get("SITE_URL", "https://movingagain.com.au")

# Route content collection
ROUTES_DIR = Path(os.environ.get("ROUTES_DIR", REPO_ROOT / "src" / "content" / "routes"))

# Server
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8000"))
