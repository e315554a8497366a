#!/usr/bin/env python3
"""Moving Again site preview server.

Launch: python3 site_preview.py
Serves at http://0.0.0.0:8000 (or PORT env var)
"""

import logging

import uvicorn

from site_server.config import HOST, PORT, ROUTES_DIR


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")

    print("=" * 60)
    print("  Moving Again - Site Preview")
    print("=" * 60)

    if not ROUTES_DIR.is_dir():
        print(f"\n  WARNING: routes directory not found at {ROUTES_DIR}")
        print("  Set ROUTES_DIR or run scripts/generate_routes.py first.")
        print("  Continuing with an empty route collection...\n")

    url = f"http://{HOST}:{PORT}"
    print(f"\n  Routes API: {url}/api/v1/routes")
    print(f"  robots.txt: {url}/robots.txt")
    print("  Press Ctrl+C to stop\n")

    from site_server.app import create_app
    app = create_app()
    uvicorn.run(app, host=HOST, port=PORT, log_level="info")


if __name__ == "__main__":
    main()
