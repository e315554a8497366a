"""Pytest fixtures and configuration."""

import sys
from pathlib import Path

import pytest

# Add scripts directory to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent / "scripts"))


def _make_route(origin="Sydney", destination="Melbourne", origin_state="NSW",
                destination_state="VIC", **overrides):
    """Route dict shaped like loaded content frontmatter."""
    slug = f"{origin.lower().replace(' ', '-')}-{destination.lower().replace(' ', '-')}"
    route = {
        "slug": f"/{slug}/",
        "slugFs": slug,
        "title": f"Backloading {origin} to {destination} | Interstate Removals",
        "origin": origin,
        "destination": destination,
        "originState": origin_state,
        "destinationState": destination_state,
    }
    route.update(overrides)
    return route


@pytest.fixture
def make_route():
    """Factory for route dicts: make_route("Perth", "Darwin", "WA", "NT")."""
    return _make_route


@pytest.fixture
def sydney_melbourne():
    return _make_route(distanceKm=880, transitDays="3-5 business days")


@pytest.fixture
def city_page():
    """A city hub page before any schema or breadcrumb scripts have run."""
    return """---
import Layout from '../layouts/Layout.astro';

const title = 'Removalists Sydney';
---

<Layout title={title} description="Interstate removals from Sydney.">
  <main class="container">
    <h1>Sydney Removalists</h1>
    <section>
      <h2>Frequently Asked Questions</h2>
      <details class="bg-gray-50 rounded-lg">
        <summary class="cursor-pointer">How long does a move from Sydney take? <span class="icon">+</span></summary>
        <div class="px-6 pb-6 text-gray-600">
          <p>Most interstate moves from Sydney take 3-7 business days.</p>
        </div>
      </details>
      <details class="bg-gray-50 rounded-lg">
        <summary class="cursor-pointer">Do you offer backloading?</summary>
        <div class="px-6 pb-6 text-gray-600">
          <p>Yes, backloading is our most affordable interstate option.</p>
        </div>
      </details>
    </section>
  </main>
</Layout>
"""
