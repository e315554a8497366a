"""Tests for brand, geography, hub page, migration and robots.txt helpers."""

from datetime import date

import pytest

from site_utils.brand import BRAND, FOUNDING_YEAR, SITE_URL, tagline, years_in_business
from site_utils.geography import (
    CITIES,
    CITY_SLUGS,
    STATE_NAMES,
    city_slug,
    get_distance,
    is_capital,
    split_route_slug,
)
from site_utils.hub_pages import get_all_hub_cities, get_city_hub_url, has_hub_page
from site_utils.migration_stats import (
    MIGRATION_CORRIDORS,
    NET_INTERSTATE_MIGRATION,
    format_migration,
    get_migration_trend,
)
from site_utils.robots import build_robots_txt


# ── Brand ──


def test_years_in_business():
    assert years_in_business(date(2025, 6, 1)) == 2025 - FOUNDING_YEAR


def test_tagline():
    assert tagline(date(2025, 1, 1)) == "30 Years of Moving Australia"


def test_brand_urls_use_site_url():
    assert BRAND["website"] == SITE_URL
    assert BRAND["insurance_url"].startswith("https://")


# ── Geography ──


class TestGeography:
    def test_city_slug(self):
        assert city_slug("Gold Coast") == "gold-coast"
        assert city_slug("  Logan City ") == "logan-city"

    def test_every_city_has_slug_and_state_code(self):
        for name, state, _ in CITIES:
            assert CITY_SLUGS[city_slug(name)] == name
            assert state in STATE_NAMES

    def test_capitals_case_insensitive(self):
        assert is_capital("Hobart")
        assert is_capital("CANBERRA")
        assert not is_capital("Gold Coast")
        assert not is_capital(None)

    def test_distance_both_directions(self):
        assert get_distance("Perth", "Brisbane") == 4310
        assert get_distance("Brisbane", "Perth") == 4310

    def test_distance_unknown(self):
        assert get_distance("Cairns", "Hobart") is None

    def test_missing_city_names(self):
        assert city_slug(None) == ""
        assert get_distance(None, "Sydney") is None

    @pytest.mark.parametrize("slug,expected", [
        ("sydney-melbourne", ("sydney", "melbourne")),
        ("/sydney-melbourne/", ("sydney", "melbourne")),
        ("sydney-to-melbourne", ("sydney", "melbourne")),
        ("gold-coast-cairns", ("gold-coast", "cairns")),
        ("cairns-to-gold-coast", ("cairns", "gold-coast")),
        ("logan-city-perth", ("logan-city", "perth")),
        ("sydney-auckland", None),
        ("about-us", None),
    ])
    def test_split_route_slug(self, slug, expected):
        assert split_route_slug(slug) == expected


# ── Hub pages ──


def test_hub_url():
    assert get_city_hub_url("Gold Coast") == "/gold-coast/"
    assert get_city_hub_url("Auckland") is None


def test_every_city_has_hub():
    assert all(has_hub_page(name) for name, _, _ in CITIES)
    assert len(get_all_hub_cities()) == len(CITIES)


# ── Migration ──


class TestMigration:
    def test_format_gain(self):
        assert format_migration("QLD") == "+21,595"

    def test_format_loss(self):
        assert format_migration("NSW") == "-24,328"

    @pytest.mark.parametrize("state,trend", [
        ("QLD", "Strong net gain"),
        ("WA", "Strong net gain"),
        ("VIC", "Slight net loss"),
        ("NSW", "Net loss"),
    ])
    def test_trend(self, state, trend):
        assert get_migration_trend(state) == trend

    def test_every_state_covered(self):
        assert set(NET_INTERSTATE_MIGRATION) == {"NSW", "VIC", "QLD", "SA", "WA", "TAS", "NT", "ACT"}

    def test_corridors_ranked(self):
        assert [c["rank"] for c in MIGRATION_CORRIDORS] == list(range(1, len(MIGRATION_CORRIDORS) + 1))


# ── robots.txt ──


def test_robots_txt():
    assert build_robots_txt("https://movingagain.com.au") == (
        "User-agent: *\n"
        "Allow: /\n"
        "\n"
        "Sitemap: https://movingagain.com.au/sitemap-index.xml\n"
        "Sitemap: https://movingagain.com.au/llms.txt"
    )


def test_robots_txt_trailing_slash():
    assert "https://example.com/sitemap-index.xml" in build_robots_txt("https://example.com/")
