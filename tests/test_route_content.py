"""Tests for the route content collection loader."""

import logging

import pytest

from site_utils.route_content import (
    RouteValidationError,
    load_route,
    load_routes,
    parse_frontmatter,
    render_route_file,
    validate_route,
)

ROUTE_FILE = """---
slug: /sydney-melbourne/
slugFs: sydney-melbourne
title: Backloading Sydney to Melbourne | Interstate Removals
origin: Sydney
destination: Melbourne
originState: NSW
destinationState: VIC
distanceKm: 880
transitDays: "4-7 business days"
relatedSlugs:
  - melbourne-sydney
lastUpdated: '2025-01-01T00:00:00+00:00'
---

## Sydney to Melbourne Backloading
"""


# ── parse_frontmatter ──


class TestParseFrontmatter:
    def test_splits_data_and_body(self):
        data, body = parse_frontmatter(ROUTE_FILE)
        assert data["slugFs"] == "sydney-melbourne"
        assert data["distanceKm"] == 880
        assert body.startswith("## Sydney to Melbourne")

    def test_no_frontmatter(self):
        assert parse_frontmatter("# Just markdown") == ({}, "# Just markdown")

    def test_unterminated(self):
        with pytest.raises(RouteValidationError):
            parse_frontmatter("---\ntitle: x\n")

    def test_invalid_yaml(self):
        with pytest.raises(RouteValidationError):
            parse_frontmatter("---\ntitle: [unclosed\n---\n")

    def test_non_mapping(self):
        with pytest.raises(RouteValidationError):
            parse_frontmatter("---\n- a\n- b\n---\n")


# ── validate_route ──


class TestValidateRoute:
    def test_valid(self, sydney_melbourne):
        assert validate_route(sydney_melbourne)["origin"] == "Sydney"

    def test_missing_required(self, sydney_melbourne):
        del sydney_melbourne["originState"]
        with pytest.raises(RouteValidationError, match="originState"):
            validate_route(sydney_melbourne)

    def test_wrong_type(self, sydney_melbourne):
        sydney_melbourne["distanceKm"] = "880"
        with pytest.raises(RouteValidationError, match="distanceKm"):
            validate_route(sydney_melbourne)

    def test_bool_is_not_a_number(self, sydney_melbourne):
        sydney_melbourne["distanceKm"] = True
        with pytest.raises(RouteValidationError):
            validate_route(sydney_melbourne)

    def test_float_distance_ok(self, sydney_melbourne):
        sydney_melbourne["distanceKm"] = 880.5
        assert validate_route(sydney_melbourne)["distanceKm"] == 880.5

    def test_related_slugs_must_be_strings(self, sydney_melbourne):
        sydney_melbourne["relatedSlugs"] = ["melbourne-sydney", 3]
        with pytest.raises(RouteValidationError, match="relatedSlugs"):
            validate_route(sydney_melbourne)

    def test_unknown_keys_dropped(self, sydney_melbourne):
        sydney_melbourne["layout"] = "route"
        assert "layout" not in validate_route(sydney_melbourne)


# ── Loading ──


class TestLoadRoutes:
    def test_load_route(self, tmp_path):
        path = tmp_path / "sydney-melbourne.md"
        path.write_text(ROUTE_FILE)
        route = load_route(path)
        assert route["relatedSlugs"] == ["melbourne-sydney"]
        assert route["lastUpdated"] == "2025-01-01T00:00:00+00:00"

    def test_invalid_files_skipped(self, tmp_path, caplog):
        (tmp_path / "good.mdx").write_text(ROUTE_FILE)
        (tmp_path / "bad.md").write_text("---\ntitle: Missing fields\n---\n")
        (tmp_path / "notes.txt").write_text("ignored")
        with caplog.at_level(logging.WARNING, logger="site_utils.route_content"):
            routes = load_routes(tmp_path)
        assert [r["slugFs"] for r in routes] == ["sydney-melbourne"]
        assert "bad.md" in caplog.text

    def test_missing_directory(self, tmp_path):
        assert load_routes(tmp_path / "nope") == []

    def test_render_then_load(self, tmp_path, sydney_melbourne):
        path = tmp_path / "sydney-melbourne.md"
        path.write_text(render_route_file(sydney_melbourne, "\n\nBody text\n"))
        assert load_route(path) == validate_route(sydney_melbourne)
        assert path.read_text().endswith("---\n\nBody text\n")
