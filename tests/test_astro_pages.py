"""Tests for the shared .astro maintenance helpers."""

from astro_pages import (
    PROJECT_ROOT,
    breadcrumb_url,
    dry_run_parser,
    exit_code,
    find_astro_files,
    find_city_files,
    frontmatter_end,
    insert_before_frontmatter_close,
    js_string,
    process_file,
    relative_path,
    run_batch,
)


def _upper(content):
    return {"fixed": True, "content": content.upper(), "detail": "upper"}


def _boom(content):
    raise ValueError("bad page")


# ── File discovery ──


def test_find_astro_files_recursive(tmp_path):
    (tmp_path / "blog").mkdir()
    (tmp_path / "about.astro").write_text("a")
    (tmp_path / "blog" / "post.astro").write_text("b")
    (tmp_path / "robots.txt.ts").write_text("c")
    found = find_astro_files(tmp_path)
    assert [p.name for p in found] == ["about.astro", "post.astro"]


def test_find_astro_files_flat_with_skip(tmp_path):
    (tmp_path / "blog").mkdir()
    (tmp_path / "404.astro").write_text("a")
    (tmp_path / "about.astro").write_text("a")
    (tmp_path / "blog" / "post.astro").write_text("b")
    found = find_astro_files(tmp_path, recursive=False, skip=("404.astro",))
    assert [p.name for p in found] == ["about.astro"]


def test_find_astro_files_missing_dir(tmp_path):
    assert find_astro_files(tmp_path / "nope") == []


def test_find_city_files(tmp_path):
    for name in ("sydney.astro", "gold-coast.astro", "contact.astro"):
        (tmp_path / name).write_text("x")
    assert [p.stem for p in find_city_files(tmp_path)] == ["gold-coast", "sydney"]


def test_relative_path():
    assert relative_path(PROJECT_ROOT / "src" / "pages" / "a.astro") == "src/pages/a.astro"
    assert relative_path("/elsewhere/a.astro") == "/elsewhere/a.astro"


# ── process_file ──


class TestProcessFile:
    def test_writes_fixed_content(self, tmp_path):
        page = tmp_path / "a.astro"
        page.write_text("hello")
        result = process_file(page, _upper)
        assert result["fixed"]
        assert page.read_text() == "HELLO"

    def test_dry_run_leaves_file(self, tmp_path):
        page = tmp_path / "a.astro"
        page.write_text("hello")
        assert process_file(page, _upper, dry_run=True)["fixed"]
        assert page.read_text() == "hello"

    def test_unchanged_content_is_skip(self, tmp_path):
        page = tmp_path / "a.astro"
        page.write_text("HELLO")
        assert process_file(page, _upper) == {"fixed": False, "reason": "No changes needed"}

    def test_with_path(self, tmp_path):
        page = tmp_path / "a.astro"
        page.write_text("x")
        seen = []
        process_file(page, lambda c, p: seen.append(p) or {"fixed": False}, with_path=True)
        assert seen == [page]


# ── run_batch ──


class TestRunBatch:
    def test_collects_results_and_continues_after_error(self, tmp_path, capsys):
        good = tmp_path / "good.astro"
        good.write_text("hello")
        done = tmp_path / "done.astro"
        done.write_text("DONE")
        missing = tmp_path / "missing.astro"

        results = run_batch([good, missing, done], _upper, title="Test")
        assert [r["detail"] for r in results["fixed"]] == ["upper"]
        assert len(results["errors"]) == 1
        assert results["skipped"][0]["reason"] == "No changes needed"
        assert good.read_text() == "HELLO"
        assert exit_code(results) == 1

        out = capsys.readouterr().out
        assert "✅ Fixed: 1 files" in out
        assert "❌ Errors: 1 files" in out

    def test_transform_value_error_recorded(self, tmp_path):
        page = tmp_path / "a.astro"
        page.write_text("x")
        results = run_batch([page], _boom)
        assert results["errors"][0]["error"] == "bad page"

    def test_dry_run_banner(self, tmp_path, capsys):
        page = tmp_path / "a.astro"
        page.write_text("hello")
        results = run_batch([page], _upper, dry_run=True)
        assert page.read_text() == "hello"
        assert exit_code(results) == 0
        out = capsys.readouterr().out
        assert "DRY RUN MODE" in out
        assert "Run without --dry-run" in out


# ── Snippet helpers ──


def test_frontmatter_end():
    content = "---\nconst a = 1;\n---\n<div/>"
    assert content[frontmatter_end(content):].startswith("---\n<div/>")
    assert frontmatter_end("<div/>") == -1


def test_insert_before_frontmatter_close():
    content = "---\nconst a = 1;\n\n---\n<div/>"
    assert insert_before_frontmatter_close(content, "const b = 2;") == (
        "---\nconst a = 1;\n\nconst b = 2;\n---\n<div/>"
    )
    assert insert_before_frontmatter_close("<div/>", "x") is None


def test_js_string_escapes_quotes():
    assert js_string("Australia's") == "'Australia\\'s'"


def test_breadcrumb_url():
    assert breadcrumb_url("") == "https://movingagain.com.au/"
    assert breadcrumb_url("sydney") == "https://movingagain.com.au/sydney/"


def test_dry_run_parser():
    assert dry_run_parser("x").parse_args(["--dry-run"]).dry_run
    assert not dry_run_parser("x").parse_args([]).dry_run
