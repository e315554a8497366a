"""Tests for the breadcrumb, FAQ schema, ARIA and schema-type page scripts."""

import pytest

from add_aria_attributes import add_aria_attributes
from add_breadcrumb_schema import SCHEMA_MARKER, add_breadcrumb_schema
from add_breadcrumbs_to_pages import (
    add_breadcrumbs,
    generate_breadcrumbs,
    page_title_from_slug,
)
from add_faq_schema import add_faq_schema, extract_faqs, faqs_data_block
from change_localbusiness_to_organization import change_to_organization, find_schema_data
from fix_schema_telephone import TELEPHONE, fix_telephone

import add_breadcrumbs_to_pages
import add_faq_schema as faq_script


# ── Breadcrumb trails ──


class TestGenerateBreadcrumbs:
    def test_city_page(self):
        trail = generate_breadcrumbs("gold-coast")
        assert [i["name"] for i in trail] == ["Home", "Service Areas", "Gold Coast"]
        assert trail[-1]["url"] == "https://movingagain.com.au/gold-coast/"

    def test_service_page(self):
        trail = generate_breadcrumbs("car-transport")
        assert [i["name"] for i in trail] == ["Home", "Car Transport"]

    def test_other_page(self):
        trail = generate_breadcrumbs("moving-checklist")
        assert [i["name"] for i in trail] == ["Home", "Moving Checklist"]

    @pytest.mark.parametrize("name", ["index", "[...slug]", "[slug]"])
    def test_skipped_pages(self, name):
        assert generate_breadcrumbs(name) is None

    def test_title_from_slug(self):
        assert page_title_from_slug("terms-and-conditions") == "Terms And Conditions"


# ── add_breadcrumbs ──


class TestAddBreadcrumbs:
    def test_adds_data_and_schema(self, city_page):
        result = add_breadcrumbs(city_page, "sydney")
        assert result["fixed"]
        assert result["detail"] == "Home > Service Areas > Sydney"
        content = result["content"]
        frontmatter = content.split("\n---\n", 1)[0]
        assert "const breadcrumbItems = [" in frontmatter
        assert "{ name: 'Sydney', url: 'https://movingagain.com.au/sydney/' }" in frontmatter
        assert 'slot="head"' in content
        assert content.index("BreadcrumbList") > content.index("<Layout")

    def test_idempotent(self, city_page):
        once = add_breadcrumbs(city_page, "sydney")["content"]
        assert add_breadcrumbs(once, "sydney") == {"fixed": False, "reason": "Already has breadcrumbs"}

    def test_homepage_skipped(self, city_page):
        assert not add_breadcrumbs(city_page, "index")["fixed"]

    def test_no_layout(self):
        result = add_breadcrumbs("---\n---\n<div/>\n", "about")
        assert result["reason"] == "Could not find Layout component"

    def test_main_dry_run(self, tmp_path, city_page, monkeypatch):
        page = tmp_path / "sydney.astro"
        page.write_text(city_page)
        monkeypatch.setattr(add_breadcrumbs_to_pages, "PAGES_DIR", tmp_path)
        assert add_breadcrumbs_to_pages.main(["--dry-run"]) == 0
        assert page.read_text() == city_page

    def test_main_writes(self, tmp_path, city_page, monkeypatch):
        page = tmp_path / "sydney.astro"
        page.write_text(city_page)
        monkeypatch.setattr(add_breadcrumbs_to_pages, "PAGES_DIR", tmp_path)
        assert add_breadcrumbs_to_pages.main([]) == 0
        assert "breadcrumbItems" in page.read_text()


# ── add_breadcrumb_schema ──


class TestAddBreadcrumbSchema:
    def test_adds_schema_after_layout(self):
        content = (
            "---\nconst breadcrumbItems = [];\n---\n"
            '<Layout title="Sydney">\n  <h1>Sydney</h1>\n</Layout>\n'
        )
        result = add_breadcrumb_schema(content)
        assert result["fixed"]
        assert '<Layout title="Sydney">\n  ' + SCHEMA_MARKER in result["content"]

    def test_existing_schema(self, city_page):
        with_crumbs = add_breadcrumbs(city_page, "sydney")["content"]
        assert add_breadcrumb_schema(with_crumbs)["reason"] == "Schema already exists"

    def test_needs_breadcrumb_items(self, city_page):
        assert add_breadcrumb_schema(city_page)["reason"] == "breadcrumbItems not found"

    def test_needs_layout(self):
        result = add_breadcrumb_schema("---\nconst breadcrumbItems = [];\n---\n<div/>\n")
        assert result["reason"] == "Layout tag not found"


# ── add_faq_schema ──


class TestFaqSchema:
    def test_extract_faqs(self, city_page):
        faqs = extract_faqs(city_page)
        assert faqs == [
            {
                "question": "How long does a move from Sydney take?",
                "answer": "Most interstate moves from Sydney take 3-7 business days.",
            },
            {
                "question": "Do you offer backloading?",
                "answer": "Yes, backloading is our most affordable interstate option.",
            },
        ]

    def test_data_block_is_valid_js_strings(self):
        block = faqs_data_block([{"question": 'Say "hi"?', "answer": "Sure thing, always."}])
        assert 'question: "Say \\"hi\\"?",' in block
        assert block.startswith("// FAQs for FAQPage schema\nconst faqs = [")

    def test_adds_schema(self, city_page):
        result = add_faq_schema(city_page)
        assert result["fixed"]
        assert result["detail"] == "2 FAQs"
        frontmatter = result["content"].split("\n---\n", 1)[0]
        assert "const faqs = [" in frontmatter
        assert "'@type': 'FAQPage'" in result["content"]

    def test_schema_follows_breadcrumbs(self, city_page):
        with_crumbs = add_breadcrumbs(city_page, "sydney")["content"]
        content = add_faq_schema(with_crumbs)["content"]
        assert content.index("<!-- FAQPage Schema -->") > content.index("<!-- BreadcrumbList Schema -->")

    def test_replaces_existing_faqs_array(self, city_page):
        page = city_page.replace(
            "const title = 'Removalists Sydney';",
            "const title = 'Removalists Sydney';\nconst faqs = [\n  { question: 'old', answer: 'old' },\n];",
        )
        content = add_faq_schema(page)["content"]
        assert content.count("const faqs = [") == 1
        assert "question: 'old'" not in content

    def test_idempotent(self, city_page):
        once = add_faq_schema(city_page)["content"]
        assert add_faq_schema(once)["reason"] == "FAQPage schema already exists"

    def test_no_faq_section(self):
        assert add_faq_schema('<Layout title="x">\n</Layout>\n')["reason"] == "No FAQs found"

    def test_unparseable_faqs(self):
        content = '---\n---\n<Layout>\n<h2>Frequently Asked Questions</h2>\n</Layout>\n'
        assert add_faq_schema(content)["reason"] == "Could not extract FAQs from HTML"

    def test_main_only_touches_city_pages(self, tmp_path, city_page, monkeypatch):
        (tmp_path / "sydney.astro").write_text(city_page)
        (tmp_path / "contact.astro").write_text(city_page)
        monkeypatch.setattr(faq_script, "PAGES_DIR", tmp_path)
        assert faq_script.main([]) == 0
        assert "FAQPage" in (tmp_path / "sydney.astro").read_text()
        assert "FAQPage" not in (tmp_path / "contact.astro").read_text()


# ── add_aria_attributes ──


class TestAriaAttributes:
    MARKUP = (
        '<nav class="top">\n'
        "<main>\n"
        "<aside>\n"
        '<button class="btn">Go</button>\n'
        '<a href="/facebook/"><img src="fb.svg" alt="Facebook"></a>\n'
    )

    def test_adds_roles_and_labels(self):
        result = add_aria_attributes(self.MARKUP)
        content = result["content"]
        assert '<nav class="top" role="navigation">' in content
        assert '<main role="main">' in content
        assert '<aside role="complementary">' in content
        assert '<button class="btn" role="button">' in content
        assert '<a href="/facebook/" aria-label="Facebook">' in content
        assert result["detail"] == "5 attributes"

    def test_idempotent(self):
        once = add_aria_attributes(self.MARKUP)["content"]
        assert add_aria_attributes(once) == {"fixed": False, "reason": "No ARIA changes needed"}

    def test_labelled_button_untouched(self):
        result = add_aria_attributes('<button aria-label="Close">x</button>')
        assert not result["fixed"]

    def test_link_without_alt_untouched(self):
        result = add_aria_attributes('<a href="/x/"><img src="x.svg"></a>')
        assert not result["fixed"]

    def test_navigation_word_not_a_nav_tag(self):
        assert not add_aria_attributes("<navigation-bar></navigation-bar>")["fixed"]


# ── fix_schema_telephone ──


LOCAL_BUSINESS_PAGE = """<Layout
  title="Sydney"
  schemaType="LocalBusiness"
  schemaData={{
    name: 'Moving Again - Sydney',
    areaServed: 'Sydney',
  }}
>
</Layout>
"""


class TestSchemaTelephone:
    def test_adds_after_name(self):
        result = fix_telephone(LOCAL_BUSINESS_PAGE)
        assert result["fixed"]
        assert (
            "name: 'Moving Again - Sydney',\n    telephone: '+61 7 2143 2557',\n    areaServed"
            in result["content"]
        )

    def test_adds_without_name(self):
        page = LOCAL_BUSINESS_PAGE.replace("    name: 'Moving Again - Sydney',\n", "")
        content = fix_telephone(page)["content"]
        assert f"telephone: '{TELEPHONE}'," in content
        assert content.index("telephone") < content.index("areaServed")

    def test_idempotent(self):
        once = fix_telephone(LOCAL_BUSINESS_PAGE)["content"]
        assert fix_telephone(once)["reason"] == "Telephone already present"

    def test_not_local_business(self):
        page = LOCAL_BUSINESS_PAGE.replace("LocalBusiness", "Organization")
        assert fix_telephone(page)["reason"] == "Not a LocalBusiness page"

    def test_no_schema_data(self):
        result = fix_telephone('<Layout schemaType="LocalBusiness">\n</Layout>\n')
        assert result["reason"] == "Could not find schemaData block"


# ── change_localbusiness_to_organization ──


ADDRESS_PAGE = """<Layout
  schemaType="LocalBusiness"
  schemaData={{
    name: 'Moving Again - Sydney',
    address: { addressLocality: 'Sydney', addressRegion: 'NSW' },
    areaServed: 'Sydney',
    priceRange: '$$',
  }}
>
</Layout>
"""


class TestChangeToOrganization:
    def test_switches_type_and_drops_local_fields(self):
        content = change_to_organization(ADDRESS_PAGE)["content"]
        assert 'schemaType="Organization"' in content
        assert "LocalBusiness" not in content
        assert "address" not in content
        assert "priceRange" not in content
        assert "name: 'Moving Again - Sydney'," in content
        assert "areaServed: 'Sydney'" in content
        assert "}}\n>" in content

    def test_single_quoted_schema_type(self):
        content = change_to_organization(ADDRESS_PAGE.replace('"LocalBusiness"', "'LocalBusiness'"))["content"]
        assert "schemaType='Organization'" in content

    def test_idempotent(self):
        once = change_to_organization(ADDRESS_PAGE)["content"]
        assert change_to_organization(once) == {"fixed": False, "reason": "No LocalBusiness found"}

    def test_find_schema_data_balances_braces(self):
        start, end = find_schema_data(ADDRESS_PAGE)
        body = ADDRESS_PAGE[start:end]
        assert body.strip().startswith("name:")
        assert body.rstrip().endswith("priceRange: '$$',")

    def test_no_schema_data(self):
        assert find_schema_data("<Layout />") is None
