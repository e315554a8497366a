#!/usr/bin/env python3
"""
Add FAQPage JSON-LD to city pages that have an FAQ section.

Questions and answers are scraped from the page's <details> accordions,
written into a `const faqs = [...]` array in the frontmatter, and rendered
as an FAQPage script after the BreadcrumbList schema (or right after the
opening <Layout> tag when there is none).

Usage:
    python scripts/add_faq_schema.py
    python scripts/add_faq_schema.py --dry-run
"""

import json
import re
import sys

from astro_pages import (
    PAGES_DIR,
    dry_run_parser,
    exit_code,
    find_city_files,
    insert_before_frontmatter_close,
    run_batch,
)
from add_breadcrumb_schema import LAYOUT_OPEN_RE

DETAILS_RE = re.compile(r'<details[^>]*class="bg-gray-50[^"]*"[^>]*>(.*?)</details>', re.DOTALL)
SUMMARY_RE = re.compile(r"<summary[^>]*>(.*?)</summary>", re.DOTALL)
ANSWER_RE = re.compile(r'<div[^>]*class="px-6 pb-6 text-gray-600"[^>]*>(.*?)</div>', re.DOTALL)
FAQS_ARRAY_RE = re.compile(r"const faqs = \[.*?\];", re.DOTALL)
BREADCRUMB_SCHEMA_RE = re.compile(r"<!-- BreadcrumbList Schema -->.*?/>\n", re.DOTALL)

FAQ_SCHEMA = """
  <!-- FAQPage Schema -->
  <script
    type="application/ld+json"
    set:html={JSON.stringify({
      '@context': 'https://schema.org',
      '@type': 'FAQPage',
      mainEntity: faqs.map((faq) => ({
        '@type': 'Question',
        name: faq.question,
        acceptedAnswer: {
          '@type': 'Answer',
          text: faq.answer,
        },
      })),
    })}
  />
"""


def _clean_text(html: str) -> str:
    text = re.sub(r"<span[^>]*>.*?</span>", "", html, flags=re.DOTALL)
    text = re.sub(r"<[^>]+>", "", text)
    return re.sub(r"\s+", " ", text).strip()


def extract_faqs(content: str) -> list:
    """Pull question/answer pairs out of the page's FAQ accordions."""
    faqs = []
    for details in DETAILS_RE.finditer(content):
        summary = SUMMARY_RE.search(details.group(1))
        answer = ANSWER_RE.search(details.group(1))
        if not summary or not answer:
            continue
        question = _clean_text(summary.group(1))
        answer_text = _clean_text(answer.group(1))
        if len(question) > 5 and len(answer_text) > 10:
            faqs.append({"question": question, "answer": answer_text})
    return faqs


def faqs_data_block(faqs: list) -> str:
    entries = ",\n".join(
        "  {\n"
        f"    question: {json.dumps(faq['question'], ensure_ascii=False)},\n"
        f"    answer: {json.dumps(faq['answer'], ensure_ascii=False)},\n"
        "  }"
        for faq in faqs
    )
    return f"// FAQs for FAQPage schema\nconst faqs = [\n{entries},\n];"


def add_faq_schema(content: str) -> dict:
    if "Frequently Asked Questions" not in content and '<details class="bg-gray-50' not in content:
        return {"fixed": False, "reason": "No FAQs found"}
    if "FAQPage" in content:
        return {"fixed": False, "reason": "FAQPage schema already exists"}

    faqs = extract_faqs(content)
    if not faqs:
        return {"fixed": False, "reason": "Could not extract FAQs from HTML"}

    layout = LAYOUT_OPEN_RE.search(content)
    if not layout:
        return {"fixed": False, "reason": "Could not find Layout component"}

    data_block = faqs_data_block(faqs)
    if FAQS_ARRAY_RE.search(content):
        content = FAQS_ARRAY_RE.sub(lambda _: data_block, content, count=1)
    else:
        content = insert_before_frontmatter_close(content, data_block)
        if content is None:
            return {"fixed": False, "reason": "Could not find frontmatter end"}

    layout = LAYOUT_OPEN_RE.search(content)
    insert_at = layout.end()
    breadcrumb = BREADCRUMB_SCHEMA_RE.search(content, insert_at)
    if breadcrumb:
        insert_at = breadcrumb.end()

    return {
        "fixed": True,
        "content": content[:insert_at] + FAQ_SCHEMA + content[insert_at:],
        "detail": f"{len(faqs)} FAQs",
    }


def main(argv=None):
    args = dry_run_parser("Add FAQPage schema to city pages").parse_args(argv)
    files = find_city_files(PAGES_DIR)
    print(f"Found {len(files)} city pages")
    results = run_batch(files, add_faq_schema, dry_run=args.dry_run,
                        title="Adding FAQPage Schema", fixed_label="Added FAQPage schema")
    return exit_code(results)


if __name__ == "__main__":
    sys.exit(main())
