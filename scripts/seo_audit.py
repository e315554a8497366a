#!/usr/bin/env python3
"""
Technical SEO audits via the technical.again.com.au API.

Commands:
    python scripts/seo_audit.py page <url>                  Audit a single page
    python scripts/seo_audit.py crawl <domain>              Discovery crawl (10 pages)
    python scripts/seo_audit.py crawl <domain> --limit 100  Full crawl (up to 500 pages)
    python scripts/seo_audit.py crawl <domain> --urls a,b   Priority entry URLs (up to 10)
    python scripts/seo_audit.py status <id>                 Show a crawl
    python scripts/seo_audit.py list                        Crawl history

Requires SEO_AUDITOR_TOKEN in the environment or .env.
"""

import argparse
import os
import sys
import time
from pathlib import Path

import requests
from dotenv import load_dotenv

PROJECT_ROOT = Path(__file__).resolve().parent.parent
load_dotenv(PROJECT_ROOT / ".env")

API_BASE = os.environ.get("SEO_AUDITOR_API_BASE", "https://technical.again.com.au/api")

POLL_INTERVAL_SECONDS = 5
PAGE_AUDIT_MAX_ATTEMPTS = 60    # 5 minutes
CRAWL_MAX_ATTEMPTS = 120        # 10 minutes
DISCOVERY_LIMIT = 10
MAX_PRIORITY_URLS = 10
DEFAULT_CRAWL_DEPTH = 5
REQUEST_TIMEOUT = 30


class SEOAuditError(Exception):
    """The auditor API returned an error or a non-JSON response."""


def unwrap(payload):
    """Responses may be wrapped as {"data": ...}."""
    if isinstance(payload, dict) and "data" in payload:
        return payload["data"]
    return payload


class SEOAuditClient:
    def __init__(self, token: str, api_base: str = API_BASE, session=None,
                 sleep=time.sleep):
        self.api_base = api_base.rstrip("/")
        self.session = session or requests.Session()
        self.session.headers.update({
            "Authorization": f"Bearer {token}",
            "Content-Type": "application/json",
        })
        self.sleep = sleep

    def request(self, method: str, endpoint: str, json_body=None):
        url = f"{self.api_base}{endpoint}"
        try:
            resp = self.session.request(method, url, json=json_body, timeout=REQUEST_TIMEOUT)
        except requests.RequestException as e:
            raise SEOAuditError(f"Request failed: {e}") from e

        if not resp.ok:
            raise SEOAuditError(f"API Error: {resp.status_code} - {resp.text}")
        if "application/json" not in resp.headers.get("content-type", ""):
            raise SEOAuditError(f"API returned non-JSON response: {resp.text[:200]}")
        try:
            return resp.json()
        except ValueError as e:
            raise SEOAuditError(f"API returned invalid JSON: {e}") from e

    # ── Page audits ───────────────────────────────────────────

    def start_page_audit(self, url: str) -> str:
        payload = unwrap(self.request("POST", "/audit", {"url": url}))
        try:
            return payload["audit_id"]
        except (KeyError, TypeError) as e:
            raise SEOAuditError(f"Unexpected audit response: {payload!r}") from e

    def get_page_audit(self, audit_id) -> dict:
        return unwrap(self.request("GET", f"/audit/{audit_id}"))

    # ── Crawls ────────────────────────────────────────────────

    def start_crawl(self, domain: str, limit: int = DISCOVERY_LIMIT,
                    depth: int = DEFAULT_CRAWL_DEPTH, urls=None) -> dict:
        body = {"domain": domain, "depth": depth, "limit": limit}
        if urls:
            body["urls"] = list(urls)[:MAX_PRIORITY_URLS]
        crawl = unwrap(self.request("POST", "/crawls", body))
        if not isinstance(crawl, dict):
            raise SEOAuditError(f"Unexpected crawl response: {crawl!r}")
        return crawl

    def get_crawl(self, crawl_id) -> dict:
        return unwrap(self.request("GET", f"/crawls/{crawl_id}"))

    def list_crawls(self) -> list:
        crawls = unwrap(self.request("GET", "/crawls"))
        if isinstance(crawls, list):
            return crawls
        return crawls.get("data", []) if isinstance(crawls, dict) else []

    # ── Polling ───────────────────────────────────────────────

    def wait_for(self, fetch, max_attempts: int, on_progress=None) -> dict | None:
        """Poll fetch() until status is completed or failed.

        Returns the final payload, or None on timeout.
        """
        for _ in range(max_attempts):
            self.sleep(POLL_INTERVAL_SECONDS)
            result = fetch()
            if result.get("status") in ("completed", "failed"):
                return result
            if on_progress:
                on_progress(result)
        return None


# ── Display ───────────────────────────────────────────────────


def _score(value, missing="N/A") -> str:
    return f"{value}/100" if value is not None else missing


def display_page_results(results: dict):
    print("\n" + "=" * 60)
    print("📊 AUDIT RESULTS")
    print("=" * 60)
    print(f"\n🎯 Overall Score: {_score(results.get('overall_score'))}")

    if results.get("summary"):
        print(f"\n📝 Summary:\n{results['summary']}\n")

    if results.get("action_items"):
        print("\n📋 Action Items:\n")
        for category in results["action_items"]:
            print(f"\n{category.get('category', 'General')}:")
            for issue in category.get("issues", []):
                icon = "🔴" if issue.get("status") == "fail" else "🟡"
                priority = f" [{issue['priority']}]" if issue.get("priority") else ""
                print(f"  {icon} {issue.get('title', '')}{priority}")
                if issue.get("description"):
                    print(f"     {issue['description']}")
                if issue.get("remediation"):
                    print(f"     💡 Fix: {issue['remediation']}")

    if results.get("category_scores"):
        print("\n📊 Category Scores:")
        for category, score in results["category_scores"].items():
            print(f"  {category}: {score}/100")

    print("\n" + "=" * 60 + "\n")


def issue_title(issue_type: str) -> str:
    """'missing_meta_description' -> 'Missing Meta Description'."""
    return issue_type.replace("_", " ").title()


def display_crawl_results(crawl: dict):
    progress = crawl.get("progress") or {}
    print("=" * 60)
    print("📊 CRAWL RESULTS")
    print("=" * 60)
    print(f"\n🎯 Health Score: {_score(crawl.get('score'), 'N/A (Discovery Mode)')}")
    print(f"📄 Pages Processed: {progress.get('processed') or 0}")
    print(f"📊 Total Pages Found: {progress.get('total') or 0}")
    print(f"❌ Failed Pages: {progress.get('failed') or 0}")

    timestamps = crawl.get("timestamps")
    if timestamps:
        print(f"🕐 Started: {timestamps.get('created_at')}")
        print(f"🕐 Completed: {timestamps.get('completed_at')}")

    issues = crawl.get("issues") or []
    if issues:
        print(f"\n⚠️  Issues Found: {crawl.get('issues_count') or len(issues)} types\n")
        for issue in issues:
            print(f"\n{issue_title(issue.get('type') or 'Unknown Issue')}:")
            print(f"  Count: {issue.get('count') or 'N/A'}")
            print(f"  Message: {issue.get('message') or 'No description'}")
            urls = issue.get("data") or []
            if urls:
                print("  Affected URLs (showing first 10):")
                for url in urls[:10]:
                    print(f"    - {url}")
                if len(urls) > 10:
                    print(f"    ... and {len(urls) - 10} more")
    else:
        print("\n✅ No issues found!")

    audits = crawl.get("audits") or []
    if audits:
        print("\n📄 Page Scores (sorted by lowest first):\n")
        for audit in sorted(audits, key=lambda a: a.get("score") or 0):
            url = audit.get("url") or audit.get("target_url") or "Unknown URL"
            print(f"  {_score(audit.get('score')):<6} - {url}")

    print("\n" + "=" * 60 + "\n")


def display_crawl_list(crawls: list):
    print("\n📊 Crawl History\n")
    print("ID    | Score | Status     | Domain")
    print("------|-------|------------|-------------------")
    for crawl in crawls:
        score = _score(crawl.get("score"))
        status = crawl.get("status") or "unknown"
        domain = crawl.get("domain") or "N/A"
        print(f"{str(crawl.get('id')):<5} | {score:<5} | {status:<10} | {domain}")
    print()


# ── Commands ──────────────────────────────────────────────────


def run_page_audit(client: SEOAuditClient, url: str) -> int:
    print(f"\n🔍 Auditing page: {url}\n")
    audit_id = client.start_page_audit(url)
    print(f"📋 Audit ID: {audit_id}")
    print("⏳ Waiting for results...")

    result = client.wait_for(
        lambda: client.get_page_audit(audit_id), PAGE_AUDIT_MAX_ATTEMPTS,
        on_progress=lambda _: print(".", end="", flush=True),
    )
    if result is None:
        print("\n❌ Timeout waiting for audit results", file=sys.stderr)
        return 1
    if result["status"] == "failed":
        print("❌ Audit failed", file=sys.stderr)
        return 1
    display_page_results(result)
    return 0


def _print_crawl_progress(crawl: dict):
    progress = crawl.get("progress")
    if progress:
        print(f"\r⏳ Progress: {progress.get('processed')}/{progress.get('total')} pages "
              f"({progress.get('failed') or 0} failed)", end="", flush=True)
    else:
        print(".", end="", flush=True)


def run_crawl(client: SEOAuditClient, domain: str, limit: int = DISCOVERY_LIMIT,
              urls=None) -> int:
    discovery = limit <= DISCOVERY_LIMIT
    print(f"\n🕷️  Starting {'Discovery Mode' if discovery else 'Full Crawl'}: {domain}\n")
    if discovery:
        print("💡 Discovery Mode: Lightweight scan focusing on site-wide issues (10 pages)\n")

    urls = list(urls or [])
    if len(urls) > MAX_PRIORITY_URLS:
        print(f"⚠️  Warning: Only first {MAX_PRIORITY_URLS} URLs will be used as priority entry points")
    if urls:
        print(f"📌 Priority URLs: {min(len(urls), MAX_PRIORITY_URLS)} specified\n")

    crawl = client.start_crawl(domain, limit=limit, urls=urls)
    crawl_id = crawl.get("id")
    print(f"📋 Crawl ID: {crawl_id}")
    print(f"📊 Status: {crawl.get('status')}")
    print("⏳ Waiting for crawl to complete...")

    result = client.wait_for(
        lambda: client.get_crawl(crawl_id), CRAWL_MAX_ATTEMPTS,
        on_progress=_print_crawl_progress,
    )
    if result is None:
        print("\n❌ Timeout waiting for crawl results", file=sys.stderr)
        print(f"\n💡 Check status manually: python scripts/seo_audit.py status {crawl_id}")
        return 1
    if result["status"] == "failed":
        print("❌ Crawl failed", file=sys.stderr)
        return 1
    print("\n✅ Crawl completed!\n")
    display_crawl_results(result)
    return 0


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Technical SEO audits")
    sub = parser.add_subparsers(dest="command", required=True)

    page = sub.add_parser("page", help="Audit a single page")
    page.add_argument("url")

    crawl = sub.add_parser("crawl", help="Crawl a site")
    crawl.add_argument("domain")
    crawl.add_argument("--limit", type=int, default=DISCOVERY_LIMIT,
                       help="Pages to crawl (10 = Discovery Mode, max 500)")
    crawl.add_argument("--urls", default="",
                       help="Comma-separated priority URLs (first 10 used)")

    status = sub.add_parser("status", help="Show a crawl's results")
    status.add_argument("crawl_id")

    sub.add_parser("list", help="List all crawls")
    return parser


def main(argv=None, client=None):
    args = build_parser().parse_args(argv)

    if client is None:
        token = os.environ.get("SEO_AUDITOR_TOKEN")
        if not token:
            print("❌ SEO_AUDITOR_TOKEN not found in environment or .env", file=sys.stderr)
            print("Please add: SEO_AUDITOR_TOKEN=your_token_here", file=sys.stderr)
            return 1
        client = SEOAuditClient(token)

    try:
        if args.command == "page":
            return run_page_audit(client, args.url)
        if args.command == "crawl":
            urls = [u.strip() for u in args.urls.split(",") if u.strip()]
            return run_crawl(client, args.domain, limit=args.limit, urls=urls)
        if args.command == "status":
            display_crawl_results(client.get_crawl(args.crawl_id))
            return 0
        display_crawl_list(client.list_crawls())
        return 0
    except SEOAuditError as e:
        print(f"❌ {e}", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
