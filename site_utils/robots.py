"""robots.txt body for the static site."""

SITEMAP_FILES = ["sitemap-index.xml", "llms.txt"]


def build_robots_txt(site_url: str) -> str:
    site_url = site_url.rstrip("/")
    lines = ["User-agent: *", "Allow: /", ""]
    lines += [f"Sitemap: {site_url}/{name}" for name in SITEMAP_FILES]
    return "\n".join(lines)
