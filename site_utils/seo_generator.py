"""
SEO title and description generator.

Titles are clamped to 60 characters including the " | Moving Again"
suffix. Short titles stay short: padding a route title with a state
abbreviation risks wrong claims ("Sydney to Melbourne NSW"), so the 50-char
minimum is reported by analyze_seo() but never forced.

Descriptions are assembled from content fragments and clamped into the
120-160 window, padded with stock clauses toward the 155-char target.

Nothing here raises; every input yields a string.
"""

from __future__ import annotations

import re

from site_utils.brand import SITE_NAME

SITE_NAME_SUFFIX = f" | {SITE_NAME}"

# ── Length constraints ────────────────────────────────────────

TITLE_MAX_LENGTH = 60  # Google truncates at ~60 chars
TITLE_MIN_LENGTH = 50
TITLE_WITHOUT_SUFFIX_MAX = TITLE_MAX_LENGTH - len(SITE_NAME_SUFFIX)

DESC_TARGET_LENGTH = 155
DESC_MIN_LENGTH = 120
DESC_MAX_LENGTH = 160
DESC_PAD_TOLERANCE = 15

ELLIPSIS = "..."
CTA = "Get your free quote today"
ROUTE_ASSURANCE = "Professional interstate removals"

# Appended in order, each at most once. None is a substring of another.
FILLER_CLAUSES = [
    "Transit insurance included",
    "Professional handling",
    "Free quotes",
    "Door-to-door service",
    "Flexible pickup dates",
    "Australia-wide interstate network",
]

_SUFFIX_RE = re.compile(r"\s*\|\s*" + re.escape(SITE_NAME) + r"\s*$", re.IGNORECASE)


# ── Titles ────────────────────────────────────────────────────


def _truncate_title(title: str, max_length: int) -> str:
    """Cut at the last word boundary that leaves room for an ellipsis."""
    if len(title) <= max_length:
        return title
    window = title[:max_length - len(ELLIPSIS)]
    last_space = window.rfind(" ")
    if last_space > max_length // 2:
        window = window[:last_space]
    return window.rstrip(" ,;:-|") + ELLIPSIS


def generate_seo_title(base_title: str, include_suffix: bool = True,
                       keywords: list | None = None) -> str:
    """Return a title of at most 60 chars ending in the site-name suffix."""
    clean = _SUFFIX_RE.sub("", base_title or "").strip()

    # Secondary " | " clauses are only trimmed when the whole title won't fit
    if len(clean) > TITLE_WITHOUT_SUFFIX_MAX and " | " in clean:
        parts = [p.strip() for p in clean.split(" | ")]
        clean = parts[0]
        if parts[1] and len(clean) + len(parts[1]) + 3 <= TITLE_WITHOUT_SUFFIX_MAX:
            clean = f"{clean} | {parts[1]}"

    if keywords and len(clean) < TITLE_WITHOUT_SUFFIX_MAX - 10:
        keyword = keywords[0]
        if keyword and keyword.lower() not in clean.lower():
            with_keyword = f"{clean} {keyword}".strip()
            if len(with_keyword) <= TITLE_WITHOUT_SUFFIX_MAX:
                clean = with_keyword

    clean = _truncate_title(clean, TITLE_WITHOUT_SUFFIX_MAX)

    if not include_suffix:
        return clean
    if not clean:
        return SITE_NAME
    return clean + SITE_NAME_SUFFIX


# ── Descriptions ──────────────────────────────────────────────


def _append_clause(text: str, clause: str) -> str:
    if not text:
        return clause
    if text.endswith((".", "?", "!")):
        return f"{text} {clause}"
    return f"{text}. {clause}"


def _truncate_description(text: str, max_length: int) -> str:
    """Cut at the last sentence or word boundary so the result fits."""
    if len(text) <= max_length:
        return text
    window = text[:max_length - len(ELLIPSIS)]
    last_space = window.rfind(" ")
    last_stop = max(window.rfind(". "), window.rfind("? "), window.rfind("! "))
    if last_stop > 0 and last_stop >= last_space - 10:
        return window[:last_stop + 1]
    if last_space > 0:
        return window[:last_space].rstrip(" ,;:.") + ELLIPSIS
    return window + ELLIPSIS


def _pad_description(text: str) -> str:
    """Append filler clauses until within tolerance of the target length."""
    for clause in FILLER_CLAUSES:
        if len(text) >= DESC_TARGET_LENGTH - DESC_PAD_TOLERANCE:
            break
        if clause.lower() in text.lower():
            continue
        candidate = _append_clause(text, clause)
        if len(candidate) <= DESC_MAX_LENGTH:
            text = candidate
    return text


def clamp_description(text: str) -> str:
    """Fit a description into the 120-160 window.

    Idempotent: clamping an already clamped string returns it unchanged.
    """
    text = (text or "").strip()
    if not text:
        return ""
    return _pad_description(_truncate_description(text, DESC_MAX_LENGTH))


def _description_parts(origin, destination, service, savings, benefits,
                       transit_time, key_features, include_cta) -> list:
    parts = []
    has_route = bool(origin and destination)

    # Hook
    if has_route:
        parts.append(f"Moving from {origin} to {destination}?")
    elif service:
        parts.append(f"{service} services")

    # Value proposition
    if savings:
        parts.append(f"Save {savings} with backloading")
    elif benefits:
        parts.append(benefits[0])

    # Features: insurance or door-to-door first
    features = []
    if transit_time:
        features.append(f"{transit_time} transit")
    if key_features:
        priority = [f for f in key_features if "insurance" in f or "door" in f]
        features.extend((priority or key_features)[:1])
    if features:
        parts.append(", ".join(features))

    if has_route:
        parts.append(ROUTE_ASSURANCE)
    if include_cta:
        parts.append(CTA)
    return parts


def _join_parts(parts: list) -> str:
    text = ". ".join(p.strip() for p in parts if p and p.strip())
    text = re.sub(r"\.\s*\.", ".", text)
    text = re.sub(r"\?\s*\.", "?", text)
    return text


def generate_seo_description(origin=None, destination=None, service=None,
                             savings=None, benefits=None, transit_time=None,
                             key_features=None, include_cta=True) -> str:
    """Assemble hook, value prop, features and CTA into a 120-160 char description."""
    args = (origin, destination, service, savings, benefits, transit_time, key_features)
    description = _join_parts(_description_parts(*args, include_cta))
    if len(description) > DESC_MAX_LENGTH and include_cta:
        description = _join_parts(_description_parts(*args, False))
    return clamp_description(description)


# ── Page-level helpers ────────────────────────────────────────


def generate_route_seo(route: dict) -> dict:
    """Title and description for a route page."""
    origin = route.get("origin", "")
    destination = route.get("destination", "")
    base_title = route.get("title") or f"Backloading {origin} to {destination}"
    title = generate_seo_title(base_title)

    description = generate_seo_description(
        origin=origin,
        destination=destination,
        service="Interstate backloading",
        savings="up to 60%",
        transit_time=route.get("transitDays") or "3-7 business days",
        key_features=[
            "transit insurance included",
            "door-to-door service",
            "professional handling",
        ],
    )

    return {
        "title": title,
        "description": description,
        "title_length": len(title),
        "description_length": len(description),
    }


def analyze_seo(current_title: str, current_description: str) -> dict:
    """Report length issues for an existing title/description pair."""
    title_issues, title_recs = [], []
    desc_issues, desc_recs = [], []

    title_with_suffix = current_title
    if SITE_NAME not in current_title:
        title_with_suffix = current_title + SITE_NAME_SUFFIX
    title_length = len(title_with_suffix)

    if title_length > TITLE_MAX_LENGTH:
        title_issues.append(f"Too long ({title_length} chars, max: {TITLE_MAX_LENGTH})")
        title_recs.append("Truncate before adding suffix")
    elif title_length < TITLE_MIN_LENGTH:
        title_issues.append(f"Too short ({title_length} chars, min: {TITLE_MIN_LENGTH})")
        title_recs.append("Add more descriptive keywords")

    desc_length = len(current_description)
    if desc_length > DESC_MAX_LENGTH:
        desc_issues.append(f"Too long ({desc_length} chars, max: {DESC_MAX_LENGTH})")
        desc_recs.append(f"Truncate to {DESC_MAX_LENGTH} chars for optimal display")
    elif desc_length < DESC_MIN_LENGTH:
        desc_issues.append(f"Too short ({desc_length} chars, min: {DESC_MIN_LENGTH})")
        desc_recs.append("Add more detail about benefits and services")
    elif desc_length < DESC_TARGET_LENGTH:
        desc_recs.append(f"Consider expanding to {DESC_TARGET_LENGTH} chars for optimal display")

    optimized_title = generate_seo_title(current_title)
    optimized_description = clamp_description(current_description)

    return {
        "title": {
            "current": current_title,
            "current_length": title_length,
            "optimized": optimized_title,
            "optimized_length": len(optimized_title),
            "issues": title_issues,
            "recommendations": title_recs,
        },
        "description": {
            "current": current_description,
            "current_length": desc_length,
            "optimized": optimized_description,
            "optimized_length": len(optimized_description),
            "issues": desc_issues,
            "recommendations": desc_recs,
        },
    }
