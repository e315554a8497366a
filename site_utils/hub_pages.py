"""
City hub pages.

Maps city names to their hub page paths so route pages can link back to
the per-city landing page.
"""

from site_utils.geography import city_slug

HUB_CITIES = {
    name: f"/{city_slug(name)}/"
    for name in [
        "Adelaide", "Ballarat", "Bendigo", "Brisbane", "Bunbury", "Bundaberg",
        "Cairns", "Canberra", "Darwin", "Geelong", "Gold Coast", "Hobart",
        "Launceston", "Logan City", "Mackay", "Mandurah", "Melbourne",
        "Newcastle", "Perth", "Rockhampton", "Rockingham", "Sydney",
        "Toowoomba", "Townsville", "Wollongong",
    ]
}


def get_city_hub_url(city: str):
    """Hub page path for a city ('Gold Coast' -> '/gold-coast/'), or None."""
    return HUB_CITIES.get(city)


def has_hub_page(city: str) -> bool:
    return city in HUB_CITIES


def get_all_hub_cities() -> list[str]:
    return list(HUB_CITIES)
