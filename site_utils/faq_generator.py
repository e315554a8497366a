"""Route page FAQs, derived deterministically from route data."""

from __future__ import annotations

from site_utils.brand import BRAND
from site_utils.geography import STATE_NAMES, get_distance, is_capital

DEFAULT_DISTANCE_KM = 1500


def estimate_distance(origin: str, destination: str) -> int:
    """Road distance from the fixed table, or a 1500 km default."""
    return get_distance(origin, destination) or DEFAULT_DISTANCE_KM


def estimate_transit_time(distance_km: float) -> str:
    if distance_km < 500:
        return "2-4 business days"
    if distance_km < 1000:
        return "3-5 business days"
    if distance_km < 2000:
        return "5-7 business days"
    if distance_km < 3000:
        return "7-10 business days"
    return "10-14 business days"


def is_capital_route(origin: str, destination: str) -> bool:
    return is_capital(origin) and is_capital(destination)


def _state_name(code: str) -> str:
    return STATE_NAMES.get(code, code)


def generate_faqs_for_route(route: dict) -> list[dict]:
    """Build the ordered FAQ list for a route page.

    Six questions always; route frequency only between two capitals;
    interstate restrictions only when the states differ.
    """
    origin = route.get("origin", "")
    destination = route.get("destination", "")
    origin_state = route.get("originState", "")
    destination_state = route.get("destinationState", "")

    distance = route.get("distanceKm") or estimate_distance(origin, destination)
    transit = route.get("transitDays") or estimate_transit_time(distance)
    insurance_host = BRAND["insurance_url"].split("//", 1)[-1]

    faqs = [
        {
            "question": f"How long does backloading from {origin} to {destination} take?",
            "answer": (
                f"Typical transit time for {origin} to {destination} is {transit}. "
                "This allows for pickup coordination and efficient routing. For urgent "
                "moves, ask about our express options when getting your quote."
            ),
        },
        {
            "question": f"How much does it cost to move from {origin} to {destination}?",
            "answer": (
                "The cost depends on how much you're moving (measured in cubic metres), "
                "your flexibility with dates, and any access issues at pickup or delivery. "
                "Backloading typically saves 30-60% compared to a dedicated truck. Get an "
                "instant quote by listing your items in our online system."
            ),
        },
        {
            "question": f"What is backloading for the {origin} to {destination} route?",
            "answer": (
                "Backloading means sharing truck space with other customers heading in the "
                f"same direction. Our trucks regularly travel between {origin} and "
                f"{destination}, and we fill remaining space at reduced rates. You get the "
                "same professional service at a lower price."
            ),
        },
        {
            "question": f"What items can you move from {origin} to {destination}?",
            "answer": (
                "We can move all standard household furniture, boxes, and appliances. This "
                "includes beds, sofas, dining tables, fridges, washing machines, and more. "
                "Fragile items are wrapped and secured. For specialty items like pianos or "
                "antiques, mention these when getting your quote."
            ),
        },
        {
            "question": "Is my furniture insured during the move?",
            "answer": (
                "Transit insurance is included through our contractors, covering fire, "
                "collision, and overturning. For complete protection including handling "
                f"damage, we recommend full moving insurance from {insurance_host}."
            ),
        },
    ]

    if is_capital_route(origin, destination):
        faqs.append({
            "question": f"How often do you run trucks between {origin} and {destination}?",
            "answer": (
                "This is one of our busiest routes with trucks travelling regularly between "
                f"{origin} and {destination}. This high frequency means more pickup windows "
                "and competitive pricing."
            ),
        })

    faqs.append({
        "question": "Do I need to be flexible with pickup dates?",
        "answer": (
            "Some flexibility helps us offer lower prices. We typically ask for a 48-hour "
            "pickup window rather than a specific day. The more flexible you are, the more "
            "you can save. If you have strict deadlines, let us know and we'll do our best "
            "to accommodate."
        ),
    })

    if origin_state != destination_state:
        faqs.append({
            "question": (
                f"Are there any restrictions moving from {_state_name(origin_state)} "
                f"to {_state_name(destination_state)}?"
            ),
            "answer": (
                "Most household items can be moved between states without issues. Note "
                "that some plants may require inspection if you're moving to WA or Tasmania "
                "due to quarantine rules. Check our guide on moving pot plants interstate "
                "for details."
            ),
        })

    return faqs
