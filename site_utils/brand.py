"""
Moving Again brand constants.

Single source for names, phone numbers and URLs so pages and scripts never
hardcode them.
"""

from datetime import date

FOUNDING_YEAR = 1995

SITE_NAME = "Moving Again"
SITE_URL = "https://movingagain.com.au"


def years_in_business(today=None) -> int:
    """Years trading, counted from FOUNDING_YEAR."""
    today = today or date.today()
    return today.year - FOUNDING_YEAR


BRAND = {
    "name": SITE_NAME,
    "phone": "1300 668 464",
    "schema_telephone": "+61 7 2143 2557",
    "email": "info@movingagain.com.au",
    "founding_year": FOUNDING_YEAR,
    # URLs
    "website": SITE_URL,
    "quote_url": "https://removalistquotes.movingagain.com.au/quote/household",
    "car_quote_url": "https://carquotes.movingagain.com.au/quote/v2",
    "insurance_url": "https://movinginsurance.com.au",
    # Taglines
    "short_tagline": "Since 1995",
}


def tagline(today=None) -> str:
    return f"{years_in_business(today)} Years of Moving Australia"
