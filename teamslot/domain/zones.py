"""
Mapping of known team cities to IANA time zones.
"""

import logging
from typing import Dict, Optional


logger = logging.getLogger(__name__)

DEFAULT_ZONE = "UTC"

CITY_ZONES: Dict[str, str] = {
    "Los Angeles": "America/Los_Angeles",
    "New York": "America/New_York",
    "London": "Europe/London",
    "Paris": "Europe/Paris",
    "Samara": "Europe/Samara",
    "Prague": "Europe/Prague",
    "Tbilisi": "Asia/Tbilisi",
}


def zone_for_city(city: Optional[str]) -> str:
    """
    Resolve a city name to its time zone.

    Unknown or missing cities fall back to UTC instead of failing.
    """
    zone = CITY_ZONES.get(city) if city else None
    if zone is None:
        logger.debug("No time zone known for city %r, using %s", city, DEFAULT_ZONE)
        return DEFAULT_ZONE
    return zone
