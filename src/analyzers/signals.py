"""Pattern checks that turn a fetched page into PageSignals."""

import re
from urllib.parse import urlparse

from analyzers.extractor import PageContent
from analyzers.fetcher import FetchedPage
from models import PageSignals

# (717) 555-0100, (717) 555.0100, 717-555-0100, 717.555.0100
PHONE_PATTERN = re.compile(
    r"\(\d{3}\)\s*\d{3}[-.]\d{4}"
    r"|\b\d{3}([-.])\d{3}\1\d{4}\b"
)

# Street number, up to five words, then a street-type token
ADDRESS_PATTERN = re.compile(
    r"\b\d{1,6}\s+(?:[a-z0-9.'-]+\s+){1,5}?"
    r"(?:street|st|avenue|ave|road|rd|drive|dr|boulevard|blvd|lane|ln|way|court|ct)\b",
    re.IGNORECASE,
)

SCHEMA_MARKERS = ("localbusiness", '"@type"', "schema.org")


def parse_city(location: str) -> str:
    """Return the first comma segment of a location ("Lancaster, PA" -> "Lancaster")."""
    city = location.split(",")[0].strip()
    return city or location.strip()


def has_phone(html: str) -> bool:
    return PHONE_PATTERN.search(html) is not None


def has_address(html: str) -> bool:
    return ADDRESS_PATTERN.search(html) is not None


def has_schema(html: str) -> bool:
    lowered = html.lower()
    return any(marker in lowered for marker in SCHEMA_MARKERS)


def contains_city(text: str, city: str) -> bool:
    return bool(city) and city.lower() in text.lower()


def build_signals(page: FetchedPage, content: PageContent, city: str) -> PageSignals:
    """Run every pattern check against a fetched page."""
    html = page.html

    return PageSignals(
        url=page.url,
        city=city,
        title=content.title,
        title_length=len(content.title),
        meta_description=content.meta_description,
        meta_description_length=len(content.meta_description),
        h1s=content.h1s,
        h1_count=len(content.h1s),
        word_count=content.word_count,
        image_count=content.image_count,
        images_with_alt=content.images_with_alt,
        has_phone=has_phone(html),
        has_address=has_address(html),
        has_schema=has_schema(html),
        has_location=contains_city(html, city),
        city_in_title=contains_city(content.title, city),
        city_in_h1=any(contains_city(h1, city) for h1 in content.h1s),
        is_https=urlparse(page.url).scheme.lower() == "https",
    )
