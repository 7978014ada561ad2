"""
Shared pytest fixtures for Data Point Local SEO tests.
"""

import json

import httpx
import pytest

from analyzers.local_seo import LocalSEOAnalyzer
from config import Settings
from models import ListingResult

FILLER_SENTENCE = (
    "Fresh hand tossed pizza baked daily in our brick oven "
    "for the whole family to enjoy together"
)

JSON_LD = {
    "@context": "https://schema.org",
    "@type": "LocalBusiness",
    "name": "Joe's Pizza",
    "telephone": "(717) 555-0100",
}


def build_page(
    city: str = "Lancaster",
    phone: bool = True,
    address: bool = True,
    schema: bool = True,
    title: str | None = None,
    h1s: list[str] | None = None,
    filler_sentences: int = 18,
) -> str:
    """
    Build a pizza shop home page.

    With the defaults every check passes for "Lancaster, PA". Passing an
    empty city renders the page without any mention of the city.
    """
    place = city or "Town"
    if title is None:
        title = f"Joe's Pizza — Best Pizza in {place}"
    if h1s is None:
        h1s = [f"Best Pizza in {place}"]

    description = (
        f"Joe's Pizza serves hand tossed pies, fresh salads and wings in {place}. "
        "Order online for pickup or delivery, or visit our family dining room."
    )
    filler = " ".join([FILLER_SENTENCE + "."] * filler_sentences)

    parts = [
        "<!DOCTYPE html><html><head>",
        f"<title>{title}</title>",
        f'<meta name="description" content="{description}">',
    ]
    if schema:
        parts.append(
            f'<script type="application/ld+json">{json.dumps(JSON_LD)}</script>'
        )
    parts.append("</head><body>")
    parts.extend(f"<h1>{h1}</h1>" for h1 in h1s)
    parts.append(f"<p>{filler}</p>")
    if phone:
        parts.append("<p>Call us: (717) 555-0100</p>")
    if address:
        street = "123 Main Street"
        parts.append(f"<p>{street}, {city}, PA</p>" if city else f"<p>{street}, PA</p>")
    parts.append("</body></html>")
    return "\n".join(parts)


def places_payload(*names: str) -> dict:
    """A Places text search response with one result per name."""
    return {
        "status": "OK" if names else "ZERO_RESULTS",
        "results": [
            {
                "name": name,
                "rating": 4.6,
                "user_ratings_total": 212,
                "formatted_address": "123 Main St, Lancaster, PA 17602, USA",
            }
            for name in names
        ],
    }


class StubPlaces:
    """Deterministic listing lookup that records its calls."""

    def __init__(self, result: ListingResult):
        self.result = result
        self.calls = []

    def lookup(self, business_name, city, timeout=None):
        self.calls.append((business_name, city))
        return self.result


@pytest.fixture
def settings() -> Settings:
    """Settings isolated from the environment and any .env file."""
    return Settings(_env_file=None, google_places_api_key="test-key")


@pytest.fixture
def found_listing() -> ListingResult:
    return ListingResult(
        found=True,
        name="Joe's Pizza",
        rating=4.6,
        review_count=212,
        address="123 Main St, Lancaster, PA 17602, USA",
        query="Joe's Pizza Lancaster",
    )


@pytest.fixture
def page_server():
    """
    Factory for an analyzer whose page fetch is served from memory.

    Usage:
        analyzer = page_server(settings, html, places=stub)
    """

    def factory(settings, html, places, status_code=200, final_url=None):
        def handler(request: httpx.Request) -> httpx.Response:
            if final_url and str(request.url) != final_url:
                return httpx.Response(301, headers={"Location": final_url})
            return httpx.Response(status_code, text=html)

        return LocalSEOAnalyzer(
            settings,
            places=places,
            transport=httpx.MockTransport(handler),
        )

    return factory
