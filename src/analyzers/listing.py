"""Business listing lookup against the Google Places text search API."""

import logging
import re

import httpx
from pydantic import ValidationError

from analyzers.base import ListingLookupError
from config import Settings
from models import ListingResult

logger = logging.getLogger(__name__)

MISSING_KEY_ERROR = "GOOGLE_PLACES_API_KEY is not configured"

# Places API statuses that mean the request itself worked
OK_STATUSES = {"OK", "ZERO_RESULTS"}

LEGAL_SUFFIXES = {
    "co",
    "company",
    "corp",
    "corporation",
    "inc",
    "incorporated",
    "limited",
    "llc",
    "llp",
    "lp",
    "ltd",
    "pllc",
}

PUNCTUATION_PATTERN = re.compile(r"[^\w\s]")


def name_variants(business_name: str) -> list[str]:
    """
    Candidate names to search for, most specific first.

    "Joe's Pizza, LLC" -> ["Joe's Pizza, LLC", "Joes Pizza LLC", "Joes Pizza"]
    """
    original = " ".join(business_name.split())
    stripped = " ".join(PUNCTUATION_PATTERN.sub("", original).split())

    words = stripped.split()
    while len(words) > 1 and words[-1].lower() in LEGAL_SUFFIXES:
        words.pop()
    without_suffix = " ".join(words)

    variants = []
    for candidate in (original, stripped, without_suffix):
        if candidate and candidate not in variants:
            variants.append(candidate)
    return variants


class PlacesClient:
    """Looks a business up by name and city, degrading to found=False on any failure."""

    def __init__(
        self,
        settings: Settings,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings
        self.transport = transport

    def lookup(
        self,
        business_name: str,
        city: str,
        timeout: float | None = None,
    ) -> ListingResult:
        """
        Find the business listing.

        Each name variant is an independent query; the first one with
        results wins. Errors are recorded on the result, never raised.
        """
        if not self.settings.google_places_api_key:
            logger.info("Skipping listing lookup, no places API key configured")
            return ListingResult(found=False, error=MISSING_KEY_ERROR)

        timeout = self.settings.listing_timeout if timeout is None else timeout
        last_error = None

        for name in name_variants(business_name):
            query = f"{name} {city}".strip()
            try:
                places = self._search(query, timeout)
            except ListingLookupError as e:
                logger.warning(f"Listing lookup failed for '{query}': {e}")
                last_error = str(e)
                continue

            if places:
                try:
                    result = self._to_result(places[0], query)
                except ListingLookupError as e:
                    logger.warning(f"Unusable listing for '{query}': {e}")
                    last_error = str(e)
                    continue
                logger.info(f"Listing found for '{query}': {result.name}")
                return result

        logger.info(f"No listing found for '{business_name}' in {city}")
        return ListingResult(found=False, error=last_error)

    def _to_result(self, place: dict, query: str) -> ListingResult:
        """Build a found result from one Places entry."""
        try:
            return ListingResult(
                found=True,
                name=place.get("name"),
                rating=place.get("rating"),
                review_count=place.get("user_ratings_total"),
                address=place.get("formatted_address"),
                query=query,
            )
        except ValidationError as e:
            fields = ", ".join(str(err["loc"][0]) for err in e.errors() if err["loc"])
            raise ListingLookupError(f"Places API returned a malformed result ({fields})")

    def _search(self, query: str, timeout: float) -> list[dict]:
        """Run one text search and return its results list."""
        try:
            with httpx.Client(timeout=timeout, transport=self.transport) as client:
                response = client.get(
                    self.settings.places_search_url,
                    params={"query": query, "key": self.settings.google_places_api_key},
                )
                response.raise_for_status()
                data = response.json()

        except httpx.TimeoutException:
            raise ListingLookupError(f"Places API timed out after {timeout:g}s")

        except httpx.HTTPStatusError as e:
            raise ListingLookupError(f"Places API returned HTTP {e.response.status_code}")

        except httpx.HTTPError as e:
            raise ListingLookupError(f"Places API request failed: {e}")

        except ValueError as e:
            raise ListingLookupError(f"Places API returned invalid JSON: {e}")

        if not isinstance(data, dict):
            raise ListingLookupError("Places API returned an unexpected payload")

        status = data.get("status", "OK")
        if status not in OK_STATUSES:
            message = data.get("error_message") or status
            raise ListingLookupError(f"Places API error: {message}")

        results = data.get("results") or []
        return [place for place in results if isinstance(place, dict)]
