"""Data Point Local SEO analyzers package."""

from analyzers.base import (
    AnalyzerError,
    BaseAnalyzer,
    FetchError,
    InputError,
    ListingLookupError,
    ParseError,
)
from analyzers.extractor import PageContent, extract_page_content
from analyzers.fetcher import FetchedPage, PageFetcher, normalize_url
from analyzers.listing import PlacesClient, name_variants
from analyzers.local_seo import LocalSEOAnalyzer
from analyzers.signals import build_signals, parse_city

__all__ = [
    "AnalyzerError",
    "BaseAnalyzer",
    "FetchError",
    "InputError",
    "ListingLookupError",
    "ParseError",
    "PageContent",
    "extract_page_content",
    "FetchedPage",
    "PageFetcher",
    "normalize_url",
    "PlacesClient",
    "name_variants",
    "LocalSEOAnalyzer",
    "build_signals",
    "parse_city",
]
