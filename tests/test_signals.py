"""
Tests for the page pattern checks.
"""

import pytest

from analyzers.extractor import PageContent
from analyzers.fetcher import FetchedPage
from analyzers.signals import (
    build_signals,
    contains_city,
    has_address,
    has_phone,
    has_schema,
    parse_city,
)


class TestParseCity:
    """Tests for extracting the city from a location string."""

    def test_takes_first_comma_segment(self):
        assert parse_city("Lancaster, PA") == "Lancaster"

    def test_plain_city(self):
        assert parse_city("  Lancaster ") == "Lancaster"

    def test_multiple_segments(self):
        assert parse_city("Lancaster, PA, USA") == "Lancaster"

    def test_blank_first_segment_falls_back_to_whole_location(self):
        assert parse_city(", PA") == ", PA"


class TestPhonePattern:
    """Tests for North American phone detection."""

    @pytest.mark.parametrize(
        "text",
        [
            "Call (717) 555-0100 today",
            "Call (717)555-0100 today",
            "Call 717-555-0100 today",
            "Call 717.555.0100 today",
        ],
    )
    def test_matches_common_formats(self, text):
        assert has_phone(text)

    @pytest.mark.parametrize(
        "text",
        [
            "Call 717 555 0100 someday",
            "Order 7175550100",
            "Mixed 717-555.0100 separators",
            "Opened in 1998",
        ],
    )
    def test_rejects_non_phone_numbers(self, text):
        assert not has_phone(text)


class TestAddressPattern:
    """Tests for street address detection."""

    @pytest.mark.parametrize(
        "text",
        [
            "123 Main Street, Lancaster, PA",
            "45 North Queen St.",
            "9 Lititz Pike Road",
            "1200 Harrisburg Avenue",
            "77 old mill rd",
            "5 Buckwalter DR",
        ],
    )
    def test_matches_street_addresses(self, text):
        assert has_address(text)

    @pytest.mark.parametrize(
        "text",
        [
            "Main Street, Lancaster",
            "123 Main",
            "Over 20 years of pizza",
        ],
    )
    def test_rejects_non_addresses(self, text):
        assert not has_address(text)


class TestSchemaDetection:
    """Tests for structured data markers."""

    def test_local_business_type(self):
        assert has_schema('{"@type": "LocalBusiness"}')

    def test_schema_org_context_case_insensitive(self):
        assert has_schema('<div itemtype="https://Schema.org/Restaurant">')

    def test_type_marker_alone(self):
        assert has_schema('{"@type": "Organization"}')

    def test_plain_page_has_no_schema(self):
        assert not has_schema("<html><body>Pizza</body></html>")


class TestContainsCity:
    """Tests for city substring matching."""

    def test_case_insensitive(self):
        assert contains_city("BEST PIZZA IN LANCASTER", "Lancaster")

    def test_missing_city(self):
        assert not contains_city("Best pizza in town", "Lancaster")

    def test_empty_city_never_matches(self):
        assert not contains_city("anything", "")


class TestBuildSignals:
    """Tests for assembling PageSignals."""

    def _page(self, url="https://joespizza.example/", html=""):
        return FetchedPage(url=url, status_code=200, html=html)

    def test_copies_extracted_fields(self):
        content = PageContent(
            title="Joe's Pizza in Lancaster",
            meta_description="Pizza",
            h1s=("Pizza", "Wings"),
            image_count=3,
            images_with_alt=2,
            word_count=42,
        )
        signals = build_signals(self._page(), content, "Lancaster")

        assert signals.title_length == len("Joe's Pizza in Lancaster")
        assert signals.meta_description_length == 5
        assert signals.h1_count == 2
        assert signals.word_count == 42
        assert signals.image_count == 3
        assert signals.images_with_alt == 2
        assert signals.city_in_title
        assert not signals.city_in_h1

    def test_city_in_any_h1(self):
        content = PageContent(h1s=("Menu", "Serving lancaster since 1998"))
        signals = build_signals(self._page(), content, "Lancaster")
        assert signals.city_in_h1

    def test_location_matched_against_raw_html(self):
        html = '<script>var town = "LANCASTER";</script>'
        signals = build_signals(self._page(html=html), PageContent(), "Lancaster")
        assert signals.has_location

    def test_https_uses_final_url(self):
        assert build_signals(self._page(), PageContent(), "X").is_https
        http_page = self._page(url="http://joespizza.example/")
        assert not build_signals(http_page, PageContent(), "X").is_https
