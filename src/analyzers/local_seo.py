"""Local SEO analysis engine."""

import logging
import time
from datetime import datetime, timezone

import httpx

from analyzers.base import BaseAnalyzer, FetchError
from analyzers.extractor import extract_page_content
from analyzers.fetcher import PageFetcher, normalize_url
from analyzers.listing import PlacesClient
from analyzers.signals import build_signals, parse_city
from config import Settings
from models import Issue, ListingResult, Priority, Report, Scores
from scoring.engine import ScoringEngine
from scoring.rules import AuditContext

logger = logging.getLogger(__name__)

DEADLINE_EXCEEDED_ERROR = "Analysis deadline exceeded"


class LocalSEOAnalyzer(BaseAnalyzer):
    """
    Audits a small-business website for local search readiness.

    Pipeline:
    - Fetch the page (scheme defaults to https)
    - Extract title, meta description, H1s and word count
    - Run pattern checks (phone, address, schema, city mentions, HTTPS)
    - Look the business up in Google Places
    - Score everything against the rule table

    A failed fetch short-circuits into a zero-scored report. Nothing
    raised inside the pipeline reaches the caller.
    """

    def __init__(
        self,
        settings: Settings,
        fetcher: PageFetcher | None = None,
        places: PlacesClient | None = None,
        engine: ScoringEngine | None = None,
        transport: httpx.BaseTransport | None = None,
    ):
        self.settings = settings
        self.fetcher = fetcher or PageFetcher(settings, transport=transport)
        self.places = places or PlacesClient(settings, transport=transport)
        self.engine = engine or ScoringEngine()

    @property
    def name(self) -> str:
        return "local_seo"

    def analyze(self, url: str, business_name: str, location: str) -> Report:
        """
        Run the local SEO audit.

        Args:
            url: Website URL, scheme optional
            business_name: Business name used for the listing lookup
            location: "City, Region" or just a city

        Returns:
            Report with scores, issues and recommendations
        """
        url = normalize_url(url)
        city = parse_city(location)
        deadline = time.monotonic() + self.settings.analysis_deadline
        logger.info(f"Analyzing {url} for '{business_name}' in {city}")

        try:
            page = self.fetcher.fetch(
                url, timeout=self._budget(deadline, self.settings.http_timeout)
            )
            content = extract_page_content(page.html)
            signals = build_signals(page, content, city)

            remaining = deadline - time.monotonic()
            if remaining <= 0:
                logger.warning(f"Deadline exceeded before listing lookup for {url}")
                listing = ListingResult(found=False, error=DEADLINE_EXCEEDED_ERROR)
            else:
                listing = self.places.lookup(
                    business_name,
                    city,
                    timeout=min(self.settings.listing_timeout, remaining),
                )

            outcome = self.engine.evaluate(
                AuditContext(
                    signals=signals,
                    listing=listing,
                    min_word_count=self.settings.min_word_count,
                )
            )

        except FetchError as e:
            return self._error_report(url, business_name, location, str(e))

        except Exception as e:
            logger.exception(f"Local SEO analysis failed for {url}: {e}")
            return self._error_report(url, business_name, location, str(e))

        logger.info(
            f"Analyzed {url}: overall {outcome.scores.overall}, "
            f"{len(outcome.issues)} issues"
        )

        return Report(
            url=url,
            business_name=business_name,
            location=location,
            analyzed_at=datetime.now(timezone.utc),
            scores=outcome.scores,
            issues=outcome.issues,
            listing=listing,
            top_recommendation=outcome.top_recommendation,
            whats_working=outcome.whats_working,
            signals=signals,
        )

    def _budget(self, deadline: float, timeout: float) -> float:
        """Clamp a per-call timeout to what is left of the request deadline."""
        return max(0.001, min(timeout, deadline - time.monotonic()))

    def _error_report(
        self,
        url: str,
        business_name: str,
        location: str,
        message: str,
    ) -> Report:
        """Zero-scored report carrying a single synthetic error issue."""
        issue = Issue(
            priority=Priority.CRITICAL,
            category="Error",
            issue=message,
            fix="Check URL is correct",
        )
        return Report(
            url=url,
            business_name=business_name,
            location=location,
            analyzed_at=datetime.now(timezone.utc),
            scores=Scores(),
            issues=(issue,),
            listing=None,
            top_recommendation=issue.fix,
            whats_working=(),
            error=message,
        )
