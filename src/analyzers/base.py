"""Base analyzer interface and error types."""

from abc import ABC, abstractmethod

from models import Report


class AnalyzerError(Exception):
    """Base exception for analysis errors."""

    pass


class InputError(AnalyzerError):
    """A required request field is missing or blank."""

    pass


class FetchError(AnalyzerError):
    """The page could not be retrieved (network, timeout, non-2xx)."""

    pass


class ListingLookupError(AnalyzerError):
    """The places API call failed. Never leaves the listing client."""

    pass


class ParseError(AnalyzerError):
    """Markup could not be parsed. Never fatal."""

    pass


class BaseAnalyzer(ABC):
    """Abstract base class for all analyzers."""

    @property
    @abstractmethod
    def name(self) -> str:
        """Return analyzer name."""
        pass

    @abstractmethod
    def analyze(self, url: str, business_name: str, location: str) -> Report:
        """
        Run analysis on the given URL.

        Args:
            url: The website URL to analyze
            business_name: Name of the business that owns the site
            location: Free-text location, e.g. "Lancaster, PA"

        Returns:
            Report with scores, issues and recommendations
        """
        pass
