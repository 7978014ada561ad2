"""Local SEO analysis endpoint."""

from fastapi import APIRouter, Depends, Query

from analyzers.base import InputError
from analyzers.local_seo import LocalSEOAnalyzer
from api.schemas import ErrorResponse
from config import Settings, get_settings
from models import Report

router = APIRouter(tags=["Analysis"])

MISSING_FIELDS_MESSAGE = "Missing required fields"


def get_analyzer(settings: Settings = Depends(get_settings)) -> LocalSEOAnalyzer:
    """Dependency that provides an analyzer bound to the process settings."""
    return LocalSEOAnalyzer(settings)


@router.get(
    "/analyze",
    response_model=Report,
    responses={400: {"model": ErrorResponse}},
    summary="Analyze a website",
    description="Audit a business website for local SEO and return a scored report.",
)
def analyze(
    url: str | None = None,
    business_name: str | None = Query(default=None, alias="businessName"),
    location: str | None = None,
    analyzer: LocalSEOAnalyzer = Depends(get_analyzer),
) -> Report:
    """
    Run a local SEO audit.

    Fetch and listing failures come back inside the report with a 200;
    only missing fields are rejected.
    """
    fields = [url, business_name, location]
    if any(value is None or not value.strip() for value in fields):
        raise InputError(MISSING_FIELDS_MESSAGE)

    return analyzer.analyze(url.strip(), business_name.strip(), location.strip())
