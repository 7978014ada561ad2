"""Domain models for local SEO reports."""

import enum
from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class Priority(str, enum.Enum):
    """How urgently an issue should be fixed."""

    CRITICAL = "critical"  # Blocks local pack visibility
    HIGH = "high"
    MEDIUM = "medium"


class SubScore(str, enum.Enum):
    """Score buckets that feed the overall score."""

    ON_PAGE = "on_page"
    LOCAL = "local"
    TECHNICAL = "technical"
    GBP = "gbp"


class ReportModel(BaseModel):
    """Base class for immutable, camelCase-serialized report models."""

    model_config = ConfigDict(
        frozen=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class PageSignals(ReportModel):
    """
    Read-only snapshot of everything extracted from one page fetch.

    Scoring rules only ever look at these fields, never at the raw HTML.
    """

    url: str
    city: str
    title: str = ""
    title_length: int = 0
    meta_description: str = ""
    meta_description_length: int = 0
    h1s: tuple[str, ...] = ()
    h1_count: int = 0
    word_count: int = 0
    image_count: int = 0
    images_with_alt: int = 0
    has_phone: bool = False
    has_address: bool = False
    has_schema: bool = False
    has_location: bool = False
    city_in_title: bool = False
    city_in_h1: bool = False
    is_https: bool = False


class Issue(ReportModel):
    """A single failed check with its remediation."""

    priority: Priority
    category: str
    issue: str
    fix: str


class ListingResult(ReportModel):
    """Outcome of the business listing lookup."""

    found: bool
    name: str | None = None
    rating: float | None = None
    review_count: int | None = None
    address: str | None = None
    query: str | None = None
    error: str | None = None


class Scores(ReportModel):
    """Sub-scores and the weighted overall score, all in [0, 100]."""

    overall: int = Field(default=0, ge=0, le=100)
    on_page: int = Field(default=0, ge=0, le=100)
    local: int = Field(default=0, ge=0, le=100)
    technical: int = Field(default=0, ge=0, le=100)
    gbp: int = Field(default=0, ge=0, le=100)


class Report(ReportModel):
    """Full local SEO audit for one website."""

    url: str
    business_name: str
    location: str
    analyzed_at: datetime
    scores: Scores
    issues: tuple[Issue, ...] = ()
    listing: ListingResult | None = None
    top_recommendation: str
    whats_working: tuple[str, ...] = ()
    signals: PageSignals | None = None
    error: str | None = None
