"""Scoring rules definition."""

from dataclasses import dataclass
from typing import Callable

from models import ListingResult, PageSignals, Priority, SubScore

TITLE_MIN_LENGTH = 30
TITLE_MAX_LENGTH = 60
META_DESCRIPTION_MIN_LENGTH = 120
META_DESCRIPTION_MAX_LENGTH = 160


def is_title_optimized(length: int) -> bool:
    return TITLE_MIN_LENGTH <= length <= TITLE_MAX_LENGTH


def is_meta_description_optimized(length: int) -> bool:
    return META_DESCRIPTION_MIN_LENGTH <= length <= META_DESCRIPTION_MAX_LENGTH


@dataclass(frozen=True)
class AuditContext:
    """Everything a rule may look at."""

    signals: PageSignals
    listing: ListingResult
    min_word_count: int = 300

    def template_vars(self) -> dict:
        """Values available to issue and fix templates."""
        return {
            **self.signals.model_dump(),
            "min_word_count": self.min_word_count,
        }


@dataclass(frozen=True)
class Rule:
    """
    A single scored check.

    When `passed` is true the rule adds `points` to its sub-score. Otherwise
    it produces exactly one issue. Rules with an `absent` predicate use the
    `absent_*` texts and priority when that predicate holds.
    """

    id: str
    score: SubScore
    points: int
    priority: Priority
    category: str
    issue: str  # Template, formatted with AuditContext.template_vars()
    fix: str
    passed: Callable[[AuditContext], bool]
    praise: str | None = None  # Listed under "what's working" when passed
    absent: Callable[[AuditContext], bool] | None = None
    absent_priority: Priority | None = None
    absent_issue: str | None = None

    def failure(self, ctx: AuditContext) -> tuple[Priority, str, str]:
        """Return (priority, issue, fix) texts for a failed check."""
        values = ctx.template_vars()
        priority, issue = self.priority, self.issue
        if self.absent is not None and self.absent(ctx):
            priority = self.absent_priority or priority
            issue = self.absent_issue or issue
        return priority, issue.format(**values), self.fix.format(**values)


# =============================================================================
# Sub-score weights and baselines
# =============================================================================

# Percentages, sum to 100
WEIGHTS = {
    SubScore.ON_PAGE: 30,
    SubScore.LOCAL: 35,
    SubScore.TECHNICAL: 15,
    SubScore.GBP: 20,
}

# Points each bucket starts from before rules apply. Local starts at 20 and
# HTTPS lifts technical from 50 to 100 so that a page passing every rule
# scores 100 in every bucket; the rule increments alone top out at 80 and 50.
BASELINES = {
    SubScore.ON_PAGE: 0,
    SubScore.LOCAL: 20,
    SubScore.TECHNICAL: 50,
    SubScore.GBP: 0,
}

# =============================================================================
# On-page rules
# =============================================================================

ON_PAGE_RULES = [
    Rule(
        id="title-length",
        score=SubScore.ON_PAGE,
        points=20,
        priority=Priority.HIGH,
        category="Title",
        issue="Title is {title_length} characters",
        fix="Rewrite the title tag to 30-60 characters",
        passed=lambda ctx: is_title_optimized(ctx.signals.title_length),
        absent=lambda ctx: ctx.signals.title_length == 0,
        absent_issue="Missing title tag",
    ),
    Rule(
        id="title-city",
        score=SubScore.ON_PAGE,
        points=20,
        priority=Priority.CRITICAL,
        category="Local SEO",
        issue='"{city}" not in title tag',
        fix="Add {city} to your title tag",
        passed=lambda ctx: ctx.signals.city_in_title,
        praise="{city} appears in your title tag",
    ),
    Rule(
        id="meta-description",
        score=SubScore.ON_PAGE,
        points=15,
        priority=Priority.MEDIUM,
        category="Meta",
        issue="Meta description is {meta_description_length} characters",
        fix="Write a 120-160 character meta description that mentions {city}",
        passed=lambda ctx: is_meta_description_optimized(
            ctx.signals.meta_description_length
        ),
        absent=lambda ctx: ctx.signals.meta_description_length == 0,
        absent_priority=Priority.HIGH,
        absent_issue="Missing meta description",
    ),
    Rule(
        id="single-h1",
        score=SubScore.ON_PAGE,
        points=15,
        priority=Priority.HIGH,
        category="H1",
        issue="Found {h1_count} H1 tags",
        fix="Use exactly one H1 with your main keyword",
        passed=lambda ctx: ctx.signals.h1_count == 1,
        absent=lambda ctx: ctx.signals.h1_count == 0,
        absent_issue="No H1 tag",
    ),
    Rule(
        id="h1-city",
        score=SubScore.ON_PAGE,
        points=15,
        priority=Priority.CRITICAL,
        category="H1 Local",
        issue='"{city}" not in H1',
        fix="Include {city} in your H1 heading",
        passed=lambda ctx: ctx.signals.city_in_h1,
    ),
    Rule(
        id="word-count",
        score=SubScore.ON_PAGE,
        points=15,
        priority=Priority.MEDIUM,
        category="Content",
        issue="Only {word_count} words of content",
        fix="Expand page content to at least {min_word_count} words",
        passed=lambda ctx: ctx.signals.word_count >= ctx.min_word_count,
    ),
]

# =============================================================================
# Local rules
# =============================================================================

LOCAL_RULES = [
    Rule(
        id="city-in-content",
        score=SubScore.LOCAL,
        points=30,
        priority=Priority.CRITICAL,
        category="Content",
        issue='Location "{city}" not found',
        fix="Add {city} to your page content",
        passed=lambda ctx: ctx.signals.has_location,
        praise="{city} is mentioned in your page content",
    ),
    Rule(
        id="nap",
        score=SubScore.LOCAL,
        points=25,
        priority=Priority.CRITICAL,
        category="NAP",
        issue="Phone number or street address not found",
        fix="Show your business name, full address and a clickable phone number on every page",
        passed=lambda ctx: ctx.signals.has_phone and ctx.signals.has_address,
    ),
    Rule(
        id="schema",
        score=SubScore.LOCAL,
        points=25,
        priority=Priority.HIGH,
        category="Schema",
        issue="No LocalBusiness schema",
        fix="Add LocalBusiness JSON-LD schema markup",
        passed=lambda ctx: ctx.signals.has_schema,
        praise="Structured data markup is present",
    ),
]

# =============================================================================
# Technical rules
# =============================================================================

TECHNICAL_RULES = [
    Rule(
        id="https",
        score=SubScore.TECHNICAL,
        points=50,
        priority=Priority.CRITICAL,
        category="Security",
        issue="Not HTTPS",
        fix="Install an SSL certificate and redirect all traffic to HTTPS",
        passed=lambda ctx: ctx.signals.is_https,
    ),
]

# =============================================================================
# Business listing rules
# =============================================================================

LISTING_RULES = [
    Rule(
        id="listing",
        score=SubScore.GBP,
        points=100,
        priority=Priority.CRITICAL,
        category="GBP",
        issue="Google Business Profile not found",
        fix="Claim and verify your Google Business Profile",
        passed=lambda ctx: ctx.listing.found,
        praise="Google Business Profile found",
    ),
]

# =============================================================================
# All Rules Combined
# =============================================================================

ALL_RULES = ON_PAGE_RULES + LOCAL_RULES + TECHNICAL_RULES + LISTING_RULES
