"""Data Point Local SEO scoring package."""

from scoring.engine import ScoringEngine, ScoringOutcome
from scoring.rules import ALL_RULES, BASELINES, WEIGHTS, AuditContext, Rule

__all__ = [
    "ScoringEngine",
    "ScoringOutcome",
    "ALL_RULES",
    "BASELINES",
    "WEIGHTS",
    "AuditContext",
    "Rule",
]
