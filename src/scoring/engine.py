"""Scoring engine that evaluates rules and aggregates sub-scores."""

import logging
from dataclasses import dataclass

from models import Issue, Priority, Scores, SubScore
from scoring.rules import ALL_RULES, BASELINES, WEIGHTS, AuditContext, Rule

logger = logging.getLogger(__name__)

ALL_PASSING_MESSAGE = "Great work! Your site covers the local SEO fundamentals."


@dataclass(frozen=True)
class ScoringOutcome:
    """Aggregated result of running every rule."""

    scores: Scores
    issues: tuple[Issue, ...]
    top_recommendation: str
    whats_working: tuple[str, ...]


def clamp(value: int, low: int = 0, high: int = 100) -> int:
    return max(low, min(high, value))


def weighted_overall(subscores: dict[SubScore, int]) -> int:
    """Weighted sum of sub-scores, rounded half up."""
    total = sum(WEIGHTS[name] * subscores[name] for name in WEIGHTS)
    # WEIGHTS are percentages, so total is in hundredths
    return (total + 50) // 100


def pick_top_recommendation(issues: tuple[Issue, ...]) -> str:
    """Fix of the first critical issue, else of the first issue."""
    for issue in issues:
        if issue.priority == Priority.CRITICAL:
            return issue.fix
    if issues:
        return issues[0].fix
    return ALL_PASSING_MESSAGE


class ScoringEngine:
    """
    Evaluates scoring rules against an audit context.

    The engine:
    1. Starts every sub-score at its baseline
    2. Runs each rule in order, adding points or recording one issue
    3. Clamps sub-scores to [0, 100] and computes the weighted overall
    4. Picks the top recommendation and the "what's working" list
    """

    def __init__(self, rules: list[Rule] | None = None):
        self.rules = ALL_RULES if rules is None else rules

    def evaluate(self, ctx: AuditContext) -> ScoringOutcome:
        subscores = dict(BASELINES)
        issues = []
        whats_working = []
        values = ctx.template_vars()

        for rule in self.rules:
            if rule.passed(ctx):
                logger.debug(f"Rule passed: {rule.id} (+{rule.points} {rule.score.value})")
                subscores[rule.score] += rule.points
                if rule.praise:
                    whats_working.append(rule.praise.format(**values))
            else:
                logger.debug(f"Rule failed: {rule.id}")
                priority, text, fix = rule.failure(ctx)
                issues.append(
                    Issue(priority=priority, category=rule.category, issue=text, fix=fix)
                )

        subscores = {name: clamp(value) for name, value in subscores.items()}
        issues = tuple(issues)

        scores = Scores(
            overall=clamp(weighted_overall(subscores)),
            on_page=subscores[SubScore.ON_PAGE],
            local=subscores[SubScore.LOCAL],
            technical=subscores[SubScore.TECHNICAL],
            gbp=subscores[SubScore.GBP],
        )

        return ScoringOutcome(
            scores=scores,
            issues=issues,
            top_recommendation=pick_top_recommendation(issues),
            whats_working=tuple(whats_working),
        )
