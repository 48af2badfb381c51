"""Rule evaluator: runs every scoring rule over a resume."""

from __future__ import annotations

import logging

from ats_architect.models.ats import ATSIssue, ATSScore
from ats_architect.models.resume import ResumeDocument
from ats_architect.scoring.rules import RULES, Rule

logger = logging.getLogger(__name__)

MIN_SCORE = 0
MAX_SCORE = 100


def score(document: ResumeDocument, rules: tuple[Rule, ...] = RULES) -> ATSScore:
    """Score a resume for ATS compatibility.

    Pure and synchronous: safe to call on every edit. Issues keep rule
    evaluation order; they are not sorted by severity.
    """
    total = 0
    issues: list[ATSIssue] = []
    for rule in rules:
        points, found = rule(document)
        total += points
        issues.extend(found)

    clamped = max(MIN_SCORE, min(MAX_SCORE, total))
    logger.debug("ATS score: %d (raw %d), %d issues", clamped, total, len(issues))
    return ATSScore(score=clamped, issues=issues)
