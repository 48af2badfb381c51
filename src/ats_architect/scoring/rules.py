"""Independent ATS scoring rules.

Each rule looks only at the resume and returns the points it awards plus the
issues it found. Rules never see each other's output.
"""

from __future__ import annotations

import re
from typing import Callable

from ats_architect.models.ats import ATSIssue, IssueSection, IssueSeverity
from ats_architect.models.resume import ResumeDocument

RuleResult = tuple[int, list[ATSIssue]]
Rule = Callable[[ResumeDocument], RuleResult]

SUMMARY_MIN_LENGTH = 50
EXPERIENCE_DESCRIPTION_MIN_LENGTH = 20
SKILLS_TARGET_COUNT = 5

SHORT_EXP_PREFIX = "short_exp_"

METRIC_PATTERN = re.compile(
    r"\d|\b(?:one|two|three|four|five|six|seven|eight|nine|ten)\b",
    re.IGNORECASE,
)

ACTION_VERBS = (
    "Led",
    "Managed",
    "Created",
    "Developed",
    "Designed",
    "Implemented",
    "Achieved",
    "Increased",
    "Decreased",
    "Saved",
    "Won",
    "Awarded",
    "Built",
    "Engineered",
    "Architected",
    "Generated",
    "Optimized",
)
_ACTION_PREFIXES = tuple(v.lower() for v in ACTION_VERBS)


def short_experience_issue_id(entry_id: str) -> str:
    return f"{SHORT_EXP_PREFIX}{entry_id}"


def contact_rule(doc: ResumeDocument) -> RuleResult:
    points = 0
    issues: list[ATSIssue] = []

    if doc.email:
        points += 5
    else:
        issues.append(ATSIssue(
            id="missing_email",
            severity=IssueSeverity.CRITICAL,
            title="Missing email address",
            description="Add an email address so recruiters can contact you.",
            section=IssueSection.PERSONAL,
        ))

    if doc.phone:
        points += 5
    else:
        issues.append(ATSIssue(
            id="missing_phone",
            severity=IssueSeverity.CRITICAL,
            title="Missing phone number",
            description="Add a phone number; most ATS forms treat it as required.",
            section=IssueSection.PERSONAL,
        ))

    if doc.location:
        points += 5
    else:
        issues.append(ATSIssue(
            id="missing_location",
            severity=IssueSeverity.WARNING,
            title="Missing location",
            description="Add a city and country; recruiters often filter by location.",
            section=IssueSection.PERSONAL,
        ))

    return points, issues


def summary_rule(doc: ResumeDocument) -> RuleResult:
    if not doc.summary:
        return 0, [ATSIssue(
            id="missing_summary",
            severity=IssueSeverity.CRITICAL,
            title="Missing professional summary",
            description="Add a 3-4 sentence summary highlighting your value and key skills.",
            section=IssueSection.SUMMARY,
            can_auto_fix=True,
        )]

    # Raw character count, not words.
    if len(doc.summary) > SUMMARY_MIN_LENGTH:
        return 15, []

    return 5, [ATSIssue(
        id="short_summary",
        severity=IssueSeverity.WARNING,
        title="Summary is too short",
        description="Expand your summary with your role, years of experience and top skills.",
        section=IssueSection.SUMMARY,
        can_auto_fix=True,
    )]


def experience_rule(doc: ResumeDocument) -> RuleResult:
    if not doc.experience:
        return 0, [ATSIssue(
            id="missing_exp",
            severity=IssueSeverity.CRITICAL,
            title="No work experience",
            description="Add at least one position with a description of your responsibilities.",
            section=IssueSection.EXPERIENCE,
        )]

    points = 10
    issues: list[ATSIssue] = []
    descriptions = [entry.description for entry in doc.experience]

    if any(METRIC_PATTERN.search(d) for d in descriptions):
        points += 10
    else:
        issues.append(ATSIssue(
            id="exp_no_metrics",
            severity=IssueSeverity.WARNING,
            title="No measurable results",
            description="Quantify your impact with numbers, e.g. 'cut costs by 20%' or 'managed five engineers'.",
            section=IssueSection.EXPERIENCE,
        ))

    if any(d.lower().startswith(_ACTION_PREFIXES) for d in descriptions):
        points += 10
    else:
        issues.append(ATSIssue(
            id="exp_passive",
            severity=IssueSeverity.WARNING,
            title="Weak action verbs",
            description="Start your bullet points with strong action verbs such as Led, Built or Optimized.",
            section=IssueSection.EXPERIENCE,
            can_auto_fix=True,
        ))

    for entry in doc.experience:
        if len(entry.description) < EXPERIENCE_DESCRIPTION_MIN_LENGTH:
            label = entry.position or entry.company or "this role"
            issues.append(ATSIssue(
                id=short_experience_issue_id(entry.id),
                severity=IssueSeverity.WARNING,
                title=f"Thin description for {label}",
                description="Describe your responsibilities and achievements in this role in more detail.",
                section=IssueSection.EXPERIENCE,
                target_id=entry.id,
                can_auto_fix=True,
            ))

    return points, issues


def skills_rule(doc: ResumeDocument) -> RuleResult:
    # Blank skill strings are counted: the editor filters them for display only.
    count = len(doc.skills) + len(doc.softwares)

    if count >= SKILLS_TARGET_COUNT:
        return 20, []
    if count > 0:
        return 10, [ATSIssue(
            id="low_skills",
            severity=IssueSeverity.WARNING,
            title="Few skills listed",
            description=f"List at least {SKILLS_TARGET_COUNT} relevant skills or tools to match more job keywords.",
            section=IssueSection.SKILLS,
        )]
    return 0, [ATSIssue(
        id="missing_skills",
        severity=IssueSeverity.CRITICAL,
        title="No skills listed",
        description="Add a skills section; ATS keyword matching relies on it heavily.",
        section=IssueSection.SKILLS,
    )]


def education_rule(doc: ResumeDocument) -> RuleResult:
    if doc.education:
        return 10, []
    return 0, [ATSIssue(
        id="missing_edu",
        severity=IssueSeverity.WARNING,
        title="No education listed",
        description="Add your highest degree or relevant certification.",
        section=IssueSection.EDUCATION,
    )]


def identity_rule(doc: ResumeDocument) -> RuleResult:
    points = 0
    issues: list[ATSIssue] = []

    if doc.full_name:
        points += 5

    # Never inferred from experience entries.
    if doc.job_title:
        points += 5
    else:
        issues.append(ATSIssue(
            id="missing_jobtitle",
            severity=IssueSeverity.CRITICAL,
            title="Missing target job title",
            description="Add the job title you are targeting so the ATS can match your resume to roles.",
            section=IssueSection.PERSONAL,
        ))

    return points, issues


RULES: tuple[Rule, ...] = (
    contact_rule,
    summary_rule,
    experience_rule,
    skills_rule,
    education_rule,
    identity_rule,
)
