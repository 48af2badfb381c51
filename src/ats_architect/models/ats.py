"""Pydantic models for ATS scoring output."""

from __future__ import annotations

from enum import Enum

from pydantic import BaseModel, Field


class IssueSeverity(str, Enum):
    CRITICAL = "critical"  # blocks ATS parsing or omits a required field
    WARNING = "warning"    # present but weak
    INFO = "info"          # cosmetic, reserved


class IssueSection(str, Enum):
    """Editor section an issue navigates to."""

    PERSONAL = "personal"
    SUMMARY = "summary"
    EXPERIENCE = "experience"
    EDUCATION = "education"
    SKILLS = "skills"


class ATSIssue(BaseModel):
    """A single deficiency reported by a scoring rule.

    ``id`` doubles as the auto-fix dispatch key.
    """

    id: str
    severity: IssueSeverity
    title: str
    description: str
    section: IssueSection | None = None
    target_id: str | None = None
    can_auto_fix: bool = False


class ATSScore(BaseModel):
    score: int = Field(ge=0, le=100)
    issues: list[ATSIssue] = Field(default_factory=list)

    @property
    def critical_issues(self) -> list[ATSIssue]:
        return [i for i in self.issues if i.severity == IssueSeverity.CRITICAL]

    @property
    def fixable_issues(self) -> list[ATSIssue]:
        return [i for i in self.issues if i.can_auto_fix]
