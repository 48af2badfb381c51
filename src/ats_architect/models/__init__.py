"""Data models for the ATS scoring engine."""

from ats_architect.models.ats import ATSIssue, ATSScore, IssueSection, IssueSeverity
from ats_architect.models.resume import (
    CoverLetter,
    CustomSection,
    Education,
    Experience,
    Project,
    ResumeDocument,
    ResumePatch,
    SoftwareItem,
    apply_patch,
)

__all__ = [
    "ATSIssue",
    "ATSScore",
    "CoverLetter",
    "CustomSection",
    "Education",
    "Experience",
    "IssueSection",
    "IssueSeverity",
    "Project",
    "ResumeDocument",
    "ResumePatch",
    "SoftwareItem",
    "apply_patch",
]
