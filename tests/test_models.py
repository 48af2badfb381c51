"""Tests for Pydantic data models."""

import pytest
from pydantic import ValidationError

from ats_architect.models.ats import ATSIssue, ATSScore, IssueSection, IssueSeverity
from ats_architect.models.resume import (
    Experience,
    ResumeDocument,
    ResumePatch,
    apply_patch,
)


class TestResumeDocument:
    def test_defaults_are_empty(self):
        doc = ResumeDocument()
        assert doc.full_name == ""
        assert doc.job_title is None
        assert doc.experience == []
        assert doc.softwares == []

    def test_accepts_camel_and_snake_case(self):
        camel = ResumeDocument.model_validate({"fullName": "Jane", "jobTitle": "Dev"})
        snake = ResumeDocument(full_name="Jane", job_title="Dev")
        assert camel == snake

    def test_find_experience(self, weak_document):
        assert weak_document.find_experience("b2").position == "Intern"
        assert weak_document.find_experience("zzz") is None

    def test_serialization(self, complete_document):
        data = complete_document.model_dump()
        restored = ResumeDocument(**data)
        assert restored == complete_document


class TestResumePatch:
    def test_empty_patch(self):
        assert ResumePatch().is_empty

    def test_summary_patch_not_empty(self):
        assert not ResumePatch(summary="x").is_empty

    def test_apply_patch_replaces_only_patched_fields(self, weak_document):
        new_exp = [Experience(id="a1", description="Led 3 launches for the mobile app")]
        fixed = apply_patch(weak_document, ResumePatch(experience=new_exp))

        assert fixed.experience[0].description == "Led 3 launches for the mobile app"
        assert len(fixed.experience) == 1
        assert fixed.summary == weak_document.summary
        assert len(weak_document.experience) == 2

    def test_apply_empty_patch_returns_equal_copy(self, weak_document):
        fixed = apply_patch(weak_document, ResumePatch())
        assert fixed == weak_document
        assert fixed is not weak_document
        assert fixed.experience[0] is not weak_document.experience[0]


class TestATSModels:
    def test_issue_defaults(self):
        issue = ATSIssue(id="x", severity=IssueSeverity.INFO, title="t", description="d")
        assert issue.section is None
        assert issue.target_id is None
        assert issue.can_auto_fix is False

    def test_severity_from_string(self):
        issue = ATSIssue(id="x", severity="warning", title="t", description="d", section="skills")
        assert issue.severity == IssueSeverity.WARNING
        assert issue.section == IssueSection.SKILLS

    def test_score_bounds_enforced(self):
        with pytest.raises(ValidationError):
            ATSScore(score=101)
        with pytest.raises(ValidationError):
            ATSScore(score=-1)

    def test_json_dump_uses_plain_values(self):
        score = ATSScore(score=50, issues=[
            ATSIssue(id="low_skills", severity=IssueSeverity.WARNING, title="t", description="d"),
        ])
        data = score.model_dump(mode="json")
        assert data["issues"][0]["severity"] == "warning"

    def test_filtered_views(self):
        score = ATSScore(score=10, issues=[
            ATSIssue(id="a", severity="critical", title="t", description="d"),
            ATSIssue(id="b", severity="warning", title="t", description="d", can_auto_fix=True),
        ])
        assert [i.id for i in score.critical_issues] == ["a"]
        assert [i.id for i in score.fixable_issues] == ["b"]
