"""Tests for LLM-based resume import."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from ats_architect.pipeline.resume_importer import ResumeImporter
from ats_architect.scoring.scorer import score

EXTRACTED = {
    "fullName": "Jane Doe",
    "jobTitle": "Data Analyst",
    "email": "jane@example.com",
    "phone": None,
    "location": "Lisbon",
    "summary": "Analyst turning messy data into decisions.",
    "skills": ["SQL", "Python", None],
    "experience": [
        {
            "company": "Shop Inc",
            "position": "Analyst",
            "startDate": "2021",
            "endDate": "Present",
            "description": "Built 12 dashboards for the sales team",
        },
        {
            "company": "Bank",
            "position": "Intern",
            "startDate": "2020",
            "endDate": "2021",
            "current": False,
            "description": "Reporting",
        },
    ],
    "education": [{"school": "Uni Lisboa", "degree": "BSc", "field": "Statistics"}],
    "projects": None,
}


class TestResumeImporter:
    async def test_extract_builds_document(self, mock_llm_client):
        mock_llm_client.generate_json = AsyncMock(return_value=dict(EXTRACTED))
        importer = ResumeImporter(mock_llm_client, model="fast")

        doc = await importer.extract("Jane Doe\nData Analyst ...")

        assert doc.full_name == "Jane Doe"
        assert doc.job_title == "Data Analyst"
        assert doc.phone == ""
        assert doc.skills == ["SQL", "Python"]
        assert doc.projects == []
        assert [e.current for e in doc.experience] == [True, False]
        assert doc.experience[0].id != doc.experience[1].id
        assert doc.education[0].field == "Statistics"
        assert mock_llm_client.generate_json.await_args.kwargs["model"] == "fast"

    async def test_imported_document_can_be_scored(self, mock_llm_client):
        mock_llm_client.generate_json = AsyncMock(return_value=dict(EXTRACTED))
        doc = await ResumeImporter(mock_llm_client).extract("resume text")
        ids = [i.id for i in score(doc).issues]
        assert "missing_phone" in ids
        assert f"short_exp_{doc.experience[1].id}" in ids

    async def test_empty_text_raises(self, mock_llm_client):
        importer = ResumeImporter(mock_llm_client)
        with pytest.raises(ValueError, match="empty"):
            await importer.extract("   ")
        mock_llm_client.generate_json.assert_not_called()

    async def test_non_object_response_raises(self, mock_llm_client):
        mock_llm_client.generate_json = AsyncMock(return_value=["not", "an", "object"])
        importer = ResumeImporter(mock_llm_client)
        with pytest.raises(ValueError, match="JSON object"):
            await importer.extract("resume text")
