"""Extract a structured resume from plain resume text with the LLM."""

from __future__ import annotations

import logging
import re

from ats_architect.clients.llm_client import DEFAULT_MODEL, LLMClient
from ats_architect.models.resume import ResumeDocument

logger = logging.getLogger(__name__)

SYSTEM_PROMPT = """\
You extract data from resumes. If a field is missing, leave it empty or omit
it. Use 'YYYY' or 'Month YYYY' for dates. Infer the boolean "current" from
'Present' or 'Current' end dates.

Respond with JSON only, in this shape:
{
  "fullName": "", "jobTitle": "", "email": "", "phone": "", "location": "",
  "website": "", "linkedin": "", "summary": "",
  "skills": [""],
  "experience": [{"company": "", "position": "", "startDate": "", "endDate": "", "current": false, "description": ""}],
  "education": [{"school": "", "degree": "", "field": "", "startDate": "", "endDate": ""}],
  "projects": [{"name": "", "description": "", "link": ""}]
}"""

CURRENT_END_DATE = re.compile(r"^\s*(present|current|now)\s*$", re.IGNORECASE)

_LIST_FIELDS = ("experience", "education", "projects")


class ResumeImporter:
    """Turn resume text (from a PDF, DOCX or plain file) into a ResumeDocument."""

    def __init__(self, llm: LLMClient, model: str = DEFAULT_MODEL):
        self.llm = llm
        self.model = model

    async def extract(self, resume_text: str) -> ResumeDocument:
        if not resume_text or not resume_text.strip():
            raise ValueError("Resume text is empty")

        logger.info("Extracting structured resume (%d chars)", len(resume_text))
        data = await self.llm.generate_json(
            prompt=f"Extract data from this resume:\n\n{resume_text}",
            system=SYSTEM_PROMPT,
            model=self.model,
        )
        if not isinstance(data, dict):
            raise ValueError(f"Expected a JSON object, got {type(data).__name__}")

        return ResumeDocument.model_validate(self._normalize(data))

    @staticmethod
    def _normalize(data: dict) -> dict:
        """Drop nulls the model emits and fill in 'current' from the end date."""
        cleaned = {k: v for k, v in data.items() if v is not None}

        for key in _LIST_FIELDS:
            items = cleaned.get(key) or []
            cleaned[key] = [
                {k: v for k, v in item.items() if v is not None}
                for item in items
                if isinstance(item, dict)
            ]

        for entry in cleaned["experience"]:
            end_date = entry.get("endDate") or entry.get("end_date") or ""
            if CURRENT_END_DATE.match(end_date):
                entry["current"] = True

        skills = cleaned.get("skills") or []
        cleaned["skills"] = [str(s) for s in skills if s is not None]
        return cleaned
