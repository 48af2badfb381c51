"""LLM-backed text generation: summaries, bullet polishing and ATS reviews."""

from __future__ import annotations

import json
import logging
from enum import Enum

from ats_architect.clients.llm_client import DEFAULT_MODEL, LLMClient
from ats_architect.models.resume import ResumeDocument

logger = logging.getLogger(__name__)

SUMMARY_SYSTEM = """\
You are an expert career coach. You write professional, concise and
ATS-friendly resume summaries of at most 3-4 sentences. Focus on the value
proposition and key achievements. Avoid excessive first-person pronouns.
Return only the summary text."""

IMPROVE_SYSTEM = """\
You are an expert resume writer. You rewrite resume text following the
requested style. Keep it ATS friendly: no tables, no complex formatting.
Never invent facts. Return only the rewritten text."""

REVIEW_SYSTEM = """\
You analyze resume data for ATS (Applicant Tracking System) compatibility and
general best practices. Answer in valid Markdown."""


class StyleHint(str, Enum):
    GRAMMAR = "grammar"
    POLISH = "polish"
    CONCISE = "concise"


STYLE_INSTRUCTIONS: dict[StyleHint, str] = {
    StyleHint.GRAMMAR: "Fix grammar, spelling and punctuation only. Keep wording and length.",
    StyleHint.POLISH: (
        "Make it more impactful, action-oriented and result-driven. Start bullets "
        "with strong action verbs. Quantify results where possible, using "
        "placeholders like [X] when exact numbers are unknown."
    ),
    StyleHint.CONCISE: "Make it shorter and tighter without losing any facts.",
}


class TextGenerator:
    """Concrete text-improvement collaborator for the auto-fix dispatcher."""

    def __init__(
        self,
        llm: LLMClient,
        model: str = DEFAULT_MODEL,
        review_model: str = "claude-sonnet-4-5-20250929",
    ):
        self.llm = llm
        self.model = model
        self.review_model = review_model

    async def generate_summary(self, document: ResumeDocument, target_role: str) -> str:
        """Write a professional summary for *target_role* from the resume's background."""
        latest = document.experience[0] if document.experience else None
        prompt = f"""Write a resume summary for a {target_role}.

Candidate background:
Skills: {', '.join(s for s in document.skills if s)}
Experience count: {len(document.experience)} roles.
Latest role: {latest.position if latest and latest.position else 'N/A'} at {latest.company if latest and latest.company else 'N/A'}."""

        try:
            response = await self.llm.generate(
                prompt=prompt,
                system=SUMMARY_SYSTEM,
                model=self.model,
                temperature=0.3,
            )
        except Exception:
            logger.exception("Summary generation failed")
            raise
        return response.text.strip()

    async def improve_text(
        self,
        text: str,
        style_hint: str,
        role_context: str | None = None,
    ) -> str:
        """Rewrite *text* in the given style. Empty model output keeps the original."""
        try:
            style = StyleHint(style_hint)
        except ValueError:
            raise ValueError(f"Unknown style hint: {style_hint!r}") from None

        role_line = f"The text is for a {role_context} position.\n" if role_context else ""
        prompt = f"""{role_line}{STYLE_INSTRUCTIONS[style]}

Original text:
\"\"\"{text}\"\"\""""

        try:
            response = await self.llm.generate(
                prompt=prompt,
                system=IMPROVE_SYSTEM,
                model=self.model,
                temperature=0.3,
            )
        except Exception:
            logger.exception("Text improvement failed (style=%s)", style.value)
            raise
        return response.text.strip() or text

    async def analyze_resume(self, document: ResumeDocument) -> str:
        """Free-form Markdown critique of the resume for ATS compatibility."""
        resume_json = json.dumps(
            document.model_dump(by_alias=True, exclude_none=True),
            ensure_ascii=False,
            indent=2,
        )
        prompt = f"""Analyze this resume.

Resume data:
{resume_json}

Provide a brief critique:
1. Give a score out of 100.
2. List 3 strengths.
3. List 3 critical improvements needed for ATS parsing (keywords, formatting risks, missing sections)."""

        logger.info("Requesting ATS review...")
        try:
            response = await self.llm.generate(
                prompt=prompt,
                system=REVIEW_SYSTEM,
                model=self.review_model,
            )
        except Exception:
            logger.exception("ATS review failed")
            raise
        return response.text.strip()
