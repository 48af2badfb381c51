"""Auto-fix dispatcher: turns a fixable issue into a resume patch."""

from __future__ import annotations

import logging
from typing import Protocol

from ats_architect.models.ats import ATSIssue
from ats_architect.models.resume import Experience, ResumeDocument, ResumePatch
from ats_architect.scoring.rules import SHORT_EXP_PREFIX

logger = logging.getLogger(__name__)

DEFAULT_ROLE = "Professional"
DEFAULT_STYLE_HINT = "polish"

SUMMARY_ISSUE_IDS = frozenset({"short_summary", "missing_summary"})
PASSIVE_EXPERIENCE_ISSUE_ID = "exp_passive"


class TextImprover(Protocol):
    """Text-generation capabilities the dispatcher delegates to."""

    async def generate_summary(self, document: ResumeDocument, target_role: str) -> str: ...

    async def improve_text(
        self, text: str, style_hint: str, role_context: str | None = None
    ) -> str: ...


class AutoFixDispatcher:
    """Map an issue id to a remediation and return the resulting patch.

    Exactly one collaborator call per fix; collaborator errors propagate and
    no partial patch is produced. Unknown ids return an empty patch.
    """

    def __init__(
        self,
        improver: TextImprover,
        *,
        fallback_role: str = DEFAULT_ROLE,
        style_hint: str = DEFAULT_STYLE_HINT,
    ):
        self.improver = improver
        self.fallback_role = fallback_role
        self.style_hint = style_hint

    async def autofix(self, issue_id: str, document: ResumeDocument) -> ResumePatch:
        if issue_id in SUMMARY_ISSUE_IDS:
            return await self._fix_summary(document)

        if issue_id == PASSIVE_EXPERIENCE_ISSUE_ID:
            # Only the first entry is rewritten, even if others are weak too.
            if not document.experience:
                return ResumePatch()
            return await self._fix_experience(document, document.experience[0])

        if issue_id.startswith(SHORT_EXP_PREFIX):
            entry_id = issue_id[len(SHORT_EXP_PREFIX):]
            entry = document.find_experience(entry_id)
            if entry is None:
                logger.debug("No experience entry %r for %s", entry_id, issue_id)
                return ResumePatch()
            return await self._fix_experience(document, entry)

        logger.debug("Issue %s has no auto-fix", issue_id)
        return ResumePatch()

    async def autofix_issue(self, issue: ATSIssue, document: ResumeDocument) -> ResumePatch:
        """Like :meth:`autofix` but skips issues not marked fixable."""
        if not issue.can_auto_fix:
            return ResumePatch()
        return await self.autofix(issue.id, document)

    async def _fix_summary(self, document: ResumeDocument) -> ResumePatch:
        # Only an unset title falls back; an empty string is passed through.
        role = self.fallback_role if document.job_title is None else document.job_title
        logger.info("Generating summary for role %r", role)
        summary = await self.improver.generate_summary(document, role)
        return ResumePatch(summary=summary)

    async def _fix_experience(self, document: ResumeDocument, target: Experience) -> ResumePatch:
        logger.info("Improving description of experience %s", target.id)
        improved = await self.improver.improve_text(
            target.description, self.style_hint, target.position
        )
        experience = [
            entry.model_copy(update={"description": improved})
            if entry.id == target.id
            else entry.model_copy()
            for entry in document.experience
        ]
        return ResumePatch(experience=experience)
