"""ATS compatibility scoring and auto-fix."""

from ats_architect.scoring.autofix import AutoFixDispatcher, TextImprover
from ats_architect.scoring.scorer import score

__all__ = ["AutoFixDispatcher", "TextImprover", "score"]
