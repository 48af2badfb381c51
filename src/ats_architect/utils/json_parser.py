"""Pull a JSON payload out of free-form LLM output."""

from __future__ import annotations

import json
import re

_FENCE = re.compile(r"```(?:json|JSON)?\s*\n?(.*?)\n?```", re.DOTALL)


def extract_json(text: str) -> dict | list:
    """Parse JSON from an LLM reply.

    Accepts bare JSON, a fenced ```json block, or JSON embedded in prose
    (outermost object first, then outermost array). Raises ValueError when
    nothing parses.
    """
    text = (text or "").strip()

    for candidate in _candidates(text):
        try:
            return json.loads(candidate)
        except json.JSONDecodeError:
            continue

    raise ValueError(f"Could not extract JSON from text: {text[:200]}...")


def _candidates(text: str):
    yield text

    fenced = _FENCE.search(text)
    if fenced:
        yield fenced.group(1).strip()

    for open_char, close_char in (("{", "}"), ("[", "]")):
        start = text.find(open_char)
        end = text.rfind(close_char)
        if start != -1 and end > start:
            yield text[start : end + 1]
