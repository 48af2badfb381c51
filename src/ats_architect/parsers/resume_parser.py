"""Resume file loading: plain-text extraction and structured documents."""

from __future__ import annotations

import json
import re
from pathlib import Path

import yaml

from ats_architect.models.resume import ResumeDocument

TEXT_SUFFIXES = (".txt", ".md")
STRUCTURED_SUFFIXES = (".json", ".yaml", ".yml")

# Both key spellings appear in resume files.
ENTRY_ID_PREFIXES = {
    "experience": "exp",
    "education": "edu",
    "projects": "proj",
    "softwares": "sw",
    "customSections": "section",
    "custom_sections": "section",
}


def parse_resume(file_path: str | Path) -> str:
    """Extract plain text from a resume file (PDF, DOCX, TXT, MD)."""
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix == ".pdf":
        return clean_text(_parse_pdf(path))
    if suffix in (".docx", ".doc"):
        return clean_text(_parse_docx(path))
    if suffix in TEXT_SUFFIXES:
        return clean_text(path.read_text(encoding="utf-8"))
    raise ValueError(f"Unsupported file format: {path.suffix}")


def clean_text(text: str) -> str:
    """Normalize extracted resume text.

    Strips BOM and zero-width characters, turns bullet glyphs into ``- ``,
    collapses runs of spaces and caps blank lines at one.
    """
    text = text.lstrip("\ufeff")
    text = re.sub(r"[\u200b\u200c\u200d\u00ad\u2060\ufeff]", "", text)
    text = re.sub(r"^(\s*)[●•◦◆■▪★○]\s*", r"\1- ", text, flags=re.MULTILINE)

    lines = [re.sub(r"[ \t]{2,}", " ", line).rstrip() for line in text.splitlines()]
    text = "\n".join(lines)
    text = re.sub(r"\n{3,}", "\n\n", text)
    return text.strip()


def load_resume_document(file_path: str | Path) -> ResumeDocument:
    """Load a structured resume from JSON or YAML.

    Raises pydantic.ValidationError for malformed documents.
    """
    path = Path(file_path)
    suffix = path.suffix.lower()
    if suffix not in STRUCTURED_SUFFIXES:
        raise ValueError(f"Unsupported file format: {path.suffix}")

    raw = path.read_text(encoding="utf-8")
    data = json.loads(raw) if suffix == ".json" else yaml.safe_load(raw)
    if isinstance(data, dict):
        _assign_missing_ids(data)
    return ResumeDocument.model_validate(data or {})


def _assign_missing_ids(data: dict) -> None:
    """Give id-less entries a position-derived id so issue ids survive reloads."""
    for key, prefix in ENTRY_ID_PREFIXES.items():
        entries = data.get(key)
        if not isinstance(entries, list):
            continue
        for index, entry in enumerate(entries):
            if isinstance(entry, dict) and not entry.get("id"):
                entry["id"] = f"{prefix}-{index}"


def dump_resume_document(document: ResumeDocument, file_path: str | Path) -> Path:
    """Write a resume as camelCase JSON."""
    path = Path(file_path)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(document.model_dump_json(by_alias=True, indent=2), encoding="utf-8")
    return path


def _parse_pdf(path: Path) -> str:
    import fitz  # pymupdf

    doc = fitz.open(str(path))
    text = [page.get_text() for page in doc]
    doc.close()
    return "\n".join(text)


def _parse_docx(path: Path) -> str:
    from docx import Document

    doc = Document(str(path))
    return "\n".join(p.text for p in doc.paragraphs if p.text.strip())
