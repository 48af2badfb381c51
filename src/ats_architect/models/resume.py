"""Pydantic models for the structured resume document."""

from __future__ import annotations

import uuid

from pydantic import BaseModel, Field
from pydantic.alias_generators import to_camel


def _new_id() -> str:
    return str(uuid.uuid4())


class _CamelModel(BaseModel):
    """Accepts both snake_case and the camelCase keys of exported resume JSON."""

    model_config = {"alias_generator": to_camel, "populate_by_name": True}


class Experience(_CamelModel):
    id: str = Field(default_factory=_new_id)
    company: str = ""
    position: str = ""
    start_date: str = ""
    end_date: str = ""  # ignored by consumers when current is True
    current: bool = False
    description: str = ""  # bullet-style, possibly multi-line


class Education(_CamelModel):
    id: str = Field(default_factory=_new_id)
    school: str = ""
    degree: str = ""
    field: str = ""
    start_date: str = ""
    end_date: str = ""


class Project(_CamelModel):
    id: str = Field(default_factory=_new_id)
    name: str = ""
    description: str = ""
    link: str | None = None


class SoftwareItem(_CamelModel):
    """A software/tool entry, also used for custom section items."""

    id: str = Field(default_factory=_new_id)
    name: str = ""
    description: str = ""


class CustomSection(_CamelModel):
    id: str = Field(default_factory=_new_id)
    title: str = ""
    items: list[SoftwareItem] = Field(default_factory=list)


class CoverLetter(_CamelModel):
    recipient_name: str = ""
    recipient_title: str = ""
    company_name: str = ""
    company_address: str = ""
    content: str = ""


class ResumeDocument(_CamelModel):
    """The caller-owned resume. Scoring reads it and never mutates it."""

    full_name: str = ""
    job_title: str | None = None
    email: str = ""
    phone: str = ""
    location: str = ""
    website: str = ""
    linkedin: str = ""
    summary: str = ""
    experience: list[Experience] = Field(default_factory=list)
    education: list[Education] = Field(default_factory=list)
    skills: list[str] = Field(default_factory=list)
    softwares: list[SoftwareItem] = Field(default_factory=list)
    projects: list[Project] = Field(default_factory=list)
    custom_sections: list[CustomSection] = Field(default_factory=list)
    section_order: list[str] = Field(default_factory=list)
    cover_letter: CoverLetter | None = None

    def find_experience(self, entry_id: str) -> Experience | None:
        for entry in self.experience:
            if entry.id == entry_id:
                return entry
        return None


class ResumePatch(_CamelModel):
    """Partial resume carrying only the fields an auto-fix changed."""

    summary: str | None = None
    experience: list[Experience] | None = None

    @property
    def is_empty(self) -> bool:
        return not self.model_dump(exclude_none=True)


def apply_patch(document: ResumeDocument, patch: ResumePatch) -> ResumeDocument:
    """Return a copy of *document* with the patched fields replaced."""
    update = {
        name: getattr(patch, name)
        for name in ResumePatch.model_fields
        if getattr(patch, name) is not None
    }
    if not update:
        return document.model_copy(deep=True)
    return document.model_copy(update=update, deep=True)
