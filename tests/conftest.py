"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from ats_architect.clients.llm_client import LLMClient, LLMResponse
from ats_architect.models.resume import (
    Education,
    Experience,
    ResumeDocument,
    SoftwareItem,
)
from ats_architect.pipeline.text_generator import TextGenerator


@pytest.fixture
def empty_document() -> ResumeDocument:
    return ResumeDocument()


@pytest.fixture
def complete_document() -> ResumeDocument:
    return ResumeDocument(
        full_name="Jane Doe",
        job_title="Backend Engineer",
        email="jane@example.com",
        phone="+1 555 0100",
        location="Berlin, Germany",
        summary="Backend engineer with 8 years building high-traffic payment APIs in Python and Go.",
        experience=[
            Experience(
                id="exp-1",
                company="Acme Pay",
                position="Senior Backend Engineer",
                start_date="2020",
                current=True,
                description="Led a team of 5 engineers rebuilding the settlement service.",
            ),
        ],
        education=[
            Education(id="edu-1", school="TU Berlin", degree="BSc", field="Computer Science"),
        ],
        skills=["Python", "Go", "PostgreSQL", "Kafka", "Kubernetes"],
    )


@pytest.fixture
def weak_document() -> ResumeDocument:
    """Two thin, passive experience entries and a short summary."""
    return ResumeDocument(
        full_name="John Roe",
        email="john@example.com",
        summary="Engineer.",
        experience=[
            Experience(id="a1", company="First Co", position="Developer", description="did stuff"),
            Experience(id="b2", company="Second Co", position="Intern", description="helped out"),
        ],
        skills=["Python"],
        softwares=[SoftwareItem(name="Jira")],
    )


@pytest.fixture
def mock_llm_client() -> LLMClient:
    """Create a mock LLM client."""
    client = AsyncMock(spec=LLMClient)
    client.generate = AsyncMock(
        return_value=LLMResponse(text="generated text", input_tokens=100, output_tokens=50)
    )
    client.generate_json = AsyncMock(return_value={})
    return client


@pytest.fixture
def mock_improver() -> TextGenerator:
    """Fake text-improvement collaborator with deterministic output."""
    improver = AsyncMock(spec=TextGenerator)
    improver.generate_summary = AsyncMock(return_value="A generated professional summary.")
    improver.improve_text = AsyncMock(return_value="Built a polished description.")
    return improver
