"""Shared test fixtures."""

from __future__ import annotations

from unittest.mock import AsyncMock

import pytest

from job_post_studio.clients.job_service_client import JobServiceClient
from job_post_studio.models.form import JobPostForm
from job_post_studio.models.job import Job
from job_post_studio.pipeline.session import SessionStore


@pytest.fixture
def raw_english_payload() -> dict:
    return {
        "job_post": {
            "Job Title": "Baker",
            "Description": "Artisan bakery in the old town.",
            "Introduction": "We are a family bakery since 1921.",
            "Introduction of the job": "Join our early shift.",
            "Personal Address": "Dear bakers,",
            "Tasks": {"header": "Your tasks", "items": ["Bake bread", " Clean oven "]},
            "Qualifications": ["Completed apprenticeship", "Team player"],
            "Benefits": "\n▶Free bread\n▶30 days vacation",
            "Call to Action": "Apply now!",
        },
        "voice": {
            "script": "Are you a baker?",
            "tone": "friendly",
            "cta": "Call us",
            "location": "Hamburg",
            "benefits": "Free bread",
            "contact_details": {
                "email": "jobs@bakery.de",
                "phone": "+49 40 123456",
                "address": "Hauptstraße 1, Hamburg",
                "website": "https://bakery.de",
                "contact_person": "Anna Schmidt",
            },
        },
        "image": {
            "Headline": "Bake with us",
            "image_keyword": "bakery",
            "taglines": ["Fresh every day", "Since 1921"],
            "body_copy": ["Early shift, great team"],
            "website": "https://bakery.de",
            "Closing_Date": "2026-12-31",
        },
    }


@pytest.fixture
def raw_german_payload() -> dict:
    return {
        "job_post": {
            "Berufsbezeichnung": "Bäcker",
            "Einleitung": "Familienbäckerei seit 1921.",
            "Job-Einführung": "Frühschicht im Team.",
            "Persönliche Ansprache": "Liebe Bäcker,",
            "Aufgaben": "Brot backen▶Ofen reinigen",
            "Qualifikationen": "Ausbildung\\n▶Teamgeist",
            "Leistungen": ["Freies Brot"],
        },
        "voice": {"script": "Bist du Bäcker?"},
        "image": {"Headline": "Back mit uns"},
    }


@pytest.fixture
def sample_job() -> Job:
    return Job(
        job_title="Baker",
        headline="Bake with us",
        image_keyword="bakery",
        tasks=["Bake"],
        qualifications=["Apprenticeship"],
    )


@pytest.fixture
def sample_form() -> JobPostForm:
    return JobPostForm(
        company_name="Bäckerei Schmidt",
        job_title="Baker",
        job_description="Early shift baker",
        location="Hamburg",
        language="en",
    )


@pytest.fixture
def mock_service_client() -> JobServiceClient:
    """Create a mock service client."""
    client = AsyncMock(spec=JobServiceClient)
    client.create_job_post = AsyncMock(return_value={})
    client.refine_job = AsyncMock(return_value={})
    client.translate_to_english = AsyncMock(return_value={"translated_data": {}})
    client.generate_images = AsyncMock(return_value=[])
    return client


@pytest.fixture
def store(mock_service_client) -> SessionStore:
    return SessionStore(mock_service_client, language="en")
