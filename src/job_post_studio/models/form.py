"""Pydantic models for the job creation form."""

from __future__ import annotations

from pydantic import BaseModel, Field


class Attachment(BaseModel):
    """An uploaded file sent alongside the form fields."""

    filename: str
    content: bytes
    content_type: str = "application/octet-stream"


class JobPostForm(BaseModel):
    company_name: str
    job_title: str
    job_description: str = ""
    location: str = ""
    website: str = ""
    closing_date: str = ""
    language: str = "de"  # "en" | "de"
    attachment: Attachment | None = None

    def form_fields(self) -> dict[str, str]:
        """Return the non-file multipart fields, skipping empty values."""
        data = self.model_dump(exclude={"attachment"})
        return {k: v for k, v in data.items() if v}


class ImageRequest(BaseModel):
    """Template upload plus keyword for the image generation endpoint."""

    template: bytes = Field(repr=False)
    filename: str
    content_type: str = "image/png"
    image_keyword: str
