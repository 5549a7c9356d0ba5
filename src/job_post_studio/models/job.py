"""Pydantic models for the canonical job post."""

from __future__ import annotations

from pydantic import BaseModel, ConfigDict, Field


class JobField(BaseModel):
    """Record shape of a list-like raw field: ``{header, items}``."""

    header: str | None = None
    items: list[str] | None = None


class ContactDetails(BaseModel):
    model_config = ConfigDict(extra="ignore")

    email: str = "No email provided"
    phone: str = "No phone provided"
    address: str = "No address provided"
    website: str = "No website provided"
    contact_person: str = "No contact person provided"


class Job(BaseModel):
    """Canonical job post rendered by the UI.

    Attribute names are snake_case; the camelCase aliases are the wire names
    used by the chat refinement endpoint and by ``model_dump(by_alias=True)``.
    Extra keys are allowed so refinement patches overlay strictly.
    """

    model_config = ConfigDict(populate_by_name=True, extra="allow")

    job_title: str = Field("No job title available", alias="jobTitle")
    headline: str = Field("No headline available", alias="headline")
    description: str = Field("No description available", alias="description")
    introduction: str = Field("No introduction available", alias="introduction")
    introduction_of_job: str = Field("No job introduction available", alias="introductionOfJob")
    personal_address: str = Field("No personal address provided", alias="personalAddress")
    call_to_action: str = Field("No call to action provided", alias="callToAction")

    voice_script: str = Field("No voice script provided", alias="voiceScript")
    voice_tone: str = Field("No tone specified", alias="voiceTone")
    voice_cta: str = Field("No Call to Action specified", alias="voiceCTA")
    voice_location: str = Field("No location specified", alias="voiceLocation")
    voice_benefits: str = Field("No benefits specified", alias="voiceBenefits")

    image_keyword: str = Field("No image keyword provided", alias="imageKeyword")
    website: str = Field("No website provided", alias="website")
    closing_date: str = Field("No closing date provided", alias="closingDate")

    tasks: list[str] = Field(default_factory=list, alias="tasks")
    qualifications: list[str] = Field(default_factory=list, alias="qualifications")
    benefits: list[str] = Field(default_factory=list, alias="benefits")
    taglines: list[str] = Field(default_factory=list, alias="taglines")
    body_copy: list[str] = Field(default_factory=list, alias="bodyCopy")

    contact_details: ContactDetails = Field(default_factory=ContactDetails, alias="contactDetails")

    # Raw sections echoed for traceability, never normalized
    voice: dict | None = None
    job_post: dict | None = None

    @classmethod
    def default_for(cls, name: str) -> str:
        """Return the sentinel string of a scalar field."""
        return cls.model_fields[name].default

    def has_image_keyword(self) -> bool:
        return bool(self.image_keyword.strip()) and self.image_keyword != self.default_for(
            "image_keyword"
        )

    def to_wire(self) -> dict:
        """Serialize with the camelCase wire names."""
        return self.model_dump(by_alias=True, mode="json")


def field_name_for(key: str) -> str | None:
    """Map a wire alias or attribute name to the Job attribute name."""
    if key in Job.model_fields:
        return key
    for name, info in Job.model_fields.items():
        if info.alias == key:
            return name
    return None
