"""Fold a raw creation response into the canonical Job."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from job_post_studio.models.job import ContactDetails, Job
from job_post_studio.parsers.list_field_parser import parse_list_field
from job_post_studio.parsers.payload_decoder import RawJobPayload, decode_payload
from job_post_studio.utils.field_resolver import (
    LIST_FIELDS,
    SCALAR_FIELDS,
    candidates_for,
    resolve,
    resolve_text,
)

logger = logging.getLogger(__name__)


def extract_contact_details(voice: Mapping[str, Any]) -> ContactDetails:
    """Take ``voice.contact_details``; sub-fields it lacks keep their sentinels."""
    raw = voice.get("contact_details")
    if raw is None:
        return ContactDetails()
    if not isinstance(raw, Mapping):
        logger.warning("Ignoring contact_details of type %s", type(raw).__name__)
        return ContactDetails()

    defaults = ContactDetails()
    values = {}
    for name in ContactDetails.model_fields:
        values[name] = resolve_text({name: raw.get(name)}, getattr(defaults, name))
    return ContactDetails(**values)


def build_job(payload: RawJobPayload) -> Job:
    """Build a Job from an already decoded payload."""
    values: dict[str, Any] = {}

    for spec in SCALAR_FIELDS:
        section = payload.section(spec.section)
        values[spec.name] = resolve_text(
            candidates_for(section, spec.keys), Job.default_for(spec.name)
        )

    for spec in LIST_FIELDS:
        section = payload.section(spec.section)
        values[spec.name] = parse_list_field(resolve(candidates_for(section, spec.keys)))

    values["contact_details"] = extract_contact_details(payload.voice)
    values["voice"] = dict(payload.voice) if "voice" in payload.present else None
    values["job_post"] = dict(payload.job_post) if "job_post" in payload.present else None

    return Job(**values)


def normalize_job(raw: Any) -> Job:
    """Normalize a raw ``{job_post, voice, image}`` response into a Job.

    Pure: the same raw payload always yields an equal Job. Either a complete
    Job is returned or :class:`PayloadDecodeError` is raised.
    """
    job = build_job(decode_payload(raw))
    logger.debug("Normalized job post: %s", job.job_title)
    return job
