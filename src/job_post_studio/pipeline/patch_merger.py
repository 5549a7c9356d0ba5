"""Overlay chat-refinement patches onto the canonical Job."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from typing import Any

from job_post_studio.models.job import ContactDetails, Job, field_name_for
from job_post_studio.parsers.list_field_parser import parse_list_field
from job_post_studio.utils.field_resolver import LIST_FIELDS

logger = logging.getLogger(__name__)

_LIST_NAMES = frozenset(spec.name for spec in LIST_FIELDS)
_RAW_ECHO = frozenset({"voice", "job_post"})


def _decode_value(name: str, value: Any, existing: Job | None) -> Any:
    """Bring one patch value into the type the Job field holds."""
    if name in _LIST_NAMES:
        return parse_list_field(value)

    if name == "contact_details":
        base = existing.contact_details if existing else ContactDetails()
        if not isinstance(value, Mapping):
            logger.warning("Ignoring contactDetails patch of type %s", type(value).__name__)
            return base
        return base.model_copy(update={
            k: str(v) for k, v in value.items() if k in ContactDetails.model_fields and v
        })

    if name in _RAW_ECHO:
        return dict(value) if isinstance(value, Mapping) else None

    if value is None:
        return Job.default_for(name)
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    if isinstance(value, (list, tuple)) and all(isinstance(item, str) for item in value):
        return "\n".join(item.strip() for item in value if item.strip())

    logger.warning("Ignoring %s patch of type %s", name, type(value).__name__)
    return getattr(existing, name) if existing else Job.default_for(name)


def decode_patch(patch: Mapping[str, Any], existing: Job | None = None) -> dict[str, Any]:
    """Map patch keys (wire aliases or attribute names) to typed Job values.

    Keys the Job does not define are kept verbatim as extras.
    """
    decoded: dict[str, Any] = {}
    for key, value in patch.items():
        name = field_name_for(key)
        if name is None:
            decoded[key] = value
        else:
            decoded[name] = _decode_value(name, value, existing)
    return decoded


def merge_patch(existing: Job | None, patch: Any) -> Job | None:
    """Return ``existing`` with every key of ``patch`` replaced.

    Keys absent from the patch are retained. A patch that is not a record is
    rejected with a warning and ``existing`` is returned unchanged. With no
    existing Job the patch alone becomes the Job.
    """
    if not isinstance(patch, Mapping):
        logger.warning("Invalid payload for job update: %r", patch)
        return existing

    decoded = decode_patch(patch, existing)

    if existing is None:
        return Job(**decoded)

    merged = {**existing.model_dump(), **decoded}
    job = Job(**merged)
    logger.info("Updated job fields: %s", ", ".join(sorted(patch)) or "(none)")
    return job
