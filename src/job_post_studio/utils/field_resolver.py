"""Multilingual key lookup for raw service sections.

The generation service spells the same field differently depending on the
output language and prompt variant ("Job Title", "Berufsbezeichnung",
"Job_Title", ...). Which spellings are accepted for which canonical field is
data, kept in the tables below: supporting a new locale means appending a key
to a tuple, not adding a branch.
"""

from __future__ import annotations

from collections.abc import Mapping
from typing import Any, NamedTuple


class FieldSpec(NamedTuple):
    name: str  # Job attribute
    section: str  # "job_post" | "voice" | "image"
    keys: tuple[str, ...]  # accepted spellings, highest priority first


SCALAR_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("job_title", "job_post", (
        "Job Title",
        "Berufsbezeichnung",
        "Stellenbezeichnung",
        "Jobbezeichnung",
        "Jobtitel",
        "Job Titel",
        "Job_Title",
    )),
    FieldSpec("headline", "image", ("Headline",)),
    FieldSpec("description", "job_post", ("Description",)),
    FieldSpec("introduction", "job_post", ("Introduction", "Einführung", "Einleitung")),
    FieldSpec("introduction_of_job", "job_post", (
        "Introduction of the job",
        "Introduction_of_the_job",
        "Introduction_of_the_Job",
        "Job Introduction",
        "Job_Introduction",
        "Einführung des Jobs",
        "Einleitung zur Stelle",
        "Einführung des Berufs",
        "Introduction to the Position",
        "Stelleneinführung",
        "Jobeinführung",
        "Job Einführung",
        "introductionOfJob",
        "Job-Einführung",
        "Job Einleitung",
        "Stellenbeschreibung",
        "Job_Einführung",
        "JobEinführung",
    )),
    FieldSpec("personal_address", "job_post", (
        "Personal Address",
        "Personal_Address",
        "PersonalAddress",
        "Persönliche Ansprache",
        "Persönliche Adresse",
        "Persönliche_Adresse",
        "personalAddress",
        "PersönlicheAdresse",
    )),
    FieldSpec("call_to_action", "job_post", ("Call to Action",)),
    FieldSpec("voice_script", "voice", ("script",)),
    FieldSpec("voice_tone", "voice", ("tone",)),
    FieldSpec("voice_cta", "voice", ("cta",)),
    FieldSpec("voice_location", "voice", ("location",)),
    FieldSpec("voice_benefits", "voice", ("benefits",)),
    FieldSpec("image_keyword", "image", ("image_keyword",)),
    FieldSpec("website", "image", ("website",)),
    FieldSpec("closing_date", "image", ("Closing_Date",)),
)

LIST_FIELDS: tuple[FieldSpec, ...] = (
    FieldSpec("tasks", "job_post", ("Tasks", "Aufgaben")),
    FieldSpec("qualifications", "job_post", ("Qualifications", "Qualifikationen")),
    FieldSpec("benefits", "job_post", ("Benefits", "Vorteile", "Leistungen")),
    FieldSpec("taglines", "image", ("taglines",)),
    FieldSpec("body_copy", "image", ("body_copy",)),
)


def _is_empty(value: Any) -> bool:
    if value is None:
        return True
    if isinstance(value, str):
        return not value.strip()
    return not value


def candidates_for(section: Mapping[str, Any], keys: tuple[str, ...]) -> dict[str, Any]:
    """Build the ordered ``key -> value`` candidates for ``keys`` from a section."""
    return {key: section.get(key) for key in keys}


def _as_text(value: Any) -> str | None:
    if isinstance(value, str):
        return value
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return str(value)
    return None


def resolve(candidates: Mapping[str, Any], default: Any = None) -> Any:
    """Return the first present, non-empty candidate value, else ``default``."""
    for value in candidates.values():
        if not _is_empty(value):
            return value
    return default


def resolve_text(candidates: Mapping[str, Any], default: str) -> str:
    """Like :func:`resolve` but only accepts values that display as text.

    Strings win as they are and numbers are coerced with ``str()``. Containers
    and booleans are passed over so a later spelling can still win.
    """
    for value in candidates.values():
        if _is_empty(value):
            continue
        text = _as_text(value)
        if text is not None:
            return text
    return default
