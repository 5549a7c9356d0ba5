"""Decode the raw creation payload into its three sections."""

from __future__ import annotations

import logging
from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from job_post_studio.exceptions import PayloadDecodeError
from job_post_studio.parsers.reply_decoder import decode_record

logger = logging.getLogger(__name__)

SECTIONS = ("job_post", "voice", "image")


@dataclass(frozen=True)
class RawJobPayload:
    """A creation response whose sections are known to be records."""

    job_post: dict[str, Any] = field(default_factory=dict)
    voice: dict[str, Any] = field(default_factory=dict)
    image: dict[str, Any] = field(default_factory=dict)
    present: frozenset[str] = frozenset()  # sections the service actually sent

    def section(self, name: str) -> dict[str, Any]:
        return getattr(self, name)


def decode_payload(raw: Any) -> RawJobPayload:
    """Check the payload shape; missing or null sections become ``{}``.

    Raises:
        PayloadDecodeError: the payload, or one of its sections, is not a record.
    """
    if isinstance(raw, (str, bytes)):
        try:
            raw = decode_record(raw)
        except ValueError as e:
            raise PayloadDecodeError(f"Job payload is not a JSON record: {e}") from e

    if not isinstance(raw, Mapping):
        raise PayloadDecodeError(
            f"Expected a record with job_post/voice/image, got {type(raw).__name__}"
        )

    sections: dict[str, dict[str, Any]] = {}
    present = set()
    for name in SECTIONS:
        value = raw.get(name)
        if value is None:
            sections[name] = {}
            continue
        if not isinstance(value, Mapping):
            raise PayloadDecodeError(
                f"Section {name!r} must be a record, got {type(value).__name__}"
            )
        sections[name] = dict(value)
        present.add(name)

    if not present:
        logger.warning("Job payload has none of the sections %s", ", ".join(SECTIONS))

    return RawJobPayload(present=frozenset(present), **sections)
