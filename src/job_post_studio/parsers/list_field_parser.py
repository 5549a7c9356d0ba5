"""Normalize list-like raw fields of unknown shape into ``list[str]``."""

from __future__ import annotations

import re
from collections.abc import Iterable, Mapping
from typing import Any

from job_post_studio.models.job import JobField

# "▶" bullet marker, optionally preceded by a real or an escaped newline
BULLET_SPLIT = re.compile(r"(?:\\n▶|\n▶|▶)")


def split_bullets(text: str) -> list[str]:
    """Split a bullet-joined string, trimming pieces and dropping empty ones."""
    return [piece.strip() for piece in BULLET_SPLIT.split(text) if piece.strip()]


def _clean_items(items: Iterable[Any]) -> list[str]:
    cleaned = []
    for item in items:
        if isinstance(item, str):
            text = item.strip()
        elif isinstance(item, (int, float)) and not isinstance(item, bool):
            text = str(item)
        else:
            continue
        if text:
            cleaned.append(text)
    return cleaned


def parse_list_field(field: Any) -> list[str]:
    """Return the items of a list field given as a sequence, a record or a string.

    Shapes, checked in order:
      1. list/tuple -> its items
      2. ``{header, items}`` record (dict or JobField) -> ``items``, [] if absent
      3. string -> split on the bullet marker
      4. anything else -> []

    Items are trimmed and empty ones dropped; order is preserved.
    """
    if isinstance(field, (list, tuple)):
        return _clean_items(field)

    if isinstance(field, JobField):
        return _clean_items(field.items or [])

    if isinstance(field, Mapping):
        items = field.get("items")
        if isinstance(items, (list, tuple)):
            return _clean_items(items)
        return []

    if isinstance(field, str):
        return split_bullets(field)

    return []
