"""Turn a text reply from the job service into a record."""

from __future__ import annotations

import json
import re
from collections.abc import Mapping
from typing import Any

# The chat endpoint sometimes wraps its JSON in a markdown fence
_FENCE = re.compile(r"```(?:json)?\s*\n?(.*?)\n?\s*```", re.DOTALL)


def _unfence(text: str) -> str:
    match = _FENCE.search(text)
    return match.group(1).strip() if match else text


def decode_record(body: Any) -> dict[str, Any]:
    """Decode a service reply body into a dict.

    Accepts a record as is, or JSON text (str or UTF-8 bytes), optionally
    inside a fenced block. A body that decodes to a JSON string is the
    service double-encoding its reply and is decoded one more time.

    Raises:
        ValueError: the body is not JSON, or does not decode to a record.
    """
    if isinstance(body, Mapping):
        return dict(body)
    if isinstance(body, bytes):
        body = body.decode("utf-8", errors="replace")
    if not isinstance(body, str):
        raise ValueError(f"Expected a JSON record, got {type(body).__name__}")

    text = _unfence(body.strip())
    try:
        value = json.loads(text)
    except json.JSONDecodeError as e:
        raise ValueError(f"Reply is not JSON: {body[:200]}") from e
    if isinstance(value, str):
        try:
            value = json.loads(value)
        except json.JSONDecodeError:
            pass  # a plain string, rejected below

    if not isinstance(value, dict):
        raise ValueError(f"Expected a JSON record, got {type(value).__name__}")
    return value
