"""Request lifecycle state for one async flow."""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, ConfigDict


class RequestStatus(str, Enum):
    IDLE = "idle"
    LOADING = "loading"
    SUCCEEDED = "succeeded"
    FAILED = "failed"


class LifecycleState(BaseModel):
    """Immutable snapshot of a flow's status, result and error."""

    model_config = ConfigDict(frozen=True, arbitrary_types_allowed=True)

    status: RequestStatus = RequestStatus.IDLE
    result: Any = None
    error: str | None = None
    request_id: int = 0  # latest dispatched request, 0 = never dispatched
