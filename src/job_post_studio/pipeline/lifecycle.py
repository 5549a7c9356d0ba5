"""Status tracking for one outstanding remote call per flow."""

from __future__ import annotations

import logging
from typing import Any

from job_post_studio.models.lifecycle import LifecycleState, RequestStatus

logger = logging.getLogger(__name__)


class RequestLifecycle:
    """idle -> loading -> succeeded | failed, re-dispatchable from any state.

    Every dispatch gets a monotonic request id. Only the latest id may settle
    the lifecycle; responses to older dispatches are dropped.
    """

    def __init__(self, name: str):
        self.name = name
        self._state = LifecycleState()
        self._next_id = 0

    @property
    def state(self) -> LifecycleState:
        return self._state

    @property
    def status(self) -> RequestStatus:
        return self._state.status

    @property
    def result(self) -> Any:
        return self._state.result

    @property
    def error(self) -> str | None:
        return self._state.error

    @property
    def is_loading(self) -> bool:
        return self._state.status is RequestStatus.LOADING

    def begin(self) -> int:
        """Enter loading, clear the previous error and return the new request id."""
        self._next_id += 1
        self._state = self._state.model_copy(update={
            "status": RequestStatus.LOADING,
            "error": None,
            "request_id": self._next_id,
        })
        logger.debug("%s: request %d dispatched", self.name, self._next_id)
        return self._next_id

    def is_current(self, request_id: int) -> bool:
        return request_id == self._state.request_id and self.is_loading

    def succeed(self, request_id: int, result: Any) -> bool:
        if not self.is_current(request_id):
            logger.debug("%s: dropping stale response for request %d", self.name, request_id)
            return False
        self._state = self._state.model_copy(update={
            "status": RequestStatus.SUCCEEDED,
            "result": result,
        })
        return True

    def fail(self, request_id: int, error: str) -> bool:
        """Store the error; the previous result is kept for stale display."""
        if not self.is_current(request_id):
            logger.debug("%s: dropping stale error for request %d", self.name, request_id)
            return False
        self._state = self._state.model_copy(update={
            "status": RequestStatus.FAILED,
            "error": error,
        })
        return True

    def reset(self) -> None:
        """Back to idle; results and errors are discarded, ids keep counting.

        A response still in flight is dropped since only a loading lifecycle
        can settle.
        """
        self._state = LifecycleState(request_id=self._state.request_id)
