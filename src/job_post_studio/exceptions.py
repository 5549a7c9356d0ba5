"""Error types raised at the flow boundaries."""

from __future__ import annotations


class JobPostStudioError(Exception):
    """Base class for all job-post-studio errors."""


class ServiceError(JobPostStudioError):
    """Transport failure talking to the generation service (network, non-2xx, bad body)."""

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class PayloadDecodeError(JobPostStudioError):
    """Raw service payload does not have the shape the normalizer accepts."""


class UserPreconditionError(JobPostStudioError):
    """A flow was started without the inputs it needs; nothing was sent."""

    def __init__(self, message_key: str, message: str | None = None):
        super().__init__(message or message_key)
        self.message_key = message_key
