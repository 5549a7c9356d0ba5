"""Session state owner - coordinates the request flows and the canonical Job."""

from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from typing import Any

from job_post_studio.clients.job_service_client import JobServiceClient
from job_post_studio.exceptions import (
    PayloadDecodeError,
    ServiceError,
    UserPreconditionError,
)
from job_post_studio.localization import t
from job_post_studio.models.form import ImageRequest, JobPostForm
from job_post_studio.models.job import Job
from job_post_studio.parsers.reply_decoder import decode_record
from job_post_studio.pipeline.job_normalizer import normalize_job
from job_post_studio.pipeline.lifecycle import RequestLifecycle
from job_post_studio.pipeline.patch_merger import merge_patch

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionSnapshot:
    """What a reader sees between two mutations."""

    version: int
    job: Job | None
    translated_job: dict | None


class SessionStore:
    """Owns the canonical Job, the translated view and one lifecycle per flow.

    Every change to the job or translated view swaps in a new object with a
    single assignment and bumps ``version``; readers never observe a partly
    updated Job. Transport and decode failures end in the flow's ``failed``
    state and are never raised. Missing user inputs raise
    :class:`UserPreconditionError` before anything is sent.
    """

    def __init__(self, client: JobServiceClient, *, language: str = "en"):
        self.client = client
        self.language = language
        self.version = 0
        self._job: Job | None = None
        self._translated_job: dict | None = None
        self._is_translated = False  # False while the view is a copy of the Job
        self.creation = RequestLifecycle("creation")
        self.refinement = RequestLifecycle("refinement")
        self.images = RequestLifecycle("images")
        self.translation = RequestLifecycle("translation")

    # -- state ---------------------------------------------------------------

    @property
    def job(self) -> Job | None:
        return self._job

    @property
    def translated_job(self) -> dict | None:
        return self._translated_job

    @property
    def is_translated(self) -> bool:
        """Whether the translated view holds the service's English version."""
        return self._translated_job is not None and self._is_translated

    @property
    def lifecycles(self) -> dict[str, RequestLifecycle]:
        return {
            "creation": self.creation,
            "refinement": self.refinement,
            "images": self.images,
            "translation": self.translation,
        }

    def snapshot(self) -> SessionSnapshot:
        return SessionSnapshot(self.version, self._job, self._translated_job)

    def _commit(self, *, job: Any = ..., translated: Any = ..., is_translated: bool = False) -> None:
        if job is not ...:
            self._job = job
        if translated is not ...:
            self._translated_job = translated
            self._is_translated = is_translated
        self.version += 1

    def apply_patch(self, patch: Any) -> Job | None:
        """Overlay ``patch`` on the current Job (no-op for a non-record patch)."""
        merged = merge_patch(self._job, patch)
        if merged is not self._job:
            self._commit(job=merged)
        return self._job

    def sync_translated_job(self) -> None:
        """Copy the current Job into the translated view."""
        if self._job is not None:
            self._commit(translated=self._job.to_wire())

    def reset(self) -> None:
        """Clear the Job, the translated view and every lifecycle."""
        for lifecycle in self.lifecycles.values():
            lifecycle.reset()
        self._commit(job=None, translated=None)
        logger.info("Session reset")

    def _precondition(self, key: str) -> UserPreconditionError:
        return UserPreconditionError(key, t(key, self.language))

    # -- flows ---------------------------------------------------------------

    async def create_job(self, form: JobPostForm) -> Job | None:
        """Create a job post and replace the canonical Job on success."""
        request_id = self.creation.begin()
        try:
            raw = await self.client.create_job_post(form)
            job = normalize_job(raw)
        except (ServiceError, PayloadDecodeError) as e:
            logger.warning("Job creation failed: %s", e)
            self.creation.fail(request_id, str(e))
            return None

        if not self.creation.succeed(request_id, job):
            return None
        self._commit(job=job, translated=job.to_wire())
        logger.info("Job post created: %s", job.job_title)
        return job

    async def refine_job(self, prompt: str) -> Job | None:
        """Ask the chat endpoint for changes and overlay them on the Job."""
        if self._job is None:
            raise self._precondition("create_job_first")
        if not prompt or not prompt.strip():
            raise self._precondition("empty_prompt")

        job_description = json.dumps(self._job.to_wire(), ensure_ascii=False)
        request_id = self.refinement.begin()
        try:
            response = await self.client.refine_job(prompt.strip(), job_description)
        except ServiceError as e:
            logger.warning("Chat refinement failed: %s", e)
            self.refinement.fail(request_id, str(e))
            return None

        if isinstance(response, str):
            try:
                response = decode_record(response)
            except ValueError as e:
                logger.warning("Chat response is not a record: %s", e)

        if not self.refinement.succeed(request_id, response):
            return None
        return self.apply_patch(response)

    async def generate_images(
        self,
        template: bytes | None,
        filename: str = "template.png",
        content_type: str = "image/png",
    ) -> list[str] | None:
        """Generate images from an uploaded template and the Job's image keyword."""
        if not template or self._job is None or not self._job.has_image_keyword():
            raise self._precondition("template_required")

        request = ImageRequest(
            template=template,
            filename=filename,
            content_type=content_type,
            image_keyword=self._job.image_keyword,
        )
        request_id = self.images.begin()
        try:
            images = await self.client.generate_images(request)
        except ServiceError as e:
            logger.warning("Image generation failed: %s", e)
            self.images.fail(request_id, str(e))
            return None

        if not self.images.succeed(request_id, images):
            return None
        return images

    async def translate_to_english(self) -> dict | None:
        """Translate the Job and replace the translated view (used verbatim)."""
        if self._job is None:
            raise self._precondition("create_job_first")

        request_id = self.translation.begin()
        try:
            response = await self.client.translate_to_english(self._job.to_wire())
        except ServiceError as e:
            logger.warning("Translation failed: %s", e)
            self.translation.fail(request_id, str(e))
            return None

        translated = response.get("translated_data", response) if isinstance(response, dict) else None
        if not isinstance(translated, dict):
            logger.warning("Translation response is not a record: %r", response)
            self.translation.fail(request_id, "Translation failed")
            return None

        if not self.translation.succeed(request_id, translated):
            return None
        self._commit(translated=translated, is_translated=True)
        return translated
