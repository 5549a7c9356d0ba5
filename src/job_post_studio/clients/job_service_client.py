"""Async httpx client for the job-post generation service."""

from __future__ import annotations

import logging
from typing import Any

import httpx

from job_post_studio.config import ServiceConfig
from job_post_studio.exceptions import ServiceError
from job_post_studio.models.form import ImageRequest, JobPostForm

logger = logging.getLogger(__name__)

FALLBACK_ERROR = "Something went wrong"
MALFORMED_ERROR = "Malformed response from job service"


def error_message(response: httpx.Response) -> str:
    """Return the raw error payload of a failed response as display text."""
    try:
        body = response.json()
    except ValueError:
        text = (response.text or "").strip()
        return text or FALLBACK_ERROR

    if isinstance(body, dict):
        for key in ("detail", "error", "message"):
            value = body.get(key)
            if isinstance(value, str) and value.strip():
                return value.strip()
        return str(body) if body else FALLBACK_ERROR
    if isinstance(body, str) and body.strip():
        return body.strip()
    return FALLBACK_ERROR


class JobServiceClient:
    """Talks to the four generation service endpoints. No retries."""

    def __init__(
        self,
        config: ServiceConfig | None = None,
        *,
        transport: httpx.AsyncBaseTransport | None = None,
    ):
        self.config = config or ServiceConfig()
        self._transport = transport

    def _client(self) -> httpx.AsyncClient:
        return httpx.AsyncClient(
            base_url=self.config.base_url,
            timeout=self.config.timeout,
            transport=self._transport,
        )

    async def _post(self, path: str, **kwargs: Any) -> Any:
        logger.info("POST %s", path)
        try:
            async with self._client() as client:
                response = await client.post(path, **kwargs)
        except httpx.RequestError as e:
            logger.error("Request to %s failed: %s", path, e)
            raise ServiceError(FALLBACK_ERROR) from e

        if response.is_error:
            message = error_message(response)
            logger.warning("Job service error %s on %s: %s", response.status_code, path, message[:500])
            raise ServiceError(message, status_code=response.status_code)

        try:
            return response.json()
        except ValueError as e:
            logger.warning("Non-JSON body from %s: %s", path, response.text[:200])
            raise ServiceError(MALFORMED_ERROR, status_code=response.status_code) from e

    async def create_job_post(self, form: JobPostForm) -> Any:
        """POST the creation form as multipart; returns the raw ``{job_post, voice, image}``."""
        # plain fields as filename-less parts so the body is multipart even without a file
        files: dict[str, tuple] = {k: (None, v) for k, v in form.form_fields().items()}
        if form.attachment is not None:
            att = form.attachment
            files["file"] = (att.filename, att.content, att.content_type)
        return await self._post(self.config.create_path, files=files)

    async def translate_to_english(self, json_data: dict) -> Any:
        return await self._post(self.config.translate_path, json={"json_data": json_data})

    async def refine_job(self, prompt: str, job_description: str) -> Any:
        """Send a chat refinement prompt; the response is a partial job record."""
        return await self._post(
            self.config.chat_path,
            json={"prompt": prompt, "job_description": job_description},
        )

    async def generate_images(self, request: ImageRequest) -> list[str]:
        """Upload the template and return the generated images as base64 strings."""
        data = await self._post(
            self.config.image_path,
            data={"image_keyword": request.image_keyword},
            files={"template": (request.filename, request.template, request.content_type)},
        )
        if isinstance(data, dict):
            data = data.get("images")
        if not isinstance(data, list) or not all(isinstance(i, str) for i in data):
            raise ServiceError(MALFORMED_ERROR)
        return data
