"""Data models for the job post client."""

from job_post_studio.models.form import Attachment, ImageRequest, JobPostForm
from job_post_studio.models.job import ContactDetails, Job, JobField
from job_post_studio.models.lifecycle import LifecycleState, RequestStatus

__all__ = [
    "Attachment",
    "ContactDetails",
    "ImageRequest",
    "Job",
    "JobField",
    "JobPostForm",
    "LifecycleState",
    "RequestStatus",
]
