"""Image export module for job-post-studio."""
from job_post_studio.export.images import (
    data_url,
    decode_image,
    image_filename,
    save_images,
)

__all__ = ["data_url", "decode_image", "image_filename", "save_images"]
