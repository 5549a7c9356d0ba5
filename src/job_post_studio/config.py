"""Application configuration loaded from config.yaml."""

from __future__ import annotations

import os
from dataclasses import dataclass, field, replace
from pathlib import Path

import yaml

BASE_URL_ENV = "JOB_SERVICE_BASE_URL"


@dataclass(frozen=True)
class ServiceConfig:
    base_url: str = "https://image-job.assemblr.ai"
    timeout: float = 120.0
    create_path: str = "/create-job-post/"
    translate_path: str = "/translate-to-english/"
    chat_path: str = "/chat-stream/"
    image_path: str = "/generate-image/"


@dataclass(frozen=True)
class UIConfig:
    default_language: str = "de"  # "en" | "de"
    max_upload_mb: int = 5

    @property
    def max_upload_bytes(self) -> int:
        return self.max_upload_mb * 1024 * 1024


@dataclass(frozen=True)
class AppConfig:
    service: ServiceConfig = field(default_factory=ServiceConfig)
    ui: UIConfig = field(default_factory=UIConfig)


def load_config(path: str | Path | None = None) -> AppConfig:
    """Load config from YAML file, falling back to defaults.

    ``JOB_SERVICE_BASE_URL`` in the environment wins over the file.
    """
    if path is None:
        # Look for config.yaml relative to the project root
        candidates = [
            Path.cwd() / "config.yaml",
            Path(__file__).resolve().parent.parent.parent / "config.yaml",
        ]
        for c in candidates:
            if c.exists():
                path = c
                break

    raw: dict = {}
    if path is not None:
        p = Path(path)
        if p.exists():
            raw = yaml.safe_load(p.read_text(encoding="utf-8")) or {}

    service = ServiceConfig(**raw.get("service", {}))
    base_url = os.environ.get(BASE_URL_ENV)
    if base_url:
        service = replace(service, base_url=base_url)

    return AppConfig(
        service=service,
        ui=UIConfig(**raw.get("ui", {})),
    )
