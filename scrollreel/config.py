"""Configuration loading for scrollreel."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, Field


class ExportConfig(BaseModel):
    quality: str = "hd"
    frame_limit: int = 0  # 0 prints every frame


class PreviewConfig(BaseModel):
    # Renderers normally supply geometry; these are CLI fallbacks
    viewport_height: float | None = None  # None uses the canvas height
    content_height: float = 1200


class Config(BaseModel):
    log_level: str = "INFO"
    export: ExportConfig = Field(default_factory=ExportConfig)
    preview: PreviewConfig = Field(default_factory=PreviewConfig)


def _project_root() -> Path:
    """Return the scrollreel project root directory."""
    return Path(__file__).parent.parent


def load_config(config_path: Path | None = None) -> Config:
    """Load config from YAML file. Falls back to defaults if file missing."""
    if config_path is None:
        config_path = _project_root() / "config.yaml"

    if config_path.exists():
        raw: dict[str, Any] = yaml.safe_load(config_path.read_text()) or {}
        return Config(**raw)

    return Config()
