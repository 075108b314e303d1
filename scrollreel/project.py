"""Immutable project value and per-group update functions.

A project is never mutated: each update_* function returns a new project,
recomputing derived pacing fields the same way the editor always has.
"""

import json
import logging
from pathlib import Path
from typing import Any

import yaml
from pydantic import BaseModel, ConfigDict, Field

from scrollreel.models import DurationModel
from scrollreel.presets import CUSTOM_PRESET, preset_wpm
from scrollreel.timeline import compute_duration_model, count_words, duration_from_wpm

logger = logging.getLogger(__name__)

DEFAULT_TEXT = (
    "Enter your scrolling text here...\n\n"
    "Add multiple lines for a longer scroll effect.\n\n"
    "Perfect for social media reels and videos!"
)


class TextSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    content: str = DEFAULT_TEXT
    font_family: str = "Poppins, sans-serif"
    font_size: int = 48
    auto_scale_font: bool = True
    line_height: float = 1.6
    letter_spacing: float = 0
    padding_x: int = 18
    padding_y: int = 40


class AnimationSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    wpm_preset: str = "beginner"
    target_wpm: int = 150
    duration: float | None = 15
    is_looping: bool = True


class AudioSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    file: str | None = None
    file_name: str | None = None
    duration: float | None = None
    volume: int = 80
    loop: bool = True


class EndingSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    enabled: bool = False
    duration: float = Field(default=3, ge=0)
    cta_text: str = "Follow for more!"
    logo: str | None = None
    qr_code: str | None = None
    show_logo: bool = False
    show_qr: bool = False

    @property
    def has_content(self) -> bool:
        """Whether the ending card has anything to show."""
        return bool(
            self.cta_text.strip()
            or (self.show_logo and self.logo)
            or (self.show_qr and self.qr_code)
        )


class VideoProject(BaseModel):
    model_config = ConfigDict(frozen=True)

    name: str = "Untitled Project"
    canvas_format: str = "vertical"
    text: TextSettings = Field(default_factory=TextSettings)
    animation: AnimationSettings = Field(default_factory=AnimationSettings)
    audio: AudioSettings = Field(default_factory=AudioSettings)
    ending: EndingSettings = Field(default_factory=EndingSettings)

    @property
    def has_audio(self) -> bool:
        return bool(self.audio.file)


def _replace(model: BaseModel, updates: dict[str, Any]) -> Any:
    # model_copy skips validation; re-validate so bad updates fail here
    return type(model).model_validate({**model.model_dump(), **updates})


def update_text(project: VideoProject, **updates: Any) -> VideoProject:
    """Return a project with new text settings.

    Changing the content under a named preset recomputes the animation
    duration from the preset's rate.
    """
    text = _replace(project.text, updates)
    animation = project.animation
    if "content" in updates and animation.wpm_preset != CUSTOM_PRESET:
        duration = duration_from_wpm(count_words(text.content), animation.target_wpm)
        animation = _replace(animation, {"duration": duration})
    return _replace(project, {"text": text, "animation": animation})


def update_animation(project: VideoProject, **updates: Any) -> VideoProject:
    """Return a project with new animation settings.

    Switching to a named preset adopts its rate; a rate change under a
    named preset recomputes the duration. Custom mode keeps what it's given.
    """
    animation = _replace(project.animation, updates)
    word_count = count_words(project.text.content)

    preset = updates.get("wpm_preset")
    if preset is not None and preset != CUSTOM_PRESET:
        target_wpm = preset_wpm(preset)
        animation = _replace(animation, {
            "target_wpm": target_wpm,
            "duration": duration_from_wpm(word_count, target_wpm),
        })
    elif "target_wpm" in updates and animation.wpm_preset != CUSTOM_PRESET:
        animation = _replace(animation, {
            "duration": duration_from_wpm(word_count, animation.target_wpm),
        })

    return _replace(project, {"animation": animation})


def update_audio(project: VideoProject, **updates: Any) -> VideoProject:
    return _replace(project, {"audio": _replace(project.audio, updates)})


def update_ending(project: VideoProject, **updates: Any) -> VideoProject:
    return _replace(project, {"ending": _replace(project.ending, updates)})


def set_canvas_format(project: VideoProject, canvas_format: str) -> VideoProject:
    return _replace(project, {"canvas_format": canvas_format})


def project_timeline(project: VideoProject) -> DurationModel:
    """Duration model for a project's current settings."""
    animation = project.animation
    return compute_duration_model(
        project.text.content,
        animation.wpm_preset,
        animation.duration if animation.wpm_preset == CUSTOM_PRESET else None,
        project.ending.enabled,
        project.ending.duration,
    )


def load_project(path: Path) -> VideoProject:
    """Load a project from a YAML or JSON file.

    Raises OSError if the file can't be read and pydantic.ValidationError
    if its contents don't describe a project.
    """
    raw_text = path.read_text()
    if path.suffix.lower() == ".json":
        raw: dict[str, Any] = json.loads(raw_text)
    else:
        raw = yaml.safe_load(raw_text) or {}
    project = VideoProject.model_validate(raw)
    logger.debug("Loaded project %r from %s", project.name, path)
    return project
