"""Pydantic models for the scrollreel timeline engine."""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class CheckStatus(str, Enum):
    PASS = "pass"
    WARNING = "warning"
    ERROR = "error"


class WPMLevel(str, Enum):
    GOOD = "good"
    WARNING = "warning"
    DANGER = "danger"


# --- Timing state (what the drivers consume) ---


class DurationModel(BaseModel):
    """Durations derived from text and pacing settings, in seconds."""
    model_config = ConfigDict(frozen=True)

    word_count: int = Field(ge=0)
    target_wpm: int = Field(ge=0)
    content_duration: float
    ending_duration: float
    total_duration: float
    pacing_error: str | None = None  # custom pacing requested without a duration


class ScrollState(BaseModel):
    model_config = ConfigDict(frozen=True)

    progress: float
    is_ending: bool
    scroll_offset_percent: float


class TransitionOpacity(BaseModel):
    model_config = ConfigDict(frozen=True)

    content_opacity: float
    ending_opacity: float


class FrameState(BaseModel):
    """Everything a renderer needs for one instant of playback."""
    model_config = ConfigDict(frozen=True)

    time: float
    scroll: ScrollState
    opacity: TransitionOpacity
    scroll_position: float  # px from the top of the viewport
    scroll_ratio: float  # scroll_position / viewport_height


# --- Validation output ---


class TimelineValidation(BaseModel):
    model_config = ConfigDict(frozen=True)

    is_valid: bool
    warnings: list[str] = Field(default_factory=list)
    errors: list[str] = Field(default_factory=list)


class ValidationCheck(BaseModel):
    model_config = ConfigDict(frozen=True)

    id: str
    label: str
    status: CheckStatus
    message: str | None = None


class ReadinessResult(BaseModel):
    """Ordered export checklist. Warnings never block."""
    model_config = ConfigDict(frozen=True)

    is_ready: bool
    checks: list[ValidationCheck]

    def by_id(self, check_id: str) -> ValidationCheck | None:
        for check in self.checks:
            if check.id == check_id:
                return check
        return None
