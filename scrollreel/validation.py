"""Timeline policy checks and the export readiness checklist.

Nothing here raises: problems come back as checklist entries, and the caller
decides whether to start an export.
"""

from scrollreel.models import (
    CheckStatus,
    DurationModel,
    ReadinessResult,
    TimelineValidation,
    ValidationCheck,
)
from scrollreel.project import VideoProject, project_timeline
from scrollreel.timeline import MIN_CONTENT_DURATION

MAX_READABLE_WPM = 600
FAST_WPM = 400
MAX_RECOMMENDED_DURATION = 120


def validate_timeline(timeline: DurationModel) -> TimelineValidation:
    warnings: list[str] = []
    errors: list[str] = []

    if timeline.pacing_error:
        errors.append(timeline.pacing_error)

    if timeline.word_count == 0:
        warnings.append("No text content - video will be empty")

    if timeline.target_wpm > MAX_READABLE_WPM:
        errors.append(f"Reading speed ({timeline.target_wpm} WPM) is too fast to read")
    elif timeline.target_wpm > FAST_WPM:
        warnings.append(f"Reading speed ({timeline.target_wpm} WPM) may be too fast for most readers")

    if timeline.content_duration < MIN_CONTENT_DURATION:
        errors.append(f"Video is too short (minimum {MIN_CONTENT_DURATION} seconds)")

    if timeline.total_duration > MAX_RECOMMENDED_DURATION:
        warnings.append("Video is over 2 minutes - consider breaking into parts")

    return TimelineValidation(is_valid=not errors, warnings=warnings, errors=errors)


def _wpm_check(target_wpm: int) -> ValidationCheck:
    if target_wpm > MAX_READABLE_WPM:
        status, note = CheckStatus.ERROR, "too fast!"
    elif target_wpm > FAST_WPM:
        status, note = CheckStatus.WARNING, "fast"
    else:
        status, note = CheckStatus.PASS, "comfortable"
    return ValidationCheck(
        id="wpm", label="Reading speed", status=status,
        message=f"{target_wpm} WPM ({note})",
    )


def _duration_check(timeline: DurationModel) -> ValidationCheck:
    if timeline.content_duration < MIN_CONTENT_DURATION:
        status = CheckStatus.ERROR
    elif timeline.total_duration > MAX_RECOMMENDED_DURATION:
        status = CheckStatus.WARNING
    else:
        status = CheckStatus.PASS
    return ValidationCheck(
        id="duration", label="Video duration", status=status,
        message=f"{timeline.total_duration:g}s total",
    )


def check_export_readiness(project: VideoProject) -> ReadinessResult:
    """Build the ordered export checklist for a project.

    Order: content, pacing (only on a pacing error), reading speed, duration,
    audio, ending (only when enabled). Ready means no check is an error.
    """
    timeline = project_timeline(project)
    timeline_validation = validate_timeline(timeline)
    checks: list[ValidationCheck] = []

    has_words = timeline.word_count > 0
    checks.append(ValidationCheck(
        id="content",
        label="Text content",
        status=CheckStatus.PASS if has_words else CheckStatus.WARNING,
        message=f"{timeline.word_count} words" if has_words else "No text content",
    ))

    if timeline.pacing_error:
        checks.append(ValidationCheck(
            id="pacing", label="Pacing", status=CheckStatus.ERROR,
            message=timeline.pacing_error,
        ))

    checks.append(_wpm_check(timeline.target_wpm))
    checks.append(_duration_check(timeline))

    checks.append(ValidationCheck(
        id="audio",
        label="Background audio",
        status=CheckStatus.PASS if project.has_audio else CheckStatus.WARNING,
        message="Will be included" if project.has_audio else "No audio (silent video)",
    ))

    ending = project.ending
    if ending.enabled:
        if ending.duration <= 0:
            status, message = CheckStatus.WARNING, "Ending duration must be positive"
        elif not ending.has_content:
            status, message = CheckStatus.WARNING, "Ending card is empty"
        else:
            status, message = CheckStatus.PASS, f"{ending.duration:g}s ending"
        checks.append(ValidationCheck(id="ending", label="Ending card", status=status, message=message))

    has_errors = any(c.status == CheckStatus.ERROR for c in checks) or not timeline_validation.is_valid
    return ReadinessResult(is_ready=not has_errors, checks=checks)
