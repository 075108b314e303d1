"""Timeline engine — the single source of truth for timing math.

Preview and export both call into this module with their own time values;
every function here is pure so that equal inputs give equal frames. Nothing
in this module reads configuration, clocks, or logs.
"""

import math

from scrollreel.models import DurationModel, ScrollState, TransitionOpacity, WPMLevel
from scrollreel.presets import CUSTOM_PRESET, preset_wpm

TRANSITION_DURATION = 0.5
BOTTOM_MARGIN_PX = 75

MIN_CONTENT_DURATION = 3
MIN_AUTO_DURATION = 5
EMPTY_TEXT_DURATION = 10


def round_half_up(value: float) -> int:
    # round() rounds half to even
    return math.floor(value + 0.5)


def count_words(text: str) -> int:
    return len(text.split())


def calculate_wpm(word_count: int, duration: float) -> int:
    """Reading rate implied by showing word_count words over duration seconds."""
    if duration <= 0 or word_count <= 0:
        return 0
    return round_half_up(word_count / duration * 60)


def duration_from_wpm(word_count: int, wpm: float) -> int:
    """Seconds needed to read word_count words at wpm, never below the auto floor."""
    if word_count <= 0 or wpm <= 0:
        return EMPTY_TEXT_DURATION
    return max(MIN_AUTO_DURATION, math.ceil(word_count / wpm * 60))


def wpm_level(wpm: float) -> WPMLevel:
    if wpm <= 180:
        return WPMLevel.GOOD
    if wpm <= 300:
        return WPMLevel.WARNING
    return WPMLevel.DANGER


def compute_duration_model(
    text: str,
    wpm_preset: str,
    custom_duration: float | None,
    ending_enabled: bool,
    ending_duration: float,
) -> DurationModel:
    """Compute the duration model from text content and pacing settings.

    Custom mode takes the duration as given (floored at 3s) and derives the
    rate. Auto mode takes the preset rate and derives the duration, rounding
    up so the viewer never gets less than the nominal reading time.

    Custom mode without a duration is reported through ``pacing_error``; the
    remaining fields then follow auto mode at the custom preset's nominal rate.
    """
    word_count = count_words(text)
    pacing_error = None

    if wpm_preset == CUSTOM_PRESET and custom_duration is not None:
        content_duration = max(MIN_CONTENT_DURATION, custom_duration)
        target_wpm = calculate_wpm(word_count, content_duration)
    else:
        if wpm_preset == CUSTOM_PRESET:
            pacing_error = "Custom pacing selected but no duration was set"
        target_wpm = preset_wpm(wpm_preset)
        if word_count > 0:
            content_duration = max(MIN_AUTO_DURATION, math.ceil(word_count / target_wpm * 60))
        else:
            content_duration = EMPTY_TEXT_DURATION

    actual_ending = ending_duration if ending_enabled else 0

    return DurationModel(
        word_count=word_count,
        target_wpm=target_wpm,
        content_duration=content_duration,
        ending_duration=actual_ending,
        total_duration=content_duration + actual_ending,
        pacing_error=pacing_error,
    )


def scroll_end_time(content_duration: float, ending_enabled: bool) -> float:
    """Time at which scrolling parks; with an ending, before the crossfade starts."""
    if ending_enabled:
        return content_duration - TRANSITION_DURATION
    return content_duration


def compute_scroll_state(
    current_time: float,
    content_duration: float,
    ending_enabled: bool,
) -> ScrollState:
    """Scroll state at current_time. Overrun times clamp rather than extrapolate."""
    is_ending = ending_enabled and current_time >= content_duration

    end = scroll_end_time(content_duration, ending_enabled)
    if content_duration > 0 and end > 0:
        progress = min(max(current_time / end, 0.0), 1.0)
    else:
        progress = 0.0

    # +100 parks the text below the frame, -100 above it
    scroll_offset_percent = (1 - 2 * progress) * 100

    return ScrollState(
        progress=progress,
        is_ending=is_ending,
        scroll_offset_percent=scroll_offset_percent,
    )


def compute_transition_opacity(
    current_time: float,
    content_duration: float,
    ending_enabled: bool,
) -> TransitionOpacity:
    """Crossfade between content and ending card over the last TRANSITION_DURATION seconds."""
    if not ending_enabled:
        return TransitionOpacity(content_opacity=1.0, ending_opacity=0.0)

    transition_start = content_duration - TRANSITION_DURATION
    if current_time < transition_start:
        return TransitionOpacity(content_opacity=1.0, ending_opacity=0.0)
    if current_time >= content_duration:
        return TransitionOpacity(content_opacity=0.0, ending_opacity=1.0)

    t = (current_time - transition_start) / TRANSITION_DURATION
    return TransitionOpacity(content_opacity=1.0 - t, ending_opacity=t)


def max_scroll_distance(viewport_height: float, content_height: float) -> float:
    effective_viewport = viewport_height - BOTTOM_MARGIN_PX
    total_distance = viewport_height + content_height
    if content_height > effective_viewport:
        # Tall content stops early so its last line clears the bottom margin
        return total_distance - effective_viewport
    return total_distance


def scroll_floor(viewport_height: float, content_height: float) -> float:
    """Lowest allowed scroll position: the resting frame at progress 1."""
    return viewport_height - max_scroll_distance(viewport_height, content_height)


def calculate_scroll_position(
    progress: float,
    viewport_height: float,
    content_height: float,
) -> float:
    """Map normalized progress to the pixel offset of the content's top edge.

    Text starts entirely below the frame (position == viewport_height) and
    moves up. Geometry is passed per call, so the same progress frames the
    content identically at any output resolution.
    """
    start_position = viewport_height
    position = start_position - progress * max_scroll_distance(viewport_height, content_height)
    return max(position, scroll_floor(viewport_height, content_height))


def scroll_ratio(scroll_position: float, viewport_height: float) -> float:
    """Scroll position as a fraction of viewport height, comparable across resolutions."""
    if viewport_height <= 0:
        return 0.0
    return scroll_position / viewport_height
