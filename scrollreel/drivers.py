"""Preview and export drivers.

Both drivers only decide *when* to sample; what a frame looks like at a given
time always comes from sample_frame, so a preview seek and an export frame at
the same time produce equal FrameState values.
"""

import logging
import time
from collections.abc import Callable, Iterator

from scrollreel.models import DurationModel, FrameState
from scrollreel.project import VideoProject, project_timeline
from scrollreel.timeline import (
    calculate_scroll_position,
    compute_scroll_state,
    compute_transition_opacity,
    scroll_ratio,
)

logger = logging.getLogger(__name__)


def sample_frame(
    timeline: DurationModel,
    current_time: float,
    viewport_height: float,
    content_height: float,
    ending_enabled: bool,
) -> FrameState:
    """Derived render state at current_time for the given geometry."""
    scroll = compute_scroll_state(current_time, timeline.content_duration, ending_enabled)
    opacity = compute_transition_opacity(current_time, timeline.content_duration, ending_enabled)
    position = calculate_scroll_position(scroll.progress, viewport_height, content_height)
    return FrameState(
        time=current_time,
        scroll=scroll,
        opacity=opacity,
        scroll_position=position,
        scroll_ratio=scroll_ratio(position, viewport_height),
    )


class PreviewDriver:
    """Clock-driven playback with seeking, for interactive preview.

    The clock is injectable; it must return monotonically increasing seconds.
    Reaching the end either wraps to the start (looping) or stops playback
    and holds the last frame; play() from the end restarts at 0.
    """

    def __init__(
        self,
        timeline: DurationModel,
        viewport_height: float,
        content_height: float,
        ending_enabled: bool,
        looping: bool = False,
        clock: Callable[[], float] = time.monotonic,
    ) -> None:
        self.timeline = timeline
        self.viewport_height = viewport_height
        self.content_height = content_height
        self.ending_enabled = ending_enabled
        self.looping = looping
        self._clock = clock
        self._offset = 0.0
        self._started_at: float | None = None

    @classmethod
    def for_project(
        cls,
        project: VideoProject,
        viewport_height: float,
        content_height: float,
        clock: Callable[[], float] = time.monotonic,
    ) -> "PreviewDriver":
        return cls(
            project_timeline(project),
            viewport_height,
            content_height,
            project.ending.enabled,
            looping=project.animation.is_looping,
            clock=clock,
        )

    @property
    def is_playing(self) -> bool:
        self._handle_end()
        return self._started_at is not None

    def _handle_end(self) -> None:
        if self._started_at is None:
            return
        now = self._clock()
        elapsed = self._offset + now - self._started_at
        total = self.timeline.total_duration
        if elapsed < total:
            return
        if self.looping and total > 0:
            self._offset = elapsed % total
            self._started_at = now
            logger.debug("Preview looped to %.3fs", self._offset)
        else:
            self._offset = total
            self._started_at = None
            logger.debug("Preview reached the end at %.3fs", total)

    def current_time(self) -> float:
        self._handle_end()
        elapsed = self._offset
        if self._started_at is not None:
            elapsed += self._clock() - self._started_at
        return min(max(elapsed, 0.0), self.timeline.total_duration)

    def play(self) -> None:
        if self.is_playing:
            return
        if self._offset >= self.timeline.total_duration:
            self._offset = 0.0
        self._started_at = self._clock()

    def pause(self) -> None:
        self._offset = self.current_time()
        self._started_at = None

    def seek(self, seconds: float) -> None:
        self._handle_end()
        self._offset = min(max(seconds, 0.0), self.timeline.total_duration)
        if self._started_at is not None:
            self._started_at = self._clock()
        logger.debug("Preview seek to %.3fs", self._offset)

    def sample(self) -> FrameState:
        return sample_frame(
            self.timeline,
            self.current_time(),
            self.viewport_height,
            self.content_height,
            self.ending_enabled,
        )


class ExportDriver:
    """Frame-stepped sampling for offline export.

    Frame i is sampled at i / fps (computed, not accumulated) and the final
    frame lands exactly on total_duration. cancel() takes effect at the next
    frame boundary.
    """

    def __init__(
        self,
        timeline: DurationModel,
        fps: int,
        viewport_height: float,
        content_height: float,
        ending_enabled: bool,
    ) -> None:
        if fps <= 0:
            raise ValueError(f"fps must be positive, got {fps}")
        self.timeline = timeline
        self.fps = fps
        self.viewport_height = viewport_height
        self.content_height = content_height
        self.ending_enabled = ending_enabled
        self._cancelled = False

    @property
    def frame_count(self) -> int:
        return len(self.frame_times())

    @property
    def cancelled(self) -> bool:
        return self._cancelled

    def cancel(self) -> None:
        self._cancelled = True

    def frame_times(self) -> list[float]:
        total = self.timeline.total_duration
        times: list[float] = []
        i = 0
        while i / self.fps < total:
            times.append(i / self.fps)
            i += 1
        times.append(total)
        return times

    def frames(self) -> Iterator[FrameState]:
        rendered = 0
        for t in self.frame_times():
            if self._cancelled:
                logger.info("Export cancelled after %d/%d frames", rendered, self.frame_count)
                return
            yield sample_frame(
                self.timeline, t, self.viewport_height, self.content_height, self.ending_enabled,
            )
            rendered += 1
        logger.info("Export sampled %d frames at %d fps", rendered, self.fps)
