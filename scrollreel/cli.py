"""CLI entry point for scrollreel."""

import argparse
import logging
import sys
from pathlib import Path

import yaml
from pydantic import ValidationError

from scrollreel.config import load_config
from scrollreel.drivers import ExportDriver
from scrollreel.models import CheckStatus
from scrollreel.presets import CANVAS_SIZES, QUALITY_SETTINGS
from scrollreel.project import load_project, project_timeline
from scrollreel.text_scaling import content_length_category, scaled_text_settings
from scrollreel.timeline import wpm_level
from scrollreel.validation import check_export_readiness

logger = logging.getLogger(__name__)

STATUS_MARKS = {
    CheckStatus.PASS: "ok",
    CheckStatus.WARNING: "!!",
    CheckStatus.ERROR: "XX",
}


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Scrolling-text video timeline engine")
    parser.add_argument("-v", "--verbose", action="store_true", help="Debug logging")
    parser.add_argument("--config", type=Path, default=None, help="Path to config.yaml")
    sub = parser.add_subparsers(dest="command")

    # timeline command
    timeline_parser = sub.add_parser("timeline", help="Show the duration model for a project")
    timeline_parser.add_argument("project", type=Path, help="Project file (YAML or JSON)")

    # check command
    check_parser = sub.add_parser("check", help="Show the export readiness checklist")
    check_parser.add_argument("project", type=Path, help="Project file (YAML or JSON)")

    # frames command
    frames_parser = sub.add_parser("frames", help="Print export frame states")
    frames_parser.add_argument("project", type=Path, help="Project file (YAML or JSON)")
    frames_parser.add_argument(
        "--quality", choices=sorted(QUALITY_SETTINGS), default=None,
        help="Export quality preset (sets fps)",
    )
    frames_parser.add_argument("--height", type=float, default=None, help="Viewport height in px")
    frames_parser.add_argument("--content-height", type=float, default=None, help="Content height in px")
    frames_parser.add_argument("--limit", type=int, default=None, help="Print at most N frames")

    args = parser.parse_args(argv)
    config = load_config(args.config)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else getattr(logging, config.log_level.upper(), logging.INFO),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    if args.command is None:
        parser.print_help()
        return 0

    try:
        project = load_project(args.project)
    except (OSError, ValidationError, ValueError, yaml.YAMLError) as e:
        logger.error("Could not load project %s: %s", args.project, e)
        return 2

    timeline = project_timeline(project)

    if args.command == "timeline":
        print(f"Project: {project.name}")
        print(f"  words:    {timeline.word_count}")
        print(f"  rate:     {timeline.target_wpm} WPM ({wpm_level(timeline.target_wpm).value})")
        print(f"  content:  {timeline.content_duration:g}s")
        print(f"  ending:   {timeline.ending_duration:g}s")
        print(f"  total:    {timeline.total_duration:g}s")
        length = content_length_category(timeline.word_count)
        text = project.text
        scaled = scaled_text_settings(
            text.font_size, text.line_height, text.letter_spacing,
            text.padding_x, text.padding_y, timeline.word_count, text.auto_scale_font,
        )
        print(f"  length:   {length.label} ({length.description})")
        print(f"  font:     {scaled.font_size}px, line height {scaled.line_height:g}")
        if timeline.pacing_error:
            print(f"  pacing:   {timeline.pacing_error}")
        return 0

    if args.command == "check":
        result = check_export_readiness(project)
        for check in result.checks:
            print(f"  [{STATUS_MARKS[check.status]}] {check.label}: {check.message}")
        print(f"\n{'Ready to export' if result.is_ready else 'Not ready to export'}")
        return 0 if result.is_ready else 1

    if args.command == "frames":
        quality = QUALITY_SETTINGS[args.quality or config.export.quality]
        canvas = CANVAS_SIZES.get(project.canvas_format, CANVAS_SIZES["vertical"])
        viewport_height = args.height or config.preview.viewport_height or canvas.height
        content_height = (
            args.content_height if args.content_height is not None else config.preview.content_height
        )
        limit = args.limit if args.limit is not None else config.export.frame_limit

        driver = ExportDriver(
            timeline, quality.fps, viewport_height, content_height, project.ending.enabled,
        )
        logger.debug(
            "Sampling %d frames at %d fps, viewport %gpx, content %gpx",
            driver.frame_count, quality.fps, viewport_height, content_height,
        )
        for i, frame in enumerate(driver.frames()):
            if limit and i >= limit:
                driver.cancel()
                continue
            print(
                f"{frame.time:8.3f}s  progress={frame.scroll.progress:.4f}  "
                f"offset={frame.scroll.scroll_offset_percent:+8.2f}%  "
                f"y={frame.scroll_position:9.2f}px  "
                f"content={frame.opacity.content_opacity:.3f}  "
                f"ending={frame.opacity.ending_opacity:.3f}"
            )
        return 0

    parser.print_help()
    return 0


if __name__ == "__main__":
    sys.exit(main())
