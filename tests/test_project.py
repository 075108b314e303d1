"""Tests for the immutable project value and its update functions."""

import json

import pytest
from pydantic import ValidationError

from scrollreel.project import (
    VideoProject,
    load_project,
    project_timeline,
    set_canvas_format,
    update_animation,
    update_ending,
    update_text,
)


class TestUpdates:
    def test_returns_new_value(self, project):
        updated = update_ending(project, enabled=True)
        assert updated is not project
        assert project.ending.enabled is False
        assert updated.ending.enabled is True

    def test_frozen(self, project):
        with pytest.raises(ValidationError):
            project.name = "changed"

    def test_text_change_recomputes_duration(self, project):
        updated = update_text(project, content=" ".join(["w"] * 300))
        # 300 words at 150 WPM
        assert updated.animation.duration == 120

    def test_text_change_keeps_custom_duration(self, project):
        custom = update_animation(project, wpm_preset="custom", duration=42)
        updated = update_text(custom, content="short now")
        assert updated.animation.duration == 42

    def test_style_change_keeps_duration(self, project):
        updated = update_text(project, font_size=30)
        assert updated.animation.duration == project.animation.duration

    def test_preset_switch_adopts_rate(self, project):
        updated = update_animation(project, wpm_preset="fast")
        assert updated.animation.target_wpm == 400
        # 60 words at 400 WPM = 9s
        assert updated.animation.duration == 9

    def test_target_wpm_recomputes_duration(self, project):
        updated = update_animation(project, target_wpm=120)
        assert updated.animation.duration == 30

    def test_invalid_update_rejected(self, project):
        with pytest.raises(ValidationError):
            update_ending(project, duration="soon")

    def test_negative_ending_duration_rejected(self, project):
        with pytest.raises(ValidationError):
            update_ending(project, duration=-2)

    def test_set_canvas_format(self, project):
        assert set_canvas_format(project, "square").canvas_format == "square"


class TestProjectTimeline:
    def test_auto_mode_ignores_stored_duration(self, project):
        model = project_timeline(project.model_copy(update={"name": "x"}))
        # 60 words at 150 WPM = 24s
        assert model.content_duration == 24
        assert model.pacing_error is None

    def test_custom_mode_uses_stored_duration(self, project):
        model = project_timeline(update_animation(project, wpm_preset="custom", duration=12))
        assert model.content_duration == 12
        assert model.target_wpm == 300

    def test_ending_included(self, ready_project):
        model = project_timeline(ready_project)
        assert model.total_duration == model.content_duration + 3


class TestLoadProject:
    def test_yaml(self, project_file):
        path = project_file(
            "name: Demo\n"
            "text:\n  content: one two three\n"
            "animation:\n  wpm_preset: custom\n  duration: 6\n"
            "ending:\n  enabled: true\n  duration: 2\n"
        )
        project = load_project(path)
        assert project.name == "Demo"
        assert project_timeline(project).total_duration == 8

    def test_json(self, project_file):
        path = project_file(json.dumps({"name": "J", "canvas_format": "square"}), name="p.json")
        assert load_project(path).canvas_format == "square"

    def test_empty_file_gives_defaults(self, project_file):
        assert load_project(project_file("")) == VideoProject()

    def test_invalid_raises(self, project_file):
        with pytest.raises(ValidationError):
            load_project(project_file("ending:\n  duration: soon\n"))

    def test_missing_file(self, tmp_path):
        with pytest.raises(OSError):
            load_project(tmp_path / "nope.yaml")
