"""Shared test fixtures for scrollreel tests."""

import pytest

from scrollreel.project import (
    AnimationSettings,
    AudioSettings,
    EndingSettings,
    TextSettings,
    VideoProject,
)


def words(n: int) -> str:
    return " ".join(f"word{i}" for i in range(n))


@pytest.fixture()
def project():
    """A 60-word project at the beginner preset, no audio, no ending."""
    return VideoProject(
        name="Test Reel",
        text=TextSettings(content=words(60)),
        animation=AnimationSettings(wpm_preset="beginner", target_wpm=150, duration=24),
    )


@pytest.fixture()
def ready_project(project):
    """Project with audio and a configured ending card."""
    return project.model_copy(update={
        "audio": AudioSettings(file="data:audio/mp3;base64,AAAA", file_name="track.mp3"),
        "ending": EndingSettings(enabled=True, duration=3, cta_text="Follow for more!"),
    })


@pytest.fixture()
def project_file(tmp_path):
    """Write a YAML project file and return its path."""
    def _write(body: str, name: str = "project.yaml"):
        path = tmp_path / name
        path.write_text(body)
        return path
    return _write
