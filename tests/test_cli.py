"""Tests for the CLI commands."""

import pytest

from scrollreel.cli import main


@pytest.fixture()
def cli(tmp_path):
    """Run the CLI with an isolated (missing) config file."""
    def _run(*args: str) -> int:
        return main(["--config", str(tmp_path / "none.yaml"), *args])
    return _run


PROJECT = (
    "name: Demo\n"
    "text:\n  content: one two three four five six\n"
    "animation:\n  wpm_preset: custom\n  duration: 4\n"
    "ending:\n  enabled: true\n  duration: 1\n"
)


class TestCLI:
    def test_timeline(self, cli, project_file, capsys):
        assert cli("timeline", str(project_file(PROJECT))) == 0
        out = capsys.readouterr().out
        assert "words:    6" in out
        assert "90 WPM" in out
        assert "total:    5s" in out
        assert "length:   Short" in out
        assert "font:     48px" in out

    def test_timeline_shows_scaled_font(self, cli, project_file, capsys):
        body = "text:\n  content: " + " ".join(["w"] * 200) + "\n  font_size: 50\n"
        assert cli("timeline", str(project_file(body))) == 0
        out = capsys.readouterr().out
        assert "length:   Medium" in out
        # 200 words scales the font to 90%
        assert "font:     45px, line height 1.5" in out

    def test_check_ready(self, cli, project_file, capsys):
        assert cli("check", str(project_file(PROJECT))) == 0
        out = capsys.readouterr().out
        assert "Ready to export" in out
        assert "[!!] Background audio" in out

    def test_check_not_ready(self, cli, project_file, capsys):
        path = project_file("animation:\n  wpm_preset: custom\n  duration: null\n")
        assert cli("check", str(path)) == 1
        assert "Not ready to export" in capsys.readouterr().out

    def test_frames_with_limit(self, cli, project_file, capsys):
        assert cli("frames", str(project_file(PROJECT)), "--limit", "3", "--content-height", "500") == 0
        lines = capsys.readouterr().out.strip().splitlines()
        assert len(lines) == 3
        assert lines[0].strip().startswith("0.000s")

    def test_frames_all(self, cli, project_file, capsys):
        assert cli("frames", str(project_file(PROJECT)), "--quality", "standard") == 0
        lines = capsys.readouterr().out.strip().splitlines()
        # 5s at 30fps plus the final frame
        assert len(lines) == 151
        assert "ending=1.000" in lines[-1]

    def test_bad_project(self, cli, project_file):
        assert cli("timeline", str(project_file("ending:\n  duration: soon\n"))) == 2

    def test_no_command(self, cli, capsys):
        assert cli() == 0
        assert "usage" in capsys.readouterr().out
