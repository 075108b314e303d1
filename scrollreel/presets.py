"""Fixed preset tables: reading rates, canvas sizes, export quality."""

from pydantic import BaseModel, ConfigDict


class WPMPresetInfo(BaseModel):
    model_config = ConfigDict(frozen=True)

    label: str
    wpm: int
    description: str


class CanvasSize(BaseModel):
    model_config = ConfigDict(frozen=True)

    width: int
    height: int
    label: str


class QualitySettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    bitrate: int
    fps: int


CUSTOM_PRESET = "custom"
DEFAULT_WPM = 150

WPM_PRESETS: dict[str, WPMPresetInfo] = {
    "beginner": WPMPresetInfo(label="Beginner", wpm=150, description="Easy to follow (120-180 WPM)"),
    "average": WPMPresetInfo(label="Average", wpm=225, description="Standard reading (200-250 WPM)"),
    "comfortable": WPMPresetInfo(label="Comfortable", wpm=275, description="Fluent reading (250-300 WPM)"),
    "fast": WPMPresetInfo(label="Fast", wpm=400, description="Quick scan (350-450 WPM)"),
    CUSTOM_PRESET: WPMPresetInfo(label="Custom", wpm=200, description="Set your own speed"),
}

CANVAS_SIZES: dict[str, CanvasSize] = {
    "vertical": CanvasSize(width=1080, height=1920, label="Reel 9:16"),
    "horizontal": CanvasSize(width=1920, height=1080, label="Desktop 16:9"),
    "square": CanvasSize(width=1080, height=1080, label="Square 1:1"),
    "tiktok": CanvasSize(width=1080, height=1920, label="TikTok"),
    "youtube-shorts": CanvasSize(width=1080, height=1920, label="YT Shorts"),
    "instagram-post": CanvasSize(width=1080, height=1350, label="IG Post 4:5"),
    "twitter": CanvasSize(width=1280, height=720, label="Twitter 16:9"),
    "facebook-cover": CanvasSize(width=820, height=312, label="FB Cover"),
}

QUALITY_SETTINGS: dict[str, QualitySettings] = {
    "standard": QualitySettings(bitrate=8_000_000, fps=30),
    "hd": QualitySettings(bitrate=12_000_000, fps=30),
    "ultra": QualitySettings(bitrate=20_000_000, fps=60),
}


def preset_wpm(preset: str) -> int:
    """Reading rate for a named preset, DEFAULT_WPM when unrecognized."""
    info = WPM_PRESETS.get(preset)
    if info is None or info.wpm <= 0:
        return DEFAULT_WPM
    return info.wpm
