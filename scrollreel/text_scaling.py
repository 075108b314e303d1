"""Typography auto-scaling for long-form content.

Longer texts get smaller type, tighter spacing and less padding so more of
the scroll fits on screen. Short texts (< 100 words) are left alone.
"""

from pydantic import BaseModel, ConfigDict

from scrollreel.timeline import round_half_up

SHORT_WORDS = 100
MEDIUM_WORDS = 300
LONG_WORDS = 600


class ScaledTextSettings(BaseModel):
    model_config = ConfigDict(frozen=True)

    font_size: int
    line_height: float
    letter_spacing: float
    padding_x: float
    padding_y: float


class ContentLengthCategory(BaseModel):
    model_config = ConfigDict(frozen=True)

    category: str
    label: str
    description: str


def optimal_font_size(base_font_size: int, word_count: int, auto_scale: bool) -> int:
    if not auto_scale or word_count < SHORT_WORDS:
        return base_font_size
    if word_count < MEDIUM_WORDS:
        # 100% down to 80%
        scale = 1 - ((word_count - SHORT_WORDS) / 200) * 0.2
    elif word_count < LONG_WORDS:
        # 80% down to 60%
        scale = 0.8 - ((word_count - MEDIUM_WORDS) / 300) * 0.2
    else:
        scale = 0.6
    return round_half_up(base_font_size * scale)


def optimal_line_height(base_line_height: float, word_count: int, auto_scale: bool) -> float:
    if not auto_scale or word_count < SHORT_WORDS:
        return base_line_height
    if word_count < MEDIUM_WORDS:
        return max(1.4, base_line_height - 0.1)
    return max(1.3, base_line_height - 0.2)


def optimal_letter_spacing(base_letter_spacing: float, word_count: int, auto_scale: bool) -> float:
    if not auto_scale or word_count < SHORT_WORDS:
        return base_letter_spacing
    if word_count < MEDIUM_WORDS:
        return max(-1, base_letter_spacing - 0.5)
    return max(-1.5, base_letter_spacing - 1)


def optimal_padding(base_padding: float, word_count: int, auto_scale: bool) -> float:
    if not auto_scale or word_count < SHORT_WORDS:
        return base_padding
    if word_count < MEDIUM_WORDS:
        return max(20, base_padding - 10)
    return max(15, base_padding - 20)


def scaled_text_settings(
    font_size: int,
    line_height: float,
    letter_spacing: float,
    padding_x: float,
    padding_y: float,
    word_count: int,
    auto_scale: bool,
) -> ScaledTextSettings:
    return ScaledTextSettings(
        font_size=optimal_font_size(font_size, word_count, auto_scale),
        line_height=optimal_line_height(line_height, word_count, auto_scale),
        letter_spacing=optimal_letter_spacing(letter_spacing, word_count, auto_scale),
        padding_x=optimal_padding(padding_x, word_count, auto_scale),
        padding_y=optimal_padding(padding_y, word_count, auto_scale),
    )


def content_length_category(word_count: int) -> ContentLengthCategory:
    if word_count < SHORT_WORDS:
        return ContentLengthCategory(category="short", label="Short", description="Perfect for quick messages")
    if word_count < MEDIUM_WORDS:
        return ContentLengthCategory(category="medium", label="Medium", description="Good for stories and tips")
    if word_count < LONG_WORDS:
        return ContentLengthCategory(category="long", label="Long", description="Full stories and articles")
    return ContentLengthCategory(category="very-long", label="Very Long", description="Extended content")
