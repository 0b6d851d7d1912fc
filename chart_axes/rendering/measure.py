"""Text measurement and label placement for tick labels."""

from functools import lru_cache
from typing import Callable

from PIL import Image, ImageDraw, ImageFont

from chart_axes.core.config import DEFAULTS
from chart_axes.core.models import BoundingBox, Tick

FONT_PATHS = (
    "/usr/share/fonts/truetype/dejavu/DejaVuSans.ttf",
    "/usr/share/fonts/TTF/DejaVuSans.ttf",
)


@lru_cache(maxsize=8)
def get_font(size: int = DEFAULTS.FONT_SIZE):
    """Get a font, falling back to default if system fonts not available."""
    for path in FONT_PATHS:
        try:
            return ImageFont.truetype(path, size)
        except OSError:
            continue
    return ImageFont.load_default()


class TextMeasurer:
    """Measures rendered label widths with a Pillow font.

    Multi-line text measures as its widest line.

    Example:
        measure = TextMeasurer(font_size=12)
        measure("Jan\\n2020")  # width of the wider of "Jan" and "2020"
    """

    def __init__(self, font_size: int = DEFAULTS.FONT_SIZE, font=None):
        self.font = font or get_font(font_size)
        self._draw = ImageDraw.Draw(Image.new("RGBA", (1, 1)))

    def line_width(self, line: str) -> float:
        if not line:
            return 0.0
        bbox = self._draw.textbbox((0, 0), line, font=self.font)
        return float(bbox[2] - bbox[0])

    def __call__(self, text: str) -> float:
        return max((self.line_width(line) for line in str(text).split("\n")), default=0.0)


def label_box(position: float, width: float, anchor: str = "start", offset: float = 0.0) -> BoundingBox:
    """Horizontal extent of a label drawn at ``position``.

    Args:
        position: Tick position in pixels
        width: Measured label width
        anchor: ``start``, ``middle`` or ``end`` text anchor
        offset: Horizontal text offset from the tick (the axis ``text_x``)
    """
    left = position + offset
    if anchor == "middle":
        left -= width / 2
    elif anchor == "end":
        left -= width
    return BoundingBox(left=left, right=left + width)


def measure_ticks(
    ticks: list[Tick],
    measure: Callable[[str], float],
    anchor: str = "start",
    offset: float = 0.0,
) -> list[Tick]:
    """Attach a bounding box to every tick from its rendered text lines."""
    for tick in ticks:
        lines = tick.lines
        if not lines:
            tick.bbox = None
            continue
        width = max(measure(line) for line in lines)
        tick.bbox = label_box(tick.position, width, anchor, offset)
    return ticks


def wrap_text(text: str, width: float, measure: Callable[[str], float]) -> str:
    """Word-wrap ``text`` so each line fits ``width`` pixels where possible.

    A single word wider than ``width`` stays on its own line.

    Returns:
        Wrapped text with lines joined by newlines
    """
    words = str(text).split()
    if not words:
        return ""
    lines = [words[0]]
    for word in words[1:]:
        candidate = f"{lines[-1]} {word}"
        if measure(candidate) > width:
            lines.append(word)
        else:
            lines[-1] = candidate
    return "\n".join(lines)
