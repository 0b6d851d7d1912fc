"""Text measurement and Pillow rendering for computed axes."""

from chart_axes.rendering.axis_renderer import AxisRenderer
from chart_axes.rendering.measure import TextMeasurer, get_font, label_box, measure_ticks, wrap_text

__all__ = [
    "AxisRenderer",
    "TextMeasurer",
    "get_font",
    "label_box",
    "measure_ticks",
    "wrap_text",
]
