"""Axis rendering onto Pillow images.

Draws computed axis layouts: only visible ticks are drawn, secondary label
lines go one line height below the main label, and value axis grid lines
start after the widest label.
"""

from typing import Optional

from PIL import Image, ImageDraw

from chart_axes.core.config import DEFAULTS, AxisSpec
from chart_axes.core.models import AxisLayout
from chart_axes.formatting.time_labels import secondary_dy
from chart_axes.rendering.measure import get_font


class AxisRenderer:
    """Renders x and y axes with ticks and labels on chart images."""

    def __init__(
        self,
        plot_width: int,
        plot_height: int,
        margin_left: int = 0,
        margin_top: int = 0,
        font_size: int = DEFAULTS.FONT_SIZE,
    ):
        """Initialize axis renderer.

        Args:
            plot_width: Width of the plot area
            plot_height: Height of the plot area
            margin_left: Left margin
            margin_top: Top margin
            font_size: Label font size in pixels
        """
        self.plot_width = plot_width
        self.plot_height = plot_height
        self.margin_left = margin_left
        self.margin_top = margin_top
        self.font_size = font_size

    def new_canvas(self, margin_bottom: int = 60, margin_right: int = 20) -> Image.Image:
        """Blank canvas sized for the plot area plus margins."""
        size = (
            self.margin_left + self.plot_width + margin_right,
            self.margin_top + self.plot_height + margin_bottom,
        )
        return Image.new("RGBA", size, DEFAULTS.BACKGROUND_COLOR)

    def draw(
        self,
        canvas: Image.Image,
        x_layout: Optional[AxisLayout] = None,
        x_spec: Optional[AxisSpec] = None,
        y_layout: Optional[AxisLayout] = None,
        y_spec: Optional[AxisSpec] = None,
    ) -> Image.Image:
        """Draw axes on the canvas.

        Args:
            canvas: PIL Image to draw on (with margins)
            x_layout: Computed horizontal axis, if any
            x_spec: Settings the horizontal axis was computed with
            y_layout: Computed value axis, if any
            y_spec: Settings the value axis was computed with

        Returns:
            Canvas with axes drawn
        """
        draw = ImageDraw.Draw(canvas)
        font = get_font(self.font_size)

        if y_layout is not None:
            self._draw_y_axis(draw, font, y_layout, y_spec or AxisSpec(orient="right", scale_kind="numeric"))
        if x_layout is not None:
            self._draw_x_axis(draw, font, x_layout, x_spec or AxisSpec())
        return canvas

    def _draw_x_axis(self, draw, font, layout: AxisLayout, spec: AxisSpec):
        """Draw the bottom axis: tick lines, labels, and secondary lines."""
        plot_left = self.margin_left
        plot_bottom = self.margin_top + self.plot_height
        em = self.font_size

        draw.line(
            [(plot_left, plot_bottom), (plot_left + self.plot_width, plot_bottom)],
            fill=DEFAULTS.AXIS_COLOR,
            width=1,
        )

        tick_xs = layout.gridlines if layout.gridlines is not None else [
            t.position for t in layout.visible_ticks
        ]
        for x in tick_xs:
            x = plot_left + x
            draw.line([(x, plot_bottom), (x, plot_bottom + spec.tick_height)], fill=DEFAULTS.TICK_COLOR, width=1)

        text_top = plot_bottom + spec.text_y + spec.dy * em
        for tick in layout.visible_ticks:
            if tick.bbox is None:
                continue
            x = plot_left + tick.bbox.left
            for row, line in enumerate(tick.label.split("\n")):
                draw.text((x, text_top + row * em), line, fill=DEFAULTS.LABEL_COLOR, font=font)
            if tick.secondary_label:
                draw.text(
                    (x, plot_bottom + spec.text_y + secondary_dy(spec) * em),
                    tick.secondary_label,
                    fill=DEFAULTS.LABEL_COLOR,
                    font=font,
                )

    def _draw_y_axis(self, draw, font, layout: AxisLayout, spec: AxisSpec):
        """Draw the value axis: grid lines after the widest label, labels on the left."""
        plot_left = self.margin_left
        plot_top = self.margin_top
        grid_start = plot_left + layout.label_width + spec.padding_right
        grid_end = plot_left + self.plot_width

        for tick in layout.visible_ticks:
            y = plot_top + tick.position
            draw.line(
                [(grid_start, y), (grid_end, y)],
                fill=DEFAULTS.AXIS_COLOR if tick.is_major else DEFAULTS.TICK_COLOR,
                width=2 if tick.is_major else 1,
            )
            bbox = draw.textbbox((0, 0), tick.label, font=font)
            label_width = bbox[2] - bbox[0]
            label_height = bbox[3] - bbox[1]
            draw.text(
                (plot_left + layout.label_width - label_width + spec.text_x, y + spec.dy * self.font_size - label_height // 2),
                tick.label,
                fill=DEFAULTS.LABEL_COLOR,
                font=font,
            )
