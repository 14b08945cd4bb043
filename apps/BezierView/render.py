from __future__ import annotations

import logging
import math
from pathlib import Path
from typing import Tuple

from matplotlib.axes import Axes
from matplotlib.backends.backend_agg import FigureCanvasAgg
from matplotlib.figure import Figure

from apps.BezierTool.io.schemas import DisplayConfig
from src.curve.models import BoundingBox, CurveResult

logger = logging.getLogger(__name__)

DEFAULT_DPI = 100


def canvas_size(bounds: BoundingBox, padding: int = 50, minimum: int = 100) -> Tuple[int, int]:
    width = math.ceil(bounds.width) + 2 * padding
    height = math.ceil(bounds.height) + 2 * padding
    return max(minimum, width), max(minimum, height)


def axes_extent(bounds: BoundingBox, padding: int = 50) -> Tuple[int, int, int, int]:
    left = math.floor(bounds.min_x - padding)
    right = math.ceil(bounds.max_x + padding)
    bottom = math.floor(bounds.min_y - padding)
    top = math.ceil(bounds.max_y + padding)
    return left, right, bottom, top


def _px_to_pt(axes: Axes, pixels: float) -> float:
    return pixels * 72.0 / axes.figure.dpi


def draw_curve(axes: Axes, result: CurveResult, display: DisplayConfig) -> None:
    bounds = result.bounds
    padding = display.padding
    width, height = canvas_size(bounds, padding, display.min_canvas)
    left, right, bottom, top = axes_extent(bounds, padding)

    axes.clear()
    axes.set_axis_off()
    # one world unit per pixel, origin at the padded top-left corner, Y up
    axes.set_xlim(bounds.min_x - padding, bounds.min_x - padding + width)
    axes.set_ylim(bounds.max_y + padding - height, bounds.max_y + padding)
    axes.set_aspect("equal", adjustable="box")

    axes.plot([left, right], [0.0, 0.0], color=display.axis_color, linewidth=_px_to_pt(axes, 1.0), zorder=1)
    axes.plot([0.0, 0.0], [bottom, top], color=display.axis_color, linewidth=_px_to_pt(axes, 1.0), zorder=1)

    ctrl = result.control_points
    axes.plot(
        ctrl[:, 0],
        ctrl[:, 1],
        color=display.control_line_color,
        linestyle=(0, (5, 5)),
        linewidth=_px_to_pt(axes, 1.0),
        zorder=2,
    )
    axes.plot(
        ctrl[:, 0],
        ctrl[:, 1],
        linestyle="none",
        marker="o",
        markersize=_px_to_pt(axes, display.point_size),
        color=display.control_point_color,
        zorder=3,
    )

    path = result.path
    axes.plot(
        path[:, 0],
        path[:, 1],
        color=display.curve_color,
        linewidth=_px_to_pt(axes, display.curve_width),
        solid_capstyle="round",
        solid_joinstyle="round",
        zorder=4,
    )


def build_figure(result: CurveResult, display: DisplayConfig, dpi: int = DEFAULT_DPI) -> Figure:
    width, height = canvas_size(result.bounds, display.padding, display.min_canvas)
    figure = Figure(figsize=(width / dpi, height / dpi), dpi=dpi)
    axes = figure.add_axes([0.0, 0.0, 1.0, 1.0])
    draw_curve(axes, result, display)
    return figure


def save_figure(
    result: CurveResult,
    path: str | Path,
    display: DisplayConfig | None = None,
    dpi: int = DEFAULT_DPI,
) -> Path:
    display = display or DisplayConfig.from_dict(None)
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    figure = build_figure(result, display, dpi=dpi)
    FigureCanvasAgg(figure)
    figure.savefig(path, dpi=dpi)
    logger.info("Saved curve image to %s", path)
    return path
