from __future__ import annotations

from copy import deepcopy
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Tuple

from apps.BezierTool.io.json_codec import merge_dicts

APP_NAME = "BezierView"

DISPLAY_DEFAULTS: Dict[str, Any] = {
    "padding": 50,
    "min_canvas": 100,
    "point_size": 8,
    "curve_width": 2.0,
    "curve_color": "#0066cc",
    "control_point_color": "red",
    "control_line_color": "#c8c8c8",
    "axis_color": "lightgray",
    "window_size": [800, 600],
    "title": "Bézier Curve",
}


def _convert(merged: Dict[str, Any], key: str, kind: type) -> Any:
    try:
        return kind(merged[key])
    except (TypeError, ValueError) as exc:
        raise ValueError(f"display.{key} must be a {kind.__name__}, got {merged[key]!r}.") from exc


@dataclass(frozen=True)
class DisplayConfig:
    padding: int
    min_canvas: int
    point_size: int
    curve_width: float
    curve_color: str
    control_point_color: str
    control_line_color: str
    axis_color: str
    window_size: Tuple[int, int]
    title: str

    @classmethod
    def from_dict(cls, data: Dict[str, Any] | None) -> "DisplayConfig":
        merged = merge_dicts(deepcopy(DISPLAY_DEFAULTS), data or {})
        padding = _convert(merged, "padding", int)
        if padding < 0:
            raise ValueError("display.padding must not be negative.")
        try:
            width, height = (int(value) for value in merged["window_size"])
        except (TypeError, ValueError) as exc:
            raise ValueError(
                f"display.window_size must be a [width, height] pair, got {merged['window_size']!r}."
            ) from exc
        return cls(
            padding=padding,
            min_canvas=_convert(merged, "min_canvas", int),
            point_size=_convert(merged, "point_size", int),
            curve_width=_convert(merged, "curve_width", float),
            curve_color=str(merged["curve_color"]),
            control_point_color=str(merged["control_point_color"]),
            control_line_color=str(merged["control_line_color"]),
            axis_color=str(merged["axis_color"]),
            window_size=(width, height),
            title=str(merged["title"]),
        )


def timestamp_utc() -> str:
    return datetime.now(timezone.utc).isoformat()
