from __future__ import annotations

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict

from apps.BezierTool.io.json_codec import load_json, save_json, to_jsonable
from apps.BezierTool.io.schemas import APP_NAME, DisplayConfig, timestamp_utc
from apps.BezierView.render import canvas_size
from src.curve.config import CurveConfig
from src.curve.models import CurveResult
from src.curve.sampler import compute_curve_from_config

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class CurveCase:
    case_id: str
    config: CurveConfig
    display: DisplayConfig


def load_case(source: str | Path | Dict[str, Any] | None) -> CurveCase:
    if source is None:
        payload: Dict[str, Any] = {}
    elif isinstance(source, dict):
        payload = source
    else:
        payload = load_json(source)

    meta = payload.get("meta", {})
    return CurveCase(
        case_id=str(meta.get("case_id", "")),
        config=CurveConfig.from_dict(payload.get("curve")),
        display=DisplayConfig.from_dict(payload.get("display")),
    )


def _build_output(case: CurveCase, result: CurveResult) -> Dict[str, Any]:
    width, height = canvas_size(result.bounds, case.display.padding, case.display.min_canvas)
    return {
        "meta": {
            "app": APP_NAME,
            "case_id": case.case_id,
            "stage": "curve",
            "timestamp": timestamp_utc(),
        },
        "config": case.config.to_dict(),
        "degree": result.degree,
        "binomial_row": list(result.binomial_row),
        "n_samples": result.n_samples,
        "path": result.path,
        "bounds": result.bounds.to_dict(),
        "canvas": {"width": width, "height": height, "padding": case.display.padding},
    }


def run_curve(
    source: str | Path | Dict[str, Any] | None,
    output_path: str | Path | None = None,
) -> Dict[str, Any]:
    case = load_case(source)
    result = compute_curve_from_config(case.config)
    logger.info(
        "Computed degree-%d curve with %d samples (case '%s')",
        result.degree,
        result.n_samples,
        case.case_id,
    )
    output = to_jsonable(_build_output(case, result))
    if output_path is not None:
        save_json(output_path, output)
    return output


if __name__ == "__main__":
    import argparse

    parser = argparse.ArgumentParser(description="Sample a Bézier curve from a JSON case")
    parser.add_argument("--in", dest="input_path", required=True)
    parser.add_argument("--out", dest="output_path", required=True)
    args = parser.parse_args()

    run_curve(args.input_path, args.output_path)
