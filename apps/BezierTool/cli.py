from __future__ import annotations

import argparse
import logging
from pathlib import Path
from typing import Optional, Sequence

from apps.BezierTool.io.json_codec import load_json, merge_dicts
from apps.BezierTool.pipeline.run_curve import load_case, run_curve
from src.Utility.logger import log_exception, setup_logging

logger = logging.getLogger(__name__)


def _default_paths() -> dict[str, Path]:
    examples = Path(__file__).resolve().parent / "io" / "examples"
    return {
        "curve_in": examples / "curve_input.example.json",
        "curve_out": examples / "curve_output.example.json",
    }


def _load_payload(input_path: Optional[str], step: Optional[float]) -> dict:
    payload = load_json(input_path or _default_paths()["curve_in"])
    if step is not None:
        payload = merge_dicts(payload, {"curve": {"step_size": step}})
    return payload


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Bézier curve sampler and viewer")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
    parser.add_argument("--log-file", dest="log_file")
    subparsers = parser.add_subparsers(dest="command", required=True)

    sample_parser = subparsers.add_parser("sample", help="Sample the curve and write JSON")
    sample_parser.add_argument("--in", dest="input_path")
    sample_parser.add_argument("--out", dest="output_path")
    sample_parser.add_argument("--step", dest="step", type=float)

    plot_parser = subparsers.add_parser("plot", help="Render the curve to an image file")
    plot_parser.add_argument("--in", dest="input_path")
    plot_parser.add_argument("--png", dest="png_path", required=True)
    plot_parser.add_argument("--step", dest="step", type=float)

    show_parser = subparsers.add_parser("show", help="Open the curve in the desktop viewer")
    show_parser.add_argument("--in", dest="input_path")
    show_parser.add_argument("--step", dest="step", type=float)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    setup_logging(logging.DEBUG if args.verbose else logging.INFO, args.log_file)

    try:
        payload = _load_payload(args.input_path, args.step)

        if args.command == "sample":
            output_path = Path(args.output_path or _default_paths()["curve_out"])
            output = run_curve(payload, output_path)
            logger.info("Wrote %d samples to %s", output["n_samples"], output_path)
            return 0

        case = load_case(payload)

        if args.command == "plot":
            from apps.BezierView.render import save_figure
            from src.curve.sampler import compute_curve_from_config

            save_figure(compute_curve_from_config(case.config), args.png_path, case.display)
            return 0

        from apps.BezierView.main import main as show_main

        return show_main(case)
    except (OSError, ValueError):
        log_exception(logger, message=f"'{args.command}' failed")
        return 1


if __name__ == "__main__":
    raise SystemExit(main())
