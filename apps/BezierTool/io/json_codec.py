from __future__ import annotations

import json
import logging
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Dict, Iterable, List

import numpy as np

logger = logging.getLogger(__name__)

INCLUDE_KEY = "__include__"


def load_json(path: str | Path) -> Dict[str, Any]:
    """Read a JSON object, resolving ``__include__`` files first.

    Included files are merged in the listed order and the including file is
    laid over them, so local keys win.
    """
    return _load_with_includes(Path(path), chain=[])


def _load_with_includes(path: Path, chain: List[Path]) -> Dict[str, Any]:
    path = path.resolve()
    if path in chain:
        cycle = " -> ".join(str(item) for item in [*chain, path])
        raise ValueError(f"Circular {INCLUDE_KEY} detected: {cycle}")

    with open(path, "r", encoding="utf-8") as handle:
        payload = json.load(handle)
    if not isinstance(payload, dict):
        raise ValueError(f"{path} must contain a JSON object, got {type(payload).__name__}")

    includes = payload.pop(INCLUDE_KEY, [])
    if isinstance(includes, str):
        includes = [includes]

    merged: Dict[str, Any] = {}
    for include_path in _resolve_includes(path, includes):
        logger.debug("Including %s from %s", include_path, path)
        merged = merge_dicts(merged, _load_with_includes(include_path, [*chain, path]))
    return merge_dicts(merged, payload)


def _resolve_includes(base_path: Path, includes: Iterable[str]) -> List[Path]:
    resolved = []
    for include in includes:
        include_path = Path(include)
        if not include_path.is_absolute():
            include_path = base_path.parent / include_path
        resolved.append(include_path.resolve())
    return resolved


def save_json(path: str | Path, payload: Dict[str, Any]) -> None:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    with open(path, "w", encoding="utf-8") as handle:
        json.dump(to_jsonable(payload), handle, indent=2, sort_keys=True)
        handle.write("\n")
    logger.debug("Wrote %s", path)


def to_jsonable(obj: Any) -> Any:
    if isinstance(obj, np.ndarray):
        return obj.tolist()
    if isinstance(obj, np.generic):
        return obj.item()
    if is_dataclass(obj) and not isinstance(obj, type):
        return to_jsonable(asdict(obj))
    if isinstance(obj, dict):
        return {str(key): to_jsonable(value) for key, value in obj.items()}
    if isinstance(obj, (list, tuple)):
        return [to_jsonable(value) for value in obj]
    return obj


def merge_dicts(base: Dict[str, Any], overlay: Dict[str, Any]) -> Dict[str, Any]:
    merged = dict(base)
    for key, value in overlay.items():
        if isinstance(merged.get(key), dict) and isinstance(value, dict):
            merged[key] = merge_dicts(merged[key], value)
        else:
            merged[key] = value
    return merged
