"""JSON receipts describing a rewrite decision."""

from __future__ import annotations

import json
from dataclasses import asdict, is_dataclass
from pathlib import Path
from typing import Any, Mapping

from .contracts import RewriteOutcome


def _serialize(value: Any) -> Any:
    if value is None or isinstance(value, (str, int, float, bool)):
        return value
    if isinstance(value, Path):
        return str(value)
    if is_dataclass(value):
        return {k: _serialize(v) for k, v in asdict(value).items()}
    if isinstance(value, Mapping):
        return {str(k): _serialize(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_serialize(item) for item in value]
    return str(value)


def build_receipt(outcome: RewriteOutcome) -> dict[str, Any]:
    original = outcome.original
    result = outcome.request
    cleared = sorted(
        name
        for name in ("target_width", "target_height", "center_inside", "center_crop")
        if getattr(original, name) not in (None, False) and getattr(result, name) in (None, False)
    )
    return {
        "outcome": outcome.type,
        "original": _serialize(original),
        "result": _serialize(result),
        "cleared": cleared,
        "warnings": list(outcome.warnings),
    }


def write_receipt(path: Path, payload: Mapping[str, Any]) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    with path.open("w", encoding="utf-8") as handle:
        json.dump(payload, handle, indent=2)
        handle.write("\n")
