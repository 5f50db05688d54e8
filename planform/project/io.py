from __future__ import annotations

import json
import math
from dataclasses import asdict
from pathlib import Path
from typing import Any, Dict, Tuple

from planform.presets.registry import kind_for_config
from planform.presets.types import (
    LShapedPresetConfig,
    PresetConfig,
    PresetConfigError,
    PresetKind,
    RectangularPresetConfig,
    ReferenceSide,
)


_DIMENSIONS = {
    PresetKind.RECTANGULAR: ("width", "length"),
    PresetKind.L_SHAPED: ("width1", "length1", "width2", "length2"),
}


def _number(d: Dict[str, Any], key: str) -> float:
    if key not in d:
        raise PresetConfigError(f"Missing required field: {key}")
    try:
        value = float(d[key])
    except (TypeError, ValueError):
        raise PresetConfigError(f"Field {key} must be a number, got {d[key]!r}") from None
    if isinstance(d[key], bool) or not math.isfinite(value):
        raise PresetConfigError(f"Field {key} must be a finite number, got {d[key]!r}")
    return value


def _optional_id(d: Dict[str, Any], key: str) -> str | None:
    v = d.get(key)
    return None if v in (None, "") else str(v)


def _rotation(d: Dict[str, Any]) -> int:
    raw = d.get("rotation", 0)
    if isinstance(raw, bool):
        raise PresetConfigError(f"Field rotation must be an integer, got {raw!r}")
    try:
        value = float(raw)
    except (TypeError, ValueError):
        raise PresetConfigError(f"Field rotation must be an integer, got {raw!r}") from None
    if not value.is_integer():
        raise PresetConfigError(f"Field rotation must be an integer, got {raw!r}")
    return int(value)


def preset_config_from_dict(d: Dict[str, Any]) -> Tuple[PresetKind, PresetConfig]:
    try:
        kind = PresetKind(str(d.get("kind", "")))
    except ValueError:
        raise PresetConfigError(f"Unsupported preset kind: {d.get('kind')!r}") from None
    try:
        reference_side = ReferenceSide(str(d.get("reference_side", ReferenceSide.INSIDE.value)))
    except ValueError:
        raise PresetConfigError(f"Unsupported reference_side: {d.get('reference_side')!r}") from None

    base = {
        "thickness": _number(d, "thickness"),
        "wall_assembly_id": str(d.get("wall_assembly_id", "")),
        "reference_side": reference_side,
        "base_ring_beam_assembly_id": _optional_id(d, "base_ring_beam_assembly_id"),
        "top_ring_beam_assembly_id": _optional_id(d, "top_ring_beam_assembly_id"),
    }
    dims = {key: _number(d, key) for key in _DIMENSIONS[kind]}
    if kind is PresetKind.RECTANGULAR:
        return kind, RectangularPresetConfig(**base, **dims)
    return kind, LShapedPresetConfig(**base, **dims, rotation=_rotation(d))


def preset_config_to_dict(config: PresetConfig) -> Dict[str, Any]:
    data = asdict(config)
    data["reference_side"] = config.reference_side.value
    return {"kind": kind_for_config(config).value, **data}


def save_preset_config(config: PresetConfig, path: Path) -> None:
    path = path.expanduser().resolve()
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(preset_config_to_dict(config), indent=2, sort_keys=True), encoding="utf-8")


def load_preset_config(path: Path) -> Tuple[PresetKind, PresetConfig]:
    path = path.expanduser().resolve()
    try:
        data = json.loads(path.read_text(encoding="utf-8"))
    except json.JSONDecodeError as exc:
        raise PresetConfigError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise PresetConfigError(f"Preset config must be a JSON object: {path}")
    return preset_config_from_dict(data)
