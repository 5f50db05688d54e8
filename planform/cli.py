from __future__ import annotations

import argparse
import json
import logging
from pathlib import Path
from typing import Any, Dict, Tuple

from planform.model.perimeter_ops import add_storey
from planform.presets.defaults import default_config
from planform.presets.reference import derive_reference_polygons
from planform.presets.registry import (
    available_presets,
    get_bounds,
    get_polygon_points,
    get_side_lengths,
    preset_definition,
    validate_config,
)
from planform.presets.types import PresetConfig, PresetConfigError, PresetConstructionError, PresetKind
from planform.project.io import load_preset_config, preset_config_to_dict
from planform.tools.placement import AnchorMode
from planform.tools.preset_tool import PerimeterPresetTool
from planform.tools.session import EditorSession


def _load(config_path: str) -> Tuple[PresetKind, PresetConfig] | None:
    path = Path(config_path).expanduser().resolve()
    if not path.is_file():
        print(f"[ERROR] File not found: {path}")
        return None
    try:
        return load_preset_config(path)
    except PresetConfigError as exc:
        print(f"[ERROR] {exc}")
        return None


def _outline_payload(kind: PresetKind, config: PresetConfig) -> Dict[str, Any]:
    bounds = get_bounds(kind, config)
    payload: Dict[str, Any] = {
        "kind": kind.value,
        "valid": validate_config(kind, config),
        "config": preset_config_to_dict(config),
        "bounds": {"width": bounds.width, "height": bounds.height},
    }
    points = get_polygon_points(kind, config)
    payload["polygon"] = [list(p) for p in points]
    if kind is PresetKind.L_SHAPED:
        payload["side_lengths"] = get_side_lengths(kind, config)
    polys = derive_reference_polygons(points, config.thickness, config.reference_side)
    payload["derived_polygon"] = polys.derived.to_list() if polys.derived is not None else None
    return payload


def _cmd_presets(args: argparse.Namespace) -> int:
    for kind in available_presets():
        definition = preset_definition(kind)
        cfg = preset_config_to_dict(default_config(kind))
        dims = {k: v for k, v in cfg.items() if k.startswith(("width", "length", "rotation"))}
        print(f"{kind.value:<12} {definition.name:<12} defaults: {json.dumps(dims, sort_keys=True)}")
    return 0


def _cmd_outline(args: argparse.Namespace) -> int:
    loaded = _load(args.config)
    if loaded is None:
        return 2
    kind, config = loaded
    try:
        payload = _outline_payload(kind, config)
    except PresetConstructionError as exc:
        print(f"[ERROR] {exc}")
        return 3
    if args.json:
        print(json.dumps(payload, indent=2, sort_keys=True))
        return 0 if payload["valid"] else 3

    print("Planform Outline")
    print(f"  Preset: {kind.value}")
    print(f"  Valid: {payload['valid']}")
    print(f"  Bounds: {payload['bounds']['width']:g} x {payload['bounds']['height']:g} mm")
    for i, (x, y) in enumerate(payload["polygon"]):
        print(f"  P{i}: ({x:g}, {y:g})")
    if "side_lengths" in payload:
        print("  Sides: " + ", ".join(f"{v:g}" for v in payload["side_lengths"]))
    if payload["derived_polygon"] is None:
        print("  Derived polygon: none (offset collapses the shape)")
    return 0 if payload["valid"] else 3


def _cmd_preview(args: argparse.Namespace) -> int:
    loaded = _load(args.config)
    if loaded is None:
        return 2
    kind, config = loaded
    if not validate_config(kind, config):
        print("[ERROR] Invalid preset configuration; nothing to preview.")
        return 3
    # Import here so the other commands work without matplotlib.
    from planform.preview.plots import save_reference_preview_png

    out = save_reference_preview_png(
        get_polygon_points(kind, config),
        config.thickness,
        config.reference_side,
        Path(args.out).expanduser().resolve(),
        title=f"{preset_definition(kind).name} preset ({config.reference_side.value} reference)",
    )
    print(f"Saved: {out}")
    return 0


def _cmd_place(args: argparse.Namespace) -> int:
    loaded = _load(args.config)
    if loaded is None:
        return 2
    kind, config = loaded
    if not validate_config(kind, config):
        print("[ERROR] Invalid preset configuration; refusing to place.")
        return 3

    session = EditorSession()
    add_storey(session.building, storey_id="storey_0", name="Ground Floor")
    tool = PerimeterPresetTool(session, anchor_mode=AnchorMode(args.anchor))
    session.push_tool(tool)
    tool.set_active_preset(kind, config)
    at = (float(args.at[0]), float(args.at[1]))
    tool.handle_pointer_move(at)
    tool.handle_pointer_down(at)

    if not session.selection:
        print("[ERROR] Perimeter placement failed; see log output.")
        return 1
    perimeter = session.building.perimeters[session.selection[0]]
    result = {
        "perimeter": session.building.to_dict()["perimeters"][0],
        "constraints": [c.to_dict() for c in session.building.constraints],
        "viewport": session.viewport_bounds.to_dict() if session.viewport_bounds is not None else None,
        "mode": session.mode,
        "tool_stack": session.tool_stack,
    }
    if args.out:
        out = Path(args.out).expanduser().resolve()
        out.parent.mkdir(parents=True, exist_ok=True)
        out.write_text(json.dumps(session.building.to_dict(), indent=2, sort_keys=True), encoding="utf-8")
        print(f"Saved building: {out}")
    print(json.dumps(result, indent=2, sort_keys=True))
    logging.getLogger(__name__).info("Placed perimeter %s", perimeter.id)
    return 0


def main(argv: list[str] | None = None) -> int:
    p = argparse.ArgumentParser(prog="planform")
    p.add_argument("--log-level", default="WARNING", help="Logging level (DEBUG, INFO, WARNING, ERROR)")
    sub = p.add_subparsers(dest="cmd", required=True)

    ls = sub.add_parser("presets", help="List available perimeter presets.")
    ls.set_defaults(func=_cmd_presets)

    o = sub.add_parser("outline", help="Print the polygon, bounds and validity of a preset config.")
    o.add_argument("config", help="Path to preset config JSON")
    o.add_argument("--json", action="store_true", help="Emit JSON instead of text")
    o.set_defaults(func=_cmd_outline)

    v = sub.add_parser("preview", help="Render the reference and derived polygons to PNG.")
    v.add_argument("config", help="Path to preset config JSON")
    v.add_argument("--out", default="out/preview.png", help="Output PNG path")
    v.set_defaults(func=_cmd_preview)

    pl = sub.add_parser("place", help="Place a preset on an empty building and print the perimeter.")
    pl.add_argument("config", help="Path to preset config JSON")
    pl.add_argument("--at", nargs=2, type=float, default=(0.0, 0.0), metavar=("X", "Y"), help="Pointer position (mm)")
    pl.add_argument("--anchor", choices=[m.value for m in AnchorMode], default=AnchorMode.CENTER.value)
    pl.add_argument("--out", default=None, help="Optional path to write the building JSON")
    pl.set_defaults(func=_cmd_place)

    args = p.parse_args(argv)
    logging.basicConfig(level=getattr(logging, str(args.log_level).upper(), logging.WARNING))
    return int(args.func(args))


if __name__ == "__main__":
    raise SystemExit(main())
