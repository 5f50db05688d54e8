from __future__ import annotations

from pathlib import Path

import pytest

from planform.presets import LShapedPresetConfig, PresetConfigError, PresetKind, ReferenceSide, default_config
from planform.project import load_preset_config, preset_config_from_dict, preset_config_to_dict, save_preset_config


def test_from_dict_builds_l_shaped_config() -> None:
    kind, cfg = preset_config_from_dict(
        {
            "kind": "l-shaped",
            "thickness": 300,
            "wall_assembly_id": "wa_1",
            "reference_side": "outside",
            "width1": 9000,
            "length1": 7000,
            "width2": "3000",
            "length2": 2000,
            "rotation": 180,
            "top_ring_beam_assembly_id": "",
        }
    )
    assert kind is PresetKind.L_SHAPED
    assert isinstance(cfg, LShapedPresetConfig)
    assert cfg.reference_side is ReferenceSide.OUTSIDE
    assert cfg.width2 == 3000.0
    assert cfg.rotation == 180
    assert cfg.top_ring_beam_assembly_id is None


def test_to_dict_carries_kind_and_enum_values() -> None:
    data = preset_config_to_dict(default_config(PresetKind.RECTANGULAR))
    assert data["kind"] == "rectangular"
    assert data["reference_side"] == "inside"
    assert data["width"] == 10000.0


@pytest.mark.parametrize(
    "payload, message",
    [
        ({"kind": "u-shaped", "thickness": 1}, "Unsupported preset kind"),
        ({"kind": "rectangular", "thickness": 1, "reference_side": "middle", "width": 1, "length": 1}, "reference_side"),
        ({"kind": "rectangular", "thickness": 1, "width": 1}, "Missing required field: length"),
        ({"kind": "rectangular", "thickness": "thick", "width": 1, "length": 1}, "thickness must be a number"),
        (
            {"kind": "l-shaped", "thickness": 1, "width1": 4, "length1": 4, "width2": 2, "length2": 2, "rotation": "half"},
            "rotation must be an integer",
        ),
    ],
)
def test_from_dict_rejects_malformed_payloads(payload: dict, message: str) -> None:
    with pytest.raises(PresetConfigError, match=message):
        preset_config_from_dict(payload)


def test_save_and_load_preset_config(tmp_path: Path) -> None:
    cfg = default_config(PresetKind.L_SHAPED, wall_assembly_id="wa_7")
    path = tmp_path / "configs" / "l.json"
    save_preset_config(cfg, path)
    kind, loaded = load_preset_config(path)
    assert kind is PresetKind.L_SHAPED
    assert loaded == cfg


def test_load_rejects_invalid_json(tmp_path: Path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text("{not json", encoding="utf-8")
    with pytest.raises(PresetConfigError, match="Invalid JSON"):
        load_preset_config(bad)
    arr = tmp_path / "arr.json"
    arr.write_text("[1, 2]", encoding="utf-8")
    with pytest.raises(PresetConfigError, match="JSON object"):
        load_preset_config(arr)


_L_PAYLOAD = {"kind": "l-shaped", "thickness": 420, "wall_assembly_id": "wa", "width1": 8000, "length1": 6000, "width2": 4000, "length2": 3000}


@pytest.mark.parametrize("rotation", [90.5, True, False, "90.5", float("inf")])
def test_from_dict_rejects_non_integral_rotation(rotation) -> None:
    with pytest.raises(PresetConfigError, match="rotation must be an integer"):
        preset_config_from_dict({**_L_PAYLOAD, "rotation": rotation})


def test_from_dict_accepts_integral_float_rotation() -> None:
    _, cfg = preset_config_from_dict({**_L_PAYLOAD, "rotation": 90.0})
    assert cfg.rotation == 90


@pytest.mark.parametrize("field", ["thickness", "width1", "length1", "width2", "length2"])
@pytest.mark.parametrize("value", ["nan", float("nan"), float("inf"), True])
def test_from_dict_rejects_non_finite_dimensions(field: str, value) -> None:
    with pytest.raises(PresetConfigError, match=f"{field} must be a finite number"):
        preset_config_from_dict({**_L_PAYLOAD, field: value})


def test_load_rejects_nan_literal(tmp_path: Path) -> None:
    path = tmp_path / "nan.json"
    path.write_text(
        '{"kind": "rectangular", "thickness": 420, "wall_assembly_id": "wa", "width": NaN, "length": 6000}',
        encoding="utf-8",
    )
    with pytest.raises(PresetConfigError, match="width must be a finite number"):
        load_preset_config(path)
