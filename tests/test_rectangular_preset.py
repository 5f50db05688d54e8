from __future__ import annotations

import math
from dataclasses import replace

import pytest

from planform.geometry.polygon2d import is_clockwise
from planform.presets import PresetKind, RectangularPresetConfig, ReferenceSide, get_bounds, get_polygon_points, validate_config


def _config(**overrides) -> RectangularPresetConfig:
    base = RectangularPresetConfig(
        thickness=420.0,
        wall_assembly_id="wa_mock",
        reference_side=ReferenceSide.INSIDE,
        width=4000.0,
        length=6000.0,
    )
    return replace(base, **overrides)


def test_rectangle_points_are_centered_and_clockwise() -> None:
    points = get_polygon_points(PresetKind.RECTANGULAR, _config())
    assert points == [(-2000.0, -3000.0), (2000.0, -3000.0), (2000.0, 3000.0), (-2000.0, 3000.0)]
    assert is_clockwise(points)


def test_rectangle_points_ignore_reference_side() -> None:
    inside = get_polygon_points(PresetKind.RECTANGULAR, _config())
    outside = get_polygon_points(PresetKind.RECTANGULAR, _config(reference_side=ReferenceSide.OUTSIDE))
    assert inside == outside


def test_rectangle_bounds() -> None:
    b = get_bounds(PresetKind.RECTANGULAR, _config())
    assert (b.width, b.height) == (4000.0, 6000.0)


def test_rectangle_points_are_deterministic() -> None:
    cfg = _config()
    assert get_polygon_points(PresetKind.RECTANGULAR, cfg) == get_polygon_points(PresetKind.RECTANGULAR, cfg)


def test_validate_accepts_valid_configuration() -> None:
    assert validate_config(PresetKind.RECTANGULAR, _config())
    assert validate_config(PresetKind.RECTANGULAR, _config(reference_side=ReferenceSide.OUTSIDE))


def test_validate_rejects_bad_dimensions_and_assembly() -> None:
    assert not validate_config(PresetKind.RECTANGULAR, _config(width=0.0))
    assert not validate_config(PresetKind.RECTANGULAR, _config(length=-10.0))
    assert not validate_config(PresetKind.RECTANGULAR, _config(thickness=0.0))
    assert not validate_config(PresetKind.RECTANGULAR, _config(thickness=-420.0))
    assert not validate_config(PresetKind.RECTANGULAR, _config(wall_assembly_id=""))


def test_validate_outside_reference_subtracts_both_walls() -> None:
    # 800 outside with 400 walls leaves no interior.
    assert not validate_config(PresetKind.RECTANGULAR, _config(width=800.0, thickness=400.0, reference_side=ReferenceSide.OUTSIDE))
    assert validate_config(PresetKind.RECTANGULAR, _config(width=801.0, thickness=400.0, reference_side=ReferenceSide.OUTSIDE))
    assert validate_config(PresetKind.RECTANGULAR, _config(width=800.0, thickness=400.0, reference_side=ReferenceSide.INSIDE))


@pytest.mark.parametrize("field", ["width", "length", "thickness"])
@pytest.mark.parametrize("value", [math.nan, math.inf])
def test_validate_rejects_non_finite_values(field: str, value: float) -> None:
    assert not validate_config(PresetKind.RECTANGULAR, _config(**{field: value}))
    assert not validate_config(PresetKind.RECTANGULAR, _config(**{field: value}, reference_side=ReferenceSide.OUTSIDE))
