from __future__ import annotations

import math
from dataclasses import replace

import pytest

from planform.geometry.polygon2d import is_clockwise
from planform.presets import (
    LShapedPresetConfig,
    PresetConstructionError,
    PresetKind,
    ReferenceSide,
    get_bounds,
    get_polygon_points,
    get_side_lengths,
    validate_config,
)

L = PresetKind.L_SHAPED


def _config(**overrides) -> LShapedPresetConfig:
    base = LShapedPresetConfig(
        thickness=420.0,
        wall_assembly_id="wa_mock",
        reference_side=ReferenceSide.INSIDE,
        width1=8000.0,
        length1=6000.0,
        width2=4000.0,
        length2=3000.0,
        rotation=0,
    )
    return replace(base, **overrides)


def test_generates_six_distinct_points() -> None:
    points = get_polygon_points(L, _config())
    assert len(points) == 6
    assert len(set(points)) == 6


def test_points_at_zero_rotation() -> None:
    points = get_polygon_points(L, _config())
    assert points == [
        (-4000.0, -3000.0),
        (4000.0, -3000.0),
        (4000.0, 0.0),
        (0.0, 0.0),
        (0.0, 3000.0),
        (-4000.0, 3000.0),
    ]
    assert is_clockwise(points)


def test_step_position_follows_extension_size() -> None:
    points = get_polygon_points(L, _config(width2=2000.0, length2=1000.0))
    assert points[2] == (4000.0, -2000.0)
    assert points[3] == (-2000.0, -2000.0)
    assert points[4] == (-2000.0, 3000.0)


def test_rotation_by_90_maps_x_y_to_minus_y_x() -> None:
    points0 = get_polygon_points(L, _config(rotation=0))
    points90 = get_polygon_points(L, _config(rotation=90))
    for p0, p90 in zip(points0, points90):
        assert p90[0] == pytest.approx(-p0[1])
        assert p90[1] == pytest.approx(p0[0])


@pytest.mark.parametrize("rotation", [0, 90, 180, 270])
def test_all_rotations_produce_finite_clockwise_points(rotation: int) -> None:
    points = get_polygon_points(L, _config(rotation=rotation))
    assert len(points) == 6
    assert all(abs(x) < 1e9 and abs(y) < 1e9 for x, y in points)
    assert is_clockwise(points)


def test_rotation_180_is_point_reflection() -> None:
    points0 = get_polygon_points(L, _config(rotation=0))
    points180 = get_polygon_points(L, _config(rotation=180))
    assert points180 == [(-x + 0.0, -y + 0.0) for x, y in points0]


def test_extension_larger_than_main_rectangle_raises() -> None:
    with pytest.raises(PresetConstructionError, match="Extension dimensions must be smaller than main rectangle dimensions"):
        get_polygon_points(L, _config(width1=4000.0, width2=5000.0))
    with pytest.raises(PresetConstructionError):
        get_polygon_points(L, _config(length1=3000.0, length2=4000.0))


def test_bounds_are_main_rectangle_regardless_of_rotation() -> None:
    bounds = [get_bounds(L, _config(rotation=r)) for r in (0, 90, 180, 270)]
    assert all((b.width, b.height) == (8000.0, 6000.0) for b in bounds)


def test_side_lengths() -> None:
    assert get_side_lengths(L, _config()) == [8000.0, 3000.0, 4000.0, 3000.0, 4000.0, 6000.0]


def test_side_lengths_can_be_zero_when_extension_fills_main_rectangle() -> None:
    cfg = _config(width1=4000.0, length1=3000.0, width2=4000.0, length2=3000.0)
    assert get_side_lengths(L, cfg) == [4000.0, 3000.0, 0.0, 0.0, 4000.0, 3000.0]


def test_polygon_points_are_deterministic() -> None:
    cfg = _config(rotation=270)
    assert get_polygon_points(L, cfg) == get_polygon_points(L, cfg)


def test_validate_accepts_valid_configuration() -> None:
    assert validate_config(L, _config())
    for rotation in (0, 90, 180, 270):
        assert validate_config(L, _config(rotation=rotation))
    assert validate_config(L, _config(reference_side=ReferenceSide.OUTSIDE))


def test_validate_accepts_extension_equal_to_main_rectangle() -> None:
    assert validate_config(L, _config(width2=8000.0, length2=6000.0))


@pytest.mark.parametrize("field", ["width1", "length1", "width2", "length2", "thickness"])
@pytest.mark.parametrize("value", [0.0, -1000.0])
def test_validate_rejects_non_positive_values(field: str, value: float) -> None:
    assert not validate_config(L, _config(**{field: value}))


def test_validate_rejects_extension_larger_than_main_rectangle() -> None:
    assert not validate_config(L, _config(width1=4000.0, width2=5000.0))
    assert not validate_config(L, _config(length1=3000.0, length2=4000.0))


@pytest.mark.parametrize("rotation", [45, -90, 360])
def test_validate_rejects_invalid_rotation(rotation: int) -> None:
    assert not validate_config(L, _config(rotation=rotation))


def test_validate_rejects_empty_assembly() -> None:
    assert not validate_config(L, _config(wall_assembly_id=""))


def test_validate_rejects_outside_reference_when_thickness_exceeds_room() -> None:
    cfg = _config(
        reference_side=ReferenceSide.OUTSIDE,
        width1=500.0,
        length1=500.0,
        width2=250.0,
        length2=250.0,
        thickness=400.0,
    )
    assert not validate_config(L, cfg)
    # Same dimensions measured on the inside grow outward and stay valid.
    assert validate_config(L, replace(cfg, reference_side=ReferenceSide.INSIDE))


@pytest.mark.parametrize("field", ["width1", "length1", "width2", "length2", "thickness"])
@pytest.mark.parametrize("value", [math.nan, math.inf])
def test_validate_rejects_non_finite_values(field: str, value: float) -> None:
    assert not validate_config(L, _config(**{field: value}))
