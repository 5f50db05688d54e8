from __future__ import annotations

import math
from typing import List

from planform.geometry.primitives import Point2
from planform.presets.types import PresetBounds, RectangularPresetConfig, ReferenceSide


def rectangular_polygon_points(config: RectangularPresetConfig) -> List[Point2]:
    """
    Reference-side rectangle centred on the origin, clockwise, starting at
    the (-, -) corner.
    """
    hw = float(config.width) / 2.0
    hl = float(config.length) / 2.0
    return [(-hw, -hl), (hw, -hl), (hw, hl), (-hw, hl)]


def rectangular_bounds(config: RectangularPresetConfig) -> PresetBounds:
    return PresetBounds(width=float(config.width), height=float(config.length))


def rectangular_interior_size(config: RectangularPresetConfig) -> tuple[float, float]:
    width = float(config.width)
    length = float(config.length)
    if config.reference_side is ReferenceSide.OUTSIDE:
        t = float(config.thickness)
        return width - 2.0 * t, length - 2.0 * t
    return width, length


def validate_rectangular_config(config: RectangularPresetConfig) -> bool:
    dims = (config.width, config.length, config.thickness)
    if not all(math.isfinite(float(v)) and float(v) > 0.0 for v in dims):
        return False
    interior_width, interior_length = rectangular_interior_size(config)
    return (
        interior_width > 0.0
        and interior_length > 0.0
        and float(config.thickness) > 0.0
        and bool(config.wall_assembly_id)
    )
