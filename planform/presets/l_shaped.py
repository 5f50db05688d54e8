from __future__ import annotations

import logging
import math
from typing import Dict, List, Tuple

import numpy as np

from planform.geometry.offset import try_offset_polygon
from planform.geometry.primitives import Point2, Polygon2D
from planform.presets.types import (
    ALLOWED_ROTATIONS,
    LShapedPresetConfig,
    PresetBounds,
    PresetConstructionError,
    ReferenceSide,
)

logger = logging.getLogger(__name__)


# Exact (cos, sin) per quarter turn so rotated corners stay axis-aligned.
_QUARTER_TURNS: Dict[int, Tuple[float, float]] = {
    0: (1.0, 0.0),
    90: (0.0, 1.0),
    180: (-1.0, 0.0),
    270: (0.0, -1.0),
}


def _rotation_matrix(rotation_deg: int) -> np.ndarray:
    if rotation_deg in _QUARTER_TURNS:
        c, s = _QUARTER_TURNS[rotation_deg]
    else:
        rad = np.deg2rad(float(rotation_deg))
        c, s = float(np.cos(rad)), float(np.sin(rad))
    return np.array([[c, -s], [s, c]], dtype=float)


def l_shaped_polygon_points(config: LShapedPresetConfig) -> List[Point2]:
    w1 = float(config.width1)
    l1 = float(config.length1)
    w2 = float(config.width2)
    l2 = float(config.length2)
    if w2 > w1 or l2 > l1:
        raise PresetConstructionError("Extension dimensions must be smaller than main rectangle dimensions")

    hw = w1 / 2.0
    hl = l1 / 2.0
    step_y = -hl + l2
    step_x = -hw + w2
    points = np.array(
        [
            (-hw, -hl),
            (hw, -hl),
            (hw, step_y),
            (step_x, step_y),
            (step_x, hl),
            (-hw, hl),
        ],
        dtype=float,
    )
    if int(config.rotation) != 0:
        points = points @ _rotation_matrix(int(config.rotation)).T
    # Quarter turns can yield -0.0; normalise so outputs compare cleanly.
    return [(float(x) + 0.0, float(y) + 0.0) for x, y in points]


def l_shaped_bounds(config: LShapedPresetConfig) -> PresetBounds:
    # Unrotated main-rectangle envelope, independent of rotation.
    return PresetBounds(width=float(config.width1), height=float(config.length1))


def l_shaped_side_lengths(config: LShapedPresetConfig) -> List[float]:
    w1 = float(config.width1)
    l1 = float(config.length1)
    w2 = float(config.width2)
    l2 = float(config.length2)
    return [w1, l2, w1 - w2, l1 - l2, w2, l1]


def validate_l_shaped_config(config: LShapedPresetConfig) -> bool:
    dims = (config.width1, config.length1, config.width2, config.length2, config.thickness)
    if not all(math.isfinite(float(v)) and float(v) > 0.0 for v in dims):
        return False
    if config.width2 > config.width1 or config.length2 > config.length1:
        return False
    if not config.wall_assembly_id:
        return False
    if config.rotation not in ALLOWED_ROTATIONS:
        return False

    try:
        points = l_shaped_polygon_points(config)
    except PresetConstructionError:
        return False
    thickness = float(config.thickness)
    distance = thickness if config.reference_side is ReferenceSide.INSIDE else -thickness
    res = try_offset_polygon(Polygon2D(points=points), distance)
    if not res.ok or res.polygon is None or len(res.polygon.points) < 3:
        logger.debug("L-shaped config rejected by offset check: %s", res.failure)
        return False
    return True
