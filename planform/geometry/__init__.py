from planform.geometry.errors import DegenerateOffsetError, GeometryError
from planform.geometry.offset import OffsetFailure, OffsetResult, offset_polygon, try_offset_polygon
from planform.geometry.polygon2d import (
    ensure_clockwise,
    is_clockwise,
    polygon_bounds,
    remove_redundant_vertices,
    signed_area,
    translate_points,
    translate_polygon,
    validate_polygon,
)
from planform.geometry.primitives import Bounds2D, Point2, Polygon2D

__all__ = [
    "Bounds2D",
    "DegenerateOffsetError",
    "GeometryError",
    "OffsetFailure",
    "OffsetResult",
    "Point2",
    "Polygon2D",
    "ensure_clockwise",
    "is_clockwise",
    "offset_polygon",
    "polygon_bounds",
    "remove_redundant_vertices",
    "signed_area",
    "translate_points",
    "translate_polygon",
    "try_offset_polygon",
    "validate_polygon",
]
