from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import numpy as np

from planform.geometry.errors import DegenerateOffsetError
from planform.geometry.polygon2d import remove_redundant_vertices, signed_area, validate_polygon
from planform.geometry.primitives import Polygon2D
from planform.geometry.tolerance import EPS_ANG, EPS_AREA, EPS_POS


@dataclass(frozen=True)
class OffsetFailure:
    code: str
    message: str


@dataclass(frozen=True)
class OffsetResult:
    ok: bool
    polygon: Optional[Polygon2D] = None
    failure: Optional[OffsetFailure] = None


def _fail(code: str, message: str) -> OffsetResult:
    return OffsetResult(ok=False, failure=OffsetFailure(code=code, message=message))


def try_offset_polygon(polygon: Polygon2D, distance: float) -> OffsetResult:
    """
    Mitered offset of a simple polygon by a uniform distance.

    Positive distances move every edge outward along its normal, negative
    distances move it inward. Each output vertex is the intersection of the
    two adjacent offset edge lines.
    """
    pts = remove_redundant_vertices(polygon.points)
    if len(pts) < 3:
        return _fail("degenerate", "input polygon has fewer than 3 distinct vertices")
    area = signed_area(pts)
    if abs(area) <= EPS_AREA:
        return _fail("degenerate", "input polygon has zero area")
    if abs(float(distance)) <= 0.0:
        return OffsetResult(ok=True, polygon=Polygon2D(points=pts))

    p = np.asarray(pts, dtype=float)
    d = np.roll(p, -1, axis=0) - p
    lengths = np.hypot(d[:, 0], d[:, 1])
    if np.any(lengths <= EPS_POS):
        return _fail("degenerate", "input polygon has zero-length edges")

    # Outward normal of a positive-area polygon is the edge direction turned by (dy, -dx).
    sign = 1.0 if area > 0.0 else -1.0
    normals = sign * np.column_stack((d[:, 1], -d[:, 0])) / lengths[:, None]
    origins = p + normals * float(distance)

    prev_origins = np.roll(origins, 1, axis=0)
    prev_dirs = np.roll(d, 1, axis=0)
    det = prev_dirs[:, 0] * d[:, 1] - prev_dirs[:, 1] * d[:, 0]
    if np.any(np.abs(det) <= EPS_ANG * np.roll(lengths, 1) * lengths):
        return _fail("degenerate", "adjacent edges are parallel; offset corner is undefined")
    delta = origins - prev_origins
    t = (delta[:, 0] * d[:, 1] - delta[:, 1] * d[:, 0]) / det
    out = prev_origins + prev_dirs * t[:, None]

    new_dirs = np.roll(out, -1, axis=0) - out
    if np.any(np.einsum("ij,ij->i", new_dirs, d) <= EPS_POS):
        return _fail("collapsed", "offset inverted at least one edge")

    out_pts = [(float(x), float(y)) for x, y in out]
    out_area = signed_area(out_pts)
    if abs(out_area) <= EPS_AREA or (out_area > 0.0) != (area > 0.0):
        return _fail("collapsed", "offset polygon lost its area or orientation")
    report = validate_polygon(out_pts)
    if report.self_intersections > 0:
        return _fail("non_simple", "offset polygon self-intersects")
    return OffsetResult(ok=True, polygon=Polygon2D(points=out_pts))


def offset_polygon(polygon: Polygon2D, distance: float) -> Polygon2D:
    res = try_offset_polygon(polygon, distance)
    if not res.ok or res.polygon is None:
        failure = res.failure or OffsetFailure(code="degenerate", message="offset failed")
        raise DegenerateOffsetError(failure.code, f"Degenerate offset: {failure.message}")
    return res.polygon
