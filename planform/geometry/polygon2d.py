from __future__ import annotations

from dataclasses import dataclass
from typing import List, Sequence

from planform.geometry.primitives import Bounds2D, Point2, Polygon2D
from planform.geometry.tolerance import EPS_ANG, EPS_WELD


# Orientation convention: a positive shoelace area is clockwise in screen
# space (Y axis pointing down). Offset normals follow the same convention.


@dataclass(frozen=True)
class PolygonValidityReport:
    valid: bool
    self_intersections: int = 0


def signed_area(points: Sequence[Point2]) -> float:
    if len(points) < 3:
        return 0.0
    s = 0.0
    for i in range(len(points)):
        x1, y1 = points[i]
        x2, y2 = points[(i + 1) % len(points)]
        s += x1 * y2 - x2 * y1
    return 0.5 * s


def is_clockwise(points: Sequence[Point2]) -> bool:
    return signed_area(points) > 0.0


def ensure_clockwise(polygon: Polygon2D) -> Polygon2D:
    if is_clockwise(polygon.points):
        return polygon
    return Polygon2D(points=list(reversed(polygon.points)))


def translate_points(points: Sequence[Point2], offset: Point2) -> List[Point2]:
    dx, dy = float(offset[0]), float(offset[1])
    return [(float(x) + dx, float(y) + dy) for x, y in points]


def translate_polygon(polygon: Polygon2D, offset: Point2) -> Polygon2D:
    return Polygon2D(points=translate_points(polygon.points, offset))


def polygon_bounds(points: Sequence[Point2]) -> Bounds2D:
    if not points:
        raise ValueError("Cannot compute bounds of an empty point set")
    xs = [float(p[0]) for p in points]
    ys = [float(p[1]) for p in points]
    return Bounds2D(min_x=min(xs), min_y=min(ys), max_x=max(xs), max_y=max(ys))


def _orient(a: Point2, b: Point2, c: Point2) -> float:
    return (b[0] - a[0]) * (c[1] - a[1]) - (b[1] - a[1]) * (c[0] - a[0])


def _segments_intersect(a: Point2, b: Point2, c: Point2, d: Point2) -> bool:
    o1 = _orient(a, b, c)
    o2 = _orient(a, b, d)
    o3 = _orient(c, d, a)
    o4 = _orient(c, d, b)
    return (o1 * o2 < 0.0) and (o3 * o4 < 0.0)


def remove_redundant_vertices(points: Sequence[Point2], *, weld_eps: float = EPS_WELD) -> List[Point2]:
    """
    Drop consecutive duplicates (including the closing point) and vertices
    lying on a straight run between their neighbours.
    """
    out: List[Point2] = []
    for x, y in points:
        p = (float(x), float(y))
        if out and abs(out[-1][0] - p[0]) <= weld_eps and abs(out[-1][1] - p[1]) <= weld_eps:
            continue
        out.append(p)
    while len(out) >= 2 and abs(out[0][0] - out[-1][0]) <= weld_eps and abs(out[0][1] - out[-1][1]) <= weld_eps:
        out.pop()

    changed = True
    while changed and len(out) >= 3:
        changed = False
        n = len(out)
        for i in range(n):
            prev, curr, nxt = out[i - 1], out[i], out[(i + 1) % n]
            ax, ay = curr[0] - prev[0], curr[1] - prev[1]
            bx, by = nxt[0] - curr[0], nxt[1] - curr[1]
            la = (ax * ax + ay * ay) ** 0.5
            lb = (bx * bx + by * by) ** 0.5
            if la <= weld_eps or lb <= weld_eps:
                continue
            cross = (ax * by - ay * bx) / (la * lb)
            dot = (ax * bx + ay * by) / (la * lb)
            if abs(cross) <= EPS_ANG and dot > 0.0:
                del out[i]
                changed = True
                break
    return out


def validate_polygon(points: Sequence[Point2]) -> PolygonValidityReport:
    if len(points) < 3:
        return PolygonValidityReport(valid=False)

    dup = 0
    seen = set()
    for p in points:
        key = (round(float(p[0]), 6), round(float(p[1]), 6))
        if key in seen:
            dup += 1
        seen.add(key)

    si = 0
    n = len(points)
    for i in range(n):
        a, b = points[i], points[(i + 1) % n]
        for j in range(i + 2, n):
            if i == 0 and j == n - 1:
                continue
            c, d = points[j], points[(j + 1) % n]
            if _segments_intersect(a, b, c, d):
                si += 1

    area = signed_area(points)
    return PolygonValidityReport(valid=(si == 0 and dup == 0 and area != 0.0), self_intersections=si)
