from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import List, Literal, Optional, Sequence, Tuple

from planform.geometry.polygon2d import polygon_bounds
from planform.geometry.primitives import Point2
from planform.presets.reference import ReferencePolygons, derive_reference_polygons
from planform.presets.types import ReferenceSide


PushDirection = Literal["inward", "outward"]


@dataclass(frozen=True)
class EdgeLabel:
    x: float
    y: float
    angle_deg: float
    text: str
    above_line: bool
    role: Literal["reference", "derived"]


@dataclass(frozen=True)
class ReferencePreview:
    size: float
    reference_side: ReferenceSide
    reference_points: List[Point2] = field(default_factory=list)
    derived_points: List[Point2] = field(default_factory=list)
    labels: List[EdgeLabel] = field(default_factory=list)

    @property
    def reference_path(self) -> str:
        return to_path(self.reference_points)

    @property
    def derived_path(self) -> str:
        return to_path(self.derived_points)

    @property
    def show_derived(self) -> bool:
        return len(self.derived_points) > 0


def format_length(length_mm: float, unit: str = "m") -> str:
    if unit == "mm":
        return f"{length_mm:.0f}mm"
    if unit == "cm":
        return f"{length_mm / 10.0:.1f}cm"
    if unit == "m":
        return f"{length_mm / 1000.0:.2f}m"
    return f"{length_mm:.0f}"


def to_path(points: Sequence[Point2]) -> str:
    if not points:
        return ""
    parts = [f"{'M' if i == 0 else 'L'} {x:g} {y:g}" for i, (x, y) in enumerate(points)]
    return " ".join(parts) + " Z"


def readable_angle(dx: float, dy: float) -> float:
    """Edge angle in degrees, flipped so text never renders upside down."""
    angle = math.degrees(math.atan2(dy, dx))
    if angle > 90.0:
        angle -= 180.0
    elif angle < -90.0:
        angle += 180.0
    return angle


def _edge_labels(
    scaled: Sequence[Point2],
    model_points: Sequence[Point2],
    push: PushDirection,
    role: Literal["reference", "derived"],
    unit: str,
) -> List[EdgeLabel]:
    labels: List[EdgeLabel] = []
    n = len(scaled)
    for i in range(n):
        j = (i + 1) % n
        length = math.hypot(model_points[j][0] - model_points[i][0], model_points[j][1] - model_points[i][1])
        dx = scaled[j][0] - scaled[i][0]
        dy = scaled[j][1] - scaled[i][1]
        labels.append(
            EdgeLabel(
                x=(scaled[i][0] + scaled[j][0]) / 2.0,
                y=(scaled[i][1] + scaled[j][1]) / 2.0,
                angle_deg=readable_angle(dx, dy),
                text=format_length(length, unit),
                above_line=(push == "inward") == (dx >= 0.0),
                role=role,
            )
        )
    return labels


def build_reference_preview(
    points: Sequence[Point2],
    thickness: float,
    reference_side: ReferenceSide,
    *,
    size: float = 200.0,
    unit: str = "m",
) -> ReferencePreview:
    """
    Fit the reference polygon and its wall-offset counterpart into a
    ``size`` x ``size`` box (Y up) and label every edge with its length.
    """
    if len(points) < 3 or float(thickness) <= 0.0:
        return ReferencePreview(size=float(size), reference_side=reference_side)

    polys: ReferencePolygons = derive_reference_polygons(points, thickness, reference_side)
    reference = polys.reference.points
    derived: Optional[List[Point2]] = polys.derived.points if polys.derived is not None else None
    exterior = polys.exterior.points if polys.exterior is not None else reference

    bounds = polygon_bounds(exterior)
    cx, cy = bounds.center
    max_dim = max(bounds.width, bounds.height)
    scale = float(size) / max_dim if max_dim > 0.0 else 1.0
    half = float(size) / 2.0

    def _tx(p: Point2) -> Tuple[float, float]:
        return ((p[0] - cx) * scale + half, -(p[1] - cy) * scale + half)

    scaled_reference = [_tx(p) for p in reference]
    scaled_derived = [_tx(p) for p in derived] if derived is not None else []

    inside = reference_side is ReferenceSide.INSIDE
    labels = _edge_labels(scaled_reference, reference, "inward" if inside else "outward", "reference", unit)
    if derived is not None:
        labels += _edge_labels(scaled_derived, derived, "outward" if inside else "inward", "derived", unit)

    return ReferencePreview(
        size=float(size),
        reference_side=reference_side,
        reference_points=scaled_reference,
        derived_points=scaled_derived,
        labels=labels,
    )


def render_svg(preview: ReferencePreview) -> str:
    s = f"{preview.size:g}"
    ref = f'<path d="{preview.reference_path}" fill="#dbe7ff" stroke="#3a5ccc" stroke-width="2"/>'
    der = (
        f'<path d="{preview.derived_path}" fill="#efefef" stroke="#8c8c8c" stroke-width="1" stroke-dasharray="3,3"/>'
        if preview.show_derived
        else ""
    )
    # Inside reference draws the (larger) derived outline underneath.
    body = der + ref if preview.reference_side is ReferenceSide.INSIDE else ref + der
    texts = []
    for label in preview.labels:
        baseline = "text-before-edge" if label.above_line else "text-after-edge"
        color = "#1f2f66" if label.role == "reference" else "#333333"
        texts.append(
            f'<g transform="translate({label.x:g} {label.y:g})">'
            f'<text text-anchor="middle" dominant-baseline="{baseline}" font-size="12" fill="{color}" '
            f'transform="rotate({label.angle_deg:g})">{label.text}</text></g>'
        )
    return (
        f'<svg xmlns="http://www.w3.org/2000/svg" width="{s}" height="{s}" viewBox="0 0 {s} {s}">'
        f"{body}{''.join(texts)}</svg>"
    )
