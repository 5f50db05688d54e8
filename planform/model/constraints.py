from __future__ import annotations

from typing import List, Literal, Sequence

from planform.geometry.primitives import Point2
from planform.geometry.tolerance import EPS_ALIGN
from planform.model.schema import BuildingConstraint, PerimeterCorner, PerimeterWall
from planform.presets.types import ReferenceSide


def reference_side_to_constraint_side(reference_side: ReferenceSide) -> Literal["left", "right"]:
    """For clockwise perimeters the inside face lies right of each wall."""
    return "right" if reference_side is ReferenceSide.INSIDE else "left"


def _reference_point(corner: PerimeterCorner, reference_side: ReferenceSide) -> Point2:
    return corner.inside_point if reference_side is ReferenceSide.INSIDE else corner.outside_point


def _reference_length(wall: PerimeterWall, reference_side: ReferenceSide) -> float:
    return wall.inside_length if reference_side is ReferenceSide.INSIDE else wall.outside_length


def generate_preset_constraints(
    corners: Sequence[PerimeterCorner],
    walls: Sequence[PerimeterWall],
    reference_side: ReferenceSide,
) -> List[BuildingConstraint]:
    """
    Constraints for an axis-aligned preset perimeter:
    - one distance constraint per wall, using the reference-side length
    - a horizontal or vertical constraint per consecutive corner pair whose
      reference-side points share an axis

    Perpendicular constraints are not emitted; horizontal/vertical ones
    already fix every angle of axis-aligned geometry.
    """
    side = reference_side_to_constraint_side(reference_side)
    out: List[BuildingConstraint] = []

    for wall in walls:
        out.append(
            BuildingConstraint(
                type="distance",
                side=side,
                node_a=wall.start_corner_id,
                node_b=wall.end_corner_id,
                length=float(_reference_length(wall, reference_side)),
            )
        )

    n = len(corners)
    for i in range(n):
        a = corners[i]
        b = corners[(i + 1) % n]
        pa = _reference_point(a, reference_side)
        pb = _reference_point(b, reference_side)
        if abs(pa[1] - pb[1]) <= EPS_ALIGN:
            out.append(BuildingConstraint(type="horizontal", node_a=a.id, node_b=b.id))
        elif abs(pa[0] - pb[0]) <= EPS_ALIGN:
            out.append(BuildingConstraint(type="vertical", node_a=a.id, node_b=b.id))
    return out
