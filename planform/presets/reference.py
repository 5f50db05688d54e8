from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Optional, Sequence

from planform.geometry.errors import DegenerateOffsetError
from planform.geometry.offset import offset_polygon
from planform.geometry.polygon2d import ensure_clockwise
from planform.geometry.primitives import Point2, Polygon2D
from planform.presets.types import ReferenceSide

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ReferencePolygons:
    """Canonical polygon and its counterpart on the other face of the wall."""

    reference: Polygon2D
    derived: Optional[Polygon2D]
    reference_side: ReferenceSide

    @property
    def interior(self) -> Optional[Polygon2D]:
        if self.reference_side is ReferenceSide.INSIDE:
            return self.reference
        return self.derived

    @property
    def exterior(self) -> Optional[Polygon2D]:
        if self.reference_side is ReferenceSide.INSIDE:
            return self.derived
        return self.reference


def reference_offset_distance(thickness: float, reference_side: ReferenceSide) -> float:
    t = float(thickness)
    return t if reference_side is ReferenceSide.INSIDE else -t


def derive_reference_polygons(
    points: Sequence[Point2],
    thickness: float,
    reference_side: ReferenceSide,
) -> ReferencePolygons:
    reference = ensure_clockwise(Polygon2D.from_points(points))
    derived: Optional[Polygon2D] = None
    if float(thickness) > 0.0:
        try:
            derived = offset_polygon(reference, reference_offset_distance(thickness, reference_side))
        except DegenerateOffsetError as exc:
            logger.warning("Failed to compute offset polygon preview: %s", exc)
    return ReferencePolygons(reference=reference, derived=derived, reference_side=reference_side)
