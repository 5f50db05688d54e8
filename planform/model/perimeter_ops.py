from __future__ import annotations

import logging
import math
import uuid
from typing import List, Optional

from planform.geometry.offset import offset_polygon
from planform.geometry.polygon2d import ensure_clockwise, remove_redundant_vertices
from planform.geometry.primitives import Point2, Polygon2D
from planform.geometry.tolerance import EPS_POS
from planform.model.base import OpContext, execute_op
from planform.model.schema import Building, BuildingConstraint, Perimeter, PerimeterCorner, PerimeterWall, Storey
from planform.presets.types import ReferenceSide

logger = logging.getLogger(__name__)


def _new_id(prefix: str) -> str:
    return f"{prefix}_{uuid.uuid4().hex[:12]}"


def _distance(a: Point2, b: Point2) -> float:
    return math.hypot(b[0] - a[0], b[1] - a[1])


def _interior_angle_deg(prev: Point2, curr: Point2, nxt: Point2) -> float:
    d1 = (curr[0] - prev[0], curr[1] - prev[1])
    d2 = (nxt[0] - curr[0], nxt[1] - curr[1])
    turn = math.atan2(d1[0] * d2[1] - d1[1] * d2[0], d1[0] * d2[0] + d1[1] * d2[1])
    return 180.0 - math.degrees(turn)


def add_storey(
    building: Building,
    *,
    storey_id: str,
    name: str,
    level: int = 0,
    floor_height: float = 2800.0,
    make_active: bool = True,
    ctx: Optional[OpContext] = None,
) -> Storey:
    def _validate() -> None:
        if any(s.id == storey_id for s in building.storeys):
            raise ValueError(f"Storey already exists: {storey_id}")
        if floor_height <= 0.0:
            raise ValueError("floor_height must be > 0")

    def _mutate() -> Storey:
        storey = Storey(id=storey_id, name=name, level=int(level), floor_height=float(floor_height))
        building.storeys.append(storey)
        if make_active or building.active_storey_id is None:
            building.active_storey_id = storey.id
        return storey

    return execute_op(
        building,
        op_name="add_storey",
        args={"storey_id": storey_id, "name": name, "level": level, "floor_height": floor_height},
        ctx=ctx,
        validate=_validate,
        mutate=_mutate,
    )


def add_perimeter(
    building: Building,
    *,
    storey_id: str,
    polygon: Polygon2D,
    wall_assembly_id: str,
    thickness: float,
    base_ring_beam_assembly_id: Optional[str] = None,
    top_ring_beam_assembly_id: Optional[str] = None,
    reference_side: ReferenceSide = ReferenceSide.INSIDE,
    ctx: Optional[OpContext] = None,
) -> Perimeter:
    reference = remove_redundant_vertices(ensure_clockwise(polygon).points)
    faces: dict = {}

    def _validate() -> None:
        if len(reference) < 3:
            raise ValueError("Perimeter boundary must have at least 3 points")
        if float(thickness) <= 0.0:
            raise ValueError("Wall thickness must be greater than 0")
        if not wall_assembly_id:
            raise ValueError("wall_assembly_id must not be empty")
        if not any(s.id == storey_id for s in building.storeys):
            raise ValueError(f"Unknown storey: {storey_id}")
        ref_poly = Polygon2D(points=list(reference))
        t = float(thickness)
        if reference_side is ReferenceSide.INSIDE:
            faces["inside"] = list(reference)
            faces["outside"] = offset_polygon(ref_poly, t).points
        else:
            faces["inside"] = offset_polygon(ref_poly, -t).points
            faces["outside"] = list(reference)

    def _mutate() -> Perimeter:
        inside: List[Point2] = faces["inside"]
        outside: List[Point2] = faces["outside"]
        n = len(reference)
        perimeter_id = _new_id("perimeter")
        corner_ids = [_new_id("corner") for _ in range(n)]
        wall_ids = [_new_id("wall") for _ in range(n)]

        for i in range(n):
            interior = _interior_angle_deg(inside[i - 1], inside[i], inside[(i + 1) % n])
            building.corners[corner_ids[i]] = PerimeterCorner(
                id=corner_ids[i],
                perimeter_id=perimeter_id,
                reference_point=reference[i],
                inside_point=inside[i],
                outside_point=outside[i],
                previous_wall_id=wall_ids[(i + n - 1) % n],
                next_wall_id=wall_ids[i],
                interior_angle=interior,
                exterior_angle=360.0 - interior,
            )
        for i in range(n):
            j = (i + 1) % n
            length = _distance(reference[i], reference[j])
            direction = (
                ((reference[j][0] - reference[i][0]) / length, (reference[j][1] - reference[i][1]) / length)
                if length > EPS_POS
                else (1.0, 0.0)
            )
            building.walls[wall_ids[i]] = PerimeterWall(
                id=wall_ids[i],
                perimeter_id=perimeter_id,
                start_corner_id=corner_ids[i],
                end_corner_id=corner_ids[j],
                thickness=float(thickness),
                wall_assembly_id=wall_assembly_id,
                inside_length=_distance(inside[i], inside[j]),
                outside_length=_distance(outside[i], outside[j]),
                direction=direction,
                base_ring_beam_assembly_id=base_ring_beam_assembly_id,
                top_ring_beam_assembly_id=top_ring_beam_assembly_id,
            )
        perimeter = Perimeter(
            id=perimeter_id,
            storey_id=storey_id,
            reference_side=reference_side,
            reference_polygon=list(reference),
            corner_ids=corner_ids,
            wall_ids=wall_ids,
            outer_polygon=list(outside),
            inner_polygon=list(inside),
        )
        building.perimeters[perimeter_id] = perimeter
        logger.debug("Created perimeter %s with %d corners on storey %s", perimeter_id, n, storey_id)
        return perimeter

    return execute_op(
        building,
        op_name="add_perimeter",
        args={
            "storey_id": storey_id,
            "point_count": len(polygon.points),
            "wall_assembly_id": wall_assembly_id,
            "thickness": float(thickness),
            "base_ring_beam_assembly_id": base_ring_beam_assembly_id,
            "top_ring_beam_assembly_id": top_ring_beam_assembly_id,
            "reference_side": reference_side.value,
        },
        ctx=ctx,
        validate=_validate,
        mutate=_mutate,
    )


def get_perimeter_by_id(building: Building, perimeter_id: str) -> Perimeter:
    try:
        return building.perimeters[perimeter_id]
    except KeyError:
        raise ValueError(f"Unknown perimeter: {perimeter_id}") from None


def get_perimeter_corners_by_id(building: Building, perimeter_id: str) -> List[PerimeterCorner]:
    perimeter = get_perimeter_by_id(building, perimeter_id)
    return [building.corners[cid] for cid in perimeter.corner_ids]


def get_perimeter_walls_by_id(building: Building, perimeter_id: str) -> List[PerimeterWall]:
    perimeter = get_perimeter_by_id(building, perimeter_id)
    return [building.walls[wid] for wid in perimeter.wall_ids]


def add_building_constraint(
    building: Building,
    constraint: BuildingConstraint,
    *,
    ctx: Optional[OpContext] = None,
) -> BuildingConstraint:
    def _validate() -> None:
        for node in (constraint.node_a, constraint.node_b):
            if node not in building.corners:
                raise ValueError(f"Constraint references unknown corner: {node}")
        if constraint.node_a == constraint.node_b:
            raise ValueError("Constraint nodes must differ")
        if constraint.type == "distance" and (constraint.length is None or constraint.length <= 0.0):
            raise ValueError("Distance constraint requires a positive length")
        if constraint in building.constraints:
            raise ValueError(f"Duplicate constraint: {constraint.to_dict()}")

    def _mutate() -> BuildingConstraint:
        building.constraints.append(constraint)
        return constraint

    return execute_op(
        building,
        op_name="add_building_constraint",
        args=constraint.to_dict(),
        ctx=ctx,
        validate=_validate,
        mutate=_mutate,
    )
