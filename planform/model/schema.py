from __future__ import annotations

from dataclasses import asdict, dataclass, field
from typing import Any, Dict, List, Literal, Optional, Tuple

from planform.geometry.polygon2d import polygon_bounds
from planform.geometry.primitives import Bounds2D, Point2
from planform.presets.types import ReferenceSide


@dataclass
class Storey:
    id: str
    name: str
    level: int = 0
    floor_height: float = 2800.0


@dataclass
class PerimeterCorner:
    id: str
    perimeter_id: str
    reference_point: Point2
    inside_point: Point2
    outside_point: Point2
    previous_wall_id: str
    next_wall_id: str
    interior_angle: float = 0.0
    exterior_angle: float = 0.0
    constructed_by_wall: Literal["previous", "next"] = "next"


@dataclass
class PerimeterWall:
    id: str
    perimeter_id: str
    start_corner_id: str
    end_corner_id: str
    thickness: float
    wall_assembly_id: str
    inside_length: float = 0.0
    outside_length: float = 0.0
    direction: Tuple[float, float] = (1.0, 0.0)
    base_ring_beam_assembly_id: Optional[str] = None
    top_ring_beam_assembly_id: Optional[str] = None


@dataclass
class Perimeter:
    id: str
    storey_id: str
    reference_side: ReferenceSide
    reference_polygon: List[Point2]
    corner_ids: List[str] = field(default_factory=list)
    wall_ids: List[str] = field(default_factory=list)
    outer_polygon: List[Point2] = field(default_factory=list)
    inner_polygon: List[Point2] = field(default_factory=list)

    def outer_bounds(self) -> Bounds2D:
        return polygon_bounds(self.outer_polygon)


ConstraintType = Literal["distance", "horizontal", "vertical"]


@dataclass(frozen=True)
class BuildingConstraint:
    type: ConstraintType
    node_a: str
    node_b: str
    side: Optional[Literal["left", "right"]] = None
    length: Optional[float] = None

    def to_dict(self) -> Dict[str, Any]:
        out: Dict[str, Any] = {"type": self.type, "node_a": self.node_a, "node_b": self.node_b}
        if self.side is not None:
            out["side"] = self.side
        if self.length is not None:
            out["length"] = float(self.length)
        return out


@dataclass
class Building:
    name: str = ""
    storeys: List[Storey] = field(default_factory=list)
    active_storey_id: Optional[str] = None
    perimeters: Dict[str, Perimeter] = field(default_factory=dict)
    corners: Dict[str, PerimeterCorner] = field(default_factory=dict)
    walls: Dict[str, PerimeterWall] = field(default_factory=dict)
    constraints: List[BuildingConstraint] = field(default_factory=list)
    history: List[Dict[str, Any]] = field(default_factory=list)

    def to_dict(self) -> Dict[str, Any]:
        def _perimeter(p: Perimeter) -> Dict[str, Any]:
            d = asdict(p)
            d["reference_side"] = p.reference_side.value
            return d

        return {
            "name": self.name,
            "active_storey_id": self.active_storey_id,
            "storeys": [asdict(s) for s in self.storeys],
            "perimeters": [_perimeter(p) for p in self.perimeters.values()],
            "corners": [asdict(c) for c in self.corners.values()],
            "walls": [asdict(w) for w in self.walls.values()],
            "constraints": [c.to_dict() for c in self.constraints],
        }
