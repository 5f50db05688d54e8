from planform.model.base import OpContext, building_hash
from planform.model.constraints import generate_preset_constraints, reference_side_to_constraint_side
from planform.model.perimeter_ops import (
    add_building_constraint,
    add_perimeter,
    add_storey,
    get_perimeter_by_id,
    get_perimeter_corners_by_id,
    get_perimeter_walls_by_id,
)
from planform.model.schema import Building, BuildingConstraint, Perimeter, PerimeterCorner, PerimeterWall, Storey

__all__ = [
    "Building",
    "BuildingConstraint",
    "OpContext",
    "Perimeter",
    "PerimeterCorner",
    "PerimeterWall",
    "Storey",
    "add_building_constraint",
    "add_perimeter",
    "add_storey",
    "building_hash",
    "generate_preset_constraints",
    "get_perimeter_by_id",
    "get_perimeter_corners_by_id",
    "get_perimeter_walls_by_id",
    "reference_side_to_constraint_side",
]
