from __future__ import annotations

import logging
from typing import List, Optional, Protocol, Sequence

from planform.geometry.primitives import Bounds2D, Polygon2D
from planform.model import perimeter_ops
from planform.model.schema import Building, BuildingConstraint, Perimeter, PerimeterCorner, PerimeterWall
from planform.presets.types import ReferenceSide
from planform.tools.placement import ESCAPE_KEY

logger = logging.getLogger(__name__)


class Tool(Protocol):
    id: str

    def on_activate(self) -> None: ...

    def on_deactivate(self) -> None: ...

    def handle_key_down(self, key: str) -> bool: ...


class EditorSession:
    """
    In-memory editor backing the placement tool: building model, selection,
    viewport, editing mode and the active-tool stack.
    """

    def __init__(self, building: Optional[Building] = None) -> None:
        self.building = building if building is not None else Building()
        self.selection: List[str] = []
        self.viewport_bounds: Optional[Bounds2D] = None
        self.mode: str = "select"
        self._tools: List[Tool] = []

    # Tool stack

    @property
    def active_tool(self) -> Optional[Tool]:
        return self._tools[-1] if self._tools else None

    @property
    def tool_stack(self) -> List[str]:
        return [t.id for t in self._tools]

    def push_tool(self, tool: Tool) -> None:
        current = self.active_tool
        if current is not None:
            current.on_deactivate()
        self._tools.append(tool)
        tool.on_activate()

    def pop_tool(self) -> None:
        if not self._tools:
            logger.warning("pop_tool called with an empty tool stack")
            return
        tool = self._tools.pop()
        tool.on_deactivate()
        current = self.active_tool
        if current is not None:
            current.on_activate()

    def handle_key_down(self, key: str) -> bool:
        tool = self.active_tool
        if tool is None:
            return False
        if tool.handle_key_down(key):
            return True
        if key == ESCAPE_KEY:
            self.pop_tool()
            return True
        return False

    # Model

    def get_active_storey_id(self) -> str:
        if self.building.active_storey_id is None:
            raise ValueError("No active storey")
        return self.building.active_storey_id

    def add_perimeter(
        self,
        storey_id: str,
        polygon: Polygon2D,
        wall_assembly_id: str,
        thickness: float,
        base_ring_beam_assembly_id: Optional[str] = None,
        top_ring_beam_assembly_id: Optional[str] = None,
        reference_side: ReferenceSide = ReferenceSide.INSIDE,
    ) -> Perimeter:
        return perimeter_ops.add_perimeter(
            self.building,
            storey_id=storey_id,
            polygon=polygon,
            wall_assembly_id=wall_assembly_id,
            thickness=thickness,
            base_ring_beam_assembly_id=base_ring_beam_assembly_id,
            top_ring_beam_assembly_id=top_ring_beam_assembly_id,
            reference_side=reference_side,
        )

    def get_perimeter_corners_by_id(self, perimeter_id: str) -> List[PerimeterCorner]:
        return perimeter_ops.get_perimeter_corners_by_id(self.building, perimeter_id)

    def get_perimeter_walls_by_id(self, perimeter_id: str) -> List[PerimeterWall]:
        return perimeter_ops.get_perimeter_walls_by_id(self.building, perimeter_id)

    def add_building_constraint(self, constraint: BuildingConstraint) -> BuildingConstraint:
        return perimeter_ops.add_building_constraint(self.building, constraint)

    # Selection / viewport

    def replace_selection(self, ids: Sequence[str]) -> None:
        self.selection = [str(i) for i in ids]

    def fit_to_view(self, bounds: Bounds2D) -> None:
        self.viewport_bounds = bounds

    def ensure_mode(self, mode: str) -> None:
        self.mode = str(mode)
