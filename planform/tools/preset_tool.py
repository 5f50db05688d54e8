from __future__ import annotations

import logging
from typing import Callable, List, Optional, Protocol, Sequence

from planform.geometry.polygon2d import polygon_bounds
from planform.geometry.primitives import Bounds2D, Point2, Polygon2D
from planform.model.constraints import generate_preset_constraints
from planform.model.schema import BuildingConstraint, Perimeter, PerimeterCorner, PerimeterWall
from planform.presets.registry import available_presets
from planform.presets.types import PresetConfig, PresetKind, ReferenceSide
from planform.tools.placement import (
    Activate,
    AnchorMode,
    ClearPreset,
    Deactivate,
    EnsureMode,
    KeyDown,
    PlacementEffect,
    PlacementEvent,
    PlacementToolState,
    PlacePerimeter,
    PointerDown,
    PointerMove,
    PopTool,
    SelectPreset,
    dispatch,
)

logger = logging.getLogger(__name__)


class EditorContext(Protocol):
    """Collaborators the placement tool calls out to."""

    def get_active_storey_id(self) -> str: ...

    def add_perimeter(
        self,
        storey_id: str,
        polygon: Polygon2D,
        wall_assembly_id: str,
        thickness: float,
        base_ring_beam_assembly_id: Optional[str],
        top_ring_beam_assembly_id: Optional[str],
        reference_side: ReferenceSide,
    ) -> Perimeter: ...

    def get_perimeter_corners_by_id(self, perimeter_id: str) -> List[PerimeterCorner]: ...

    def get_perimeter_walls_by_id(self, perimeter_id: str) -> List[PerimeterWall]: ...

    def add_building_constraint(self, constraint: BuildingConstraint) -> object: ...

    def replace_selection(self, ids: Sequence[str]) -> None: ...

    def fit_to_view(self, bounds: Bounds2D) -> None: ...

    def ensure_mode(self, mode: str) -> None: ...

    def pop_tool(self) -> None: ...


ConstraintGenerator = Callable[
    [Sequence[PerimeterCorner], Sequence[PerimeterWall], ReferenceSide],
    List[BuildingConstraint],
]


class PerimeterPresetTool:
    id = "perimeter.preset"
    name = "Perimeter Presets"
    hotkey = "p"
    cursor = "crosshair"
    category = "walls"

    def __init__(
        self,
        context: EditorContext,
        *,
        anchor_mode: AnchorMode = AnchorMode.CENTER,
        constraint_generator: ConstraintGenerator = generate_preset_constraints,
    ) -> None:
        self.context = context
        self.anchor_mode = anchor_mode
        self.constraint_generator = constraint_generator
        self._state = PlacementToolState()

    @property
    def state(self) -> PlacementToolState:
        return self._state

    # Inspector / dialog API

    def get_available_presets(self) -> List[PresetKind]:
        return available_presets()

    def set_active_preset(self, kind: PresetKind, config: PresetConfig) -> None:
        self._apply(SelectPreset(kind=kind, config=config))

    def clear_active_preset(self) -> None:
        self._apply(ClearPreset())

    def get_current_config(self) -> Optional[PresetConfig]:
        return self._state.preset_config

    def is_placing(self) -> bool:
        return self._state.preset_config is not None

    def get_preview_polygon(self) -> Optional[Polygon2D]:
        return self._state.preview_polygon

    # Canvas events

    def handle_pointer_move(self, point: Point2) -> bool:
        return self._apply(PointerMove(point=point))

    def handle_pointer_down(self, point: Point2) -> bool:
        return self._apply(PointerDown(point=point))

    def handle_key_down(self, key: str) -> bool:
        return self._apply(KeyDown(key=key))

    def on_activate(self) -> None:
        self._apply(Activate())

    def on_deactivate(self) -> None:
        self._apply(Deactivate())

    # Internals

    def _apply(self, event: PlacementEvent) -> bool:
        transition = dispatch(self._state, event, anchor_mode=self.anchor_mode)
        logger.debug("%s: %s -> %s", type(event).__name__, self._state.phase.value, transition.state.phase.value)
        self._state = transition.state
        for effect in transition.effects:
            self._run_effect(effect)
        return transition.handled

    def _run_effect(self, effect: PlacementEffect) -> None:
        if isinstance(effect, EnsureMode):
            self.context.ensure_mode(effect.mode)
        elif isinstance(effect, PlacePerimeter):
            self._place_perimeter(effect)
        elif isinstance(effect, PopTool):
            self.context.pop_tool()
        else:
            raise ValueError(f"Unsupported placement effect: {effect!r}")

    def _place_perimeter(self, effect: PlacePerimeter) -> Optional[Perimeter]:
        config = effect.config
        try:
            storey_id = self.context.get_active_storey_id()
            perimeter = self.context.add_perimeter(
                storey_id,
                effect.polygon,
                config.wall_assembly_id,
                config.thickness,
                config.base_ring_beam_assembly_id,
                config.top_ring_beam_assembly_id,
                config.reference_side,
            )
        except Exception:
            logger.error("Failed to create perimeter from preset", exc_info=True)
            return None

        self._add_constraints(perimeter, config.reference_side)
        try:
            self.context.replace_selection([perimeter.id])
            self.context.fit_to_view(polygon_bounds(perimeter.outer_polygon))
        except Exception:
            logger.error("Failed to focus new perimeter %s", perimeter.id, exc_info=True)
        return perimeter

    def _add_constraints(self, perimeter: Perimeter, reference_side: ReferenceSide) -> None:
        try:
            corners = self.context.get_perimeter_corners_by_id(perimeter.id)
            walls = self.context.get_perimeter_walls_by_id(perimeter.id)
            constraints = self.constraint_generator(corners, walls, reference_side)
        except Exception:
            logger.error("Failed to generate constraints for perimeter %s", perimeter.id, exc_info=True)
            return
        for constraint in constraints:
            try:
                self.context.add_building_constraint(constraint)
            except Exception as exc:
                logger.warning("Failed to add preset constraint %s: %s", constraint.to_dict(), exc)
