from __future__ import annotations

import logging
from dataclasses import dataclass
from enum import Enum
from typing import List, Optional, Sequence, Tuple, Union

from planform.geometry.polygon2d import ensure_clockwise, translate_points
from planform.geometry.primitives import Point2, Polygon2D
from planform.presets.registry import get_polygon_points
from planform.presets.types import PresetConfig, PresetKind

logger = logging.getLogger(__name__)


WALLS_MODE = "walls"
ESCAPE_KEY = "Escape"


class PlacementPhase(Enum):
    IDLE = "idle"
    CONFIGURING = "configuring"
    PREVIEWING = "previewing"


class AnchorMode(Enum):
    """Which point of the preset polygon lands on the pointer."""

    CENTER = "center"
    FIRST_VERTEX = "first-vertex"


@dataclass(frozen=True)
class PlacementToolState:
    active_preset: Optional[PresetKind] = None
    preset_config: Optional[PresetConfig] = None
    preview_anchor: Optional[Point2] = None
    preview_polygon: Optional[Polygon2D] = None

    @property
    def phase(self) -> PlacementPhase:
        if self.active_preset is None or self.preset_config is None:
            return PlacementPhase.IDLE
        if self.preview_anchor is None:
            return PlacementPhase.CONFIGURING
        return PlacementPhase.PREVIEWING


EMPTY_STATE = PlacementToolState()


# Events


@dataclass(frozen=True)
class SelectPreset:
    kind: PresetKind
    config: PresetConfig


@dataclass(frozen=True)
class ClearPreset:
    pass


@dataclass(frozen=True)
class PointerMove:
    point: Point2


@dataclass(frozen=True)
class PointerDown:
    point: Point2


@dataclass(frozen=True)
class KeyDown:
    key: str


@dataclass(frozen=True)
class Activate:
    pass


@dataclass(frozen=True)
class Deactivate:
    pass


PlacementEvent = Union[SelectPreset, ClearPreset, PointerMove, PointerDown, KeyDown, Activate, Deactivate]


# Effects


@dataclass(frozen=True)
class EnsureMode:
    mode: str


@dataclass(frozen=True)
class PlacePerimeter:
    polygon: Polygon2D
    config: PresetConfig


@dataclass(frozen=True)
class PopTool:
    pass


PlacementEffect = Union[EnsureMode, PlacePerimeter, PopTool]


@dataclass(frozen=True)
class Transition:
    state: PlacementToolState
    effects: Tuple[PlacementEffect, ...] = ()
    handled: bool = False


def place_points(points: Sequence[Point2], anchor: Point2, anchor_mode: AnchorMode = AnchorMode.CENTER) -> List[Point2]:
    if anchor_mode is AnchorMode.FIRST_VERTEX and points:
        first = points[0]
        points = translate_points(points, (-first[0], -first[1]))
    return translate_points(points, anchor)


def build_placed_polygon(
    kind: PresetKind,
    config: PresetConfig,
    anchor: Point2,
    anchor_mode: AnchorMode = AnchorMode.CENTER,
) -> Polygon2D:
    return Polygon2D(points=place_points(get_polygon_points(kind, config), anchor, anchor_mode))


def _preview(state: PlacementToolState, anchor_mode: AnchorMode) -> Optional[Polygon2D]:
    if state.active_preset is None or state.preset_config is None or state.preview_anchor is None:
        return None
    try:
        return build_placed_polygon(state.active_preset, state.preset_config, state.preview_anchor, anchor_mode)
    except (ValueError, TypeError) as exc:
        logger.warning("Failed to generate preview polygon: %s", exc)
        return None


def _with_preview(state: PlacementToolState, anchor_mode: AnchorMode) -> PlacementToolState:
    return PlacementToolState(
        active_preset=state.active_preset,
        preset_config=state.preset_config,
        preview_anchor=state.preview_anchor,
        preview_polygon=_preview(state, anchor_mode),
    )


def _commit(state: PlacementToolState, point: Point2, anchor_mode: AnchorMode) -> Transition:
    if state.active_preset is None or state.preset_config is None:
        raise ValueError("Cannot commit placement without an active preset")
    try:
        polygon = build_placed_polygon(state.active_preset, state.preset_config, point, anchor_mode)
        polygon = ensure_clockwise(polygon)
    except Exception:
        logger.error("Failed to create perimeter from preset", exc_info=True)
        return Transition(state=EMPTY_STATE, effects=(PopTool(),), handled=True)
    return Transition(
        state=EMPTY_STATE,
        effects=(PlacePerimeter(polygon=polygon, config=state.preset_config), PopTool()),
        handled=True,
    )


def dispatch(
    state: PlacementToolState,
    event: PlacementEvent,
    *,
    anchor_mode: AnchorMode = AnchorMode.CENTER,
) -> Transition:
    """
    Advance the placement tool by one event.

    Pure: returns the next state plus the side effects the caller has to
    carry out, in order. ``handled`` is False when the event should bubble
    up to the tool manager.
    """
    if isinstance(event, SelectPreset):
        nxt = PlacementToolState(
            active_preset=event.kind,
            preset_config=event.config,
            preview_anchor=state.preview_anchor,
        )
        return Transition(state=_with_preview(nxt, anchor_mode), handled=True)

    if isinstance(event, ClearPreset):
        return Transition(state=EMPTY_STATE, handled=True)

    if isinstance(event, PointerMove):
        if state.phase is PlacementPhase.IDLE:
            return Transition(state=state)
        nxt = PlacementToolState(
            active_preset=state.active_preset,
            preset_config=state.preset_config,
            preview_anchor=(float(event.point[0]), float(event.point[1])),
        )
        return Transition(state=_with_preview(nxt, anchor_mode), handled=True)

    if isinstance(event, PointerDown):
        if state.phase is PlacementPhase.IDLE:
            return Transition(state=state)
        return _commit(state, (float(event.point[0]), float(event.point[1])), anchor_mode)

    if isinstance(event, KeyDown):
        if event.key == ESCAPE_KEY and state.phase is not PlacementPhase.IDLE:
            return Transition(state=EMPTY_STATE, handled=True)
        return Transition(state=state)

    if isinstance(event, Activate):
        nxt = PlacementToolState(active_preset=state.active_preset, preset_config=state.preset_config)
        return Transition(state=nxt, effects=(EnsureMode(mode=WALLS_MODE),), handled=True)

    if isinstance(event, Deactivate):
        return Transition(state=EMPTY_STATE, handled=True)

    raise ValueError(f"Unsupported placement event: {event!r}")
