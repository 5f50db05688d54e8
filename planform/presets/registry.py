from __future__ import annotations

from dataclasses import dataclass
from typing import Callable, Dict, List

from planform.geometry.primitives import Point2
from planform.presets.l_shaped import (
    l_shaped_bounds,
    l_shaped_polygon_points,
    l_shaped_side_lengths,
    validate_l_shaped_config,
)
from planform.presets.rectangular import (
    rectangular_bounds,
    rectangular_polygon_points,
    validate_rectangular_config,
)
from planform.presets.types import (
    LShapedPresetConfig,
    PresetBounds,
    PresetConfig,
    PresetKind,
    RectangularPresetConfig,
)


@dataclass(frozen=True)
class PresetDefinition:
    kind: PresetKind
    name: str
    config_type: type
    polygon_points: Callable[..., List[Point2]]
    bounds: Callable[..., PresetBounds]
    validate: Callable[..., bool]


_PRESETS: Dict[PresetKind, PresetDefinition] = {
    PresetKind.RECTANGULAR: PresetDefinition(
        kind=PresetKind.RECTANGULAR,
        name="Rectangular",
        config_type=RectangularPresetConfig,
        polygon_points=rectangular_polygon_points,
        bounds=rectangular_bounds,
        validate=validate_rectangular_config,
    ),
    PresetKind.L_SHAPED: PresetDefinition(
        kind=PresetKind.L_SHAPED,
        name="L-Shaped",
        config_type=LShapedPresetConfig,
        polygon_points=l_shaped_polygon_points,
        bounds=l_shaped_bounds,
        validate=validate_l_shaped_config,
    ),
}


def available_presets() -> List[PresetKind]:
    return list(_PRESETS)


def preset_definition(kind: PresetKind) -> PresetDefinition:
    try:
        return _PRESETS[kind]
    except KeyError:
        raise ValueError(f"Unsupported preset kind: {kind}") from None


def _checked(kind: PresetKind, config: PresetConfig) -> PresetDefinition:
    definition = preset_definition(kind)
    if not isinstance(config, definition.config_type):
        raise TypeError(f"{definition.name} preset expects {definition.config_type.__name__}, got {type(config).__name__}")
    return definition


def kind_for_config(config: PresetConfig) -> PresetKind:
    for definition in _PRESETS.values():
        if isinstance(config, definition.config_type):
            return definition.kind
    raise ValueError(f"No preset accepts config type {type(config).__name__}")


def get_polygon_points(kind: PresetKind, config: PresetConfig) -> List[Point2]:
    return _checked(kind, config).polygon_points(config)


def get_bounds(kind: PresetKind, config: PresetConfig) -> PresetBounds:
    return _checked(kind, config).bounds(config)


def validate_config(kind: PresetKind, config: PresetConfig) -> bool:
    definition = preset_definition(kind)
    if not isinstance(config, definition.config_type):
        return False
    return bool(definition.validate(config))


def get_side_lengths(kind: PresetKind, config: PresetConfig) -> List[float]:
    if kind is not PresetKind.L_SHAPED:
        raise ValueError(f"Side lengths are only defined for the L-shaped preset, not {kind.value}")
    _checked(kind, config)
    return l_shaped_side_lengths(config)
