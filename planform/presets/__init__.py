from planform.presets.defaults import default_config
from planform.presets.reference import ReferencePolygons, derive_reference_polygons
from planform.presets.registry import (
    available_presets,
    get_bounds,
    get_polygon_points,
    get_side_lengths,
    kind_for_config,
    preset_definition,
    validate_config,
)
from planform.presets.types import (
    ALLOWED_ROTATIONS,
    BasePresetConfig,
    LShapedPresetConfig,
    PresetBounds,
    PresetConfig,
    PresetConfigError,
    PresetConstructionError,
    PresetKind,
    RectangularPresetConfig,
    ReferenceSide,
)

__all__ = [
    "ALLOWED_ROTATIONS",
    "BasePresetConfig",
    "LShapedPresetConfig",
    "PresetBounds",
    "PresetConfig",
    "PresetConfigError",
    "PresetConstructionError",
    "PresetKind",
    "RectangularPresetConfig",
    "ReferencePolygons",
    "ReferenceSide",
    "available_presets",
    "default_config",
    "derive_reference_polygons",
    "get_bounds",
    "get_polygon_points",
    "get_side_lengths",
    "kind_for_config",
    "preset_definition",
    "validate_config",
]
