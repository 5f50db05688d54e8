from __future__ import annotations

from planform.presets.types import LShapedPresetConfig, PresetConfig, PresetKind, RectangularPresetConfig, ReferenceSide


DEFAULT_THICKNESS = 420.0
DEFAULT_WALL_ASSEMBLY_ID = "default"


def default_config(kind: PresetKind, *, wall_assembly_id: str = DEFAULT_WALL_ASSEMBLY_ID) -> PresetConfig:
    if kind is PresetKind.RECTANGULAR:
        return RectangularPresetConfig(
            thickness=DEFAULT_THICKNESS,
            wall_assembly_id=wall_assembly_id,
            reference_side=ReferenceSide.INSIDE,
            width=10000.0,
            length=7000.0,
        )
    if kind is PresetKind.L_SHAPED:
        return LShapedPresetConfig(
            thickness=DEFAULT_THICKNESS,
            wall_assembly_id=wall_assembly_id,
            reference_side=ReferenceSide.INSIDE,
            width1=8000.0,
            length1=6000.0,
            width2=4000.0,
            length2=3000.0,
            rotation=0,
        )
    raise ValueError(f"Unsupported preset kind: {kind}")
