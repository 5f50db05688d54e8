from __future__ import annotations

from dataclasses import dataclass
from enum import Enum
from typing import Optional, Union


class ReferenceSide(Enum):
    """Which face of the perimeter walls the entered dimensions describe."""

    INSIDE = "inside"
    OUTSIDE = "outside"


class PresetKind(Enum):
    RECTANGULAR = "rectangular"
    L_SHAPED = "l-shaped"


class PresetConstructionError(ValueError):
    """Raised when a preset cannot build a polygon from its parameters."""


class PresetConfigError(ValueError):
    """Raised for malformed preset configuration payloads."""


ALLOWED_ROTATIONS = (0, 90, 180, 270)


@dataclass(frozen=True)
class BasePresetConfig:
    thickness: float
    wall_assembly_id: str
    reference_side: ReferenceSide = ReferenceSide.INSIDE
    base_ring_beam_assembly_id: Optional[str] = None
    top_ring_beam_assembly_id: Optional[str] = None


@dataclass(frozen=True)
class RectangularPresetConfig(BasePresetConfig):
    width: float = 0.0
    length: float = 0.0


@dataclass(frozen=True)
class LShapedPresetConfig(BasePresetConfig):
    width1: float = 0.0
    length1: float = 0.0
    width2: float = 0.0
    length2: float = 0.0
    rotation: int = 0


PresetConfig = Union[RectangularPresetConfig, LShapedPresetConfig]


@dataclass(frozen=True)
class PresetBounds:
    width: float
    height: float
