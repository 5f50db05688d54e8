from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, List, Tuple


Point2 = Tuple[float, float]


@dataclass(frozen=True)
class Polygon2D:
    points: List[Point2]

    def __post_init__(self) -> None:
        if len(self.points) < 3:
            raise ValueError("Polygon2D requires at least 3 points")

    @classmethod
    def from_points(cls, points: Iterable[Tuple[float, float]]) -> "Polygon2D":
        return cls(points=[(float(x), float(y)) for x, y in points])

    def to_list(self) -> List[List[float]]:
        return [[float(x), float(y)] for x, y in self.points]


@dataclass(frozen=True)
class Bounds2D:
    min_x: float
    min_y: float
    max_x: float
    max_y: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def height(self) -> float:
        return self.max_y - self.min_y

    @property
    def center(self) -> Point2:
        return ((self.min_x + self.max_x) * 0.5, (self.min_y + self.max_y) * 0.5)

    def to_dict(self) -> dict:
        return {
            "min": [float(self.min_x), float(self.min_y)],
            "max": [float(self.max_x), float(self.max_y)],
        }
