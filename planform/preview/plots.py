from __future__ import annotations

from pathlib import Path
from typing import Sequence

import numpy as np
import matplotlib
matplotlib.use("Agg")  # headless-safe for servers/CI
import matplotlib.pyplot as plt  # noqa: E402

from planform.geometry.primitives import Point2  # noqa: E402
from planform.presets.reference import derive_reference_polygons  # noqa: E402
from planform.presets.types import ReferenceSide  # noqa: E402
from planform.preview.reference_preview import format_length  # noqa: E402


def _closed(points: Sequence[Point2]) -> np.ndarray:
    arr = np.asarray(points, dtype=float)
    return np.vstack([arr, arr[:1]])


def _annotate_edges(ax, points: Sequence[Point2], color: str) -> None:
    arr = _closed(points)
    for a, b in zip(arr[:-1], arr[1:]):
        length = float(np.hypot(*(b - a)))
        if length <= 0.0:
            continue
        mid = (a + b) / 2.0
        ax.annotate(format_length(length), xy=(mid[0], mid[1]), ha="center", va="center", fontsize=7, color=color)


def save_reference_preview_png(
    points: Sequence[Point2],
    thickness: float,
    reference_side: ReferenceSide,
    outpath: Path,
    *,
    title: str = "Perimeter preview",
) -> Path:
    """
    Save a plan view of the reference polygon (solid) and the polygon on the
    other face of the wall (dashed), both with edge lengths.
    """
    polys = derive_reference_polygons(points, thickness, reference_side)
    outpath.parent.mkdir(parents=True, exist_ok=True)

    fig = plt.figure(figsize=(6, 6))
    ax = fig.add_subplot(111)
    ref = _closed(polys.reference.points)
    ax.fill(ref[:, 0], ref[:, 1], facecolor="#dbe7ff", edgecolor="#3a5ccc", linewidth=2.0, label=f"reference ({reference_side.value})")
    _annotate_edges(ax, polys.reference.points, "#1f2f66")
    if polys.derived is not None:
        der = _closed(polys.derived.points)
        ax.plot(der[:, 0], der[:, 1], color="#8c8c8c", linestyle="--", linewidth=1.0, label="derived")
        _annotate_edges(ax, polys.derived.points, "#333333")
    ax.set_aspect("equal", adjustable="datalim")
    ax.set_title(title)
    ax.set_xlabel("X (mm)")
    ax.set_ylabel("Y (mm)")
    ax.grid(True, alpha=0.3)
    ax.legend(loc="upper right", fontsize=8)
    fig.tight_layout()
    fig.savefig(outpath, dpi=150, bbox_inches="tight")
    plt.close(fig)
    return outpath
