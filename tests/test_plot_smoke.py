from pathlib import Path

from planform.presets import ReferenceSide
from planform.preview.plots import save_reference_preview_png


def test_plot_smoke(tmp_path: Path):
    # 8 x 6 m L shape measured on the inside face
    points = [(-4000.0, -3000.0), (4000.0, -3000.0), (4000.0, 0.0), (0.0, 0.0), (0.0, 3000.0), (-4000.0, 3000.0)]
    png = save_reference_preview_png(points, 420.0, ReferenceSide.INSIDE, tmp_path / "plots" / "l_inside.png")
    assert png.exists()
    assert png.stat().st_size > 0


def test_plot_smoke_collapsed_offset(tmp_path: Path):
    square = [(-400.0, -400.0), (400.0, -400.0), (400.0, 400.0), (-400.0, 400.0)]
    png = save_reference_preview_png(square, 400.0, ReferenceSide.OUTSIDE, tmp_path / "collapsed.png")
    assert png.exists()
