from __future__ import annotations

import pytest

from planform.presets import ReferenceSide, derive_reference_polygons
from planform.preview import build_reference_preview, format_length, readable_angle, render_svg, to_path


RECT = [(-2000.0, -3000.0), (2000.0, -3000.0), (2000.0, 3000.0), (-2000.0, 3000.0)]


def test_format_length_units() -> None:
    assert format_length(4000.0) == "4.00m"
    assert format_length(420.0, "mm") == "420mm"
    assert format_length(420.0, "cm") == "42.0cm"


def test_to_path() -> None:
    assert to_path([]) == ""
    assert to_path([(0.0, 0.0), (1.0, 2.0), (3.5, 4.0)]) == "M 0 0 L 1 2 L 3.5 4 Z"


def test_readable_angle_never_upside_down() -> None:
    assert readable_angle(1.0, 0.0) == pytest.approx(0.0)
    assert readable_angle(-1.0, 0.0) == pytest.approx(0.0)
    assert readable_angle(0.0, 1.0) == pytest.approx(90.0)
    assert readable_angle(-1.0, -1.0) == pytest.approx(45.0)
    assert readable_angle(-1.0, 1.0) == pytest.approx(-45.0)


def test_derived_polygon_follows_reference_side() -> None:
    inside = derive_reference_polygons(RECT, 420.0, ReferenceSide.INSIDE)
    assert inside.interior is inside.reference
    assert inside.exterior is not None
    assert max(x for x, _ in inside.exterior.points) == pytest.approx(2420.0)

    outside = derive_reference_polygons(RECT, 420.0, ReferenceSide.OUTSIDE)
    assert outside.exterior is outside.reference
    assert outside.interior is not None
    assert max(x for x, _ in outside.interior.points) == pytest.approx(1580.0)


def test_inside_preview_scales_exterior_into_box_with_y_up() -> None:
    preview = build_reference_preview(RECT, 420.0, ReferenceSide.INSIDE, size=200.0)
    assert preview.show_derived
    ys = [y for _, y in preview.derived_points]
    assert min(ys) == pytest.approx(0.0)
    assert max(ys) == pytest.approx(200.0)
    # First reference corner has the smallest model Y, so it ends up at the bottom.
    assert preview.reference_points[0][1] > 100.0
    assert preview.reference_path.startswith("M ")


def test_labels_cover_both_polygons() -> None:
    preview = build_reference_preview(RECT, 420.0, ReferenceSide.INSIDE)
    ref = [label for label in preview.labels if label.role == "reference"]
    der = [label for label in preview.labels if label.role == "derived"]
    assert [label.text for label in ref] == ["4.00m", "6.00m", "4.00m", "6.00m"]
    assert [label.text for label in der] == ["4.84m", "6.84m", "4.84m", "6.84m"]
    assert ref[0].above_line
    assert not ref[2].above_line
    assert not der[0].above_line
    assert all(-90.0 <= label.angle_deg <= 90.0 for label in preview.labels)


def test_label_units_can_change() -> None:
    preview = build_reference_preview(RECT, 420.0, ReferenceSide.INSIDE, unit="mm")
    assert preview.labels[0].text == "4000mm"


def test_collapsed_derived_polygon_is_hidden() -> None:
    square = [(-400.0, -400.0), (400.0, -400.0), (400.0, 400.0), (-400.0, 400.0)]
    preview = build_reference_preview(square, 400.0, ReferenceSide.OUTSIDE)
    assert not preview.show_derived
    assert preview.derived_path == ""
    assert len(preview.labels) == 4
    assert "stroke-dasharray" not in render_svg(preview)


def test_empty_preview_for_unusable_input() -> None:
    assert build_reference_preview(RECT[:2], 420.0, ReferenceSide.INSIDE).reference_path == ""
    assert build_reference_preview(RECT, 0.0, ReferenceSide.INSIDE).labels == []


def test_render_svg() -> None:
    svg = render_svg(build_reference_preview(RECT, 420.0, ReferenceSide.INSIDE, size=120.0))
    assert svg.startswith("<svg")
    assert 'viewBox="0 0 120 120"' in svg
    assert "stroke-dasharray" in svg
    assert "6.84m" in svg
