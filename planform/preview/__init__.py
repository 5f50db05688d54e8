from planform.preview.reference_preview import (
    EdgeLabel,
    ReferencePreview,
    build_reference_preview,
    format_length,
    readable_angle,
    render_svg,
    to_path,
)

__all__ = [
    "EdgeLabel",
    "ReferencePreview",
    "build_reference_preview",
    "format_length",
    "readable_angle",
    "render_svg",
    "to_path",
]
