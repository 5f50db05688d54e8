from planform.tools.placement import AnchorMode, PlacementPhase, PlacementToolState, dispatch, place_points
from planform.tools.preset_tool import EditorContext, PerimeterPresetTool
from planform.tools.session import EditorSession

__all__ = [
    "AnchorMode",
    "EditorContext",
    "EditorSession",
    "PerimeterPresetTool",
    "PlacementPhase",
    "PlacementToolState",
    "dispatch",
    "place_points",
]
