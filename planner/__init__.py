from .utils import *
from .models import FLOOR_ID, Category, Texture, Placement, Wall, Shelf, Column
from .materials import Material, resolve_wall_material, resolve_object_material, texture_options
from .floor import UsedArea, calculate_used_area, used_area_overlay, utilization
from .selection import SelectionController
from .controls import Action, ControlAction, ControlOverlay, anchor_for, wall_controls, object_controls
from .room import RoomCallbacks, MeshSpec, SceneFrame, build_frame
from .state import ProjectState, ProjectFormatError
from .store import RoomStore
from .palette import load_svg_icon, make_icon, make_category_icon, PresetPanel
from .hud import ControlsPanel, UsageHUD, MovementPanel
from .scene import RoomPlanScene, PlanView
from .properties import PropertyPanel

__all__ = [
    "FLOOR_ID", "Category", "Texture", "Placement", "Wall", "Shelf", "Column",
    "Material", "resolve_wall_material", "resolve_object_material", "texture_options",
    "UsedArea", "calculate_used_area", "used_area_overlay", "utilization",
    "SelectionController", "Action", "ControlAction", "ControlOverlay", "anchor_for",
    "wall_controls", "object_controls", "RoomCallbacks", "MeshSpec", "SceneFrame", "build_frame",
    "ProjectState", "ProjectFormatError", "RoomStore",
    "load_svg_icon", "make_icon", "make_category_icon", "PresetPanel",
    "ControlsPanel", "UsageHUD", "MovementPanel", "RoomPlanScene", "PlanView", "PropertyPanel",
]
