"""Сборка кадра комнаты: списки + выделение + колбэки -> описание сцены.

``build_frame`` — чистая функция: списки не изменяются, все изменения уходят
в колбэки владельца. Рендерер получает готовые размеры в метрах, материалы
и не более одного оверлея на категорию.
"""
from __future__ import annotations
import logging
from dataclasses import dataclass, field
from typing import Callable, List, Optional, Sequence

from .controls import ControlOverlay, object_controls, wall_controls
from .floor import UsedArea, calculate_used_area, used_area_overlay
from .materials import (Material, floor_material, resolve_object_material,
                        resolve_wall_material, used_area_material)
from .models import Category, Column, Shelf, Wall
from .selection import SelectionController
from .utils import (CURSOR_NOT_ALLOWED, CURSOR_POINTER, Vec3, dimensions_to_scene,
                    position_to_scene, rotation_tuple, safe_dims)

console_logger = logging.getLogger(__name__)

USED_AREA = "used_area"  # категория меша занятой площади
USED_AREA_ID = "used-area"

IdCallback = Optional[Callable[[str], None]]
Callback = Optional[Callable[[], None]]


@dataclass
class RoomCallbacks:
    on_wall_click: Callable[[str], None]
    on_shelf_click: Callable[[str], None]
    on_column_click: Callable[[str], None]
    on_delete_wall: IdCallback = None
    on_delete_shelf: IdCallback = None
    on_delete_column: IdCallback = None
    on_move_wall: IdCallback = None
    on_move_shelf: IdCallback = None
    on_move_column: IdCallback = None
    on_color_wall: IdCallback = None
    on_wall_texture_change: Optional[Callable[[str, str], None]] = None
    on_clone_wall: IdCallback = None
    on_clone_shelf: IdCallback = None
    on_clone_column: IdCallback = None
    on_quit_wall: Callback = None
    on_quit_shelf: Callback = None
    on_quit_column: Callback = None
    on_edit_shelf: IdCallback = None
    on_edit_column: IdCallback = None
    on_edit_wall: IdCallback = None
    on_hide_wall_controls: Callback = None


@dataclass
class MeshSpec:
    object_id: str
    category: str
    position: Vec3
    dimensions: Vec3
    rotation: Vec3
    material: Material
    cursor: str
    selected: bool = False
    on_click: Callback = None
    label: str = ""
    on_double_click: Callback = None

    @property
    def clickable(self) -> bool:
        return self.on_click is not None


@dataclass
class SceneFrame:
    meshes: List[MeshSpec] = field(default_factory=list)
    overlays: List[ControlOverlay] = field(default_factory=list)
    used_area: Optional[UsedArea] = None

    def mesh(self, object_id: str, category: Optional[str] = None) -> Optional[MeshSpec]:
        for m in self.meshes:
            if m.object_id == object_id and (category is None or m.category == category):
                return m
        return None

    def overlay(self, kind: str) -> Optional[ControlOverlay]:
        for o in self.overlays:
            if o.kind == kind:
                return o
        return None


def _bind(cb: IdCallback, obj_id: str) -> Callback:
    if cb is None:
        return None
    return lambda: cb(obj_id)


def _cursor(obj) -> str:
    return CURSOR_NOT_ALLOWED if obj.is_locked else CURSOR_POINTER


def _wall_meshes(wall: Wall, selected: bool, cbs: RoomCallbacks,
                 used: Optional[UsedArea]) -> List[MeshSpec]:
    pos = position_to_scene(wall)
    dims = safe_dims(dimensions_to_scene(wall))
    rot = rotation_tuple(wall.rotation)
    if wall.is_floor:
        # пол неактивен: рендерится как стена, но без клика
        out = [MeshSpec(wall.id, Category.WALL, pos, dims, rot, floor_material(),
                        CURSOR_NOT_ALLOWED, label=wall.name)]
        if used is not None:
            geo = used_area_overlay(used, wall)
            out.append(MeshSpec(USED_AREA_ID, USED_AREA, geo.position, safe_dims(geo.dimensions),
                                rot, used_area_material(), CURSOR_NOT_ALLOWED))
        return out
    return [MeshSpec(wall.id, Category.WALL, pos, dims, rot,
                     resolve_wall_material(wall.texture, selected),
                     _cursor(wall), selected=selected,
                     on_click=_bind(cbs.on_wall_click, wall.id), label=wall.name,
                     on_double_click=_bind(cbs.on_edit_wall, wall.id))]


def _object_mesh(obj, selected: bool, on_click: Callable[[str], None]) -> MeshSpec:
    return MeshSpec(obj.id, obj.category,
                    position_to_scene(obj),
                    safe_dims(dimensions_to_scene(obj)),
                    rotation_tuple(obj.rotation),
                    resolve_object_material(obj.category, selected),
                    _cursor(obj), selected=selected,
                    on_click=_bind(on_click, obj.id), label=obj.name)


def _wall_overlay(wall: Wall, cbs: RoomCallbacks) -> ControlOverlay:
    texture_cb = None
    if cbs.on_wall_texture_change is not None:
        texture_cb = lambda key: cbs.on_wall_texture_change(wall.id, key)
    return wall_controls(
        wall,
        on_quit=cbs.on_quit_wall,
        on_delete=_bind(cbs.on_delete_wall, wall.id),
        on_move=_bind(cbs.on_move_wall, wall.id),
        on_color=_bind(cbs.on_color_wall, wall.id),
        on_clone=_bind(cbs.on_clone_wall, wall.id),
        on_texture_change=texture_cb,
        on_hide_controls=cbs.on_hide_wall_controls,
    )


def build_frame(walls: Sequence[Wall],
                shelves: Sequence[Shelf],
                columns: Sequence[Column],
                selection: SelectionController,
                callbacks: RoomCallbacks) -> SceneFrame:
    used = calculate_used_area(walls)
    frame = SceneFrame(used_area=used)

    for wall in walls:
        selected = not wall.is_floor and selection.is_selected(Category.WALL, wall.id)
        frame.meshes.extend(_wall_meshes(wall, selected, callbacks, used))
    if selection.wall_controls_visible(walls):
        wall = next(w for w in walls if w.id == selection.selected_wall_id)
        frame.overlays.append(_wall_overlay(wall, callbacks))

    for shelf in shelves:
        frame.meshes.append(_object_mesh(shelf, selection.is_selected(Category.SHELF, shelf.id),
                                         callbacks.on_shelf_click))
    if selection.object_controls_visible(Category.SHELF, shelves):
        shelf = next(s for s in shelves if s.id == selection.selected_shelf_id)
        frame.overlays.append(object_controls(
            shelf,
            on_quit=callbacks.on_quit_shelf,
            on_move=_bind(callbacks.on_move_shelf, shelf.id),
            on_edit=_bind(callbacks.on_edit_shelf, shelf.id),
            on_delete=_bind(callbacks.on_delete_shelf, shelf.id),
            on_clone=_bind(callbacks.on_clone_shelf, shelf.id),
        ))

    for column in columns:
        frame.meshes.append(_object_mesh(column, selection.is_selected(Category.COLUMN, column.id),
                                         callbacks.on_column_click))
    if selection.object_controls_visible(Category.COLUMN, columns):
        column = next(c for c in columns if c.id == selection.selected_column_id)
        frame.overlays.append(object_controls(
            column,
            on_quit=callbacks.on_quit_column,
            on_move=_bind(callbacks.on_move_column, column.id),
            on_edit=_bind(callbacks.on_edit_column, column.id),
            on_delete=_bind(callbacks.on_delete_column, column.id),
            on_clone=_bind(callbacks.on_clone_column, column.id),
        ))

    console_logger.debug(f"Frame built: {len(frame.meshes)} meshes, {len(frame.overlays)} overlays")
    return frame
