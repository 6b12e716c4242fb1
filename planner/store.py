"""Владелец списков стен/полок/колонн.

Ядро (``build_frame``) только читает списки и вызывает колбэки; все изменения
происходят здесь, после чего подписчики перерисовывают сцену.
"""
from __future__ import annotations
import logging
from typing import Callable, List, Optional, Tuple

from . import factory
from .models import FLOOR_ID, Category, Column, Shelf, Wall
from .room import RoomCallbacks, SceneFrame, build_frame
from .selection import SelectionController
from .utils import MOVE_STEP, ROTATE_STEP

console_logger = logging.getLogger(__name__)


class RoomStore:
    def __init__(self, walls: Optional[List[Wall]] = None,
                 shelves: Optional[List[Shelf]] = None,
                 columns: Optional[List[Column]] = None,
                 exclusive_selection: bool = False):
        self.walls: List[Wall] = list(walls) if walls is not None else factory.default_walls()
        self.shelves: List[Shelf] = list(shelves or [])
        self.columns: List[Column] = list(columns or [])
        self.selection = SelectionController(exclusive=exclusive_selection, on_change=self._changed)
        self.moving_object: Optional[Tuple[str, str]] = None
        self._listeners: List[Callable[[], None]] = []
        # колбэк «изменить» открывает внешний редактор свойств
        self.on_edit: Optional[Callable[[str, str], None]] = None

    # ---- подписки ----
    def add_listener(self, fn: Callable[[], None]):
        self._listeners.append(fn)

    def _changed(self):
        for fn in list(self._listeners):
            fn()

    # ---- доступ ----
    def _list(self, category: str) -> list:
        return {Category.WALL: self.walls, Category.SHELF: self.shelves,
                Category.COLUMN: self.columns}[category]

    def _set_list(self, category: str, items: list):
        if category == Category.WALL:
            self.walls = items
        elif category == Category.SHELF:
            self.shelves = items
        else:
            self.columns = items

    def find(self, category: str, obj_id: Optional[str]):
        for obj in self._list(category):
            if obj.id == obj_id:
                return obj
        return None

    def selected_object(self, category: str):
        return self.find(category, self.selection.selected(category))

    @property
    def floor(self) -> Optional[Wall]:
        return self.find(Category.WALL, FLOOR_ID)

    def load(self, walls: List[Wall], shelves: List[Shelf], columns: List[Column]):
        self.walls, self.shelves, self.columns = list(walls), list(shelves), list(columns)
        self.moving_object = None
        self.selection.clear()
        self._changed()

    def frame(self) -> SceneFrame:
        return build_frame(self.walls, self.shelves, self.columns, self.selection, self.callbacks())

    # ---- клики ----
    def click_wall(self, obj_id: str):
        if obj_id == FLOOR_ID or self.find(Category.WALL, obj_id) is None:
            return
        self.moving_object = None
        self.selection.set_movement_controller(False)
        self.selection.select_wall(obj_id)

    def click_shelf(self, obj_id: str):
        if self.find(Category.SHELF, obj_id) is not None:
            self.selection.select_shelf(obj_id)

    def click_column(self, obj_id: str):
        if self.find(Category.COLUMN, obj_id) is not None:
            self.selection.select_column(obj_id)

    # ---- добавление ----
    def _append(self, category: str, obj, select: bool = True):
        self._set_list(category, self._list(category) + [obj])
        console_logger.info(f"Added {category} {obj.id}")
        if select:
            self.selection.select(category, obj.id)
        self._changed()
        return obj

    def add_wall(self, preset_id: str = "standard") -> Wall:
        existing = sum(1 for w in self.walls if not w.is_floor)
        return self._append(Category.WALL, factory.create_wall(preset_id, existing=existing))

    def add_shelf(self, preset_id: str = "standard") -> Shelf:
        wall = self.selected_object(Category.WALL)
        if wall is not None:
            shelf = factory.shelf_on_wall(wall, preset_id)
        else:
            shelf = factory.create_shelf(preset_id)
        return self._append(Category.SHELF, shelf)

    def add_column(self, preset_id: str = "standard") -> Column:
        wall = self.selected_object(Category.WALL)
        if wall is not None:
            col = factory.column_on_wall(wall, preset_id, existing=len(self.columns))
        else:
            col = factory.create_column(preset_id, existing=len(self.columns))
        return self._append(Category.COLUMN, col)

    # ---- удаление ----
    def delete_wall(self, obj_id: str, delete_attached: bool = False):
        if obj_id == FLOOR_ID:
            return
        self.walls = [w for w in self.walls if w.id != obj_id]
        if delete_attached:
            self.shelves = [s for s in self.shelves if s.wall_id != obj_id]
            self.columns = [c for c in self.columns if c.wall_id != obj_id]
        else:
            # отвязываем, объекты остаются на месте
            self.shelves = [s.copy(wall_id=None) if s.wall_id == obj_id else s for s in self.shelves]
            self.columns = [c.copy(wall_id=None) if c.wall_id == obj_id else c for c in self.columns]
        console_logger.info(f"Deleted wall {obj_id} (attached {'deleted' if delete_attached else 'detached'})")
        self.selection.delete(Category.WALL, obj_id)
        self._changed()

    def _delete(self, category: str, obj_id: str):
        self._set_list(category, [o for o in self._list(category) if o.id != obj_id])
        if self.moving_object == (category, obj_id):
            self.moving_object = None
        console_logger.info(f"Deleted {category} {obj_id}")
        self.selection.delete(category, obj_id)
        self._changed()

    def delete_shelf(self, obj_id: str):
        self._delete(Category.SHELF, obj_id)

    def delete_column(self, obj_id: str):
        self._delete(Category.COLUMN, obj_id)

    # ---- клонирование ----
    def _clone(self, category: str, obj_id: str, clone_fn):
        src = self.find(category, obj_id)
        if src is None:
            return None
        self.selection.clone(category, obj_id)
        return self._append(category, clone_fn(src), select=False)

    def clone_wall(self, obj_id: str):
        return self._clone(Category.WALL, obj_id, factory.clone_wall)

    def clone_shelf(self, obj_id: str):
        return self._clone(Category.SHELF, obj_id, factory.clone_shelf)

    def clone_column(self, obj_id: str):
        return self._clone(Category.COLUMN, obj_id, factory.clone_column)

    # ---- стены: текстура, перемещение ----
    def color_wall(self, obj_id: str):
        # палитра открывается в самой панели, владельцу менять нечего
        console_logger.debug(f"Texture picker toggled for wall {obj_id}")

    def change_wall_texture(self, obj_id: str, texture: str):
        self.walls = [w.copy(texture=texture) if w.id == obj_id else w for w in self.walls]
        self._changed()

    def move_wall(self, obj_id: str):
        self.moving_object = None
        self.selection.select_wall(obj_id)
        self.selection.set_movement_controller(True)

    def hide_wall_controls(self):
        # при активном контроллере перемещения выделение нужно ему
        if not self.selection.show_movement_controller:
            self.selection.quit(Category.WALL)

    def quit_wall(self):
        self.selection.quit(Category.WALL)

    # ---- полки/колонны ----
    def move_object(self, category: str, obj_id: str):
        self.moving_object = (category, obj_id)
        # select() уведомляет сам, если выделение поменялось
        if self.selection.is_selected(category, obj_id):
            self._changed()
        else:
            self.selection.select(category, obj_id)

    def edit_object(self, category: str, obj_id: str):
        self.selection.select(category, obj_id)
        if self.on_edit:
            self.on_edit(category, obj_id)

    def quit_object(self, category: str):
        if self.moving_object and self.moving_object[0] == category:
            self.moving_object = None
        self.selection.quit(category)

    def update_object(self, category: str, obj_id: str, **changes):
        self._set_list(category, [o.copy(**changes) if o.id == obj_id else o
                                  for o in self._list(category)])
        self._changed()

    # ---- контроллер перемещения ----
    def nudge(self, dx: int = 0, dy: int = 0, dz: int = 0):
        self.move_selected(dx * MOVE_STEP, dy * MOVE_STEP, dz * MOVE_STEP)

    def move_selected(self, dx: float, dy: float, dz: float):
        if self.moving_object:
            category, obj_id = self.moving_object
            self._set_list(category, [o.copy(position=o.position.moved(dx, dy, dz)) if o.id == obj_id else o
                                      for o in self._list(category)])
            self._changed()
            return
        wall_id = self.selection.selected_wall_id
        if wall_id is None or wall_id == FLOOR_ID:
            return
        self.walls = [w.copy(position=w.position.moved(dx, dy, dz)) if w.id == wall_id else w
                      for w in self.walls]
        # прикреплённые к стене объекты едут вместе с ней
        self.shelves = [s.copy(position=s.position.moved(dx, dy, dz)) if s.wall_id == wall_id else s
                        for s in self.shelves]
        self.columns = [c.copy(position=c.position.moved(dx, dy, dz)) if c.wall_id == wall_id else c
                        for c in self.columns]
        self._changed()

    def rotate_selected(self, direction: int = 1):
        # полки и колонны не поворачиваются
        if self.moving_object:
            return
        wall_id = self.selection.selected_wall_id
        if wall_id is None or wall_id == FLOOR_ID:
            return
        dy = direction * ROTATE_STEP
        self.walls = [w.copy(rotation=w.rotation.moved(dy=dy)) if w.id == wall_id else w
                      for w in self.walls]
        self._changed()

    def stop_moving(self):
        self.moving_object = None
        self.selection.set_movement_controller(False)
        self._changed()

    # ---- колбэки для RoomScene ----
    def callbacks(self) -> RoomCallbacks:
        return RoomCallbacks(
            on_wall_click=self.click_wall,
            on_shelf_click=self.click_shelf,
            on_column_click=self.click_column,
            on_delete_wall=self.delete_wall,
            on_delete_shelf=self.delete_shelf,
            on_delete_column=self.delete_column,
            on_move_wall=self.move_wall,
            on_move_shelf=lambda i: self.move_object(Category.SHELF, i),
            on_move_column=lambda i: self.move_object(Category.COLUMN, i),
            on_color_wall=self.color_wall,
            on_wall_texture_change=self.change_wall_texture,
            on_clone_wall=self.clone_wall,
            on_clone_shelf=self.clone_shelf,
            on_clone_column=self.clone_column,
            on_quit_wall=self.quit_wall,
            on_quit_shelf=lambda: self.quit_object(Category.SHELF),
            on_quit_column=lambda: self.quit_object(Category.COLUMN),
            on_edit_shelf=lambda i: self.edit_object(Category.SHELF, i),
            on_edit_column=lambda i: self.edit_object(Category.COLUMN, i),
            on_edit_wall=lambda i: self.edit_object(Category.WALL, i),
            on_hide_wall_controls=self.hide_wall_controls,
        )
