from __future__ import annotations
import logging
from typing import Callable, Dict, Iterable, Optional

from .models import FLOOR_ID, Category

console_logger = logging.getLogger(__name__)


class SelectionController:
    """Три независимых слота выделения: стена, полка, колонна.

    Переходы вызываются только внешними событиями (клик, «выход», удаление).
    По умолчанию выбор в одной категории не сбрасывает другие;
    ``exclusive=True`` оставляет не более одного выделенного
    объекта на всю сцену.
    """

    def __init__(self, exclusive: bool = False, on_change: Optional[Callable[[], None]] = None):
        self.exclusive = exclusive
        self.on_change = on_change
        self._slots: Dict[str, Optional[str]] = {c: None for c in Category.ALL}
        self.show_movement_controller = False

    # ---- слоты ----
    @property
    def selected_wall_id(self) -> Optional[str]:
        return self._slots[Category.WALL]

    @property
    def selected_shelf_id(self) -> Optional[str]:
        return self._slots[Category.SHELF]

    @property
    def selected_column_id(self) -> Optional[str]:
        return self._slots[Category.COLUMN]

    def selected(self, category: str) -> Optional[str]:
        return self._slots[category]

    def is_selected(self, category: str, obj_id: str) -> bool:
        return obj_id is not None and self._slots[category] == obj_id

    # ---- переходы ----
    def select(self, category: str, obj_id: str) -> bool:
        if category == Category.WALL and obj_id == FLOOR_ID:
            console_logger.debug("Floor is not selectable, click ignored")
            return False
        changed = self._slots[category] != obj_id
        self._slots[category] = obj_id
        if self.exclusive:
            for other in Category.ALL:
                if other != category and self._slots[other] is not None:
                    self._slots[other] = None
                    changed = True
        if changed:
            self._notify()
        return True

    def select_wall(self, obj_id: str) -> bool:
        return self.select(Category.WALL, obj_id)

    def select_shelf(self, obj_id: str) -> bool:
        return self.select(Category.SHELF, obj_id)

    def select_column(self, obj_id: str) -> bool:
        return self.select(Category.COLUMN, obj_id)

    def quit(self, category: str):
        changed = self._slots[category] is not None
        self._slots[category] = None
        # выход из стены закрывает и контроллер перемещения
        if category == Category.WALL and self.show_movement_controller:
            self.show_movement_controller = False
            changed = True
        if changed:
            self._notify()

    def delete(self, category: str, obj_id: str):
        if self._slots[category] == obj_id:
            console_logger.debug(f"Selected {category} {obj_id} deleted, clearing slot")
            self.quit(category)

    def clone(self, category: str, obj_id: str):
        # выделение не меняется: решает владелец списков
        pass

    def clear(self):
        if any(v is not None for v in self._slots.values()) or self.show_movement_controller:
            self._slots = {c: None for c in Category.ALL}
            self.show_movement_controller = False
            self._notify()

    def set_movement_controller(self, on: bool):
        if self.show_movement_controller != bool(on):
            self.show_movement_controller = bool(on)
            self._notify()

    # ---- видимость оверлеев ----
    def wall_controls_visible(self, walls: Iterable) -> bool:
        wid = self.selected_wall_id
        if wid is None or wid == FLOOR_ID or self.show_movement_controller:
            return False
        return _exists(wid, walls)

    def object_controls_visible(self, category: str, objects: Iterable) -> bool:
        oid = self._slots[category]
        if oid is None:
            return False
        return _exists(oid, objects)

    def snapshot(self) -> Dict[str, Optional[str]]:
        return dict(self._slots)

    def _notify(self):
        if self.on_change:
            self.on_change()


def _exists(obj_id: str, objects: Iterable) -> bool:
    if any(o.id == obj_id for o in objects):
        return True
    console_logger.debug(f"Stale selection {obj_id}: object no longer exists")
    return False
