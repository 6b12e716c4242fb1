"""Контекстная панель действий над выбранным объектом.

Панель ничего не меняет сама: каждая кнопка вызывает колбэк владельца
списков. Флаг ``close_on_invoke`` у действия задаёт, закрывается ли панель
(``on_hide_controls``) после основного действия. У стен закрывают панель
удаление, перемещение и выбор текстуры; у полок и колонн — ничего, кроме
явного «выхода», который снимает выделение у владельца.
"""
from __future__ import annotations
from dataclasses import dataclass, field
from typing import Callable, Dict, List, Optional

from .materials import TextureOption, texture_options
from .utils import OBJECT_CONTROLS_OFFSET, WALL_CONTROLS_OFFSET, Vec3, to_scene

Callback = Optional[Callable[[], None]]


class Action:
    QUIT = "quit"
    DELETE = "delete"
    MOVE = "move"
    COLOR = "color"
    EDIT = "edit"
    CLONE = "clone"


def anchor_for(obj, vertical_offset: float) -> Vec3:
    """Точка над верхом объекта, в единицах сцены."""
    return (
        to_scene(obj.position.x),
        to_scene(obj.position.y + obj.height / 2) + vertical_offset,
        to_scene(obj.position.z),
    )


@dataclass
class ControlAction:
    name: str
    label: str
    callback: Callback = None
    close_on_invoke: bool = False
    icon: str = ""


@dataclass
class ControlOverlay:
    kind: str
    object_id: str
    anchor: Vec3
    actions: List[ControlAction]
    on_hide_controls: Callback = None
    on_texture_change: Optional[Callable[[str], None]] = None
    picker_open: bool = False
    textures: List[TextureOption] = field(default_factory=list)

    def action(self, name: str) -> Optional[ControlAction]:
        for a in self.actions:
            if a.name == name:
                return a
        return None

    def action_names(self) -> List[str]:
        return [a.name for a in self.actions]

    def invoke(self, name: str):
        act = self.action(name)
        if act is None:
            raise KeyError(f"No action {name!r} on {self.kind} controls")
        if act.callback:
            act.callback()
        if name == Action.COLOR and self.textures:
            self.picker_open = not self.picker_open
        if act.close_on_invoke:
            self.hide()

    def choose_texture(self, key: str):
        if self.on_texture_change:
            self.on_texture_change(key)
        self.picker_open = False
        # выбор текстуры завершает сессию управления стеной
        self.hide()

    def hide(self):
        if self.on_hide_controls:
            self.on_hide_controls()


def wall_controls(wall, *,
                  on_quit: Callback = None,
                  on_delete: Callback = None,
                  on_move: Callback = None,
                  on_color: Callback = None,
                  on_clone: Callback = None,
                  on_texture_change: Optional[Callable[[str], None]] = None,
                  on_hide_controls: Callback = None) -> ControlOverlay:
    actions = [
        ControlAction(Action.QUIT,   "Снять выделение", on_quit,   False, "assets/icons/close.svg"),
        ControlAction(Action.DELETE, "Удалить",         on_delete, True,  "assets/icons/delete.svg"),
        ControlAction(Action.MOVE,   "Переместить",     on_move,   True,  "assets/icons/move.svg"),
        ControlAction(Action.COLOR,  "Текстура",        on_color,  False, "assets/icons/palette.svg"),
        ControlAction(Action.CLONE,  "Клонировать",     on_clone,  False, "assets/icons/copy.svg"),
    ]
    return ControlOverlay(
        kind="wall",
        object_id=wall.id,
        anchor=anchor_for(wall, WALL_CONTROLS_OFFSET),
        actions=actions,
        on_hide_controls=on_hide_controls,
        on_texture_change=on_texture_change,
        textures=texture_options(),
    )


def object_controls(obj, *,
                    on_quit: Callback = None,
                    on_move: Callback = None,
                    on_edit: Callback = None,
                    on_delete: Callback = None,
                    on_clone: Callback = None) -> ControlOverlay:
    actions = [
        ControlAction(Action.QUIT,   "Снять выделение", on_quit,   False, "assets/icons/close.svg"),
        ControlAction(Action.MOVE,   "Переместить",     on_move,   False, "assets/icons/move.svg"),
        ControlAction(Action.EDIT,   "Изменить",        on_edit,   False, "assets/icons/edit.svg"),
        ControlAction(Action.CLONE,  "Клонировать",     on_clone,  False, "assets/icons/copy.svg"),
        ControlAction(Action.DELETE, "Удалить",         on_delete, False, "assets/icons/delete.svg"),
    ]
    return ControlOverlay(
        kind=obj.category,
        object_id=obj.id,
        anchor=anchor_for(obj, OBJECT_CONTROLS_OFFSET),
        actions=actions,
    )


def close_policy(overlay: ControlOverlay) -> Dict[str, bool]:
    return {a.name: a.close_on_invoke for a in overlay.actions}
