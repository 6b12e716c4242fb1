from __future__ import annotations
from dataclasses import dataclass
from typing import Dict, List, NamedTuple

from .models import Category, Texture

NO_EMISSIVE = "#000000"
SELECTED_EMISSIVE_INTENSITY = 0.3
IDLE_EMISSIVE_INTENSITY = 0.1
SELECTED_WALL_OPACITY = 0.7
SELECTED_OBJECT_OPACITY = 0.8


@dataclass(frozen=True)
class Material:
    color: str
    roughness: float
    metalness: float
    emissive: str = NO_EMISSIVE
    emissive_intensity: float = IDLE_EMISSIVE_INTENSITY
    opacity: float = 1.0

    @property
    def transparent(self) -> bool:
        return self.opacity < 1.0


class _Entry(NamedTuple):
    label: str
    color: str
    selected: str
    roughness: float
    metalness: float


# порядок = порядок плиток в палитре текстур
WALL_TEXTURES: Dict[str, _Entry] = {
    Texture.WOOD:     _Entry("Дерево", "#8B4513", "#f59e0b", 0.9, 0.1),
    Texture.BRICK:    _Entry("Кирпич", "#B22222", "#ef4444", 0.8, 0.05),
    Texture.CONCRETE: _Entry("Бетон",  "#696969", "#9ca3af", 0.7, 0.2),
    Texture.TILE:     _Entry("Плитка", "#4682B4", "#3b82f6", 0.4, 0.3),
    Texture.MARBLE:   _Entry("Мрамор", "#F5F5F5", "#f9fafb", 0.2, 0.8),
    Texture.DEFAULT:  _Entry("Обычная", "#3b82f6", "#2563eb", 0.6, 0.15),
}

OBJECT_MATERIALS: Dict[str, _Entry] = {
    Category.SHELF:  _Entry("Полка",   "#d97706", "#f59e0b", 0.7, 0.1),
    Category.COLUMN: _Entry("Колонна", "#7e22ce", "#8b5cf6", 0.6, 0.2),
}

FLOOR_MATERIAL = Material("#9ca3af", 0.85, 0.05, emissive="#9ca3af", emissive_intensity=0.05)
USED_AREA_MATERIAL = Material("#6b7280", 0.8, 0.1, emissive="#6b7280",
                              emissive_intensity=0.15, opacity=0.6)


def _apply_selection(entry: _Entry, is_selected: bool, selected_opacity: float) -> Material:
    if is_selected:
        return Material(entry.selected, entry.roughness, entry.metalness,
                        emissive=entry.selected,
                        emissive_intensity=SELECTED_EMISSIVE_INTENSITY,
                        opacity=selected_opacity)
    return Material(entry.color, entry.roughness, entry.metalness)


def texture_entry(texture: str) -> _Entry:
    return WALL_TEXTURES.get(texture, WALL_TEXTURES[Texture.DEFAULT])


def resolve_wall_material(texture: str, is_selected: bool = False) -> Material:
    """Материал стены по ключу текстуры; неизвестный ключ — материал по умолчанию."""
    return _apply_selection(texture_entry(texture), is_selected, SELECTED_WALL_OPACITY)


def resolve_object_material(category: str, is_selected: bool = False) -> Material:
    # полки/колонны: только «обычный» и «выделенный» цвет, без таблицы текстур
    entry = OBJECT_MATERIALS.get(category, OBJECT_MATERIALS[Category.SHELF])
    return _apply_selection(entry, is_selected, SELECTED_OBJECT_OPACITY)


def floor_material() -> Material:
    return FLOOR_MATERIAL


def used_area_material() -> Material:
    return USED_AREA_MATERIAL


class TextureOption(NamedTuple):
    key: str
    label: str
    swatch: str


def texture_options() -> List[TextureOption]:
    return [TextureOption(key, e.label, e.color) for key, e in WALL_TEXTURES.items()]
