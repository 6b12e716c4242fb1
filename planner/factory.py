from __future__ import annotations
import math
import time
from itertools import count
from typing import Dict, List, Optional

from .models import FLOOR_ID, Column, Placement, Shelf, Texture, Wall
from .utils import OBJECT_CLONE_OFFSET, WALL_CLONE_OFFSET

# ===== Готовые типоразмеры (см) =====
PRECONFIGURED_WALLS: List[Dict] = [
    {"id": "standard", "name": "Стандартная стена", "width": 400, "height": 250, "depth": 10},
    {"id": "tall",     "name": "Высокая стена",     "width": 400, "height": 300, "depth": 10},
    {"id": "wide",     "name": "Широкая стена",     "width": 600, "height": 250, "depth": 10},
    {"id": "narrow",   "name": "Узкая стена",       "width": 200, "height": 250, "depth": 10},
]

PRECONFIGURED_SHELVES: List[Dict] = [
    {"id": "standard", "name": "Стандартная полка", "width": 80,  "height": 10, "depth": 30},
    {"id": "narrow",   "name": "Узкая полка",       "width": 60,  "height": 10, "depth": 25},
    {"id": "wide",     "name": "Широкая полка",     "width": 120, "height": 10, "depth": 35},
    {"id": "tall",     "name": "Высокая полка",     "width": 80,  "height": 10, "depth": 30},
    {"id": "corner",   "name": "Угловая полка",     "width": 60,  "height": 10, "depth": 60},
]

PRECONFIGURED_COLUMNS: List[Dict] = [
    {"id": "standard", "name": "Стандартная колонна", "width": 15, "height": 250, "depth": 15},
    {"id": "slim",     "name": "Тонкая колонна",      "width": 10, "height": 250, "depth": 10},
    {"id": "thick",    "name": "Толстая колонна",     "width": 20, "height": 250, "depth": 20},
]

FLOOR_SIZE = 4000.0  # пол «до горизонта»

_seq = count(1)


def new_id(prefix: str) -> str:
    # время в мс + счётчик: два клона за одну мс не совпадут
    return f"{prefix}-{int(time.time() * 1000)}-{next(_seq)}"


def preset(presets: List[Dict], preset_id: str) -> Dict:
    for p in presets:
        if p["id"] == preset_id:
            return p
    return presets[0]


def default_walls() -> List[Wall]:
    """Пол и четыре стены комнаты 4×4 м."""
    return [
        Wall(FLOOR_ID, "Пол", FLOOR_SIZE, 10, FLOOR_SIZE, Placement(0, 0, 0), Placement(),
             is_locked=True, texture=Texture.DEFAULT),
        Wall("wall-1", "Передняя стена", 400, 250, 10, Placement(0, 125, -200), Placement()),
        Wall("wall-2", "Задняя стена", 400, 250, 10, Placement(0, 125, 200), Placement()),
        Wall("wall-3", "Левая стена", 400, 250, 10, Placement(-200, 125, 0),
             Placement(0, math.pi / 2, 0), texture=Texture.WOOD),
        Wall("wall-4", "Правая стена", 400, 250, 10, Placement(200, 125, 0),
             Placement(0, -math.pi / 2, 0)),
    ]


def create_wall(preset_id: str = "standard", position: Optional[Placement] = None,
                name: Optional[str] = None, existing: int = 0) -> Wall:
    p = preset(PRECONFIGURED_WALLS, preset_id)
    h = float(p["height"])
    pos = position or Placement(0, h / 2, 0)
    return Wall(new_id("wall"), name or f"Стена {existing + 1}",
                float(p["width"]), h, float(p["depth"]), pos, Placement())


def create_shelf(preset_id: str = "standard", position: Optional[Placement] = None) -> Shelf:
    p = preset(PRECONFIGURED_SHELVES, preset_id)
    return Shelf(new_id("shelf"), float(p["width"]), float(p["height"]), float(p["depth"]),
                 position or Placement(0, 100, 0))


def create_column(preset_id: str = "standard", position: Optional[Placement] = None,
                  existing: int = 0) -> Column:
    p = preset(PRECONFIGURED_COLUMNS, preset_id)
    h = float(p["height"])
    return Column(new_id("column"), f"Колонна {existing + 1}",
                  float(p["width"]), h, float(p["depth"]),
                  position or Placement(0, h / 2, 0), Placement())


def _wall_normal_offset(wall: Wall, depth: float, side: int):
    # сдвиг от центра стены по нормали: половина стены + половина объекта
    ry = wall.rotation.y
    nx, nz = math.sin(ry), math.cos(ry)
    off = (wall.depth / 2 + depth / 2) * side
    return nx * off, nz * off


def shelf_on_wall(wall: Wall, preset_id: str = "standard", height_cm: float = 100.0,
                  side: int = 1) -> Shelf:
    """Полка, прижатая к лицевой (side=1) или тыльной (side=-1) стороне стены."""
    shelf = create_shelf(preset_id)
    dx, dz = _wall_normal_offset(wall, shelf.depth, side)
    shelf.position = Placement(wall.position.x + dx, height_cm, wall.position.z + dz)
    shelf.rotation = Placement(0, wall.rotation.y, 0)
    shelf.wall_id = wall.id
    return shelf


def column_on_wall(wall: Wall, preset_id: str = "standard", existing: int = 0,
                   side: int = 1) -> Column:
    col = create_column(preset_id, existing=existing)
    dx, dz = _wall_normal_offset(wall, col.depth, side)
    col.position = Placement(wall.position.x + dx, wall.position.y, wall.position.z + dz)
    col.rotation = Placement(0, wall.rotation.y, 0)
    col.wall_id = wall.id
    return col


def clone_wall(wall: Wall) -> Wall:
    return wall.copy(id=new_id("wall"), position=wall.position.moved(dx=WALL_CLONE_OFFSET))


def clone_shelf(shelf: Shelf) -> Shelf:
    return shelf.copy(id=new_id("shelf"), position=shelf.position.moved(dx=OBJECT_CLONE_OFFSET))


def clone_column(column: Column) -> Column:
    return column.copy(id=new_id("column"), position=column.position.moved(dx=OBJECT_CLONE_OFFSET))
