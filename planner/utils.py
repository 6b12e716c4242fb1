from __future__ import annotations
from typing import Iterable, Tuple

# ===== Единицы =====
# Все размеры хранятся в сантиметрах, сцена рендерится в метрах.
CM_PER_SCENE_UNIT = 100.0
GEOMETRY_EPS = 0.001          # минимальный размер геометрии (в единицах сцены)

# ===== Оверлеи =====
WALL_CONTROLS_OFFSET = 0.5    # над стеной, м
OBJECT_CONTROLS_OFFSET = 0.3  # над полкой/колонной, м
FLOOR_OVERLAY_LIFT = 0.01     # «занятая» площадь чуть выше пола (без z-fighting)

# ===== Редактирование =====
WALL_CLONE_OFFSET = 20.0      # см по X
OBJECT_CLONE_OFFSET = 10.0
MOVE_STEP = 5.0               # шаг контроллера перемещения, см
ROTATE_STEP = 0.1             # рад

# ===== Курсоры =====
CURSOR_POINTER = "pointer"
CURSOR_NOT_ALLOWED = "not-allowed"

# ===== Плановый вид =====
PX_PER_SCENE_UNIT = 60.0      # 1 м = 60 px на плане
BG_COLOR = "#F2F4F7"
GRID_MINOR = "#D0D6E0"
GRID_MAJOR = "#A8B3C2"
GRID_STEP = 0.5               # м
MAJOR_EVERY = 2

Vec3 = Tuple[float, float, float]


def to_scene(value_cm: float) -> float:
    return value_cm / CM_PER_SCENE_UNIT


def to_cm(value_scene: float) -> float:
    return value_scene * CM_PER_SCENE_UNIT


def to_scene_triple(values: Iterable[float]) -> Vec3:
    x, y, z = values
    return (to_scene(x), to_scene(y), to_scene(z))


def position_to_scene(obj) -> Vec3:
    return to_scene_triple(obj.position.as_tuple())


def dimensions_to_scene(obj) -> Vec3:
    return to_scene_triple((obj.width, obj.height, obj.depth))


def safe_dims(dims: Iterable[float], eps: float = GEOMETRY_EPS) -> Vec3:
    """Геометрия никогда не получает нулевых/отрицательных размеров."""
    x, y, z = (max(eps, abs(v or 0.0)) for v in dims)
    return (x, y, z)


def rotation_tuple(rotation) -> Vec3:
    if rotation is None:
        return (0.0, 0.0, 0.0)
    return rotation.as_tuple()
