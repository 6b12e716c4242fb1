"""Грубая оценка занятой площади пола.

Занятая площадь — общий ограничивающий прямоугольник следов всех стен
(кроме пола). Поворот стен не учитывается, пересечения не вычитаются:
это визуальная подсказка, а не точная геометрия.
"""
from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Optional

from .models import Wall
from .utils import FLOOR_OVERLAY_LIFT, Vec3, to_scene


@dataclass(frozen=True)
class UsedArea:
    min_x: float
    max_x: float
    min_z: float
    max_z: float

    @property
    def width(self) -> float:
        return self.max_x - self.min_x

    @property
    def depth(self) -> float:
        return self.max_z - self.min_z

    @property
    def center(self):
        return ((self.min_x + self.max_x) / 2, (self.min_z + self.max_z) / 2)

    @property
    def area_cm2(self) -> float:
        return self.width * self.depth


@dataclass(frozen=True)
class OverlayGeometry:
    position: Vec3
    dimensions: Vec3


def footprint(wall: Wall) -> UsedArea:
    hw = wall.width / 2
    hd = wall.depth / 2
    x, z = wall.position.x, wall.position.z
    return UsedArea(x - hw, x + hw, z - hd, z + hd)


def calculate_used_area(walls: Iterable[Wall]) -> Optional[UsedArea]:
    """Объединяющий прямоугольник (см) или None, если стен нет."""
    result: Optional[UsedArea] = None
    for wall in walls:
        if wall.is_floor:
            continue
        fp = footprint(wall)
        if result is None:
            result = fp
            continue
        result = UsedArea(
            min(result.min_x, fp.min_x),
            max(result.max_x, fp.max_x),
            min(result.min_z, fp.min_z),
            max(result.max_z, fp.max_z),
        )
    return result


def used_area_overlay(area: UsedArea, floor: Wall) -> OverlayGeometry:
    cx, cz = area.center
    return OverlayGeometry(
        position=(to_scene(cx), to_scene(floor.position.y) + FLOOR_OVERLAY_LIFT, to_scene(cz)),
        dimensions=(to_scene(area.width), FLOOR_OVERLAY_LIFT, to_scene(area.depth)),
    )


def utilization(area: Optional[UsedArea], floor: Optional[Wall]) -> float:
    if area is None or floor is None:
        return 0.0
    total = floor.width * floor.depth
    if total <= 0:
        return 0.0
    return max(0.0, min(1.0, area.area_cm2 / total))
