from __future__ import annotations
import math
from PySide6.QtCore import Qt, QRectF, QPointF
from PySide6.QtGui import QBrush, QColor, QPainter, QPen
from PySide6.QtWidgets import QGraphicsRectItem, QGraphicsItem
from .models import FLOOR_ID, Category
from .room import USED_AREA, MeshSpec
from .utils import CURSOR_NOT_ALLOWED, CURSOR_POINTER, PX_PER_SCENE_UNIT, to_cm

CURSORS = {
    CURSOR_POINTER: Qt.PointingHandCursor,
    CURSOR_NOT_ALLOWED: Qt.ForbiddenCursor,
}

Z_ORDER = {FLOOR_ID: -100.0, USED_AREA: -50.0, Category.WALL: 0.0, Category.SHELF: 10.0, Category.COLUMN: 20.0}


def scene_to_plan(x: float, z: float) -> QPointF:
    # план: вид сверху, X вправо, Z вниз
    return QPointF(x * PX_PER_SCENE_UNIT, z * PX_PER_SCENE_UNIT)


class MeshItem(QGraphicsRectItem):
    """Проекция бокса MeshSpec на плоскость пола."""

    def __init__(self, spec: MeshSpec):
        w = spec.dimensions[0] * PX_PER_SCENE_UNIT
        d = spec.dimensions[2] * PX_PER_SCENE_UNIT
        super().__init__(QRectF(-w / 2, -d / 2, w, d))
        self.spec = spec
        self.setAcceptHoverEvents(True)
        self.setPos(scene_to_plan(spec.position[0], spec.position[2]))
        self.setRotation(-math.degrees(spec.rotation[1]))

        kind = FLOOR_ID if spec.category == Category.WALL and spec.object_id == FLOOR_ID else spec.category
        self.setZValue(Z_ORDER.get(kind, 0.0) + spec.position[1] * 0.01)

        mat = spec.material
        fill = QColor(mat.color)
        fill.setAlphaF(mat.opacity)
        self.setBrush(QBrush(fill))
        if spec.selected:
            self.setPen(QPen(QColor(mat.emissive), 2, Qt.DashLine))
        elif kind in (FLOOR_ID, USED_AREA):
            self.setPen(Qt.NoPen)
        else:
            self.setPen(QPen(QColor(mat.color).darker(140), 1))
        self.setCursor(CURSORS.get(spec.cursor, Qt.ArrowCursor))
        self.update_tooltip()

    def update_tooltip(self):
        s = self.spec
        if s.category == USED_AREA:
            return
        w, h, d = (to_cm(v) for v in s.dimensions)
        self.setToolTip(f"{s.label or s.object_id}\nРазмер: {w:.0f} × {h:.0f} × {d:.0f} см")

    def mousePressEvent(self, e):
        if e.button() == Qt.LeftButton and self.spec.on_click is not None:
            self.spec.on_click()
            e.accept()
            return
        # пол и оверлей площади не кликаются
        e.ignore()

    def mouseDoubleClickEvent(self, e):
        # двойной клик по стене открывает её свойства
        if e.button() == Qt.LeftButton and self.spec.on_double_click is not None:
            self.spec.on_double_click()
            e.accept()
            return
        super().mouseDoubleClickEvent(e)

    def paint(self, painter: QPainter, option, widget=None):
        painter.setRenderHint(QPainter.Antialiasing, True)
        painter.setPen(self.pen())
        painter.setBrush(self.brush())
        painter.drawRect(self.rect())


class OverlayAnchor(QGraphicsRectItem):
    """Точка привязки панели: не масштабируется вместе с видом."""

    def __init__(self, anchor):
        super().__init__(QRectF(0, 0, 0, 0))
        self.setPen(Qt.NoPen)
        self.setFlag(QGraphicsItem.ItemIgnoresTransformations, True)
        self.setZValue(10_000)
        self.setPos(scene_to_plan(anchor[0], anchor[2]))
