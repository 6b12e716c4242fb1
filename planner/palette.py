from __future__ import annotations
import os
from typing import Callable, Dict, List, Optional
from PySide6.QtCore import Qt, QRectF, QSize
from PySide6.QtGui import QIcon, QPixmap, QPainter, QPen, QFont, QColor
from PySide6.QtSvg import QSvgRenderer
from PySide6.QtWidgets import (QWidget, QHBoxLayout, QVBoxLayout, QToolButton, QListWidget,
                               QListWidgetItem, QLabel)
from .factory import PRECONFIGURED_WALLS, PRECONFIGURED_SHELVES, PRECONFIGURED_COLUMNS
from .materials import OBJECT_MATERIALS, texture_entry
from .models import Category, Texture

CATEGORY_ICONS = {
    Category.WALL: "assets/icons/wall.svg",
    Category.SHELF: "assets/icons/shelf.svg",
    Category.COLUMN: "assets/icons/column.svg",
}


def load_svg_icon(path: str, size: int) -> Optional[QIcon]:
    if not os.path.exists(path):
        return None
    renderer = QSvgRenderer(path)
    if not renderer.isValid():
        return None
    pm = QPixmap(size, size)
    pm.fill(Qt.transparent)
    p = QPainter(pm)
    renderer.render(p, QRectF(0, 0, size, size))
    p.end()
    return QIcon(pm)


def make_icon(w: int, h: int, color: QColor, label: str = "") -> QIcon:
    pm = QPixmap(w, h); pm.fill(Qt.transparent)
    p = QPainter(pm); p.setRenderHint(QPainter.Antialiasing, True)
    p.setBrush(color); p.setPen(QPen(QColor(70, 70, 70), 1))
    r = QRectF(2, 2, w-4, h-4)
    p.drawRoundedRect(r, 4, 4)
    if label:
        p.setPen(Qt.black); p.setFont(QFont("", 8, QFont.Bold))
        p.drawText(r, Qt.AlignCenter, label)
    p.end()
    return QIcon(pm)


def make_swatch_icon(color: str, size: int = 24) -> QIcon:
    # живой цвет материала, а не картинка
    return make_icon(size, size, QColor(color))


def make_category_icon(category: str, size: int = 28) -> QIcon:
    svg = load_svg_icon(CATEGORY_ICONS.get(category, ""), size)
    if svg is not None:
        return svg
    if category == Category.WALL:
        color = texture_entry(Texture.DEFAULT).color
    else:
        color = OBJECT_MATERIALS[category].color
    return make_icon(size, size, QColor(color), category[:1].upper())


PRESETS: Dict[str, List[Dict]] = {
    Category.WALL: PRECONFIGURED_WALLS,
    Category.SHELF: PRECONFIGURED_SHELVES,
    Category.COLUMN: PRECONFIGURED_COLUMNS,
}


class PresetPanel(QWidget):
    """Готовые стены/полки/колонны. Двойной клик — добавить в комнату."""

    def __init__(self, on_add: Callable[[str, str], None], parent=None):
        super().__init__(parent)
        self.on_add = on_add
        self._current = Category.WALL
        self._build_ui()

    def _build_ui(self):
        root = QHBoxLayout(self)
        root.setContentsMargins(0, 0, 0, 0)
        root.setSpacing(0)

        # Левая колонка с категориями
        icon_bar = QWidget(self)
        icon_bar.setFixedWidth(56)
        icon_bar.setStyleSheet("background:#f0f2f5; border-right:1px solid #e5e7eb;")
        vb = QVBoxLayout(icon_bar)
        vb.setContentsMargins(6, 6, 6, 6)
        vb.setSpacing(8)

        self.buttons: Dict[str, QToolButton] = {}
        tips = {Category.WALL: "Стены", Category.SHELF: "Полки", Category.COLUMN: "Колонны"}
        for cat in Category.ALL:
            b = QToolButton(icon_bar)
            b.setAutoExclusive(True)
            b.setCheckable(True)
            b.setToolButtonStyle(Qt.ToolButtonIconOnly)
            b.setIcon(make_category_icon(cat, 28))
            b.setIconSize(QSize(28, 28))
            b.setFixedSize(44, 44)
            b.setToolTip(tips[cat])
            b.clicked.connect(lambda _=False, c=cat: self._switch(c))
            vb.addWidget(b)
            self.buttons[cat] = b
        vb.addStretch(1)
        root.addWidget(icon_bar)

        right = QVBoxLayout()
        right.setContentsMargins(8, 8, 8, 8)
        self.lbl_hint = QLabel("Двойной клик — добавить")
        self.lbl_hint.setStyleSheet("color:#667085;")
        self.list = QListWidget(self)
        self.list.itemDoubleClicked.connect(self._add_item)
        right.addWidget(self.lbl_hint)
        right.addWidget(self.list, 1)
        root.addLayout(right, 1)

        self.buttons[Category.WALL].setChecked(True)
        self._populate()

    def _switch(self, category: str):
        if category == self._current:
            return
        self._current = category
        self._populate()

    def _populate(self):
        self.list.clear()
        for meta in PRESETS[self._current]:
            text = f"{meta['name']}  {meta['width']:.0f}×{meta['height']:.0f}×{meta['depth']:.0f} см"
            li = QListWidgetItem(make_category_icon(self._current, 20), text)
            li.setData(Qt.UserRole, meta["id"])
            self.list.addItem(li)

    def _add_item(self, item: QListWidgetItem):
        preset_id = item.data(Qt.UserRole)
        if preset_id:
            self.on_add(self._current, preset_id)
