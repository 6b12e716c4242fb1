# planner/properties.py
from __future__ import annotations
from typing import Optional, Tuple
from PySide6.QtCore import Qt
from PySide6.QtWidgets import (
    QWidget, QVBoxLayout, QFormLayout, QLineEdit, QDoubleSpinBox, QComboBox,
    QCheckBox, QLabel
)

from .materials import texture_options
from .models import Category, Placement
from .palette import make_swatch_icon
from .store import RoomStore

TITLES = {Category.WALL: "Стена", Category.SHELF: "Полка", Category.COLUMN: "Колонна"}


class PropertyPanel(QWidget):
    def __init__(self, store: RoomStore, parent=None):
        super().__init__(parent)
        self.store = store
        self._current: Optional[Tuple[str, str]] = None

        self.setMinimumWidth(260)
        root = QVBoxLayout(self)
        root.setContentsMargins(8, 8, 8, 8)
        root.setSpacing(10)

        self.lbl_title = QLabel("Ничего не выбрано")
        self.lbl_title.setStyleSheet("font-weight: 600;")
        root.addWidget(self.lbl_title)

        self.form = QWidget()
        fl = QFormLayout(self.form)
        fl.setLabelAlignment(Qt.AlignRight)

        self.ed_name = QLineEdit()
        self.sp_w = QDoubleSpinBox(); self.sp_h = QDoubleSpinBox(); self.sp_d = QDoubleSpinBox()
        for s in (self.sp_w, self.sp_h, self.sp_d):
            s.setRange(1, 99999); s.setDecimals(0); s.setSingleStep(5); s.setSuffix(" см")
        self.sp_x = QDoubleSpinBox(); self.sp_y = QDoubleSpinBox(); self.sp_z = QDoubleSpinBox()
        for s in (self.sp_x, self.sp_y, self.sp_z):
            s.setRange(-99999, 99999); s.setDecimals(0); s.setSingleStep(5); s.setSuffix(" см")
        self.chk_locked = QCheckBox("Заблокирована")
        self.cmb_texture = QComboBox()
        for opt in texture_options():
            self.cmb_texture.addItem(make_swatch_icon(opt.swatch, 16), opt.label, opt.key)

        fl.addRow("Название:", self.ed_name)
        fl.addRow("Ширина:", self.sp_w)
        fl.addRow("Высота:", self.sp_h)
        fl.addRow("Глубина:", self.sp_d)
        fl.addRow("X:", self.sp_x)
        fl.addRow("Y:", self.sp_y)
        fl.addRow("Z:", self.sp_z)
        fl.addRow("Текстура:", self.cmb_texture)
        fl.addRow("", self.chk_locked)
        self.lbl_texture = fl.labelForField(self.cmb_texture)
        root.addWidget(self.form)
        root.addStretch(1)

        # хендлеры изменений
        self.ed_name.textEdited.connect(self._apply_name)
        for s in (self.sp_w, self.sp_h, self.sp_d):
            s.valueChanged.connect(self._apply_size)
        for s in (self.sp_x, self.sp_y, self.sp_z):
            s.valueChanged.connect(self._apply_position)
        self.chk_locked.toggled.connect(self._apply_locked)
        self.cmb_texture.currentIndexChanged.connect(self._apply_texture)

        self.clear()

    # ---------- API ----------
    def clear(self):
        self._current = None
        self.lbl_title.setText("Ничего не выбрано")
        self.form.setVisible(False)

    def load_object(self, category: str, obj_id: str):
        obj = self.store.find(category, obj_id)
        if obj is None:
            self.clear()
            return
        self._current = (category, obj_id)
        self.lbl_title.setText(f"Свойства: {TITLES[category]}")
        self.form.setVisible(True)

        widgets = (self.ed_name, self.sp_w, self.sp_h, self.sp_d, self.sp_x, self.sp_y,
                   self.sp_z, self.chk_locked, self.cmb_texture)
        for w in widgets:
            w.blockSignals(True)

        has_name = category != Category.SHELF
        self.ed_name.setEnabled(has_name)
        if self.ed_name.text() != (obj.name or ""):
            self.ed_name.setText(obj.name or "")
        self.sp_w.setValue(obj.width); self.sp_h.setValue(obj.height); self.sp_d.setValue(obj.depth)
        self.sp_x.setValue(obj.position.x); self.sp_y.setValue(obj.position.y); self.sp_z.setValue(obj.position.z)
        self.chk_locked.setVisible(has_name)
        self.chk_locked.setChecked(bool(obj.is_locked))
        is_wall = category == Category.WALL
        self.cmb_texture.setVisible(is_wall)
        if self.lbl_texture is not None:
            self.lbl_texture.setVisible(is_wall)
        if is_wall:
            idx = self.cmb_texture.findData(obj.texture)
            self.cmb_texture.setCurrentIndex(idx if idx >= 0 else self.cmb_texture.count() - 1)

        for w in widgets:
            w.blockSignals(False)

    def sync(self):
        # после изменений в сторе перечитать значения (или очиститься, если объект удалён)
        if self._current is not None:
            self.load_object(*self._current)

    # ---------- apply handlers ----------
    def _apply(self, **changes):
        if self._current is None:
            return
        category, obj_id = self._current
        self.store.update_object(category, obj_id, **changes)

    def _apply_name(self, text: str):
        if self._current and self._current[0] != Category.SHELF:
            self._apply(name=text)

    def _apply_size(self, *_):
        self._apply(width=float(self.sp_w.value()), height=float(self.sp_h.value()),
                    depth=float(self.sp_d.value()))

    def _apply_position(self, *_):
        self._apply(position=Placement(float(self.sp_x.value()), float(self.sp_y.value()),
                                       float(self.sp_z.value())))

    def _apply_locked(self, on: bool):
        if self._current and self._current[0] != Category.SHELF:
            self._apply(is_locked=bool(on))

    def _apply_texture(self, idx: int):
        if self._current and self._current[0] == Category.WALL and idx >= 0:
            self._apply(texture=self.cmb_texture.itemData(idx))
