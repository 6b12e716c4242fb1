from __future__ import annotations
from typing import Callable, Dict, Optional
from PySide6.QtCore import Qt, QSize
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QGridLayout, QToolButton, QLabel
from .controls import Action, ControlOverlay
from .floor import UsedArea
from .palette import load_svg_icon, make_swatch_icon
from .utils import to_scene

PANEL_QSS = """
    QWidget#ControlsPanel, QWidget#TexturePicker, QWidget#UsageHUD, QWidget#MovementPanel {
        background: rgba(255,255,255,0.92); border:1px solid #e7e8ee; border-radius:10px; }
    QToolButton { border:none; padding:4px; border-radius:6px; }
    QToolButton:hover { background:#f2f4f7; }
    QToolButton[danger="true"] { color:#dc2626; }
"""

# текстовые значки, если SVG нет
ACTION_GLYPHS = {
    Action.QUIT: "✕", Action.DELETE: "🗑", Action.MOVE: "✥",
    Action.COLOR: "🎨", Action.EDIT: "✎", Action.CLONE: "⧉",
}


class ControlsPanel(QWidget):
    """Отрисовка ControlOverlay: ряд кнопок и всплывающая палитра текстур."""

    def __init__(self, overlay: ControlOverlay, parent=None):
        super().__init__(parent)
        self.overlay = overlay
        self.setObjectName("ControlsPanel")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet(PANEL_QSS)

        root = QVBoxLayout(self)
        root.setContentsMargins(6, 6, 6, 6)
        root.setSpacing(6)

        row = QHBoxLayout()
        row.setSpacing(4)
        self.buttons: Dict[str, QToolButton] = {}
        for act in overlay.actions:
            btn = QToolButton(self)
            btn.setToolTip(act.label)
            icon = load_svg_icon(act.icon, 16) if act.icon else None
            if icon:
                btn.setIcon(icon)
                btn.setIconSize(QSize(16, 16))
            else:
                btn.setText(ACTION_GLYPHS.get(act.name, act.label[:1]))
            btn.setFixedSize(30, 30)
            if act.name == Action.DELETE:
                btn.setProperty("danger", True)
            btn.clicked.connect(lambda _=False, n=act.name: self._invoke(n))
            row.addWidget(btn)
            self.buttons[act.name] = btn
        root.addLayout(row)

        self.picker: Optional[QWidget] = None
        if overlay.textures:
            self.picker = QWidget(self)
            self.picker.setObjectName("TexturePicker")
            self.picker.setAttribute(Qt.WA_StyledBackground, True)
            grid = QGridLayout(self.picker)
            grid.setContentsMargins(6, 6, 6, 6)
            grid.setSpacing(4)
            self.swatches: Dict[str, QToolButton] = {}
            for i, opt in enumerate(overlay.textures):
                sw = QToolButton(self.picker)
                sw.setIcon(make_swatch_icon(opt.swatch, 24))
                sw.setIconSize(QSize(24, 24))
                sw.setToolTip(opt.label)
                sw.clicked.connect(lambda _=False, k=opt.key: self._choose(k))
                grid.addWidget(sw, i // 3, i % 3)
                self.swatches[opt.key] = sw
            root.addWidget(self.picker)
            self.picker.setVisible(overlay.picker_open)
        self.adjustSize()

    def _invoke(self, name: str):
        self.overlay.invoke(name)
        self._sync_picker()

    def _choose(self, key: str):
        self.overlay.choose_texture(key)
        self._sync_picker()

    def _sync_picker(self):
        if self.picker is not None:
            self.picker.setVisible(self.overlay.picker_open)
            self.adjustSize()


class UsageHUD(QWidget):
    """Подпись занятой площади пола в углу вида."""

    def __init__(self, view):
        super().__init__(view.viewport())
        self.view = view
        self.setObjectName("UsageHUD")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet(PANEL_QSS)
        lay = QHBoxLayout(self)
        lay.setContentsMargins(10, 6, 10, 6)
        self.label = QLabel(self)
        lay.addWidget(self.label)
        self.set_usage(None, 0.0)
        self.show()

    def set_usage(self, area: Optional[UsedArea], ratio: float):
        if area is None:
            self.label.setText("Занято: —")
        else:
            w, d = to_scene(area.width), to_scene(area.depth)
            self.label.setText(f"Занято: {w:.2f} × {d:.2f} м  ({w * d:.1f} м², {ratio * 100:.1f}%)")
        self.adjustSize()
        self.reposition()

    def reposition(self):
        margin = 12
        vw = self.view.viewport().width()
        vh = self.view.viewport().height()
        self.move(vw - self.width() - margin, vh - self.height() - margin)


class MovementPanel(QWidget):
    """Контроллер перемещения: стрелки с автоповтором, поворот, выход."""

    def __init__(self, view, on_move: Callable[[int, int, int], None],
                 on_rotate: Callable[[int], None], on_quit: Callable[[], None]):
        super().__init__(view.viewport())
        self.view = view
        self.setObjectName("MovementPanel")
        self.setAttribute(Qt.WA_StyledBackground, True)
        self.setStyleSheet(PANEL_QSS)

        grid = QGridLayout(self)
        grid.setContentsMargins(8, 8, 8, 8)
        grid.setSpacing(4)

        def btn(text: str, tip: str, handler, repeat: bool = True) -> QToolButton:
            b = QToolButton(self)
            b.setText(text)
            b.setToolTip(tip)
            b.setFixedSize(32, 32)
            b.setAutoRepeat(repeat)
            b.setAutoRepeatInterval(50)
            b.clicked.connect(handler)
            return b

        # на плане Z идёт «вниз», поэтому ↑ = -Z
        grid.addWidget(btn("↑", "Назад (−Z)", lambda: on_move(0, 0, -1)), 0, 1)
        grid.addWidget(btn("←", "Влево (−X)", lambda: on_move(-1, 0, 0)), 1, 0)
        grid.addWidget(btn("→", "Вправо (+X)", lambda: on_move(1, 0, 0)), 1, 2)
        grid.addWidget(btn("↓", "Вперёд (+Z)", lambda: on_move(0, 0, 1)), 2, 1)
        grid.addWidget(btn("⤒", "Выше (+Y)", lambda: on_move(0, 1, 0)), 0, 3)
        grid.addWidget(btn("⤓", "Ниже (−Y)", lambda: on_move(0, -1, 0)), 2, 3)
        grid.addWidget(btn("↺", "Повернуть влево", lambda: on_rotate(-1)), 0, 0)
        grid.addWidget(btn("↻", "Повернуть вправо", lambda: on_rotate(1)), 0, 2)
        grid.addWidget(btn("✕", "Закончить перемещение", lambda: on_quit(), repeat=False), 1, 1)
        self.adjustSize()
        self.hide()

    def reposition(self):
        margin = 12
        vh = self.view.viewport().height()
        self.move(margin, vh - self.height() - margin)
