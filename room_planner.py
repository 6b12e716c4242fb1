#!/usr/bin/env python3
# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
import os
import sys
from typing import Optional
from PySide6.QtCore import Qt, QSettings, QSizeF
from PySide6.QtGui import QAction, QKeySequence
from PySide6.QtWidgets import (
    QApplication, QMainWindow, QToolBar, QStatusBar, QFileDialog, QMessageBox,
    QDockWidget, QStyle
)
from planner import (Category, PlanView, PresetPanel, ProjectFormatError, ProjectState, PropertyPanel,
                     RoomPlanScene, RoomStore, load_svg_icon)
from planner.factory import default_walls

PROJECT_FILTER = "Room Planner Project (*.json);;Все файлы (*)"


def _ensure_ext(path: str, ext: str) -> str:
    ext = ext.lower()
    return path if path.lower().endswith(ext) else path + ext


class MainWindow(QMainWindow):
    def __init__(self, store: Optional[RoomStore] = None):
        super().__init__()
        self.setWindowTitle("Room Planner")
        self.resize(1280, 860)
        self.settings = QSettings("RoomPlanner", "RoomPlanner")
        self.project = ProjectState()

        # 1) Стор/сцена/вью
        self.store = store or RoomStore()
        self.scene = RoomPlanScene(self.store)
        self.view = PlanView(self.scene)
        self.setCentralWidget(self.view)

        # 2) Панель свойств («изменить» у полок/колонн, двойной клик или тулбар у стен)
        self.props_panel = PropertyPanel(self.store, self)
        self.props_dock = QDockWidget("Свойства", self)
        self.props_dock.setWidget(self.props_panel)
        self.props_dock.setAllowedAreas(Qt.LeftDockWidgetArea | Qt.RightDockWidgetArea)
        self.props_dock.setMinimumWidth(280)
        self.props_dock.setMaximumWidth(560)
        self.addDockWidget(Qt.RightDockWidgetArea, self.props_dock)
        self.props_dock.hide()
        self.store.on_edit = self._edit_object

        # 3) Палитра готовых объектов
        self.palette = PresetPanel(on_add=self._add_preset)
        self.palette_dock = QDockWidget("Палитра", self)
        self.palette_dock.setWidget(self.palette)
        self.palette_dock.setAllowedAreas(Qt.LeftDockWidgetArea | Qt.RightDockWidgetArea)
        self.palette_dock.setMinimumWidth(220)
        self.palette_dock.setMaximumWidth(520)
        self.addDockWidget(Qt.LeftDockWidgetArea, self.palette_dock)

        # 4) Тулбар/статус
        self._build_toolbar()
        self.setStatusBar(QStatusBar(self))
        self.view.scaleChanged.connect(lambda s: self._status(f"Масштаб: {int(s * 100)}%"))

        # 5) Подписки: свойства перечитываются после каждого изменения
        self.store.add_listener(self.props_panel.sync)
        self.store.add_listener(self._update_status)
        self._update_status()

    def _build_toolbar(self):
        tb = QToolBar("Панель", self)
        tb.setMovable(False)
        tb.setIconSize(QSizeF(18, 18).toSize())
        tb.setToolButtonStyle(Qt.ToolButtonTextBesideIcon)
        self.addToolBar(Qt.TopToolBarArea, tb)

        style = self.style()
        def ico(path, fallback):
            return load_svg_icon(path, 18) or style.standardIcon(fallback)

        self.act_new = QAction(ico("assets/icons/new.svg", QStyle.SP_FileIcon), "Новая комната", self)
        self.act_new.setShortcut(QKeySequence("Ctrl+N"))
        self.act_new.triggered.connect(self._new_room)

        self.act_open = QAction(ico("assets/icons/open.svg", QStyle.SP_DirOpenIcon),
                                "Открыть проект…", self)
        self.act_open.setShortcut(QKeySequence("Ctrl+O"))
        self.act_open.triggered.connect(self._open_project_dialog)

        self.act_save = QAction(ico("assets/icons/save.svg", QStyle.SP_DialogSaveButton),
                                "Сохранить проект", self)
        self.act_save.setShortcut(QKeySequence("Ctrl+S"))
        self.act_save.triggered.connect(self._save_project_dialog)

        self.act_wall_props = QAction(ico("assets/icons/props.svg", QStyle.SP_FileDialogInfoView),
                                      "Свойства стены", self)
        self.act_wall_props.triggered.connect(self._edit_selected_wall)

        self.act_exclusive = QAction("Одно выделение", self, checkable=True)
        self.act_exclusive.setChecked(self.settings.value("exclusiveSelection", False, type=bool))
        self.act_exclusive.toggled.connect(self._toggle_exclusive)
        self._toggle_exclusive(self.act_exclusive.isChecked())

        # тумблеры доков
        self.act_toggle_props = self.props_dock.toggleViewAction()
        self.act_toggle_props.setText("Свойства")
        self.act_toggle_palette = self.palette_dock.toggleViewAction()
        self.act_toggle_palette.setText("Палитра")

        for act in (self.act_new, self.act_open, self.act_save):
            tb.addAction(act)
        tb.addSeparator()
        tb.addAction(self.act_wall_props)
        tb.addAction(self.act_exclusive)
        tb.addSeparator()
        tb.addAction(self.act_toggle_palette)
        tb.addAction(self.act_toggle_props)

    # ---------- действия ----------
    def _add_preset(self, category: str, preset_id: str):
        adders = {Category.WALL: self.store.add_wall, Category.SHELF: self.store.add_shelf,
                  Category.COLUMN: self.store.add_column}
        obj = adders[category](preset_id)
        self._status(f"Добавлено: {obj.name or obj.id}")

    def _edit_object(self, category: str, obj_id: str):
        self.props_panel.load_object(category, obj_id)
        if self.props_dock.isHidden():
            self.props_dock.show()
        self.props_dock.raise_()

    def _edit_selected_wall(self):
        wall_id = self.store.selection.selected_wall_id
        if wall_id is None:
            self._status("Сначала выберите стену")
            return
        self.store.edit_object(Category.WALL, wall_id)

    def _toggle_exclusive(self, on: bool):
        self.store.selection.exclusive = bool(on)
        self.settings.setValue("exclusiveSelection", bool(on))

    def _new_room(self):
        self.project = ProjectState()
        self.store.load(default_walls(), [], [])
        self.props_panel.clear()
        self._status("Новая комната")

    def _last_dir(self) -> str:
        return self.settings.value("lastDir", "", type=str)

    def _remember_dir(self, path: str):
        self.settings.setValue("lastDir", os.path.dirname(path))

    def _open_project_dialog(self):
        path, _ = QFileDialog.getOpenFileName(self, "Открыть проект", self._last_dir(), PROJECT_FILTER)
        if not path:
            return
        try:
            walls, shelves, columns = self.project.load(path)
        except (OSError, ProjectFormatError) as e:
            QMessageBox.critical(self, "Ошибка открытия", str(e))
            return
        self.store.load(walls, shelves, columns)
        self.props_panel.clear()
        self._remember_dir(path)
        self._status(f"Открыт проект: {os.path.basename(path)}")

    def _save_project_dialog(self):
        start = os.path.join(self._last_dir(), "room.json")
        path, _ = QFileDialog.getSaveFileName(self, "Сохранить проект", start, PROJECT_FILTER)
        if not path:
            return
        path = _ensure_ext(path, ".json")
        try:
            self.project.save(path, self.store.walls, self.store.shelves, self.store.columns)
        except OSError as e:
            QMessageBox.critical(self, "Ошибка сохранения", str(e))
            return
        self._remember_dir(path)
        self._status(f"Сохранено: {os.path.basename(path)}")

    def _status(self, text: str):
        self.statusBar().showMessage(text, 3000)

    def _update_status(self):
        walls = sum(1 for w in self.store.walls if not w.is_floor)
        self.statusBar().showMessage(
            f"Стены: {walls} | Полки: {len(self.store.shelves)} | Колонны: {len(self.store.columns)}"
        )


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(name)s %(levelname)s: %(message)s")
    app = QApplication(sys.argv)
    try:
        with open("smart_theme.qss", "r", encoding="utf-8") as f:
            app.setStyleSheet(f.read())
    except FileNotFoundError:
        logging.getLogger(__name__).debug("smart_theme.qss not found, default style")
    win = MainWindow()
    win.show()
    return app.exec()


if __name__ == "__main__":
    sys.exit(main())
