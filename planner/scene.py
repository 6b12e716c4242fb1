from __future__ import annotations
import math
from typing import List, Optional

from PySide6.QtCore import Qt, QPointF, QRectF, QTimer, Signal
from PySide6.QtGui import QPainter, QPen, QColor, QWheelEvent
from PySide6.QtWidgets import QGraphicsScene, QGraphicsView, QGraphicsProxyWidget, QApplication

from .floor import utilization
from .hud import ControlsPanel, MovementPanel, UsageHUD
from .items import MeshItem, OverlayAnchor
from .room import SceneFrame
from .store import RoomStore
from .utils import BG_COLOR, GRID_STEP, MAJOR_EVERY, GRID_MAJOR, GRID_MINOR, PX_PER_SCENE_UNIT

OVERLAY_GAP = 12  # px между объектом и панелью


class RoomPlanScene(QGraphicsScene):
    """Рендерер кадра: каждый проход строит сцену заново из store.frame()."""

    frameRendered = Signal(object)  # SceneFrame

    def __init__(self, store: RoomStore, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.store = store
        self.setItemIndexMethod(QGraphicsScene.NoIndex)
        self.frame: Optional[SceneFrame] = None
        self.panels: List[ControlsPanel] = []
        self._refresh_pending = False
        store.add_listener(self.schedule_refresh)
        self.refresh()

    def schedule_refresh(self):
        # изменения приходят из обработчиков кнопок панели; панель нельзя
        # удалять внутри её собственного clicked
        if self._refresh_pending:
            return
        self._refresh_pending = True
        QTimer.singleShot(0, self.refresh)

    def refresh(self):
        self._refresh_pending = False
        self.render_frame(self.store.frame())

    def render_frame(self, frame: SceneFrame):
        self.clear()
        self.panels = []
        for spec in frame.meshes:
            self.addItem(MeshItem(spec))
        for overlay in frame.overlays:
            anchor = OverlayAnchor(overlay.anchor)
            self.addItem(anchor)
            panel = ControlsPanel(overlay)
            proxy = QGraphicsProxyWidget(anchor)
            proxy.setWidget(panel)
            proxy.setPos(-panel.width() / 2, -panel.height() - OVERLAY_GAP)
            self.panels.append(panel)
        self.frame = frame
        self.frameRendered.emit(frame)

    def panel(self, kind: str) -> Optional[ControlsPanel]:
        for p in self.panels:
            if p.overlay.kind == kind:
                return p
        return None

    def drawBackground(self, painter: QPainter, rect: QRectF):
        painter.fillRect(rect, QColor(BG_COLOR))
        step = GRID_STEP * PX_PER_SCENE_UNIT
        left = math.floor(rect.left() / step) * step
        top  = math.floor(rect.top()  / step) * step
        x = left; i = int(round(x / step))
        while x < rect.right():
            is_major = (i % MAJOR_EVERY == 0)
            painter.setPen(QPen(QColor(GRID_MAJOR if is_major else GRID_MINOR), 1.5 if is_major else 1))
            painter.drawLine(QPointF(x, rect.top()), QPointF(x, rect.bottom()))
            x += step; i += 1
        y = top; j = int(round(y / step))
        while y < rect.bottom():
            is_major = (j % MAJOR_EVERY == 0)
            painter.setPen(QPen(QColor(GRID_MAJOR if is_major else GRID_MINOR), 1.5 if is_major else 1))
            painter.drawLine(QPointF(rect.left(), y), QPointF(rect.right(), y))
            y += step; j += 1


class PlanView(QGraphicsView):
    scaleChanged = Signal(float)  # текущее m11()

    def __init__(self, scene: RoomPlanScene):
        super().__init__(scene)
        self.setRenderHint(QPainter.Antialiasing, True)
        self.setViewportUpdateMode(QGraphicsView.BoundingRectViewportUpdate)
        self.setTransformationAnchor(QGraphicsView.AnchorUnderMouse)
        self.setResizeAnchor(QGraphicsView.AnchorUnderMouse)
        self._space_down = False
        self.setBackgroundBrush(Qt.NoBrush)
        self.setSceneRect(QRectF(-20 * PX_PER_SCENE_UNIT, -20 * PX_PER_SCENE_UNIT,
                                 40 * PX_PER_SCENE_UNIT, 40 * PX_PER_SCENE_UNIT))

        store = scene.store
        self.usage_hud = UsageHUD(self)
        self.movement = MovementPanel(
            self,
            on_move=store.nudge,
            on_rotate=store.rotate_selected,
            on_quit=self._quit_movement,
        )
        scene.frameRendered.connect(self._on_frame)
        self._on_frame(scene.frame)
        self.centerOn(0, 0)
        self.scaleChanged.emit(self.transform().m11())

    def _quit_movement(self):
        store = self.scene().store
        wall_mode = store.moving_object is None
        store.stop_moving()
        if wall_mode:
            store.quit_wall()

    def _on_frame(self, frame: Optional[SceneFrame]):
        if frame is None:
            return
        store = self.scene().store
        self.usage_hud.set_usage(frame.used_area, utilization(frame.used_area, store.floor))
        active = store.selection.show_movement_controller or store.moving_object is not None
        self.movement.setVisible(active)
        self.movement.reposition()

    def resizeEvent(self, event):
        super().resizeEvent(event)
        self.usage_hud.reposition()
        self.movement.reposition()

    def wheelEvent(self, event: QWheelEvent):
        if QApplication.keyboardModifiers() & Qt.ControlModifier:
            angle = event.angleDelta().y()
            factor = 1.15 if angle > 0 else 1.0 / 1.15
            self.scale(factor, factor)
            self.scaleChanged.emit(self.transform().m11())
            event.accept()
            return
        super().wheelEvent(event)

    def keyPressEvent(self, event):
        if event.key() == Qt.Key_Space and not self._space_down:
            self._space_down = True
            self.setDragMode(QGraphicsView.ScrollHandDrag)
            event.accept()
            return
        super().keyPressEvent(event)

    def keyReleaseEvent(self, event):
        if event.key() == Qt.Key_Space and self._space_down:
            self._space_down = False
            self.setDragMode(QGraphicsView.NoDrag)
            event.accept()
            return
        super().keyReleaseEvent(event)
