import unittest

from PySide6.QtWidgets import QApplication

from planner.controls import Action
from planner.hud import ControlsPanel
from planner.items import MeshItem
from planner.models import Category, Texture
from planner.properties import PropertyPanel
from planner.scene import PlanView, RoomPlanScene
from planner.store import RoomStore
from room_planner import MainWindow


class QtTestCase(unittest.TestCase):
    @classmethod
    def setUpClass(cls):
        cls.app = QApplication.instance() or QApplication([])


class TestControlsPanel(QtTestCase):
    def setUp(self):
        self.store = RoomStore()
        self.store.click_wall("wall-1")

    def test_buttons_match_actions(self):
        panel = ControlsPanel(self.store.frame().overlay("wall"))
        self.assertEqual(set(panel.buttons), {Action.QUIT, Action.DELETE, Action.MOVE,
                                              Action.COLOR, Action.CLONE})
        self.assertTrue(panel.picker.isHidden())

    def test_color_button_opens_picker(self):
        panel = ControlsPanel(self.store.frame().overlay("wall"))
        panel.buttons[Action.COLOR].click()
        self.assertTrue(panel.overlay.picker_open)
        self.assertFalse(panel.picker.isHidden())

    def test_swatch_changes_texture(self):
        panel = ControlsPanel(self.store.frame().overlay("wall"))
        panel.buttons[Action.COLOR].click()
        panel.swatches[Texture.CONCRETE].click()
        self.assertEqual(self.store.find(Category.WALL, "wall-1").texture, Texture.CONCRETE)
        self.assertIsNone(self.store.selection.selected_wall_id)

    def test_object_panel_has_no_picker(self):
        self.store.add_shelf()
        panel = ControlsPanel(self.store.frame().overlay("shelf"))
        self.assertIsNone(panel.picker)
        self.assertIn(Action.EDIT, panel.buttons)


class TestRoomPlanScene(QtTestCase):
    def test_render_frame(self):
        store = RoomStore()
        store.click_wall("wall-2")
        scene = RoomPlanScene(store)
        meshes = [it for it in scene.items() if isinstance(it, MeshItem)]
        self.assertEqual(len(meshes), len(scene.frame.meshes))
        self.assertIsNotNone(scene.panel("wall"))
        self.assertIsNone(scene.panel("shelf"))

    def test_movement_panel_follows_store(self):
        store = RoomStore()
        scene = RoomPlanScene(store)
        view = PlanView(scene)
        store.move_wall("wall-1")
        scene.refresh()
        self.assertFalse(view.movement.isHidden())
        self.assertIsNone(scene.panel("wall"))
        store.stop_moving()
        scene.refresh()
        self.assertTrue(view.movement.isHidden())


class TestPropertyPanel(QtTestCase):
    def test_edit_size(self):
        store = RoomStore()
        column = store.add_column()
        panel = PropertyPanel(store)
        panel.load_object(Category.COLUMN, column.id)
        self.assertEqual(panel.sp_w.value(), column.width)
        panel.sp_w.setValue(42)
        self.assertEqual(store.find(Category.COLUMN, column.id).width, 42)

    def test_clears_when_object_deleted(self):
        store = RoomStore()
        shelf = store.add_shelf()
        panel = PropertyPanel(store)
        store.add_listener(panel.sync)
        panel.load_object(Category.SHELF, shelf.id)
        self.assertFalse(panel.ed_name.isEnabled())
        store.delete_shelf(shelf.id)
        self.assertIsNone(panel._current)

    def test_wall_fields(self):
        store = RoomStore()
        panel = PropertyPanel(store)
        panel.load_object(Category.WALL, "wall-3")
        self.assertTrue(panel.ed_name.isEnabled())
        self.assertEqual(panel.cmb_texture.currentData(), Texture.WOOD)
        panel.ed_name.textEdited.emit("Окно")
        panel.chk_locked.setChecked(True)
        panel.cmb_texture.setCurrentIndex(panel.cmb_texture.findData(Texture.TILE))
        wall = store.find(Category.WALL, "wall-3")
        self.assertEqual(wall.name, "Окно")
        self.assertTrue(wall.is_locked)
        self.assertEqual(wall.texture, Texture.TILE)


class TestMainWindow(QtTestCase):
    def test_wall_properties_action(self):
        win = MainWindow(RoomStore())
        win.store.click_wall("wall-1")
        win.act_wall_props.trigger()
        self.assertEqual(win.props_panel._current, (Category.WALL, "wall-1"))
        self.assertFalse(win.props_dock.isHidden())
        win.props_panel.sp_w.setValue(350)
        self.assertEqual(win.store.find(Category.WALL, "wall-1").width, 350)

    def test_wall_properties_need_selection(self):
        win = MainWindow(RoomStore())
        win.act_wall_props.trigger()
        self.assertIsNone(win.props_panel._current)
        self.assertTrue(win.props_dock.isHidden())


if __name__ == "__main__":
    unittest.main()
