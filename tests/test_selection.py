import unittest

from planner.models import FLOOR_ID, Category, Column, Shelf, Wall
from planner.selection import SelectionController


class TestSelectionSlots(unittest.TestCase):
    def setUp(self):
        self.changes = []
        self.sel = SelectionController(on_change=lambda: self.changes.append(self.sel.snapshot()))

    def test_initially_empty(self):
        self.assertEqual(self.sel.snapshot(), {Category.WALL: None, Category.SHELF: None,
                                               Category.COLUMN: None})
        self.assertFalse(self.sel.show_movement_controller)

    def test_floor_is_never_selected(self):
        self.sel.select_wall("w1")
        self.assertFalse(self.sel.select_wall(FLOOR_ID))
        self.assertEqual(self.sel.selected_wall_id, "w1")

    def test_slots_are_independent(self):
        self.sel.select_wall("w1")
        self.sel.select_shelf("s1")
        self.sel.select_column("c1")
        self.assertEqual(self.sel.selected_wall_id, "w1")
        self.assertEqual(self.sel.selected_shelf_id, "s1")
        self.assertEqual(self.sel.selected_column_id, "c1")

    def test_exclusive_keeps_one(self):
        sel = SelectionController(exclusive=True)
        sel.select_wall("w1")
        sel.select_shelf("s1")
        self.assertIsNone(sel.selected_wall_id)
        self.assertEqual(sel.selected_shelf_id, "s1")

    def test_reselecting_same_id_does_not_notify(self):
        self.sel.select_shelf("s1")
        self.sel.select_shelf("s1")
        self.assertEqual(len(self.changes), 1)

    def test_quit_clears_slot(self):
        self.sel.select_column("c1")
        self.sel.quit(Category.COLUMN)
        self.assertIsNone(self.sel.selected_column_id)

    def test_quit_wall_drops_movement_controller(self):
        self.sel.select_wall("w1")
        self.sel.set_movement_controller(True)
        self.sel.quit(Category.WALL)
        self.assertIsNone(self.sel.selected_wall_id)
        self.assertFalse(self.sel.show_movement_controller)

    def test_delete_only_clears_matching_slot(self):
        self.sel.select_shelf("s1")
        self.sel.delete(Category.SHELF, "s2")
        self.assertEqual(self.sel.selected_shelf_id, "s1")
        self.sel.delete(Category.SHELF, "s1")
        self.assertIsNone(self.sel.selected_shelf_id)

    def test_clone_keeps_selection(self):
        self.sel.select_wall("w1")
        self.sel.clone(Category.WALL, "w1")
        self.assertEqual(self.sel.selected_wall_id, "w1")

    def test_clear(self):
        self.sel.select_wall("w1")
        self.sel.select_shelf("s1")
        self.sel.set_movement_controller(True)
        self.sel.clear()
        self.assertEqual(set(self.sel.snapshot().values()), {None})
        self.assertFalse(self.sel.show_movement_controller)


class TestOverlayVisibility(unittest.TestCase):
    def setUp(self):
        self.walls = [Wall(FLOOR_ID), Wall("w1")]
        self.sel = SelectionController()

    def test_wall_controls_need_selection(self):
        self.assertFalse(self.sel.wall_controls_visible(self.walls))
        self.sel.select_wall("w1")
        self.assertTrue(self.sel.wall_controls_visible(self.walls))

    def test_movement_controller_hides_wall_controls(self):
        self.sel.select_wall("w1")
        self.sel.set_movement_controller(True)
        self.assertFalse(self.sel.wall_controls_visible(self.walls))

    def test_stale_selection_hides_controls(self):
        self.sel.select_wall("gone")
        self.assertFalse(self.sel.wall_controls_visible(self.walls))
        self.sel.select_shelf("gone")
        self.assertFalse(self.sel.object_controls_visible(Category.SHELF, [Shelf("s1")]))

    def test_object_controls(self):
        columns = [Column("c1")]
        self.assertFalse(self.sel.object_controls_visible(Category.COLUMN, columns))
        self.sel.select_column("c1")
        self.assertTrue(self.sel.object_controls_visible(Category.COLUMN, columns))
        # контроллер перемещения стен не влияет на полки и колонны
        self.sel.set_movement_controller(True)
        self.assertTrue(self.sel.object_controls_visible(Category.COLUMN, columns))


if __name__ == "__main__":
    unittest.main()
