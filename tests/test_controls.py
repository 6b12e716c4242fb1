import unittest
from unittest import mock

from planner.controls import Action, anchor_for, close_policy, object_controls, wall_controls
from planner.models import Column, Placement, Shelf, Texture, Wall


def _wall():
    return Wall("w1", "Стена", 300, 250, 10, Placement(150, 125, 0))


class TestAnchor(unittest.TestCase):
    def test_wall_anchor(self):
        overlay = wall_controls(_wall())
        self.assertEqual(overlay.anchor, (1.5, 3.0, 0.0))

    def test_object_anchor_uses_smaller_offset(self):
        shelf = Shelf("s1", 80, 10, 30, Placement(0, 100, 0))
        x, y, z = object_controls(shelf).anchor
        self.assertAlmostEqual(y, 1.05 + 0.3)
        self.assertEqual(anchor_for(shelf, 0.0), (0.0, 1.05, 0.0))


class TestWallControls(unittest.TestCase):
    def setUp(self):
        self.cb = {name: mock.Mock() for name in
                   ("quit", "delete", "move", "color", "clone", "texture", "hide")}
        self.overlay = wall_controls(
            _wall(),
            on_quit=self.cb["quit"], on_delete=self.cb["delete"], on_move=self.cb["move"],
            on_color=self.cb["color"], on_clone=self.cb["clone"],
            on_texture_change=self.cb["texture"], on_hide_controls=self.cb["hide"],
        )

    def test_action_set(self):
        self.assertEqual(set(self.overlay.action_names()),
                         {Action.QUIT, Action.DELETE, Action.MOVE, Action.COLOR, Action.CLONE})
        self.assertEqual(self.overlay.kind, "wall")
        self.assertEqual(self.overlay.object_id, "w1")

    def test_delete_closes_once(self):
        self.overlay.invoke(Action.DELETE)
        self.cb["delete"].assert_called_once_with()
        self.cb["hide"].assert_called_once_with()

    def test_move_closes_once(self):
        self.overlay.invoke(Action.MOVE)
        self.cb["move"].assert_called_once_with()
        self.cb["hide"].assert_called_once_with()

    def test_clone_and_quit_do_not_close(self):
        self.overlay.invoke(Action.CLONE)
        self.overlay.invoke(Action.QUIT)
        self.cb["clone"].assert_called_once_with()
        self.cb["quit"].assert_called_once_with()
        self.cb["hide"].assert_not_called()

    def test_color_toggles_picker(self):
        self.assertFalse(self.overlay.picker_open)
        self.overlay.invoke(Action.COLOR)
        self.assertTrue(self.overlay.picker_open)
        self.cb["color"].assert_called_once_with()
        self.cb["hide"].assert_not_called()
        self.overlay.invoke(Action.COLOR)
        self.assertFalse(self.overlay.picker_open)

    def test_texture_choice_closes(self):
        self.overlay.invoke(Action.COLOR)
        self.overlay.choose_texture(Texture.MARBLE)
        self.cb["texture"].assert_called_once_with(Texture.MARBLE)
        self.cb["hide"].assert_called_once_with()
        self.assertFalse(self.overlay.picker_open)

    def test_unknown_action(self):
        with self.assertRaises(KeyError):
            self.overlay.invoke(Action.EDIT)

    def test_close_policy(self):
        self.assertEqual(close_policy(self.overlay), {
            Action.QUIT: False, Action.DELETE: True, Action.MOVE: True,
            Action.COLOR: False, Action.CLONE: False,
        })

    def test_missing_callbacks_are_tolerated(self):
        overlay = wall_controls(_wall())
        overlay.invoke(Action.DELETE)
        overlay.choose_texture(Texture.WOOD)


class TestObjectControls(unittest.TestCase):
    def test_no_action_closes(self):
        column = Column("c1", "Колонна", 15, 250, 15, Placement(0, 125, 0))
        cb = {n: mock.Mock() for n in ("quit", "move", "edit", "delete", "clone")}
        overlay = object_controls(column, on_quit=cb["quit"], on_move=cb["move"],
                                  on_edit=cb["edit"], on_delete=cb["delete"], on_clone=cb["clone"])
        self.assertEqual(overlay.kind, "column")
        self.assertFalse(any(close_policy(overlay).values()))
        self.assertEqual(overlay.textures, [])
        for name in (Action.MOVE, Action.EDIT, Action.CLONE, Action.DELETE, Action.QUIT):
            overlay.invoke(name)
        for m in cb.values():
            m.assert_called_once_with()


if __name__ == "__main__":
    unittest.main()
