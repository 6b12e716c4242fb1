import unittest

from planner.floor import UsedArea, calculate_used_area, used_area_overlay, utilization
from planner.models import FLOOR_ID, Placement, Wall
from planner.utils import FLOOR_OVERLAY_LIFT


def _floor():
    return Wall(FLOOR_ID, "Пол", 1000, 10, 1000, Placement(0, 0, 0), is_locked=True)


class TestUsedArea(unittest.TestCase):
    def test_no_walls(self):
        self.assertIsNone(calculate_used_area([]))

    def test_only_floor(self):
        self.assertIsNone(calculate_used_area([_floor()]))

    def test_two_walls_bounding_box(self):
        walls = [
            _floor(),
            Wall("a", width=200, depth=200, position=Placement(0, 0, 0)),
            Wall("b", width=200, depth=200, position=Placement(300, 0, 0)),
        ]
        self.assertEqual(calculate_used_area(walls), UsedArea(-100, 400, -100, 100))

    def test_rotation_is_ignored(self):
        wall = Wall("a", width=400, depth=10, position=Placement(0, 0, 0),
                    rotation=Placement(0, 1.57, 0))
        area = calculate_used_area([wall])
        self.assertEqual((area.width, area.depth), (400, 10))


class TestOverlay(unittest.TestCase):
    def test_overlay_sits_just_above_floor(self):
        area = UsedArea(-100, 400, -100, 100)
        geo = used_area_overlay(area, _floor())
        self.assertAlmostEqual(geo.position[0], 1.5)
        self.assertAlmostEqual(geo.position[1], FLOOR_OVERLAY_LIFT)
        self.assertAlmostEqual(geo.position[2], 0.0)
        self.assertAlmostEqual(geo.dimensions[0], 5.0)
        self.assertAlmostEqual(geo.dimensions[2], 2.0)

    def test_utilization_ratio(self):
        area = UsedArea(0, 500, 0, 200)
        self.assertAlmostEqual(utilization(area, _floor()), 0.1)
        self.assertEqual(utilization(None, _floor()), 0.0)
        self.assertEqual(utilization(area, None), 0.0)

    def test_utilization_is_clamped(self):
        huge = UsedArea(-5000, 5000, -5000, 5000)
        self.assertEqual(utilization(huge, _floor()), 1.0)


if __name__ == "__main__":
    unittest.main()
