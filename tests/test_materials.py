import unittest

from planner.materials import (FLOOR_MATERIAL, WALL_TEXTURES, floor_material, resolve_object_material,
                               resolve_wall_material, texture_options, used_area_material)
from planner.models import Category, Texture


class TestWallMaterial(unittest.TestCase):
    def test_unknown_texture_falls_back_to_default(self):
        self.assertEqual(resolve_wall_material("velvet"), resolve_wall_material(Texture.DEFAULT))
        self.assertEqual(resolve_wall_material("velvet", True),
                         resolve_wall_material(Texture.DEFAULT, True))

    def test_wood_idle(self):
        mat = resolve_wall_material(Texture.WOOD)
        self.assertEqual(mat.color, "#8B4513")
        self.assertEqual(mat.roughness, 0.9)
        self.assertEqual(mat.opacity, 1.0)
        self.assertFalse(mat.transparent)

    def test_selected_highlight(self):
        mat = resolve_wall_material(Texture.BRICK, is_selected=True)
        self.assertEqual(mat.color, "#ef4444")
        self.assertEqual(mat.emissive, "#ef4444")
        self.assertAlmostEqual(mat.opacity, 0.7)
        self.assertTrue(mat.transparent)

    def test_every_texture_resolves(self):
        for key in WALL_TEXTURES:
            self.assertEqual(resolve_wall_material(key).color, WALL_TEXTURES[key].color)


class TestObjectMaterial(unittest.TestCase):
    def test_shelf_two_states(self):
        self.assertEqual(resolve_object_material(Category.SHELF).color, "#d97706")
        selected = resolve_object_material(Category.SHELF, True)
        self.assertEqual(selected.color, "#f59e0b")
        self.assertAlmostEqual(selected.opacity, 0.8)

    def test_column_two_states(self):
        self.assertEqual(resolve_object_material(Category.COLUMN).color, "#7e22ce")
        self.assertEqual(resolve_object_material(Category.COLUMN, True).color, "#8b5cf6")


class TestFixedMaterials(unittest.TestCase):
    def test_floor_and_used_area(self):
        self.assertIs(floor_material(), FLOOR_MATERIAL)
        self.assertEqual(floor_material().opacity, 1.0)
        self.assertTrue(used_area_material().transparent)
        self.assertAlmostEqual(used_area_material().opacity, 0.6)

    def test_texture_options_cover_table_in_order(self):
        keys = [o.key for o in texture_options()]
        self.assertEqual(keys, list(WALL_TEXTURES))
        self.assertIn(Texture.MARBLE, keys)


if __name__ == "__main__":
    unittest.main()
