"""
Tests for shape transforms and orientation enumeration.
"""

import unittest

from engine.pieces import PIECES
from engine.shapes import (
    bounding_size, canonical_key, mirror_horizontal, mirror_vertical,
    normalize, orientations, rotate90, unique_orientations,
)

# A few shapes that are not normalized, to exercise translation
LOOSE_SHAPES = [
    ((3, 4), (4, 4), (4, 5)),
    ((-2, -1), (-1, -1), (0, -1), (0, 0)),
    ((5, -3),),
    ((1, 1), (1, 2), (2, 2), (2, 3), (3, 3)),
]


def _all_test_shapes():
    return [piece.shape for piece in PIECES] + LOOSE_SHAPES


class TestTransforms(unittest.TestCase):
    """Test the pure coordinate transforms."""

    def test_rotate90_maps_x_y_to_y_minus_x(self):
        self.assertEqual(rotate90(((1, 2), (0, 0))), ((2, -1), (0, 0)))

    def test_mirrors(self):
        self.assertEqual(mirror_horizontal(((1, 2),)), ((-1, 2),))
        self.assertEqual(mirror_vertical(((1, 2),)), ((1, -2),))

    def test_transforms_do_not_modify_input(self):
        shape = [(1, 2), (3, 4)]
        rotate90(shape)
        mirror_horizontal(shape)
        mirror_vertical(shape)
        normalize(shape)
        self.assertEqual(shape, [(1, 2), (3, 4)])

    def test_normalize_moves_minimum_to_origin(self):
        normalized = normalize(((3, 4), (4, 4), (4, 5)))
        self.assertEqual(normalized, ((0, 0), (1, 0), (1, 1)))

    def test_normalize_preserves_order(self):
        self.assertEqual(normalize(((2, 1), (1, 1))), ((1, 0), (0, 0)))

    def test_normalize_empty_shape(self):
        self.assertEqual(normalize(()), ())

    def test_normalize_is_idempotent(self):
        for shape in _all_test_shapes():
            once = normalize(shape)
            self.assertEqual(normalize(once), once)

    def test_four_rotations_return_to_start(self):
        for shape in _all_test_shapes():
            rotated = shape
            for _ in range(4):
                rotated = rotate90(rotated)
            self.assertEqual(normalize(rotated), normalize(shape))

    def test_mirrors_are_involutions(self):
        for shape in _all_test_shapes():
            self.assertEqual(normalize(mirror_horizontal(mirror_horizontal(shape))), normalize(shape))
            self.assertEqual(normalize(mirror_vertical(mirror_vertical(shape))), normalize(shape))

    def test_bounding_size(self):
        self.assertEqual(bounding_size(((0, 0), (1, 0), (2, 0))), (3, 1))
        self.assertEqual(bounding_size(((0, 0), (0, 1))), (1, 2))
        self.assertEqual(bounding_size(()), (0, 0))


class TestOrientations(unittest.TestCase):
    """Test orientation enumeration."""

    def test_eight_normalized_orientations(self):
        for piece in PIECES:
            variants = orientations(piece.shape)
            self.assertEqual(len(variants), 8)
            for variant in variants:
                self.assertEqual(normalize(variant), variant)
                self.assertEqual(len(set(variant)), piece.size)

    def test_first_orientation_is_base_shape(self):
        for piece in PIECES:
            self.assertEqual(orientations(piece.shape)[0], piece.shape)

    def test_orientations_cover_vertical_mirror(self):
        """Every mirror/rotation combination appears among the 8 variants."""
        for piece in PIECES:
            keys = {canonical_key(variant) for variant in orientations(piece.shape)}
            shape = piece.shape
            for _ in range(4):
                self.assertIn(canonical_key(shape), keys)
                self.assertIn(canonical_key(mirror_horizontal(shape)), keys)
                self.assertIn(canonical_key(mirror_vertical(shape)), keys)
                self.assertIn(canonical_key(mirror_horizontal(mirror_vertical(shape))), keys)
                shape = rotate90(shape)

    def test_unique_orientation_counts(self):
        expected = {
            "I1": 1, "I2": 2, "I3": 2, "L3": 4, "I4": 2, "L4": 8, "T4": 4,
            "O4": 1, "S4": 4, "I5": 2, "L5": 8, "Y5": 8, "N5": 8, "P5": 8,
            "U5": 4, "V5": 4, "W5": 4, "Z5": 4, "F5": 8, "T5": 4, "X5": 1,
        }
        for piece in PIECES:
            self.assertEqual(len(unique_orientations(piece.shape)), expected[piece.name], piece.name)
        self.assertEqual(sum(expected.values()), 91)

    def test_unique_orientations_keep_first_index(self):
        domino = next(piece for piece in PIECES if piece.name == "I2")
        indices = [index for index, _ in unique_orientations(domino.shape)]
        self.assertEqual(indices, [0, 1])


if __name__ == '__main__':
    unittest.main()
