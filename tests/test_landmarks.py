import unittest

import numpy as np

from PyLandmarkConverter.landmarks import FIXED, MOVING, GeometryRecord, LandmarkSet


class TestGeometryRecord(unittest.TestCase):
    def test_zero_geometry(self):
        geometry = GeometryRecord.zero()
        self.assertEqual(geometry.image_dimensions, "")
        self.assertTrue(np.array_equal(geometry.offset, np.zeros(3)))
        self.assertTrue(np.array_equal(geometry.spacing, np.zeros(3)))
        self.assertIsNone(geometry.source)

    def test_vectors_must_have_three_components(self):
        with self.assertRaises(ValueError):
            GeometryRecord("1 2", offset=[0, 0], spacing=[1, 1, 1])

    def test_vectors_are_read_only(self):
        geometry = GeometryRecord("1 1 1", offset=[1, 2, 3], spacing=[1, 1, 1])
        with self.assertRaises(ValueError):
            geometry.offset[0] = 5.0


class TestLandmarkSet(unittest.TestCase):
    def test_paired_set(self):
        landmarks = LandmarkSet(
            fixed_coordinates=[1, 2, 3, 4, 5, 6],
            moving_coordinates=[7, 8, 9, 10, 11, 12],
        )
        self.assertEqual(landmarks.point_count, 2)
        self.assertTrue(landmarks.has_moving)
        self.assertFalse(landmarks.has_geometry)
        self.assertEqual(landmarks.fixed_points.shape, (2, 3))
        self.assertEqual(landmarks.points(MOVING)[1].tolist(), [10, 11, 12])
        self.assertEqual(landmarks.coordinates(FIXED).tolist(), [1, 2, 3, 4, 5, 6])

    def test_fixed_only_set(self):
        landmarks = LandmarkSet(fixed_coordinates=[0.0, 0.0, 0.0])
        self.assertEqual(landmarks.point_count, 1)
        self.assertFalse(landmarks.has_moving)
        self.assertEqual(landmarks.moving_coordinates.size, 0)

    def test_empty_set(self):
        landmarks = LandmarkSet(fixed_coordinates=[])
        self.assertEqual(landmarks.point_count, 0)

    def test_coordinates_must_be_whole_triples(self):
        with self.assertRaises(ValueError):
            LandmarkSet(fixed_coordinates=[1, 2, 3, 4])

    def test_moving_length_must_match_fixed(self):
        with self.assertRaises(ValueError):
            LandmarkSet(fixed_coordinates=[1, 2, 3], moving_coordinates=[1, 2, 3, 4, 5, 6])

    def test_only_three_dimensions(self):
        with self.assertRaises(ValueError):
            LandmarkSet(fixed_coordinates=[1, 2, 3], dimension_count=2)

    def test_coordinates_are_copied_and_read_only(self):
        source = np.array([1.0, 2.0, 3.0])
        landmarks = LandmarkSet(fixed_coordinates=source)
        source[0] = 100.0
        self.assertEqual(landmarks.fixed_coordinates[0], 1.0)
        with self.assertRaises(ValueError):
            landmarks.fixed_coordinates[0] = 5.0

    def test_unknown_coordinate_set(self):
        landmarks = LandmarkSet(fixed_coordinates=[1, 2, 3])
        with self.assertRaises(ValueError):
            landmarks.coordinates("both")

    def test_from_geometry_carries_geometry(self):
        geometry = GeometryRecord("10 20 30", offset=[1, 2, 3], spacing=[0.5, 0.5, 1])
        landmarks = LandmarkSet.from_geometry([1, 2, 3], [4, 5, 6], geometry, source_path="p.txt")
        self.assertTrue(landmarks.has_geometry)
        self.assertEqual(landmarks.image_dimensions, "10 20 30")
        self.assertEqual(landmarks.offset.tolist(), [1, 2, 3])
        self.assertEqual(landmarks.spacing.tolist(), [0.5, 0.5, 1])
        self.assertEqual(landmarks.source_path, "p.txt")


if __name__ == "__main__":
    unittest.main()
