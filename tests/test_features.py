"""
Test cases for finger distance extraction with synthetic landmarks.
"""
import unittest
import sys
from collections import namedtuple
from pathlib import Path

# Add project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from fingerspell.features import FINGER_GROUPS, REQUIRED_LANDMARKS, compute_finger_distances, distance
from fingerspell.types import InputError


Point3 = namedtuple("Point3", "x y z")


def flat_hand(n: int = 21):
    """All landmarks at the frame center."""
    return [(0.5, 0.5)] * n


def hand_with_finger(group_index: int, p1, p2, p3, n: int = 21):
    """Flat hand with one finger group moved to the given points."""
    landmarks = flat_hand(n)
    group = FINGER_GROUPS[group_index]
    landmarks[group.base] = p1
    landmarks[group.middle] = p2
    landmarks[group.tip] = p3
    return landmarks


class TestDistance(unittest.TestCase):
    """Test planar distance between landmarks."""

    def test_tuple_points(self):
        self.assertEqual(distance((0.0, 0.0), (3.0, 4.0)), 5.0)

    def test_depth_is_ignored(self):
        """Test that z does not contribute to the distance."""
        self.assertEqual(distance((0.0, 0.0, 9.0), (3.0, 4.0, -2.0)), 5.0)

    def test_attribute_points(self):
        """Test MediaPipe-style objects with x/y/z attributes."""
        self.assertEqual(distance(Point3(0.0, 0.0, 0.3), Point3(0.0, 2.0, 0.1)), 2.0)

    def test_unreadable_point(self):
        with self.assertRaises(InputError):
            distance((0.0,), (1.0, 1.0))


class TestComputeFingerDistances(unittest.TestCase):
    """Test the five-finger feature vector."""

    def test_finger_group_order(self):
        names = [group.name for group in FINGER_GROUPS]
        self.assertEqual(names, ["thumb", "index", "middle", "ring", "little"])
        self.assertEqual(FINGER_GROUPS[0].indices, (2, 3, 4))
        self.assertEqual(FINGER_GROUPS[4].indices, (17, 18, 19))

    def test_vector_shape(self):
        """Test that a valid hand yields five non-negative numbers."""
        landmarks = [(i / 21.0, (i * 7 % 21) / 21.0) for i in range(21)]
        distances = compute_finger_distances(landmarks)

        self.assertEqual(len(distances), 5)
        for value in distances:
            self.assertIsInstance(value, float)
            self.assertGreaterEqual(value, 0.0)

    def test_three_four_five(self):
        """Test that (0,0) -> (3,0) -> (3,4) sums to 3 + 4."""
        landmarks = hand_with_finger(0, (0.0, 0.0), (3.0, 0.0), (3.0, 4.0))
        distances = compute_finger_distances(landmarks)

        self.assertEqual(distances[0], 7.0)
        self.assertEqual(distances[1:], (0.0, 0.0, 0.0, 0.0))

    def test_each_group_lands_in_its_slot(self):
        for slot in range(5):
            landmarks = hand_with_finger(slot, (0.0, 0.0), (3.0, 0.0), (3.0, 4.0))
            distances = compute_finger_distances(landmarks)
            expected = [0.0] * 5
            expected[slot] = 7.0
            self.assertEqual(list(distances), expected)

    def test_deterministic(self):
        landmarks = [(i * 0.031, 1.0 - i * 0.017) for i in range(21)]
        self.assertEqual(compute_finger_distances(landmarks), compute_finger_distances(landmarks))

    def test_accepts_landmark_objects(self):
        landmarks = [Point3(0.5, 0.5, 0.0)] * 21
        self.assertEqual(compute_finger_distances(landmarks), (0.0,) * 5)

    def test_twenty_landmarks_is_enough(self):
        self.assertEqual(REQUIRED_LANDMARKS, 20)
        self.assertEqual(len(compute_finger_distances(flat_hand(20))), 5)

    def test_short_input_rejected(self):
        """Test that undersized input fails instead of being padded."""
        with self.assertRaises(InputError):
            compute_finger_distances(flat_hand(19))

    def test_empty_input_rejected(self):
        with self.assertRaises(InputError):
            compute_finger_distances([])

    def test_none_rejected(self):
        with self.assertRaises(InputError):
            compute_finger_distances(None)

    def test_input_error_is_value_error(self):
        self.assertTrue(issubclass(InputError, ValueError))


if __name__ == '__main__':
    unittest.main()
