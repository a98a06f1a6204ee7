"""Tests for the demo's measurement and layout helpers."""

import sys
import os
import unittest

import numpy as np

sys.path.insert(0, os.path.join(os.path.dirname(__file__), "..", "src"))

from binary_search_tree import BinarySearchTree
from bst_demo import SAMPLE, layout, measure_heights


class TestMeasureHeights(unittest.TestCase):

    def test_sorted_insertion_height_equals_size(self):
        sizes, sorted_heights, _, _ = measure_heights([1, 5, 20], trials=3,
                                                      rng=np.random.default_rng(0))
        np.testing.assert_array_equal(sizes, [1, 5, 20])
        np.testing.assert_array_equal(sorted_heights, [1, 5, 20])

    def test_random_heights_within_bounds(self):
        sizes, sorted_heights, mean, std = measure_heights([31, 127], trials=10,
                                                           rng=np.random.default_rng(3))
        self.assertEqual(mean.shape, (2,))
        self.assertTrue(np.all(mean >= np.log2(sizes + 1)))
        self.assertTrue(np.all(mean <= sorted_heights))
        self.assertTrue(np.all(std >= 0))

    def test_same_seed_reproduces_measurement(self):
        first = measure_heights([50], trials=5, rng=np.random.default_rng(42))
        second = measure_heights([50], trials=5, rng=np.random.default_rng(42))
        for a, b in zip(first, second):
            np.testing.assert_array_equal(a, b)


class TestLayout(unittest.TestCase):

    def test_sample_tree_positions(self):
        tree = BinarySearchTree(SAMPLE)
        positions, edges, labels = layout(tree)
        by_value = {labels[key]: pos for key, pos in positions.items()}
        self.assertEqual(by_value[20], (0.0, -2.0))
        self.assertEqual(by_value[50], (3.0, 0.0))
        self.assertEqual(by_value[80], (6.0, -2.0))
        self.assertEqual(len(edges), len(SAMPLE) - 1)

    def test_empty_tree_has_no_positions(self):
        positions, edges, labels = layout(BinarySearchTree())
        self.assertEqual(positions, {})
        self.assertEqual(edges, [])
        self.assertEqual(labels, {})


if __name__ == "__main__":
    unittest.main()
