#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
デモスクリプト（main.py / visualize_filters.py）のテスト
"""

import unittest
import os
import tempfile
import shutil

import numpy as np

import sys
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from main import run_console_mode
from visualize_filters import (
    generate_noisy_signal,
    visualize_basic,
    visualize_high_low_pass,
    visualize_multi_stream,
)


class TestDemo(unittest.TestCase):
    """デモの出力テスト"""

    def setUp(self):
        self.test_dir = tempfile.mkdtemp()

    def tearDown(self):
        shutil.rmtree(self.test_dir)

    def test_console_mode_outputs(self):
        outputs = run_console_mode(samples=5)
        self.assertEqual(len(outputs), 5)
        out_m, out_e = outputs[0]
        self.assertAlmostEqual(out_m, 0.01)
        self.assertAlmostEqual(out_e, 0.1)

    def test_noisy_signal_is_reproducible(self):
        x1, y1 = generate_noisy_signal(100, seed=3)
        x2, y2 = generate_noisy_signal(100, seed=3)
        self.assertEqual(len(x1), 100)
        np.testing.assert_array_equal(y1, y2)

    def test_high_low_pass_plot(self):
        path = os.path.join(self.test_dir, 'highlowpass.png')
        result = visualize_high_low_pass(200, path, seed=1)
        self.assertTrue(os.path.exists(path))
        self.assertEqual(result['low_pass'].shape, (200,))
        self.assertEqual(result['high_pass'].shape, (200,))

    def test_basic_plot(self):
        path = os.path.join(self.test_dir, 'basic.png')
        result = visualize_basic(200, path, seed=1)
        self.assertTrue(os.path.exists(path))
        self.assertEqual(result['moving_average'].shape, (200,))
        self.assertEqual(result['exponential'].shape, (200,))
        self.assertAlmostEqual(result['exponential'][0], 0.1 * result['input'][0])
        self.assertAlmostEqual(result['moving_average'][0], result['input'][0] / 50)

    def test_multi_stream_plot(self):
        path = os.path.join(self.test_dir, 'multi.png')
        result = visualize_multi_stream(200, path, seed=1)
        self.assertTrue(os.path.exists(path))
        self.assertEqual(result['filtered'].shape, (200, 2))


if __name__ == '__main__':
    unittest.main()
