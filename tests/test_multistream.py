#!/usr/bin/env python3
# -*- coding: utf-8 -*-
"""
マルチストリームフィルターのテスト
"""

import unittest

import numpy as np

import sys
import os
sys.path.append(os.path.join(os.path.dirname(__file__), '..'))

from streamfilter.filters import (
    MultiStreamFilter,
    MovingAverageFilter,
    ExponentialFilter,
    LowPassFilter,
    HighPassFilter,
)
from streamfilter.utils.error_handler import (
    ErrorType,
    ChannelMismatchError,
    FilterConfigurationError,
)


class TestMultiStreamFilter(unittest.TestCase):
    """チャンネルごとに独立したフィルタリングのテスト"""

    def test_channels_are_unmixed(self):
        """窓サイズ1の移動平均では各チャンネルがそのまま出力される"""
        m = MultiStreamFilter(MovingAverageFilter(1), channels=3)
        self.assertEqual(m.filter((1, 10, 100)), (1, 10, 100))
        self.assertEqual(m.filter((2, 20, 200)), (2, 20, 200))

    def test_matches_independent_filters(self):
        """各チャンネルの出力は単独フィルターの出力と一致"""
        prototypes = [
            ExponentialFilter(0.3),
            MovingAverageFilter(4),
            LowPassFilter(rc=0.1, dt=0.01),
            HighPassFilter(rc=0.1, dt=0.01),
        ]
        data = np.random.default_rng(11).normal(size=(50, 3))
        for prototype in prototypes:
            m = MultiStreamFilter(prototype, channels=3)
            singles = [prototype.clone() for _ in range(3)]
            for row in data:
                out = m.filter(row)
                expected = tuple(f.filter(v) for f, v in zip(singles, row))
                self.assertEqual(out, expected)

    def test_channel_filters_are_distinct_clones(self):
        prototype = MovingAverageFilter(2)
        m = MultiStreamFilter(prototype, channels=3)
        self.assertEqual(len(m), 3)
        self.assertEqual(m.channels, 3)
        ids = {id(f) for f in m.filters}
        self.assertEqual(len(ids), 3)
        self.assertNotIn(id(prototype), ids)

        # プロトタイプを使っても各チャンネルには影響しない
        prototype.filter(100.0)
        self.assertEqual(m.filter((0.0, 0.0, 0.0)), (0.0, 0.0, 0.0))

    def test_clone_preserves_prototype_state(self):
        """プロトタイプの現在の状態が各チャンネルに複製される"""
        prototype = ExponentialFilter(0.5)
        prototype.filter(4.0)
        m = MultiStreamFilter(prototype, channels=2)
        self.assertEqual(m.filter((0.0, 4.0)), (1.0, 3.0))

    def test_length_mismatch_is_rejected(self):
        m = MultiStreamFilter(ExponentialFilter(0.5), channels=3)
        for bad in [(1.0, 2.0), (1.0, 2.0, 3.0, 4.0), ()]:
            with self.assertRaises(ChannelMismatchError) as ctx:
                m.filter(bad)
            self.assertEqual(ctx.exception.error_type, ErrorType.CHANNEL_MISMATCH)
        # 失敗した呼び出しで状態は変わらない
        self.assertEqual(m.filter((2.0, 2.0, 2.0)), (1.0, 1.0, 1.0))

    def test_reset_resets_every_channel(self):
        m = MultiStreamFilter(MovingAverageFilter(2), channels=2)
        m.filter((4.0, 8.0))
        m.reset()
        self.assertEqual(m.filter((4.0, 8.0)), (2.0, 4.0))

    def test_reset_then_replay_is_identical(self):
        m = MultiStreamFilter(HighPassFilter(rc=0.2, dt=0.01), channels=3)
        data = np.random.default_rng(13).normal(size=(80, 3))
        first = [m.filter(row) for row in data]
        m.reset()
        second = [m.filter(row) for row in data]
        self.assertEqual(first, second)

    def test_set_window_size_propagates(self):
        m = MultiStreamFilter(MovingAverageFilter(2), channels=3)
        m.set_window_size(5)
        self.assertTrue(all(f.window_size == 5 for f in m.filters))

    def test_set_window_size_on_exponential_is_noop(self):
        m = MultiStreamFilter(ExponentialFilter(0.5), channels=2)
        m.set_window_size(5)
        self.assertEqual(m((2.0, 4.0)), (1.0, 2.0))

    def test_invalid_construction(self):
        with self.assertRaises(FilterConfigurationError):
            MultiStreamFilter(MovingAverageFilter(2), channels=0)
        with self.assertRaises(FilterConfigurationError):
            MultiStreamFilter(object(), channels=2)

    def test_non_finite_channel_count(self):
        for channels in (float('inf'), float('nan'), 2.5):
            with self.assertRaises(FilterConfigurationError):
                MultiStreamFilter(ExponentialFilter(0.5), channels=channels)

    def test_wrapper_clone_is_independent(self):
        m = MultiStreamFilter(ExponentialFilter(0.5), channels=2)
        m.filter((2.0, 2.0))
        c = m.clone()
        c.filter((10.0, 10.0))
        self.assertEqual(m.filters[0].filtered_data, 1.0)
        self.assertEqual(c.filters[0].filtered_data, 5.5)


if __name__ == '__main__':
    unittest.main()
