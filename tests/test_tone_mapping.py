"""Tests for gamma tone mapping and progress bookkeeping."""

import math

import numpy as np
import pytest

from renderer.tone_mapping import gamma_tone_mapping
from renderer.progress import RenderProgress


class TestGammaToneMapping:
    def test_quantization(self):
        linear = np.array([[[0.0, 0.25, 1.0], [0.01, 0.5, 0.81]]])
        out = gamma_tone_mapping(linear)
        assert out.dtype == np.uint8
        assert out.shape == (1, 2, 3)
        expected = [[[0, int(255.99 * 0.5), 255],
                     [int(255.99 * 0.1), int(255.99 * math.sqrt(0.5)), int(255.99 * 0.9)]]]
        np.testing.assert_array_equal(out, expected)

    def test_out_of_range_values_are_clamped(self):
        linear = np.array([[[2.0, -0.5, np.nan], [np.inf, -np.inf, 0.999999]]])
        out = gamma_tone_mapping(linear)
        np.testing.assert_array_equal(out, [[[255, 0, 0], [255, 0, 255]]])

    def test_rejects_wrong_shape(self):
        with pytest.raises(ValueError):
            gamma_tone_mapping(np.zeros((4, 4)))


class TestRenderProgress:
    def test_advance(self):
        progress = RenderProgress(10)
        assert progress.completed == 0
        assert not progress.done
        progress.advance(4)
        progress.advance()
        assert progress.completed == 5
        assert progress.fraction == 0.5
        progress.advance(5)
        assert progress.done

    def test_cannot_go_backwards(self):
        with pytest.raises(ValueError):
            RenderProgress(3).advance(-1)
