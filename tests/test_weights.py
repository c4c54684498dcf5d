import numpy as np
import pytest

from terminal_tones.weights import fuzzy_palette_weights_oklab, rgb_array_to_oklab

PALETTE = ["#000000", "#ffffff"]


def test_normalizes_to_one():
    w = fuzzy_palette_weights_oklab(PALETTE, [[0, 0, 0], [255, 255, 255]], ignore_near_white=False)
    assert w.sum() == pytest.approx(1.0, abs=1e-6)


def test_closer_color_weighs_more():
    w = fuzzy_palette_weights_oklab(PALETTE, [[10, 10, 10]] * 100, sigma=0.06)
    assert w[0] > w[1]


def test_reflects_pixel_mix():
    pixels = [[0, 0, 0]] * 300 + [[255, 255, 255]] * 100
    w = fuzzy_palette_weights_oklab(PALETTE, pixels, sigma=0.06, ignore_near_white=False)
    assert w[0] > w[1]
    assert w[0] == pytest.approx(0.75, abs=0.01)


def test_ignores_transparent_and_near_white():
    pixels = (
        [[20, 20, 20, 255]] * 50
        + [[20, 20, 20, 10]] * 100
        + [[251, 251, 251, 255]] * 100
    )
    w = fuzzy_palette_weights_oklab(PALETTE, pixels, alpha_threshold=128, ignore_near_white=True)
    assert w[0] > w[1]


def test_nothing_contributes():
    assert fuzzy_palette_weights_oklab(PALETTE, []).tolist() == [0.0, 0.0]
    w = fuzzy_palette_weights_oklab(PALETTE, [[255, 255, 255]] * 10)
    assert w.tolist() == [0.0, 0.0]


def test_oklab_of_white():
    lab = rgb_array_to_oklab(np.array([[255, 255, 255]]))
    assert lab.shape == (1, 3)
    assert lab[0, 0] == pytest.approx(1.0, abs=1e-4)
    assert abs(lab[0, 1]) < 1e-4
    assert abs(lab[0, 2]) < 1e-4
