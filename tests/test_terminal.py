import pytest

from terminal_tones.color import hex_to_rgb, is_hex_color, to_okhsl
from terminal_tones.config import GenerateOptions
from terminal_tones.contrast import build_contrast_palette
from terminal_tones.terminal import (
    BRIGHT_INDEX_BY_NAME,
    FOREGROUND_INDICES,
    HUE_ORDER,
    build_terminal_colors,
)


@pytest.fixture
def palette(vga_palette):
    return build_contrast_palette(vga_palette)


def test_sixteen_hex_colors(palette):
    terminal = build_terminal_colors(palette)
    assert len(terminal) == 16
    assert all(is_hex_color(c) for c in terminal)


def test_slot_layout(palette):
    terminal = build_terminal_colors(palette)
    neutral = palette.group("neutral").values

    assert terminal[0] == palette.background.background
    assert terminal[7] == neutral[2].value
    assert terminal[8] == neutral[1].value
    assert terminal[15] == neutral[5].value
    for offset, name in enumerate(HUE_ORDER):
        values = palette.group(name).values
        assert terminal[1 + offset] == values[1].value
        assert terminal[9 + offset] == values[5].value
        assert BRIGHT_INDEX_BY_NAME[name] == 9 + offset


def test_foreground_multiplier_only_touches_foreground(palette):
    normal = build_terminal_colors(palette)
    dimmed = build_terminal_colors(palette, GenerateOptions(foreground_lightness_multiplier=0.5))

    assert dimmed[15] != normal[15]
    assert to_okhsl(dimmed[15]).l < to_okhsl(normal[15]).l
    for i in range(16):
        if i not in FOREGROUND_INDICES:
            assert dimmed[i] == normal[i]


def test_zero_saturation_is_grayscale(palette):
    terminal = build_terminal_colors(palette, GenerateOptions(saturation_multiplier=0))
    for color in terminal:
        r, g, b = hex_to_rgb(color)
        assert r == g == b
