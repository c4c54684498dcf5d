"""Shared fixtures for terminal_tones tests."""

import pytest
from PIL import Image

# The dark reference table itself, role order
VGA_PALETTE = [
    "#000000",
    "#800000",
    "#008000",
    "#808000",
    "#000080",
    "#800080",
    "#008080",
    "#c0c0c0",
    "#808080",
    "#ff0000",
    "#00ff00",
    "#ffff00",
    "#0000ff",
    "#ff00ff",
    "#00ffff",
    "#ffffff",
    "#ffa500",
]

# A 22-color extraction from a dusky wallpaper, most dominant first
DUSK_PALETTE = [
    "#1b1d2b",
    "#2e3448",
    "#bf616a",
    "#a3be8c",
    "#ebcb8b",
    "#81a1c1",
    "#b48ead",
    "#88c0d0",
    "#d8dee9",
    "#4c566a",
    "#d08770",
    "#e5e9f0",
    "#eceff4",
    "#5e81ac",
    "#8fbcbb",
    "#3b4252",
    "#434c5e",
    "#e06c75",
    "#98c379",
    "#61afef",
    "#c678dd",
    "#56b6c2",
]

# (color, stripe width) for the synthetic image
STRIPES = [
    ((255, 0, 0), 24),
    ((0, 255, 0), 18),
    ((0, 0, 255), 12),
    ((0, 0, 0), 6),
]


@pytest.fixture
def vga_palette():
    return list(VGA_PALETTE)


@pytest.fixture
def dusk_palette():
    return list(DUSK_PALETTE)


@pytest.fixture
def stub_extractor():
    """Extractor that ignores its input and returns the dusk palette."""
    calls = []

    def extract(image):
        calls.append(image)
        return list(DUSK_PALETTE)

    extract.calls = calls
    return extract


@pytest.fixture
def stripe_image():
    """60x20 RGB image of vertical stripes, widest first."""
    img = Image.new("RGB", (60, 20))
    x = 0
    for color, width in STRIPES:
        for dx in range(width):
            for y in range(20):
                img.putpixel((x + dx, y), color)
        x += width
    return img
