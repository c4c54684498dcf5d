import logging

import pytest

from terminal_tones.contrast import build_contrast_palette
from terminal_tones.models import Accent, Accents
from terminal_tones.semantic import compute_semantic_colors
from terminal_tones.terminal import build_terminal_colors


@pytest.fixture
def palette(vga_palette):
    return build_contrast_palette(vga_palette)


@pytest.fixture
def terminal(palette):
    return build_terminal_colors(palette)


def test_fixed_roles(palette, terminal):
    semantic = compute_semantic_colors(palette, terminal)

    assert semantic.background.terminal_color == terminal[0]
    assert semantic.background.color == palette.background
    assert semantic.neutral.terminal_color == terminal[7]
    assert semantic.neutral.color.name == "neutral"
    assert semantic.error.terminal_color == terminal[9]
    assert semantic.error.color.name == "red"
    assert semantic.success.terminal_color == terminal[10]
    assert semantic.warning.terminal_color == terminal[11]


def test_default_accents(palette, terminal):
    semantic = compute_semantic_colors(palette, terminal)

    assert (semantic.primary.terminal_color, semantic.primary.color.name) == (terminal[12], "blue")
    assert (semantic.secondary.terminal_color, semantic.secondary.color.name) == (terminal[14], "cyan")
    assert (semantic.tertiary.terminal_color, semantic.tertiary.color.name) == (terminal[13], "magenta")
    assert (semantic.quaternary.terminal_color, semantic.quaternary.color.name) == (terminal[11], "yellow")


def test_failed_classification_keeps_defaults(palette, terminal, caplog):
    def broken():
        raise RuntimeError("no pixels")

    with caplog.at_level(logging.DEBUG, logger="terminal_tones.semantic"):
        semantic = compute_semantic_colors(palette, terminal, accents=broken)

    assert semantic == compute_semantic_colors(palette, terminal)
    assert "keeping default accents" in caplog.text


def test_classified_accents_override(palette, terminal):
    accents = Accents(
        primary=Accent("cyan", "#00ffff"),
        secondary=Accent("yellow", "#ffff00"),
        tertiary=Accent("blue", "#0000ff"),
        quaternary=Accent("magenta", "#ff00ff"),
    )
    semantic = compute_semantic_colors(palette, terminal, accents=lambda: accents)

    assert semantic.primary.terminal_color == terminal[14]
    assert semantic.primary.color.name == "cyan"
    assert semantic.secondary.terminal_color == terminal[11]
    assert semantic.tertiary.color.name == "blue"
    assert semantic.quaternary.terminal_color == terminal[13]
    # fixed roles are unaffected
    assert semantic.error.terminal_color == terminal[9]
