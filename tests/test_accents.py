import pytest

from terminal_tones.accents import (
    ACCENT_NAMES,
    classify_accents,
    extract_accents,
    rank_accent_groups,
    rank_accents,
    representative_hex,
    score_accent_groups,
)
from terminal_tones.assignment import assign_terminal_colors, order_anchors
from terminal_tones.color import HEX_PATTERN
from terminal_tones.contrast import build_contrast_palette
from terminal_tones.models import BackgroundGroup, ContrastPalette


@pytest.mark.parametrize("mode", ["dark", "light"])
def test_accents_are_four_distinct_groups(dusk_palette, mode):
    accents = classify_accents(dusk_palette, {"mode": mode})
    names = [a.name for a in accents]

    assert len(set(names)) == 4
    assert set(names) == set(ACCENT_NAMES)
    for accent in accents:
        assert HEX_PATTERN.match(accent.hex)
        assert accent.hex == accent.hex.lower()


def test_deterministic(vga_palette):
    assert classify_accents(vga_palette) == classify_accents(vga_palette)


def test_dominant_color_wins(vga_palette):
    scores = score_accent_groups(["#0000ff"], vga_palette)
    assert ACCENT_NAMES[max(range(4), key=scores.__getitem__)] == "blue"
    assert scores[ACCENT_NAMES.index("blue")] > 0


def test_rank_decays_votes(vga_palette):
    early = score_accent_groups(["#00ffff", "#ffff00"], vga_palette)
    late = score_accent_groups(["#ffff00", "#00ffff"], vga_palette)
    cyan = ACCENT_NAMES.index("cyan")
    assert early[cyan] > late[cyan]


def test_rank_ties_keep_group_order():
    assert rank_accent_groups([0.1, 0.5, 0.5, 0.2]) == [1, 2, 3, 0]


def test_representative_falls_back_to_anchor(vga_palette):
    empty = ContrastPalette(background=BackgroundGroup(background="#000000"), groups=())
    assert representative_hex(empty, vga_palette, "yellow") == vga_palette[3]
    assert representative_hex(empty, vga_palette, "cyan") == vga_palette[6]


def test_extract_accents_uses_extractor(stub_extractor):
    accents = extract_accents("wallpaper.png", extractor=stub_extractor)
    assert stub_extractor.calls == ["wallpaper.png"]
    assert accents.primary.name in ACCENT_NAMES


def test_rank_accents_matches_classifier(dusk_palette):
    assignment = assign_terminal_colors(dusk_palette)
    anchors = order_anchors(dusk_palette, assignment.mapping)
    contrast_palette = build_contrast_palette(anchors)

    assert rank_accents(dusk_palette, anchors, contrast_palette) == classify_accents(dusk_palette)
