import pytest

from terminal_tones import (
    GenerateOptions,
    PaletteTooSmallError,
    generate_color_scheme,
    generate_color_scheme_from_palette,
)
from terminal_tones import accents
from terminal_tones.accents import classify_accents
from terminal_tones.color import is_hex_color, to_okhsl
from terminal_tones.models import BackgroundGroup


def _group(scheme, name):
    return next(g for g in scheme.contrast_colors[1:] if g.name == name)


class TestFromPalette:
    def test_reference_palette(self, vga_palette):
        scheme = generate_color_scheme_from_palette(vga_palette)

        assert len(scheme.terminal) == 16
        assert all(is_hex_color(c) and c == c.lower() for c in scheme.terminal)
        assert isinstance(scheme.contrast_colors[0], BackgroundGroup)
        assert scheme.terminal[0] == scheme.contrast_colors[0].background
        assert len(scheme.contrast_colors) == 9

    def test_deterministic(self, dusk_palette):
        a = generate_color_scheme_from_palette(dusk_palette)
        b = generate_color_scheme_from_palette(dusk_palette)
        assert a == b

    def test_accepts_option_mapping(self, dusk_palette):
        from_dict = generate_color_scheme_from_palette(
            dusk_palette, {"mode": "light", "contrastMultiplier": 1.2}
        )
        from_options = generate_color_scheme_from_palette(
            dusk_palette, GenerateOptions(mode="light", contrast_multiplier=1.2)
        )
        assert from_dict == from_options

    def test_accents_reuse_contrast_palette(self, dusk_palette, monkeypatch):
        expected = generate_color_scheme_from_palette(dusk_palette)

        calls = []
        for name in ("assign_terminal_colors", "build_contrast_palette"):
            original = getattr(accents, name)
            monkeypatch.setattr(
                accents, name, lambda *a, _f=original, _n=name, **kw: calls.append(_n) or _f(*a, **kw)
            )
        scheme = generate_color_scheme_from_palette(dusk_palette)

        assert calls == []
        assert scheme == expected
        assert scheme.semantic_colors.primary.color.name == classify_accents(dusk_palette).primary.name

    def test_too_small(self, dusk_palette):
        with pytest.raises(PaletteTooSmallError):
            generate_color_scheme_from_palette(dusk_palette[:10])


class TestModes:
    @pytest.mark.parametrize("palette_name", ["vga_palette", "dusk_palette"])
    def test_light_background_is_lighter(self, request, palette_name):
        palette = request.getfixturevalue(palette_name)
        dark = generate_color_scheme_from_palette(palette, {"mode": "dark"})
        light = generate_color_scheme_from_palette(palette, {"mode": "light"})

        l_dark = to_okhsl(dark.contrast_colors[0].background).l
        l_light = to_okhsl(light.contrast_colors[0].background).l
        assert l_light > l_dark


class TestMultiplierOrdering:
    def test_background_lightness_multiplier(self, dusk_palette):
        backgrounds = [
            generate_color_scheme_from_palette(
                dusk_palette, {"background_lightness_multiplier": m}
            ).terminal[0]
            for m in (0.5, 1.0, 1.5)
        ]
        lightness = [to_okhsl(bg).l for bg in backgrounds]
        assert lightness[0] < lightness[1] < lightness[2]

    @pytest.mark.parametrize("name", ["red", "blue"])
    def test_contrast_multiplier_widens_gap(self, dusk_palette, name):
        gaps = []
        for m in (0.5, 1.0, 1.5):
            scheme = generate_color_scheme_from_palette(dusk_palette, {"contrast_multiplier": m})
            bg_l = to_okhsl(scheme.terminal[0]).l
            gaps.append(abs(to_okhsl(_group(scheme, name).values[5].value).l - bg_l))
        assert gaps[0] < gaps[1] < gaps[2]

    def test_contrast_multiplier_terminal(self, dusk_palette):
        gaps = []
        for m in (0.5, 1.0, 1.5):
            scheme = generate_color_scheme_from_palette(dusk_palette, {"contrast_multiplier": m})
            bg_l = to_okhsl(scheme.terminal[0]).l
            gaps.append(abs(to_okhsl(scheme.terminal[12]).l - bg_l))
        assert gaps[0] < gaps[1] < gaps[2]


class TestFromImage:
    def test_injected_extractor(self, stub_extractor, dusk_palette):
        scheme = generate_color_scheme("any.jpg", extractor=stub_extractor)
        assert stub_extractor.calls == ["any.jpg"]
        assert scheme == generate_color_scheme_from_palette(dusk_palette)

    def test_extractor_too_few_colors(self):
        with pytest.raises(PaletteTooSmallError) as exc:
            generate_color_scheme("any.jpg", extractor=lambda image: ["#000000"] * 5)
        assert exc.value.count == 5

    def test_default_extractor_on_small_image(self, stripe_image):
        # only four distinct colors, fewer than the reference roles
        with pytest.raises(PaletteTooSmallError):
            generate_color_scheme(stripe_image)
