"""
Contrast ramps: for a group of key colors, find the swatch that hits each
target WCAG contrast ratio against a background.
"""

from ..color import (
    check_unit_interval,
    clamp01,
    contrast_ratio,
    hex_luminance,
    normalize_hex,
    okhsl_luminance,
    okhsl_to_hex,
    oklab_mean,
    oklab_to_okhsl,
    to_okhsl,
    to_oklab,
)
from ..models import ContrastGroup, ContrastStep, Okhsl

CONTRAST_STEPS = 9

# Background lightness never moves more than this from black (dark) or
# toward white (light) before the multiplier is applied
BACKGROUND_LIGHTNESS_CAP = 0.1

# Keys closer than this in lightness are blended into one stop
MERGE_EPSILON = 1e-3

SEARCH_ITERATIONS = 60


def contrast_ratios(options):
    """Target contrast ratios for the nine ramp steps.

    linear: 1..9. geometric: exponential spacing from contrast_min to
    contrast_max, eased by 1/contrast_gamma so steps bunch up near the
    background. Both are then scaled by contrast_multiplier, shifted by
    contrast_lift, and floored at 1.
    """
    if options.contrast_scale == "geometric":
        lo, hi = options.contrast_min, options.contrast_max
        n = CONTRAST_STEPS - 1
        base = [
            lo * (hi / lo) ** ((i / n) ** (1 / options.contrast_gamma))
            for i in range(CONTRAST_STEPS)
        ]
    else:
        base = [float(r) for r in range(1, CONTRAST_STEPS + 1)]

    return [max(1.0, r * options.contrast_multiplier + options.contrast_lift) for r in base]


def background_lightness(l0, mode, multiplier=1.0):
    """Target OKHSL lightness for the background given the raw anchor's.

    Dark backgrounds stay near black and light ones near white whatever the
    image tone; the multiplier deliberately pushes them away.
    """
    check_unit_interval(l0, "background lightness")
    if mode == "dark":
        return clamp01(min(l0, BACKGROUND_LIGHTNESS_CAP) * multiplier)
    delta = min(1 - l0, BACKGROUND_LIGHTNESS_CAP)
    return clamp01(l0 + delta * multiplier)


def _lerp_hue(a, b, t):
    # Achromatic stops carry no meaningful hue
    if a.s == 0:
        return b.h
    if b.s == 0:
        return a.h
    d = (b.h - a.h + 540) % 360 - 180
    return (a.h + d * t) % 360


def _build_stops(keys):
    colors = sorted(((to_okhsl(k), to_oklab(k)) for k in keys), key=lambda pair: pair[0].l)

    clusters = []
    for okhsl, oklab in colors:
        if clusters and okhsl.l - clusters[-1][-1][0].l < MERGE_EPSILON:
            clusters[-1].append((okhsl, oklab))
        else:
            clusters.append([(okhsl, oklab)])

    stops = []
    for cluster in clusters:
        if len(cluster) == 1:
            stops.append(cluster[0][0])
        else:
            stops.append(oklab_to_okhsl(oklab_mean(lab for _, lab in cluster)))
    return stops


class ContrastRamp:
    """Lightness-indexed OKHSL scale through a group's key colors.

    Hue and saturation are interpolated between keys and held constant past
    the outermost keys; OKHSL lightness 0 and 1 are black and white for any
    hue, so the scale always spans the full lightness range.
    """

    def __init__(self, name, keys):
        self.name = name
        self.keys = [normalize_hex(k) for k in keys]
        self._stops = _build_stops(self.keys)

    def color_at(self, lightness):
        stops = self._stops
        if lightness <= stops[0].l:
            return Okhsl(stops[0].h, stops[0].s, lightness)
        if lightness >= stops[-1].l:
            return Okhsl(stops[-1].h, stops[-1].s, lightness)

        for a, b in zip(stops, stops[1:]):
            if a.l <= lightness <= b.l:
                t = (lightness - a.l) / (b.l - a.l)
                return Okhsl(_lerp_hue(a, b, t), a.s + (b.s - a.s) * t, lightness)

        return Okhsl(stops[-1].h, stops[-1].s, lightness)

    def swatch(self, background, ratio):
        """Swatch closest to the background reaching the target contrast.

        Searches away from the background: upward on dark backgrounds,
        downward on light ones. Ratios beyond reach return white or black.
        """
        bg_l = to_okhsl(background).l
        bg_lum = hex_luminance(background)

        def contrast_at(lightness):
            return contrast_ratio(okhsl_luminance(self.color_at(lightness)), bg_lum)

        near = bg_l
        far = 1.0 if bg_l < 0.5 else 0.0
        if contrast_at(far) <= ratio:
            return okhsl_to_hex(self.color_at(far))

        for _ in range(SEARCH_ITERATIONS):
            mid = (near + far) / 2
            if contrast_at(mid) < ratio:
                near = mid
            else:
                far = mid

        return okhsl_to_hex(self.color_at(far))

    def steps(self, background, ratios):
        values = tuple(
            ContrastStep(name=f"{self.name}{(i + 1) * 100}", contrast=ratio, value=self.swatch(background, ratio))
            for i, ratio in enumerate(ratios)
        )
        return ContrastGroup(name=self.name, values=values)
