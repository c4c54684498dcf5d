"""
Color conversions and perceptual metrics.

Two perceptual spaces are used side by side:

- OKHSL (cylindrical, circular hue, lightness and saturation in [0, 1]) for
  hue-aware role costs and lightness targeting.
- OKLab (Cartesian) for centroids, averaging and Euclidean distances.

Both follow Bjorn Ottosson's reference formulas
(https://bottosson.github.io/posts/colorpicker/).
"""

import math
import re
import sys

from .errors import ColorSpaceError, InvalidColorError
from .models import ColorDiff, Okhsl, Oklab

HEX_PATTERN = re.compile(r"^#(?:[0-9a-f]{3}|[0-9a-f]{6})$", re.IGNORECASE)

# Tolerance for values that must stay inside [0, 1]
UNIT_EPSILON = 1e-6

# Below this chroma a color is treated as achromatic (hue 0, saturation 0)
ACHROMATIC_CHROMA = 1e-7

_FLT_MAX = sys.float_info.max


def is_hex_color(value):
    return isinstance(value, str) and HEX_PATTERN.match(value.strip()) is not None


def normalize_hex(value):
    """Return a lowercase #rrggbb string, expanding #rgb by digit doubling."""
    if not is_hex_color(value):
        raise InvalidColorError(value)
    digits = value.strip().lstrip("#").lower()
    if len(digits) == 3:
        digits = "".join(ch * 2 for ch in digits)
    return f"#{digits}"


def rgb_to_hex(r, g, b):
    return f"#{r:02x}{g:02x}{b:02x}"


def hex_to_rgb(hex_color):
    hex_color = normalize_hex(hex_color).lstrip("#")
    return tuple(int(hex_color[i : i + 2], 16) for i in (0, 2, 4))


def relative_luminance(r, g, b):
    """Calculate relative luminance per WCAG 2.0"""

    def channel(c):
        c = c / 255
        return c / 12.92 if c <= 0.03928 else ((c + 0.055) / 1.055) ** 2.4

    return 0.2126 * channel(r) + 0.7152 * channel(g) + 0.0722 * channel(b)


def contrast_ratio(lum1, lum2):
    """Calculate contrast ratio between two luminances"""
    lighter = max(lum1, lum2)
    darker = min(lum1, lum2)
    return (lighter + 0.05) / (darker + 0.05)


def hex_luminance(hex_color):
    return relative_luminance(*hex_to_rgb(hex_color))


def hex_contrast(hex_a, hex_b):
    """WCAG contrast ratio between two hex colors"""
    return contrast_ratio(hex_luminance(hex_a), hex_luminance(hex_b))


def check_unit_interval(value, label="value"):
    """Raise ColorSpaceError unless value lies in [0, 1] within UNIT_EPSILON."""
    if value is None or math.isnan(value):
        raise ColorSpaceError(f"{label} is undefined")
    if value < -UNIT_EPSILON or value > 1 + UNIT_EPSILON:
        raise ColorSpaceError(f"{label} out of [0,1]: {value}")
    return value


def clamp01(x):
    return max(0.0, min(1.0, x))


# === sRGB TRANSFER ===


def _srgb_to_linear(c):
    return c / 12.92 if c <= 0.04045 else ((c + 0.055) / 1.055) ** 2.4


def _linear_to_srgb(c):
    return 12.92 * c if c <= 0.0031308 else 1.055 * c ** (1 / 2.4) - 0.055


def _cbrt(x):
    return math.copysign(abs(x) ** (1 / 3), x)


# === OKLAB ===


def linear_srgb_to_oklab(r, g, b):
    l = 0.4122214708 * r + 0.5363325363 * g + 0.0514459929 * b
    m = 0.2119034982 * r + 0.6806995451 * g + 0.1073969566 * b
    s = 0.0883024619 * r + 0.2817188376 * g + 0.6299787005 * b

    l_, m_, s_ = _cbrt(l), _cbrt(m), _cbrt(s)

    return Oklab(
        0.2104542553 * l_ + 0.7936177850 * m_ - 0.0040720468 * s_,
        1.9779984951 * l_ - 2.4285922050 * m_ + 0.4505937099 * s_,
        0.0259040371 * l_ + 0.7827717662 * m_ - 0.8086757660 * s_,
    )


def oklab_to_linear_srgb(L, a, b):
    l_ = L + 0.3963377774 * a + 0.2158037573 * b
    m_ = L - 0.1055613458 * a - 0.0638541728 * b
    s_ = L - 0.0894841775 * a - 1.2914855480 * b

    l, m, s = l_**3, m_**3, s_**3

    return (
        +4.0767416621 * l - 3.3077115913 * m + 0.2309699292 * s,
        -1.2684380046 * l + 2.6097574011 * m - 0.3413193965 * s,
        -0.0041960863 * l - 0.7034186147 * m + 1.7076147010 * s,
    )


def rgb_to_oklab(r, g, b):
    """OKLab from 0-255 sRGB channels"""
    return linear_srgb_to_oklab(
        _srgb_to_linear(r / 255), _srgb_to_linear(g / 255), _srgb_to_linear(b / 255)
    )


def to_oklab(hex_color):
    return rgb_to_oklab(*hex_to_rgb(hex_color))


def oklab_mean(colors):
    colors = list(colors)
    n = len(colors)
    return Oklab(
        sum(c.l for c in colors) / n,
        sum(c.a for c in colors) / n,
        sum(c.b for c in colors) / n,
    )


def oklab_distance_sq(p, q):
    dl = p.l - q.l
    da = p.a - q.a
    db = p.b - q.b
    return dl * dl + da * da + db * db


# === OKHSL ===


def _compute_max_saturation(a, b):
    """Max saturation S = C/L for a normalized hue direction (a, b)."""
    # Max saturation is reached when one of r, g or b goes below zero
    if -1.88170328 * a - 0.80936493 * b > 1:
        # Red component
        k0, k1, k2, k3, k4 = 1.19086277, 1.76576728, 0.59662641, 0.75515197, 0.56771245
        wl, wm, ws = 4.0767416621, -3.3077115913, 0.2309699292
    elif 1.81444104 * a - 1.19445276 * b > 1:
        # Green component
        k0, k1, k2, k3, k4 = 0.73956515, -0.45954404, 0.08285427, 0.12541070, 0.14503204
        wl, wm, ws = -1.2684380046, 2.6097574011, -0.3413193965
    else:
        # Blue component
        k0, k1, k2, k3, k4 = 1.35733652, -0.00915799, -1.15130210, -0.50559606, 0.00692167
        wl, wm, ws = -0.0041960863, -0.7034186147, 1.7076147010

    # Polynomial approximation, then one Halley step
    S = k0 + k1 * a + k2 * b + k3 * a * a + k4 * a * b

    k_l = 0.3963377774 * a + 0.2158037573 * b
    k_m = -0.1055613458 * a - 0.0638541728 * b
    k_s = -0.0894841775 * a - 1.2914855480 * b

    l_ = 1 + S * k_l
    m_ = 1 + S * k_m
    s_ = 1 + S * k_s

    l, m, s = l_**3, m_**3, s_**3

    l_dS = 3 * k_l * l_ * l_
    m_dS = 3 * k_m * m_ * m_
    s_dS = 3 * k_s * s_ * s_

    l_dS2 = 6 * k_l * k_l * l_
    m_dS2 = 6 * k_m * k_m * m_
    s_dS2 = 6 * k_s * k_s * s_

    f = wl * l + wm * m + ws * s
    f1 = wl * l_dS + wm * m_dS + ws * s_dS
    f2 = wl * l_dS2 + wm * m_dS2 + ws * s_dS2

    return S - f * f1 / (f1 * f1 - 0.5 * f * f2)


def _find_cusp(a, b):
    S_cusp = _compute_max_saturation(a, b)
    rgb_at_max = oklab_to_linear_srgb(1, S_cusp * a, S_cusp * b)
    L_cusp = _cbrt(1 / max(rgb_at_max))
    return L_cusp, L_cusp * S_cusp


def _find_gamut_intersection(a, b, L1, C1, L0, cusp):
    """Where the line from (L0, 0) to (L1, C1) leaves the sRGB gamut."""
    L_cusp, C_cusp = cusp

    if ((L1 - L0) * C_cusp - (L_cusp - L0) * C1) <= 0:
        # Lower half
        return C_cusp * L0 / (C1 * L_cusp + C_cusp * (L0 - L1))

    # Upper half: triangle estimate refined by one Halley step per channel
    t = C_cusp * (L0 - 1) / (C1 * (L_cusp - 1) + C_cusp * (L0 - L1))

    dL = L1 - L0
    dC = C1

    k_l = 0.3963377774 * a + 0.2158037573 * b
    k_m = -0.1055613458 * a - 0.0638541728 * b
    k_s = -0.0894841775 * a - 1.2914855480 * b

    l_dt = dL + dC * k_l
    m_dt = dL + dC * k_m
    s_dt = dL + dC * k_s

    L = L0 * (1 - t) + t * L1
    C = t * C1

    l_ = L + C * k_l
    m_ = L + C * k_m
    s_ = L + C * k_s

    l, m, s = l_**3, m_**3, s_**3

    ldt = 3 * l_dt * l_ * l_
    mdt = 3 * m_dt * m_ * m_
    sdt = 3 * s_dt * s_ * s_

    ldt2 = 6 * l_dt * l_dt * l_
    mdt2 = 6 * m_dt * m_dt * m_
    sdt2 = 6 * s_dt * s_dt * s_

    def halley(w_l, w_m, w_s):
        f = w_l * l + w_m * m + w_s * s - 1
        f1 = w_l * ldt + w_m * mdt + w_s * sdt
        f2 = w_l * ldt2 + w_m * mdt2 + w_s * sdt2
        u = f1 / (f1 * f1 - 0.5 * f * f2)
        return -f * u if u >= 0 else _FLT_MAX

    t_r = halley(4.0767416621, -3.3077115913, 0.2309699292)
    t_g = halley(-1.2684380046, 2.6097574011, -0.3413193965)
    t_b = halley(-0.0041960863, -0.7034186147, 1.7076147010)

    return t + min(t_r, t_g, t_b)


def _toe(x):
    k_1, k_2 = 0.206, 0.03
    k_3 = (1 + k_1) / (1 + k_2)
    return 0.5 * (k_3 * x - k_1 + math.sqrt((k_3 * x - k_1) ** 2 + 4 * k_2 * k_3 * x))


def _toe_inv(x):
    k_1, k_2 = 0.206, 0.03
    k_3 = (1 + k_1) / (1 + k_2)
    return (x * x + k_1 * x) / (k_3 * (x + k_2))


def _get_st_mid(a_, b_):
    S = 0.11516993 + 1 / (
        7.44778970
        + 4.15901240 * b_
        + a_
        * (
            -2.19557347
            + 1.75198401 * b_
            + a_
            * (
                -2.13704948
                - 10.02301043 * b_
                + a_ * (-4.24894561 + 5.38770819 * b_ + 4.69891013 * a_)
            )
        )
    )
    T = 0.11239642 + 1 / (
        1.61320320
        - 0.68124379 * b_
        + a_
        * (
            0.40370612
            + 0.90148123 * b_
            + a_
            * (
                -0.27087943
                + 0.61223990 * b_
                + a_ * (0.00299215 - 0.45399568 * b_ - 0.14661872 * a_)
            )
        )
    )
    return S, T


def _get_cs(L, a_, b_):
    """Chroma anchors (C_0, C_mid, C_max) used to map chroma onto saturation."""
    cusp = _find_cusp(a_, b_)

    C_max = _find_gamut_intersection(a_, b_, L, 1, L, cusp)
    S_max, T_max = cusp[1] / cusp[0], cusp[1] / (1 - cusp[0])

    # Scale factor to compensate for the curved part of the gamut shape
    k = C_max / min(L * S_max, (1 - L) * T_max)

    S_mid, T_mid = _get_st_mid(a_, b_)
    C_a = L * S_mid
    C_b = (1 - L) * T_mid
    C_mid = 0.9 * k * math.sqrt(math.sqrt(1 / (1 / C_a**4 + 1 / C_b**4)))

    C_a = L * 0.4
    C_b = (1 - L) * 0.8
    C_0 = math.sqrt(1 / (1 / C_a**2 + 1 / C_b**2))

    return C_0, C_mid, C_max


def srgb_to_okhsl(r, g, b):
    """OKHSL from 0-1 sRGB channels; hue in degrees."""
    lab = linear_srgb_to_oklab(_srgb_to_linear(r), _srgb_to_linear(g), _srgb_to_linear(b))
    L = lab.l
    C = math.hypot(lab.a, lab.b)
    l = clamp01(_toe(max(L, 0.0)))

    if C < ACHROMATIC_CHROMA or L <= UNIT_EPSILON or L >= 1 - UNIT_EPSILON:
        return Okhsl(0.0, 0.0, l)

    a_, b_ = lab.a / C, lab.b / C
    h = math.degrees(math.atan2(lab.b, lab.a)) % 360.0

    C_0, C_mid, C_max = _get_cs(L, a_, b_)

    mid, mid_inv = 0.8, 1.25
    if C < C_mid:
        k_1 = mid * C_0
        k_2 = 1 - k_1 / C_mid
        t = C / (k_1 + k_2 * C)
        s = t * mid
    else:
        k_0 = C_mid
        k_1 = (1 - mid) * C_mid * C_mid * mid_inv * mid_inv / C_0
        k_2 = 1 - k_1 / (C_max - C_mid)
        t = (C - k_0) / (k_1 + k_2 * (C - k_0))
        s = mid + (1 - mid) * t

    return Okhsl(h, clamp01(s), l)


def okhsl_to_srgb(color):
    """0-1 sRGB channels (unclamped) for an Okhsl triple."""
    h, s, l = color
    if l >= 1:
        return (1.0, 1.0, 1.0)
    if l <= 0:
        return (0.0, 0.0, 0.0)

    L = _toe_inv(l)
    C = 0.0
    if s > 0:
        a_ = math.cos(math.radians(h))
        b_ = math.sin(math.radians(h))
        C_0, C_mid, C_max = _get_cs(L, a_, b_)

        mid, mid_inv = 0.8, 1.25
        if s < mid:
            t = mid_inv * s
            k_1 = mid * C_0
            k_2 = 1 - k_1 / C_mid
            C = t * k_1 / (1 - k_2 * t)
        else:
            t = (s - mid) / (1 - mid)
            k_0 = C_mid
            k_1 = (1 - mid) * C_mid * C_mid * mid_inv * mid_inv / C_0
            k_2 = 1 - k_1 / (C_max - C_mid)
            C = k_0 + t * k_1 / (1 - k_2 * t)
    else:
        a_ = b_ = 0.0

    rgb = oklab_to_linear_srgb(L, C * a_, C * b_)
    return tuple(_linear_to_srgb(c) for c in rgb)


def _float_rgb_to_hex(r, g, b):
    r, g, b = (max(0, min(255, round(c * 255))) for c in (r, g, b))
    return rgb_to_hex(r, g, b)


def to_okhsl(hex_color):
    r, g, b = hex_to_rgb(hex_color)
    return srgb_to_okhsl(r / 255, g / 255, b / 255)


def okhsl_to_hex(color):
    return _float_rgb_to_hex(*okhsl_to_srgb(color))


def oklab_to_okhsl(lab):
    r, g, b = (clamp01(_linear_to_srgb(c)) for c in oklab_to_linear_srgb(*lab))
    return srgb_to_okhsl(r, g, b)


def okhsl_luminance(color):
    """WCAG luminance of an Okhsl color before 8-bit rounding."""
    r, g, b = (clamp01(c) * 255 for c in okhsl_to_srgb(color))
    return relative_luminance(r, g, b)


# === DISTANCES ===


def hue_delta(h1, h2):
    """Shortest circular distance between two hues, in [0, 180]."""
    a = (h1 or 0.0) % 360
    b = (h2 or 0.0) % 360
    d = abs(a - b) % 360
    return 360 - d if d > 180 else d


def okhsl_diff(a, b):
    return ColorDiff(abs(a.l - b.l), abs(a.s - b.s), hue_delta(a.h, b.h))


def diff(hex_a, hex_b):
    """Absolute OKHSL component deltas between two hex colors"""
    return okhsl_diff(to_okhsl(hex_a), to_okhsl(hex_b))


# === ADJUSTMENTS ===


def set_lightness(hex_color, target_lightness):
    """Set a color to a specific OKHSL lightness, keeping hue and saturation"""
    h, s, _ = to_okhsl(hex_color)
    return okhsl_to_hex(Okhsl(h, s, clamp01(target_lightness)))


def scale_lightness(hex_color, factor):
    h, s, l = to_okhsl(hex_color)
    return okhsl_to_hex(Okhsl(h, s, clamp01(l * factor)))


def scale_saturation(hex_color, factor):
    h, s, l = to_okhsl(hex_color)
    return okhsl_to_hex(Okhsl(h, clamp01(s * factor), l))
