import logging

from ..assignment.reference import BACKGROUND_INDEX, ROLE_COUNT
from ..color import normalize_hex, set_lightness, to_okhsl
from ..config import resolve_options
from ..errors import ValidationError
from ..models import BackgroundGroup, ContrastPalette
from .equalize import equalize_lightness
from .ramp import ContrastRamp, background_lightness, contrast_ratios

logger = logging.getLogger(__name__)

# Anchor indices feeding each named ramp. Neutral blends the background
# with the three grays; each hue blends its normal and bright anchors.
GROUP_KEYS = (
    ("neutral", (0, 7, 8, 15)),
    ("red", (1, 9)),
    ("green", (2, 10)),
    ("yellow", (3, 11)),
    ("blue", (4, 12)),
    ("magenta", (5, 13)),
    ("cyan", (6, 14)),
    ("orange", (16,)),
)

GROUP_NAMES = tuple(name for name, _ in GROUP_KEYS)


def build_background(anchor, options):
    """Background swatch: the raw anchor's hue and saturation at the target lightness"""
    l0 = to_okhsl(anchor).l
    target = background_lightness(l0, options.mode, options.background_lightness_multiplier)
    logger.debug("Background lightness %.4f -> %.4f (%s)", l0, target, options.mode)
    return set_lightness(anchor, target)


def build_contrast_palette(anchors, options=None):
    """Generate the background and the eight named contrast ramps.

    Args:
        anchors: 17 hex colors ordered by reference role
        options: GenerateOptions (or a mapping of option values)

    Returns:
        ContrastPalette
    """
    options = resolve_options(options)
    if len(anchors) != ROLE_COUNT:
        raise ValidationError(f"Expected {ROLE_COUNT} ordered anchors, got {len(anchors)}")
    anchors = [normalize_hex(a) for a in anchors]

    equalized = equalize_lightness(anchors, BACKGROUND_INDEX)
    background = build_background(anchors[BACKGROUND_INDEX], options)
    ratios = contrast_ratios(options)

    groups = tuple(
        ContrastRamp(name, [equalized[i] for i in indices]).steps(background, ratios)
        for name, indices in GROUP_KEYS
    )
    return ContrastPalette(background=BackgroundGroup(background=background), groups=groups)
