from .equalize import equalize_lightness
from .palette import GROUP_KEYS, GROUP_NAMES, build_contrast_palette
from .ramp import CONTRAST_STEPS, ContrastRamp, background_lightness, contrast_ratios

__all__ = [
    "CONTRAST_STEPS",
    "GROUP_KEYS",
    "GROUP_NAMES",
    "ContrastRamp",
    "background_lightness",
    "build_contrast_palette",
    "contrast_ratios",
    "equalize_lightness",
]
