"""Terminal color schemes from images.

Extract a palette, assign it to 17 reference roles, build contrast ramps
per hue group, then derive the 16 ANSI colors and semantic UI roles.
"""

from .accents import classify_accents, extract_accents
from .assignment import assign_terminal_colors
from .color import normalize_hex
from .config import GenerateOptions, load_options
from .contrast import build_contrast_palette, equalize_lightness
from .errors import (
    ColorSpaceError,
    GroupLookupError,
    InvalidColorError,
    PaletteTooSmallError,
    TerminalTonesError,
    ValidationError,
)
from .extract import extract_palette
from .models import Accent, Accents, ColorScheme, ContrastPalette, SemanticColors
from .pipeline import generate_color_scheme, generate_color_scheme_from_palette
from .semantic import compute_semantic_colors
from .terminal import build_terminal_colors
from .weights import fuzzy_palette_weights_oklab

__version__ = "0.1.0"

__all__ = [
    "Accent",
    "Accents",
    "ColorScheme",
    "ColorSpaceError",
    "ContrastPalette",
    "GenerateOptions",
    "GroupLookupError",
    "InvalidColorError",
    "PaletteTooSmallError",
    "SemanticColors",
    "TerminalTonesError",
    "ValidationError",
    "assign_terminal_colors",
    "build_contrast_palette",
    "build_terminal_colors",
    "classify_accents",
    "compute_semantic_colors",
    "equalize_lightness",
    "extract_accents",
    "extract_palette",
    "fuzzy_palette_weights_oklab",
    "generate_color_scheme",
    "generate_color_scheme_from_palette",
    "load_options",
    "normalize_hex",
]
