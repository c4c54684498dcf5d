import functools
import logging

from .accents import rank_accents
from .assignment import ROLE_COUNT, assign_terminal_colors, order_anchors, validate_palette
from .config import resolve_options
from .contrast import build_contrast_palette
from .extract import extract_palette
from .models import ColorScheme
from .semantic import compute_semantic_colors
from .terminal import build_terminal_colors

logger = logging.getLogger(__name__)


def generate_color_scheme_from_palette(palette, options=None):
    """Generate a full color scheme from an already extracted palette.

    Args:
        palette: Hex colors, most dominant first (at least 17)
        options: GenerateOptions or a mapping of option values

    Returns:
        ColorScheme(terminal, contrast_colors, semantic_colors)
    """
    options = resolve_options(options)
    validate_palette(palette, ROLE_COUNT)

    assignment = assign_terminal_colors(palette, options.mode, options.normalize_hue)
    anchors = order_anchors(palette, assignment.mapping)

    contrast_palette = build_contrast_palette(anchors, options)
    terminal = build_terminal_colors(contrast_palette, options)
    semantic_colors = compute_semantic_colors(
        contrast_palette,
        terminal,
        accents=functools.partial(rank_accents, palette, anchors, contrast_palette),
    )

    return ColorScheme(
        terminal=terminal,
        contrast_colors=contrast_palette.contrast_colors,
        semantic_colors=semantic_colors,
    )


def generate_color_scheme(image, options=None, extractor=None):
    """Extract an image's palette and generate its color scheme.

    Args:
        image: Whatever the extractor accepts (a path or PIL image by default)
        options: GenerateOptions or a mapping of option values
        extractor: Callable image -> list of hex colors, most dominant first

    Returns:
        ColorScheme
    """
    extractor = extractor or extract_palette
    palette = extractor(image)
    logger.debug("Extracted %d colors", len(palette))
    return generate_color_scheme_from_palette(palette, options)
