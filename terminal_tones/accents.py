"""
Accent classification.

Every color of the extracted palette votes for the nearest of four candidate
hue groups (yellow, blue, magenta, cyan). Votes decay with palette rank and
with OKLab distance to the group centroid, so a group wins by being both
dominant in the image and close to the image's own colors.
"""

import logging
import math

from .assignment import assign_terminal_colors, order_anchors
from .color import normalize_hex, oklab_distance_sq, oklab_mean, to_oklab
from .config import resolve_options
from .contrast import build_contrast_palette
from .errors import GroupLookupError
from .extract import extract_palette
from .models import Accent, Accents

logger = logging.getLogger(__name__)

# Candidate groups and their (normal, bright) anchor indices
ACCENT_GROUPS = (
    ("yellow", (3, 11)),
    ("blue", (4, 12)),
    ("magenta", (5, 13)),
    ("cyan", (6, 14)),
)

ACCENT_NAMES = tuple(name for name, _ in ACCENT_GROUPS)

RANK_DECAY = 4  # tau
KERNEL_SIGMA = 0.06  # OKLab units

# Ramp step used as the accent swatch
REPRESENTATIVE_STEP = 5


def group_centroids(anchors):
    """OKLab midpoint of each candidate group's two anchors"""
    return [
        oklab_mean([to_oklab(anchors[i]) for i in indices])
        for _, indices in ACCENT_GROUPS
    ]


def score_accent_groups(palette, anchors, tau=RANK_DECAY, sigma=KERNEL_SIGMA):
    """Soft-vote score for each candidate group.

    Args:
        palette: Full extracted palette, most dominant first
        anchors: 17 role-ordered anchors
        tau: Rank decay constant
        sigma: Gaussian kernel width in OKLab units

    Returns:
        list of scores, one per ACCENT_GROUPS entry
    """
    centroids = group_centroids(anchors)
    two_s2 = 2 * sigma * sigma
    scores = [0.0] * len(centroids)

    for rank, hex_color in enumerate(palette):
        p = to_oklab(hex_color)
        distances = [oklab_distance_sq(p, c) for c in centroids]
        best = min(range(len(distances)), key=distances.__getitem__)
        scores[best] += math.exp(-rank / tau) * math.exp(-distances[best] / two_s2)

    return scores


def rank_accent_groups(scores):
    """Group indices by descending score; ties keep group order"""
    return sorted(range(len(scores)), key=lambda i: -scores[i])


def representative_hex(contrast_palette, anchors, name):
    """Mid-high contrast swatch of a group, or its first raw anchor."""
    try:
        values = contrast_palette.group(name).values
    except GroupLookupError:
        values = ()

    if values:
        return values[min(REPRESENTATIVE_STEP, len(values) - 1)].value

    indices = dict(ACCENT_GROUPS)[name]
    return anchors[indices[0]]


def rank_accents(palette, anchors, contrast_palette):
    """Rank the four accent groups given an already built contrast palette.

    Args:
        palette: Full extracted palette, most dominant first
        anchors: 17 role-ordered anchors
        contrast_palette: ContrastPalette built from those anchors

    Returns:
        Accents with primary, secondary, tertiary and quaternary in score
        order; all four names are distinct.
    """
    scores = score_accent_groups([normalize_hex(h) for h in palette], anchors)
    order = rank_accent_groups(scores)
    logger.debug(
        "Accent scores: %s",
        ", ".join(f"{ACCENT_NAMES[i]}={scores[i]:.4f}" for i in order),
    )

    return Accents(
        *(
            Accent(name=ACCENT_NAMES[i], hex=representative_hex(contrast_palette, anchors, ACCENT_NAMES[i]))
            for i in order
        )
    )


def classify_accents(palette, options=None):
    """Assign roles, build the contrast palette, then rank the accent groups."""
    options = resolve_options(options)
    assignment = assign_terminal_colors(palette, options.mode, options.normalize_hue)
    anchors = order_anchors(palette, assignment.mapping)
    return rank_accents(palette, anchors, build_contrast_palette(anchors, options))


def extract_accents(image, options=None, extractor=None):
    """Extract a palette from an image and classify its accents.

    Args:
        image: Whatever the extractor accepts (a path or PIL image by default)
        options: GenerateOptions or a mapping
        extractor: Callable image -> list of hex colors

    Returns:
        Accents
    """
    extractor = extractor or extract_palette
    return classify_accents(extractor(image), options)
