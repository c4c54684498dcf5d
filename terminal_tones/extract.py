import logging

import numpy as np
from PIL import Image
from sklearn.cluster import KMeans

from .color import rgb_to_hex
from .weights import fuzzy_palette_weights_oklab

logger = logging.getLogger(__name__)

# 16 colors plus 6 spares, so every reference role has a choice
DEFAULT_COLOR_COUNT = 22


def load_image(image):
    """Open a path (or accept a PIL image) as RGB"""
    if isinstance(image, Image.Image):
        return image.convert("RGB")
    with Image.open(image) as img:
        return img.convert("RGB")


def extract_palette(image, n_colors=DEFAULT_COLOR_COUNT, sample_size=300):
    """Extract dominant colors using k-means clustering.

    Args:
        image: Path to the source image or a PIL image
        n_colors: Number of clusters (capped at the number of distinct pixels)
        sample_size: Longest side of the thumbnail that gets clustered

    Returns:
        list of hex colors, most dominant first
    """
    img = load_image(image)
    img.thumbnail((sample_size, sample_size))
    pixels = np.array(img).reshape(-1, 3)

    n_clusters = min(n_colors, len(np.unique(pixels, axis=0)))
    kmeans = KMeans(n_clusters=n_clusters, random_state=42, n_init=10)
    kmeans.fit(pixels)

    colors = []
    for center in kmeans.cluster_centers_:
        r, g, b = (int(max(0, min(255, round(c)))) for c in center)
        colors.append(rgb_to_hex(r, g, b))

    # Order by soft pixel share rather than raw cluster size
    weights = fuzzy_palette_weights_oklab(colors, pixels, ignore_near_white=False)
    order = np.argsort(-weights, kind="stable")

    logger.debug("Extracted %d colors from %dx%d sample", len(colors), *img.size)
    return [colors[i] for i in order]
