import numpy as np

from .color import to_oklab

# Linear sRGB -> LMS and LMS' -> OKLab
_M1 = np.array(
    [
        [0.4122214708, 0.5363325363, 0.0514459929],
        [0.2119034982, 0.6806995451, 0.1073969566],
        [0.0883024619, 0.2817188376, 0.6299787005],
    ]
)
_M2 = np.array(
    [
        [0.2104542553, 0.7936177850, -0.0040720468],
        [1.9779984951, -2.4285922050, 0.4505937099],
        [0.0259040371, 0.7827717662, -0.8086757660],
    ]
)


def rgb_array_to_oklab(rgb):
    """Convert an (N, 3) array of 0-255 sRGB to OKLab."""
    c = np.asarray(rgb, dtype=np.float64).reshape(-1, 3) / 255.0
    linear = np.where(c <= 0.04045, c / 12.92, ((c + 0.055) / 1.055) ** 2.4)
    return np.cbrt(linear @ _M1.T) @ _M2.T


def fuzzy_palette_weights_oklab(
    palette_hex,
    pixels,
    sigma=0.06,
    alpha_threshold=0,
    ignore_near_white=True,
    white_threshold=250,
):
    """Soft share of sampled pixels belonging to each palette color.

    Each pixel contributes a Gaussian kernel of its OKLab distance to every
    palette color.

    Args:
        palette_hex: Palette hex colors
        pixels: (N, 3) RGB or (N, 4) RGBA samples, 0-255
        sigma: Kernel width in OKLab units
        alpha_threshold: Skip RGBA pixels with alpha below this
        ignore_near_white: Skip pixels with every channel above white_threshold
        white_threshold: Per-channel near-white cutoff

    Returns:
        ndarray of weights summing to 1 (all zeros if nothing contributed)
    """
    palette = np.array([tuple(to_oklab(h)) for h in palette_hex], dtype=np.float64).reshape(-1, 3)
    px = np.asarray(pixels, dtype=np.float64)
    if px.size == 0 or len(palette) == 0:
        return np.zeros(len(palette))
    px = px.reshape(len(px), -1)

    keep = np.ones(len(px), dtype=bool)
    if px.shape[1] >= 4:
        keep &= px[:, 3] >= alpha_threshold
    if ignore_near_white:
        keep &= ~np.all(px[:, :3] > white_threshold, axis=1)

    lab = rgb_array_to_oklab(px[keep, :3])
    d2 = ((lab[:, None, :] - palette[None, :, :]) ** 2).sum(axis=2)
    sums = np.exp(-d2 / (2 * sigma * sigma)).sum(axis=0)

    total = sums.sum()
    if not np.isfinite(total) or total <= 0:
        return np.zeros(len(palette))
    return sums / total
