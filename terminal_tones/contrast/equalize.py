from ..color import set_lightness, to_okhsl


def equalize_lightness(hexes, background_index=0):
    """Put every non-background color at the same OKHSL lightness gap.

    The gap is the average absolute lightness delta from the background
    across all non-background colors. Each color keeps its hue, its
    saturation and its side of the background (lighter-or-equal goes up,
    darker goes down).

    Args:
        hexes: Ordered hex colors
        background_index: Position of the background, left untouched

    Returns:
        list of hex colors, same length and order
    """
    out = list(hexes)
    bg_l = to_okhsl(out[background_index]).l

    indices = [i for i in range(len(out)) if i != background_index]
    if not indices:
        return out

    lightness = {i: to_okhsl(out[i]).l for i in indices}
    target = sum(abs(lightness[i] - bg_l) for i in indices) / len(indices)

    for i in indices:
        sign = 1 if lightness[i] >= bg_l else -1
        out[i] = set_lightness(out[i], bg_l + sign * target)
    return out
