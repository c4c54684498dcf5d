import numpy as np

from ..color import is_hex_color, okhsl_diff, to_okhsl
from ..errors import InvalidColorError, PaletteTooSmallError
from ..models import Weights
from .reference import ROLE_COUNT, get_reference_roles

DEFAULT_WEIGHTS = Weights(wL=1, wS=1, wH=1)


def resolve_weights(overrides):
    """Fill missing weight components with the defaults"""
    if overrides is None:
        return DEFAULT_WEIGHTS
    return Weights(
        wL=DEFAULT_WEIGHTS.wL if overrides.wL is None else overrides.wL,
        wS=DEFAULT_WEIGHTS.wS if overrides.wS is None else overrides.wS,
        wH=DEFAULT_WEIGHTS.wH if overrides.wH is None else overrides.wH,
    )


def lhs_cost(d, weights=DEFAULT_WEIGHTS, normalize_hue=True):
    """Weighted lightness/saturation/hue cost of a ColorDiff.

    The hue term is divided by 180 so it shares the [0, 1] range of the
    other two components unless normalize_hue is False.
    """
    h_term = d.dH / 180 if normalize_hue else d.dH
    return weights.wL * d.dL + weights.wS * d.dS + weights.wH * h_term


def validate_palette(hexes, required=ROLE_COUNT):
    """Check an extracted palette is long enough and fully hex."""
    if hexes is None or len(hexes) < required:
        raise PaletteTooSmallError(0 if hexes is None else len(hexes), required)
    for i, value in enumerate(hexes):
        if not is_hex_color(value):
            raise InvalidColorError(value, index=i)


def build_cost_matrix(hexes, mode="dark", normalize_hue=True):
    """Cost of giving each reference role (rows) each input color (columns).

    Returns:
        ndarray of shape (17, len(hexes))
    """
    validate_palette(hexes)
    roles = get_reference_roles(mode)
    refs = [to_okhsl(role.hex) for role in roles]
    inputs = [to_okhsl(h) for h in hexes]

    cost = np.zeros((len(roles), len(inputs)), dtype=float)
    for r, role in enumerate(roles):
        weights = resolve_weights(role.weights)
        for c, color in enumerate(inputs):
            cost[r, c] = lhs_cost(okhsl_diff(refs[r], color), weights, normalize_hue)
    return cost
