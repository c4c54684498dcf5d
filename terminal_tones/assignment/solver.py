import logging

import numpy as np
from scipy.optimize import linear_sum_assignment

from ..color import normalize_hex, okhsl_diff, to_okhsl
from ..errors import ValidationError
from ..models import AssignmentDetail, AssignmentResult
from .cost_matrix import build_cost_matrix, lhs_cost, resolve_weights
from .reference import get_reference_roles

logger = logging.getLogger(__name__)


def solve(cost):
    """Minimum-cost matching of every row to a distinct column.

    Args:
        cost: 2D array-like with no more rows than columns

    Returns:
        tuple: (mapping list where mapping[row] = column, total cost)
    """
    cost = np.asarray(cost, dtype=float)
    if cost.ndim != 2:
        raise ValidationError(f"Cost matrix must be 2D, got shape {cost.shape}")
    rows, cols = cost.shape
    if rows > cols:
        raise ValidationError(f"Cannot assign {rows} rows to only {cols} columns")

    row_ind, col_ind = linear_sum_assignment(cost)
    mapping = [int(c) for _, c in sorted(zip(row_ind, col_ind))]
    total = float(cost[row_ind, col_ind].sum())
    return mapping, total


def assign_terminal_colors(hexes, mode="dark", normalize_hue=True):
    """Assign extracted colors to the 17 reference roles.

    Args:
        hexes: Frequency-ordered extracted hex colors (at least 17)
        mode: "dark" or "light" reference table
        normalize_hue: Scale the hue term to [0, 1]

    Returns:
        AssignmentResult with mapping[role] = index into hexes
    """
    cost = build_cost_matrix(hexes, mode, normalize_hue)
    mapping, total = solve(cost)

    roles = get_reference_roles(mode)
    details = []
    for r, c in enumerate(mapping):
        d = okhsl_diff(to_okhsl(roles[r].hex), to_okhsl(hexes[c]))
        details.append(
            AssignmentDetail(
                terminal_index=r,
                input_index=c,
                dL=d.dL,
                dS=d.dS,
                dH=d.dH,
                cost=lhs_cost(d, resolve_weights(roles[r].weights), normalize_hue),
            )
        )

    logger.debug("Assigned %d roles from %d colors, cost %.4f", len(mapping), len(hexes), total)
    return AssignmentResult(mapping=mapping, total_cost=total, details=details)


def order_anchors(hexes, mapping):
    """Reorder the extracted palette so index i is reference role i"""
    return [normalize_hex(hexes[i]) for i in mapping]
