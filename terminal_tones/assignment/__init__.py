from .cost_matrix import DEFAULT_WEIGHTS, build_cost_matrix, lhs_cost, validate_palette
from .reference import ROLE_COUNT, ROLE_NAMES, get_reference_roles
from .solver import assign_terminal_colors, order_anchors, solve

__all__ = [
    "DEFAULT_WEIGHTS",
    "ROLE_COUNT",
    "ROLE_NAMES",
    "assign_terminal_colors",
    "build_cost_matrix",
    "get_reference_roles",
    "lhs_cost",
    "order_anchors",
    "solve",
    "validate_palette",
]
