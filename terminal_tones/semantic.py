import logging

from .models import SemanticColor, SemanticColors
from .terminal import BRIGHT_INDEX_BY_NAME

logger = logging.getLogger(__name__)

NEUTRAL_INDEX = 7

# Accent role -> (default group, default terminal slot)
DEFAULT_ACCENT_BINDINGS = (
    ("primary", "blue", 12),
    ("secondary", "cyan", 14),
    ("tertiary", "magenta", 13),
    ("quaternary", "yellow", 11),
)


def _bind(palette, terminal, group_name, index):
    return SemanticColor(terminal_color=terminal[index], color=palette.group(group_name))


def compute_semantic_colors(palette, terminal, accents=None):
    """Bind UI roles to terminal slots and contrast ramps.

    Args:
        palette: ContrastPalette
        terminal: 16 terminal hex colors
        accents: Optional zero-argument callable returning Accents. Any error
            it raises keeps the default blue/cyan/magenta/yellow accents.

    Returns:
        SemanticColors
    """
    roles = {
        "background": SemanticColor(terminal_color=terminal[0], color=palette.background),
        "neutral": _bind(palette, terminal, "neutral", NEUTRAL_INDEX),
        "error": _bind(palette, terminal, "red", BRIGHT_INDEX_BY_NAME["red"]),
        "success": _bind(palette, terminal, "green", BRIGHT_INDEX_BY_NAME["green"]),
        "warning": _bind(palette, terminal, "yellow", BRIGHT_INDEX_BY_NAME["yellow"]),
    }
    for role, group_name, index in DEFAULT_ACCENT_BINDINGS:
        roles[role] = _bind(palette, terminal, group_name, index)

    if accents is not None:
        try:
            classified = accents()
            overrides = {}
            for (role, _, default_index), accent in zip(DEFAULT_ACCENT_BINDINGS, classified):
                index = BRIGHT_INDEX_BY_NAME.get(accent.name, default_index)
                overrides[role] = _bind(palette, terminal, accent.name, index)
        except Exception:
            logger.debug("Accent classification failed, keeping default accents", exc_info=True)
        else:
            roles.update(overrides)

    return SemanticColors(**roles)
