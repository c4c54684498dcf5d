from ..models import ReferenceRole, Weights

ROLE_NAMES = (
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright-black",
    "bright-red",
    "bright-green",
    "bright-yellow",
    "bright-blue",
    "bright-magenta",
    "bright-cyan",
    "bright-white",
    "orange",
)

ROLE_COUNT = len(ROLE_NAMES)

BACKGROUND_INDEX = 0

# Achromatic roles weigh lightness heavily and ignore hue
_BLACK_WEIGHTS = Weights(wL=8, wS=0, wH=0)
_GRAY_WEIGHTS = Weights(wL=5, wS=2, wH=0)
_BRIGHT_WHITE_WEIGHTS = Weights(wL=8, wS=5, wH=0)
_PRIMARY_HUE_WEIGHTS = Weights(wL=1, wS=3, wH=5)
_ORANGE_WEIGHTS = Weights(wL=5, wS=3, wH=5)

# VGA-style reference palette, one entry per role
_DARK_HEXES = (
    "#000000",  # 0 black
    "#800000",  # 1 red
    "#008000",  # 2 green
    "#808000",  # 3 yellow
    "#000080",  # 4 blue
    "#800080",  # 5 magenta
    "#008080",  # 6 cyan
    "#c0c0c0",  # 7 white (light gray)
    "#808080",  # 8 bright black (dark gray)
    "#ff0000",  # 9 bright red
    "#00ff00",  # 10 bright green
    "#ffff00",  # 11 bright yellow
    "#0000ff",  # 12 bright blue
    "#ff00ff",  # 13 bright magenta
    "#00ffff",  # 14 bright cyan
    "#ffffff",  # 15 bright white
    "#ffa500",  # 16 orange
)

_WEIGHT_OVERRIDES = {
    0: _BLACK_WEIGHTS,
    1: _PRIMARY_HUE_WEIGHTS,
    2: _PRIMARY_HUE_WEIGHTS,
    7: _GRAY_WEIGHTS,
    8: _GRAY_WEIGHTS,
    9: _PRIMARY_HUE_WEIGHTS,
    10: _PRIMARY_HUE_WEIGHTS,
    15: _BRIGHT_WHITE_WEIGHTS,
    16: _ORANGE_WEIGHTS,
}

# Light mode puts the light color in the background slot and swaps the grays
_LIGHT_SWAPS = {0: 15, 15: 0, 7: 8, 8: 7}


def _build_table(hexes):
    return tuple(
        ReferenceRole(name=name, hex=hexes[i], weights=_WEIGHT_OVERRIDES.get(i))
        for i, name in enumerate(ROLE_NAMES)
    )


DARK_REFERENCE = _build_table(_DARK_HEXES)
LIGHT_REFERENCE = _build_table(
    tuple(_DARK_HEXES[_LIGHT_SWAPS.get(i, i)] for i in range(ROLE_COUNT))
)


def get_reference_roles(mode):
    """Reference role table for "dark" or "light" mode"""
    return LIGHT_REFERENCE if mode == "light" else DARK_REFERENCE
