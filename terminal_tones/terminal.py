from .color import scale_lightness, scale_saturation
from .config import resolve_options

# Ramp step used for the normal and bright ANSI hues
DIM_STEP = 1
BRIGHT_STEP = 5
NEUTRAL_WHITE_STEP = 2

HUE_ORDER = ("red", "green", "yellow", "blue", "magenta", "cyan")

# Slots scaled by foreground_lightness_multiplier: white and the bright row
# except bright black
FOREGROUND_INDICES = (7, 9, 10, 11, 12, 13, 14, 15)

BRIGHT_INDEX_BY_NAME = {
    "red": 9,
    "green": 10,
    "yellow": 11,
    "blue": 12,
    "magenta": 13,
    "cyan": 14,
}


def build_terminal_colors(palette, options=None):
    """Pick the 16 ANSI colors out of a ContrastPalette.

    Slot 0 is the background, 1-6 the low-contrast hues, 7 and 8 the neutral
    grays, 9-14 the high-contrast hues and 15 the brightest neutral.

    Returns:
        tuple of 16 hex strings
    """
    options = resolve_options(options)
    neutral = palette.group("neutral").values

    terminal = [palette.background.background]
    terminal += [palette.group(name).values[DIM_STEP].value for name in HUE_ORDER]
    terminal.append(neutral[NEUTRAL_WHITE_STEP].value)
    terminal.append(neutral[DIM_STEP].value)
    terminal += [palette.group(name).values[BRIGHT_STEP].value for name in HUE_ORDER]
    terminal.append(neutral[BRIGHT_STEP].value)

    return adjust_terminal_colors(terminal, options)


def adjust_terminal_colors(terminal, options):
    """Apply the foreground lightness and saturation multipliers"""
    terminal = list(terminal)

    if options.foreground_lightness_multiplier != 1:
        for i in FOREGROUND_INDICES:
            terminal[i] = scale_lightness(terminal[i], options.foreground_lightness_multiplier)

    if options.saturation_multiplier != 1:
        terminal = [scale_saturation(c, options.saturation_multiplier) for c in terminal]

    return tuple(terminal)
