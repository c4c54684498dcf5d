def render_kitty_theme(scheme, name=None):
    """Render a ColorScheme as kitty.conf color settings.

    Args:
        scheme: The ColorScheme
        name: Optional theme name emitted as a comment header

    Returns:
        Theme text ending with a newline
    """
    semantic = scheme.semantic_colors
    bg = semantic.background.terminal_color
    fg = semantic.neutral.terminal_color

    lines = []
    if name:
        lines.append(f"# {name}")

    lines.append(f"background {bg}")
    lines.append(f"foreground {fg}")
    lines.append(f"cursor {fg}")
    lines.append(f"selection_background {fg}")
    lines.append(f"selection_foreground {bg}")

    for i, color in enumerate(scheme.terminal):
        lines.append(f"color{i} {color}")

    return "\n".join(lines) + "\n"
