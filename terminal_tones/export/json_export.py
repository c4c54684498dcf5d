import json

from ..models import BackgroundGroup


def contrast_entry_to_dict(entry):
    if isinstance(entry, BackgroundGroup):
        return {"background": entry.background}
    return {
        "name": entry.name,
        "values": [
            {"name": step.name, "contrast": step.contrast, "value": step.value}
            for step in entry.values
        ],
    }


def scheme_to_dict(scheme):
    """Plain-data form of a ColorScheme with stable camelCase keys"""
    return {
        "terminal": list(scheme.terminal),
        "contrastColors": [contrast_entry_to_dict(e) for e in scheme.contrast_colors],
        "semanticColors": {
            role: {
                "terminalColor": binding.terminal_color,
                "color": contrast_entry_to_dict(binding.color),
            }
            for role, binding in scheme.semantic_colors._asdict().items()
        },
    }


def export_json(scheme, filepath, source_file=None, mode=None):
    """Export a color scheme as JSON with metadata.

    Args:
        scheme: The ColorScheme
        filepath: Output file path
        source_file: Source image filename for metadata
        mode: "dark" or "light", recorded for theme switchers
    """
    data = scheme_to_dict(scheme)

    data["_note"] = (
        "16 terminal colors (ANSI 0-15), 9-step contrast ramps per group, "
        "and semantic roles bound to both"
    )

    if source_file:
        data["_wallpaper"] = source_file

    if mode:
        data["_mode"] = mode
        data["_gtk_color_scheme"] = "prefer-dark" if mode == "dark" else "prefer-light"

    with open(filepath, "w") as f:
        json.dump(data, f, indent=2)
