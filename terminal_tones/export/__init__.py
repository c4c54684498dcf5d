from .json_export import export_json, scheme_to_dict
from .kitty import render_kitty_theme

__all__ = ["export_json", "render_kitty_theme", "scheme_to_dict"]
