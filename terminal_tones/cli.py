import argparse
import json
import logging
import os
import sys

from .color import hex_contrast
from .config import CONTRAST_SCALES, MODES, GenerateOptions, load_options
from .errors import TerminalTonesError
from .export import export_json, render_kitty_theme, scheme_to_dict
from .pipeline import generate_color_scheme

ANSI_NAMES = [
    "black",
    "red",
    "green",
    "yellow",
    "blue",
    "magenta",
    "cyan",
    "white",
    "bright_black",
    "bright_red",
    "bright_green",
    "bright_yellow",
    "bright_blue",
    "bright_magenta",
    "bright_cyan",
    "bright_white",
]

# CLI flag -> GenerateOptions field
_OPTION_FLAGS = {
    "background_lightness": "background_lightness_multiplier",
    "foreground_lightness": "foreground_lightness_multiplier",
    "saturation": "saturation_multiplier",
    "contrast_multiplier": "contrast_multiplier",
    "contrast_lift": "contrast_lift",
    "contrast_scale": "contrast_scale",
}


def main(argv=None):
    parser = argparse.ArgumentParser(
        prog="terminal-tones",
        description="Generate terminal color schemes from images",
    )
    parser.add_argument("image_path", help="Path to the source image")
    parser.add_argument(
        "--mode",
        choices=MODES,
        default=None,
        help="Dark or light scheme (default: dark, or the value in --options)",
    )
    parser.add_argument(
        "--options",
        metavar="JSON",
        help="Load generation options from a JSON file; flags override it",
    )
    parser.add_argument("--background-lightness", type=float, help="Background lightness multiplier")
    parser.add_argument("--foreground-lightness", type=float, help="Foreground lightness multiplier")
    parser.add_argument("--saturation", type=float, help="Saturation multiplier for all 16 colors")
    parser.add_argument("--contrast-multiplier", type=float, help="Scale every contrast ratio")
    parser.add_argument("--contrast-lift", type=float, help="Add to every contrast ratio")
    parser.add_argument("--contrast-scale", choices=CONTRAST_SCALES, help="Ratio spacing")
    parser.add_argument(
        "--format",
        choices=("kitty", "json"),
        default="kitty",
        help="Export format (default: kitty)",
    )
    parser.add_argument(
        "--output", "-o",
        metavar="FILE",
        default=None,
        help="Write the export here instead of printing it",
    )
    parser.add_argument("--name", help="Theme name (default: derived from filename)")
    parser.add_argument("--verbose", "-v", action="store_true", help="Debug logging")

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    try:
        options = _build_options(args)
        return _run(args, options)
    except (TerminalTonesError, OSError) as e:
        print(f"Error: {e}", file=sys.stderr)
        return 1


def _build_options(args):
    """Options file first, then explicit flags on top"""
    options = load_options(args.options) if args.options else GenerateOptions()

    changes = {}
    if args.mode is not None:
        changes["mode"] = args.mode
    for flag, field in _OPTION_FLAGS.items():
        value = getattr(args, flag)
        if value is not None:
            changes[field] = value

    return options.replace(**changes) if changes else options


def _run(args, options):
    image_path = args.image_path
    theme_name = args.name or os.path.splitext(os.path.basename(image_path))[0]

    print(f"Analyzing: {image_path}", file=sys.stderr)

    scheme = generate_color_scheme(image_path, options)
    print_scheme(scheme, options.mode)

    if args.format == "json":
        if not args.output:
            print(json.dumps(scheme_to_dict(scheme), indent=2))
            return 0
        export_json(scheme, args.output, source_file=os.path.basename(image_path), mode=options.mode)
    else:
        theme = render_kitty_theme(scheme, name=theme_name)
        if not args.output:
            print(theme, end="")
            return 0
        with open(args.output, "w") as f:
            f.write(theme)

    print(f"Exported: {args.output}", file=sys.stderr)
    return 0


def print_scheme(scheme, mode):
    """Print terminal colors and semantic roles with their contrast"""
    bg = scheme.terminal[0]
    out = sys.stderr

    print("\n" + "=" * 60, file=out)
    print(f"TERMINAL COLOR SCHEME ({mode.upper()})", file=out)
    print("=" * 60, file=out)

    print("\nTERMINAL:", file=out)
    for i, (name, color) in enumerate(zip(ANSI_NAMES, scheme.terminal)):
        print(f"  {i:2} {name:16} {color}  (contrast: {hex_contrast(color, bg):.1f}:1)", file=out)

    print("\nSEMANTIC:", file=out)
    for role, binding in scheme.semantic_colors._asdict().items():
        group = getattr(binding.color, "name", "background")
        print(f"  {role:16} {binding.terminal_color}  ({group})", file=out)


if __name__ == "__main__":
    sys.exit(main())
