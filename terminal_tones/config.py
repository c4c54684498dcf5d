import dataclasses
import json
from dataclasses import dataclass

from .errors import ValidationError

MODES = ("dark", "light")
CONTRAST_SCALES = ("linear", "geometric")

# camelCase keys accepted from JSON option files
_KEY_ALIASES = {
    "backgroundLightnessMultiplier": "background_lightness_multiplier",
    "lightnessMultiplier": "background_lightness_multiplier",
    "foregroundLightnessMultiplier": "foreground_lightness_multiplier",
    "saturationMultiplier": "saturation_multiplier",
    "contrastMultiplier": "contrast_multiplier",
    "contrastLift": "contrast_lift",
    "contrastScale": "contrast_scale",
    "contrastMin": "contrast_min",
    "contrastMax": "contrast_max",
    "contrastGamma": "contrast_gamma",
    "normalizeHue": "normalize_hue",
}


@dataclass(frozen=True)
class GenerateOptions:
    """Knobs for scheme generation. Every multiplier defaults to a no-op."""

    mode: str = "dark"
    background_lightness_multiplier: float = 1.0
    foreground_lightness_multiplier: float = 1.0
    saturation_multiplier: float = 1.0
    contrast_multiplier: float = 1.0
    contrast_lift: float = 0.0
    contrast_scale: str = "linear"
    contrast_min: float = 1.0
    contrast_max: float = 9.0
    contrast_gamma: float = 0.7
    normalize_hue: bool = True

    def __post_init__(self):
        if self.mode not in MODES:
            raise ValidationError(f"mode must be one of {MODES}, got {self.mode!r}")
        if self.contrast_scale not in CONTRAST_SCALES:
            raise ValidationError(
                f"contrast_scale must be one of {CONTRAST_SCALES}, got {self.contrast_scale!r}"
            )
        if self.contrast_min <= 0:
            raise ValidationError(f"contrast_min must be positive, got {self.contrast_min}")
        if self.contrast_max < self.contrast_min:
            raise ValidationError(
                f"contrast_max ({self.contrast_max}) is below contrast_min ({self.contrast_min})"
            )
        if self.contrast_gamma <= 0:
            raise ValidationError(f"contrast_gamma must be positive, got {self.contrast_gamma}")

    def replace(self, **changes):
        return dataclasses.replace(self, **changes)

    @classmethod
    def from_dict(cls, data):
        """Build options from snake_case or camelCase keys."""
        fields = {f.name for f in dataclasses.fields(cls)}
        kwargs = {}
        for key, value in data.items():
            name = _KEY_ALIASES.get(key, key)
            if name not in fields:
                raise ValidationError(f"Unknown option: {key}")
            kwargs[name] = value
        return cls(**kwargs)


def load_options(json_path):
    """Load GenerateOptions from a JSON file.

    Keys starting with "_" are treated as comments and skipped.
    """
    with open(json_path) as f:
        data = json.load(f)

    if not isinstance(data, dict):
        raise ValidationError(f"{json_path}: options must be a JSON object")

    return GenerateOptions.from_dict({k: v for k, v in data.items() if not k.startswith("_")})


def resolve_options(options):
    """Accept None, a mapping, or GenerateOptions"""
    if options is None:
        return GenerateOptions()
    if isinstance(options, GenerateOptions):
        return options
    return GenerateOptions.from_dict(options)
