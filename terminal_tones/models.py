from collections import namedtuple

from .errors import GroupLookupError

# === COLOR SPACES ===
Okhsl = namedtuple("Okhsl", ["h", "s", "l"])
Oklab = namedtuple("Oklab", ["l", "a", "b"])
ColorDiff = namedtuple("ColorDiff", ["dL", "dS", "dH"])

# Per-role cost weights for lightness, saturation and hue
Weights = namedtuple("Weights", ["wL", "wS", "wH"])

# === ASSIGNMENT ===
ReferenceRole = namedtuple("ReferenceRole", ["name", "hex", "weights"])
AssignmentDetail = namedtuple(
    "AssignmentDetail",
    ["terminal_index", "input_index", "dL", "dS", "dH", "cost"],
)
AssignmentResult = namedtuple("AssignmentResult", ["mapping", "total_cost", "details"])

# === CONTRAST ===
ContrastStep = namedtuple("ContrastStep", ["name", "contrast", "value"])
ContrastGroup = namedtuple("ContrastGroup", ["name", "values"])
BackgroundGroup = namedtuple("BackgroundGroup", ["background"])


class ContrastPalette(namedtuple("ContrastPalette", ["background", "groups"])):
    """Background entry plus the named contrast ramps, kept apart by type."""

    __slots__ = ()

    @property
    def contrast_colors(self):
        """Flat export shape: background first, then every named group."""
        return [self.background, *self.groups]

    def group(self, name):
        for group in self.groups:
            if group.name == name:
                return group
        raise GroupLookupError(name)


# === ACCENTS / SEMANTICS ===
Accent = namedtuple("Accent", ["name", "hex"])
Accents = namedtuple("Accents", ["primary", "secondary", "tertiary", "quaternary"])

SemanticColor = namedtuple("SemanticColor", ["terminal_color", "color"])
SemanticColors = namedtuple(
    "SemanticColors",
    [
        "background",
        "neutral",
        "error",
        "success",
        "warning",
        "primary",
        "secondary",
        "tertiary",
        "quaternary",
    ],
)

ColorScheme = namedtuple("ColorScheme", ["terminal", "contrast_colors", "semantic_colors"])
