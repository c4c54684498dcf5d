class TerminalTonesError(Exception):
    """Base class for every error raised by terminal_tones."""


class ValidationError(TerminalTonesError, ValueError):
    """Input palette or options are malformed."""


class InvalidColorError(ValidationError):
    """A string is not a #rgb / #rrggbb hex color."""

    def __init__(self, value, index=None):
        self.value = value
        self.index = index
        if index is None:
            message = f'Invalid hex color: "{value}"'
        else:
            message = f'Invalid hex at index {index}: "{value}"'
        super().__init__(message)


class PaletteTooSmallError(ValidationError):
    """Fewer extracted colors than there are reference roles."""

    def __init__(self, count, required):
        self.count = count
        self.required = required
        super().__init__(f"Palette too small: got {count}, need >= {required}")


class ColorSpaceError(TerminalTonesError, ArithmeticError):
    """A derived value escaped its color space domain."""


class GroupLookupError(TerminalTonesError, LookupError):
    """A named contrast group is missing from a generated palette."""

    def __init__(self, name):
        self.name = name
        super().__init__(f"Missing contrast group: {name}")
