"""Error types raised while building toolpaths."""


class GlyphcodeError(ValueError):
    """Base class for all glyphcode errors."""


class InputError(GlyphcodeError):
    """Character has no glyph in the active table."""

    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Character not available in font: {char!r}")


class GeometricImpossibility(GlyphcodeError):
    """Requested construction has no solution."""


class ZeroLengthError(GeometricImpossibility):
    pass


class PointInsideCircleError(GeometricImpossibility):
    pass


class NestedCirclesError(GeometricImpossibility):
    pass


class OverlappingCirclesError(GeometricImpossibility):
    pass


class ConfigurationError(GlyphcodeError):
    """Invalid primitive arguments or session usage."""


class SessionStateError(ConfigurationError):
    pass
