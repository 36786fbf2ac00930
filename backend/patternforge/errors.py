"""Engine error taxonomy.

Every error is raised synchronously where it is detected and never retried
inside the engine. Validation runs before any random draw, so a failed call
leaves later calls reproducible.
"""

from __future__ import annotations


class PatternError(ValueError):
    """Base class for all pattern engine errors."""


class InvalidContainerError(PatternError):
    """Container size missing, malformed, or too small to hold a tile."""


class InvalidConfigError(PatternError):
    """Grid size, padding, spacing or empty-space value out of range."""


class InvalidPaletteError(PatternError):
    """Shape palette or color palette is empty."""


class UnknownShapeError(PatternError):
    """A shape ID is absent from the shape catalog."""


class UnknownPatternTypeError(PatternError):
    """The requested layout strategy is not registered."""


class EmptyInputError(PatternError):
    """The random source was asked to choose from an empty sequence."""


class InvalidCanvasSizeError(PatternError):
    """The serializer received a malformed canvas size."""


class GenerationSupersededError(PatternError):
    """An in-flight generation was replaced by a newer submission."""
