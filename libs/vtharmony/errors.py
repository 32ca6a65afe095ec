"""Error types raised by the harmony utilities and generators.

All of them subclass ``ValueError`` so callers that already treat bad input
as a validation error keep working.
"""

from __future__ import annotations


class TheoryError(ValueError):
    """Base class for music-theory input errors."""


class InvalidNoteName(TheoryError):
    """A pitch-class name could not be parsed."""

    def __init__(self, name: object):
        self.name = name
        super().__init__(f"Invalid note name: {name!r}")


class InvalidDegree(TheoryError):
    """A scale degree fell outside 1-7."""

    def __init__(self, degree: object):
        self.degree = degree
        super().__init__(f"Scale degree must be an integer in [1, 7], got {degree!r}")


class UnknownTemplate(TheoryError):
    """A progression template or genre variant name is not in the catalog."""

    def __init__(self, name: object, kind: str = "progression template"):
        self.name = name
        self.kind = kind
        super().__init__(f"Unknown {kind}: {name!r}")


class UnknownScale(TheoryError):
    """A scale name has no interval pattern."""

    def __init__(self, scale: object):
        self.scale = scale
        super().__init__(f"Unknown scale: {scale!r}")


__all__ = [
    "TheoryError",
    "InvalidNoteName",
    "InvalidDegree",
    "UnknownTemplate",
    "UnknownScale",
]
