"""Exception types raised while inspecting styled text."""

from __future__ import annotations


class InspectionError(Exception):
    """Base class for every inspection failure."""


class AttributeNotFound(InspectionError):
    """A direct, single-value navigation did not reach a value."""

    def __init__(self, label: str, parent: str):
        super().__init__(f"{parent} does not have '{label}' attribute")
        self.label = label
        self.parent = parent


class ModifierNotFound(InspectionError):
    """No chunk of a text carries the requested modifier."""

    def __init__(self, parent: str, modifier: str):
        super().__init__(f"{parent} does not have '{modifier}' modifier")
        self.parent = parent
        self.modifier = modifier


class TextAttributeError(InspectionError):
    """The attribute is not consistent across the inspected text range."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class SnapshotError(ValueError):
    pass
