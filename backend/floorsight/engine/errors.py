"""Export error hierarchy.

Only structural problems with the input surface as exceptions. Per-node
geometry problems never raise; the node simply produces nothing.
"""

from __future__ import annotations


class ExportError(Exception):
    """Base class. ``message`` is safe to show to the user."""

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class SceneFormatError(ExportError):
    """The scene document could not be read."""


class InvalidSelectionError(ExportError):
    """The root node is not a container that can hold floors."""


class NoFloorsError(ExportError):
    """The root container has no floor containers inside it."""


class CategoryLookupError(ExportError):
    """A marker's template could not be resolved to a category."""
