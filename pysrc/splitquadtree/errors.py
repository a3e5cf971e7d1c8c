# errors.py
"""Exceptions raised by splitquadtree."""

from __future__ import annotations

from typing import Any


class QuadTreeError(Exception):
    """Base class for all splitquadtree errors."""


class InvalidConfigError(QuadTreeError, ValueError):
    """Raised when a QuadTreeConfig has min_per_quad >= max_per_cell."""


class DuplicateIdError(QuadTreeError, KeyError):
    """
    Raised when inserting under an identifier that is already registered.

    The tree is left unchanged.
    """

    def __init__(self, id_: Any):
        super().__init__(id_)
        self.id_ = id_

    def __str__(self) -> str:
        return f"Id already exists: {self.id_!r}"


class OutOfBoundsError(QuadTreeError, ValueError):
    """Raised when a point falls outside the tree boundary."""
