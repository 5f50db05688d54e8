from __future__ import annotations


class GeometryError(ValueError):
    """Raised for impossible geometry operations."""


class DegenerateOffsetError(GeometryError):
    """Raised when offsetting a polygon collapses it."""

    def __init__(self, code: str, message: str) -> None:
        super().__init__(message)
        self.code = code
